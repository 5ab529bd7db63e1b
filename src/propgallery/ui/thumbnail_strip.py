"""Horizontally scrolling thumbnail strip kept in step with the current slide."""

from collections.abc import Sequence
from typing import Optional

from PySide6.QtCore import QEasingCurve, QPropertyAnimation, QSize, Qt, Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QPushButton, QScrollArea, QWidget

from ..core.images import ImageRecord, alt_text_for
from ..core.thumbnails import centered_scroll_offset
from .pixmaps import PixmapCache
from .styles import SPACING_LG, SPACING_SM, THUMBNAIL_SCROLL_MS


class ThumbnailStrip(QScrollArea):
    """Row of thumbnail buttons.

    Scrolling only ever moves this strip's own horizontal scrollbar, so the
    surrounding page does not jump when the current slide changes.
    """

    thumbnail_clicked: Signal = Signal(int)  # type: ignore[misc]

    def __init__(self, cache: PixmapCache, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.cache: PixmapCache = cache
        self._buttons: list[QPushButton] = []
        self._current: int = -1
        self._animation: Optional[QPropertyAnimation] = None

        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        self._container = QWidget()
        self._layout = QHBoxLayout(self._container)
        self._layout.setContentsMargins(SPACING_SM, SPACING_SM, SPACING_SM, SPACING_SM)
        self._layout.setSpacing(SPACING_LG)
        self._layout.addStretch()
        self.setWidget(self._container)

        size = cache.thumbnail_size
        self.setFixedHeight(size + 2 * SPACING_SM + 8)

    def set_images(self, images: Sequence[ImageRecord]) -> None:
        self.stop_animation()
        for button in self._buttons:
            self._layout.removeWidget(button)
            button.deleteLater()
        self._buttons = []
        self._current = -1

        size = self.cache.thumbnail_size
        for index, record in enumerate(images):
            button = QPushButton()
            button.setObjectName("thumbnailButton")
            button.setCheckable(True)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            button.setIcon(self.cache.thumbnail(record))
            button.setIconSize(QSize(size, size))
            button.setFixedSize(size + 4, size + 4)
            button.setAccessibleName(alt_text_for(record, index, "Thumbnail"))
            _ = button.clicked.connect(lambda _checked=False, i=index: self.thumbnail_clicked.emit(i))
            self._layout.insertWidget(index, button)
            self._buttons.append(button)

        self.setVisible(len(self._buttons) > 1)

    def thumbnail_count(self) -> int:
        return len(self._buttons)

    def button_at(self, index: int) -> QPushButton:
        return self._buttons[index]

    @property
    def current(self) -> int:
        return self._current

    def set_current(self, index: int) -> None:
        for i, button in enumerate(self._buttons):
            button.setChecked(i == index)
        self._current = index

    def scroll_target(self, index: int) -> int:
        """Scrollbar value that centres thumbnail ``index``."""
        button = self._buttons[index]
        bar = self.horizontalScrollBar()
        return centered_scroll_offset(button.x(), button.width(), self.viewport().width(), bar.maximum())

    def scroll_to_thumbnail(self, index: int, smooth: bool = True) -> None:
        if not 0 <= index < len(self._buttons):
            return
        target = self.scroll_target(index)
        bar = self.horizontalScrollBar()
        self.stop_animation()

        if not smooth or bar.value() == target:
            bar.setValue(target)
            return

        animation = QPropertyAnimation(bar, b"value", self)
        animation.setDuration(THUMBNAIL_SCROLL_MS)
        animation.setEasingCurve(QEasingCurve.Type.OutCubic)
        animation.setStartValue(bar.value())
        animation.setEndValue(target)
        animation.start()
        self._animation = animation

    def stop_animation(self) -> None:
        if self._animation is not None:
            self._animation.stop()
            self._animation = None
