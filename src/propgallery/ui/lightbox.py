"""Full-screen lightbox: modal slideshow with play/pause and thumbnails."""

from collections.abc import Callable, Sequence
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget
from typing_extensions import override

from ..core.config_manager import DEFAULT_LIGHTBOX_INTERVAL_MS, SlideshowOptions
from ..core.images import ImageRecord
from ..core.session import GallerySession, GalleryVariant
from ..utils.logging_config import log_function, logger
from ..utils.timers import TimerFactory
from .pixmaps import PixmapCache
from .slide_view import SlideView
from .styles import LIGHTBOX_STYLE, SPACING_LG, SPACING_MD
from .thumbnail_strip import ThumbnailStrip

PLAY_ICON = "▶"
PAUSE_ICON = "⏸"


class LightboxDialog(QDialog):
    """Modal presentation of a ``GallerySession``.

    Opening starts a fresh session state at the requested slide; closing (close
    button, Escape or the window manager) stops autoplay and unhooks the
    keyboard before the dialog hides.
    """

    def __init__(
        self,
        images: Sequence[ImageRecord],
        *,
        options: Optional[SlideshowOptions] = None,
        thumbnail_size: int = 64,
        timer_factory: Optional[TimerFactory] = None,
        on_close: Optional[Callable[[], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Gallery")
        self.setModal(True)
        self.setStyleSheet(LIGHTBOX_STYLE)
        self.resize(1100, 800)

        self.cache = PixmapCache(thumbnail_size)
        self.session = GallerySession(
            images,
            variant=GalleryVariant.MODAL,
            options=options or SlideshowOptions(slide_interval_ms=DEFAULT_LIGHTBOX_INTERVAL_MS),
            timer_factory=timer_factory,
            on_close=on_close,
            parent=self,
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(SPACING_LG, SPACING_LG, SPACING_LG, SPACING_LG)
        layout.setSpacing(SPACING_MD)
        layout.addLayout(self._create_header())

        self.slide_view = SlideView(self.session, self.cache, alt_prefix="Image", show_counter=False)
        layout.addWidget(self.slide_view, 1)

        self.thumbnail_strip = ThumbnailStrip(self.cache)
        layout.addWidget(self.thumbnail_strip, 0, Qt.AlignmentFlag.AlignHCenter)
        self.thumbnail_strip.set_images(self.session.images)
        _ = self.thumbnail_strip.thumbnail_clicked.connect(self.session.go_to)

        _ = self.session.index_changed.connect(self._update_header)
        _ = self.session.playing_changed.connect(self._update_header)
        _ = self.session.images_changed.connect(self._on_images_changed)
        _ = self.session.closed.connect(self._on_session_closed)
        self.session.bind_thumbnails(self.thumbnail_strip)
        self.session.bind_keyboard(self)
        self._update_header()

    def _create_header(self) -> QHBoxLayout:
        header = QHBoxLayout()
        header.setSpacing(SPACING_MD)

        self.btn_play = QPushButton(PLAY_ICON)
        self.btn_play.setObjectName("lightboxButton")
        self.btn_play.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        _ = self.btn_play.clicked.connect(self.session.toggle_autoplay)
        header.addWidget(self.btn_play)

        self.counter_label = QLabel("")
        self.counter_label.setObjectName("lightboxCounter")
        header.addWidget(self.counter_label)

        header.addStretch()

        self.btn_close = QPushButton("✕")
        self.btn_close.setObjectName("lightboxButton")
        self.btn_close.setAccessibleName("Close gallery")
        self.btn_close.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        _ = self.btn_close.clicked.connect(self.session.close)
        header.addWidget(self.btn_close)
        return header

    def _update_header(self, *_args: object) -> None:
        playing = self.session.is_playing
        self.btn_play.setText(PAUSE_ICON if playing else PLAY_ICON)
        self.btn_play.setAccessibleName("Pause slideshow" if playing else "Play slideshow")
        self.btn_play.setVisible(self.session.can_navigate)
        self.counter_label.setText(self.session.position_label("of"))

    def _on_images_changed(self) -> None:
        self.thumbnail_strip.set_images(self.session.images)
        self._update_header()

    def set_images(self, images: Sequence[ImageRecord]) -> None:
        self.cache.clear()
        self.session.set_images(images)

    @log_function
    def open_at(self, index: int = 0) -> None:
        """Show the lightbox starting at slide ``index``."""
        self.session.open(index)
        self._update_header()
        self.show()
        self.raise_()
        self.activateWindow()

    def _on_session_closed(self) -> None:
        self.thumbnail_strip.stop_animation()
        if self.isVisible():
            super().reject()

    @override
    def reject(self) -> None:
        if self.session.is_open:
            # The closed signal hides the dialog
            self.session.close()
        else:
            super().reject()

    @override
    def closeEvent(self, event: QCloseEvent) -> None:
        self.session.close()
        super().closeEvent(event)

    @log_function
    def dispose(self) -> None:
        self.thumbnail_strip.stop_animation()
        self.session.teardown()
        logger.debug("Lightbox disposed")
