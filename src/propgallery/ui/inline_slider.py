"""Inline property-listing slider: always open, thumbnails, focus-scoped keys."""

from collections.abc import Callable, Sequence
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QHideEvent, QShowEvent
from PySide6.QtWidgets import QVBoxLayout, QWidget
from typing_extensions import override

from ..core.config_manager import SlideshowOptions
from ..core.images import ImageRecord
from ..core.session import GallerySession, GalleryVariant
from ..utils.logging_config import log_function
from ..utils.timers import TimerFactory
from .pixmaps import PixmapCache
from .slide_view import SlideView
from .styles import SLIDER_STYLE, SPACING_MD
from .thumbnail_strip import ThumbnailStrip


class InlineSlider(QWidget):
    def __init__(
        self,
        images: Sequence[ImageRecord],
        *,
        options: Optional[SlideshowOptions] = None,
        thumbnail_size: int = 64,
        timer_factory: Optional[TimerFactory] = None,
        on_index_change: Optional[Callable[[int], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setStyleSheet(SLIDER_STYLE)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.cache = PixmapCache(thumbnail_size)
        self.session = GallerySession(
            images,
            variant=GalleryVariant.INLINE,
            options=options or SlideshowOptions(auto_slide=False),
            timer_factory=timer_factory,
            on_index_change=on_index_change,
            parent=self,
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING_MD)

        self.slide_view = SlideView(self.session, self.cache, alt_prefix="Property image", counter_separator="/")
        layout.addWidget(self.slide_view, 1)

        self.thumbnail_strip = ThumbnailStrip(self.cache)
        layout.addWidget(self.thumbnail_strip)
        self.thumbnail_strip.set_images(self.session.images)
        _ = self.thumbnail_strip.thumbnail_clicked.connect(self.session.go_to)

        _ = self.session.images_changed.connect(self._on_images_changed)
        self.session.bind_thumbnails(self.thumbnail_strip)
        self.session.bind_keyboard(self)

    def set_images(self, images: Sequence[ImageRecord]) -> None:
        self.cache.clear()
        self.session.set_images(images)

    def _on_images_changed(self) -> None:
        self.thumbnail_strip.set_images(self.session.images)
        if self.session.images:
            self.thumbnail_strip.set_current(self.session.current_index)

    @log_function
    def dispose(self) -> None:
        """Unmount: stop autoplay and unhook keys before the widget goes away."""
        self.thumbnail_strip.stop_animation()
        self.session.teardown()

    @override
    def closeEvent(self, event: QCloseEvent) -> None:
        self.dispose()
        super().closeEvent(event)

    @override
    def hideEvent(self, event: QHideEvent) -> None:
        self.session.suspend()
        super().hideEvent(event)

    @override
    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.session.resume()
