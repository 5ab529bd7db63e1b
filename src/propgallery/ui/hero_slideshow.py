"""Autoplaying hero banner with arrows and slide indicators."""

from collections.abc import Sequence
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QHideEvent, QShowEvent
from PySide6.QtWidgets import QVBoxLayout, QWidget
from typing_extensions import override

from ..core.config_manager import DEFAULT_HERO_INTERVAL_MS, SlideshowOptions
from ..core.images import ImageRecord
from ..core.session import GallerySession, GalleryVariant
from ..utils.logging_config import log_function
from ..utils.timers import TimerFactory
from .indicators import SlideIndicators
from .pixmaps import PixmapCache
from .slide_view import SlideView
from .styles import SLIDER_STYLE, SPACING_SM


class HeroSlideshow(QWidget):
    def __init__(
        self,
        images: Sequence[ImageRecord],
        *,
        options: Optional[SlideshowOptions] = None,
        timer_factory: Optional[TimerFactory] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setStyleSheet(SLIDER_STYLE)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.cache = PixmapCache()
        self.session = GallerySession(
            images,
            variant=GalleryVariant.INLINE,
            options=options or SlideshowOptions(auto_slide=True, slide_interval_ms=DEFAULT_HERO_INTERVAL_MS),
            timer_factory=timer_factory,
            parent=self,
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING_SM)

        self.slide_view = SlideView(self.session, self.cache, alt_prefix="Hero image", show_counter=False)
        layout.addWidget(self.slide_view, 1)

        self.indicators = SlideIndicators()
        layout.addWidget(self.indicators)
        self.indicators.set_count(self.session.length)
        self.indicators.set_current(self.session.current_index)
        _ = self.indicators.indicator_clicked.connect(self.session.go_to)

        _ = self.session.index_changed.connect(self.indicators.set_current)
        _ = self.session.images_changed.connect(self._on_images_changed)
        self.session.bind_keyboard(self)

    def set_images(self, images: Sequence[ImageRecord]) -> None:
        self.cache.clear()
        self.session.set_images(images)

    def _on_images_changed(self) -> None:
        self.indicators.set_count(self.session.length)
        self.indicators.set_current(self.session.current_index)

    @log_function
    def dispose(self) -> None:
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
