"""Event gallery page section: a grid of tiles that opens the lightbox."""

from collections.abc import Sequence
from typing import Optional

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QGridLayout, QLabel, QPushButton, QVBoxLayout, QWidget
from typing_extensions import override

from ..core.config_manager import SlideshowOptions
from ..core.images import ImageRecord, alt_text_for
from ..utils.logging_config import log_function
from ..utils.timers import TimerFactory
from .lightbox import LightboxDialog
from .pixmaps import PixmapCache
from .styles import GRID_STYLE, SPACING_LG, SPACING_MD

GRID_COLUMNS = 4
TILE_SIZE = 180


class EventGallery(QWidget):
    def __init__(
        self,
        images: Sequence[ImageRecord],
        *,
        options: Optional[SlideshowOptions] = None,
        thumbnail_size: int = 64,
        timer_factory: Optional[TimerFactory] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setStyleSheet(GRID_STYLE)
        self.images: tuple[ImageRecord, ...] = tuple(images)
        self.tile_cache = PixmapCache(TILE_SIZE)
        self.tiles: list[QPushButton] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(SPACING_LG, SPACING_LG, SPACING_LG, SPACING_LG)
        layout.setSpacing(SPACING_MD)

        title = QLabel("Event Gallery")
        title.setObjectName("galleryTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.subtitle = QLabel(f"Browse through {len(self.images)} images from this title issuing event")
        self.subtitle.setObjectName("gallerySubtitle")
        self.subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.subtitle)

        self.btn_start = QPushButton("▶  Start Slideshow")
        self.btn_start.setObjectName("startSlideshowButton")
        _ = self.btn_start.clicked.connect(lambda: self.open_slideshow(0))
        self.btn_start.setEnabled(bool(self.images))
        layout.addWidget(self.btn_start, 0, Qt.AlignmentFlag.AlignHCenter)

        grid = QGridLayout()
        grid.setSpacing(SPACING_MD)
        for index, record in enumerate(self.images):
            tile = QPushButton()
            tile.setObjectName("gridTile")
            tile.setIcon(self.tile_cache.thumbnail(record))
            tile.setIconSize(QSize(TILE_SIZE, TILE_SIZE))
            tile.setAccessibleName(alt_text_for(record, index, "Title issuing image"))
            if record.caption:
                tile.setToolTip(record.caption)
            _ = tile.clicked.connect(lambda _checked=False, i=index: self.open_slideshow(i))
            grid.addWidget(tile, index // GRID_COLUMNS, index % GRID_COLUMNS)
            self.tiles.append(tile)
        layout.addLayout(grid)
        layout.addStretch()

        self.lightbox = LightboxDialog(
            self.images,
            options=options,
            thumbnail_size=thumbnail_size,
            timer_factory=timer_factory,
            parent=self,
        )

    def open_slideshow(self, index: int) -> None:
        self.lightbox.open_at(index)

    @log_function
    def dispose(self) -> None:
        self.lightbox.dispose()

    @override
    def closeEvent(self, event: QCloseEvent) -> None:
        self.dispose()
        super().closeEvent(event)
