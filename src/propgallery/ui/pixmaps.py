"""QPixmap conversion for image records, with placeholder substitution."""

from typing import Optional

from PySide6.QtGui import QPixmap

from ..core.images import ImageRecord, make_thumbnail_png, placeholder_png, record_bytes
from ..utils.logging_config import logger

PLACEHOLDER_SIZE = (640, 420)


def pixmap_from_bytes(data: Optional[bytes]) -> QPixmap:
    pixmap = QPixmap()
    if data:
        _ = pixmap.loadFromData(data)
    return pixmap


def placeholder_pixmap(width: int, height: int) -> QPixmap:
    return pixmap_from_bytes(placeholder_png(width, height))


class PixmapCache:
    """Decodes each record once per size; broken images become placeholders."""

    def __init__(self, thumbnail_size: int = 64) -> None:
        self.thumbnail_size: int = thumbnail_size
        self._full: dict[str, QPixmap] = {}
        self._thumbnails: dict[str, QPixmap] = {}

    def full(self, record: ImageRecord) -> QPixmap:
        cached = self._full.get(record.id)
        if cached is not None:
            return cached

        pixmap = pixmap_from_bytes(record_bytes(record))
        if pixmap.isNull():
            logger.warning(f"Showing placeholder for image {record.id}")
            pixmap = placeholder_pixmap(*PLACEHOLDER_SIZE)
        self._full[record.id] = pixmap
        return pixmap

    def thumbnail(self, record: ImageRecord) -> QPixmap:
        cached = self._thumbnails.get(record.id)
        if cached is not None:
            return cached

        pixmap = pixmap_from_bytes(make_thumbnail_png(record, self.thumbnail_size))
        if pixmap.isNull():
            pixmap = placeholder_pixmap(self.thumbnail_size, self.thumbnail_size)
        self._thumbnails[record.id] = pixmap
        return pixmap

    def clear(self) -> None:
        self._full.clear()
        self._thumbnails.clear()
