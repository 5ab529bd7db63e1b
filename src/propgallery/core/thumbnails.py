"""Keeps the thumbnail strip's visible window aligned with the current slide."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ThumbnailStripProtocol(Protocol):
    """Interface of a horizontally scrollable strip of thumbnails."""

    def thumbnail_count(self) -> int:
        ...

    def set_current(self, index: int) -> None:
        ...

    def scroll_to_thumbnail(self, index: int, smooth: bool = True) -> None:
        ...


def centered_scroll_offset(item_start: int, item_extent: int, viewport_extent: int, scroll_max: int) -> int:
    """Scroll position that centres an item in the viewport, clamped to the scroll range.

    Only the strip's own scroll offset is computed; the page never moves.
    """
    if scroll_max <= 0:
        return 0
    target = item_start + item_extent // 2 - viewport_extent // 2
    return max(0, min(target, scroll_max))


class ThumbnailSynchronizer:
    """Highlights and scrolls the thumbnail for the current index into view."""

    def __init__(self, strip: Optional[ThumbnailStripProtocol] = None, smooth: bool = True) -> None:
        self._strip: Optional[ThumbnailStripProtocol] = strip
        self.smooth: bool = smooth

    @property
    def bound(self) -> bool:
        return self._strip is not None

    def bind(self, strip: ThumbnailStripProtocol) -> None:
        self._strip = strip

    def unbind(self) -> None:
        self._strip = None

    def sync(self, index: int) -> bool:
        """Returns True if a strip was scrolled; a missing strip is a silent no-op."""
        strip = self._strip
        if strip is None:
            return False
        count = strip.thumbnail_count()
        if count <= 1 or not 0 <= index < count:
            return False
        strip.set_current(index)
        strip.scroll_to_thumbnail(index, self.smooth)
        return True
