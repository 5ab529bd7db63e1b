"""Shared fixtures and utilities for tests to reduce duplication."""

import io
from pathlib import Path

from PIL import Image

from propgallery.core.images import EncodedPayload, ImageRecord


class SignalCollector:
    """Reusable signal/callback collector for testing."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        """Act as a slot that records its arguments."""
        self.calls.append(args[0] if len(args) == 1 else args)

    @property
    def call_count(self):
        return len(self.calls)

    def clear(self):
        """Clear collected calls."""
        self.calls = []


class _ManualTimer:
    """Repeating timer driven by ``ManualClock.advance``."""

    def __init__(self, clock, callback):
        self._clock = clock
        self._callback = callback
        self.interval_ms = 0
        self.next_fire = None

    def start(self, interval_ms):
        self.interval_ms = interval_ms
        self.next_fire = self._clock.now + interval_ms

    def stop(self):
        self.next_fire = None

    def is_active(self):
        return self.next_fire is not None

    def fire(self):
        if self.next_fire is not None:
            self.next_fire += self.interval_ms
        self._callback()


class ManualClock:
    """Simulated time for autoplay tests.

    ``factory`` has the ``TimerFactory`` signature; every timer it creates is
    kept so tests can count how many are live.
    """

    def __init__(self):
        self.now = 0
        self.timers = []

    def factory(self, callback):
        timer = _ManualTimer(self, callback)
        self.timers.append(timer)
        return timer

    @property
    def active_timers(self):
        return [t for t in self.timers if t.is_active()]

    def advance(self, ms):
        """Move time forward, firing every due timer in order."""
        end = self.now + ms
        while True:
            due = [t for t in self.active_timers if t.next_fire <= end]
            if not due:
                break
            timer = min(due, key=lambda t: t.next_fire)
            self.now = timer.next_fire
            timer.fire()
        self.now = end


def make_png_bytes(size=(40, 30), color='blue', image_format='PNG'):
    """Encode a solid-colour image in memory."""
    img = Image.new('RGB', size, color=color)
    out = io.BytesIO()
    img.save(out, image_format)
    return out.getvalue()


def make_records(count, prefix='img'):
    """Build ``count`` valid records with captions ``Room 1..count``."""
    colors = ['blue', 'green', 'red', 'yellow', 'purple', 'orange', 'gray', 'white']
    return [
        ImageRecord(
            id=f"{prefix}{i}",
            payload=EncodedPayload(make_png_bytes(color=colors[i % len(colors)]), 'image/png'),
            caption=f"Room {i + 1}",
            order=i,
            filename=f"{prefix}{i}.png",
        )
        for i in range(count)
    ]


def create_test_image(path, size=(100, 100), mode='RGB', color='blue'):
    """Create a test image on disk.

    Args:
        path: Path to save the image
        size: Tuple of (width, height)
        mode: PIL image mode (RGB, RGBA, L, P)
        color: Color for RGB mode

    Returns:
        str: Path to the created image
    """
    path = Path(path)

    if mode == 'RGB':
        img = Image.new(mode, size, color=color)
    elif mode == 'RGBA':
        img = Image.new(mode, size, color=(0, 0, 0, 0))
    elif mode == 'L':
        img = Image.new(mode, size, color=128)
    elif mode == 'P':
        img = Image.new(mode, size)
        img.putpalette([i//3 for i in range(768)])
    else:
        img = Image.new(mode, size)

    format_map = {
        '.png': 'PNG',
        '.gif': 'GIF',
        '.bmp': 'BMP',
        '.tiff': 'TIFF',
        '.tif': 'TIFF',
        '.webp': 'WEBP',
    }
    img.save(path, format_map.get(path.suffix.lower(), 'JPEG'))
    return str(path)


class FakeStrip:
    """Thumbnail strip stand-in that records the calls made on it."""

    def __init__(self, count):
        self.count = count
        self.current = None
        self.scrolls = []

    def thumbnail_count(self):
        return self.count

    def set_current(self, index):
        self.current = index

    def scroll_to_thumbnail(self, index, smooth=True):
        self.scrolls.append((index, smooth))
