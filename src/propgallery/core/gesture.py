"""Swipe recognition for touch and mouse drags."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_MIN_SWIPE_DISTANCE = 50.0
DEFAULT_DRAG_THRESHOLD = 10.0


class SwipeDirection(Enum):
    """Finger/pointer travel direction of a completed swipe.

    LEFT advances to the next slide, RIGHT returns to the previous one.
    """

    LEFT = "left"
    RIGHT = "right"


@dataclass
class GestureState:
    """Transient per-gesture pointer state."""
    start_x: Optional[float] = None
    start_y: Optional[float] = None
    dragging: bool = False

    @property
    def active(self) -> bool:
        return self.start_x is not None

    def reset(self) -> None:
        self.start_x = None
        self.start_y = None
        self.dragging = False


class GestureRecognizer:
    """Turns pointer down/move/up sequences into at most one swipe.

    The same algorithm serves touch points and mouse positions. A gesture only
    becomes a drag once horizontal travel dominates vertical travel and exceeds
    ``drag_threshold``, so vertical page scrolls never change slides.
    """

    def __init__(
        self,
        min_swipe_distance: float = DEFAULT_MIN_SWIPE_DISTANCE,
        drag_threshold: float = DEFAULT_DRAG_THRESHOLD,
    ) -> None:
        if min_swipe_distance <= 0 or drag_threshold < 0:
            raise ValueError("Swipe distance must be positive and drag threshold non-negative")
        self.min_swipe_distance: float = min_swipe_distance
        self.drag_threshold: float = drag_threshold
        self.state: GestureState = GestureState()

    @property
    def active(self) -> bool:
        return self.state.active

    @property
    def dragging(self) -> bool:
        return self.state.dragging

    def on_start(self, x: float, y: float) -> None:
        self.state.start_x = x
        self.state.start_y = y
        self.state.dragging = False

    def on_move(self, x: float, y: float) -> None:
        if self.state.start_x is None or self.state.start_y is None:
            return

        delta_x = abs(x - self.state.start_x)
        delta_y = abs(y - self.state.start_y)

        if delta_x > delta_y and delta_x > self.drag_threshold:
            self.state.dragging = True

    def on_end(self, x: float) -> Optional[SwipeDirection]:
        """Finish the gesture. State is cleared whatever the outcome."""
        try:
            if not self.state.dragging or self.state.start_x is None:
                return None

            delta_x = x - self.state.start_x
            if abs(delta_x) <= self.min_swipe_distance:
                return None
            return SwipeDirection.RIGHT if delta_x > 0 else SwipeDirection.LEFT
        finally:
            self.state.reset()

    def cancel(self) -> None:
        self.state.reset()
