"""Tests for swipe recognition."""

import pytest

from propgallery.core.gesture import GestureRecognizer, GestureState, SwipeDirection


class TestGestureRecognizer:
    """A drag must be mostly horizontal and long enough to count as a swipe."""

    @pytest.fixture
    def recognizer(self):
        return GestureRecognizer()

    def drag(self, recognizer, start, end, steps=4):
        (x0, y0), (x1, y1) = start, end
        recognizer.on_start(x0, y0)
        for step in range(1, steps + 1):
            recognizer.on_move(x0 + (x1 - x0) * step / steps, y0 + (y1 - y0) * step / steps)
        return recognizer.on_end(x1)

    def test_leftward_swipe_means_next(self, recognizer):
        assert self.drag(recognizer, (200, 100), (140, 100)) is SwipeDirection.LEFT

    def test_rightward_swipe_means_previous(self, recognizer):
        assert self.drag(recognizer, (100, 100), (160, 100)) is SwipeDirection.RIGHT

    def test_short_drag_is_not_a_swipe(self, recognizer):
        assert self.drag(recognizer, (200, 100), (170, 100)) is None

    def test_exactly_min_distance_is_not_a_swipe(self, recognizer):
        assert self.drag(recognizer, (200, 100), (150, 100)) is None

    def test_vertical_drag_is_ignored(self, recognizer):
        assert self.drag(recognizer, (100, 100), (100, 160)) is None

    def test_mostly_vertical_diagonal_is_ignored(self, recognizer):
        assert self.drag(recognizer, (100, 100), (160, 200)) is None

    def test_tap_without_move_is_not_a_swipe(self, recognizer):
        recognizer.on_start(100, 100)
        assert recognizer.on_end(300) is None

    def test_dragging_requires_threshold(self, recognizer):
        recognizer.on_start(100, 100)
        recognizer.on_move(108, 100)
        assert not recognizer.dragging
        recognizer.on_move(115, 100)
        assert recognizer.dragging

    def test_state_reset_after_end(self, recognizer):
        self.drag(recognizer, (200, 100), (100, 100))
        assert recognizer.state == GestureState()
        assert not recognizer.active

    def test_end_without_start_is_noop(self, recognizer):
        assert recognizer.on_end(50) is None

    def test_move_without_start_is_ignored(self, recognizer):
        recognizer.on_move(500, 0)
        assert not recognizer.dragging

    def test_cancel_discards_gesture(self, recognizer):
        recognizer.on_start(200, 100)
        recognizer.on_move(100, 100)
        recognizer.cancel()
        assert recognizer.on_end(100) is None

    def test_custom_thresholds(self):
        recognizer = GestureRecognizer(min_swipe_distance=100, drag_threshold=20)
        assert self.drag(recognizer, (300, 0), (220, 0)) is None
        assert self.drag(recognizer, (300, 0), (180, 0)) is SwipeDirection.LEFT

    def test_invalid_thresholds_rejected(self):
        with pytest.raises(ValueError):
            GestureRecognizer(min_swipe_distance=0)
        with pytest.raises(ValueError):
            GestureRecognizer(drag_threshold=-1)
