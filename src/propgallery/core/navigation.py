"""Slide navigation business logic - platform agnostic."""

from .errors import OutOfRangeError


def _require_items(length: int) -> None:
    if length <= 0:
        raise ValueError("Cannot navigate an empty collection")


class NavigationController:
    """Resolves slide index changes with wraparound on both ends.

    Every method is a pure function of its arguments. Callers check
    ``length > 0`` before calling ``next``/``previous``.
    """

    def next(self, current: int, length: int) -> int:
        """Index after ``current``; the last slide wraps to the first."""
        _require_items(length)
        return (current + 1) % length

    def previous(self, current: int, length: int) -> int:
        """Index before ``current``; the first slide wraps to the last."""
        _require_items(length)
        return (current - 1 + length) % length

    def go_to(self, index: int, length: int) -> int:
        """Validate a direct jump.

        Raises:
            OutOfRangeError: if ``index`` is not in ``[0, length)``
        """
        if not 0 <= index < length:
            raise OutOfRangeError(index, length)
        return index

    @staticmethod
    def can_navigate(length: int) -> bool:
        """Navigation controls and indicators only exist for two or more slides."""
        return length > 1
