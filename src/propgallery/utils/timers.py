"""Repeating timer abstraction used by the autoplay scheduler.

Production code runs on ``QTimer``; tests inject a manual clock so simulated
time can be advanced deterministically.
"""

from collections.abc import Callable
from typing import Optional, Protocol, runtime_checkable

from PySide6.QtCore import QObject, QTimer


@runtime_checkable
class RepeatingTimer(Protocol):
    """Interface of a cancellable, repeating deferred callback."""

    def start(self, interval_ms: int) -> None:
        ...

    def stop(self) -> None:
        ...

    def is_active(self) -> bool:
        ...


TimerFactory = Callable[[Callable[[], None]], RepeatingTimer]


class QtRepeatingTimer:
    """``RepeatingTimer`` backed by a non-single-shot ``QTimer``.

    Give it a ``parent`` so the ``QTimer`` is destroyed with the widget tree
    that owns the gallery; a deleted timer reports itself inactive.
    """

    def __init__(self, callback: Callable[[], None], parent: Optional[QObject] = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setSingleShot(False)
        _ = self._timer.timeout.connect(callback)

    def start(self, interval_ms: int) -> None:
        self._timer.start(interval_ms)

    def stop(self) -> None:
        try:
            self._timer.stop()
        except RuntimeError:
            # Underlying QTimer already deleted with its parent
            pass

    def is_active(self) -> bool:
        try:
            return self._timer.isActive()
        except RuntimeError:
            return False


def qt_timer_factory(parent: Optional[QObject] = None) -> TimerFactory:
    """Factory of ``QtRepeatingTimer``s owned by ``parent``."""

    def create(callback: Callable[[], None]) -> RepeatingTimer:
        return QtRepeatingTimer(callback, parent)

    return create
