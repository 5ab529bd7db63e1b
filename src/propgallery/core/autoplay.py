"""Autoplay scheduling: a Stopped <-> Running state machine over one timer."""

from collections.abc import Callable
from typing import Optional

from PySide6.QtCore import QObject

from ..utils.logging_config import logger
from ..utils.timers import RepeatingTimer, TimerFactory, qt_timer_factory


class AutoplayScheduler:
    """Invokes ``on_tick`` every interval while running.

    At most one timer exists per scheduler. ``stop`` cancels it synchronously
    and drops the handle, so a late fire from a stopped timer is ignored.
    Production timers are children of ``parent`` and die with it.
    """

    def __init__(
        self,
        on_tick: Callable[[], None],
        timer_factory: Optional[TimerFactory] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        self._on_tick = on_tick
        self._timer_factory: TimerFactory = timer_factory or qt_timer_factory(parent)
        self._timer: Optional[RepeatingTimer] = None
        self._interval_ms: int = 0

    @property
    def running(self) -> bool:
        return self._timer is not None

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self, interval_ms: int) -> bool:
        """Start ticking. Returns False if already running (no second timer)."""
        if self._timer is not None:
            return False
        if interval_ms <= 0:
            raise ValueError(f"Autoplay interval must be positive, got {interval_ms}")

        self._interval_ms = interval_ms
        self._timer = self._timer_factory(self._tick)
        self._timer.start(interval_ms)
        logger.debug(f"Autoplay started ({interval_ms} ms)")
        return True

    def stop(self) -> bool:
        """Cancel the timer. Returns False if already stopped."""
        if self._timer is None:
            return False
        timer = self._timer
        self._timer = None
        timer.stop()
        logger.debug("Autoplay stopped")
        return True

    def toggle(self, interval_ms: int) -> bool:
        """Flip Running/Stopped. Returns the new running state."""
        if self.running:
            _ = self.stop()
        else:
            _ = self.start(interval_ms)
        return self.running

    def _tick(self) -> None:
        if self._timer is None:
            return
        self._on_tick()
