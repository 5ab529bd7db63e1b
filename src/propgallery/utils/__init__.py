"""Utility components for PropGallery."""

from .logging_config import log_function, logger, set_log_level
from .timers import QtRepeatingTimer, RepeatingTimer, TimerFactory, qt_timer_factory

__all__ = [
    "QtRepeatingTimer",
    "RepeatingTimer",
    "TimerFactory",
    "log_function",
    "logger",
    "qt_timer_factory",
    "set_log_level",
]
