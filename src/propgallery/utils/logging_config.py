"""Logging for PropGallery.

Everything logs through the ``propgallery`` logger so an embedding
application keeps control of the root logger. Handlers are attached on first
use; a read-only home directory degrades to console-only logging.
"""

import logging
import logging.handlers
import os
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Optional, TypeVar, Union

# Use typing_extensions for ParamSpec (Python 3.9 compatibility)
from typing_extensions import ParamSpec

# ----------------------------- Logging Configuration -----------------------------

LOG_FILE = os.path.expanduser("~/.propgallery/propgallery.log")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(funcName)s - %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

logger = logging.getLogger("propgallery")

_handlers_initialized = False
_initialization_error: Optional[str] = None


def _build_file_handler(formatter: logging.Formatter) -> logging.Handler:
    log_dir = os.path.dirname(LOG_FILE)
    if log_dir and not os.path.isdir(log_dir):
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    handler.setFormatter(formatter)
    return handler


def ensure_handlers_initialized() -> None:
    """Attach the console and rotating file handlers once.

    The file handler is skipped, and the reason kept for
    ``get_initialization_error``, when the log directory cannot be created.
    """
    global _handlers_initialized, _initialization_error

    if _handlers_initialized:
        return
    _handlers_initialized = True

    logger.setLevel(logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    try:
        logger.addHandler(_build_file_handler(formatter))
    except (OSError, PermissionError) as e:
        _initialization_error = f"File logging disabled: {e}"

    # Pillow logs every decoder plugin it probes at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)


def set_log_level(level: Union[int, str]) -> None:
    """Change the verbosity of the gallery logger and its handlers."""
    ensure_handlers_initialized()
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def get_initialization_error() -> Optional[str]:
    return _initialization_error

# ----------------------------- Logging Decorator -----------------------------

P = ParamSpec('P')
R = TypeVar('R')


def log_function(func: Callable[P, R]) -> Callable[P, R]:
    """Log entry and exit of a coarse gallery operation at DEBUG.

    Exceptions are logged with their traceback and re-raised unchanged.
    Keep this off per-pointer-move handlers; it is meant for open, close,
    teardown, loaders and config I/O.
    """
    name = func.__qualname__

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        ensure_handlers_initialized()
        logger.debug(f"-> {name}")
        try:
            result: R = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Exception in {name}: {e}")
            logger.debug(traceback.format_exc())
            raise
        logger.debug(f"<- {name}")
        return result

    return wrapper
