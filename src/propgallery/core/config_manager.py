"""Configuration handling for slideshow defaults.

Settings live in an ini file under the user's home directory. The directory is
only created when first needed, and an unwritable home falls back to defaults.
"""

import configparser
import os
import traceback
from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from ..utils.logging_config import ensure_handlers_initialized, log_function, logger
from .gesture import DEFAULT_DRAG_THRESHOLD, DEFAULT_MIN_SWIPE_DISTANCE

DEFAULT_HERO_INTERVAL_MS = 5000
DEFAULT_LIGHTBOX_INTERVAL_MS = 6000
ALLOWED_THUMBNAIL_SIZES = [48, 64, 96]


@dataclass(frozen=True)
class SlideshowOptions:
    """Per-call-site behaviour of one gallery session."""
    auto_slide: bool = False
    slide_interval_ms: int = DEFAULT_HERO_INTERVAL_MS
    min_swipe_distance: float = DEFAULT_MIN_SWIPE_DISTANCE
    drag_threshold: float = DEFAULT_DRAG_THRESHOLD


@dataclass
class GalleryConfig:
    """Configuration settings for PropGallery."""
    inline_auto_slide: bool = False
    hero_auto_slide: bool = True
    hero_interval_ms: int = DEFAULT_HERO_INTERVAL_MS
    lightbox_interval_ms: int = DEFAULT_LIGHTBOX_INTERVAL_MS
    min_swipe_distance: float = DEFAULT_MIN_SWIPE_DISTANCE
    drag_threshold: float = DEFAULT_DRAG_THRESHOLD
    thumbnail_size: int = 64

    def options_for(self, presentation: str) -> SlideshowOptions:
        """Slideshow options for the ``inline``, ``hero`` or ``lightbox`` shell."""
        if presentation == "inline":
            auto_slide, interval = self.inline_auto_slide, self.hero_interval_ms
        elif presentation == "hero":
            auto_slide, interval = self.hero_auto_slide, self.hero_interval_ms
        elif presentation == "lightbox":
            auto_slide, interval = False, self.lightbox_interval_ms
        else:
            raise ValueError(f"Unknown presentation: {presentation}")
        return SlideshowOptions(
            auto_slide=auto_slide,
            slide_interval_ms=interval,
            min_swipe_distance=self.min_swipe_distance,
            drag_threshold=self.drag_threshold,
        )


# ----------------------------- Persistence -----------------------------

CONFIG_FILE = os.path.expanduser("~/.propgallery/config.ini")
SECTION = "Settings"

_config_dir_ready: Optional[bool] = None


def _config_dir_available() -> bool:
    """Create the config directory the first time it is needed.

    The outcome is remembered, so a read-only home directory is reported once.
    """
    global _config_dir_ready

    if _config_dir_ready is not None:
        return _config_dir_ready

    ensure_handlers_initialized()
    config_dir = os.path.dirname(CONFIG_FILE)
    try:
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)
        _config_dir_ready = True
    except OSError as e:
        logger.warning(f"Config directory {config_dir} unavailable: {e}")
        _config_dir_ready = False
    return _config_dir_ready


def _get_positive(parser: configparser.ConfigParser, option: str, default: Any) -> Any:
    getter = parser.getint if isinstance(default, int) else parser.getfloat
    value = getter(SECTION, option, fallback=default)
    if value <= 0:
        logger.warning(f"{option} must be positive (got {value}); keeping {default}")
        return default
    return value


@log_function
def load_config() -> GalleryConfig:
    """Read ``CONFIG_FILE``; a missing or unreadable file yields the defaults.

    An unparsable value falls back to that setting's default alone.
    """
    _ = _config_dir_available()
    defaults = GalleryConfig()
    if not os.path.exists(CONFIG_FILE):
        logger.info(f"No config at {CONFIG_FILE}; using defaults")
        return defaults

    parser = configparser.ConfigParser()
    try:
        with open(CONFIG_FILE, encoding="utf-8") as f:
            parser.read_file(f)
        if not parser.has_section(SECTION):
            logger.warning(f"{CONFIG_FILE} has no [{SECTION}] section; using defaults")
            return defaults

        values: dict[str, Any] = {}
        for field in fields(GalleryConfig):
            default = getattr(defaults, field.name)
            try:
                if isinstance(default, bool):
                    values[field.name] = parser.getboolean(SECTION, field.name, fallback=default)
                else:
                    values[field.name] = _get_positive(parser, field.name, default)
            except ValueError as e:
                logger.warning(f"Unparsable {field.name} in {CONFIG_FILE} ({e}); keeping {default}")
                values[field.name] = default

        if values["thumbnail_size"] not in ALLOWED_THUMBNAIL_SIZES:
            logger.warning(
                f"thumbnail_size must be one of {ALLOWED_THUMBNAIL_SIZES}; keeping {defaults.thumbnail_size}"
            )
            values["thumbnail_size"] = defaults.thumbnail_size
    except (configparser.Error, ValueError, OSError) as e:
        logger.error(f"Could not read {CONFIG_FILE}: {e}")
        logger.debug(traceback.format_exc())
        return defaults

    result = GalleryConfig(**values)
    logger.info(f"Loaded config: {result}")
    return result


@log_function
def save_config(cfg: GalleryConfig) -> None:
    """Write every ``GalleryConfig`` field to the ``[Settings]`` section."""
    if not _config_dir_available():
        logger.error(f"Not saving config: {os.path.dirname(CONFIG_FILE)} is not writable")
        return

    parser = configparser.ConfigParser()
    parser[SECTION] = {name: str(value) for name, value in asdict(cfg).items()}
    try:
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            parser.write(f)
    except OSError as e:
        logger.error(f"Could not save config to {CONFIG_FILE}: {e}")
        logger.debug(traceback.format_exc())
        return
    logger.info(f"Config saved to {CONFIG_FILE}")
