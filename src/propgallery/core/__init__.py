"""Core gallery engine for PropGallery - no widgets live here."""

from .autoplay import AutoplayScheduler
from .config_manager import GalleryConfig, SlideshowOptions, load_config, save_config
from .errors import OutOfRangeError
from .gesture import GestureRecognizer, GestureState, SwipeDirection
from .image_loader import load_directory, load_images, load_manifest, scan_image_files
from .images import (
    EncodedPayload,
    ImageRecord,
    ReadyPayload,
    alt_text_for,
    create_image_src,
    get_file_extension_from_mime_type,
    is_valid_image_data,
    normalize_image_record,
    normalize_image_records,
    process_image_for_display,
)
from .keyboard import GalleryAction, KeyboardBindings
from .navigation import NavigationController
from .session import GallerySession, GalleryVariant
from .thumbnails import ThumbnailSynchronizer, centered_scroll_offset

__all__ = [
    "AutoplayScheduler",
    "EncodedPayload",
    "GalleryAction",
    "GalleryConfig",
    "GallerySession",
    "GalleryVariant",
    "GestureRecognizer",
    "GestureState",
    "ImageRecord",
    "KeyboardBindings",
    "NavigationController",
    "OutOfRangeError",
    "ReadyPayload",
    "SlideshowOptions",
    "SwipeDirection",
    "ThumbnailSynchronizer",
    "alt_text_for",
    "centered_scroll_offset",
    "create_image_src",
    "get_file_extension_from_mime_type",
    "is_valid_image_data",
    "load_config",
    "load_directory",
    "load_images",
    "load_manifest",
    "normalize_image_record",
    "normalize_image_records",
    "process_image_for_display",
    "save_config",
    "scan_image_files",
]
