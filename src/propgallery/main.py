#!/usr/bin/env python3

"""
Main entry point for PropGallery - opens a folder or JSON manifest of images
in one of the gallery presentations.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Optional, Union

from PySide6.QtWidgets import QApplication, QWidget

from propgallery.core.config_manager import GalleryConfig, SlideshowOptions, load_config
from propgallery.core.image_loader import load_images
from propgallery.core.images import ImageRecord
from propgallery.ui import EventGallery, HeroSlideshow, InlineSlider, LightboxDialog
from propgallery.utils.logging_config import ensure_handlers_initialized, logger, set_log_level

PRESENTATIONS = ["inline", "hero", "lightbox", "grid"]

Shell = Union[InlineSlider, HeroSlideshow, LightboxDialog, EventGallery]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propgallery",
        description="Browse listing photos as an inline slider, hero banner, lightbox or event grid.",
    )
    _ = parser.add_argument("path", help="Image folder or JSON manifest of image records")
    _ = parser.add_argument(
        "--presentation",
        choices=PRESENTATIONS,
        default="inline",
        help="Gallery presentation to open (default: inline)",
    )
    _ = parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Autoplay interval in milliseconds (overrides config)",
    )
    _ = parser.add_argument(
        "--exclude",
        default="",
        help="Comma-separated filename patterns to skip when loading a folder",
    )
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="Log slide changes and timers")
    return parser


def resolve_options(config: GalleryConfig, presentation: str, interval: Optional[int]) -> SlideshowOptions:
    options = config.options_for("lightbox" if presentation == "grid" else presentation)
    if interval is None:
        return options
    if interval <= 0:
        raise ValueError(f"--interval must be positive, got {interval}")
    return SlideshowOptions(
        auto_slide=options.auto_slide,
        slide_interval_ms=interval,
        min_swipe_distance=options.min_swipe_distance,
        drag_threshold=options.drag_threshold,
    )


def build_shell(
    presentation: str,
    images: Sequence[ImageRecord],
    options: SlideshowOptions,
    thumbnail_size: int,
) -> Shell:
    if presentation == "hero":
        return HeroSlideshow(images, options=options)
    if presentation == "lightbox":
        return LightboxDialog(images, options=options, thumbnail_size=thumbnail_size)
    if presentation == "grid":
        return EventGallery(images, options=options, thumbnail_size=thumbnail_size)
    return InlineSlider(images, options=options, thumbnail_size=thumbnail_size)


def main(argv: Optional[Sequence[str]] = None) -> None:
    ensure_handlers_initialized()
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        config = load_config()
        options = resolve_options(config, args.presentation, args.interval)
        images = load_images(args.path, args.exclude)
    except (OSError, ValueError) as e:
        logger.error(f"Could not open gallery: {e}")
        sys.exit(2)

    try:
        app = QApplication(sys.argv[:1])
        shell = build_shell(args.presentation, images, options, config.thumbnail_size)

        if isinstance(shell, LightboxDialog):
            _ = shell.session.closed.connect(app.quit)
            shell.open_at(0)
        else:
            window: QWidget = shell
            window.setWindowTitle(f"PropGallery - {args.path}")
            window.resize(1000, 720)
            window.show()

        logger.info(f"Opened {len(images)} image(s) as {args.presentation}")
        exit_code = app.exec()
        shell.dispose()
        sys.exit(exit_code)
    except Exception as e:
        logger.critical(f"Critical error in main execution: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
