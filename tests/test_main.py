"""Tests for the command-line entry point helpers."""

import pytest

from propgallery.core.config_manager import GalleryConfig
from propgallery.main import build_parser, build_shell, resolve_options
from propgallery.ui import EventGallery, HeroSlideshow, InlineSlider, LightboxDialog
from shared_fixtures import make_records


class TestArguments:

    def test_defaults(self):
        args = build_parser().parse_args(["/photos"])
        assert args.path == "/photos"
        assert args.presentation == "inline"
        assert args.interval is None
        assert args.exclude == ""
        assert args.verbose is False

    def test_all_options(self):
        args = build_parser().parse_args(
            ["listing.json", "--presentation", "hero", "--interval", "2500", "--exclude", "*_raw.jpg"]
        )
        assert args.presentation == "hero"
        assert args.interval == 2500
        assert args.exclude == "*_raw.jpg"

    def test_unknown_presentation_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["/photos", "--presentation", "carousel"])


class TestResolveOptions:

    def test_config_interval(self):
        options = resolve_options(GalleryConfig(hero_interval_ms=4000), "hero", None)
        assert options.slide_interval_ms == 4000
        assert options.auto_slide

    def test_interval_override(self):
        options = resolve_options(GalleryConfig(), "lightbox", 1500)
        assert options.slide_interval_ms == 1500
        assert not options.auto_slide

    def test_grid_uses_lightbox_settings(self):
        options = resolve_options(GalleryConfig(lightbox_interval_ms=9000), "grid", None)
        assert options.slide_interval_ms == 9000

    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            resolve_options(GalleryConfig(), "inline", 0)


class TestBuildShell:

    @pytest.mark.parametrize("presentation,shell_type", [
        ("inline", InlineSlider),
        ("hero", HeroSlideshow),
        ("lightbox", LightboxDialog),
        ("grid", EventGallery),
    ])
    def test_builds_presentation(self, qtbot, presentation, shell_type):
        options = GalleryConfig().options_for("lightbox")
        shell = build_shell(presentation, make_records(2), options, 48)
        qtbot.addWidget(shell)
        assert isinstance(shell, shell_type)
        shell.dispose()
