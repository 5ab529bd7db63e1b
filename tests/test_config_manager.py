"""Config manager tests using real files instead of mocks."""

import pytest

from propgallery.core.config_manager import (
    DEFAULT_HERO_INTERVAL_MS,
    DEFAULT_LIGHTBOX_INTERVAL_MS,
    GalleryConfig,
    load_config,
    save_config,
)


class TestConfigManager:
    """Test config manager with real files instead of mocks."""

    @pytest.fixture(autouse=True)
    def setup_config_env(self, tmp_path, monkeypatch):
        """Point CONFIG_FILE at a temporary directory."""
        config_dir = tmp_path / '.propgallery'
        config_dir.mkdir()
        config_file = config_dir / 'config.ini'

        monkeypatch.setattr('propgallery.core.config_manager.CONFIG_FILE', str(config_file))

        yield config_file

    def test_load_config_nonexistent_file(self, setup_config_env):
        assert not setup_config_env.exists()

        config = load_config()

        assert config == GalleryConfig()
        assert config.hero_interval_ms == DEFAULT_HERO_INTERVAL_MS
        assert config.lightbox_interval_ms == DEFAULT_LIGHTBOX_INTERVAL_MS
        assert config.thumbnail_size == 64

    def test_save_and_load_config(self, setup_config_env):
        test_config = GalleryConfig(
            inline_auto_slide=True,
            hero_auto_slide=False,
            hero_interval_ms=3000,
            lightbox_interval_ms=4500,
            min_swipe_distance=80.0,
            drag_threshold=12.5,
            thumbnail_size=96,
        )

        save_config(test_config)
        assert setup_config_env.exists()

        assert load_config() == test_config

    def test_invalid_values_fall_back(self, setup_config_env):
        setup_config_env.write_text(
            "[Settings]\n"
            "hero_interval_ms = -10\n"
            "lightbox_interval_ms = 0\n"
            "thumbnail_size = 500\n"
            "drag_threshold = 4\n"
        )

        config = load_config()

        assert config.hero_interval_ms == DEFAULT_HERO_INTERVAL_MS
        assert config.lightbox_interval_ms == DEFAULT_LIGHTBOX_INTERVAL_MS
        assert config.thumbnail_size == 64
        assert config.drag_threshold == 4.0

    def test_corrupted_file_returns_defaults(self, setup_config_env):
        setup_config_env.write_text("[Settings]\nhero_interval_ms = soon\n")
        assert load_config() == GalleryConfig()

    def test_unparsable_value_keeps_other_settings(self, setup_config_env):
        setup_config_env.write_text(
            "[Settings]\n"
            "hero_interval_ms = abc\n"
            "lightbox_interval_ms = 4500\n"
            "thumbnail_size = 96\n"
            "hero_auto_slide = maybe\n"
        )

        config = load_config()

        assert config.hero_interval_ms == DEFAULT_HERO_INTERVAL_MS
        assert config.lightbox_interval_ms == 4500
        assert config.thumbnail_size == 96
        assert config.hero_auto_slide == GalleryConfig().hero_auto_slide

    def test_missing_section_uses_defaults(self, setup_config_env):
        setup_config_env.write_text("[Other]\nkey = value\n")
        assert load_config() == GalleryConfig()


class TestSlideshowOptions:

    def test_inline_defaults_to_manual(self):
        options = GalleryConfig().options_for("inline")
        assert options.auto_slide is False

    def test_hero_autoplays(self):
        options = GalleryConfig().options_for("hero")
        assert options.auto_slide is True
        assert options.slide_interval_ms == DEFAULT_HERO_INTERVAL_MS

    def test_lightbox_opens_paused(self):
        options = GalleryConfig(lightbox_interval_ms=7000).options_for("lightbox")
        assert options.auto_slide is False
        assert options.slide_interval_ms == 7000

    def test_swipe_settings_carried(self):
        options = GalleryConfig(min_swipe_distance=90.0, drag_threshold=5.0).options_for("hero")
        assert options.min_swipe_distance == 90.0
        assert options.drag_threshold == 5.0

    def test_unknown_presentation(self):
        with pytest.raises(ValueError):
            GalleryConfig().options_for("carousel")
