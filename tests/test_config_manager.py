"""Tests for preference persistence."""

import json

import pytest

from config_manager import (
    ConfigManager,
    config_from_state,
    decoration_from_config,
    settings_from_config,
)
from models import (
    DEFAULT_EXPORT_SIZE,
    MAX_EXPORT_SIZE,
    MIN_EXPORT_SIZE,
    AppConfig,
    CaptionOption,
    ExportFormat,
    FillMode,
    FrameDecoration,
    FrameStyle,
    ModuleShape,
    QRSettings,
)


class TestConfigManager:
    def test_missing_file_gives_defaults(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        assert manager.load() == AppConfig()

    def test_round_trip(self, tmp_path):
        manager = ConfigManager(tmp_path / "config.json")
        config = AppConfig(fg_color="#112233", style="dots", export_size=2048)

        success, error = manager.save(config)

        assert success and error is None
        assert manager.load() == config

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"bg_color": "#000000"}))

        config = ConfigManager(path).load()

        assert config.bg_color == "#000000"
        assert config.fg_color == AppConfig().fg_color

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        assert ConfigManager(path).load() == AppConfig()

    def test_save_failure_is_reported(self, tmp_path):
        manager = ConfigManager(tmp_path / "missing" / "config.json")

        success, error = manager.save(AppConfig())

        assert not success
        assert error


class TestStateConversion:
    def test_settings_from_config(self):
        config = AppConfig(style="rounded", fill_mode="radial", export_format="svg")
        settings = settings_from_config(config)

        assert settings.style is ModuleShape.ROUNDED
        assert settings.fill_mode is FillMode.RADIAL
        assert settings.export_format is ExportFormat.SVG
        assert settings.logo is None

    def test_unknown_values_use_defaults(self):
        config = AppConfig(style="hexagons", fill_mode="plaid", frame_style="bogus")

        assert settings_from_config(config).style is ModuleShape.SQUARES
        assert settings_from_config(config).fill_mode is FillMode.SOLID
        assert decoration_from_config(config).frame_style is FrameStyle.NONE

    def test_rotation_is_wrapped(self):
        assert settings_from_config(AppConfig(gradient_rotation=370)).gradient_rotation == 10

    @pytest.mark.parametrize("rotation", ["abc", None, [90], True])
    def test_non_numeric_rotation_uses_zero(self, rotation):
        assert settings_from_config(AppConfig(gradient_rotation=rotation)).gradient_rotation == 0

    def test_numeric_text_rotation_is_accepted(self):
        assert settings_from_config(AppConfig(gradient_rotation="45")).gradient_rotation == 45

    @pytest.mark.parametrize("size", ["big", None, False, 1e400])
    def test_non_numeric_export_size_uses_default(self, size):
        assert settings_from_config(AppConfig(export_size=size)).export_size == DEFAULT_EXPORT_SIZE

    @pytest.mark.parametrize(
        "size, expected",
        [(16, MIN_EXPORT_SIZE), (100000, MAX_EXPORT_SIZE), (-5, MIN_EXPORT_SIZE), (2048, 2048)],
    )
    def test_export_size_is_clamped(self, size, expected):
        assert settings_from_config(AppConfig(export_size=size)).export_size == expected

    def test_non_text_colors_use_defaults(self):
        config = AppConfig(fg_color=12, bg_color="  ", frame_color=None, caption_color=["#fff"])
        defaults = AppConfig()

        settings = settings_from_config(config)
        decoration = decoration_from_config(config)

        assert settings.fg_color == defaults.fg_color
        assert settings.bg_color == defaults.bg_color
        assert decoration.frame_color == defaults.frame_color
        assert decoration.caption_color == defaults.caption_color

    def test_hand_edited_file_still_builds_state(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {"gradient_rotation": "abc", "export_size": "huge", "fg_color": 7, "style": 3}
            )
        )

        config = ConfigManager(path).load()
        settings = settings_from_config(config)

        assert settings.gradient_rotation == 0
        assert settings.export_size == DEFAULT_EXPORT_SIZE
        assert settings.fg_color == AppConfig().fg_color
        assert settings.style is ModuleShape.SQUARES

    def test_config_from_state_skips_content(self):
        settings = QRSettings(
            content="secret", fg_color="#abcdef", style=ModuleShape.DOTS
        )
        decoration = FrameDecoration(
            frame_style=FrameStyle.BADGE, caption=CaptionOption.SCAN_ME
        )
        base = AppConfig(default_logo_path="/tmp/logo.png")

        config = config_from_state(base, settings, decoration)

        assert config.fg_color == "#abcdef"
        assert config.style == "dots"
        assert config.frame_style == "badge"
        assert config.caption == "scan-me"
        assert config.default_logo_path == "/tmp/logo.png"
        assert "secret" not in json.dumps(vars(config))
