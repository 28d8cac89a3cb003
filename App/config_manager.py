"""Preference persistence manager for the QR Studio application.

This module handles loading and saving of style preferences to/from JSON files.
The content text is deliberately not part of it.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from models import (
    CONFIG_FILE,
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


class ConfigManager:
    """Handles loading and saving of application preferences."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.qrstudio_config.json)
        """
        self.config_path = config_path

    def load(self) -> AppConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            AppConfig with loaded or default values
        """
        config = AppConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults)
                    for field in fields(AppConfig):
                        setattr(config, field.name, data.get(field.name, getattr(config, field.name)))
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")

        return config

    def save(self, config: AppConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: AppConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)


def _enum_value(enum_cls, value, default):
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        return default


def _int_value(value, default: int) -> int:
    """Stored numbers may be hand-edited; non-numeric values use default."""
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _color_value(value, default: str) -> str:
    return value if isinstance(value, str) and value.strip() else default


def settings_from_config(config: AppConfig) -> QRSettings:
    """Initial settings from stored preferences; unknown values use defaults."""
    defaults = AppConfig()
    return QRSettings(
        fg_color=_color_value(config.fg_color, defaults.fg_color),
        fg_color2=_color_value(config.fg_color2, defaults.fg_color2),
        bg_color=_color_value(config.bg_color, defaults.bg_color),
        style=_enum_value(ModuleShape, config.style, ModuleShape.SQUARES),
        fill_mode=_enum_value(FillMode, config.fill_mode, FillMode.SOLID),
        gradient_rotation=_int_value(config.gradient_rotation, 0) % 360,
        export_size=max(
            MIN_EXPORT_SIZE,
            min(MAX_EXPORT_SIZE, _int_value(config.export_size, defaults.export_size)),
        ),
        export_format=_enum_value(ExportFormat, config.export_format, ExportFormat.PNG),
    )


def decoration_from_config(config: AppConfig) -> FrameDecoration:
    defaults = AppConfig()
    return FrameDecoration(
        frame_style=_enum_value(FrameStyle, config.frame_style, FrameStyle.NONE),
        caption=_enum_value(CaptionOption, config.caption, CaptionOption.NONE),
        frame_color=_color_value(config.frame_color, defaults.frame_color),
        caption_color=_color_value(config.caption_color, defaults.caption_color),
    )


def config_from_state(
    base: AppConfig, settings: QRSettings, decoration: FrameDecoration
) -> AppConfig:
    """Copy the persistable parts of the current state onto base."""
    data = asdict(base)
    data.update(
        fg_color=settings.fg_color,
        fg_color2=settings.fg_color2,
        bg_color=settings.bg_color,
        style=settings.style.value,
        fill_mode=settings.fill_mode.value,
        gradient_rotation=settings.gradient_rotation,
        export_size=settings.export_size,
        export_format=settings.export_format.value,
        frame_style=decoration.frame_style.value,
        caption=decoration.caption.value,
        frame_color=decoration.frame_color,
        caption_color=decoration.caption_color,
    )
    return AppConfig(**data)
