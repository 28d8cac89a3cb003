"""Centralized styling constants for the QR Studio UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QFont


class StatusColors:
    """Status line colors."""

    OK = "green"
    BUSY = "orange"
    ERROR = "red"
    IDLE = "gray"


class ThemeColors:
    """Application theme colors."""

    BORDER_DEFAULT = "gray"
    ACCENT = "#0D9488"
    ACCENT_HOVER = "#14B8A6"
    ACCENT_PRESSED = "#0B7A70"
    BUTTON_IDLE = "#3a3a3a"


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)
    HEX_INPUT = QFont("Courier", 10)
    CAPTION = QFont("Arial", 11, QFont.Weight.Bold)


class Sizes:
    """Standard widget sizes and constraints."""

    # Console panel
    CONSOLE_MIN_HEIGHT = 100

    # Preview area (symbol is PREVIEW_SIZE, plus frame)
    PREVIEW_MIN_SIZE = (340, 340)

    # Color inputs
    SWATCH = 36
    SWATCH_SMALL = 24
    HEX_INPUT_WIDTH = 90

    # Labels
    LABEL_MIN_WIDTH = 40


FONTS = Fonts
SIZES = Sizes


def status_stylesheet(state: str) -> str:
    """Generate status label stylesheet.

    Args:
        state: One of 'OK', 'BUSY', 'ERROR', 'IDLE'

    Returns:
        CSS stylesheet string with appropriate color
    """
    color = getattr(StatusColors, state.upper(), StatusColors.IDLE)
    return f"color: {color};"


def swatch_stylesheet(color: str, active: bool = False) -> str:
    """Stylesheet for a clickable color swatch button."""
    border = ThemeColors.ACCENT if active else ThemeColors.BORDER_DEFAULT
    width = 3 if active else 1
    return (
        f"background-color: {color}; "
        f"border: {width}px solid {border}; border-radius: 6px;"
    )


def toggle_button_stylesheet() -> str:
    """Style for exclusive option buttons (shape, fill mode)."""
    return f"""
        QPushButton {{
            background-color: {ThemeColors.BUTTON_IDLE};
            border: 1px solid {ThemeColors.BORDER_DEFAULT};
            border-radius: 6px;
            padding: 6px 14px;
        }}
        QPushButton:checked {{
            background-color: {ThemeColors.ACCENT};
            border-color: {ThemeColors.ACCENT};
            color: white;
        }}
        QPushButton:hover {{
            border-color: {ThemeColors.ACCENT_HOVER};
        }}
    """


def primary_button_stylesheet() -> str:
    return f"""
        QPushButton {{
            background-color: {ThemeColors.ACCENT};
            color: white;
            border: none;
            border-radius: 4px;
            padding: 8px 20px;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background-color: {ThemeColors.ACCENT_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {ThemeColors.ACCENT_PRESSED};
        }}
        QPushButton:disabled {{
            background-color: #333;
            color: #666;
        }}
    """
