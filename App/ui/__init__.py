"""UI components for QR Studio.

This package contains the panels composed by the main window: the
controls that edit the settings store, the live preview and the console.
"""

from ui.console_panel import ConsolePanel
from ui.controls_panel import ControlsPanel
from ui.main_window import QRStudioWindow
from ui.preview_panel import PreviewPanel

__all__ = [
    "QRStudioWindow",
    "ControlsPanel",
    "PreviewPanel",
    "ConsolePanel",
]
