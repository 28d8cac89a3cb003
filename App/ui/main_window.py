"""Main application window for the QR configurator."""

from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDockWidget,
    QHBoxLayout,
    QMainWindow,
    QScrollArea,
    QWidget,
)

from config_manager import (
    ConfigManager,
    config_from_state,
    decoration_from_config,
    settings_from_config,
)
from export_coordinator import ExportCoordinator
from models import FrameDecoration, QRSettings
from qr_rendering import QRRenderer, build_render_config, render_image
from settings_store import SettingsStore
from ui.console_panel import ConsolePanel
from ui.controls_panel import ControlsPanel
from ui.preview_panel import PreviewPanel


class QRStudioWindow(QMainWindow):
    """Main window: controls on the left, live preview on the right."""

    def __init__(self, config_manager: ConfigManager | None = None):
        super().__init__()
        self.setWindowTitle("QR Studio v0.1.0")
        self.setMinimumSize(900, 700)

        # Application state
        self.config_manager = config_manager or ConfigManager()
        self.app_config = self.config_manager.load()
        self.store = SettingsStore(
            settings_from_config(self.app_config),
            decoration_from_config(self.app_config),
            parent=self,
        )
        self.renderer = QRRenderer(build_render_config(self.store.settings))

        # UI component references (created in _setup_ui)
        self.controls_panel: ControlsPanel
        self.preview_panel: PreviewPanel
        self.console_panel: ConsolePanel
        self.console_dock: QDockWidget

        self._setup_ui()

        self.exporter = ExportCoordinator(
            capture=self.preview_panel.capture,
            rendered_width=self.preview_panel.rendered_width,
        )

        self._connect_signals()
        self._load_default_logo()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_menu_bar()

        central = QWidget()
        layout = QHBoxLayout(central)

        self.controls_panel = ControlsPanel(
            self.store, filter_brightness=self.app_config.filter_brightness
        )
        self.controls_panel.export_dir = self.app_config.recent_export_dir
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.controls_panel)
        layout.addWidget(scroll, stretch=3)

        self.preview_panel = PreviewPanel()
        self.preview_panel.set_decoration(
            self.store.decoration, self.store.settings.bg_color
        )
        layout.addWidget(self.preview_panel, stretch=2)

        self.setCentralWidget(central)

        self.console_panel = ConsolePanel()
        self.console_panel.capture_stdout()
        self.console_dock = self._create_dock_widget(
            "Console", self.console_panel, Qt.DockWidgetArea.BottomDockWidgetArea
        )
        self._add_view_menu_actions()

    def _create_menu_bar(self):
        """Create the menu bar with View menu for panel toggles."""
        menubar = self.menuBar()

        if menubar is None:
            return

        self.view_menu = menubar.addMenu("&View")

    def _create_dock_widget(
        self, title: str, widget: QWidget, area: Qt.DockWidgetArea
    ) -> QDockWidget:
        """Create a dockable widget with standard settings.

        Args:
            title: Window title for the dock widget
            widget: The widget to place inside the dock
            area: Default dock area (Left, Right, Top, Bottom)

        Returns:
            The created QDockWidget
        """
        dock = QDockWidget(title, self)
        dock.setWidget(widget)
        dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea
            | Qt.DockWidgetArea.RightDockWidgetArea
            | Qt.DockWidgetArea.BottomDockWidgetArea
        )
        self.addDockWidget(area, dock)
        return dock

    def _add_view_menu_actions(self):
        """Add toggle actions for dock widgets to the View menu."""
        if self.view_menu is None:
            return
        action = self.console_dock.toggleViewAction()
        if action:
            self.view_menu.addAction(action)

    def _connect_signals(self):
        """Connect store, renderer and panel signals."""
        # AIDEV-NOTE: The renderer pushes every redraw to the preview; the
        # store drives the renderer. Nothing else triggers a render.
        self.renderer.attach(self.preview_panel.show_symbol)
        self.preview_panel.symbol_provider = self._render_symbol_at

        self.store.settings_changed.connect(self._on_settings_changed)
        self.store.decoration_changed.connect(self._on_decoration_changed)

        self.controls_panel.message.connect(self.console_panel.append)
        self.controls_panel.export_requested.connect(self._export)

    def _render_symbol_at(self, size: int):
        return render_image(build_render_config(self.store.settings, size=size))

    def _on_settings_changed(self, settings: QRSettings):
        self.renderer.update(build_render_config(settings))
        self.preview_panel.set_decoration(self.store.decoration, settings.bg_color)

    def _on_decoration_changed(self, decoration: FrameDecoration):
        self.preview_panel.set_decoration(decoration, self.store.settings.bg_color)

    def _load_default_logo(self):
        """Embed the configured default logo, if any, at startup."""
        path = self.app_config.default_logo_path
        if not isinstance(path, str) or not path:
            return
        if not Path(path).is_file():
            self.console_panel.append(f"⚠️ Default logo not found: {path}")
            return
        self.console_panel.append(f"Loading default logo {path}")
        self.controls_panel.load_logo(path)

    def _export(self, path: str):
        settings = self.store.settings
        result = self.exporter.export(
            settings,
            self.store.decoration,
            settings.export_size,
            settings.export_format,
            path,
        )

        if result.success:
            self.controls_panel.set_status(f"Saved {result.path.name}", "OK")
            self.console_panel.append(f"✓ Exported QR code to {result.path}")
            self.app_config.recent_export_dir = str(result.path.parent)
            self.controls_panel.export_dir = self.app_config.recent_export_dir
        else:
            self.controls_panel.set_status(f"Export failed: {result.error}", "ERROR")
            self.console_panel.append(f"❌ Export failed: {result.error}")

    def closeEvent(self, a0):
        """Persist style preferences when the window closes."""
        self.controls_panel.extractor.shutdown()
        self.app_config = config_from_state(
            self.app_config, self.store.settings, self.store.decoration
        )
        success, error = self.config_manager.save(self.app_config)
        if not success:
            print(f"Warning: Could not save config: {error}")
        self.console_panel.release_stdout()
        if a0:
            a0.accept()
