"""Controls for content, colors, style, logo, frame and export."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from export_coordinator import suggested_export_path
from image_processing import PaletteExtractor
from models import (
    MAX_EXPORT_SIZE,
    MIN_EXPORT_SIZE,
    CaptionOption,
    ExportFormat,
    ExtractedPalette,
    FillMode,
    FrameDecoration,
    ModuleShape,
    QRSettings,
)
from qr_rendering.frame import CAPTION_OPTIONS, FRAME_OPTIONS
from settings_store import SettingsStore
from ui.styles import primary_button_stylesheet, status_stylesheet
from ui.widgets import (
    CollapsibleGroupBox,
    ColorPickerRow,
    OptionButtonGroup,
    WidgetFactory,
)

SHAPE_OPTIONS = [
    (ModuleShape.SQUARES, "■ Squares"),
    (ModuleShape.DOTS, "● Dots"),
    (ModuleShape.ROUNDED, "▢ Rounded"),
]

FILL_OPTIONS = [
    (FillMode.SOLID, "Solid"),
    (FillMode.LINEAR, "Linear"),
    (FillMode.RADIAL, "Radial"),
]


class ControlsPanel(QGroupBox):
    """Panel writing user edits into the settings store.

    AIDEV-NOTE: Widgets never hold state of their own; every edit is
    forwarded to the store and the panel re-syncs from store signals.
    """

    export_requested = pyqtSignal(str)  # destination path
    message = pyqtSignal(str)  # console output

    def __init__(
        self,
        store: SettingsStore,
        filter_brightness: bool = True,
        parent: QWidget | None = None,
    ):
        super().__init__("Customize", parent)
        self.store = store
        # AIDEV-NOTE: A new upload or removal supersedes any running extraction
        self.extractor = PaletteExtractor(filter_brightness, parent=self)
        self.extractor.palette_ready.connect(store.set_palette)
        self.export_dir = ""

        self._setup_ui()
        self._connect_signals()
        self._sync_from_settings(store.settings)
        self._sync_from_decoration(store.decoration)

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self._create_content_input(layout)
        self._create_color_inputs(layout)
        self._create_style_controls(layout)
        self._create_logo_controls(layout)
        self._create_frame_controls(layout)
        self._create_export_controls(layout)

        layout.addStretch()
        self.setLayout(layout)

    def _create_content_input(self, parent_layout: QVBoxLayout):
        parent_layout.addWidget(QLabel("Content"))
        self.content_input = QLineEdit()
        self.content_input.setPlaceholderText("Enter URL or text...")
        self.content_input.setMinimumHeight(32)
        parent_layout.addWidget(self.content_input)

    def _create_color_inputs(self, parent_layout: QVBoxLayout):
        settings = self.store.settings
        colors_group = QGroupBox("Colors")
        colors_layout = QFormLayout()

        self.fg_picker = ColorPickerRow(settings.fg_color)
        colors_layout.addRow("Foreground:", self.fg_picker)

        self.bg_picker = ColorPickerRow(settings.bg_color)
        colors_layout.addRow("Background:", self.bg_picker)

        colors_group.setLayout(colors_layout)
        parent_layout.addWidget(colors_group)

    def _create_style_controls(self, parent_layout: QVBoxLayout):
        settings = self.store.settings
        style_group = QGroupBox("Style")
        style_layout = QVBoxLayout()

        self.shape_buttons = OptionButtonGroup(SHAPE_OPTIONS, settings.style)
        style_layout.addWidget(self.shape_buttons)

        style_layout.addWidget(QLabel("Color Mode"))
        self.fill_buttons = OptionButtonGroup(FILL_OPTIONS, settings.fill_mode)
        style_layout.addWidget(self.fill_buttons)

        # Gradient-only controls
        self.gradient_widget = QWidget()
        gradient_layout = QFormLayout(self.gradient_widget)
        gradient_layout.setContentsMargins(0, 0, 0, 0)

        self.fg2_picker = ColorPickerRow(settings.fg_color2)
        gradient_layout.addRow("Second Color:", self.fg2_picker)

        self.rotation_slider, self.rotation_label = WidgetFactory.create_slider_with_label(
            0, 359, settings.gradient_rotation, label_format="{}°", tick_interval=45
        )
        self.rotation_row = QWidget()
        rotation_layout = QHBoxLayout(self.rotation_row)
        rotation_layout.setContentsMargins(0, 0, 0, 0)
        rotation_layout.addWidget(self.rotation_slider)
        rotation_layout.addWidget(self.rotation_label)
        gradient_layout.addRow("Rotation:", self.rotation_row)

        style_layout.addWidget(self.gradient_widget)

        style_group.setLayout(style_layout)
        parent_layout.addWidget(style_group)

    def _create_logo_controls(self, parent_layout: QVBoxLayout):
        logo_group = QGroupBox("Logo / Image")
        logo_layout = QHBoxLayout()

        self.upload_btn = QPushButton("Upload Logo...")
        self.upload_btn.setToolTip("Select an image file (PNG, JPG, etc.)")
        logo_layout.addWidget(self.upload_btn)

        self.remove_logo_btn = QPushButton("✕")
        self.remove_logo_btn.setToolTip("Remove logo")
        self.remove_logo_btn.setMaximumWidth(35)
        logo_layout.addWidget(self.remove_logo_btn)

        self.logo_preview = QLabel()
        self.logo_preview.setFixedSize(40, 40)
        self.logo_preview.setAlignment(Qt.AlignmentFlag.AlignCenter)
        logo_layout.addWidget(self.logo_preview)

        self.logo_status = QLabel("No logo")
        logo_layout.addWidget(self.logo_status, stretch=1)

        logo_group.setLayout(logo_layout)
        parent_layout.addWidget(logo_group)

    def _create_frame_controls(self, parent_layout: QVBoxLayout):
        decoration = self.store.decoration
        frame_group = CollapsibleGroupBox("Frame & Caption")
        frame_layout = QFormLayout()

        self.frame_combo = QComboBox()
        for value, label in FRAME_OPTIONS:
            self.frame_combo.addItem(label, value)
        frame_layout.addRow("Frame:", self.frame_combo)

        self.caption_combo = QComboBox()
        for value, label in CAPTION_OPTIONS:
            self.caption_combo.addItem(label, value)
        frame_layout.addRow("Caption:", self.caption_combo)

        self.custom_caption_input = QLineEdit()
        self.custom_caption_input.setPlaceholderText("SCAN ME")
        self.custom_caption_input.setMaxLength(30)
        frame_layout.addRow("Custom text:", self.custom_caption_input)

        self.frame_color_picker = ColorPickerRow(decoration.frame_color)
        frame_layout.addRow("Frame color:", self.frame_color_picker)

        self.caption_color_picker = ColorPickerRow(decoration.caption_color)
        frame_layout.addRow("Caption color:", self.caption_color_picker)

        frame_group.setLayout(frame_layout)
        parent_layout.addWidget(frame_group)

    def _create_export_controls(self, parent_layout: QVBoxLayout):
        settings = self.store.settings
        export_group = QGroupBox("Export")
        export_layout = QVBoxLayout()

        options_layout = QHBoxLayout()
        self.export_size_spin = WidgetFactory.create_int_spinbox(
            MIN_EXPORT_SIZE, MAX_EXPORT_SIZE, settings.export_size, " px", step=128,
            tooltip="Output width and height",
        )
        options_layout.addLayout(
            WidgetFactory.create_labeled_row("Size:", self.export_size_spin)
        )

        self.format_combo = QComboBox()
        for fmt in ExportFormat:
            self.format_combo.addItem(fmt.value.upper(), fmt)
        options_layout.addLayout(
            WidgetFactory.create_labeled_row("Format:", self.format_combo)
        )
        export_layout.addLayout(options_layout)

        self.export_btn = QPushButton("Download QR Code")
        self.export_btn.setMinimumHeight(40)
        self.export_btn.setStyleSheet(primary_button_stylesheet())
        export_layout.addWidget(self.export_btn)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        export_layout.addWidget(self.status_label)

        export_group.setLayout(export_layout)
        parent_layout.addWidget(export_group)

    def _connect_signals(self):
        """Forward widget edits to the store."""
        store = self.store

        self.content_input.textChanged.connect(lambda text: store.update(content=text))
        self.fg_picker.color_changed.connect(lambda c: store.update(fg_color=c))
        self.bg_picker.color_changed.connect(lambda c: store.update(bg_color=c))
        self.fg2_picker.color_changed.connect(lambda c: store.update(fg_color2=c))
        self.shape_buttons.value_changed.connect(lambda v: store.update(style=v))
        self.fill_buttons.value_changed.connect(lambda v: store.update(fill_mode=v))
        self.rotation_slider.valueChanged.connect(
            lambda v: store.update(gradient_rotation=v)
        )
        self.export_size_spin.valueChanged.connect(lambda v: store.update(export_size=v))
        self.format_combo.currentIndexChanged.connect(
            lambda _: store.update(export_format=self.format_combo.currentData())
        )

        self.frame_combo.currentIndexChanged.connect(
            lambda _: store.update_decoration(frame_style=self.frame_combo.currentData())
        )
        self.caption_combo.currentIndexChanged.connect(
            lambda _: store.update_decoration(caption=self.caption_combo.currentData())
        )
        self.custom_caption_input.textChanged.connect(
            lambda text: store.update_decoration(custom_caption=text)
        )
        self.frame_color_picker.color_changed.connect(
            lambda c: store.update_decoration(frame_color=c)
        )
        self.caption_color_picker.color_changed.connect(
            lambda c: store.update_decoration(caption_color=c)
        )

        self.upload_btn.clicked.connect(self._on_upload_clicked)
        self.remove_logo_btn.clicked.connect(self.remove_logo)
        self.export_btn.clicked.connect(self._on_export_clicked)

        store.settings_changed.connect(self._sync_from_settings)
        store.decoration_changed.connect(self._sync_from_decoration)
        store.palette_changed.connect(self._on_palette_changed)

    # === Store -> widgets ===

    def _sync_from_settings(self, settings: QRSettings):
        if self.content_input.text() != settings.content:
            self.content_input.setText(settings.content)
        self.fg_picker.set_color(settings.fg_color)
        self.bg_picker.set_color(settings.bg_color)
        self.fg2_picker.set_color(settings.fg_color2)
        self.shape_buttons.set_value(settings.style)
        self.fill_buttons.set_value(settings.fill_mode)

        # Rotation only applies to linear gradients
        self.gradient_widget.setVisible(settings.fill_mode.is_gradient)
        self.rotation_row.setEnabled(settings.fill_mode is FillMode.LINEAR)

        has_logo = settings.logo is not None
        self.remove_logo_btn.setVisible(has_logo)
        self.logo_preview.setVisible(has_logo)
        if not has_logo:
            self.logo_status.setText("No logo")

        self.export_size_spin.blockSignals(True)
        self.export_size_spin.setValue(settings.export_size)
        self.export_size_spin.blockSignals(False)
        self._select_combo_data(self.format_combo, settings.export_format)

    def _sync_from_decoration(self, decoration: FrameDecoration):
        self._select_combo_data(self.frame_combo, decoration.frame_style)
        self._select_combo_data(self.caption_combo, decoration.caption)
        self.custom_caption_input.setVisible(decoration.caption is CaptionOption.CUSTOM)
        self.frame_color_picker.set_color(decoration.frame_color)
        self.caption_color_picker.set_color(decoration.caption_color)

        # Captured exports are raster only
        svg_index = self.format_combo.findData(ExportFormat.SVG)
        model = self.format_combo.model()
        item = model.item(svg_index) if model is not None else None
        if item is not None:
            item.setEnabled(not decoration.is_active)
        if decoration.is_active and self.format_combo.currentData() is ExportFormat.SVG:
            self._select_combo_data(self.format_combo, ExportFormat.PNG)
            self.store.update(export_format=ExportFormat.PNG)

    def _select_combo_data(self, combo: QComboBox, value):
        index = combo.findData(value)
        if index >= 0 and index != combo.currentIndex():
            combo.blockSignals(True)
            combo.setCurrentIndex(index)
            combo.blockSignals(False)

    def _on_palette_changed(self, palette: ExtractedPalette | None):
        for picker in (self.fg_picker, self.fg2_picker):
            picker.set_suggestions(palette)
        if palette is not None:
            self.message.emit(f"Suggested colors: {', '.join(palette.display())}")

    # === Logo handling ===

    def _on_upload_clicked(self):
        """Handle upload button click."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Logo",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp);;All Files (*)",
        )
        if file_path:
            self.load_logo(file_path)

    def load_logo(self, file_path: str | Path):
        """Read a logo file, embed it and start palette extraction."""
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            self.logo_status.setText(f"Error: {e}")
            self.message.emit(f"❌ Could not read logo: {e}")
            return

        self.store.update(logo=data)
        self.logo_status.setText(Path(file_path).name)

        pixmap = QPixmap()
        if pixmap.loadFromData(data):
            self.logo_preview.setPixmap(
                pixmap.scaled(
                    40,
                    40,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation,
                )
            )

        self.extractor.start(data)

    def remove_logo(self):
        """Drop the logo and its suggestions."""
        self.extractor.cancel()
        self.store.update(logo=None)
        self.store.set_palette(None)
        self.logo_preview.clear()

    # === Export ===

    def _on_export_clicked(self):
        settings = self.store.settings
        fmt = settings.export_format
        if self.store.decoration.is_active:
            fmt = ExportFormat.PNG

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save QR Code",
            str(suggested_export_path(self.export_dir, fmt)),
            f"{fmt.value.upper()} Images (*.{fmt.value})",
        )
        if file_path:
            self.set_status("Exporting...", "BUSY")
            self.export_requested.emit(file_path)

    def set_status(self, text: str, state: str = "IDLE"):
        self.status_label.setText(text)
        self.status_label.setStyleSheet(status_stylesheet(state))
