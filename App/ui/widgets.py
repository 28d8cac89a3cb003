"""Widget factory and small reusable widgets for the configurator panels.

This module provides factory functions to eliminate repetitive widget creation
code throughout the UI components.
"""

from typing import Optional, Tuple

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QButtonGroup,
    QColorDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSlider,
    QSpinBox,
    QWidget,
)

from models import ExtractedPalette
from ui.styles import FONTS, SIZES, swatch_stylesheet, toggle_button_stylesheet


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_int_spinbox(
        range_min: int,
        range_max: int,
        value: int,
        suffix: str = "",
        step: int = 1,
        tooltip: str = "",
    ) -> QSpinBox:
        """Create a configured QSpinBox.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            value: Initial value
            suffix: Suffix text
            step: Single step increment
            tooltip: Tooltip text

        Returns:
            Configured QSpinBox
        """
        spinbox = QSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        spinbox.setSingleStep(step)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_slider_with_label(
        range_min: int,
        range_max: int,
        value: int,
        label_width: int = SIZES.LABEL_MIN_WIDTH,
        label_format: str = "{}",
        tick_interval: Optional[int] = None,
        tooltip: str = "",
    ) -> Tuple[QSlider, QLabel]:
        """Create a horizontal slider with an auto-updating value label.

        Args:
            range_min: Minimum slider value
            range_max: Maximum slider value
            value: Initial value
            label_width: Minimum width for label
            label_format: Format string for label (use {} for value placeholder)
            tick_interval: Tick mark interval (None = no ticks)
            tooltip: Tooltip text

        Returns:
            Tuple of (slider, label)
        """
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(range_min, range_max)
        slider.setValue(value)
        if tooltip:
            slider.setToolTip(tooltip)

        if tick_interval:
            slider.setTickPosition(QSlider.TickPosition.TicksBelow)
            slider.setTickInterval(tick_interval)

        label = QLabel(label_format.format(value))
        label.setMinimumWidth(label_width)

        # Auto-connect slider to label
        slider.valueChanged.connect(lambda v: label.setText(label_format.format(v)))

        return slider, label

    @staticmethod
    def create_labeled_row(
        label_text: str,
        widget: QWidget,
        stretch_after: bool = False,
    ) -> QHBoxLayout:
        """Create a horizontal layout with label and widget."""
        layout = QHBoxLayout()
        layout.addWidget(QLabel(label_text))
        layout.addWidget(widget)
        if stretch_after:
            layout.addStretch()
        return layout

    @staticmethod
    def create_color_swatch(color: str, size: int = SIZES.SWATCH) -> QPushButton:
        """Create a square button painted with a color."""
        swatch = QPushButton()
        swatch.setFixedSize(size, size)
        swatch.setStyleSheet(swatch_stylesheet(color))
        swatch.setToolTip(color.upper())
        swatch.setCursor(Qt.CursorShape.PointingHandCursor)
        return swatch


class ColorPickerRow(QWidget):
    """Color button, hex text field and optional suggestion swatches.

    AIDEV-NOTE: Hex text is passed through as typed; validating it is
    the renderer's concern, which falls back to black for bad input.
    """

    color_changed = pyqtSignal(str)

    def __init__(self, color: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._color = color
        self._palette: Optional[ExtractedPalette] = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.pick_btn = WidgetFactory.create_color_swatch(self._color)
        self.pick_btn.clicked.connect(self._on_pick_clicked)
        layout.addWidget(self.pick_btn)

        self.hex_input = QLineEdit(self._color.upper())
        self.hex_input.setMaxLength(7)
        self.hex_input.setFont(FONTS.HEX_INPUT)
        self.hex_input.setFixedWidth(SIZES.HEX_INPUT_WIDTH)
        self.hex_input.textEdited.connect(self._on_text_edited)
        layout.addWidget(self.hex_input)

        self.suggestion_label = QLabel("✦")
        self.suggestion_label.setToolTip("Colors suggested from your logo")
        layout.addWidget(self.suggestion_label)

        self.suggestion_btns = []
        for _ in range(3):
            swatch = WidgetFactory.create_color_swatch("#000000", SIZES.SWATCH_SMALL)
            swatch.clicked.connect(
                lambda _, s=swatch: self._on_text_edited(s.property("swatch_color"))
            )
            layout.addWidget(swatch)
            self.suggestion_btns.append(swatch)

        layout.addStretch()
        self.set_suggestions(None)

    def color(self) -> str:
        return self._color

    def set_color(self, color: str):
        """Update the displayed color without emitting color_changed."""
        self._color = color
        self.pick_btn.setStyleSheet(swatch_stylesheet(color))
        self.pick_btn.setToolTip(color.upper())
        if self.hex_input.text().lower() != color.lower():
            self.hex_input.setText(color.upper())
        self._refresh_suggestions()

    def set_suggestions(self, palette: Optional[ExtractedPalette]):
        """Show or hide the suggested swatches."""
        self._palette = palette
        visible = palette is not None
        self.suggestion_label.setVisible(visible)
        for swatch in self.suggestion_btns:
            swatch.setVisible(visible)
        self._refresh_suggestions()

    def _refresh_suggestions(self):
        if self._palette is None:
            return
        for swatch, color in zip(self.suggestion_btns, self._palette.as_list()):
            active = color.lower() == self._color.lower()
            swatch.setProperty("swatch_color", color)
            swatch.setStyleSheet(swatch_stylesheet(color, active=active))
            swatch.setToolTip(color.upper())

    def _on_pick_clicked(self):
        chosen = QColorDialog.getColor(QColor(self._color), self, "Select Color")
        if chosen.isValid():
            self._on_text_edited(chosen.name())

    def _on_text_edited(self, text: str):
        self.set_color(text)
        self.color_changed.emit(text)


class OptionButtonGroup(QWidget):
    """Row of exclusive checkable buttons bound to enum values."""

    value_changed = pyqtSignal(object)

    def __init__(
        self,
        options: "list[tuple[object, str]]",
        current: object,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: "dict[object, QPushButton]" = {}

        for value, text in options:
            btn = QPushButton(text)
            btn.setCheckable(True)
            btn.setChecked(value == current)
            btn.setStyleSheet(toggle_button_stylesheet())
            btn.clicked.connect(lambda _, v=value: self.value_changed.emit(v))
            self._group.addButton(btn)
            layout.addWidget(btn)
            self._buttons[value] = btn

        layout.addStretch()

    def set_value(self, value: object):
        btn = self._buttons.get(value)
        if btn is not None:
            btn.setChecked(True)


class CollapsibleGroupBox(QGroupBox):
    """A QGroupBox that can be collapsed/expanded by clicking its title.

    The group box uses Qt's built-in checkable feature to provide
    collapse/expand functionality. When unchecked, the content is
    hidden and the box shrinks to just the title bar.
    """

    def __init__(self, title: str = "", parent: Optional[QWidget] = None):
        super().__init__(title, parent)
        self.setCheckable(True)
        self.setChecked(True)  # Start expanded
        self.toggled.connect(self._on_toggled)

    def _on_toggled(self, checked: bool):
        """Show/hide content when the title checkbox is toggled."""
        layout = self.layout()
        if layout:
            for i in range(layout.count()):
                item = layout.itemAt(i)
                if item:
                    widget = item.widget()
                    if widget:
                        widget.setVisible(checked)

        if checked:
            self.setMaximumHeight(16777215)  # Qt's default QWIDGETSIZE_MAX
        else:
            self.setMaximumHeight(30)  # Just show title bar
