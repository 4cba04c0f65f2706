"""Widget factory for creating common UI patterns with reduced boilerplate.

This module provides factory functions to eliminate repetitive widget creation
code throughout the UI components.
"""

from enum import Enum
from typing import Optional, Tuple, Type

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QColorDialog,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QWidget,
)

from dot_matrix.utils import color_to_hex
from ui.styles import SIZES, swatch_stylesheet


class WidgetFactory:
    """Factory class for creating commonly used widget patterns."""

    @staticmethod
    def create_slider_with_label(
        range_min: int,
        range_max: int,
        value: int,
        label_width: int = SIZES.LABEL_MIN_WIDTH,
        label_format: str = "{}",
        tick_interval: Optional[int] = None,
        orientation: Qt.Orientation = Qt.Orientation.Horizontal,
        tooltip: str = "",
    ) -> Tuple[QSlider, QLabel]:
        """Create a slider with an auto-updating value label.

        The label automatically updates when the slider value changes.

        Args:
            range_min: Minimum slider value
            range_max: Maximum slider value
            value: Initial value
            label_width: Minimum width for label
            label_format: Format string for label (use {} for value placeholder)
            tick_interval: Tick mark interval (None = no ticks)
            orientation: Slider orientation
            tooltip: Tooltip text

        Returns:
            Tuple of (slider, label)
        """
        slider = QSlider(orientation)
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
    def create_enum_combo(
        enum_type: Type[Enum], value: Enum, tooltip: str = ""
    ) -> QComboBox:
        """Create a combo box listing an enum's members.

        Each item's data is the enum member, its text the member name
        in title case (e.g. BLACK_WHITE -> "Black White").
        """
        combo = QComboBox()
        for member in enum_type:
            combo.addItem(member.name.replace("_", " ").title(), member)
        combo.setCurrentIndex(combo.findData(value))
        if tooltip:
            combo.setToolTip(tooltip)
        return combo

    @staticmethod
    def create_labeled_row(
        label_text: str,
        widget: QWidget,
        stretch_after: bool = False,
    ) -> QHBoxLayout:
        """Create a horizontal layout with label and widget.

        Args:
            label_text: Text for the label
            widget: Widget to place after label
            stretch_after: Whether to add stretch after widget

        Returns:
            QHBoxLayout with label and widget
        """
        layout = QHBoxLayout()
        layout.addWidget(QLabel(label_text))
        layout.addWidget(widget)
        if stretch_after:
            layout.addStretch()
        return layout


class ColorButton(QPushButton):
    """Button showing a color swatch that opens a color dialog when clicked."""

    color_changed = pyqtSignal(str)

    def __init__(self, color: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setMinimumWidth(SIZES.BUTTON_MIN_WIDTH)
        self.clicked.connect(self._pick_color)
        self.set_color(color)

    def color(self) -> str:
        return self._color

    def set_color(self, color: str):
        """Set the color without emitting color_changed."""
        self._color = color_to_hex(color)
        self.setText(self._color)
        self.setStyleSheet(swatch_stylesheet(self._color))

    def _pick_color(self):
        chosen = QColorDialog.getColor(QColor(self._color), self, "Select Color")
        if chosen.isValid() and chosen.name() != self._color:
            self.set_color(chosen.name())
            self.color_changed.emit(self._color)
