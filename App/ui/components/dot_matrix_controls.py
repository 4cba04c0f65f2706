"""Dot matrix generation controls component."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QCheckBox, QVBoxLayout, QWidget

from models import ColorMode, DotMatrixParams, DotShape
from ui.widgets import ColorButton, WidgetFactory


class DotMatrixControlsWidget(QWidget):
    """Controls for the dot matrix parameters.

    This component provides UI controls for:
    - Dot size and grid spacing (sliders)
    - Color mode, with a custom color shown only in custom mode
    - Background color
    - Dot shape
    - Size by brightness toggle

    AIDEV-NOTE: The widget never shares a mutable config. Every change
    emits a freshly built DotMatrixParams. Slider drags use slider_moved so
    the owner can debounce them; all other controls use params_changed.
    """

    # Emitted with a DotMatrixParams when a discrete control changes
    params_changed = pyqtSignal(object)
    # Emitted with a DotMatrixParams on every slider step
    slider_moved = pyqtSignal(object)

    def __init__(self, params: DotMatrixParams, parent=None):
        """Initialize controls.

        Args:
            params: Initial parameter values
            parent: Parent widget
        """
        super().__init__(parent)
        self._setup_ui(params)
        self._connect_signals()

    def _setup_ui(self, params: DotMatrixParams):
        """Create and layout UI controls."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        # Dot size slider with auto-updating label
        self.dot_size_slider, self.dot_size_label = WidgetFactory.create_slider_with_label(
            range_min=1,
            range_max=30,
            value=int(params.base_dot_size),
            tooltip="Nominal dot diameter in pixels",
        )
        dot_size_row = WidgetFactory.create_labeled_row("Dot Size:", self.dot_size_slider)
        dot_size_row.addWidget(self.dot_size_label)
        layout.addLayout(dot_size_row)

        # Spacing slider
        self.spacing_slider, self.spacing_label = WidgetFactory.create_slider_with_label(
            range_min=2,
            range_max=50,
            value=params.spacing,
            tooltip="Distance between dot centers in pixels",
        )
        spacing_row = WidgetFactory.create_labeled_row("Spacing:", self.spacing_slider)
        spacing_row.addWidget(self.spacing_label)
        layout.addLayout(spacing_row)

        self.color_mode_combo = WidgetFactory.create_enum_combo(
            ColorMode, params.color_mode, tooltip="How dot colors are chosen"
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Color Mode:", self.color_mode_combo))

        # Custom color row, only visible in custom mode
        self.custom_color_row = QWidget()
        self.custom_color_btn = ColorButton(params.custom_color)
        custom_layout = WidgetFactory.create_labeled_row("Dot Color:", self.custom_color_btn)
        custom_layout.setContentsMargins(0, 0, 0, 0)
        self.custom_color_row.setLayout(custom_layout)
        layout.addWidget(self.custom_color_row)

        self.background_btn = ColorButton(params.background_color)
        layout.addLayout(WidgetFactory.create_labeled_row("Background:", self.background_btn))

        self.shape_combo = WidgetFactory.create_enum_combo(
            DotShape, params.shape, tooltip="Shape drawn for each cell"
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Shape:", self.shape_combo))

        self.size_by_brightness_check = QCheckBox("Size by brightness")
        self.size_by_brightness_check.setChecked(params.size_by_brightness)
        self.size_by_brightness_check.setToolTip("Darker areas get larger dots")
        layout.addWidget(self.size_by_brightness_check)

        layout.addStretch()
        self.setLayout(layout)
        self._update_custom_color_visibility()

    def _connect_signals(self):
        """Connect widget signals to parameter notifications."""
        self.dot_size_slider.valueChanged.connect(
            lambda _: self.slider_moved.emit(self.current_params())
        )
        self.spacing_slider.valueChanged.connect(
            lambda _: self.slider_moved.emit(self.current_params())
        )

        self.color_mode_combo.currentIndexChanged.connect(self._on_color_mode_changed)
        self.shape_combo.currentIndexChanged.connect(self._emit_params)
        self.custom_color_btn.color_changed.connect(self._emit_params)
        self.background_btn.color_changed.connect(self._emit_params)
        self.size_by_brightness_check.toggled.connect(self._emit_params)

    def _on_color_mode_changed(self, _index: int):
        self._update_custom_color_visibility()
        self._emit_params()

    def _update_custom_color_visibility(self):
        is_custom = self.color_mode_combo.currentData() == ColorMode.CUSTOM
        self.custom_color_row.setVisible(is_custom)

    def _emit_params(self, *_args):
        self.params_changed.emit(self.current_params())

    def current_params(self) -> DotMatrixParams:
        """Build a parameter set from the current control values."""
        return DotMatrixParams(
            spacing=self.spacing_slider.value(),
            base_dot_size=float(self.dot_size_slider.value()),
            color_mode=self.color_mode_combo.currentData(),
            custom_color=self.custom_color_btn.color(),
            background_color=self.background_btn.color(),
            shape=self.shape_combo.currentData(),
            size_by_brightness=self.size_by_brightness_check.isChecked(),
        )

    def set_params(self, params: DotMatrixParams):
        """Show the given values without emitting change signals."""
        widgets = [
            self.dot_size_slider,
            self.spacing_slider,
            self.color_mode_combo,
            self.shape_combo,
            self.size_by_brightness_check,
        ]
        for widget in widgets:
            widget.blockSignals(True)

        self.dot_size_slider.setValue(int(params.base_dot_size))
        self.spacing_slider.setValue(params.spacing)
        self.color_mode_combo.setCurrentIndex(self.color_mode_combo.findData(params.color_mode))
        self.shape_combo.setCurrentIndex(self.shape_combo.findData(params.shape))
        self.size_by_brightness_check.setChecked(params.size_by_brightness)
        self.custom_color_btn.set_color(params.custom_color)
        self.background_btn.set_color(params.background_color)

        for widget in widgets:
            widget.blockSignals(False)

        # Labels are connected to valueChanged, which was blocked
        self.dot_size_label.setText(str(self.dot_size_slider.value()))
        self.spacing_label.setText(str(self.spacing_slider.value()))
        self._update_custom_color_visibility()
