"""Main application window for dot matrix generation."""

import dataclasses
from pathlib import Path

from PIL import Image
from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QPixmap
from PyQt6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from config_manager import ConfigManager
from dot_matrix import DotMatrixProcessor, GenerationPipeline, image_to_png_bytes
from models import AppSettings, DotMatrixParams, DotMatrixResult, EmbedFormat, PixelBuffer
from ui.components import DotMatrixControlsWidget
from ui.console_panel import ConsolePanel
from ui.embed_panel import EmbedPanel
from ui.styles import SIZES, panel_stylesheet

# AIDEV-NOTE: Trailing-edge debounce for slider drags. Each slider step
# restarts the timer; only the last value in a burst triggers a generation.
SLIDER_DEBOUNCE_MS = 50

IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp);;All Files (*)"
DEFAULT_DOWNLOAD_NAME = "dot-matrix-result.png"


def pixmap_from_image(image: Image.Image) -> QPixmap:
    """Convert a PIL image to a QPixmap via PNG encoding."""
    pixmap = QPixmap()
    pixmap.loadFromData(image_to_png_bytes(image), "PNG")
    return pixmap


class DotMatrixWindow(QMainWindow):
    """Main application window: controls, previews and embed code."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Dot Matrix Studio v0.1.0")
        self.setMinimumSize(1000, 750)

        # Application state
        self.config_manager = ConfigManager()
        self.settings = self.config_manager.load()
        self.pipeline = GenerationPipeline(self.settings.to_params())
        self.pending_params: DotMatrixParams | None = None

        self.debounce_timer = QTimer(self)
        self.debounce_timer.setSingleShot(True)
        self.debounce_timer.setInterval(SLIDER_DEBOUNCE_MS)

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_toolbar()

        central = QWidget()
        layout = QHBoxLayout(central)

        controls_group = QGroupBox("Settings")
        controls_layout = QVBoxLayout()
        self.controls = DotMatrixControlsWidget(self.pipeline.params)
        controls_layout.addWidget(self.controls)
        controls_group.setLayout(controls_layout)
        layout.addWidget(controls_group, stretch=1)

        previews = QVBoxLayout()
        preview_row = QHBoxLayout()
        self.original_label = self._create_preview_label("Original image will appear here")
        self.result_label = self._create_preview_label("Dot matrix will appear here")
        preview_row.addWidget(self.original_label)
        preview_row.addWidget(self.result_label)
        previews.addLayout(preview_row, stretch=2)

        self.embed_panel = EmbedPanel(EmbedFormat(self.settings.embed_format))
        self.embed_panel.setVisible(False)
        previews.addWidget(self.embed_panel, stretch=1)
        layout.addLayout(previews, stretch=3)

        self.setCentralWidget(central)

        self.console_panel = ConsolePanel()
        console_dock = QDockWidget("Console", self)
        console_dock.setWidget(self.console_panel)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, console_dock)

    def _create_toolbar(self):
        """Create the main toolbar with file actions."""
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.open_action = QAction("Open Image...", self)
        toolbar.addAction(self.open_action)

        self.download_action = QAction("Download PNG", self)
        self.download_action.setEnabled(False)
        toolbar.addAction(self.download_action)

        toolbar.addSeparator()

        self.reset_action = QAction("Reset", self)
        toolbar.addAction(self.reset_action)

    def _create_preview_label(self, placeholder: str) -> QLabel:
        label = QLabel(placeholder)
        label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet(panel_stylesheet())
        return label

    def _connect_signals(self):
        """Wire controls -> pipeline -> output consumers."""
        self.open_action.triggered.connect(self._browse_image)
        self.download_action.triggered.connect(self._download_result)
        self.reset_action.triggered.connect(self._reset_all)

        self.controls.params_changed.connect(self._on_params_changed)
        self.controls.slider_moved.connect(self._on_slider_moved)
        self.debounce_timer.timeout.connect(self._apply_pending_params)
        self.embed_panel.format_changed.connect(self._on_embed_format_changed)

        # Output consumers, notified in this order after each generation
        self.pipeline.subscribe(self._show_result)
        self.pipeline.subscribe(self.embed_panel.show_result)
        self.pipeline.subscribe(self._log_result)

    # --- Input handling ---

    def _browse_image(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Select Image", self.settings.last_directory, IMAGE_FILE_FILTER
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path: str):
        """Load, fit and display an image, then generate from it."""
        try:
            image = DotMatrixProcessor(self.pipeline.params).load_image(file_path)
        except ValueError as e:
            self.console_panel.error(str(e))
            QMessageBox.warning(self, "Invalid Image", "Please select a valid image file.")
            return

        self.settings.last_directory = str(Path(file_path).parent)
        self.console_panel.log(
            f"Loaded {Path(file_path).name} ({image.size[0]}x{image.size[1]} px)"
        )
        self._set_preview(self.original_label, pixmap_from_image(image))

        try:
            self.pipeline.set_image(PixelBuffer.from_image(image))
        except ValueError as e:
            self._report_error(e)

    def _on_params_changed(self, params: DotMatrixParams):
        # Discrete controls regenerate immediately and drop any pending drag
        self.debounce_timer.stop()
        self.pending_params = None
        self._apply_params(params)

    def _on_slider_moved(self, params: DotMatrixParams):
        self.pending_params = params
        self.debounce_timer.start()

    def _apply_pending_params(self):
        if self.pending_params is None:
            return
        params, self.pending_params = self.pending_params, None
        self._apply_params(params)

    def _on_embed_format_changed(self, embed_format: EmbedFormat):
        self.settings.embed_format = embed_format.value

    def _apply_params(self, params: DotMatrixParams):
        """Regenerate with new parameters, reporting invalid ones instead of raising."""
        try:
            self.pipeline.update_params(params)
        except ValueError as e:
            self._report_error(e)

    def _report_error(self, error: ValueError):
        self.console_panel.error(str(error))
        self.statusBar().showMessage(str(error), 5000)

    # --- Output consumers ---

    def _show_result(self, result: DotMatrixResult):
        self._set_preview(self.result_label, pixmap_from_image(result.image))
        self.download_action.setEnabled(True)

    def _log_result(self, result: DotMatrixResult):
        geometry = result.geometry
        self.console_panel.log(
            f"Generated {len(result.cells)} dots on {geometry.cols}x{geometry.rows} grid "
            f"({geometry.output_width}x{geometry.output_height} px)"
        )

    def _set_preview(self, label: QLabel, pixmap: QPixmap):
        scaled = pixmap.scaled(
            label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        label.setPixmap(scaled)

    # --- Actions ---

    def _download_result(self):
        result = self.pipeline.last_result
        if result is None:
            return

        default_path = str(Path(self.settings.last_directory) / DEFAULT_DOWNLOAD_NAME)
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Dot Matrix", default_path, "PNG Image (*.png)"
        )
        if not file_path:
            return

        try:
            result.image.save(file_path, format="PNG")
            self.console_panel.log(f"Saved {file_path}")
        except OSError as e:
            self.console_panel.error(f"Could not save image: {e}")
            QMessageBox.critical(self, "Save Failed", str(e))

    def _reset_all(self):
        """Restore default settings and clear the current image."""
        self.debounce_timer.stop()
        self.pending_params = None

        defaults = AppSettings()
        self.pipeline.clear()
        self.pipeline.params = defaults.to_params()
        self.controls.set_params(self.pipeline.params)

        self.original_label.clear()
        self.original_label.setText("Original image will appear here")
        self.result_label.clear()
        self.result_label.setText("Dot matrix will appear here")
        self.embed_panel.clear()
        self.download_action.setEnabled(False)
        self.console_panel.log("Reset to defaults")

    def closeEvent(self, event):
        """Persist the current settings on exit."""
        self.settings = dataclasses.replace(
            AppSettings.from_params(self.pipeline.params, self.embed_panel.embed_format),
            last_directory=self.settings.last_directory,
        )
        success, error = self.config_manager.save(self.settings)
        if not success:
            print(f"Warning: Could not save config file: {error}")
        super().closeEvent(event)
