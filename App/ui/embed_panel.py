"""Embed code panel with format tabs and copy-to-clipboard."""

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QApplication,
    QGroupBox,
    QHBoxLayout,
    QPushButton,
    QTabBar,
    QTextEdit,
    QVBoxLayout,
)

from dot_matrix import generate_embed_code
from models import DotMatrixResult, EmbedFormat
from ui.styles import COLORS, FONTS, SIZES

COPY_LABEL = "Copy Code"
COPIED_LABEL = "✓ Copied!"
COPIED_RESET_MS = 2000

FORMAT_LABELS = {
    EmbedFormat.SVG: "SVG",
    EmbedFormat.HTML: "HTML",
    EmbedFormat.DATA_URL: "Data URL",
}


class EmbedPanel(QGroupBox):
    """Shows embed code for the latest result in the selected format."""

    format_changed = pyqtSignal(object)  # EmbedFormat

    def __init__(self, embed_format: EmbedFormat = EmbedFormat.SVG, parent=None):
        super().__init__("Embed Code", parent)
        self.embed_format = embed_format
        self.result: DotMatrixResult | None = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout()

        self.tabs = QTabBar()
        for embed_format in EmbedFormat:
            index = self.tabs.addTab(FORMAT_LABELS[embed_format])
            self.tabs.setTabData(index, embed_format)
        self.tabs.setCurrentIndex(list(EmbedFormat).index(self.embed_format))
        self.tabs.currentChanged.connect(self._on_tab_changed)
        layout.addWidget(self.tabs)

        self.code_view = QTextEdit()
        self.code_view.setReadOnly(True)
        self.code_view.setFont(FONTS.CODE)
        self.code_view.setMinimumHeight(SIZES.EMBED_MIN_HEIGHT)
        layout.addWidget(self.code_view)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.copy_btn = QPushButton(COPY_LABEL)
        self.copy_btn.setMinimumWidth(SIZES.BUTTON_MIN_WIDTH)
        self.copy_btn.clicked.connect(self.copy_code)
        button_row.addWidget(self.copy_btn)
        layout.addLayout(button_row)

        self.setLayout(layout)

    def show_result(self, result: DotMatrixResult):
        """Pipeline consumer: refresh the code for a new result."""
        self.result = result
        self._refresh()
        self.setVisible(True)

    def clear(self):
        self.result = None
        self.code_view.clear()
        self.setVisible(False)

    def _on_tab_changed(self, index: int):
        self.embed_format = self.tabs.tabData(index)
        self.format_changed.emit(self.embed_format)
        self._refresh()

    def _refresh(self):
        if self.result is None:
            return
        self.code_view.setPlainText(generate_embed_code(self.result, self.embed_format))

    def copy_code(self):
        """Copy the current code and briefly confirm on the button."""
        clipboard = QApplication.clipboard()
        if clipboard is None or self.result is None:
            return

        clipboard.setText(self.code_view.toPlainText())
        self.copy_btn.setText(COPIED_LABEL)
        self.copy_btn.setStyleSheet(f"color: {COLORS.COPIED};")
        QTimer.singleShot(COPIED_RESET_MS, self._reset_copy_button)

    def _reset_copy_button(self):
        self.copy_btn.setText(COPY_LABEL)
        self.copy_btn.setStyleSheet("")
