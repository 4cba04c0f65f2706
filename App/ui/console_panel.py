"""Console output panel."""

import html
import time

from PyQt6.QtWidgets import QGroupBox, QPushButton, QTextEdit, QVBoxLayout

from ui.styles import FONTS, SIZES


class ConsolePanel(QGroupBox):
    """Panel listing timestamped generation and error messages."""

    def __init__(self, parent=None):
        super().__init__("Console", parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout()

        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.log_view.setFont(FONTS.CONSOLE)
        layout.addWidget(self.log_view)

        clear_btn = QPushButton("Clear Console")
        clear_btn.clicked.connect(self.log_view.clear)
        layout.addWidget(clear_btn)

        self.setLayout(layout)

    def log(self, message: str):
        """Add an informational message."""
        self._append(html.escape(message))

    def error(self, message: str):
        """Add an error message, shown in red."""
        self._append(f'<span style="color: red;">{html.escape(message)}</span>')

    def _append(self, markup: str):
        stamp = time.strftime("%H:%M:%S")
        self.log_view.append(f"[{stamp}] {markup}")
        # Keep newest message visible
        scrollbar = self.log_view.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())
