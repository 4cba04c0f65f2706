"""Dot Matrix Studio - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import DotMatrixWindow


def main():
    """Launch the Dot Matrix Studio application.

    An image path given on the command line is loaded at startup.
    """
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Dot Matrix Studio")
    app.setApplicationName("DotMatrixStudio")

    window = DotMatrixWindow()
    window.show()

    if len(sys.argv) > 1:
        window.load_image(sys.argv[1])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
