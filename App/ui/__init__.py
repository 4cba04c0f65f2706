"""UI components for the Dot Matrix Studio.

This package contains modular UI panels that can be easily rearranged
in the application layout.
"""

from ui.console_panel import ConsolePanel
from ui.embed_panel import EmbedPanel
from ui.main_window import DotMatrixWindow

__all__ = [
    "DotMatrixWindow",
    "ConsolePanel",
    "EmbedPanel",
]
