"""Centralized styling constants for the Dot Matrix Studio UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QFont


class ThemeColors:
    """Application theme colors for panels and previews."""

    BACKGROUND_PANEL = "#2a2a2a"
    BORDER_DEFAULT = "gray"
    TEXT_MUTED = "#aaa"
    COPIED = "green"


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)
    CODE = QFont("Courier", 9)


class Sizes:
    """Standard widget sizes and constraints."""

    # Console panel
    CONSOLE_MIN_HEIGHT = 80

    # Image previews
    PREVIEW_MIN_SIZE = (300, 200)

    # Embed code box
    EMBED_MIN_HEIGHT = 120

    # Buttons and controls
    BUTTON_MIN_WIDTH = 100
    LABEL_MIN_WIDTH = 40


COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes


def panel_stylesheet() -> str:
    """Generate standard panel stylesheet with border and background.

    Returns:
        CSS stylesheet string for panel styling
    """
    return (
        f"border: 1px solid {ThemeColors.BORDER_DEFAULT}; "
        f"background-color: {ThemeColors.BACKGROUND_PANEL};"
    )


def swatch_stylesheet(color: str) -> str:
    """Stylesheet for a color picker button showing its current color."""
    return f"background-color: {color}; border: 1px solid {ThemeColors.BORDER_DEFAULT};"
