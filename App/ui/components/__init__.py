"""UI components package for modular control widgets."""

from ui.components.dot_matrix_controls import DotMatrixControlsWidget

__all__ = [
    "DotMatrixControlsWidget",
]
