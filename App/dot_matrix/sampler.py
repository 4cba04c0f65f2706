"""Grid sampling: turns a pixel buffer into a sequence of styled dots.

AIDEV-NOTE: This is the single computation shared by every renderer. Both
the raster and vector outputs consume the cells produced here, so any
change to the math below changes both outputs identically.
"""

import math
from typing import Iterator

from models import (
    ALPHA_SKIP_THRESHOLD,
    BW_THRESHOLD,
    MIN_DOT_SIZE,
    SIZE_RANGE_MIN,
    SIZE_RANGE_SPAN,
    CellRecord,
    ColorMode,
    DotMatrixParams,
    GridGeometry,
    PixelBuffer,
)

WHITE = "#ffffff"
BLACK = "#000000"


def compute_geometry(width: int, height: int, spacing: int) -> GridGeometry:
    """Compute grid columns/rows covering a width x height source.

    The output area is a whole number of cells, so it may exceed the
    source by up to spacing - 1 pixels on each axis.
    """
    return GridGeometry(
        cols=math.ceil(width / spacing),
        rows=math.ceil(height / spacing),
        spacing=spacing,
    )


def compute_brightness(r: int, g: int, b: int) -> float:
    """Perceptual luma (0-255) of an RGB sample."""
    return r * 0.299 + g * 0.587 + b * 0.114


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def compute_dot_size(
    brightness: float, base_dot_size: float, size_by_brightness: bool
) -> float:
    """Get the dot diameter for a sample.

    Args:
        brightness: Sample luma (0-255)
        base_dot_size: Nominal diameter
        size_by_brightness: Scale darker samples up when True

    Returns:
        Diameter in output units. When scaling, black maps to the full base
        size and white to 30% of it, never below MIN_DOT_SIZE.
    """
    if not size_by_brightness:
        return base_dot_size

    size_factor = 1 - brightness / 255
    scale = SIZE_RANGE_MIN + size_factor * SIZE_RANGE_SPAN
    return max(MIN_DOT_SIZE, base_dot_size * scale)


def resolve_fill_color(
    color_mode: ColorMode,
    rgb: "tuple[int, int, int]",
    brightness: float,
    custom_color: str,
) -> str:
    """Get the fill color string for a sample.

    Args:
        color_mode: Active color mode
        rgb: Sampled RGB channels (0-255 each)
        brightness: Luma of the sample, see compute_brightness()
        custom_color: Color string used verbatim in CUSTOM mode

    Returns:
        Color string shared by the raster and vector renderers
    """
    if color_mode == ColorMode.GRAYSCALE:
        level = round_half_up(brightness)
        return f"rgb({level},{level},{level})"
    elif color_mode == ColorMode.BLACK_WHITE:
        # Exactly BW_THRESHOLD stays black
        return WHITE if brightness > BW_THRESHOLD else BLACK
    elif color_mode == ColorMode.CUSTOM:
        return custom_color

    r, g, b = rgb
    return f"rgb({r},{g},{b})"


def diamond_points(cell: CellRecord) -> "list[tuple[float, float]]":
    """Get diamond vertices in drawing order: top, right, bottom, left."""
    x, y, r = cell.x, cell.y, cell.radius
    return [(x, y - r), (x + r, y), (x, y + r), (x - r, y)]


def sample_grid(buffer: PixelBuffer, params: DotMatrixParams) -> Iterator[CellRecord]:
    """Walk the grid row by row and yield one CellRecord per visible cell.

    Args:
        buffer: Source RGBA pixels
        params: Parameter set for this generation

    Yields:
        CellRecord objects in row-major order (row outer, column inner).
        Cells whose sample is nearly transparent are skipped.

    AIDEV-NOTE: Point sampling at the top-left corner of each cell, clamped
    into the buffer. The generator is pure: running it again with the same
    inputs yields identical records.
    """
    spacing = params.spacing
    width, height = buffer.width, buffer.height
    geometry = compute_geometry(width, height, spacing)
    pixels = buffer.pixels
    half = spacing / 2

    for row in range(geometry.rows):
        sample_y = min(math.floor(row * spacing), height - 1)
        y = row * spacing + half

        for col in range(geometry.cols):
            sample_x = min(math.floor(col * spacing), width - 1)

            r, g, b, a = (int(c) for c in pixels[sample_y, sample_x])
            if a < ALPHA_SKIP_THRESHOLD:
                continue

            brightness = compute_brightness(r, g, b)
            size = compute_dot_size(
                brightness, params.base_dot_size, params.size_by_brightness
            )
            fill_color = resolve_fill_color(
                params.color_mode, (r, g, b), brightness, params.custom_color
            )

            yield CellRecord(
                x=col * spacing + half,
                y=y,
                radius=size / 2,
                fill_color=fill_color,
                shape=params.shape,
            )
