"""Data models and constants for the Dot Matrix Studio."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from PIL import Image

# AIDEV-NOTE: Sampling constants - changing these changes every output
ALPHA_SKIP_THRESHOLD = 10  # Samples with alpha below this are not drawn
BW_THRESHOLD = 128.0  # Brightness strictly above this is white
MIN_DOT_SIZE = 1.0  # Floor for brightness-scaled dots
SIZE_RANGE_MIN = 0.3  # Brightest sample gets 30% of the base size
SIZE_RANGE_SPAN = 0.7  # Added on top of the minimum for a black sample

# Preview bounds used when fitting a loaded image for sampling
PREVIEW_MAX_WIDTH = 600
PREVIEW_MAX_HEIGHT = 500

# Configuration file path
CONFIG_FILE = Path.home() / ".dotmatrix_config.json"


class ColorMode(Enum):
    """How each dot's fill color is derived from its sample."""

    COLOR = "color"  # Sampled RGB as-is
    GRAYSCALE = "grayscale"  # Luma replicated to all channels
    BLACK_WHITE = "blackwhite"  # Thresholded luma
    CUSTOM = "custom"  # Single configured color


class DotShape(Enum):
    """Primitive drawn for each grid cell."""

    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"


class EmbedFormat(Enum):
    """Embed code formats offered for a generated result."""

    SVG = "svg"
    HTML = "html"
    DATA_URL = "dataurl"


@dataclass(frozen=True)
class DotMatrixParams:
    """Parameter set for a single generation request.

    AIDEV-NOTE: Built once per request and passed explicitly to the sampler.
    Never mutated; use dataclasses.replace() to derive a changed copy.
    """

    spacing: int = 8  # Grid pitch in source pixels
    base_dot_size: float = 6.0  # Nominal dot diameter
    color_mode: ColorMode = ColorMode.BLACK_WHITE
    custom_color: str = "#000000"  # Used only in CUSTOM mode
    background_color: str = "#000000"
    shape: DotShape = DotShape.CIRCLE
    size_by_brightness: bool = True


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Decoded RGBA pixels, row-major, shape (height, width, 4)."""

    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(
                f"Expected (height, width, 4) RGBA array, got {self.pixels.shape}"
            )
        # Read-only view: the caller's array stays writeable
        pixels = self.pixels.view()
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def from_image(cls, image: "Image.Image") -> "PixelBuffer":
        """Build a buffer from any PIL image (converted to RGBA)."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(np.array(image, dtype=np.uint8))

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        """Build a buffer from raw row-major RGBA bytes."""
        array = np.frombuffer(data, dtype=np.uint8).reshape(height, width, 4)
        return cls(array.copy())


@dataclass(frozen=True)
class GridGeometry:
    """Grid dimensions derived from source size and spacing."""

    cols: int
    rows: int
    spacing: int

    @property
    def output_width(self) -> int:
        return self.cols * self.spacing

    @property
    def output_height(self) -> int:
        return self.rows * self.spacing

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows


@dataclass(frozen=True)
class CellRecord:
    """One styled dot produced by the grid sampler.

    AIDEV-NOTE: Coordinates are in output space. fill_color is the exact
    string both renderers use (e.g. "rgb(76,76,76)", "#ffffff").
    """

    x: float
    y: float
    radius: float
    fill_color: str
    shape: DotShape


@dataclass
class DotMatrixResult:
    """Result of one generation pass."""

    params: DotMatrixParams
    geometry: GridGeometry

    # Cells in row-major emission order
    cells: "tuple[CellRecord, ...]"

    # Rendered artifacts, both built from the same cells
    image: "Image.Image"
    svg_markup: str

    # Source dimensions (pixels) that were sampled
    source_width: int = 0
    source_height: int = 0

    @property
    def skipped_count(self) -> int:
        """Number of grid cells skipped due to transparency."""
        return self.geometry.cell_count - len(self.cells)


@dataclass
class AppSettings:
    """Persisted user defaults for the generator controls."""

    spacing: int = 8
    dot_size: float = 6.0
    color_mode: str = ColorMode.BLACK_WHITE.value
    custom_color: str = "#000000"
    background_color: str = "#000000"
    shape: str = DotShape.CIRCLE.value
    size_by_brightness: bool = True
    embed_format: str = EmbedFormat.SVG.value

    # Directory the file dialog opens in
    last_directory: str = ""

    def to_params(self) -> DotMatrixParams:
        """Build the parameter set described by these settings."""
        return DotMatrixParams(
            spacing=int(self.spacing),
            base_dot_size=float(self.dot_size),
            color_mode=ColorMode(self.color_mode),
            custom_color=self.custom_color,
            background_color=self.background_color,
            shape=DotShape(self.shape),
            size_by_brightness=bool(self.size_by_brightness),
        )

    @classmethod
    def from_params(
        cls, params: DotMatrixParams, embed_format: EmbedFormat = EmbedFormat.SVG
    ) -> "AppSettings":
        return cls(
            spacing=params.spacing,
            dot_size=params.base_dot_size,
            color_mode=params.color_mode.value,
            custom_color=params.custom_color,
            background_color=params.background_color,
            shape=params.shape.value,
            size_by_brightness=params.size_by_brightness,
            embed_format=embed_format.value,
        )
