"""Main dot matrix processor orchestrating the complete pipeline.

AIDEV-NOTE: This module runs load -> fit -> sample -> render. The grid is
sampled exactly once per generation; the raster and vector renderers both
consume that one cell tuple so their outputs always agree.
"""

from pathlib import Path

from PIL import Image

from models import (
    ColorMode,
    DotMatrixParams,
    DotMatrixResult,
    PixelBuffer,
)

from .rendering import RasterRenderer, Renderer
from .sampler import compute_geometry, sample_grid
from .svg_writer import VectorRenderer
from .utils import fit_image, is_valid_color, load_image

# Largest grid a single generation will sample
DEFAULT_MAX_CELLS = 250_000


class DotMatrixProcessor:
    """Converts images into dot matrix renderings."""

    def __init__(
        self,
        params: DotMatrixParams | None = None,
        max_cells: int = DEFAULT_MAX_CELLS,
    ):
        self.params = params or DotMatrixParams()
        self.max_cells = max_cells

    def validate(self):
        """Check the parameter set before any sampling happens.

        Raises:
            ValueError: If spacing or dot size is not positive, or a color
                string cannot be drawn
        """
        params = self.params
        if params.spacing <= 0:
            raise ValueError(f"Spacing must be positive, got {params.spacing}")
        if params.base_dot_size <= 0:
            raise ValueError(
                f"Dot size must be positive, got {params.base_dot_size}"
            )
        if not is_valid_color(params.background_color):
            raise ValueError(
                f"Invalid background color: {params.background_color!r}"
            )
        if params.color_mode == ColorMode.CUSTOM and not is_valid_color(
            params.custom_color
        ):
            raise ValueError(f"Invalid custom color: {params.custom_color!r}")

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load an image file and fit it to the sampling area.

        Args:
            file_path: Path to image file

        Returns:
            RGBA image no larger than the preview bounds

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        image = load_image(file_path)
        fitted, _ = fit_image(image)
        return fitted

    def generate(self, buffer: PixelBuffer) -> DotMatrixResult:
        """Sample the buffer and render both outputs.

        Args:
            buffer: Source RGBA pixels

        Returns:
            DotMatrixResult with cells, raster image and SVG markup

        Raises:
            ValueError: If parameters are invalid or the grid is too large
        """
        self.validate()
        params = self.params

        geometry = compute_geometry(buffer.width, buffer.height, params.spacing)
        if geometry.cell_count > self.max_cells:
            raise ValueError(
                f"Grid of {geometry.cols}x{geometry.rows} cells exceeds the "
                f"limit of {self.max_cells}; increase spacing"
            )

        cells = tuple(sample_grid(buffer, params))

        raster: Renderer[Image.Image] = RasterRenderer(params.background_color)
        vector: Renderer[str] = VectorRenderer(params.background_color)
        image = raster.render(cells, geometry)
        svg_markup = vector.render(cells, geometry)

        return DotMatrixResult(
            params=params,
            geometry=geometry,
            cells=cells,
            image=image,
            svg_markup=svg_markup,
            source_width=buffer.width,
            source_height=buffer.height,
        )

    def process(self, file_path: str | Path) -> DotMatrixResult:
        """Execute complete pipeline from file to rendered result.

        Args:
            file_path: Path to input image

        Returns:
            DotMatrixResult for the fitted image
        """
        print("Starting dot matrix pipeline...")

        print("Loading image...")
        image = self.load_image(file_path)
        print(f"Sampling image of size: {image.size[0]}x{image.size[1]} pixels.")

        result = self.generate(PixelBuffer.from_image(image))

        geometry = result.geometry
        print(
            f"Rendered {len(result.cells)} dots on a {geometry.cols}x{geometry.rows} "
            f"grid ({result.skipped_count} transparent cells skipped)."
        )
        print(
            f"Output size: {geometry.output_width}x{geometry.output_height} pixels."
        )
        return result
