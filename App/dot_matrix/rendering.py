"""Raster rendering of sampled cells.

AIDEV-NOTE: Renderers share one capability: render(cells, geometry) returns
an artifact. RasterRenderer paints onto a PIL image, VectorRenderer (see
svg_writer) builds SVG markup. Both must treat cells identically.
"""

import base64
import io
from typing import Iterable, Protocol, TypeVar

from PIL import Image, ImageDraw

from models import CellRecord, DotShape, GridGeometry

from .sampler import diamond_points

ArtifactT = TypeVar("ArtifactT", covariant=True)


class Renderer(Protocol[ArtifactT]):
    """Anything that turns a cell sequence into an output artifact."""

    def render(
        self, cells: Iterable[CellRecord], geometry: GridGeometry
    ) -> ArtifactT: ...


class RasterRenderer:
    """Paints cells onto a PIL RGB image."""

    def __init__(self, background_color: str):
        self.background_color = background_color

    def render(
        self, cells: Iterable[CellRecord], geometry: GridGeometry
    ) -> Image.Image:
        """Render cells to a new image.

        Args:
            cells: Cell records in row-major order
            geometry: Grid geometry defining the output size

        Returns:
            RGB image of size output_width x output_height
        """
        image = Image.new(
            "RGB",
            (geometry.output_width, geometry.output_height),
            self.background_color,
        )
        draw = ImageDraw.Draw(image)

        # Paint in sequence order so overpaint is deterministic
        for cell in cells:
            self.draw_cell(draw, cell)

        return image

    @staticmethod
    def draw_cell(draw: ImageDraw.ImageDraw, cell: CellRecord):
        """Paint a single filled shape centered on the cell."""
        x, y, r = cell.x, cell.y, cell.radius
        # PIL boxes include the far edge; shift it in so the shape spans 2r pixels
        x0, y0 = x - r, y - r
        bbox = [x0, y0, max(x0, x + r - 1), max(y0, y + r - 1)]

        if cell.shape == DotShape.SQUARE:
            draw.rectangle(bbox, fill=cell.fill_color)
        elif cell.shape == DotShape.DIAMOND:
            draw.polygon(diamond_points(cell), fill=cell.fill_color)
        else:
            draw.ellipse(bbox, fill=cell.fill_color)


def image_to_png_bytes(image: Image.Image) -> bytes:
    """Encode an image as PNG."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def image_to_data_uri(image: Image.Image) -> str:
    """Encode an image as a base64 PNG data URI."""
    encoded = base64.b64encode(image_to_png_bytes(image)).decode("ascii")
    return f"data:image/png;base64,{encoded}"
