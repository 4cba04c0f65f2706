"""SVG serialization of sampled cells."""

from decimal import ROUND_HALF_UP, Decimal
from itertools import chain
from typing import Iterable

import svg

from models import CellRecord, DotShape, GridGeometry

from .sampler import diamond_points


ONE_DECIMAL = Decimal("0.1")


def fixed(value: float) -> float:
    """Round a coordinate to one decimal place, ties away from zero.

    The exact binary value is quantized, so 2.25 becomes 2.3 while 0.35
    (stored just below) becomes 0.3.
    """
    return float(Decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


def cell_to_element(cell: CellRecord) -> svg.Element:
    """Convert one cell to its SVG primitive.

    Args:
        cell: Cell record to convert

    Returns:
        svg.Circle, svg.Rect (square) or svg.Polygon (diamond)
    """
    x, y, r = cell.x, cell.y, cell.radius

    if cell.shape == DotShape.SQUARE:
        return svg.Rect(
            x=fixed(x - r),
            y=fixed(y - r),
            width=fixed(r * 2),
            height=fixed(r * 2),
            fill=cell.fill_color,
        )
    elif cell.shape == DotShape.DIAMOND:
        # Flatten points for SVG Polygon
        points: list[float] = [
            fixed(v) for v in chain.from_iterable(diamond_points(cell))
        ]
        return svg.Polygon(
            points=points,  # type: ignore[arg-type]
            fill=cell.fill_color,
        )

    return svg.Circle(cx=fixed(x), cy=fixed(y), r=fixed(r), fill=cell.fill_color)


class VectorRenderer:
    """Builds an SVG document from cells without touching any raster surface."""

    def __init__(self, background_color: str):
        self.background_color = background_color

    def render(self, cells: Iterable[CellRecord], geometry: GridGeometry) -> str:
        """Render cells to SVG markup.

        Args:
            cells: Cell records in row-major order
            geometry: Grid geometry defining the viewport

        Returns:
            SVG content as string

        AIDEV-NOTE: The background rect is always the first element, then one
        primitive per cell in sequence order (document order is z-order).
        """
        width = geometry.output_width
        height = geometry.output_height

        elements: list[svg.Element] = [
            svg.Rect(x=0, y=0, width=width, height=height, fill=self.background_color)
        ]
        elements.extend(cell_to_element(cell) for cell in cells)

        document = svg.SVG(
            viewBox=svg.ViewBoxSpec(0, 0, width, height),
            width=width,
            height=height,
            elements=elements,
        )
        return document.as_str()
