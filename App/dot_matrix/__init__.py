"""Dot matrix generation from raster images.

AIDEV-NOTE: This package handles the pipeline from a decoded image to a
grid of styled dots. Organized into modular components:
- sampler: Grid walk producing CellRecords (shared by all renderers)
- rendering: Raster renderer (PIL) and PNG/data URI helpers
- svg_writer: Vector renderer (svg.py)
- embed: SVG/HTML/data URI embed code
- processor: Main DotMatrixProcessor orchestrator
- pipeline: Observer pipeline feeding UI consumers
- utils: Image loading, fitting and color helpers
"""

from .embed import generate_embed_code
from .pipeline import GenerationPipeline
from .processor import DotMatrixProcessor
from .rendering import RasterRenderer, image_to_data_uri, image_to_png_bytes
from .sampler import sample_grid
from .svg_writer import VectorRenderer

__all__ = [
    "DotMatrixProcessor",
    "GenerationPipeline",
    "RasterRenderer",
    "VectorRenderer",
    "generate_embed_code",
    "image_to_data_uri",
    "image_to_png_bytes",
    "sample_grid",
]
