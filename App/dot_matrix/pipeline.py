"""Generation pipeline: parameter change -> run core -> notify consumers.

AIDEV-NOTE: Output consumers (preview updater, embed code panel, console)
subscribe once. Every regeneration builds one result and hands the same
object to each consumer, in subscription order. Rate limiting of bursty
input belongs to the caller (the UI uses a single-shot QTimer).
"""

from typing import Callable

from models import DotMatrixParams, DotMatrixResult, PixelBuffer

from .processor import DEFAULT_MAX_CELLS, DotMatrixProcessor

ResultCallback = Callable[[DotMatrixResult], None]


class GenerationPipeline:
    """Holds the current inputs and pushes each new result to subscribers."""

    def __init__(
        self,
        params: DotMatrixParams | None = None,
        max_cells: int = DEFAULT_MAX_CELLS,
    ):
        self.params = params or DotMatrixParams()
        self.max_cells = max_cells
        self.buffer: PixelBuffer | None = None
        self.last_result: DotMatrixResult | None = None
        self._subscribers: list[ResultCallback] = []

    def subscribe(self, callback: ResultCallback):
        """Register a consumer called with every new result."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ResultCallback):
        self._subscribers.remove(callback)

    @property
    def has_image(self) -> bool:
        return self.buffer is not None

    def set_image(self, buffer: PixelBuffer) -> DotMatrixResult | None:
        """Replace the source image and regenerate."""
        self.buffer = buffer
        return self.regenerate()

    def update_params(self, params: DotMatrixParams) -> DotMatrixResult | None:
        """Replace the parameter set and regenerate if an image is loaded."""
        self.params = params
        return self.regenerate()

    def regenerate(self) -> DotMatrixResult | None:
        """Run the core once and notify every subscriber.

        Returns:
            The new result, or None when no image is loaded

        Raises:
            ValueError: If the parameter set is invalid. Subscribers are not
                notified and the previous result is kept.
        """
        if self.buffer is None:
            return None

        processor = DotMatrixProcessor(self.params, max_cells=self.max_cells)
        result = processor.generate(self.buffer)
        self.last_result = result

        for callback in list(self._subscribers):
            callback(result)

        return result

    def clear(self):
        """Drop the current image and result."""
        self.buffer = None
        self.last_result = None
