import numpy as np
import pytest

from models import PixelBuffer


@pytest.fixture
def make_buffer():
    """Factory for solid-color RGBA buffers of a given size."""

    def _make(width, height, rgba=(255, 0, 0, 255)):
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = rgba
        return PixelBuffer(pixels)

    return _make


@pytest.fixture
def gradient_buffer():
    """8x6 buffer with varied colors and a few transparent pixels."""
    pixels = np.zeros((6, 8, 4), dtype=np.uint8)
    for y in range(6):
        for x in range(8):
            pixels[y, x] = (x * 30, y * 40, (x + y) * 15, 255)
    pixels[0, 2, 3] = 0
    pixels[4, 6, 3] = 5
    return PixelBuffer(pixels)
