"""Utility functions for loading and preparing source images.

AIDEV-NOTE: Everything here sits in front of the sampler: decoding files,
fitting them to the preview area and checking color strings. The sampler
itself never touches the filesystem.
"""

from pathlib import Path

from PIL import Image, ImageColor, UnidentifiedImageError

from models import PREVIEW_MAX_HEIGHT, PREVIEW_MAX_WIDTH


def load_image(file_path: "str | Path") -> Image.Image:
    """Load and validate an image file.

    Args:
        file_path: Path to image file (PNG, JPG, etc.)

    Returns:
        PIL Image in RGBA mode

    Raises:
        ValueError: If file cannot be loaded or is not an image
    """
    try:
        with Image.open(file_path) as image:
            # AIDEV-NOTE: Always convert to RGBA so alpha is available for skipping
            return image.convert("RGBA")
    except (OSError, UnidentifiedImageError) as e:
        raise ValueError(f"Failed to load image: {e}") from e


def fit_image(
    image: Image.Image,
    max_width: int = PREVIEW_MAX_WIDTH,
    max_height: int = PREVIEW_MAX_HEIGHT,
) -> "tuple[Image.Image, float]":
    """Scale image down to fit within bounds while maintaining aspect ratio.

    Args:
        image: Input PIL image
        max_width: Maximum width in pixels
        max_height: Maximum height in pixels

    Returns:
        Tuple of (fitted image, scale factor). Images already inside the
        bounds are returned unchanged with a scale of 1.0.
    """
    orig_width, orig_height = image.size

    if orig_width <= max_width and orig_height <= max_height:
        return image, 1.0

    scale = min(max_width / orig_width, max_height / orig_height)
    new_width = max(1, int(orig_width * scale))
    new_height = max(1, int(orig_height * scale))

    scaled_image = image.resize((new_width, new_height), Image.Resampling.LANCZOS)
    return scaled_image, scale


def is_valid_color(color: str) -> bool:
    """Check whether a color string can be drawn by both renderers."""
    try:
        ImageColor.getrgb(color)
    except ValueError:
        return False
    return True


def color_to_hex(color: str) -> str:
    """Normalize any supported color string to #rrggbb.

    Raises:
        ValueError: If the color string is not recognized
    """
    r, g, b = ImageColor.getrgb(color)[:3]
    return f"#{r:02x}{g:02x}{b:02x}"
