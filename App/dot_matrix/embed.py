"""Embed code generation for finished results."""

from models import DotMatrixResult, EmbedFormat

from .rendering import image_to_data_uri


def html_embed(data_uri: str, width: int, height: int) -> str:
    """Wrap a PNG data URI in an <img> fragment with explicit dimensions."""
    return (
        "<!-- Dot Matrix Image -->\n"
        f'<img src="{data_uri}" alt="Dot Matrix" width="{width}" height="{height}" '
        'style="display: block; max-width: 100%; height: auto;" />'
    )


def generate_embed_code(result: DotMatrixResult, embed_format: EmbedFormat) -> str:
    """Get embed text for a result.

    Args:
        result: Generated dot matrix
        embed_format: SVG markup, HTML <img> fragment or bare data URI

    Returns:
        Text ready to paste into a document
    """
    if embed_format == EmbedFormat.SVG:
        return result.svg_markup

    data_uri = image_to_data_uri(result.image)
    if embed_format == EmbedFormat.HTML:
        return html_embed(
            data_uri,
            result.geometry.output_width,
            result.geometry.output_height,
        )
    return data_uri
