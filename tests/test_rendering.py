import base64

from dot_matrix.rendering import RasterRenderer, image_to_data_uri, image_to_png_bytes
from dot_matrix.sampler import compute_geometry, sample_grid
from models import CellRecord, ColorMode, DotMatrixParams, DotShape

GREEN = (0, 255, 0)
BLACK = (0, 0, 0)


def render(buffer, params):
    geometry = compute_geometry(buffer.width, buffer.height, params.spacing)
    cells = list(sample_grid(buffer, params))
    return RasterRenderer(params.background_color).render(cells, geometry)


def test_surface_matches_grid_size(make_buffer):
    image = render(make_buffer(5, 3), DotMatrixParams(spacing=2))
    assert image.size == (6, 4)
    assert image.mode == "RGB"


def test_transparent_image_is_all_background(make_buffer):
    params = DotMatrixParams(spacing=3, background_color="#123456")
    image = render(make_buffer(7, 5, (255, 255, 255, 0)), params)

    assert image.size == (9, 6)
    assert set(image.getdata()) == {(0x12, 0x34, 0x56)}


def test_circle_painted_at_cell_center(make_buffer):
    params = DotMatrixParams(
        spacing=4,
        base_dot_size=2,
        color_mode=ColorMode.CUSTOM,
        custom_color="#00ff00",
        size_by_brightness=False,
    )
    image = render(make_buffer(4, 4), params)

    assert image.getpixel((2, 2)) == GREEN
    assert image.getpixel((0, 0)) == BLACK


def test_square_fills_its_box(make_buffer):
    params = DotMatrixParams(
        spacing=8,
        base_dot_size=4,
        color_mode=ColorMode.CUSTOM,
        custom_color="#00ff00",
        shape=DotShape.SQUARE,
        size_by_brightness=False,
    )
    image = render(make_buffer(8, 8), params)

    # Side 4 centered at 4 covers pixels 2..5
    assert image.getpixel((2, 2)) == GREEN
    assert image.getpixel((5, 5)) == GREEN
    assert image.getpixel((6, 6)) == BLACK
    assert image.getpixel((1, 1)) == BLACK


def count_color(image, color):
    return sum(1 for pixel in image.getdata() if pixel == color)


def test_square_pixel_count_is_side_squared():
    cell = CellRecord(x=4, y=4, radius=2, fill_color="#00ff00", shape=DotShape.SQUARE)
    image = RasterRenderer("#000000").render([cell], compute_geometry(8, 8, 8))
    assert count_color(image, GREEN) == 16


def test_circle_stays_inside_its_square():
    cell = CellRecord(x=4, y=4, radius=2, fill_color="#00ff00", shape=DotShape.CIRCLE)
    image = RasterRenderer("#000000").render([cell], compute_geometry(8, 8, 8))

    assert 4 <= count_color(image, GREEN) <= 16
    assert image.getpixel((4, 4)) == GREEN
    assert image.getpixel((6, 4)) == BLACK
    assert image.getpixel((4, 6)) == BLACK


def test_squares_do_not_spill_into_neighbors(make_buffer):
    params = DotMatrixParams(
        spacing=4,
        base_dot_size=4,
        color_mode=ColorMode.CUSTOM,
        custom_color="#00ff00",
        shape=DotShape.SQUARE,
        size_by_brightness=False,
    )
    image = render(make_buffer(8, 4), params)

    # Two abutting squares tile the surface exactly
    assert count_color(image, GREEN) == 32


def test_diamond_leaves_corners_empty(make_buffer):
    params = DotMatrixParams(
        spacing=8,
        base_dot_size=6,
        color_mode=ColorMode.CUSTOM,
        custom_color="#00ff00",
        shape=DotShape.DIAMOND,
        size_by_brightness=False,
    )
    image = render(make_buffer(8, 8), params)

    assert image.getpixel((4, 4)) == GREEN
    assert image.getpixel((4, 2)) == GREEN
    assert image.getpixel((1, 1)) == BLACK
    assert image.getpixel((7, 1)) == BLACK


def test_cells_painted_in_sequence_order():
    first = CellRecord(x=4, y=4, radius=3, fill_color="#ff0000", shape=DotShape.SQUARE)
    second = CellRecord(x=4, y=4, radius=2, fill_color="#0000ff", shape=DotShape.SQUARE)
    geometry = compute_geometry(8, 8, 8)

    image = RasterRenderer("#000000").render([first, second], geometry)

    assert image.getpixel((4, 4)) == (0, 0, 255)
    assert image.getpixel((1, 1)) == (255, 0, 0)


def test_grayscale_color_string_is_drawn(make_buffer):
    params = DotMatrixParams(
        spacing=4,
        base_dot_size=4,
        color_mode=ColorMode.GRAYSCALE,
        shape=DotShape.SQUARE,
        size_by_brightness=False,
    )
    image = render(make_buffer(4, 4), params)
    assert image.getpixel((2, 2)) == (76, 76, 76)


def test_png_and_data_uri(make_buffer):
    image = render(make_buffer(4, 4), DotMatrixParams(spacing=2))

    png = image_to_png_bytes(image)
    assert png.startswith(b"\x89PNG\r\n\x1a\n")

    uri = image_to_data_uri(image)
    prefix = "data:image/png;base64,"
    assert uri.startswith(prefix)
    assert base64.b64decode(uri[len(prefix):]) == png
