import re
import xml.etree.ElementTree as ET

import pytest

from dot_matrix.sampler import compute_geometry, sample_grid
from dot_matrix.svg_writer import VectorRenderer, fixed
from models import ColorMode, DotMatrixParams, DotShape

ONE_DECIMAL = re.compile(r"^-?\d+(\.\d)?$")


def local_name(element):
    return element.tag.rsplit("}", 1)[-1]


def render(buffer, params):
    geometry = compute_geometry(buffer.width, buffer.height, params.spacing)
    cells = list(sample_grid(buffer, params))
    markup = VectorRenderer(params.background_color).render(cells, geometry)
    return cells, geometry, ET.fromstring(markup)


def element_to_tuple(element):
    """Recover (x, y, radius, fill, shape) from an emitted primitive."""
    name = local_name(element)
    fill = element.get("fill")
    if name == "circle":
        return (
            float(element.get("cx")),
            float(element.get("cy")),
            float(element.get("r")),
            fill,
            DotShape.CIRCLE,
        )
    if name == "rect":
        x, y = float(element.get("x")), float(element.get("y"))
        half = float(element.get("width")) / 2
        assert float(element.get("height")) / 2 == half
        return (x + half, y + half, half, fill, DotShape.SQUARE)
    if name == "polygon":
        values = [float(v) for v in element.get("points").replace(",", " ").split()]
        (top_x, top_y), (right_x, right_y) = (values[0], values[1]), (values[2], values[3])
        return (top_x, right_y, right_x - top_x, fill, DotShape.DIAMOND)
    raise AssertionError(f"unexpected element {name}")


def test_document_viewport(make_buffer):
    _, geometry, root = render(make_buffer(5, 3), DotMatrixParams(spacing=2))

    assert local_name(root) == "svg"
    assert [float(v) for v in root.get("viewBox").split()] == [0, 0, 6, 4]
    assert float(root.get("width")) == geometry.output_width
    assert float(root.get("height")) == geometry.output_height


def test_background_rect_is_first(make_buffer):
    params = DotMatrixParams(spacing=2, background_color="#abcdef")
    _, _, root = render(make_buffer(4, 4), params)

    background = list(root)[0]
    assert local_name(background) == "rect"
    assert background.get("fill") == "#abcdef"
    assert float(background.get("width")) == 4
    assert float(background.get("height")) == 4


@pytest.mark.parametrize("shape", list(DotShape))
def test_primitives_match_cells(gradient_buffer, shape):
    params = DotMatrixParams(
        spacing=2,
        base_dot_size=3,
        color_mode=ColorMode.COLOR,
        shape=shape,
        size_by_brightness=True,
    )
    cells, _, root = render(gradient_buffer, params)
    primitives = [element_to_tuple(e) for e in list(root)[1:]]

    assert len(primitives) == len(cells)
    for cell, (x, y, radius, fill, kind) in zip(cells, primitives):
        assert (fill, kind) == (cell.fill_color, cell.shape)
        assert x == pytest.approx(cell.x, abs=0.15)
        assert y == pytest.approx(cell.y, abs=0.15)
        assert radius == pytest.approx(cell.radius, abs=0.15)


def test_red_grayscale_scenario_markup(make_buffer):
    params = DotMatrixParams(
        spacing=2,
        base_dot_size=4,
        color_mode=ColorMode.GRAYSCALE,
        size_by_brightness=False,
    )
    _, _, root = render(make_buffer(4, 4), params)
    circles = list(root)[1:]

    assert [(float(c.get("cx")), float(c.get("cy"))) for c in circles] == [
        (1, 1),
        (3, 1),
        (1, 3),
        (3, 3),
    ]
    assert {c.get("fill") for c in circles} == {"rgb(76,76,76)"}
    assert {float(c.get("r")) for c in circles} == {2}


def test_custom_color_verbatim(make_buffer):
    params = DotMatrixParams(
        spacing=2, color_mode=ColorMode.CUSTOM, custom_color="#00ff00"
    )
    _, _, root = render(make_buffer(4, 4), params)
    assert {e.get("fill") for e in list(root)[1:]} == {"#00ff00"}


def test_coordinates_have_one_decimal(gradient_buffer):
    params = DotMatrixParams(spacing=3, base_dot_size=5, size_by_brightness=True)
    _, _, root = render(gradient_buffer, params)

    for circle in list(root)[1:]:
        for attr in ("cx", "cy", "r"):
            assert ONE_DECIMAL.match(circle.get(attr)), circle.get(attr)


def test_transparent_cells_emit_nothing(make_buffer):
    _, _, root = render(make_buffer(4, 4, (0, 0, 0, 0)), DotMatrixParams(spacing=2))
    assert len(list(root)) == 1


def test_output_is_deterministic(gradient_buffer):
    params = DotMatrixParams(spacing=2, shape=DotShape.DIAMOND)
    geometry = compute_geometry(gradient_buffer.width, gradient_buffer.height, 2)
    renderer = VectorRenderer(params.background_color)

    first = renderer.render(sample_grid(gradient_buffer, params), geometry)
    second = renderer.render(sample_grid(gradient_buffer, params), geometry)
    assert first == second


def test_fixed_rounds_ties_away_from_zero():
    assert fixed(2.25) == 2.3
    assert fixed(0.25) == 0.3
    assert fixed(-2.25) == -2.3
    assert fixed(0.35) == 0.3
    assert fixed(4) == 4.0
