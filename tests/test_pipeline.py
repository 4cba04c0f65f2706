import dataclasses

import pytest

from dot_matrix import GenerationPipeline
from models import ColorMode, DotMatrixParams


def test_no_image_means_no_run():
    pipeline = GenerationPipeline()
    seen = []
    pipeline.subscribe(seen.append)

    assert pipeline.regenerate() is None
    assert pipeline.update_params(DotMatrixParams(spacing=3)) is None
    assert seen == []
    assert not pipeline.has_image


def test_consumers_notified_in_order(make_buffer):
    pipeline = GenerationPipeline(DotMatrixParams(spacing=2))
    calls = []
    pipeline.subscribe(lambda result: calls.append(("raster", result)))
    pipeline.subscribe(lambda result: calls.append(("embed", result)))

    result = pipeline.set_image(make_buffer(4, 4))

    assert [name for name, _ in calls] == ["raster", "embed"]
    assert all(r is result for _, r in calls)
    assert pipeline.last_result is result


def test_update_params_regenerates(make_buffer):
    pipeline = GenerationPipeline(DotMatrixParams(spacing=2))
    pipeline.set_image(make_buffer(4, 4))

    params = dataclasses.replace(
        pipeline.params, color_mode=ColorMode.CUSTOM, custom_color="#00ff00"
    )
    result = pipeline.update_params(params)

    assert result.params == params
    assert {c.fill_color for c in result.cells} == {"#00ff00"}


def test_invalid_params_keep_previous_result(make_buffer):
    pipeline = GenerationPipeline(DotMatrixParams(spacing=2))
    first = pipeline.set_image(make_buffer(4, 4))
    seen = []
    pipeline.subscribe(seen.append)

    with pytest.raises(ValueError):
        pipeline.update_params(DotMatrixParams(spacing=0))

    assert seen == []
    assert pipeline.last_result is first


def test_max_cells_passed_through(make_buffer):
    pipeline = GenerationPipeline(DotMatrixParams(spacing=1), max_cells=4)
    with pytest.raises(ValueError, match="exceeds"):
        pipeline.set_image(make_buffer(4, 4))


def test_unsubscribe_and_clear(make_buffer):
    pipeline = GenerationPipeline(DotMatrixParams(spacing=2))
    seen = []
    pipeline.subscribe(seen.append)
    pipeline.set_image(make_buffer(4, 4))
    pipeline.unsubscribe(seen.append)
    pipeline.regenerate()
    assert len(seen) == 1

    pipeline.clear()
    assert pipeline.last_result is None
    assert pipeline.regenerate() is None
