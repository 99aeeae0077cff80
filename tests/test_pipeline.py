import numpy as np
import pytest

from gpdviewer.errors import IndexOutOfRangeError, UnknownPaletteError
from gpdviewer.model.colormap import evaluate
from gpdviewer.model.extent import scan_extent
from gpdviewer.model.ndview import NDView
from gpdviewer.model.pipeline import SlicePipeline

XI = np.array([10.0, 20.0, 30.0])
Q2 = np.array([1000.0, 2000.0])
SHAPE = (2, 3, 2, 2)


def make_pipeline(flat, palette="jet"):
    view = NDView(flat, SHAPE)
    return SlicePipeline(
        view, XI, Q2,
        gpd_extent=scan_extent(flat),
        xi_extent=scan_extent(XI),
        Q2_extent=scan_extent(Q2),
        palette=palette,
    )


@pytest.fixture
def pipeline():
    return make_pipeline(np.arange(24, dtype=float))


def test_cells_are_ordered_q2_outer_xi_inner(pipeline):
    grid = pipeline.build(0, 0)

    assert len(grid) == 6
    assert [(c.Q2_index, c.xi_index) for c in grid] == [
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)
    ]


def test_heights_follow_the_view(pipeline):
    grid = pipeline.build(1, 1)
    view = pipeline.view

    for cell in grid:
        raw = view.get(1, cell.xi_index, 1, cell.Q2_index)
        assert cell.normalized_height == pytest.approx(raw / 23.0)
        assert cell.rgb == evaluate("jet", raw / 23.0)


def test_axis_coordinates_are_normalized(pipeline):
    points = pipeline.build(0, 0).points

    np.testing.assert_allclose(points[:, 0], [0.0, 0.5, 1.0, 0.0, 0.5, 1.0])
    np.testing.assert_allclose(points[:, 1], [0.0, 0.0, 0.0, 1.0, 1.0, 1.0])


def test_colors_are_scaled_to_unit_range(pipeline):
    colors = pipeline.build(0, 0).colors

    assert colors.shape == (6, 3)
    assert colors.min() >= 0.0 and colors.max() <= 1.0


def test_repeated_builds_are_byte_identical(pipeline):
    first = pipeline.build(1, 0)
    second = pipeline.build(1, 0)

    assert first.tobytes() == second.tobytes()
    np.testing.assert_array_equal(first.points, second.points)


def test_flat_data_gives_mid_heights():
    grid = make_pipeline(np.full(24, 5.0)).build(0, 1)

    assert not np.isnan(grid.height).any()
    np.testing.assert_array_equal(grid.height, np.full(6, 0.5))


def test_grid_arrays_are_read_only(pipeline):
    grid = pipeline.build(0, 0)

    with pytest.raises(ValueError):
        grid.height[0] = 1.0


def test_out_of_range_slice(pipeline):
    with pytest.raises(IndexOutOfRangeError):
        pipeline.build(2, 0)


def test_unknown_palette_fails_early():
    with pytest.raises(UnknownPaletteError):
        make_pipeline(np.arange(24, dtype=float), palette="nope")
