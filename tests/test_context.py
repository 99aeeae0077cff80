import numpy as np
import pytest

from gpdviewer.errors import IndexOutOfRangeError, UnknownPaletteError
from gpdviewer.model.context import ViewerContext
from gpdviewer.model.extent import Extent


@pytest.fixture
def context(dataset):
    return ViewerContext(dataset)


def test_extents_are_computed_once(context):
    assert context.gpd_extent == Extent(0.0, 23.0)
    assert context.xi_extent == Extent(10.0, 30.0)
    assert context.Q2_extent == Extent(1000.0, 2000.0)


def test_first_tick_renders_initial_slice(context):
    grid = context.tick()

    assert grid is not None
    assert (grid.x_index, grid.t_index) == (0, 0)
    assert context.grid is grid


def test_idle_tick_does_no_work(context):
    context.tick()
    assert context.tick() is None


def test_selection_scenario(context):
    context.tick()

    context.state.select_x(1)
    context.state.select_t(200)
    grid = context.tick()

    assert (grid.x_index, grid.t_index) == (1, 1)
    assert context.tick() is None


def test_failed_slice_keeps_previous_grid(context, monkeypatch):
    previous = context.tick()

    def broken(x_index, t_index):
        raise IndexOutOfRangeError("boom")

    monkeypatch.setattr(context.pipeline, "build", broken)
    context.state.mark_dirty()

    with pytest.raises(IndexOutOfRangeError):
        context.tick()
    assert context.grid is previous


def test_palette_switch_rebuilds_slice(context):
    jet = context.tick()

    context.set_palette("viridis")
    grid = context.tick()

    assert context.palette == "viridis"
    np.testing.assert_array_equal(grid.height, jet.height)
    assert not np.array_equal(grid.rgb, jet.rgb)


def test_unknown_palette_keeps_pipeline(context):
    with pytest.raises(UnknownPaletteError):
        context.set_palette("nope")
    assert context.palette == "jet"


def test_failed_slice_rolls_back_selection(context, monkeypatch):
    context.tick()

    def broken(x_index, t_index):
        raise IndexOutOfRangeError("boom")

    monkeypatch.setattr(context.pipeline, "build", broken)
    context.state.select_x_index(1)
    context.state.select_t_index(1)

    with pytest.raises(IndexOutOfRangeError):
        context.tick()

    assert context.state.slice_index == (0, 0)
    assert context.state.x_value == context.dataset.x[0]
    assert context.tick() is None
