import itertools

import numpy as np
import pytest

from gpdviewer.errors import IndexOutOfRangeError, ShapeMismatchError
from gpdviewer.model.ndview import NDView, row_major_strides

SHAPE = (2, 3, 2, 2)


@pytest.fixture
def view():
    return NDView(np.arange(24, dtype=float), SHAPE)


def test_strides_are_row_major():
    assert row_major_strides(SHAPE) == (12, 4, 2, 1)


def test_worked_example(view):
    # 1*12 + 2*4 + 0*2 + 1*1
    assert view.offset(1, 2, 0, 1) == 21
    assert view.get(1, 2, 0, 1) == 21.0


def test_matches_numpy_reshape(view):
    reference = np.arange(24, dtype=float).reshape(SHAPE)
    for index in itertools.product(*(range(n) for n in SHAPE)):
        assert view.get(*index) == reference[index]


def test_offset_unravel_round_trip(view):
    for index in itertools.product(*(range(n) for n in SHAPE)):
        assert view.unravel(view.offset(*index)) == index


def test_length_mismatch_is_rejected():
    with pytest.raises(ShapeMismatchError):
        NDView(np.arange(23, dtype=float), SHAPE)


def test_non_positive_axis_is_rejected():
    with pytest.raises(ShapeMismatchError):
        NDView(np.empty(0), (0, 3, 2, 2))


@pytest.mark.parametrize("index", [(2, 0, 0, 0), (0, 3, 0, 0), (0, 0, -1, 0), (0, 0, 0, 2)])
def test_out_of_range_lookup(view, index):
    with pytest.raises(IndexOutOfRangeError):
        view.get(*index)


def test_wrong_number_of_indices(view):
    with pytest.raises(IndexOutOfRangeError):
        view.get(0, 0, 0)


def test_plane_is_a_view_of_the_buffer(view):
    plane = view.plane(1, 0)

    assert plane.shape == (3, 2)
    assert np.shares_memory(plane, view.data)
    for i_xi in range(3):
        for i_q2 in range(2):
            assert plane[i_xi, i_q2] == view.get(1, i_xi, 0, i_q2)


def test_plane_bounds(view):
    with pytest.raises(IndexOutOfRangeError):
        view.plane(0, 2)
