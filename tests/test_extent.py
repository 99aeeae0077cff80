import numpy as np
import pytest

from gpdviewer.errors import EmptyArrayError
from gpdviewer.model.extent import Extent, normalize, scan_extent


@pytest.mark.parametrize("values", [
    [3.0],
    [5.0, -2.0, 7.5, 0.0],
    [1.0, 1.0, 1.0],
    np.linspace(-1.0, 1.0, 11),
])
def test_extent_bounds_are_members(values):
    extent = scan_extent(values)

    assert extent.min <= extent.max
    assert extent.min in list(values)
    assert extent.max in list(values)


def test_empty_array_fails():
    with pytest.raises(EmptyArrayError):
        scan_extent(np.empty(0))


def test_nan_samples_are_ignored():
    assert scan_extent([np.nan, 2.0, -1.0]) == Extent(-1.0, 2.0)


def test_all_nan_fails():
    with pytest.raises(EmptyArrayError):
        scan_extent([np.nan, np.nan])


def test_normalize_maps_onto_unit_interval():
    result = normalize([10.0, 20.0, 30.0], Extent(10.0, 30.0))
    np.testing.assert_allclose(result, [0.0, 0.5, 1.0])


def test_degenerate_extent_gives_mid_value():
    extent = scan_extent([5.0, 5.0, 5.0])

    assert extent.is_degenerate
    result = normalize([5.0, 5.0, 5.0], extent)
    assert not np.isnan(result).any()
    np.testing.assert_array_equal(result, [0.5, 0.5, 0.5])
