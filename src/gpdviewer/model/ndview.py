"""
N-Dimensional View
==================
Read-only, row-major view over the flat GPD sample buffer.

The buffer is never copied: lookups compute the flat offset from the
multi-index, and ``plane`` returns a numpy view of the (xi, Q2) slice.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np
import numpy.typing as npt

from gpdviewer.errors import IndexOutOfRangeError, ShapeMismatchError

logger = logging.getLogger(__name__)


def row_major_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """Element strides for a C-ordered array: last axis has stride 1."""
    strides = []
    acc = 1
    for n in reversed(shape):
        strides.append(acc)
        acc *= n
    return tuple(reversed(strides))


class NDView:
    """
    Fixed-shape view of a flat float64 buffer.

    For the GPD data the axes are (x, xi, t, Q2); the class itself only
    relies on the number of axes given by ``shape``.
    """

    def __init__(self, flat: npt.ArrayLike, shape: Sequence[int]) -> None:
        data = np.asarray(flat, dtype=np.float64)
        shape = tuple(int(n) for n in shape)

        if data.ndim != 1:
            raise ShapeMismatchError(f"Expected a flat array, got shape {data.shape}.")
        if not shape or any(n <= 0 for n in shape):
            raise ShapeMismatchError(f"Axis lengths must be positive, got {shape}.")

        expected = math.prod(shape)
        if data.size != expected:
            raise ShapeMismatchError(
                f"Flat array has {data.size} samples but shape {shape} needs {expected}."
            )

        self._data = data
        self._shape = shape
        self._strides = row_major_strides(shape)

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._strides

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def data(self) -> npt.NDArray[np.float64]:
        return self._data

    def _check_index(self, index: Sequence[int]) -> None:
        if len(index) != self.ndim:
            raise IndexOutOfRangeError(
                f"Expected {self.ndim} indices, got {len(index)}."
            )
        for axis, (i, n) in enumerate(zip(index, self._shape)):
            if not 0 <= i < n:
                raise IndexOutOfRangeError(
                    f"Index {i} out of range for axis {axis} of length {n}."
                )

    def offset(self, *index: int) -> int:
        """Flat offset of a multi-index."""
        self._check_index(index)
        return sum(i * s for i, s in zip(index, self._strides))

    def unravel(self, offset: int) -> tuple[int, ...]:
        """Inverse of ``offset``."""
        if not 0 <= offset < self.size:
            raise IndexOutOfRangeError(
                f"Offset {offset} out of range for {self.size} samples."
            )
        index = []
        for s in self._strides:
            i, offset = divmod(offset, s)
            index.append(i)
        return tuple(index)

    def get(self, *index: int) -> float:
        """Sample at the given multi-index, e.g. ``get(i_x, i_xi, i_t, i_Q2)``."""
        return float(self._data[self.offset(*index)])

    def plane(self, x_index: int, t_index: int) -> npt.NDArray[np.float64]:
        """
        The (xi, Q2) plane at fixed x and t, as a view with shape
        (len(xi), len(Q2)).
        """
        if self.ndim != 4:
            raise ShapeMismatchError(f"plane() needs a 4-D view, this one is {self.ndim}-D.")
        n_x, _, n_t, _ = self._shape
        if not 0 <= x_index < n_x:
            raise IndexOutOfRangeError(f"x index {x_index} out of range [0, {n_x - 1}].")
        if not 0 <= t_index < n_t:
            raise IndexOutOfRangeError(f"t index {t_index} out of range [0, {n_t - 1}].")
        return self._data.reshape(self._shape)[x_index, :, t_index, :]
