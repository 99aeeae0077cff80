"""
Extent Scanner
Computes (min, max) of a sample array and maps values linearly onto [0, 1].
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np
import numpy.typing as npt

from gpdviewer.config import DEGENERATE_VALUE
from gpdviewer.errors import EmptyArrayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extent:
    """Closed value range of a sample array. Invariant: min <= max."""
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.span == 0.0


def scan_extent(values: npt.ArrayLike) -> Extent:
    """
    Single pass (min, max) over the samples. NaN samples are skipped.

    Raises:
        EmptyArrayError: If there is no finite-comparable sample to scan.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size == 0:
        raise EmptyArrayError("Cannot compute the extent of an empty array.")

    valid = arr[~np.isnan(arr)]
    if valid.size == 0:
        raise EmptyArrayError(f"All {arr.size} samples are NaN.")

    return Extent(min=float(valid.min()), max=float(valid.max()))


def normalize(values: npt.ArrayLike, extent: Extent) -> npt.NDArray[np.float64]:
    """
    Linearly map values onto [0, 1] using the given extent.

    A degenerate extent (min == max) maps every value to DEGENERATE_VALUE
    instead of dividing by zero.
    """
    arr = np.asarray(values, dtype=np.float64)
    if extent.is_degenerate:
        return np.full(arr.shape, DEGENERATE_VALUE, dtype=np.float64)
    return (arr - extent.min) / extent.span
