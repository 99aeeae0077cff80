"""
Interaction State (Data Model)
==============================
This module holds the slider-driven slice selection of the running viewer.

Why is this file needed?
------------------------
1. State Management: The selected x and t indices live in one object instead
   of module-level variables.
2. Change Tracking: Every successful selection raises a dirty flag that the
   render tick consumes, so an idle view performs no re-slicing at all.
3. Decoupling: Sliders write to this object; the render tick reads from it.

Classes:
    SliceIndex: The pair of fixed indices (x_index, t_index).
    InteractionState: Owner of the selection and the dirty flag.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import NamedTuple, Optional

import numpy as np
import numpy.typing as npt

from gpdviewer.errors import IndexOutOfRangeError, ValueNotFoundError

logger = logging.getLogger(__name__)


class SliceIndex(NamedTuple):
    x_index: int
    t_index: int


def find_exact(axis: npt.NDArray[np.float64], value: float, name: str) -> int:
    """
    Index of the first sample exactly equal to ``value``.

    Raises:
        ValueNotFoundError: If no sample matches.
    """
    matches = np.flatnonzero(axis == value)
    if matches.size == 0:
        raise ValueNotFoundError(name, value)
    return int(matches[0])


@dataclass(eq=False)
class InteractionState:
    """
    Selection of the two fixed axes. Starts dirty so the first render tick
    builds the initial slice.
    """
    x: npt.NDArray[np.float64]
    t: npt.NDArray[np.float64]

    x_index: int = 0
    t_index: int = 0
    dirty: bool = True

    # Number of successful selections so far
    revision: int = field(default=0)

    # --- Value based selection (exact match) ---

    def select_x(self, value: float) -> None:
        self._set(x_index=find_exact(self.x, value, "x"))

    def select_t(self, value: float) -> None:
        self._set(t_index=find_exact(self.t, value, "t"))

    # --- Index based selection (used by the sliders) ---

    def select_x_index(self, index: int) -> None:
        self._set(x_index=self._checked(index, len(self.x), "x"))

    def select_t_index(self, index: int) -> None:
        self._set(t_index=self._checked(index, len(self.t), "t"))

    @property
    def slice_index(self) -> SliceIndex:
        return SliceIndex(self.x_index, self.t_index)

    @property
    def x_value(self) -> float:
        return float(self.x[self.x_index])

    @property
    def t_value(self) -> float:
        return float(self.t[self.t_index])

    def mark_dirty(self) -> None:
        """Force a rebuild of the current slice without changing the selection."""
        self.dirty = True

    def restore(self, x_index: int, t_index: int) -> None:
        """Put back a previously rendered selection without marking dirty."""
        self.x_index = x_index
        self.t_index = t_index
        logger.debug(f"Selection restored -> x_index={x_index}, t_index={t_index}")

    def consume(self) -> Optional[SliceIndex]:
        """Return the current indices and clear the flag, or None when clean."""
        if not self.dirty:
            return None
        self.dirty = False
        return self.slice_index

    @staticmethod
    def _checked(index: int, length: int, name: str) -> int:
        index = int(index)
        if not 0 <= index < length:
            raise IndexOutOfRangeError(
                f"{name} index {index} out of range [0, {length - 1}]."
            )
        return index

    def _set(self, x_index: Optional[int] = None, t_index: Optional[int] = None) -> None:
        if x_index is not None:
            self.x_index = x_index
        if t_index is not None:
            self.t_index = t_index
        self.dirty = True
        self.revision += 1
        logger.debug(f"Selection changed -> x_index={self.x_index}, t_index={self.t_index}")
