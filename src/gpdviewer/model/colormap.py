"""
Colormap Evaluator
Maps normalized scalars in [0, 1] to 8-bit RGB triples using matplotlib palettes.
"""
from __future__ import annotations

from functools import lru_cache

import numpy as np
import numpy.typing as npt
from matplotlib import colormaps
from matplotlib.colors import Colormap

from gpdviewer.errors import UnknownPaletteError

PALETTES: tuple[str, ...] = ("jet", "turbo", "viridis", "plasma", "coolwarm")


@lru_cache(maxsize=None)
def get_palette(name: str) -> Colormap:
    if name not in PALETTES:
        raise UnknownPaletteError(
            f"Unknown palette '{name}'. Choose one of: {', '.join(PALETTES)}."
        )
    return colormaps[name]


def evaluate_many(name: str, values: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """
    Vectorized colormap lookup.

    Values are clamped to [0, 1]; NaN takes the low endpoint color.

    Returns:
        (N, 3) uint8 array of RGB triples, one per input value.
    """
    cmap = get_palette(name)
    arr = np.asarray(values, dtype=np.float64).ravel()
    clamped = np.clip(np.nan_to_num(arr, nan=0.0), 0.0, 1.0)
    rgba = cmap(clamped, bytes=True)
    return np.ascontiguousarray(rgba[:, :3])


def evaluate(name: str, value: float) -> tuple[int, int, int]:
    """Color of a single normalized value."""
    r, g, b = evaluate_many(name, [value])[0]
    return int(r), int(g), int(b)
