"""
Slice-and-Normalize Pipeline
============================
Turns the 4-D GPD samples into a renderable, colored height field.

For fixed (x_index, t_index) every (xi, Q2) cell gets
    height = (gpd - gpd_min) / (gpd_max - gpd_min)
    rgb    = colormap(palette, height)
and the cells are ordered Q2 outer, xi inner, which is the vertex order of a
structured (len(xi) x len(Q2)) grid with xi as the fastest axis.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator, NamedTuple

import numpy as np
import numpy.typing as npt

from gpdviewer.config import DEFAULT_PALETTE
from gpdviewer.errors import ShapeMismatchError
from gpdviewer.model.colormap import evaluate_many, get_palette
from gpdviewer.model.extent import Extent, normalize
from gpdviewer.model.ndview import NDView

logger = logging.getLogger(__name__)


class GridCell(NamedTuple):
    xi_index: int
    Q2_index: int
    normalized_height: float
    rgb: tuple[int, int, int]


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.ascontiguousarray(arr)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class RenderableGrid:
    """
    One slice ready for the renderer. All arrays have ``n_xi * n_Q2`` rows,
    ordered Q2 outer, xi inner.
    """
    x_index: int
    t_index: int
    n_xi: int
    n_Q2: int
    xi_index: npt.NDArray[np.int64]
    Q2_index: npt.NDArray[np.int64]
    xi_norm: npt.NDArray[np.float64]
    Q2_norm: npt.NDArray[np.float64]
    height: npt.NDArray[np.float64]
    rgb: npt.NDArray[np.uint8]

    def __len__(self) -> int:
        return self.n_xi * self.n_Q2

    def __iter__(self) -> Iterator[GridCell]:
        for i in range(len(self)):
            r, g, b = self.rgb[i]
            yield GridCell(
                int(self.xi_index[i]),
                int(self.Q2_index[i]),
                float(self.height[i]),
                (int(r), int(g), int(b)),
            )

    @property
    def points(self) -> npt.NDArray[np.float64]:
        """(N, 3) vertex positions (xi_norm, Q2_norm, height)."""
        return np.column_stack((self.xi_norm, self.Q2_norm, self.height))

    @property
    def colors(self) -> npt.NDArray[np.float32]:
        """(N, 3) vertex colors scaled to [0, 1]."""
        return self.rgb.astype(np.float32) / 255.0

    def tobytes(self) -> bytes:
        return b"".join(
            a.tobytes() for a in (self.xi_index, self.Q2_index, self.height, self.rgb)
        )


class SlicePipeline:
    """
    Builds RenderableGrids from a 4-D view. The axis coordinates do not
    depend on the slice, so they are normalized once here.
    """

    def __init__(
        self,
        view: NDView,
        xi: npt.ArrayLike,
        Q2: npt.ArrayLike,
        gpd_extent: Extent,
        xi_extent: Extent,
        Q2_extent: Extent,
        palette: str = DEFAULT_PALETTE,
    ) -> None:
        get_palette(palette)  # fail early on unknown names

        n_x, n_xi, n_t, n_Q2 = view.shape
        xi = np.asarray(xi, dtype=np.float64)
        Q2 = np.asarray(Q2, dtype=np.float64)
        if xi.size != n_xi or Q2.size != n_Q2:
            raise ShapeMismatchError(
                f"Axis lengths xi={xi.size}, Q2={Q2.size} do not match view shape {view.shape}."
            )

        self.view = view
        self.gpd_extent = gpd_extent
        self.palette = palette
        self.n_xi = n_xi
        self.n_Q2 = n_Q2

        # Row-major over (Q2, xi): xi varies fastest
        q2_idx, xi_idx = np.divmod(np.arange(n_xi * n_Q2, dtype=np.int64), n_xi)
        self._xi_index = _frozen(xi_idx)
        self._Q2_index = _frozen(q2_idx)
        self._xi_norm = _frozen(normalize(xi, xi_extent)[xi_idx])
        self._Q2_norm = _frozen(normalize(Q2, Q2_extent)[q2_idx])

    def build(self, x_index: int, t_index: int) -> RenderableGrid:
        """
        Slice, normalize and color the (xi, Q2) plane at (x_index, t_index).

        Raises:
            IndexOutOfRangeError: If either index is outside its axis.
        """
        plane = self.view.plane(x_index, t_index)  # (xi, Q2)
        values = plane.T.ravel()                    # Q2 outer, xi inner
        height = normalize(values, self.gpd_extent)
        rgb = evaluate_many(self.palette, height)

        logger.debug(f"Re-sliced at x_index={x_index}, t_index={t_index}")
        return RenderableGrid(
            x_index=x_index,
            t_index=t_index,
            n_xi=self.n_xi,
            n_Q2=self.n_Q2,
            xi_index=self._xi_index,
            Q2_index=self._Q2_index,
            xi_norm=self._xi_norm,
            Q2_norm=self._Q2_norm,
            height=_frozen(height),
            rgb=_frozen(rgb),
        )
