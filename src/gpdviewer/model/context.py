"""
Viewer Context
Owns everything derived from one loaded dataset: extents, the slice pipeline,
the interaction state and the grid currently on screen.
"""
from __future__ import annotations

import logging
from typing import Optional

from gpdviewer.config import DEFAULT_PALETTE
from gpdviewer.model.extent import Extent, scan_extent
from gpdviewer.model.io import GPDDataset
from gpdviewer.model.pipeline import RenderableGrid, SlicePipeline
from gpdviewer.model.state import InteractionState

logger = logging.getLogger(__name__)


class ViewerContext:
    """
    Explicit owner of the viewer state. Created once after the dataset has
    loaded; the GUI passes it to the sliders and the render tick.
    """

    def __init__(self, dataset: GPDDataset, palette: str = DEFAULT_PALETTE) -> None:
        self.dataset = dataset

        # Computed once for the lifetime of the dataset
        self.gpd_extent: Extent = scan_extent(dataset.gpd.data)
        self.xi_extent: Extent = scan_extent(dataset.xi)
        self.Q2_extent: Extent = scan_extent(dataset.Q2)
        logger.info(
            f"Extents: gpd={self.gpd_extent}, xi={self.xi_extent}, Q2={self.Q2_extent}"
        )
        if self.gpd_extent.is_degenerate:
            logger.warning("GPD samples are constant; heights are drawn at mid level.")

        self.pipeline = self._make_pipeline(palette)
        self.state = InteractionState(x=dataset.x, t=dataset.t)
        self.grid: Optional[RenderableGrid] = None

    def _make_pipeline(self, palette: str) -> SlicePipeline:
        return SlicePipeline(
            self.dataset.gpd,
            self.dataset.xi,
            self.dataset.Q2,
            gpd_extent=self.gpd_extent,
            xi_extent=self.xi_extent,
            Q2_extent=self.Q2_extent,
            palette=palette,
        )

    @property
    def palette(self) -> str:
        return self.pipeline.palette

    def set_palette(self, palette: str) -> None:
        """Switch colormap; the current slice is rebuilt on the next tick."""
        self.pipeline = self._make_pipeline(palette)
        self.state.mark_dirty()
        logger.info(f"Palette set to '{palette}'")

    def tick(self) -> Optional[RenderableGrid]:
        """
        One render-loop step. Re-slices only when the selection changed.

        Returns:
            The new grid, or None when nothing changed. If slicing fails the
            exception propagates, ``self.grid`` keeps the previous slice and
            the selection is rolled back to that slice.
        """
        index = self.state.consume()
        if index is None:
            return None
        try:
            grid = self.pipeline.build(index.x_index, index.t_index)
        except Exception:
            if self.grid is not None:
                self.state.restore(self.grid.x_index, self.grid.t_index)
            raise
        self.grid = grid
        return grid
