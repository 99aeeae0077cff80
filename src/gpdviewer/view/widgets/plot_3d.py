"""
3D Visualization Widget (PyVista Wrapper)
"""

from __future__ import annotations

from typing import Optional

import logging
import numpy as np

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from gpdviewer.model.pipeline import RenderableGrid
from gpdviewer.view.presets import ORBIT, ViewPreset
from gpdviewer.view.widgets.helpers import AXIS_LABELS, SceneHelpers

logger = logging.getLogger(__name__)


def grid_to_structured(grid: RenderableGrid) -> pv.StructuredGrid:
    """
    Wrap a RenderableGrid as a (n_xi, n_Q2, 1) structured grid. VTK orders
    structured points with the first dimension fastest, which is exactly the
    Q2 outer / xi inner order of the grid cells.
    """
    mesh = pv.StructuredGrid()
    mesh.points = grid.points
    mesh.dimensions = (grid.n_xi, grid.n_Q2, 1)
    mesh.point_data["rgb"] = np.array(grid.rgb)
    mesh.point_data.active_scalars_name = "rgb"
    return mesh


class GPDSurfaceWidget(QWidget):
    def __init__(self, parent: Optional[QWidget] = None, preset: ViewPreset = ORBIT) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._helpers = SceneHelpers(self.plotter)

        # --- Actors state ---
        self._surface: Optional[pv.StructuredGrid] = None
        self._surface_actor: Optional[pv.Actor] = None
        self._surface_dims: Optional[tuple[int, int]] = None
        self._bounds_shown: bool = False

        self.preset: ViewPreset = preset
        self._init_plotter()
        self.apply_preset(preset)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def show_grid(self, grid: RenderableGrid) -> None:
        """Replaces the displayed surface with a freshly sliced grid."""
        mesh = grid_to_structured(grid)

        if self._surface_actor is not None and self._surface_dims == (grid.n_xi, grid.n_Q2):
            # Update existing data in-place to prevent blinking
            self._surface.copy_from(mesh)
        else:
            self._clear_surface()
            self._surface = mesh
            self._surface_dims = (grid.n_xi, grid.n_Q2)
            self._surface_actor = self.plotter.add_mesh(
                self._surface,
                scalars="rgb",
                rgb=True,
                style="wireframe",
                line_width=1,
                lighting=False,
                show_scalar_bar=False,
            )

        self.plotter.render()

    def apply_preset(self, preset: ViewPreset) -> None:
        """Switches camera and decorations without touching the surface."""
        logger.info(f"Applying view preset: {preset.name}")
        self.preset = preset

        if preset.show_reference:
            self._helpers.add_reference()
        else:
            self._helpers.clear_reference()

        if self._bounds_shown:
            self.plotter.remove_bounds_axes()
            self._bounds_shown = False
        if preset.show_bounds:
            x_title, y_title, z_title = AXIS_LABELS
            self.plotter.show_bounds(
                bounds=(0.0, 1.0, 0.0, 1.0, 0.0, 1.0),
                xtitle=x_title,
                ytitle=y_title,
                ztitle=z_title,
                grid="back",
                location="outer",
                color="black",
            )
            self._bounds_shown = True

        if preset.parallel_projection:
            self.plotter.enable_parallel_projection()
        else:
            self.plotter.disable_parallel_projection()

        self.reset_camera()

    def reset_camera(self) -> None:
        camera = self.plotter.camera
        camera.position = self.preset.camera_position
        camera.focal_point = self.preset.focal_point
        camera.up = self.preset.view_up
        camera.view_angle = self.preset.view_angle
        if self.preset.parallel_projection:
            self.plotter.reset_camera()
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background("white")
        self.plotter.enable_trackball_style()
        self._helpers.add_orientation_axes()

    def _clear_surface(self) -> None:
        if self._surface_actor:
            self.plotter.remove_actor(self._surface_actor)
        self._surface_actor = None
        self._surface = None
        self._surface_dims = None

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
