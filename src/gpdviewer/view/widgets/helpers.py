"""
Scene Helpers
Handles the static reference grid, the world axes and the inset orientation axes.
"""
from typing import List, Optional
import numpy as np
import pyvista as pv

# Orientation widget labels and colors (xi, Q2, GPD)
AXIS_LABELS = ("xi", "Q2", "GPD")
AXIS_COLORS = ("#ff0000", "#00ff00", "#0000ff")


class SceneHelpers:
    def __init__(self, plotter: pv.Plotter) -> None:
        self.plotter = plotter
        self.grid_size: float = 10.0
        self.grid_divisions: int = 10
        self.axes_length: float = 5.0

        self._grid_actor: Optional[pv.Actor] = None
        self._axes_actors: List[pv.Actor] = []

    def add_reference(self) -> None:
        """Adds the XZ reference grid and the world axes lines."""
        self.clear_reference()

        grid = self._build_xz_grid_polydata(self.grid_size, self.grid_divisions)
        self._grid_actor = self.plotter.add_mesh(
            grid, color="#888888", line_width=1, opacity=0.8, pickable=False, lighting=False
        )

        origin = np.zeros(3)
        for axis, color in enumerate(AXIS_COLORS):
            tip = origin.copy()
            tip[axis] = self.axes_length
            actor = self.plotter.add_mesh(
                pv.Line(origin, tip), color=color, line_width=2, pickable=False, lighting=False
            )
            self._axes_actors.append(actor)

    def add_orientation_axes(self) -> None:
        """Inset axes in the lower-left corner that follow the main camera."""
        x_color, y_color, z_color = AXIS_COLORS
        x_label, y_label, z_label = AXIS_LABELS
        self.plotter.add_axes(
            interactive=False,
            line_width=2,
            x_color=x_color,
            y_color=y_color,
            z_color=z_color,
            xlabel=x_label,
            ylabel=y_label,
            zlabel=z_label,
            viewport=(0.0, 0.0, 0.2, 0.2),
        )

    @staticmethod
    def _build_xz_grid_polydata(size: float, divisions: int) -> pv.PolyData:
        """
        Create a square line grid in the XZ plane centred on the origin,
        just below y = 0 so it never hides the surface.

        Args:
            size: Edge length of the square.
            divisions: Number of cells along each edge.

        Returns:
            A PyVista PolyData of line cells.
        """
        half = size / 2.0
        ticks = np.linspace(-half, half, divisions + 1)
        y = -1e-4

        n_lines = 2 * len(ticks)
        points = np.empty((n_lines * 2, 3), dtype=float)
        cells = np.empty(n_lines * 3, dtype=int)

        pid, cid = 0, 0
        for v in ticks:
            for start, end in (((v, y, -half), (v, y, half)), ((-half, y, v), (half, y, v))):
                points[pid] = start
                points[pid + 1] = end
                cells[cid:cid + 3] = (2, pid, pid + 1)
                pid += 2
                cid += 3

        return pv.PolyData(points, lines=cells)

    def clear_reference(self) -> None:
        """Removes grid and axes line actors."""
        if self._grid_actor: self.plotter.remove_actor(self._grid_actor)
        for a in self._axes_actors: self.plotter.remove_actor(a)
        self._grid_actor = None
        self._axes_actors.clear()
