"""
View Presets
Camera and decoration settings for the two ways of framing the same surface.

Both presets render the identical RenderableGrid; only the presentation differs.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewPreset:
    name: str
    title: str
    camera_position: tuple[float, float, float]
    focal_point: tuple[float, float, float]
    view_up: tuple[float, float, float]
    view_angle: float = 30.0
    parallel_projection: bool = False
    # World grid and axes lines around the origin
    show_reference: bool = True
    # Labelled unit-cube bounds around the surface
    show_bounds: bool = False


# Free orbit: perspective camera close to the origin, looking down -Z
ORBIT = ViewPreset(
    name="orbit",
    title="Orbit",
    camera_position=(0.0, 0.0, 0.7),
    focal_point=(0.0, 0.0, 0.0),
    view_up=(0.0, 1.0, 0.0),
    view_angle=75.0,
)

# Framed: parallel projection on the unit cube, GPD axis pointing up
FRAMED = ViewPreset(
    name="framed",
    title="Framed",
    camera_position=(2.2, -1.6, 1.8),
    focal_point=(0.5, 0.5, 0.5),
    view_up=(0.0, 0.0, 1.0),
    parallel_projection=True,
    show_reference=False,
    show_bounds=True,
)

PRESETS: dict[str, ViewPreset] = {p.name: p for p in (ORBIT, FRAMED)}
