"""View state and projection of a height grid onto the screen."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from fdfview.parsing import Grid, Point, copy_grid

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
ISO_ANGLE = 0.523599


@dataclass
class Bounds:
    """Extent of a grid on screen; spans of zero are stored as 1."""

    dx: float = 1.0
    dy: float = 1.0
    x_max: float = 0.0
    x_min: float = 0.0
    y_max: float = 0.0
    y_min: float = 0.0


@dataclass
class ViewState:
    """Zoom, depth, offset and rotation of the current view."""

    bounds: Bounds = field(default_factory=Bounds)
    zoom: float = 0.0
    depth: float = 0.0
    x_move: float = 0.0
    y_move: float = 0.0
    x_rot: float = 0.0
    y_rot: float = 0.0
    center: bool = True
    scale: bool = True
    iso: bool = False

    def reset(self) -> None:
        """Return to a flat, centred, auto-scaled view."""
        self.iso = False
        self.center = True
        self.scale = True

    def _step(self) -> float:
        return 7 * (self.bounds.dx / self.bounds.dy + 1)

    def move_left(self) -> None:
        self.x_move -= self._step()

    def move_right(self) -> None:
        self.x_move += self._step()

    def move_down(self) -> None:
        self.y_move += self._step()

    def move_up(self) -> None:
        self.y_move -= self._step()

    def move_center(self) -> None:
        self.center = True

    def zoom_in(self) -> None:
        self.zoom += 0.2

    def zoom_out(self) -> None:
        if self.zoom > 0.2:
            self.zoom -= 0.2

    def depth_inc(self) -> None:
        self.depth += 0.08

    def depth_dec(self) -> None:
        self.depth -= 0.08

    def center_scale(self) -> None:
        self.center = True
        self.scale = True

    def switch_iso(self) -> None:
        """Toggle isometric projection and recentre."""
        self.iso = not self.iso
        self.center = True
        self.x_rot = ISO_ANGLE
        self.y_rot = ISO_ANGLE


def _points(grid: Grid) -> List[Point]:
    return [point for row in grid for point in row]


def measure_bounds(grid: Grid) -> Bounds:
    """Return the extent of the grid's x and y coordinates."""
    points = _points(grid)
    if not points:
        raise ValueError("cannot measure an empty grid")
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    x_min, x_max = min(xs), max(xs)
    y_min, y_max = min(ys), max(ys)
    return Bounds(
        dx=(x_max - x_min) or 1,
        dy=(y_max - y_min) or 1,
        x_max=x_max,
        x_min=x_min,
        y_max=y_max,
        y_min=y_min,
    )


def _scale_view(grid: Grid, state: ViewState) -> None:
    state.bounds = measure_bounds(grid)
    state.depth = 0.3
    dx, dy = state.bounds.dx, state.bounds.dy
    if WINDOW_WIDTH / dx < WINDOW_HEIGHT / dy:
        state.zoom = (WINDOW_WIDTH - 100) / dx
    else:
        state.zoom = (WINDOW_HEIGHT - 100) / dy


def _center_view(grid: Grid, state: ViewState) -> None:
    bounds = measure_bounds(grid)
    state.bounds = bounds
    state.x_move = (WINDOW_WIDTH - bounds.dx) / 2 - bounds.x_min
    state.y_move = (WINDOW_HEIGHT - bounds.dy) / 2 - bounds.y_min
    for point in _points(grid):
        point.x += state.x_move
        point.y += state.y_move


def _rotate(point: Point, x_rot: float, y_rot: float) -> None:
    previous_x = int(point.x)
    previous_y = int(point.y)
    point.x = (previous_x - previous_y) * math.cos(x_rot)
    point.y = -point.z + (previous_x + previous_y) * math.sin(y_rot)


def project(grid: Grid, state: ViewState) -> Grid:
    """Return screen coordinates for the grid under ``state``.

    The input grid is left untouched. ``state`` is updated with the bounds,
    zoom, depth and offsets computed when scaling or centring is requested;
    the ``center`` and ``scale`` requests themselves are not cleared.
    """
    points = copy_grid(grid)
    if state.scale:
        _scale_view(points, state)
    for point in _points(points):
        point.x *= state.zoom
        point.y *= state.zoom
        point.z *= state.depth
        if state.iso:
            _rotate(point, state.x_rot, state.y_rot)
        if not state.center:
            point.x += state.x_move
            point.y += state.y_move
    if state.center:
        _center_view(points, state)
    return points