"""Pixel image, line drawing and wireframe rendering."""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from fdfview.colors import pick_color
from fdfview.parsing import Grid, Point
from fdfview.view import WINDOW_HEIGHT, WINDOW_WIDTH

# Top-left area reserved for the controls legend; nothing is drawn there.
LEGEND_WIDTH = 255
LEGEND_HEIGHT = 210


class Image:
    """A width x height buffer of 0xRRGGBB pixels."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.data = np.zeros((height, width), dtype=np.uint32)

    def _accepts(self, x: float, y: float) -> bool:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        return not (x < LEGEND_WIDTH and y < LEGEND_HEIGHT)

    def put_pixel(self, x: float, y: float, colour: int) -> bool:
        """Set one pixel; return False if it is off the image or under the legend."""
        if not self._accepts(x, y):
            return False
        self.data[int(y), int(x)] = colour
        return True

    def get(self, x: int, y: int) -> int:
        """Return the colour stored at a pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return int(self.data[y, x])

    def clear(self) -> None:
        """Set every pixel to black."""
        self.data.fill(0)


def in_window(point: Point) -> bool:
    """Return False only when the point is off-screen on both axes."""
    x_out = point.x < 0 or point.x > WINDOW_WIDTH
    y_out = point.y < 0 or point.y > WINDOW_HEIGHT
    return not (x_out and y_out)


def _line_pixels(start: Point, end: Point) -> Iterator[Tuple[float, float]]:
    ex = abs(int(end.x - start.x))
    ey = abs(int(end.y - start.y))
    step_x = -1 if start.x > end.x else 1
    step_y = -1 if start.y > end.y else 1
    twice_ex, twice_ey = 2 * ex, 2 * ey
    x, y = start.x, start.y
    if ex >= ey:
        error = ex
        for _ in range(ex + 1):
            yield x, y
            x += step_x
            error -= twice_ey
            if error < 0:
                y += step_y
                error += twice_ex
    else:
        error = ey
        for _ in range(ey + 1):
            yield x, y
            y += step_y
            error -= twice_ex
            if error < 0:
                x += step_x
                error += twice_ey


def bresenham(image: Image, start: Point, end: Point) -> None:
    """Draw a line coloured by the start point's height."""
    colour = pick_color(start.z)
    for x, y in _line_pixels(start, end):
        image.put_pixel(x, y, colour)


def draw_wireframe(image: Image, grid: Grid) -> None:
    """Join each point to its right and lower neighbours."""
    for i, row in enumerate(grid):
        below = grid[i + 1] if i + 1 < len(grid) else None
        for j, point in enumerate(row):
            if j + 1 < len(row) and in_window(point) and in_window(row[j + 1]):
                bresenham(image, point, row[j + 1])
            if below is not None and in_window(point) and in_window(below[j]):
                bresenham(image, point, below[j])