"""Reading height maps: rows of space-separated integer heights."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Iterable, List, Union

_ALLOWED = frozenset(" -0123456789")


@dataclass
class Point:
    """A grid point: column, row and height."""

    x: float
    y: float
    z: float


Grid = List[List[Point]]


class MapFileError(ValueError):
    """The map is empty, malformed or not rectangular."""

    def __init__(self, message: str = "Invalid file.") -> None:
        super().__init__(message)


def line_is_valid(line: str) -> bool:
    """Return True if the line holds only spaces, digits and minus signs."""
    return set(line) <= _ALLOWED


def count_columns(line: str) -> int:
    """Count the space-separated fields of a line."""
    return sum(1 for field in line.split(" ") if field)


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_line(line: str, row: int) -> List[Point]:
    """Parse one map line into points at the given row.

    Heights accumulate as 32-bit signed integers. A leading zero ends a
    number, so ``"05"`` yields two points, heights 0 and 5.
    """
    points: List[Point] = []
    pos = 0
    end = len(line)
    while pos < end:
        if line[pos] != " ":
            sign = 1
            value = 0
            if line[pos] == "-":
                pos += 1
                sign = -1
            while pos < end and _is_digit(line[pos]):
                value = _wrap_int32(value * 10 + int(line[pos]) * sign)
                if value == 0:
                    break
                pos += 1
            points.append(Point(len(points), row, value))
        if pos < end:
            pos += 1
    return points


def parse_map(lines: Iterable[str]) -> Grid:
    """Build a rectangular grid of points from map lines."""
    rows = list(lines)
    if not rows or not all(line_is_valid(line) for line in rows):
        raise MapFileError()
    width = count_columns(rows[0])
    if width == 0:
        raise MapFileError()
    grid: Grid = []
    for row, line in enumerate(rows):
        if count_columns(line) != width:
            raise MapFileError()
        points = parse_line(line, row)
        if len(points) != width:
            raise MapFileError()
        grid.append(points)
    return grid


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def load_map(path: Union[str, "os.PathLike[str]"]) -> Grid:
    """Read and parse a map file. OSError propagates if it cannot be read."""
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_map(_split_lines(text))


def copy_grid(grid: Grid) -> Grid:
    """Return an independent copy of a grid."""
    return [[replace(point) for point in row] for row in grid]