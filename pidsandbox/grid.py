"""The cell grid holding obstacles and wind vectors."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pidsandbox.config import GRID_H, GRID_W

Vec = tuple[float, float]


@dataclass
class Cell:
    """One grid cell."""

    obstacle: bool = False
    wind: Vec = (0.0, 0.0)


def in_bounds(x: int, y: int) -> bool:
    """Return True if (x, y) names a cell of the grid."""
    return 0 <= x < GRID_W and 0 <= y < GRID_H


class Grid:
    """A GRID_W by GRID_H field of cells."""

    def __init__(self) -> None:
        self.rows = [[Cell() for _ in range(GRID_W)] for _ in range(GRID_H)]

    def __iter__(self) -> Iterator[tuple[int, int, Cell]]:
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                yield x, y, cell

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y); raise IndexError outside the grid."""
        if not in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return self.rows[y][x]

    def apply_wind(self, x: int, y: int, wind: Vec) -> None:
        """Set the wind of a cell; coordinates outside the grid are ignored."""
        if in_bounds(x, y):
            self.rows[y][x].wind = (float(wind[0]), float(wind[1]))

    def clear_wind(self, x: int, y: int) -> None:
        """Reset the wind of a cell; coordinates outside the grid are ignored."""
        if in_bounds(x, y):
            self.rows[y][x].wind = (0.0, 0.0)

    def set_obstacle(self, x: int, y: int, value: bool) -> None:
        """Mark or unmark a cell as an obstacle; coordinates outside are ignored."""
        if in_bounds(x, y):
            self.rows[y][x].obstacle = bool(value)

    def erase(self, x: int, y: int) -> None:
        """Remove both obstacle and wind from a cell."""
        if in_bounds(x, y):
            self.rows[y][x].obstacle = False
            self.rows[y][x].wind = (0.0, 0.0)