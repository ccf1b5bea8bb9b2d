"""Sandbox dimensions and editing modes."""

from enum import Enum, auto

GRID_W = 40
GRID_H = 30
CELL_SIZE = 20
SCREEN_W = GRID_W * CELL_SIZE
SCREEN_H = GRID_H * CELL_SIZE + 40


class Mode(Enum):
    """What a left click on the grid edits."""

    OBSTACLE = auto()
    WIND = auto()