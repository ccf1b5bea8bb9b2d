import pytest

from pidsandbox.config import GRID_H, GRID_W
from pidsandbox.grid import Cell, Grid, in_bounds


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, True),
        (GRID_W - 1, GRID_H - 1, True),
        (GRID_W, 0, False),
        (-1, 0, False),
        (0, GRID_H, False),
        (0, -1, False),
    ],
)
def test_in_bounds(x, y, expected):
    assert in_bounds(x, y) is expected


def test_new_grid_is_empty():
    grid = Grid()
    cells = list(grid)
    assert len(cells) == GRID_W * GRID_H
    assert all(cell == Cell() for _, _, cell in cells)


def test_apply_and_clear_wind():
    grid = Grid()
    grid.apply_wind(3, 4, (1.5, -2.0))
    assert grid.cell(3, 4).wind == (1.5, -2.0)
    grid.clear_wind(3, 4)
    assert grid.cell(3, 4).wind == (0.0, 0.0)


def test_wind_outside_grid_is_ignored():
    grid = Grid()
    grid.apply_wind(GRID_W, 0, (1.0, 1.0))
    grid.apply_wind(-1, -1, (1.0, 1.0))
    assert all(cell.wind == (0.0, 0.0) for _, _, cell in grid)


def test_set_obstacle_and_erase():
    grid = Grid()
    grid.set_obstacle(5, 6, True)
    grid.apply_wind(5, 6, (0.5, 0.5))
    assert grid.cell(5, 6).obstacle is True
    grid.erase(5, 6)
    assert grid.cell(5, 6) == Cell()


def test_cell_outside_grid_raises():
    grid = Grid()
    with pytest.raises(IndexError):
        grid.cell(GRID_W, GRID_H)


def test_iteration_yields_coordinates():
    grid = Grid()
    grid.set_obstacle(7, 2, True)
    marked = [(x, y) for x, y, cell in grid if cell.obstacle]
    assert marked == [(7, 2)]