from pidsandbox.app import Button, Editor, wind_from_drag
from pidsandbox.config import SCREEN_H, Mode
from pidsandbox.grid import Cell, Grid


def test_wind_from_drag_without_motion_is_none():
    assert wind_from_drag((12, 12), (12, 12)) is None


def test_wind_from_drag_in_cell_units():
    assert wind_from_drag((10, 10), (50, 30)) == (2.0, 1.0)


def test_button_contains_is_half_open():
    button = Button((10, 20, 100, 30), "Obstacle Mode", Mode.OBSTACLE)
    assert button.contains((10, 20)) is True
    assert button.contains((109, 49)) is True
    assert button.contains((110, 20)) is False
    assert button.contains((10, 50)) is False


def test_press_in_obstacle_mode_places_obstacle():
    editor = Editor(Grid())
    editor.press((45, 65))
    assert editor.grid.cell(2, 3).obstacle is True


def test_press_on_wind_button_switches_mode():
    editor = Editor(Grid())
    editor.press((150, SCREEN_H - 20))
    assert editor.mode is Mode.WIND
    editor.press((20, SCREEN_H - 20))
    assert editor.mode is Mode.OBSTACLE


def test_wind_drag_sets_wind_on_start_cell():
    editor = Editor(Grid(), mode=Mode.WIND)
    editor.press((30, 30))
    editor.release((70, 30))
    assert editor.grid.cell(1, 1).wind == wind_from_drag((30, 30), (70, 30))
    assert editor.grid.cell(1, 1).obstacle is False
    assert editor.wind_cell is None


def test_wind_click_without_drag_leaves_cell_calm():
    editor = Editor(Grid(), mode=Mode.WIND)
    editor.press((30, 30))
    editor.release((30, 30))
    assert editor.grid.cell(1, 1) == Cell()


def test_release_without_press_changes_nothing():
    editor = Editor(Grid(), mode=Mode.WIND)
    editor.release((70, 30))
    assert all(cell == Cell() for _, _, cell in editor.grid)


def test_erase_clears_cell():
    grid = Grid()
    grid.set_obstacle(4, 4, True)
    grid.apply_wind(4, 4, (1.0, 1.0))
    editor = Editor(grid)
    editor.erase((85, 85))
    assert grid.cell(4, 4) == Cell()


def test_press_below_grid_places_nothing():
    editor = Editor(Grid())
    editor.press((500, SCREEN_H - 10))
    assert all(not cell.obstacle for _, _, cell in editor.grid)
    assert editor.mode is Mode.OBSTACLE