# pidsandbox

An interactive sandbox for watching a PID controller at work. A small bot
starts in the top-left corner of a 40 × 30 grid and heads for the goal in the
bottom-right. An A* search with four-way moves plans its route, and a PID
controller steers it from cell centre to cell centre.

You can change the world while the bot is moving:

- **Obstacles** block cells. When the next cell on the route becomes blocked,
  the bot plans a new route from the cell it is in. When it runs into a
  blocked cell, it bounces off and loses some speed.
- **Wind** pushes the bot while it is inside a cell that has wind set.

## Installation

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the mouse.

## Running

```
pidsandbox
```

`pidsandbox --help` shows a short description. The command takes no other
options.

## Controls

| Input | Effect |
| --- | --- |
| Click **Obstacle Mode** / **Wind Mode** | Choose what a left click on the grid does |
| Left click (Obstacle Mode) | Block the cell under the pointer |
| Left drag (Wind Mode) | Set wind on the cell where the drag began. The wind points along the drag, and its strength is the drag length in cells |
| Right button held | Clear the obstacle and the wind from the cell under the pointer |
| Escape, or closing the window | Quit |

The blue square marks the start and the green square marks the goal. The
remaining route is shaded light green, wind is drawn as a blue arrow in its
cell, and the bot is the orange circle.

## Using the pieces from Python

The simulation runs without a window:

```python
from pidsandbox.grid import Grid
from pidsandbox.pathfinder import Route, find_path
from pidsandbox.physics import Bot, BotPhysics

grid = Grid()
grid.set_obstacle(5, 1, True)
grid.apply_wind(3, 1, (0.0, 1.0))

print(find_path(grid, (1, 1), (38, 28))[:5])

route = Route()
route.recalc(grid, route.start)
bot = Bot(pos=(30.0, 30.0))
physics = BotPhysics()
for _ in range(60):
    physics.update(bot, 1 / 60, grid, route)
print(bot.pos, len(route.path))
```

- `pidsandbox.grid` has `Grid` (with `cell`, `apply_wind`, `clear_wind`,
  `set_obstacle` and `erase`), `Cell` and `in_bounds`. Edits outside the grid
  are ignored, while `Grid.cell` raises `IndexError` for them.
- `pidsandbox.pathfinder` has `find_path(grid, origin, goal)`, which returns
  the cells from origin to goal with the origin left out. It returns an empty
  list when the goal cannot be reached, when origin and goal are the same, or
  when either lies outside the grid. It also has `heuristic` (Manhattan
  distance) and `Route`, which holds the start, the goal and the current path.
- `pidsandbox.physics` has `Bot`, `BotPhysics` and `circle_hits_rect`.
  `BotPhysics.update(bot, dt, grid, route)` moves the bot forward by `dt`
  seconds and removes waypoints from `route.path` as they are reached.
- `pidsandbox.app` has `Editor`, `Button` and `wind_from_drag`. These turn
  mouse actions into grid edits. `main` opens the window.

## Limitations

- Start and goal are fixed at cells (1, 1) and (38, 28) and cannot be moved
  from the window.
- The route is planned again only when its next cell becomes blocked.
  Removing obstacles does not lead to a shorter route. If the goal cannot be
  reached, the path is empty and the bot stops being steered.
- Layouts cannot be saved or loaded. Each run starts from an empty grid.
- `Bot.max_speed` is stored on the bot but is not used to limit its speed.

## Tests

```
pip install .[test]
pytest
```