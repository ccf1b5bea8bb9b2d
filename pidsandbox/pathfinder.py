"""A* search over the grid with four-way movement."""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass, field

from pidsandbox.config import GRID_H, GRID_W
from pidsandbox.grid import Grid, in_bounds

Point = tuple[int, int]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def heuristic(curr, goal) -> float:
    """Manhattan distance estimate from curr to goal."""
    return float(abs(curr[0] - goal[0]) + abs(curr[1] - goal[1]))


def find_path(grid: Grid, origin, goal) -> list[Point]:
    """Return the cells leading from origin to goal, origin excluded.

    The list is empty when origin equals goal, when either lies outside
    the grid, or when the goal cannot be reached.
    """
    origin = (int(origin[0]), int(origin[1]))
    goal = (int(goal[0]), int(goal[1]))
    if not (in_bounds(*origin) and in_bounds(*goal)):
        return []

    cost = {origin: 0.0}
    came_from = {origin: origin}
    order = itertools.count()
    frontier = [(0.0, next(order), origin)]

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current == goal:
            break
        cx, cy = current
        for dx, dy in _STEPS:
            nxt = (cx + dx, cy + dy)
            if not in_bounds(*nxt) or grid.cell(*nxt).obstacle:
                continue
            new_cost = cost[current] + 1
            if new_cost < cost.get(nxt, math.inf):
                cost[nxt] = new_cost
                priority = new_cost + heuristic(nxt, goal)
                heapq.heappush(frontier, (priority, next(order), nxt))
                came_from[nxt] = current

    if goal == origin or goal not in came_from:
        return []

    path = []
    node = goal
    while node != origin:
        path.append(node)
        node = came_from[node]
    path.reverse()
    return path


@dataclass
class Route:
    """Start and goal cells and the path the bot is following."""

    start: Point = (1, 1)
    goal: Point = (GRID_W - 2, GRID_H - 2)
    path: list[Point] = field(default_factory=list)

    def recalc(self, grid: Grid, origin) -> None:
        """Replace the path with a fresh one from origin to the goal."""
        self.path = find_path(grid, origin, self.goal)