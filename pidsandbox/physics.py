"""The bot, its PID controller, wind, drag and obstacle collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pidsandbox.config import CELL_SIZE
from pidsandbox.grid import Grid, Vec, in_bounds
from pidsandbox.pathfinder import Route

_WAYPOINT_RADIUS = CELL_SIZE * 0.17
_CONTROL_SCALE = 0.5
_WIND_SCALE = 100.0
_RESTITUTION = 0.6
_PUSH_BACK = 0.1


@dataclass
class Bot:
    """A point mass drawn as a circle."""

    pos: Vec = (0.0, 0.0)
    vel: Vec = (0.0, 0.0)
    mass: float = 0.3
    drag_coeff: float = 0.2
    max_speed: float = 800.0
    radius: int = 7


def circle_hits_rect(center, radius, rect) -> bool:
    """Return True if a circle overlaps the rectangle (x, y, width, height)."""
    rx, ry, rw, rh = rect
    half_w, half_h = rw / 2, rh / 2
    dx = abs(center[0] - (rx + half_w))
    dy = abs(center[1] - (ry + half_h))
    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    return (dx - half_w) ** 2 + (dy - half_h) ** 2 <= radius * radius


def _cell_index(coord: float) -> int:
    """Truncate a coordinate to an integer, then divide towards zero."""
    whole = int(coord)
    quotient = abs(whole) // CELL_SIZE
    return quotient if whole >= 0 else -quotient


def _unit(vec: Vec) -> Vec:
    length = math.hypot(*vec)
    if length == 0:
        return (0.0, 0.0)
    return (vec[0] / length, vec[1] / length)


@dataclass
class BotPhysics:
    """PID steering towards the next waypoint of a route."""

    P: float = 1.5
    I: float = 0.0
    D: float = 0.3
    integral: Vec = (0.0, 0.0)
    prev_error: Vec = (0.0, 0.0)

    def update(self, bot: Bot, dt: float, grid: Grid, route: Route) -> None:
        """Advance the bot by dt seconds; nothing moves without a path."""
        if not route.path:
            return

        cx, cy = route.path[0]
        target = (int((cx + 0.5) * CELL_SIZE), int((cy + 0.5) * CELL_SIZE))
        error = (target[0] - bot.pos[0], target[1] - bot.pos[1])

        if math.sqrt(math.hypot(*error)) < _WAYPOINT_RADIUS:
            route.path.pop(0)

        self.integral = (self.integral[0] + error[0], self.integral[1] + error[1])
        derivative = (error[0] - self.prev_error[0], error[1] - self.prev_error[1])
        self.prev_error = error

        control = tuple(
            _CONTROL_SCALE * (self.P * e + self.I * i + self.D * d)
            for e, i, d in zip(error, self.integral, derivative)
        )

        bx, by = _cell_index(bot.pos[0]), _cell_index(bot.pos[1])
        wind = grid.cell(bx, by).wind if in_bounds(bx, by) else (0.0, 0.0)

        accel = tuple(
            (c + w * _WIND_SCALE - v * bot.drag_coeff) / bot.mass
            for c, w, v in zip(control, wind, bot.vel)
        )
        bot.vel = (bot.vel[0] + accel[0] * dt, bot.vel[1] + accel[1] * dt)
        new_pos = (bot.pos[0] + bot.vel[0] * dt, bot.pos[1] + bot.vel[1] * dt)

        bot.pos = self._resolve_collision(bot, new_pos, grid)

        if route.path:
            current = (int(bot.pos[0] / CELL_SIZE), int(bot.pos[1] / CELL_SIZE))
            nx, ny = route.path[0]
            if grid.cell(nx, ny).obstacle:
                route.recalc(grid, current)

    def _resolve_collision(self, bot: Bot, new_pos: Vec, grid: Grid) -> Vec:
        col, row = _cell_index(new_pos[0]), _cell_index(new_pos[1])
        normals = []
        for y in range(row - 1, row + 2):
            for x in range(col - 1, col + 2):
                if not in_bounds(x, y) or not grid.cell(x, y).obstacle:
                    continue
                rect = (x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                if not circle_hits_rect(new_pos, bot.radius, rect):
                    continue
                center = ((x + 0.5) * CELL_SIZE, (y + 0.5) * CELL_SIZE)
                normals.append(_unit((bot.pos[0] - center[0], bot.pos[1] - center[1])))

        if not normals:
            return new_pos

        count = len(normals)
        normal = _unit((
            sum(n[0] for n in normals) / count,
            sum(n[1] for n in normals) / count,
        ))
        dot = bot.vel[0] * normal[0] + bot.vel[1] * normal[1]
        bot.vel = (
            (bot.vel[0] - 2 * dot * normal[0]) * _RESTITUTION,
            (bot.vel[1] - 2 * dot * normal[1]) * _RESTITUTION,
        )
        push = bot.radius * _PUSH_BACK
        return (bot.pos[0] + normal[0] * push, bot.pos[1] + normal[1] * push)