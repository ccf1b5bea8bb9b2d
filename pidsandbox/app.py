"""Interactive sandbox window: edit obstacles and wind, watch the bot."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field

import pygame

from pidsandbox.config import CELL_SIZE, SCREEN_H, SCREEN_W, Mode
from pidsandbox.grid import Grid, Vec, in_bounds
from pidsandbox.pathfinder import Route
from pidsandbox.physics import Bot, BotPhysics

_WHITE = (255, 255, 255)
_GRAY = (130, 130, 130)
_DARKGRAY = (80, 80, 80)
_RED = (230, 41, 55)
_GREEN = (0, 228, 48)
_BLUE = (0, 121, 241)
_SKYBLUE = (102, 191, 255)
_ORANGE = (255, 161, 0)


def wind_from_drag(start, end) -> Vec | None:
    """Turn a mouse drag into a wind vector in cell units; None for no drag."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if math.hypot(dx, dy) == 0:
        return None
    return (dx / CELL_SIZE, dy / CELL_SIZE)


@dataclass
class Button:
    """A clickable mode selector."""

    bounds: tuple[float, float, float, float]
    label: str
    mode: Mode

    def contains(self, point) -> bool:
        """Return True if the point lies inside the button."""
        x, y, w, h = self.bounds
        return x <= point[0] < x + w and y <= point[1] < y + h


def _default_buttons() -> list[Button]:
    return [
        Button((10, SCREEN_H - 35, 120, 30), "Obstacle Mode", Mode.OBSTACLE),
        Button((140, SCREEN_H - 35, 120, 30), "Wind Mode", Mode.WIND),
    ]


def _cell_at(point) -> tuple[int, int]:
    return int(point[0] / CELL_SIZE), int(point[1] / CELL_SIZE)


@dataclass
class Editor:
    """Turns mouse actions into grid edits."""

    grid: Grid
    mode: Mode = Mode.OBSTACLE
    buttons: list[Button] = field(default_factory=_default_buttons)
    wind_cell: tuple[int, int] | None = None
    drag_start: tuple[float, float] | None = None

    def press(self, point) -> None:
        """Handle a left-button press."""
        for button in self.buttons:
            if button.contains(point):
                self.mode = button.mode

        cell = _cell_at(point)
        if not in_bounds(*cell):
            return
        if self.mode is Mode.WIND:
            self.wind_cell = cell
            self.drag_start = (point[0], point[1])
        else:
            self.grid.set_obstacle(*cell, True)

    def release(self, point) -> None:
        """Handle a left-button release, finishing any wind drag."""
        if self.wind_cell is not None and self.drag_start is not None:
            wind = wind_from_drag(self.drag_start, point)
            if wind is not None:
                self.grid.apply_wind(*self.wind_cell, wind)
        self.wind_cell = None
        self.drag_start = None

    def erase(self, point) -> None:
        """Clear obstacle and wind under the point."""
        cell = _cell_at(point)
        if in_bounds(*cell):
            self.grid.erase(*cell)


def _draw_grid(screen, grid: Grid, route: Route) -> None:
    overlay = pygame.Surface((CELL_SIZE, CELL_SIZE), pygame.SRCALPHA)
    overlay.fill((*_GREEN, 77))
    for x, y in route.path:
        screen.blit(overlay, (x * CELL_SIZE, y * CELL_SIZE))

    for x, y, cell in grid:
        rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        if cell.obstacle:
            pygame.draw.rect(screen, _RED, rect)
        else:
            pygame.draw.rect(screen, _DARKGRAY, rect, 1)

        wx, wy = cell.wind
        if wx or wy:
            center = ((x + 0.5) * CELL_SIZE, (y + 0.5) * CELL_SIZE)
            scale = 15.0 / (math.hypot(wx, wy) + 0.7)
            end = (center[0] + wx * scale, center[1] + wy * scale)
            pygame.draw.line(screen, _SKYBLUE, center, end, 3)


def _draw_buttons(screen, font, editor: Editor) -> None:
    for button in editor.buttons:
        color = _GRAY if editor.mode is button.mode else _DARKGRAY
        pygame.draw.rect(screen, color, pygame.Rect(*button.bounds))
        label = font.render(button.label, True, _WHITE)
        screen.blit(label, (button.bounds[0] + 10, button.bounds[1] + 5))


def main(argv=None) -> int:
    """Open the sandbox window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="pidsandbox",
        description="Draw obstacles and wind, and watch a PID-steered bot follow its path.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption("PID Sandbox")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()

        grid = Grid()
        route = Route()
        half = CELL_SIZE // 2
        bot = Bot(pos=(float(route.start[0] * CELL_SIZE + half),
                       float(route.start[1] * CELL_SIZE + half)))
        physics = BotPhysics()
        editor = Editor(grid)
        route.recalc(grid, route.start)

        running = True
        while running:
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    editor.press(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    editor.release(event.pos)
            if pygame.mouse.get_pressed()[2]:
                editor.erase(pygame.mouse.get_pos())

            physics.update(bot, dt, grid, route)

            screen.fill(_WHITE)
            _draw_grid(screen, grid, route)
            for (x, y), color in ((route.start, _BLUE), (route.goal, _GREEN)):
                pygame.draw.rect(screen, color,
                                 pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE))
            pygame.draw.circle(screen, _ORANGE, bot.pos, bot.radius)
            _draw_buttons(screen, font, editor)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0