"""Event loop that shows the demo and moves a cursor box with the arrow keys."""

from __future__ import annotations

import time

import pygame

from pixelboard.base import BoundsStatus, ColorIdx, Point, Size
from pixelboard.graphics import Graphics

_POLL_INTERVAL = 0.001

_EXPOSE_EVENTS = frozenset({pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED})
_ACCEPTED_EVENTS = [pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, pygame.QUIT, *_EXPOSE_EVENTS]

_MOVES = {
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
}


class Runner:
    """Drives a Graphics window from its event queue."""

    def __init__(self, graphics: Graphics):
        self._graphics = graphics
        self._running = True
        self._x_step = graphics.width // 10
        self._y_step = graphics.height // 10
        self._size = Size(self._x_step, self._y_step)
        self._top_left = Point()
        pygame.event.set_blocked(None)
        pygame.event.set_allowed(_ACCEPTED_EVENTS)

    @property
    def top_left(self) -> Point:
        return self._top_left

    @property
    def size(self) -> Size:
        return self._size

    @property
    def running(self) -> bool:
        return self._running

    def _move(self, dx: int, dy: int) -> None:
        top_left = Point(self._top_left.x + dx * self._x_step, self._top_left.y + dy * self._y_step)
        bottom_right = Point(top_left.x + self._size.w, top_left.y + self._size.h)
        if all(self._graphics.is_in_bounds(p) == BoundsStatus.OK for p in (top_left, bottom_right)):
            self._top_left = top_left
            self._graphics.refresh()

    def handle_event(self, event) -> bool:
        """Act on one event; return False when the loop should stop."""
        if event.type in _EXPOSE_EVENTS:
            self.draw()
            return True
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self._graphics.refresh()
            elif event.key in _MOVES:
                self._move(*_MOVES[event.key])
            elif event.key == pygame.K_ESCAPE:
                return False
            return True
        if event.type == pygame.MOUSEBUTTONDOWN:
            return True
        return False

    def draw(self) -> None:
        if self._graphics.has_snapshot:
            self._graphics.show_snapshot()
        else:
            self._graphics.demo()
            self._graphics.take_snapshot()
        self._graphics.draw_rect(self._top_left, self._size, ColorIdx.BRIGHT_RED, False)

    def run(self) -> None:
        self._graphics.refresh()
        pygame.display.flip()
        while self._running:
            event = pygame.event.poll()
            if event.type != pygame.NOEVENT:
                self._running = self.handle_event(event)
                pygame.display.flip()
            time.sleep(_POLL_INTERVAL)