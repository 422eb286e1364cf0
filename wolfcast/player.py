"""The player: position, view direction, camera plane and movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from wolfcast.config import Direction

_FORWARD_LIMIT = 0.1
_BACKWARD_LIMIT = 1.0
_TURN_LIMIT = 0.6

# direction vector (dx, dy) and camera plane (px, py) for each start facing
_START_VECTORS = {
    Direction.NORTH: (0.0, -1.0, 0.66, 0.0),
    Direction.SOUTH: (0.0, 1.0, -0.66, 0.0),
    Direction.EAST: (1.0, 0.0, 0.0, 0.66),
    Direction.WEST: (-1.0, 0.0, 0.0, -0.66),
}


@dataclass
class Player:
    """Position in map units, view direction and camera plane."""

    x: float
    y: float
    dx: float
    dy: float
    px: float
    py: float
    move_speed: float = 0.2
    rot_speed: float = 0.1
    is_moving: bool = False

    @classmethod
    def from_start(cls, row: int, col: int, direction: Direction) -> Player:
        """Place a player in the middle of a cell, facing ``direction``."""
        dx, dy, px, py = _START_VECTORS[Direction(direction)]
        return cls(x=col + 0.5, y=row + 0.5, dx=dx, dy=dy, px=px, py=py)

    def _step(self, grid: Sequence[Sequence[int]], speed: float) -> None:
        target_x = self.x + self.dx * speed
        target_y = self.y + self.dy * speed
        if grid[int(self.y)][int(target_x)] == 0:
            self.x += self.dx * speed
        if grid[int(target_y)][int(self.x)] == 0:
            self.y += self.dy * speed

    def move_forward(self, grid: Sequence[Sequence[int]]) -> None:
        """Step along the view direction unless a wall is in the way."""
        self._step(grid, min(self.move_speed, _FORWARD_LIMIT))

    def move_backward(self, grid: Sequence[Sequence[int]]) -> None:
        """Step against the view direction unless a wall is in the way."""
        self._step(grid, -min(self.move_speed, _BACKWARD_LIMIT))

    def _rotate(self, angle: float) -> None:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dx, self.dy = (
            self.dx * cos_a - self.dy * sin_a,
            self.dx * sin_a + self.dy * cos_a,
        )
        self.px, self.py = (
            self.px * cos_a - self.py * sin_a,
            self.px * sin_a + self.py * cos_a,
        )

    def turn_right(self) -> None:
        """Rotate view and camera plane clockwise on screen."""
        self._rotate(min(self.rot_speed, _TURN_LIMIT))

    def turn_left(self) -> None:
        """Rotate view and camera plane anticlockwise on screen."""
        self._rotate(-min(self.rot_speed, _TURN_LIMIT))