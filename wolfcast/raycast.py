"""Casting rays through the map and drawing textured wall columns."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from wolfcast.config import Direction
from wolfcast.player import Player

WIDTH = 800
HEIGHT = 600
TEXTURE_SIZE = 64
_SHADE_MASK = 0x7F7F7F

Grid = Sequence[Sequence[int]]
Frame = list[list[int]]


@dataclass(frozen=True)
class Ray:
    """One screen column's ray and the wall slice it hit."""

    camera: float
    dx: float
    dy: float
    map_x: int
    map_y: int
    side: int
    distance: float
    line_height: int
    draw_start: int
    draw_end: int
    wall_x: float

    def face(self) -> Direction:
        """The side of the wall that was hit."""
        if self.side == 0:
            return Direction.WEST if self.dx < 0 else Direction.EAST
        return Direction.SOUTH if self.dy > 0 else Direction.NORTH


def _inverse(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


def cast_ray(
    player: Player, grid: Grid, x: int, width: int = WIDTH, height: int = HEIGHT
) -> Ray:
    """Trace the ray of screen column ``x`` until it enters a wall cell."""
    camera = 2 * x / width - 1
    ray_dx = player.dx + player.px * camera
    ray_dy = player.dy + player.py * camera
    map_x, map_y = int(player.x), int(player.y)
    delta_x, delta_y = _inverse(ray_dx), _inverse(ray_dy)
    if ray_dx < 0:
        step_x, side_x = -1, (player.x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - player.x) * delta_x
    if ray_dy < 0:
        step_y, side_y = -1, (player.y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - player.y) * delta_y
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if grid[map_y][map_x] > 0:
            break
    distance = side_x - delta_x if side == 0 else side_y - delta_y
    line_height = int(height / distance) if distance > 0 else height
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)
    if side == 0:
        wall_x = player.y + distance * ray_dy
    else:
        wall_x = player.x + distance * ray_dx
    wall_x -= math.floor(wall_x)
    return Ray(
        camera=camera,
        dx=ray_dx,
        dy=ray_dy,
        map_x=map_x,
        map_y=map_y,
        side=side,
        distance=distance,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        wall_x=wall_x,
    )


@dataclass
class Renderer:
    """Draws frames from square wall textures of ``texture_size`` pixels a side."""

    textures: Mapping[Direction, Sequence[int]]
    width: int = WIDTH
    height: int = HEIGHT
    texture_size: int = TEXTURE_SIZE

    def __post_init__(self) -> None:
        size = self.texture_size
        if size <= 0 or size & (size - 1):
            raise ValueError(f"texture size {size} is not a power of two")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid frame size {self.width}x{self.height}")
        for direction in Direction:
            if direction not in self.textures:
                raise ValueError(f"no texture for {direction.name.lower()}")
            if len(self.textures[direction]) < size * size:
                raise ValueError(f"{direction.name.lower()} texture is too small")

    def draw_column(self, frame: Frame, ray: Ray, x: int) -> None:
        """Paint the textured wall slice of ``ray`` into column ``x``."""
        if ray.draw_start >= ray.draw_end:
            return
        size = self.texture_size
        face = ray.face()
        tex_x = int(ray.wall_x * size)
        if (ray.side == 0 and ray.dx < 0) or (ray.side == 1 and ray.dy > 0):
            tex_x = size - tex_x - 1
        step = size / ray.line_height
        pos = (ray.draw_start - self.height // 2 + ray.line_height // 2) * step
        texture = self.textures[face]
        shaded = face in (Direction.NORTH, Direction.SOUTH)
        for y in range(ray.draw_start, ray.draw_end):
            pos += step
            color = texture[size * (int(pos) & (size - 1)) + tex_x]
            if shaded:
                color = (color >> 1) & _SHADE_MASK
            if color > 0:
                frame[y][x] = color

    def render(self, player: Player, grid: Grid) -> Frame:
        """Draw the walls seen by ``player``; empty pixels are 0."""
        frame = [[0] * self.width for _ in range(self.height)]
        for x in range(self.width):
            self.draw_column(frame, cast_ray(player, grid, x, self.width, self.height), x)
        return frame

    def compose(self, frame: Frame, ceiling: int, floor: int) -> Frame:
        """Fill empty pixels with ceiling above the middle and floor below.

        The bottom row keeps 0 where no wall was drawn.
        """
        half = self.height // 2
        last = self.height - 1
        return [
            [
                pixel if pixel > 0 else ceiling if y < half else floor if y < last else 0
                for pixel in row
            ]
            for y, row in enumerate(frame)
        ]