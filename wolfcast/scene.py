"""Loading a .cub scene and rendering a view of it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike

from wolfcast.config import (
    ConfigError,
    Direction,
    MapConfig,
    check_map,
    fill_map_config,
    read_source,
    split_join_sep,
)
from wolfcast.player import Player
from wolfcast.raycast import HEIGHT, WIDTH, Renderer
from wolfcast.search import find_any
from wolfcast.solver import resolve_map
from wolfcast.xpm import XpmError, XpmImage, read_xpm_file

_MARKERS = ("N", "S", "W", "E")
_EXTENSION = ".cub"


class SceneError(ValueError):
    """Raised when a scene cannot be loaded."""


@dataclass
class Scene:
    """A parsed scene: header settings, map rows, wall grid and start."""

    config: MapConfig
    rows: list[str]
    grid: list[list[int]]
    start_row: int
    start_col: int
    start_direction: Direction
    textures: dict[Direction, XpmImage] = field(default_factory=dict)


def find_start(lines: Sequence[str]) -> tuple[int, int]:
    """Return (row, column) of the start marker; the last marked row wins."""
    start = None
    for row, line in enumerate(lines):
        col = find_any(_MARKERS, line)
        if col != -1:
            start = (row, col)
    if start is None:
        raise SceneError("no start position in map")
    return start


def to_int_map(lines: Sequence[str]) -> list[list[int]]:
    """Turn map rows into walls (1) and open cells (0)."""
    return [[1 if char == "1" else 0 for char in line] for line in lines]


def parse_scene(text: str) -> Scene:
    """Parse the text of a scene description."""
    config = fill_map_config(text)
    if not config.is_complete():
        raise SceneError("missing or invalid texture or colour entry")
    body = text[config.offset:]
    try:
        check_map(config, [line for line in body.split("\n") if line])
    except ConfigError as error:
        raise SceneError(str(error)) from error
    rows = split_join_sep(body, "\n")
    start_row, start_col = find_start(rows)
    if not resolve_map(rows, start_row, start_col):
        raise SceneError("map is not enclosed by walls")
    lines = [row[:-1] for row in rows]
    assert config.start_direction is not None
    return Scene(
        config=config,
        rows=lines,
        grid=to_int_map(lines),
        start_row=start_row,
        start_col=start_col,
        start_direction=config.start_direction,
    )


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read a .cub file, parse it and load its wall textures."""
    name = str(path)
    if len(name) < 5 or not name.endswith(_EXTENSION):
        raise SceneError(f"{name}: scene file must end with {_EXTENSION}")
    try:
        text = read_source(path)
    except OSError as error:
        raise SceneError(f"cannot open {name}: {error.strerror}") from error
    if text == "\n":
        raise SceneError(f"{name}: scene file is empty")
    scene = parse_scene(text)
    for direction in Direction:
        try:
            scene.textures[direction] = read_xpm_file(scene.config.textures[direction])
        except XpmError as error:
            raise SceneError(f"cannot load texture: {error}") from error
    return scene


def _write_ppm(path: str, image: list[list[int]]) -> None:
    height = len(image)
    width = len(image[0]) if image else 0
    data = bytearray(f"P6\n{width} {height}\n255\n".encode("ascii"))
    for row in image:
        for pixel in row:
            value = pixel & 0xFFFFFF
            data += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    with open(path, "wb") as handle:
        handle.write(data)


def main(argv: Sequence[str] | None = None) -> int:
    """Load a scene and render the view from its start position."""
    parser = argparse.ArgumentParser(
        prog="wolfcast", description="Render the starting view of a .cub scene."
    )
    parser.add_argument("scene", help="scene description file")
    parser.add_argument("-o", "--output", help="write the frame as a binary PPM image")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    args = parser.parse_args(argv)
    try:
        scene = load_scene(args.scene)
        renderer = Renderer(
            {direction: image.pixels for direction, image in scene.textures.items()},
            args.width,
            args.height,
            scene.textures[Direction.NORTH].width,
        )
    except ValueError as error:
        print(f"Error\n{error}", file=sys.stderr)
        return 1
    player = Player.from_start(scene.start_row, scene.start_col, scene.start_direction)
    frame = renderer.render(player, scene.grid)
    image = renderer.compose(frame, scene.config.ceiling, scene.config.floor)
    if args.output:
        _write_ppm(args.output, image)
    else:
        print(
            f"{args.scene}: start ({scene.start_row}, {scene.start_col}) "
            f"facing {scene.start_direction.name.lower()}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())