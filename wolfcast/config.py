"""Reading the header of a scene description: textures, colours, map checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike

from wolfcast.search import find_any, find_substring

_READ_LIMIT = 100000 - 2
_HEADER_KEYS = ("NO", "SO", "WE", "EA", "F", "C")
_MAP_CHARS = "10NOWSE "
_PARAM_COUNT = 6


class ConfigError(ValueError):
    """Raised when a scene description is invalid."""


class Direction(IntEnum):
    """Compass directions, also the order of the wall textures."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


_CARDINALS = {
    "N": Direction.NORTH,
    "S": Direction.SOUTH,
    "W": Direction.WEST,
    "E": Direction.EAST,
}

_TEXTURE_KEYS = {
    "NO": Direction.NORTH,
    "SO": Direction.SOUTH,
    "WE": Direction.WEST,
    "EA": Direction.EAST,
}


@dataclass
class MapConfig:
    """Settings read from the header; ``offset`` is where the header ends."""

    source: str = ""
    offset: int = 0
    textures: dict[Direction, str] = field(default_factory=dict)
    floor: int | None = None
    ceiling: int | None = None
    start_direction: Direction | None = None

    def is_complete(self) -> bool:
        """True when both colours and all four textures are set."""
        return (
            self.floor is not None
            and self.ceiling is not None
            and all(direction in self.textures for direction in Direction)
        )


def is_valid_rgb(parts: list[str]) -> bool:
    """True for exactly three parts of one to three decimal digits each."""
    return len(parts) == 3 and all(
        1 <= len(part) <= 3 and all(char in "0123456789" for char in part)
        for part in parts
    )


def parse_rgb(text: str) -> int:
    """Turn ``R,G,B`` into a 0xRRGGBB value; empty fields are skipped."""
    parts = [part for part in text.split(",") if part]
    if not is_valid_rgb(parts):
        raise ConfigError(f"invalid colour {text!r}")
    red, green, blue = (int(part) for part in parts)
    if not all(0 <= channel <= 255 for channel in (red, green, blue)):
        raise ConfigError(f"colour channel out of range in {text!r}")
    return (red << 16) + (green << 8) + blue


def split_join_sep(text: str, sep: str) -> list[str]:
    """Split on ``sep``, drop empty pieces, and end each piece with a newline."""
    return [piece + "\n" for piece in text.split(sep) if piece]


def read_source(path: str | PathLike[str]) -> str:
    """Read a scene file up to its first NUL byte, ending it with a newline."""
    with open(path, "rb") as handle:
        data = handle.read(_READ_LIMIT)
    data = data.split(b"\0", 1)[0]
    return data.decode("latin-1") + "\n"


def _apply_line(config: MapConfig, line: str) -> None:
    if "C" in line or "F" in line:
        value = line[2:].strip(" \t")
    else:
        value = line[3:].strip(" \t")
    for key, direction in _TEXTURE_KEYS.items():
        if line.startswith(key):
            if find_substring(".xpm", line) != -1:
                config.textures[direction] = value
                return
    if line.startswith("F"):
        config.floor = _colour_or_none(value)
    elif line.startswith("C"):
        config.ceiling = _colour_or_none(value)


def _colour_or_none(value: str) -> int | None:
    try:
        return parse_rgb(value)
    except ConfigError:
        return None


def fill_map_config(text: str) -> MapConfig:
    """Read the first six header entries of a scene description."""
    config = MapConfig(source=text)
    index = 0
    params = 0
    while index + 1 < len(text) and params < _PARAM_COUNT:
        end = text.find("\n", index)
        if end == -1:
            end = len(text)
        line = text[index:end]
        if find_any(_HEADER_KEYS, line) != -1:
            _apply_line(config, line)
            params += 1
            index = end
        else:
            index += 1
    config.offset = index
    return config


def _map_is_one_block(config: MapConfig) -> bool:
    body = config.source[config.offset:].strip("\n\t ")
    position = body.find("\n\n")
    while position != -1:
        rest = body[position + 1:]
        if "1" in rest or "0" in rest:
            return False
        position = body.find("\n\n", position + 1)
    return True


def check_map(config: MapConfig, lines: list[str]) -> Direction:
    """Validate map rows and record the single start direction.

    Raises ConfigError on an unknown character, on anything but exactly
    one start marker, or when the map is split by an empty line.
    """
    markers = 0
    direction: Direction | None = None
    for line in lines:
        for char in line:
            if char not in _MAP_CHARS:
                raise ConfigError(f"invalid map character {char!r}")
            if char in _CARDINALS:
                markers += 1
                direction = _CARDINALS[char]
    if markers != 1 or direction is None:
        raise ConfigError(f"expected one start position, found {markers}")
    if not _map_is_one_block(config):
        raise ConfigError("map is split by an empty line")
    config.start_direction = direction
    return direction