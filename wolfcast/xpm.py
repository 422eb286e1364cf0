"""Reading XPM images into 32-bit pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from wolfcast.colors import lookup_color

TRANSPARENT = -0x01000000
"""Pixel value given to the ``None`` colour (0xFF000000 read as signed)."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major signed 32-bit pixels."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def split_words(line: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(line) if word]


def _find_outside_quotes(text: str, token: str) -> int:
    in_quote = False
    for position, char in enumerate(text):
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(token, position):
            return position
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + max(count, 0))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    Block comments are blanked through their closing ``*/``; line comments
    are blanked through their terminating newline. Length is preserved.
    """
    while (begin := _find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        offset = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, offset + 4)
    while (begin := _find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        offset = end - (begin + 2) if end != -1 else -1
        text = _blank(text, begin, offset + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield, in order, every string enclosed in a pair of double quotes."""
    position = 0
    while True:
        opening = text.find('"', position)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        position = closing + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _to_pixel(color: int) -> int:
    if color == -1:
        color = 0xFF000000
    color &= 0xFFFFFFFF
    return color - (1 << 32) if color & 0x80000000 else color


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad header {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad header {line!r}")
    return values  # type: ignore[return-value]


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    direct = cpp <= 2
    table: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour line")
        words = split_words(line[cpp:])
        if "c" not in words:
            raise XpmError(f"no colour key in {line!r}")
        index = words.index("c") + 1
        if index >= len(words):
            raise XpmError(f"no colour after key in {line!r}")
        suffix = words[index + 1] if index + 1 < len(words) else None
        color = lookup_color(words[index], suffix)
        key = line[:cpp]
        if direct:
            table[key] = color
        else:
            table.setdefault(key, color)
    return table


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM string entries: header, colour lines, then pixel rows."""
    stream = iter(lines)
    width, height, count, cpp = _read_header(_next_line(stream, "header"))
    table = _read_colors(stream, count, cpp)
    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(stream, "pixel row")
        pixels.extend(
            _to_pixel(table.get(row[cpp * x:cpp * (x + 1)], 0)) for x in range(width)
        )
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(quoted_lines(strip_comments(text)))


def read_xpm_file(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as error:
        raise XpmError(f"cannot read {path}: {error}") from error
    return parse_xpm_text(text)