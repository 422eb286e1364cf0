"""Checking that the floor reachable from the start is enclosed by walls."""

from __future__ import annotations

from collections.abc import Sequence

_FLOOR = "0"
_GAPS = ("", " ", "\n", "\t")


class MapSolver:
    """Walks every floor cell reachable from the start position.

    Rows are map lines, normally ending with a newline. A visited cell fails
    when it lies on the first row or column, when there is no row below it,
    or when a neighbour is missing, a space, a tab or a line end.
    """

    def __init__(self, grid: Sequence[str], start_row: int, start_col: int) -> None:
        self.grid = tuple(grid)
        self.start_row = start_row
        self.start_col = start_col

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return ""

    @staticmethod
    def _neighbours(row: int, col: int) -> tuple[tuple[int, int], ...]:
        return ((row, col + 1), (row + 1, col), (row - 1, col), (row, col - 1))

    def _enclosed(self, row: int, col: int) -> bool:
        if row <= 0 or col <= 0 or row + 1 >= len(self.grid):
            return False
        return all(
            self._cell(r, c) not in _GAPS for r, c in self._neighbours(row, col)
        )

    def solve(self) -> bool:
        """True when every reachable floor cell is closed in."""
        start = (self.start_row, self.start_col)
        visited = {start}
        pending = [start]
        while pending:
            row, col = pending.pop()
            if not self._enclosed(row, col):
                return False
            for neighbour in self._neighbours(row, col):
                if neighbour not in visited and self._cell(*neighbour) == _FLOOR:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return True


def resolve_map(grid: Sequence[str], start_row: int, start_col: int) -> bool:
    """True when the map around the start position is closed by walls."""
    return MapSolver(grid, start_row, start_col).solve()