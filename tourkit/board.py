"""Chessboard grid, coordinates and move arrows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable, NamedTuple, Optional

BOARD_SIZE = 8


class Point(NamedTuple):
    """A square on the board as (row, column)."""

    x: int
    y: int


@dataclass(frozen=True)
class Arrow:
    """One recorded knight move: forward when ``step_next`` is true, else a step back."""

    start: Point
    end: Point
    step_next: bool


class Board:
    """Square grid of step numbers; zero marks an unvisited square."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self._cells = [[0] * size for _ in range(size)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _index(self, pos: Iterable[int]) -> tuple[int, int]:
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"square ({x}, {y}) is off a {self.size}x{self.size} board")
        return x, y

    def __getitem__(self, pos: Iterable[int]) -> int:
        x, y = self._index(pos)
        return self._cells[x][y]

    def __setitem__(self, pos: Iterable[int], value: int) -> None:
        x, y = self._index(pos)
        self._cells[x][y] = value

    def __str__(self) -> str:
        return "".join("".join(f"{value} " for value in row) + "\n" for row in self._cells)

    def print_board(self, file: Optional[IO[str]] = None) -> None:
        """Write the grid row by row, each value followed by a space."""
        print(str(self), end="", file=file)