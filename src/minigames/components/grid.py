"""Fixed-size 2-D cell array shared by the three engines."""
from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")
Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Grid(Generic[T]):
    """Row-major grid with bounds-checked access.

    The row count and column count never change after construction. Rows can
    be removed and re-inserted (block line clearing) but the grid always keeps
    ``rows`` rows of ``cols`` cells.
    """

    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows: int, cols: int, factory: Callable[[int, int], T]):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: List[List[T]] = [
            [factory(r, c) for c in range(cols)] for r in range(rows)
        ]

    @classmethod
    def filled(cls, rows: int, cols: int, value: T) -> "Grid[T]":
        return cls(rows, cols, lambda r, c: value)

    @classmethod
    def from_rows(cls, rows: List[List[T]]) -> "Grid[T]":
        if not rows or not rows[0]:
            raise ValueError("Grid rows must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Grid rows must all have the same length")
        return cls(len(rows), width, lambda r, c: rows[r][c])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> T:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self._cells[row][col]

    def set(self, row: int, col: int, value: T) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        self._cells[row][col] = value

    def row(self, row: int) -> List[T]:
        """Return a copy of one row."""
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} outside {self.rows}-row grid")
        return list(self._cells[row])

    def column(self, col: int) -> List[T]:
        if not 0 <= col < self.cols:
            raise IndexError(f"Column {col} outside {self.cols}-column grid")
        return [self._cells[r][col] for r in range(self.rows)]

    def positions(self) -> Iterator[Position]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def items(self) -> Iterator[Tuple[Position, T]]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c), self._cells[r][c]

    def neighbors(self, row: int, col: int) -> Iterator[Position]:
        """Yield the in-bounds 8-connected neighbours of ``(row, col)``."""
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc):
                yield nr, nc

    def count(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for _, value in self.items() if predicate(value))

    def map(self, fn: Callable[[T], U]) -> "Grid[U]":
        return Grid(self.rows, self.cols, lambda r, c: fn(self._cells[r][c]))

    def copy(self) -> "Grid[T]":
        """Shallow copy: new row lists, same cell values."""
        return self.map(lambda value: value)

    def remove_row(self, row: int, fill: T) -> None:
        """Delete ``row`` and insert a fresh row of ``fill`` at the top."""
        if not 0 <= row < self.rows:
            raise IndexError(f"Row {row} outside {self.rows}-row grid")
        del self._cells[row]
        self._cells.insert(0, [fill] * self.cols)

    def to_rows(self) -> Tuple[Tuple[T, ...], ...]:
        return tuple(tuple(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"
