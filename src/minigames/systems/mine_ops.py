from __future__ import annotations

import random
from collections import deque
from typing import Iterable, List, Set

from minigames.components.grid import Grid, Position
from minigames.components.mine_board import CellState, MineCell


def place_mines(cells: Grid[MineCell], mines: int, rng: random.Random) -> List[Position]:
    """Mark ``mines`` distinct cells as mines by rejection sampling."""
    if mines >= cells.rows * cells.cols:
        raise ValueError(
            f"Cannot place {mines} mines on a {cells.rows}x{cells.cols} board"
        )
    placed: List[Position] = []
    while len(placed) < mines:
        row = rng.randrange(cells.rows)
        col = rng.randrange(cells.cols)
        cell = cells.get(row, col)
        if cell.is_mine:
            continue
        cell.is_mine = True
        placed.append((row, col))
    return placed


def place_mines_at(cells: Grid[MineCell], positions: Iterable[Position]) -> List[Position]:
    placed: List[Position] = []
    for row, col in positions:
        cell = cells.get(row, col)
        if cell.is_mine:
            raise ValueError(f"Duplicate mine position ({row}, {col})")
        cell.is_mine = True
        placed.append((row, col))
    return placed


def compute_neighbor_counts(cells: Grid[MineCell]) -> None:
    for (row, col), cell in cells.items():
        if cell.is_mine:
            continue
        cell.neighbor_mine_count = sum(
            1 for nr, nc in cells.neighbors(row, col) if cells.get(nr, nc).is_mine
        )


def build_cells(
    rows: int,
    cols: int,
    mines: int,
    rng: random.Random,
    *,
    mine_positions: Iterable[Position] | None = None,
) -> Grid[MineCell]:
    """Allocate a fresh board, place the mines and count neighbours."""
    cells: Grid[MineCell] = Grid(rows, cols, lambda r, c: MineCell())
    if mine_positions is None:
        place_mines(cells, mines, rng)
    else:
        placed = place_mines_at(cells, mine_positions)
        if len(placed) != mines:
            raise ValueError(f"Expected {mines} mine positions, got {len(placed)}")
    compute_neighbor_counts(cells)
    return cells


def flood_reveal(cells: Grid[MineCell], row: int, col: int) -> List[Position]:
    """Cascade outward from an already revealed zero-count cell.

    Every hidden, non-mine neighbour of a zero-count cell is revealed; the
    cascade continues from those that are zero-count themselves. Flagged and
    revealed cells stop it. Returns the newly revealed positions.
    """
    revealed: List[Position] = []
    frontier = deque([(row, col)])
    seen: Set[Position] = {(row, col)}
    while frontier:
        r, c = frontier.popleft()
        for nr, nc in cells.neighbors(r, c):
            neighbor = cells.get(nr, nc)
            if neighbor.state != CellState.HIDDEN or neighbor.is_mine:
                continue
            neighbor.state = CellState.REVEALED
            revealed.append((nr, nc))
            if neighbor.neighbor_mine_count == 0 and (nr, nc) not in seen:
                seen.add((nr, nc))
                frontier.append((nr, nc))
    return revealed


def reveal_all(cells: Grid[MineCell]) -> None:
    for _, cell in cells.items():
        cell.state = CellState.REVEALED


def unrevealed_count(cells: Grid[MineCell]) -> int:
    return cells.count(lambda cell: cell.state != CellState.REVEALED)
