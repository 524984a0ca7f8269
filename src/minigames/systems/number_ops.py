from __future__ import annotations

import logging
import random

from minigames.components.grid import Grid
from minigames.components.number_board import NumberCell
from minigames.constants import NUMBER_BOX, NUMBER_SIZE

logger = logging.getLogger(__name__)


def is_valid_placement(grid: Grid[int], row: int, col: int, digit: int, box: int = NUMBER_BOX) -> bool:
    """True if ``digit`` is absent from the row, column and box of ``(row, col)``."""
    for c in range(grid.cols):
        if grid.get(row, c) == digit:
            return False
    for r in range(grid.rows):
        if grid.get(r, col) == digit:
            return False
    box_row = (row // box) * box
    box_col = (col // box) * box
    for r in range(box_row, box_row + box):
        for c in range(box_col, box_col + box):
            if grid.get(r, c) == digit:
                return False
    return True


def solve(grid: Grid[int], rng: random.Random, box: int = NUMBER_BOX) -> bool:
    """Fill every empty cell of ``grid`` in place by randomized backtracking.

    The first empty cell in row-major order tries the digits in a freshly
    shuffled order. Returns False when no digit fits, which makes the caller
    undo its own placement and try its next candidate.
    """
    for row in range(grid.rows):
        for col in range(grid.cols):
            if grid.get(row, col) != 0:
                continue
            candidates = list(range(1, grid.cols + 1))
            rng.shuffle(candidates)
            for digit in candidates:
                if not is_valid_placement(grid, row, col, digit, box):
                    continue
                grid.set(row, col, digit)
                if solve(grid, rng, box):
                    return True
                grid.set(row, col, 0)
            return False
    return True


def generate_solution(
    rng: random.Random,
    size: int = NUMBER_SIZE,
    box: int = NUMBER_BOX,
) -> Grid[int]:
    grid: Grid[int] = Grid.filled(size, size, 0)
    if not solve(grid, rng, box):
        raise RuntimeError(f"Backtracking failed to fill an empty {size}x{size} grid")
    return grid


def carve_puzzle(solution: Grid[int], holes: int, rng: random.Random) -> Grid[NumberCell]:
    """Clear ``holes`` random cells of a copy of ``solution``.

    Cells that keep their value become fixed. No uniqueness check is made, so
    the result may admit other solutions than ``solution``.
    """
    total = solution.rows * solution.cols
    if not 0 <= holes <= total:
        raise ValueError(f"Cannot carve {holes} holes from a {total}-cell grid")
    values = solution.copy()
    removed = 0
    while removed < holes:
        row = rng.randrange(values.rows)
        col = rng.randrange(values.cols)
        if values.get(row, col) == 0:
            continue
        values.set(row, col, 0)
        removed += 1
    logger.debug("Carved %d of %d cells", holes, total)
    return Grid(
        values.rows,
        values.cols,
        lambda r, c: NumberCell(value=values.get(r, c), fixed=values.get(r, c) != 0),
    )
