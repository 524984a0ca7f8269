from __future__ import annotations

from typing import List, Sequence

from minigames.components.block_board import EMPTY, PIVOT_INDEX, Offset, Piece
from minigames.components.grid import Grid


def is_valid_move(cells: Grid[int], offsets: Sequence[Offset], x: int, y: int) -> bool:
    """True when every block of ``offsets`` anchored at ``(x, y)`` may sit there.

    Columns must stay on the board and rows must not pass the floor. Rows above
    the top edge (y < 0) are allowed so spawning pieces can poke out; on-board
    targets must be empty.
    """
    for dx, dy in offsets:
        cx = x + dx
        cy = y + dy
        if cx < 0 or cx >= cells.cols or cy >= cells.rows:
            return False
        if cy >= 0 and cells.get(cy, cx) != EMPTY:
            return False
    return True


def rotated_offsets(piece: Piece) -> List[Offset]:
    """Return the piece's offsets turned 90 degrees about its pivot block.

    Pieces without a pivot (the square) come back unchanged. The piece itself
    is not modified.
    """
    pivot_index = PIVOT_INDEX[piece.type]
    if pivot_index is None:
        return list(piece.offsets)
    cx, cy = piece.offsets[pivot_index]
    return [(cx - (py - cy), cy + (px - cx)) for px, py in piece.offsets]


def lock_piece(cells: Grid[int], piece: Piece) -> int:
    """Write the piece's token into the board. Returns the number of blocks written."""
    written = 0
    for x, y in piece.cells():
        if cells.in_bounds(y, x):
            cells.set(y, x, piece.token)
            written += 1
    return written


def clear_full_rows(cells: Grid[int]) -> int:
    """Remove every full row, compacting the stack downward.

    Scans bottom-up. After a removal the same index holds the row that was
    above it, so it is examined again before moving up.
    """
    cleared = 0
    row = cells.rows - 1
    while row >= 0:
        if all(value != EMPTY for value in cells.row(row)):
            cells.remove_row(row, EMPTY)
            cleared += 1
            continue
        row -= 1
    return cleared


def drop_interval_ms(level: int, base: float, step: float, minimum: float) -> float:
    return max(minimum, base - (level - 1) * step)
