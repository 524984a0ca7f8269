from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from minigames.components.grid import Grid


class CellState(Enum):
    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class MineStatus(Enum):
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealMode(Enum):
    """What a board press does in the mine scene."""
    REVEAL = auto()
    FLAG = auto()


@dataclass(slots=True)
class MineCell:
    is_mine: bool = False
    neighbor_mine_count: int = 0
    state: CellState = CellState.HIDDEN


@dataclass(slots=True)
class MineBoard:
    """Mine grid plus its derived counters.

    ``neighbor_mine_count`` is computed once when the board is built.
    ``mines_remaining`` is ``mines - flagged`` and may go negative.
    """
    cells: Grid[MineCell]
    mines: int
    mines_remaining: int
    status: MineStatus = MineStatus.PLAYING
    mode: RevealMode = RevealMode.REVEAL

    @property
    def rows(self) -> int:
        return self.cells.rows

    @property
    def cols(self) -> int:
        return self.cells.cols


@dataclass(frozen=True, slots=True)
class MineCellView:
    is_mine: bool
    neighbor_mine_count: int
    state: CellState


@dataclass(frozen=True, slots=True)
class MineSnapshot:
    cells: Tuple[Tuple[MineCellView, ...], ...]
    mines: int
    mines_remaining: int
    status: MineStatus
    mode: RevealMode
