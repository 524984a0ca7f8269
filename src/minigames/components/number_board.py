from dataclasses import dataclass
from typing import Optional, Tuple

from minigames.components.grid import Grid, Position


@dataclass(slots=True)
class NumberCell:
    value: int = 0
    fixed: bool = False


@dataclass(slots=True)
class NumberBoard:
    """Player grid plus the hidden solution it is checked against.

    Editable cells hold whatever the player last wrote; nothing keeps them
    consistent with the solution or the row/column/box rule.
    """
    cells: Grid[NumberCell]
    solution: Grid[int]
    selected: Optional[Position] = None
    won: bool = False


@dataclass(frozen=True, slots=True)
class NumberSnapshot:
    values: Tuple[Tuple[int, ...], ...]
    fixed: Tuple[Tuple[bool, ...], ...]
    selected: Optional[Position]
    won: bool
