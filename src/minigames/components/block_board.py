from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Optional, Tuple

from minigames.components.grid import Grid

Offset = Tuple[int, int]


class PieceType(Enum):
    """The seven piece types. The value is the token written into locked cells."""
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


# Canonical (dx, dy) templates. Pieces copy these, they never alias them.
SHAPES = MappingProxyType({
    PieceType.I: ((0, 1), (1, 1), (2, 1), (3, 1)),
    PieceType.J: ((0, 0), (0, 1), (1, 1), (2, 1)),
    PieceType.L: ((2, 0), (0, 1), (1, 1), (2, 1)),
    PieceType.O: ((1, 0), (2, 0), (1, 1), (2, 1)),
    PieceType.S: ((1, 0), (2, 0), (0, 1), (1, 1)),
    PieceType.T: ((1, 0), (0, 1), (1, 1), (2, 1)),
    PieceType.Z: ((0, 0), (1, 0), (1, 1), (2, 1)),
})

# Index into the offset list used as rotation centre; None means the piece never rotates.
PIVOT_INDEX = MappingProxyType({
    PieceType.I: 1,
    PieceType.J: 2,
    PieceType.L: 2,
    PieceType.O: None,
    PieceType.S: 2,
    PieceType.T: 2,
    PieceType.Z: 2,
})

PIECE_COLORS = MappingProxyType({
    PieceType.I: (0, 255, 255),
    PieceType.J: (0, 0, 255),
    PieceType.L: (255, 165, 0),
    PieceType.O: (255, 255, 0),
    PieceType.S: (0, 255, 0),
    PieceType.T: (128, 0, 128),
    PieceType.Z: (255, 0, 0),
})

EMPTY = 0


@dataclass(slots=True)
class Piece:
    """Falling piece: a private offset list anchored at ``(x, y)``."""
    type: PieceType
    offsets: List[Offset] = field(default_factory=list)
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, piece_type: PieceType, x: int, y: int) -> "Piece":
        return cls(type=piece_type, offsets=list(SHAPES[piece_type]), x=x, y=y)

    @property
    def token(self) -> int:
        return self.type.value

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute ``(x, y)`` board coordinates of the four blocks."""
        return [(self.x + dx, self.y + dy) for dx, dy in self.offsets]


@dataclass(slots=True)
class BlockBoard:
    cells: Grid[int]
    piece: Optional[Piece] = None
    next_type: Optional[PieceType] = None
    score: int = 0
    level: int = 1
    lines: int = 0
    game_over: bool = False
    paused: bool = False
    drop_accumulator_ms: float = 0.0

    @property
    def rows(self) -> int:
        return self.cells.rows

    @property
    def cols(self) -> int:
        return self.cells.cols


@dataclass(frozen=True, slots=True)
class BlockSnapshot:
    cells: Tuple[Tuple[int, ...], ...]
    piece_type: Optional[PieceType]
    piece_cells: Tuple[Tuple[int, int], ...]
    next_type: Optional[PieceType]
    score: int
    level: int
    lines: int
    game_over: bool
    paused: bool
