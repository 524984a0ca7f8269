from dataclasses import dataclass
from enum import Enum, auto


class PointerPhase(Enum):
    START = auto()
    MOVE = auto()
    END = auto()


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Pointer sample in logical coordinates, origin at the top-left corner."""
    phase: PointerPhase
    x: float
    y: float
