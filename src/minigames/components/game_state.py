"""Game state resource describing the active scene."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SceneId(Enum):
    """Identifiers of the scenes that can occupy the active slot."""
    MENU = "menu"
    BLOCKS = "blocks"
    MINES = "mines"
    NUMBERS = "numbers"


@dataclass
class GameState:
    """Singleton component storing the currently active scene."""
    scene: Optional[SceneId] = None
