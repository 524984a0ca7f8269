"""Components used by the main menu ECS subsystem."""
from dataclasses import dataclass


@dataclass
class MenuTitle:
    """Heading drawn above the game buttons."""
    text: str
    x: float
    y: float


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (17, 17, 17)


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
