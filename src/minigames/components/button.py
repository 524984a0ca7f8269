"""Pressable screen region shared by every scene."""
from dataclasses import dataclass
from enum import Enum, auto


class ButtonShape(Enum):
    RECT = auto()
    CIRCLE = auto()


@dataclass(slots=True)
class Button:
    """Interactive button in logical coordinates.

    ``left``/``top`` is the top-left corner of the bounding box. Circle buttons
    use the box's inscribed circle as their hit region.
    """
    action: str
    label: str
    left: float
    top: float
    width: float
    height: float
    shape: ButtonShape = ButtonShape.RECT
    caption: str = ""

    @property
    def center(self) -> tuple[float, float]:
        return self.left + self.width / 2, self.top + self.height / 2

    def contains(self, x: float, y: float) -> bool:
        if self.shape == ButtonShape.CIRCLE:
            cx, cy = self.center
            radius = self.width / 2
            dx = x - cx
            dy = y - cy
            return dx * dx + dy * dy <= radius * radius
        return (
            self.left <= x <= self.left + self.width
            and self.top <= y <= self.top + self.height
        )


def button_at(buttons, x: float, y: float) -> Button | None:
    """Return the first button whose hit region contains the point."""
    for button in buttons:
        if button.contains(x, y):
            return button
    return None
