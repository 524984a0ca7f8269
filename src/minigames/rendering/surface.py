"""Drawing-surface capability consumed by every scene renderer.

Coordinates are logical with the origin at the top-left corner. Concrete
surfaces scale by ``pixel_ratio`` and map to their own axes.
"""
from __future__ import annotations

import math
from typing import List, Protocol, Sequence, Tuple

Color = Tuple[int, ...]
Point = Tuple[float, float]


class Surface(Protocol):
    pixel_ratio: float

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None: ...

    def stroke_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Color,
        line_width: float = 1.0,
    ) -> None: ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color,
        size: float,
        *,
        bold: bool = False,
        anchor: str = "center",
    ) -> None: ...

    def draw_path(
        self,
        points: Sequence[Point],
        color: Color,
        *,
        line_width: float = 1.0,
        closed: bool = False,
        filled: bool = False,
    ) -> None: ...


def circle_points(cx: float, cy: float, radius: float, segments: int = 24) -> List[Point]:
    step = 2 * math.pi / segments
    return [
        (cx + radius * math.cos(i * step), cy + radius * math.sin(i * step))
        for i in range(segments)
    ]
