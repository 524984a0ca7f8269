"""Surface implementation backed by arcade's immediate-mode draw calls."""
from __future__ import annotations

from typing import Sequence

import arcade

from minigames.rendering.surface import Color, Point


class ArcadeSurface:
    """Maps top-left logical coordinates onto arcade's bottom-left window space."""

    def __init__(self, height: float, pixel_ratio: float = 1.0) -> None:
        self.height = height
        self.pixel_ratio = pixel_ratio

    def _x(self, x: float) -> float:
        return x * self.pixel_ratio

    def _y(self, y: float) -> float:
        return (self.height - y) * self.pixel_ratio

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        arcade.draw_lbwh_rectangle_filled(
            self._x(x),
            self._y(y + height),
            width * self.pixel_ratio,
            height * self.pixel_ratio,
            color,
        )

    def stroke_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Color,
        line_width: float = 1.0,
    ) -> None:
        arcade.draw_lbwh_rectangle_outline(
            self._x(x),
            self._y(y + height),
            width * self.pixel_ratio,
            height * self.pixel_ratio,
            color,
            border_width=line_width * self.pixel_ratio,
        )

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
    ) -> None:
        arcade.draw_text(
            text,
            self._x(x),
            self._y(y),
            color,
            size * self.pixel_ratio,
            anchor_x=anchor,
            anchor_y="center",
            bold=bold,
        )

    def draw_path(
        self,
        points: Sequence[Point],
        color: Color,
        *,
        line_width: float = 1.0,
        closed: bool = False,
        filled: bool = False,
    ) -> None:
        mapped = [(self._x(px), self._y(py)) for px, py in points]
        if len(mapped) < 2:
            return
        if filled:
            arcade.draw_polygon_filled(mapped, color)
        elif closed:
            arcade.draw_polygon_outline(mapped, color, line_width * self.pixel_ratio)
        else:
            arcade.draw_line_strip(mapped, color, line_width * self.pixel_ratio)
