from __future__ import annotations

from minigames.components.button import Button, ButtonShape
from minigames.rendering.surface import Color, Surface, circle_points


def draw_button(
    surface: Surface,
    button: Button,
    fill: Color,
    outline: Color,
    text_color: Color,
    font_size: float,
    *,
    label: str | None = None,
    bold: bool = False,
    caption_color: Color | None = None,
) -> None:
    text = button.label if label is None else label
    cx, cy = button.center
    if button.shape == ButtonShape.CIRCLE:
        ring = circle_points(cx, cy, button.width / 2)
        surface.draw_path(ring, fill, filled=True)
        surface.draw_path(ring, outline, line_width=2, closed=True)
    else:
        surface.fill_rect(button.left, button.top, button.width, button.height, fill)
        surface.stroke_rect(button.left, button.top, button.width, button.height, outline, 2)
    surface.draw_text(text, cx, cy, text_color, font_size, bold=bold)
    if button.caption and caption_color is not None:
        surface.draw_text(button.caption, cx, button.top + button.height + 12, caption_color, 11)


def draw_header_button(surface: Surface, button: Button, fill: Color, outline: Color) -> None:
    draw_button(surface, button, fill, outline, (255, 255, 255), 14)
