"""Draws the game selection menu."""
from __future__ import annotations

from typing import Iterable

from minigames.components.button import Button
from minigames.constants import COLOR_BUTTON, COLOR_BUTTON_OUTLINE, COLOR_TEXT
from minigames.menu.components import MenuBackground, MenuTitle
from minigames.rendering.surface import Surface
from minigames.rendering.widgets import draw_button


def render_menu(
    surface: Surface,
    width: float,
    height: float,
    backgrounds: Iterable[MenuBackground],
    titles: Iterable[MenuTitle],
    buttons: Iterable[Button],
) -> None:
    for background in backgrounds:
        surface.fill_rect(0, 0, width, height, background.color)
    for title in titles:
        surface.draw_text(title.text, title.x, title.y, COLOR_TEXT, 30, bold=True)
    for button in buttons:
        draw_button(surface, button, COLOR_BUTTON, COLOR_BUTTON_OUTLINE, COLOR_TEXT, 20)
