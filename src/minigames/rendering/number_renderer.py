"""Draws the number grid, its digit pad and the solved overlay."""
from __future__ import annotations

from minigames.components.number_board import NumberSnapshot
from minigames.constants import (
    COLOR_HEADER_BUTTON,
    COLOR_HEADER_OUTLINE,
    COLOR_NUMBER_BACKGROUND,
    COLOR_NUMBER_FIXED,
    COLOR_NUMBER_INK,
    COLOR_NUMBER_PAD,
    COLOR_NUMBER_PAD_OUTLINE,
    COLOR_NUMBER_SELECTED,
    COLOR_NUMBER_THIN,
    COLOR_NUMBER_USER,
    COLOR_OVERLAY,
    COLOR_WIN_TEXT,
)
from minigames.rendering.surface import Surface
from minigames.rendering.widgets import draw_button, draw_header_button
from minigames.ui.layout import SceneLayout


def _grid_lines(surface: Surface, layout: SceneLayout, box: int) -> None:
    board = layout.board
    size = board.cell_size
    for index in range(board.rows + 1):
        thick = index % box == 0
        color = COLOR_NUMBER_INK if thick else COLOR_NUMBER_THIN
        width = 3 if thick else 1
        offset = index * size
        surface.draw_path(
            [(board.left, board.top + offset), (board.right, board.top + offset)],
            color,
            line_width=width,
        )
        surface.draw_path(
            [(board.left + offset, board.top), (board.left + offset, board.bottom)],
            color,
            line_width=width,
        )


def render_numbers(surface: Surface, snapshot: NumberSnapshot, layout: SceneLayout, box: int = 3) -> None:
    board = layout.board
    surface.fill_rect(0, 0, layout.width, layout.height, COLOR_NUMBER_BACKGROUND)
    surface.draw_text("Sudoku", layout.width - 60, layout.header_y, COLOR_NUMBER_INK, 18, bold=True)

    if snapshot.selected is not None:
        x, y, w, h = board.cell_rect(*snapshot.selected)
        surface.fill_rect(x, y, w, h, COLOR_NUMBER_SELECTED)

    for row, values in enumerate(snapshot.values):
        for col, value in enumerate(values):
            if value == 0:
                continue
            x, y, w, h = board.cell_rect(row, col)
            fixed = snapshot.fixed[row][col]
            surface.draw_text(
                str(value),
                x + w / 2,
                y + h / 2,
                COLOR_NUMBER_FIXED if fixed else COLOR_NUMBER_USER,
                board.cell_size * 0.55,
                bold=fixed,
            )

    _grid_lines(surface, layout, box)

    for button in layout.buttons:
        if button.action in ("back", "new"):
            draw_header_button(surface, button, COLOR_HEADER_BUTTON, COLOR_HEADER_OUTLINE)
        else:
            draw_button(surface, button, COLOR_NUMBER_PAD, COLOR_NUMBER_PAD_OUTLINE, (255, 255, 255), 16, bold=True)

    if snapshot.won:
        surface.fill_rect(0, 0, layout.width, layout.height, COLOR_OVERLAY)
        surface.draw_text("You Won!", layout.width / 2, layout.height / 2, COLOR_WIN_TEXT, 40, bold=True)
