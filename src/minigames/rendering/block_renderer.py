"""Draws the block stacker as a handheld console: shell, LCD screen, keypad."""
from __future__ import annotations

from minigames.components.block_board import EMPTY, PIECE_COLORS, SHAPES, BlockSnapshot, PieceType
from minigames.constants import (
    COLOR_BLOCK_BLUE,
    COLOR_BLOCK_GREEN,
    COLOR_BLOCK_GRID,
    COLOR_BLOCK_INK,
    COLOR_BLOCK_RED,
    COLOR_BLOCK_SCREEN,
    COLOR_BLOCK_SHELL,
    COLOR_HEADER_BUTTON,
    COLOR_HEADER_OUTLINE,
)
from minigames.rendering.surface import Surface
from minigames.rendering.widgets import draw_button, draw_header_button
from minigames.ui.layout import SceneLayout

_BUTTON_COLORS = {
    "drop": COLOR_BLOCK_RED,
    "pause": COLOR_BLOCK_GREEN,
    "restart": COLOR_BLOCK_GREEN,
}


def _draw_cell(surface: Surface, layout: SceneLayout, row: int, col: int, color) -> None:
    x, y, w, h = layout.board.cell_rect(row, col)
    surface.fill_rect(x + 1, y + 1, w - 2, h - 2, color)
    surface.stroke_rect(x + 1, y + 1, w - 2, h - 2, COLOR_BLOCK_INK)


def _draw_info(surface: Surface, snapshot: BlockSnapshot, layout: SceneLayout) -> None:
    left = layout.extras["info_left"]
    top = layout.board.top
    size = layout.board.cell_size
    lines = (
        ("SCORE", snapshot.score),
        ("LEVEL", snapshot.level),
        ("LINES", snapshot.lines),
    )
    y = top + 10
    for caption, value in lines:
        surface.draw_text(caption, left, y, COLOR_BLOCK_INK, 11, bold=True, anchor="left")
        surface.draw_text(str(value), left, y + 16, COLOR_BLOCK_INK, 13, anchor="left")
        y += 42

    surface.draw_text("NEXT", left, y, COLOR_BLOCK_INK, 11, bold=True, anchor="left")
    if snapshot.next_type is None:
        return
    preview = size * 0.8
    origin_y = y + 12
    color = PIECE_COLORS[snapshot.next_type]
    for dx, dy in SHAPES[snapshot.next_type]:
        px = left + dx * preview
        py = origin_y + dy * preview
        surface.fill_rect(px, py, preview - 1, preview - 1, color)
        surface.stroke_rect(px, py, preview - 1, preview - 1, COLOR_BLOCK_INK)


def render_blocks(surface: Surface, snapshot: BlockSnapshot, layout: SceneLayout) -> None:
    board = layout.board
    extras = layout.extras
    surface.fill_rect(0, 0, layout.width, layout.height, COLOR_BLOCK_SHELL)

    screen_left = extras["screen_left"]
    screen_top = extras["screen_top"]
    screen_w = extras["screen_width"]
    screen_h = extras["screen_height"]
    surface.fill_rect(screen_left, screen_top, screen_w, screen_h, COLOR_BLOCK_SCREEN)
    surface.stroke_rect(screen_left, screen_top, screen_w, screen_h, COLOR_BLOCK_INK, 3)

    # Board well.
    for row in range(board.rows):
        for col in range(board.cols):
            x, y, w, h = board.cell_rect(row, col)
            surface.stroke_rect(x, y, w, h, COLOR_BLOCK_GRID)
    surface.stroke_rect(board.left, board.top, board.width, board.height, COLOR_BLOCK_INK, 2)

    for row, tokens in enumerate(snapshot.cells):
        for col, token in enumerate(tokens):
            if token != EMPTY:
                _draw_cell(surface, layout, row, col, PIECE_COLORS[PieceType(token)])

    if snapshot.piece_type is not None:
        color = PIECE_COLORS[snapshot.piece_type]
        for x, y in snapshot.piece_cells:
            if 0 <= y < board.rows and 0 <= x < board.cols:
                _draw_cell(surface, layout, y, x, color)

    _draw_info(surface, snapshot, layout)

    center_x = board.left + board.width / 2
    center_y = board.top + board.height / 2
    if snapshot.game_over:
        surface.fill_rect(board.left, center_y - 24, board.width, 48, COLOR_BLOCK_SCREEN)
        surface.draw_text("GAME OVER", center_x, center_y, COLOR_BLOCK_INK, 18, bold=True)
    elif snapshot.paused:
        surface.fill_rect(board.left, center_y - 24, board.width, 48, COLOR_BLOCK_SCREEN)
        surface.draw_text("PAUSED", center_x, center_y, COLOR_BLOCK_INK, 18, bold=True)

    for button in layout.buttons:
        if button.action == "back":
            draw_header_button(surface, button, COLOR_HEADER_BUTTON, COLOR_HEADER_OUTLINE)
            continue
        draw_button(
            surface,
            button,
            _BUTTON_COLORS.get(button.action, COLOR_BLOCK_BLUE),
            COLOR_BLOCK_INK,
            (255, 255, 255),
            12 if button.width < 60 else 16,
            bold=True,
            caption_color=COLOR_BLOCK_INK,
        )
