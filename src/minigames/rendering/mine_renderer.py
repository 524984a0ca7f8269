"""Draws a mine board snapshot."""
from __future__ import annotations

from minigames.components.mine_board import CellState, MineSnapshot, MineStatus, RevealMode
from minigames.constants import (
    COLOR_BACKGROUND,
    COLOR_BUTTON,
    COLOR_BUTTON_OUTLINE,
    COLOR_FLAG,
    COLOR_HEADER_BUTTON,
    COLOR_HEADER_OUTLINE,
    COLOR_MINE,
    COLOR_MINE_GRID,
    COLOR_MINE_HIDDEN,
    COLOR_MINE_REVEALED,
    COLOR_TEXT,
    MINE_NUMBER_COLORS,
)
from minigames.rendering.surface import Surface, circle_points
from minigames.rendering.widgets import draw_button, draw_header_button
from minigames.ui.layout import SceneLayout

_STATUS_TEXT = {
    MineStatus.PLAYING: "",
    MineStatus.WON: "You Won!",
    MineStatus.LOST: "Game Over",
}


def mode_label(mode: RevealMode) -> str:
    return "Mode: Tap" if mode == RevealMode.REVEAL else "Mode: Flag"


def render_mines(surface: Surface, snapshot: MineSnapshot, layout: SceneLayout) -> None:
    board = layout.board
    surface.fill_rect(0, 0, layout.width, layout.height, COLOR_BACKGROUND)

    header_x = board.left + board.width / 2
    surface.draw_text(f"Mines: {snapshot.mines_remaining}", header_x, layout.header_y, COLOR_TEXT, 18)
    status = _STATUS_TEXT[snapshot.status]
    if status:
        surface.draw_text(status, header_x, board.top - 16, COLOR_TEXT, 16, bold=True)

    size = board.cell_size
    for row, cells in enumerate(snapshot.cells):
        for col, cell in enumerate(cells):
            x, y, w, h = board.cell_rect(row, col)
            if cell.state == CellState.REVEALED:
                surface.fill_rect(x, y, w, h, COLOR_MINE_REVEALED)
                if cell.is_mine:
                    surface.draw_path(
                        circle_points(x + w / 2, y + h / 2, size * 0.3),
                        COLOR_MINE,
                        filled=True,
                    )
                elif cell.neighbor_mine_count > 0:
                    surface.draw_text(
                        str(cell.neighbor_mine_count),
                        x + w / 2,
                        y + h / 2,
                        MINE_NUMBER_COLORS[cell.neighbor_mine_count],
                        size * 0.6,
                        bold=True,
                    )
            else:
                surface.fill_rect(x, y, w, h, COLOR_MINE_HIDDEN)
                if cell.state == CellState.FLAGGED:
                    # Pennant on a pole.
                    pole_x = x + w * 0.4
                    surface.draw_path(
                        [(pole_x, y + h * 0.2), (x + w * 0.75, y + h * 0.35), (pole_x, y + h * 0.5)],
                        COLOR_FLAG,
                        filled=True,
                    )
                    surface.draw_path(
                        [(pole_x, y + h * 0.2), (pole_x, y + h * 0.8)],
                        COLOR_MINE_GRID,
                        line_width=2,
                    )
            surface.stroke_rect(x, y, w, h, COLOR_MINE_GRID)

    for button in layout.buttons:
        if button.action == "back":
            draw_header_button(surface, button, COLOR_HEADER_BUTTON, COLOR_HEADER_OUTLINE)
        elif button.action == "mode":
            draw_button(
                surface,
                button,
                COLOR_BUTTON,
                COLOR_BUTTON_OUTLINE,
                COLOR_TEXT,
                16,
                label=mode_label(snapshot.mode),
            )
        else:
            draw_button(surface, button, COLOR_BUTTON, COLOR_BUTTON_OUTLINE, COLOR_TEXT, 16)
