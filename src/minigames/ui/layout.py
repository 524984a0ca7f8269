"""Screen geometry for every scene, in logical coordinates (origin top-left).

Input hit-testing and rendering both read these layouts so that a press
always lands on the cell or button that was drawn under it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from minigames.components.button import Button, ButtonShape
from minigames.components.grid import Position
from minigames.constants import (
    HEADER_BOTTOM,
    HEADER_HEIGHT,
    HEADER_TOP,
    MINE_CONTROLS_HEIGHT,
    NUMBER_CONTROLS_HEIGHT,
)

MIN_CELL_SIZE = 8


@dataclass(slots=True)
class BoardGeometry:
    left: float
    top: float
    cell_size: float
    rows: int
    cols: int

    @property
    def width(self) -> float:
        return self.cell_size * self.cols

    @property
    def height(self) -> float:
        return self.cell_size * self.rows

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    def cell_at(self, x: float, y: float) -> Optional[Position]:
        """Map a point to ``(row, col)`` or None when it misses the board."""
        if x < self.left or x >= self.right or y < self.top or y >= self.bottom:
            return None
        col = int((x - self.left) // self.cell_size)
        row = int((y - self.top) // self.cell_size)
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return row, col
        return None

    def cell_rect(self, row: int, col: int) -> Tuple[float, float, float, float]:
        return (
            self.left + col * self.cell_size,
            self.top + row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )


@dataclass(slots=True)
class SceneLayout:
    width: float
    height: float
    board: BoardGeometry
    buttons: List[Button] = field(default_factory=list)
    header_y: float = HEADER_TOP + HEADER_HEIGHT / 2
    extras: Dict[str, float] = field(default_factory=dict)

    def button(self, action: str) -> Button:
        for button in self.buttons:
            if button.action == action:
                return button
        raise KeyError(f"No button with action '{action}'")


def back_button() -> Button:
    return Button("back", "Back", 20, HEADER_TOP, 60, HEADER_HEIGHT)


def _circle(action: str, label: str, cx: float, cy: float, size: float, caption: str = "") -> Button:
    return Button(
        action,
        label,
        cx - size / 2,
        cy - size / 2,
        size,
        size,
        shape=ButtonShape.CIRCLE,
        caption=caption,
    )


def menu_buttons(width: float, height: float) -> List[Button]:
    left = width / 2 - 80
    specs = (
        ("blocks", "Tetris", height / 2 - 100),
        ("mines", "Minesweeper", height / 2 - 20),
        ("numbers", "Sudoku", height / 2 + 60),
    )
    return [Button(action, label, left, top, 160, 50) for action, label, top in specs]


def mine_layout(width: float, height: float, rows: int, cols: int) -> SceneLayout:
    top_padding = HEADER_BOTTOM + 10
    available_h = height - top_padding - MINE_CONTROLS_HEIGHT - 20
    available_w = width * 0.95
    cell_size = max(MIN_CELL_SIZE, min(math.floor(available_w / cols), math.floor(available_h / rows)))
    board_w = cell_size * cols
    board_h = cell_size * rows
    board = BoardGeometry(
        left=(width - board_w) / 2,
        top=top_padding + max(0.0, (available_h - board_h) / 2),
        cell_size=cell_size,
        rows=rows,
        cols=cols,
    )
    controls_y = board.bottom + 20
    buttons = [
        back_button(),
        Button("restart", "Restart", width / 2 - 55, controls_y, 110, 40),
        Button("mode", "Mode: Tap", width / 2 - 55, controls_y + 60, 110, 40),
    ]
    return SceneLayout(width=width, height=height, board=board, buttons=buttons)


def number_layout(width: float, height: float, size: int) -> SceneLayout:
    top_padding = HEADER_BOTTOM + 10
    available_h = height - top_padding - NUMBER_CONTROLS_HEIGHT - 20
    available_w = width * 0.95
    board_size = max(MIN_CELL_SIZE * size, min(available_w, available_h))
    cell_size = board_size / size
    board = BoardGeometry(
        left=(width - board_size) / 2,
        top=top_padding + max(0.0, (available_h - board_size) / 2),
        cell_size=cell_size,
        rows=size,
        cols=size,
    )
    pad_y = board.bottom + 15
    pad_size = min(35.0, (width - 40) / size)
    pad_gap = (width - pad_size * size) / (size + 1)
    buttons = [
        back_button(),
        Button("new", "New", width / 2 - 50, HEADER_TOP, 100, HEADER_HEIGHT),
    ]
    for digit in range(1, size + 1):
        buttons.append(
            Button(
                f"digit:{digit}",
                str(digit),
                pad_gap + (digit - 1) * (pad_size + pad_gap),
                pad_y,
                pad_size,
                pad_size,
            )
        )
    buttons.append(Button("clear", "Clear", width / 2 - 50, pad_y + pad_size + 10, 100, 35))
    return SceneLayout(width=width, height=height, board=board, buttons=buttons)


def block_layout(width: float, height: float, rows: int, cols: int) -> SceneLayout:
    """Handheld-console layout: LCD screen on top, d-pad and action keys below."""
    screen_top = HEADER_BOTTOM + 10
    control_height = width * 0.8
    screen_h = height - screen_top - control_height - 20
    screen_w = width * 0.85
    screen_x = (width - screen_w) / 2
    # Board is 10 columns wide; the info panel beside it takes about 6 more.
    total_units = cols + 6
    cell_size = max(
        MIN_CELL_SIZE,
        math.floor(min((screen_w * 0.9) / total_units, (screen_h * 0.9) / rows)),
    )
    board_w = cell_size * cols
    board_h = cell_size * rows
    padding_x = (screen_w - cell_size * total_units) / 2
    padding_y = max(0.0, (screen_h - board_h) / 2)
    board = BoardGeometry(
        left=screen_x + padding_x,
        top=screen_top + padding_y,
        cell_size=cell_size,
        rows=rows,
        cols=cols,
    )

    control_y = screen_top + max(screen_h, board_h) + 20
    control_center_y = control_y + (height - control_y) / 2 - 20
    left_cx = width * 0.28
    right_cx = width * 0.70
    func_y = control_center_y - 60
    d_size = 55
    d_step = d_size + 5
    buttons = [
        back_button(),
        _circle("pause", "P", left_cx - 25, func_y, 35, caption="Pause"),
        _circle("restart", "R", left_cx + 25, func_y, 35, caption="Reset"),
        _circle("drop", "DROP", left_cx, control_center_y + 30, 90, caption="Space"),
        _circle("rotate", "Rot", right_cx, control_center_y - d_step, d_size, caption="Rotation"),
        _circle("down", "Dn", right_cx, control_center_y + d_step, d_size, caption="Down"),
        _circle("left", "<", right_cx - d_step, control_center_y, d_size, caption="Left"),
        _circle("right", ">", right_cx + d_step, control_center_y, d_size, caption="Right"),
    ]
    extras = {
        "screen_left": screen_x,
        "screen_top": screen_top,
        "screen_width": screen_w,
        "screen_height": max(screen_h, board_h),
        "info_left": board.right + cell_size,
    }
    return SceneLayout(width=width, height=height, board=board, buttons=buttons, extras=extras)
