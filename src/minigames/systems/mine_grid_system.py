"""Mine-clearing game: placement, reveal cascade, flags and win detection."""
from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from esper import World

from minigames.components.button import button_at
from minigames.components.game_state import SceneId
from minigames.components.grid import Position
from minigames.components.mine_board import (
    CellState,
    MineBoard,
    MineCellView,
    MineSnapshot,
    MineStatus,
    RevealMode,
)
from minigames.components.pointer import PointerEvent, PointerPhase
from minigames.constants import MINE_COLS, MINE_COUNT, MINE_ROWS, WINDOW_HEIGHT, WINDOW_WIDTH
from minigames.events.bus import (
    EVENT_GAME_OVER,
    EVENT_SCENE_SWITCH_REQUEST,
    EVENT_STATE_CHANGED,
    EVENT_WIN,
    EventBus,
)
from minigames.rendering.mine_renderer import render_mines
from minigames.systems.mine_ops import build_cells, flood_reveal, reveal_all, unrevealed_count
from minigames.ui.layout import mine_layout

logger = logging.getLogger(__name__)


class MineGridSystem:
    """Owns one mine board entity and every rule that mutates it.

    States: PLAYING -> WON | LOST. Both outcomes are terminal until ``reset``.
    Rejected actions (revealing a flagged cell, flagging a revealed one,
    anything after the game ended) are silent no-ops that return False.
    """

    scene_id = SceneId.MINES

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rows: int = MINE_ROWS,
        cols: int = MINE_COLS,
        mines: int = MINE_COUNT,
        width: float = WINDOW_WIDTH,
        height: float = WINDOW_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.rows = rows
        self.cols = cols
        self.mines = mines
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.layout = mine_layout(width, height, rows, cols)
        self.board_entity = self.world.create_entity()
        self.reset()

    @property
    def board(self) -> MineBoard:
        return self.world.component_for_entity(self.board_entity, MineBoard)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self, mine_positions: Optional[Iterable[Position]] = None) -> None:
        """Build a fresh board. ``mine_positions`` pins the layout (tests, replays)."""
        mode = RevealMode.REVEAL
        if self.world.has_component(self.board_entity, MineBoard):
            mode = self.board.mode
        cells = build_cells(
            self.rows,
            self.cols,
            self.mines,
            self._rng,
            mine_positions=mine_positions,
        )
        self.world.add_component(
            self.board_entity,
            MineBoard(cells=cells, mines=self.mines, mines_remaining=self.mines, mode=mode),
        )
        logger.debug("Mine board reset: %dx%d with %d mines", self.rows, self.cols, self.mines)
        self._notify("reset")

    def on_enter(self) -> None:
        self.reset()

    def resize(self, width: float, height: float) -> None:
        self.layout = mine_layout(width, height, self.rows, self.cols)

    def is_terminal(self) -> bool:
        return self.board.status != MineStatus.PLAYING

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def reveal(self, row: int, col: int) -> bool:
        board = self.board
        if board.status != MineStatus.PLAYING or not board.cells.in_bounds(row, col):
            return False
        cell = board.cells.get(row, col)
        if cell.state != CellState.HIDDEN:
            return False
        cell.state = CellState.REVEALED
        if cell.is_mine:
            board.status = MineStatus.LOST
            reveal_all(board.cells)
            logger.info("Mine hit at (%d, %d)", row, col)
            self.event_bus.emit(EVENT_GAME_OVER, scene=self.scene_id, score=None)
            self._notify("reveal")
            return True
        if cell.neighbor_mine_count == 0:
            flood_reveal(board.cells, row, col)
        self._check_win(board)
        self._notify("reveal")
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        board = self.board
        if board.status != MineStatus.PLAYING or not board.cells.in_bounds(row, col):
            return False
        cell = board.cells.get(row, col)
        if cell.state == CellState.REVEALED:
            return False
        if cell.state == CellState.HIDDEN:
            cell.state = CellState.FLAGGED
            board.mines_remaining -= 1
        else:
            cell.state = CellState.HIDDEN
            board.mines_remaining += 1
        self._notify("flag")
        return True

    def toggle_mode(self) -> RevealMode:
        board = self.board
        board.mode = RevealMode.FLAG if board.mode == RevealMode.REVEAL else RevealMode.REVEAL
        self._notify("mode")
        return board.mode

    def press_cell(self, row: int, col: int) -> bool:
        """Apply the current mode to a board cell."""
        if self.board.mode == RevealMode.FLAG:
            return self.toggle_flag(row, col)
        return self.reveal(row, col)

    def _check_win(self, board: MineBoard) -> None:
        if unrevealed_count(board.cells) == board.mines:
            board.status = MineStatus.WON
            logger.info("Mine board cleared")
            self.event_bus.emit(EVENT_WIN, scene=self.scene_id)

    # ------------------------------------------------------------------
    # Input & presentation
    # ------------------------------------------------------------------

    def handle_input(self, event: PointerEvent) -> None:
        if event.phase != PointerPhase.START:
            return
        button = button_at(self.layout.buttons, event.x, event.y)
        if button is not None:
            self.handle_key(button.action)
            return
        if self.is_terminal():
            return
        target = self.layout.board.cell_at(event.x, event.y)
        if target is not None:
            self.press_cell(*target)

    def handle_key(self, command: str) -> None:
        if command == "back":
            self.event_bus.emit(EVENT_SCENE_SWITCH_REQUEST, scene_id=SceneId.MENU)
        elif command == "restart":
            self.reset()
        elif command == "mode":
            self.toggle_mode()

    def snapshot(self) -> MineSnapshot:
        board = self.board
        cells = tuple(
            tuple(
                MineCellView(cell.is_mine, cell.neighbor_mine_count, cell.state)
                for cell in row
            )
            for row in board.cells.to_rows()
        )
        return MineSnapshot(
            cells=cells,
            mines=board.mines,
            mines_remaining=board.mines_remaining,
            status=board.status,
            mode=board.mode,
        )

    def render(self, surface) -> None:
        render_mines(surface, self.snapshot(), self.layout)

    def _notify(self, reason: str) -> None:
        self.event_bus.emit(EVENT_STATE_CHANGED, scene=self.scene_id, reason=reason)
