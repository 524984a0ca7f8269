"""Falling-block game: spawn, gravity, movement, locking and line clears."""
from __future__ import annotations

import logging
import random

from esper import World

from minigames.components.block_board import EMPTY, BlockBoard, BlockSnapshot, Piece, PieceType
from minigames.components.button import button_at
from minigames.components.game_state import SceneId
from minigames.components.grid import Grid
from minigames.components.pointer import PointerEvent, PointerPhase
from minigames.constants import (
    BLOCK_COLS,
    BLOCK_ROWS,
    DROP_INTERVAL_BASE_MS,
    DROP_INTERVAL_MIN_MS,
    DROP_INTERVAL_STEP_MS,
    LINE_SCORE,
    LINES_PER_LEVEL,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from minigames.events.bus import (
    EVENT_GAME_OVER,
    EVENT_LINES_CLEARED,
    EVENT_SCENE_SWITCH_REQUEST,
    EVENT_STATE_CHANGED,
    EventBus,
)
from minigames.rendering.block_renderer import render_blocks
from minigames.systems.block_ops import (
    clear_full_rows,
    drop_interval_ms,
    is_valid_move,
    lock_piece,
    rotated_offsets,
)
from minigames.ui.layout import block_layout

logger = logging.getLogger(__name__)

_MOVEMENT_COMMANDS = ("left", "right", "down", "rotate", "drop")


class BlockStackSystem:
    """Owns one block board entity.

    Engine states: running, paused (gravity and movement suspended) and game
    over. Game over is set only by a spawn that does not fit and lasts until
    ``reset``. Movement requests that fail validation are silent no-ops.
    """

    scene_id = SceneId.BLOCKS

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rows: int = BLOCK_ROWS,
        cols: int = BLOCK_COLS,
        level_scoring: bool = True,
        width: float = WINDOW_WIDTH,
        height: float = WINDOW_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.rows = rows
        self.cols = cols
        self.level_scoring = level_scoring
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.layout = block_layout(width, height, rows, cols)
        self.board_entity = self.world.create_entity()
        self.reset()

    @property
    def board(self) -> BlockBoard:
        return self.world.component_for_entity(self.board_entity, BlockBoard)

    @property
    def spawn_x(self) -> int:
        return self.cols // 2 - 2

    @property
    def drop_interval_ms(self) -> float:
        return drop_interval_ms(
            self.board.level,
            DROP_INTERVAL_BASE_MS,
            DROP_INTERVAL_STEP_MS,
            DROP_INTERVAL_MIN_MS,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        board = BlockBoard(cells=Grid.filled(self.rows, self.cols, EMPTY))
        board.next_type = self._random_type()
        self.world.add_component(self.board_entity, board)
        self.spawn_next()
        self._notify("reset")

    def on_enter(self) -> None:
        self.reset()

    def resize(self, width: float, height: float) -> None:
        self.layout = block_layout(width, height, self.rows, self.cols)

    def is_terminal(self) -> bool:
        return self.board.game_over

    def _random_type(self) -> PieceType:
        return self._rng.choice(list(PieceType))

    def spawn_next(self) -> bool:
        """Bring the queued piece in at the top centre and queue a new one.

        A spawn that overlaps locked cells ends the game; nothing else changes.
        """
        board = self.board
        piece_type = board.next_type or self._random_type()
        board.next_type = self._random_type()
        board.piece = Piece.spawn(piece_type, self.spawn_x, 0)
        if not is_valid_move(board.cells, board.piece.offsets, board.piece.x, board.piece.y):
            board.game_over = True
            logger.info("Block stack topped out with score %d", board.score)
            self.event_bus.emit(EVENT_GAME_OVER, scene=self.scene_id, score=board.score)
            return False
        return True

    # ------------------------------------------------------------------
    # Gravity
    # ------------------------------------------------------------------

    def tick(self, dt_ms: float) -> None:
        board = self.board
        if board.paused or board.game_over:
            return
        board.drop_accumulator_ms += dt_ms
        if board.drop_accumulator_ms <= self.drop_interval_ms:
            return
        board.drop_accumulator_ms = 0.0
        piece = board.piece
        if is_valid_move(board.cells, piece.offsets, piece.x, piece.y + 1):
            piece.y += 1
            self._notify("gravity")
        else:
            self._lock_and_spawn()
            self._notify("lock")

    def _lock_and_spawn(self) -> None:
        board = self.board
        lock_piece(board.cells, board.piece)
        cleared = clear_full_rows(board.cells)
        if cleared:
            self._score_lines(cleared)
        self.spawn_next()

    def _score_lines(self, cleared: int) -> None:
        board = self.board
        multiplier = board.level if self.level_scoring else 1
        board.score += cleared * LINE_SCORE * multiplier
        board.lines += cleared
        board.level = board.lines // LINES_PER_LEVEL + 1
        self.event_bus.emit(
            EVENT_LINES_CLEARED,
            scene=self.scene_id,
            lines=cleared,
            score=board.score,
            level=board.level,
        )

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def _can_act(self) -> bool:
        board = self.board
        return not board.paused and not board.game_over and board.piece is not None

    def move_horizontal(self, direction: int) -> bool:
        if not self._can_act():
            return False
        board = self.board
        piece = board.piece
        if not is_valid_move(board.cells, piece.offsets, piece.x + direction, piece.y):
            return False
        piece.x += direction
        self._notify("move")
        return True

    def soft_drop(self) -> bool:
        if not self._can_act():
            return False
        board = self.board
        piece = board.piece
        if not is_valid_move(board.cells, piece.offsets, piece.x, piece.y + 1):
            return False
        piece.y += 1
        self._notify("soft_drop")
        return True

    def rotate(self) -> bool:
        if not self._can_act():
            return False
        board = self.board
        piece = board.piece
        candidate = rotated_offsets(piece)
        if candidate == piece.offsets:
            return False
        if not is_valid_move(board.cells, candidate, piece.x, piece.y):
            return False
        piece.offsets = candidate
        self._notify("rotate")
        return True

    def hard_drop(self) -> bool:
        if not self._can_act():
            return False
        board = self.board
        piece = board.piece
        while is_valid_move(board.cells, piece.offsets, piece.x, piece.y + 1):
            piece.y += 1
        self._lock_and_spawn()
        self._notify("hard_drop")
        return True

    def toggle_pause(self) -> bool:
        board = self.board
        if board.game_over:
            return False
        board.paused = not board.paused
        self._notify("pause")
        return True

    # ------------------------------------------------------------------
    # Input & presentation
    # ------------------------------------------------------------------

    def handle_input(self, event: PointerEvent) -> None:
        if event.phase != PointerPhase.START:
            return
        button = button_at(self.layout.buttons, event.x, event.y)
        if button is not None:
            self.handle_key(button.action)

    def handle_key(self, command: str) -> None:
        if command == "back":
            self.event_bus.emit(EVENT_SCENE_SWITCH_REQUEST, scene_id=SceneId.MENU)
        elif command == "restart":
            self.reset()
        elif command == "pause":
            self.toggle_pause()
        elif command in _MOVEMENT_COMMANDS:
            self._apply_movement(command)

    def _apply_movement(self, command: str) -> None:
        if command == "left":
            self.move_horizontal(-1)
        elif command == "right":
            self.move_horizontal(1)
        elif command == "down":
            self.soft_drop()
        elif command == "rotate":
            self.rotate()
        elif command == "drop":
            self.hard_drop()

    def snapshot(self) -> BlockSnapshot:
        board = self.board
        piece = board.piece
        return BlockSnapshot(
            cells=board.cells.to_rows(),
            piece_type=piece.type if piece else None,
            piece_cells=tuple(piece.cells()) if piece else (),
            next_type=board.next_type,
            score=board.score,
            level=board.level,
            lines=board.lines,
            game_over=board.game_over,
            paused=board.paused,
        )

    def render(self, surface) -> None:
        render_blocks(surface, self.snapshot(), self.layout)

    def _notify(self, reason: str) -> None:
        self.event_bus.emit(EVENT_STATE_CHANGED, scene=self.scene_id, reason=reason)
