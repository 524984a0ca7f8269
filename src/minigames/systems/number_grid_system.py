"""Number-placement puzzle: generation, cell edits and completion check."""
from __future__ import annotations

import logging
import random
from typing import Optional

from esper import World

from minigames.components.button import button_at
from minigames.components.game_state import SceneId
from minigames.components.grid import Position
from minigames.components.number_board import NumberBoard, NumberSnapshot
from minigames.components.pointer import PointerEvent, PointerPhase
from minigames.constants import NUMBER_BOX, NUMBER_HOLES, NUMBER_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH
from minigames.events.bus import (
    EVENT_SCENE_SWITCH_REQUEST,
    EVENT_STATE_CHANGED,
    EVENT_WIN,
    EventBus,
)
from minigames.rendering.number_renderer import render_numbers
from minigames.systems.number_ops import carve_puzzle, generate_solution
from minigames.ui.layout import number_layout

logger = logging.getLogger(__name__)


class NumberGridSystem:
    scene_id = SceneId.NUMBERS

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        size: int = NUMBER_SIZE,
        box: int = NUMBER_BOX,
        holes: int = NUMBER_HOLES,
        width: float = WINDOW_WIDTH,
        height: float = WINDOW_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.size = size
        self.box = box
        self.holes = holes
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.layout = number_layout(width, height, size)
        self.board_entity = self.world.create_entity()
        self.reset()

    @property
    def board(self) -> NumberBoard:
        return self.world.component_for_entity(self.board_entity, NumberBoard)

    def reset(self) -> None:
        solution = generate_solution(self._rng, self.size, self.box)
        cells = carve_puzzle(solution, self.holes, self._rng)
        self.world.add_component(self.board_entity, NumberBoard(cells=cells, solution=solution))
        logger.debug("New number puzzle with %d open cells", self.holes)
        self._notify("reset")

    def on_enter(self) -> None:
        self.reset()

    def resize(self, width: float, height: float) -> None:
        self.layout = number_layout(width, height, self.size)

    def is_terminal(self) -> bool:
        return self.board.won

    def select_cell(self, row: int, col: int) -> bool:
        board = self.board
        if board.won or not board.cells.in_bounds(row, col):
            return False
        board.selected = (row, col)
        self._notify("select")
        return True

    def set_cell(self, row: int, col: int, digit: int) -> bool:
        """Write ``digit`` (0 clears) into an editable cell.

        Fixed cells, off-board coordinates and edits after the puzzle is solved
        are ignored. The value is not checked against the row/column/box rule.
        """
        if not 0 <= digit <= self.size:
            raise ValueError(f"Digit must be between 0 and {self.size}, got {digit}")
        board = self.board
        if board.won or not board.cells.in_bounds(row, col):
            return False
        cell = board.cells.get(row, col)
        if cell.fixed:
            return False
        cell.value = digit
        if self.is_solved():
            board.won = True
            logger.info("Number puzzle solved")
            self.event_bus.emit(EVENT_WIN, scene=self.scene_id)
        self._notify("edit")
        return True

    def enter_digit(self, digit: int) -> bool:
        selected = self.board.selected
        if selected is None:
            return False
        return self.set_cell(selected[0], selected[1], digit)

    def clear_selected(self) -> bool:
        return self.enter_digit(0)

    def is_solved(self) -> bool:
        board = self.board
        for (row, col), cell in board.cells.items():
            if cell.value == 0 or cell.value != board.solution.get(row, col):
                return False
        return True

    def handle_input(self, event: PointerEvent) -> None:
        if event.phase != PointerPhase.START:
            return
        button = button_at(self.layout.buttons, event.x, event.y)
        if button is not None:
            self.handle_key(button.action)
            return
        target: Optional[Position] = self.layout.board.cell_at(event.x, event.y)
        if target is not None:
            self.select_cell(*target)

    def handle_key(self, action: str) -> None:
        if action == "back":
            self.event_bus.emit(EVENT_SCENE_SWITCH_REQUEST, scene_id=SceneId.MENU)
        elif action in ("new", "restart"):
            self.reset()
        elif action == "clear":
            self.clear_selected()
        elif action.startswith("digit:"):
            self.enter_digit(int(action.split(":", 1)[1]))

    def snapshot(self) -> NumberSnapshot:
        board = self.board
        return NumberSnapshot(
            values=board.cells.map(lambda cell: cell.value).to_rows(),
            fixed=board.cells.map(lambda cell: cell.fixed).to_rows(),
            selected=board.selected,
            won=board.won,
        )

    def render(self, surface) -> None:
        render_numbers(surface, self.snapshot(), self.layout, self.box)

    def _notify(self, reason: str) -> None:
        self.event_bus.emit(EVENT_STATE_CHANGED, scene=self.scene_id, reason=reason)
