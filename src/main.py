"""Entry point for the pocket arcade collection.

Sets up ECS world, event bus, scenes, and Arcade window.
"""
import logging

import arcade
from arcade import Window, run, set_background_color

from minigames.components.game_state import SceneId
from minigames.components.pointer import PointerEvent, PointerPhase
from minigames.constants import COLOR_BACKGROUND, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from minigames.events.bus import EVENT_GAME_OVER, EVENT_POINTER, EVENT_TICK, EVENT_WIN, EventBus
from minigames.menu.menu_scene import MenuScene
from minigames.rendering.arcade_surface import ArcadeSurface
from minigames.systems.block_stack_system import BlockStackSystem
from minigames.systems.mine_grid_system import MineGridSystem
from minigames.systems.number_grid_system import NumberGridSystem
from minigames.systems.scene_controller import SceneController
from minigames.world import create_world

logger = logging.getLogger(__name__)

KEY_COMMANDS = {
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
    arcade.key.DOWN: "down",
    arcade.key.UP: "rotate",
    arcade.key.SPACE: "drop",
    arcade.key.P: "pause",
    arcade.key.R: "restart",
    arcade.key.ESCAPE: "back",
}


class PocketArcadeWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1 / 60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.controller = SceneController(self.world, self.event_bus)

        size = {"width": self.width, "height": self.height}
        self.controller.register(SceneId.MENU, MenuScene(self.world, self.event_bus, **size))
        self.controller.register(SceneId.BLOCKS, BlockStackSystem(self.world, self.event_bus, **size))
        self.controller.register(SceneId.MINES, MineGridSystem(self.world, self.event_bus, **size))
        self.controller.register(SceneId.NUMBERS, NumberGridSystem(self.world, self.event_bus, **size))

        self.event_bus.subscribe(EVENT_GAME_OVER, self._log_game_over)
        self.event_bus.subscribe(EVENT_WIN, self._log_win)

        set_background_color(COLOR_BACKGROUND)
        self.controller.switch_to(SceneId.MENU)

    def on_resize(self, width: int, height: int):
        self.controller.resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.controller.render(ArcadeSurface(self.height))

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time * 1000.0)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self._pointer(PointerEvent(PointerPhase.START, x, self.height - y))

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self._pointer(PointerEvent(PointerPhase.MOVE, x, self.height - y))

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self._pointer(PointerEvent(PointerPhase.END, x, self.height - y))

    def _pointer(self, event: PointerEvent):
        self.event_bus.emit(EVENT_POINTER, event=event)

    def on_key_press(self, symbol: int, modifiers: int):
        command = KEY_COMMANDS.get(symbol)
        if command is not None:
            self.controller.handle_key(command)

    def _log_game_over(self, sender, **payload):
        logger.info("Game over in %s (score=%s)", payload.get("scene"), payload.get("score"))

    def _log_win(self, sender, **payload):
        logger.info("Puzzle won in %s", payload.get("scene"))


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    PocketArcadeWindow()
    run()


if __name__ == "__main__":
    main()
