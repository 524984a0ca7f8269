"""Idle menu scene: pick one of the three games."""
from esper import World

from minigames.components.button import Button, button_at
from minigames.components.game_state import SceneId
from minigames.components.pointer import PointerEvent, PointerPhase
from minigames.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from minigames.events.bus import EVENT_SCENE_SWITCH_REQUEST, EventBus
from minigames.menu.components import MenuBackground, MenuTag, MenuTitle
from minigames.menu.factory import clear_main_menu, spawn_main_menu
from minigames.rendering.menu_renderer import render_menu


class MenuScene:
    """Spawns the menu entities while active and turns button presses into scene switches."""

    scene_id = SceneId.MENU

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        width: float = WINDOW_WIDTH,
        height: float = WINDOW_HEIGHT,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.width = width
        self.height = height

    def on_enter(self) -> None:
        clear_main_menu(self.world)
        spawn_main_menu(self.world, self.width, self.height)

    def on_exit(self) -> None:
        clear_main_menu(self.world)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        if any(True for _ in self.world.get_component(MenuTag)):
            self.on_enter()

    def is_terminal(self) -> bool:
        return False

    def handle_input(self, event: PointerEvent) -> None:
        if event.phase != PointerPhase.START:
            return
        pressed = button_at(self.buttons(), event.x, event.y)
        if pressed is not None:
            self.event_bus.emit(EVENT_SCENE_SWITCH_REQUEST, scene_id=SceneId(pressed.action))

    def buttons(self) -> list[Button]:
        return [button for _, (button, _tag) in self.world.get_components(Button, MenuTag)]

    def render(self, surface) -> None:
        backgrounds = [bg for _, bg in self.world.get_component(MenuBackground)]
        titles = [title for _, title in self.world.get_component(MenuTitle)]
        render_menu(surface, self.width, self.height, backgrounds, titles, self.buttons())
