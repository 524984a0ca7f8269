"""Single active-scene slot with ordered enter/exit transitions."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from esper import World

from minigames.components.game_state import SceneId
from minigames.components.pointer import PointerEvent
from minigames.events.bus import EVENT_POINTER, EVENT_SCENE_SWITCH_REQUEST, EVENT_TICK, EventBus
from minigames.systems.scene import call_hook
from minigames.utils.game_state import set_active_scene

logger = logging.getLogger(__name__)


class UnknownSceneError(ValueError):
    """Raised when switching to a scene id that was never registered."""

    def __init__(self, scene_id: Any) -> None:
        super().__init__(f"Unknown scene '{scene_id}'")
        self.scene_id = scene_id


class SceneController:
    """Routes ticks and pointer events to exactly one active scene.

    Scenes ask for a switch by emitting ``EVENT_SCENE_SWITCH_REQUEST``; the
    controller exits the current scene, activates the target and enters it.
    Calls are strictly sequential: the external driver issues one ``tick`` per
    frame and forwards input between frames.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self._scenes: Dict[SceneId, object] = {}
        self._active: Optional[object] = None
        self._active_id: Optional[SceneId] = None
        self.event_bus.subscribe(EVENT_SCENE_SWITCH_REQUEST, self._on_switch_request)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)
        self.event_bus.subscribe(EVENT_POINTER, self._on_pointer)

    @property
    def active(self) -> Optional[object]:
        return self._active

    @property
    def active_id(self) -> Optional[SceneId]:
        return self._active_id

    def register(self, scene_id: SceneId, scene: object) -> None:
        if scene_id in self._scenes:
            raise ValueError(f"Scene '{scene_id}' already registered")
        self._scenes[scene_id] = scene

    def scene(self, scene_id: SceneId) -> object:
        try:
            return self._scenes[scene_id]
        except KeyError as exc:
            raise UnknownSceneError(scene_id) from exc

    def switch_to(self, scene_id: SceneId) -> None:
        """Exit the active scene, then activate and enter ``scene_id``.

        The target is looked up before anything is exited, so an unknown id
        leaves the current scene active and untouched.
        """
        target = self._scenes.get(scene_id)
        if target is None:
            logger.error("Refusing switch to unregistered scene %r", scene_id)
            raise UnknownSceneError(scene_id)
        previous = self._active
        if previous is not None:
            call_hook(previous, "on_exit")
        self._active = target
        self._active_id = scene_id
        set_active_scene(self.world, self.event_bus, scene_id)
        logger.info("Switched scene to %s", scene_id.value)
        call_hook(target, "on_enter")

    def tick(self, dt_ms: float) -> None:
        if self._active is None:
            return
        call_hook(self._active, "tick", dt_ms)

    def handle_input(self, event: PointerEvent) -> None:
        if self._active is None:
            return
        call_hook(self._active, "handle_input", event)

    def handle_key(self, command: str) -> None:
        if self._active is None:
            return
        call_hook(self._active, "handle_key", command)

    def render(self, surface: Any) -> None:
        if self._active is None:
            return
        call_hook(self._active, "render", surface)

    def resize(self, width: float, height: float) -> None:
        for scene in self._scenes.values():
            call_hook(scene, "resize", width, height)

    def is_terminal(self) -> bool:
        if self._active is None:
            return False
        return bool(call_hook(self._active, "is_terminal"))

    def _on_tick(self, sender, **payload) -> None:
        self.tick(payload.get("dt", 0.0))

    def _on_pointer(self, sender, **payload) -> None:
        event = payload.get("event")
        if event is not None:
            self.handle_input(event)

    def _on_switch_request(self, sender, **payload) -> None:
        scene_id = payload.get("scene_id")
        if scene_id is None:
            return
        self.switch_to(scene_id)
