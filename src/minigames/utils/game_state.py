from __future__ import annotations

from esper import World

from minigames.components.game_state import GameState, SceneId
from minigames.events.bus import EVENT_SCENE_CHANGED, EventBus


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def set_active_scene(world: World, event_bus: EventBus, scene: SceneId) -> None:
    """Record ``scene`` as active and emit a change event."""

    state = get_game_state(world)
    if state is None:
        state = GameState()
        world.create_entity(state)
    previous = state.scene
    state.scene = scene
    event_bus.emit(EVENT_SCENE_CHANGED, previous_scene=previous, new_scene=scene)
