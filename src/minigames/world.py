import random

from esper import World

from minigames.components.game_state import GameState, SceneId
from minigames.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    initial_scene: SceneId | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    """Fresh world holding the shared RNG and the global GameState resource.

    Systems constructed on this world without their own ``rng`` draw from
    ``world.random``, so seeding it makes a whole session reproducible.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(GameState(scene=initial_scene))
    return world
