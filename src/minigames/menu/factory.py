"""Factory helpers for creating and removing the main menu entities."""
from esper import World

from minigames.constants import COLOR_BACKGROUND, WINDOW_TITLE
from minigames.menu.components import MenuBackground, MenuTag, MenuTitle
from minigames.ui.layout import menu_buttons


def spawn_main_menu(world: World, width: float, height: float) -> list[int]:
    """Create the menu background, title and one button per game."""
    entities = [
        world.create_entity(MenuBackground(color=COLOR_BACKGROUND), MenuTag()),
        world.create_entity(MenuTitle(WINDOW_TITLE, width / 2, height / 2 - 120), MenuTag()),
    ]
    for button in menu_buttons(width, height):
        entities.append(world.create_entity(button, MenuTag()))
    return entities


def clear_main_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    to_delete = [ent for ent, _ in world.get_component(MenuTag)]
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)
