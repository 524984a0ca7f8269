import random

from minigames.components.button import Button
from minigames.components.game_state import SceneId
from minigames.events.bus import EventBus
from minigames.menu.components import MenuTag, MenuTitle
from minigames.menu.menu_scene import MenuScene
from minigames.systems.block_stack_system import BlockStackSystem
from minigames.systems.mine_grid_system import MineGridSystem
from minigames.systems.number_grid_system import NumberGridSystem
from minigames.systems.scene_controller import SceneController
from minigames.world import create_world
from tests.helpers import press


def _setup():
    bus = EventBus()
    world = create_world(bus, rng=random.Random(1))
    controller = SceneController(world, bus)
    menu = MenuScene(world, bus)
    controller.register(SceneId.MENU, menu)
    controller.register(SceneId.BLOCKS, BlockStackSystem(world, bus))
    controller.register(SceneId.MINES, MineGridSystem(world, bus))
    controller.register(SceneId.NUMBERS, NumberGridSystem(world, bus))
    controller.switch_to(SceneId.MENU)
    return world, controller, menu


def test_menu_spawns_title_and_three_game_buttons():
    world, _, menu = _setup()
    labels = sorted(button.label for button in menu.buttons())
    assert labels == ["Minesweeper", "Sudoku", "Tetris"]
    titles = [title.text for _, title in world.get_component(MenuTitle)]
    assert titles == ["Game Collection"]


def test_pressing_a_game_button_switches_and_clears_menu():
    world, controller, menu = _setup()
    target = next(button for button in menu.buttons() if button.label == "Minesweeper")

    controller.handle_input(press(*target.center))

    assert controller.active_id == SceneId.MINES
    assert list(world.get_component(MenuTag)) == []
    assert list(world.get_components(Button, MenuTag)) == []


def test_back_from_game_respawns_menu():
    _, controller, menu = _setup()
    tetris = next(button for button in menu.buttons() if button.label == "Tetris")
    controller.handle_input(press(*tetris.center))
    assert controller.active_id == SceneId.BLOCKS

    controller.handle_key("back")

    assert controller.active_id == SceneId.MENU
    assert len(menu.buttons()) == 3


def test_entering_a_game_starts_a_fresh_round():
    _, controller, menu = _setup()
    sudoku = next(button for button in menu.buttons() if button.label == "Sudoku")
    numbers = controller.scene(SceneId.NUMBERS)
    row, col = next(pos for pos, cell in numbers.board.cells.items() if not cell.fixed)
    numbers.set_cell(row, col, 1)
    stale = numbers.board

    controller.handle_input(press(*sudoku.center))

    assert numbers.board is not stale


def test_presses_off_the_buttons_do_nothing():
    _, controller, _ = _setup()
    controller.handle_input(press(1, 1))
    assert controller.active_id == SceneId.MENU
