import random

import pytest

from minigames.components.game_state import SceneId
from minigames.components.grid import Grid
from minigames.events.bus import EVENT_WIN, EventBus
from minigames.systems.number_grid_system import NumberGridSystem
from minigames.systems.number_ops import carve_puzzle, generate_solution, is_valid_placement, solve
from minigames.world import create_world
from tests.helpers import press, record_events


def _system(**kwargs):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(7))
    return bus, NumberGridSystem(world, bus, **kwargs)


def _editable(system):
    return [pos for pos, cell in system.board.cells.items() if not cell.fixed]


def _fill_with_solution(system, skip=None):
    board = system.board
    for row, col in _editable(system):
        if (row, col) == skip:
            continue
        system.set_cell(row, col, board.solution.get(row, col))


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_generated_solution_is_a_valid_grid(seed):
    solution = generate_solution(random.Random(seed))
    full = set(range(1, 10))
    for i in range(9):
        assert set(solution.row(i)) == full
        assert set(solution.column(i)) == full
    for box_row in range(0, 9, 3):
        for box_col in range(0, 9, 3):
            values = {solution.get(r, c) for r in range(box_row, box_row + 3) for c in range(box_col, box_col + 3)}
            assert values == full


def test_solver_fails_on_contradictory_grid():
    grid = Grid.filled(4, 4, 0)
    grid.set(0, 0, 1)
    grid.set(0, 1, 2)
    grid.set(1, 2, 3)
    grid.set(1, 3, 4)
    # (0, 2) and (0, 3) need 3 and 4, both already used in box (0, 1).
    assert not solve(grid, random.Random(0), box=2)


def test_placement_checks_row_column_and_box():
    grid = Grid.filled(9, 9, 0)
    grid.set(0, 8, 5)
    assert not is_valid_placement(grid, 0, 0, 5)
    assert not is_valid_placement(grid, 8, 8, 5)
    assert not is_valid_placement(grid, 2, 6, 5)
    assert is_valid_placement(grid, 3, 3, 5)


def test_carve_leaves_exact_givens():
    solution = generate_solution(random.Random(3))
    cells = carve_puzzle(solution, 40, random.Random(3))
    assert cells.count(lambda cell: cell.value == 0) == 40
    assert cells.count(lambda cell: cell.fixed) == 41
    for (row, col), cell in cells.items():
        assert cell.fixed == (cell.value != 0)
        if cell.fixed:
            assert cell.value == solution.get(row, col)


def test_carve_rejects_impossible_hole_count():
    solution = generate_solution(random.Random(3))
    with pytest.raises(ValueError):
        carve_puzzle(solution, 82, random.Random(3))


def test_new_puzzle_has_forty_holes():
    _, system = _system()
    assert len(_editable(system)) == 40
    assert not system.board.won


def test_fixed_cells_and_bad_coordinates_are_ignored():
    _, system = _system()
    fixed = next(pos for pos, cell in system.board.cells.items() if cell.fixed)
    value = system.board.cells.get(*fixed).value
    assert not system.set_cell(*fixed, 0)
    assert system.board.cells.get(*fixed).value == value
    assert not system.set_cell(9, 0, 1)
    assert not system.select_cell(-1, 0)


def test_digit_outside_range_raises():
    _, system = _system()
    row, col = _editable(system)[0]
    with pytest.raises(ValueError):
        system.set_cell(row, col, 10)
    with pytest.raises(ValueError):
        system.set_cell(row, col, -1)


def test_conflicting_values_are_accepted():
    _, system = _system()
    row, col = _editable(system)[0]
    wrong = system.board.solution.get(row, col) % 9 + 1
    assert system.set_cell(row, col, wrong)
    assert system.board.cells.get(row, col).value == wrong
    assert not system.is_solved()


def test_filling_the_solution_wins_once():
    bus, system = _system()
    wins = record_events(bus, EVENT_WIN)
    last = _editable(system)[-1]
    _fill_with_solution(system, skip=last)
    assert not system.board.won
    assert wins == []

    system.set_cell(*last, system.board.solution.get(*last))

    assert system.board.won
    assert system.is_terminal()
    assert wins == [{"scene": SceneId.NUMBERS}]
    assert not system.set_cell(*last, 0)
    assert not system.select_cell(0, 0)
    assert wins == [{"scene": SceneId.NUMBERS}]


def test_wrong_value_then_correction_wins():
    _, system = _system()
    last = _editable(system)[-1]
    _fill_with_solution(system, skip=last)
    correct = system.board.solution.get(*last)
    system.set_cell(*last, correct % 9 + 1)
    assert not system.board.won
    system.set_cell(*last, correct)
    assert system.board.won


def test_small_puzzle_from_constructor_overrides():
    _, system = _system(size=4, box=2, holes=3)
    assert system.board.cells.rows == 4
    assert len(_editable(system)) == 3
    _fill_with_solution(system)
    assert system.board.won


def test_pad_writes_into_selected_cell():
    _, system = _system()
    row, col = _editable(system)[0]
    x, y, w, h = system.layout.board.cell_rect(row, col)
    system.handle_input(press(x + w / 2, y + h / 2))
    assert system.board.selected == (row, col)

    system.handle_input(press(*system.layout.button("digit:5").center))
    assert system.board.cells.get(row, col).value == 5

    system.handle_input(press(*system.layout.button("clear").center))
    assert system.board.cells.get(row, col).value == 0


def test_new_button_replaces_puzzle_even_after_win():
    _, system = _system(size=4, box=2, holes=3)
    _fill_with_solution(system)
    assert system.board.won
    system.handle_input(press(*system.layout.button("new").center))
    assert not system.board.won
    assert len(_editable(system)) == 3
