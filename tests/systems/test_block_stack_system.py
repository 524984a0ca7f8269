import random

from minigames.components.block_board import EMPTY, PieceType
from minigames.components.game_state import SceneId
from minigames.events.bus import EVENT_GAME_OVER, EVENT_LINES_CLEARED, EventBus
from minigames.systems.block_ops import clear_full_rows, rotated_offsets
from minigames.systems.block_stack_system import BlockStackSystem
from minigames.components.grid import Grid
from minigames.world import create_world
from tests.helpers import FixedPieceRandom, press, record_events


def _system(piece_type=PieceType.O, **kwargs):
    bus = EventBus()
    world = create_world(bus)
    system = BlockStackSystem(world, bus, rng=FixedPieceRandom(piece_type), **kwargs)
    return bus, system


def _occupied(system):
    return {(row, col) for (row, col), value in system.board.cells.items() if value != EMPTY}


def test_square_spawns_centered_and_next_is_queued():
    _, system = _system()
    piece = system.board.piece
    assert (piece.x, piece.y) == (3, 0)
    assert sorted(piece.cells()) == [(4, 0), (4, 1), (5, 0), (5, 1)]
    assert system.board.next_type == PieceType.O


def test_gravity_locks_after_reaching_the_floor():
    _, system = _system()
    for _ in range(18):
        system.tick(501)
    assert system.board.piece.y == 18
    assert _occupied(system) == set()

    system.tick(501)

    assert _occupied(system) == {(18, 4), (18, 5), (19, 4), (19, 5)}
    assert system.board.piece.y == 0


def test_tick_waits_for_the_full_interval():
    _, system = _system()
    system.tick(300)
    system.tick(200)
    assert system.board.piece.y == 0
    system.tick(1)
    assert system.board.piece.y == 1
    # The accumulator resets after each step.
    system.tick(500)
    assert system.board.piece.y == 1


def test_stacking_squares_tops_out_on_the_eleventh_spawn():
    bus, system = _system()
    game_over = record_events(bus, EVENT_GAME_OVER)
    for _ in range(9):
        system.hard_drop()
    assert not system.board.game_over

    system.hard_drop()

    assert system.board.game_over
    assert game_over == [{"scene": SceneId.BLOCKS, "score": 0}]
    assert system.is_terminal()
    assert not system.hard_drop()
    assert not system.move_horizontal(1)
    assert not system.toggle_pause()


def test_hard_drop_clears_two_rows_and_compacts():
    bus, system = _system()
    cleared_events = record_events(bus, EVENT_LINES_CLEARED)
    cells = system.board.cells
    for row in (18, 19):
        for col in range(10):
            if col not in (4, 5):
                cells.set(row, col, PieceType.I.value)
    cells.set(17, 0, PieceType.T.value)

    system.hard_drop()

    board = system.board
    assert board.score == 200
    assert board.lines == 2
    assert board.level == 1
    assert board.cells.rows == 20
    assert _occupied(system) == {(19, 0)}
    assert board.cells.get(19, 0) == PieceType.T.value
    assert cleared_events == [{"scene": SceneId.BLOCKS, "lines": 2, "score": 200, "level": 1}]


def test_level_multiplier_and_flat_scoring():
    _, system = _system()
    system.board.level = 3
    system._score_lines(2)
    assert system.board.score == 600

    _, flat = _system(level_scoring=False)
    flat.board.level = 3
    flat._score_lines(2)
    assert flat.board.score == 200


def test_level_and_interval_follow_lines():
    _, system = _system()
    system._score_lines(4)
    system._score_lines(4)
    assert system.board.level == 1
    assert system.drop_interval_ms == 500
    system._score_lines(2)
    assert system.board.lines == 10
    assert system.board.level == 2
    assert system.drop_interval_ms == 450
    system.board.level = 20
    assert system.drop_interval_ms == 100


def test_line_piece_rotates_in_open_space_and_not_past_the_wall():
    _, system = _system(PieceType.I)
    assert system.rotate()
    assert sorted(system.board.piece.cells()) == [(4, 0), (4, 1), (4, 2), (4, 3)]

    for _ in range(4):
        assert system.move_horizontal(-1)
    assert not system.move_horizontal(-1)
    assert system.board.piece.x == -1

    before = list(system.board.piece.offsets)
    assert not system.rotate()
    assert system.board.piece.offsets == before


def test_rotation_blocked_by_locked_cell():
    _, system = _system(PieceType.I)
    system.rotate()
    system.board.cells.set(1, 2, PieceType.Z.value)
    before = list(system.board.piece.offsets)
    assert not system.rotate()
    assert system.board.piece.offsets == before


def test_square_never_rotates():
    _, system = _system()
    assert not system.rotate()


def test_rotation_does_not_alias_shape_templates():
    _, first = _system(PieceType.T)
    first.rotate()
    _, second = _system(PieceType.T)
    assert second.board.piece.offsets == [(1, 0), (0, 1), (1, 1), (2, 1)]
    assert rotated_offsets(second.board.piece) != second.board.piece.offsets


def test_pause_suspends_gravity_and_movement():
    _, system = _system()
    assert system.toggle_pause()
    system.tick(10_000)
    assert system.board.piece.y == 0
    assert not system.move_horizontal(1)
    assert not system.soft_drop()
    assert not system.rotate()
    assert not system.hard_drop()
    system.toggle_pause()
    assert system.soft_drop()
    assert system.board.piece.y == 1


def test_reset_clears_score_and_board():
    _, system = _system()
    system.hard_drop()
    system.board.score = 900
    system.reset()
    board = system.board
    assert board.score == 0 and board.level == 1 and board.lines == 0
    assert _occupied(system) == set()
    assert not board.game_over and not board.paused


def test_clear_full_rows_rechecks_same_index():
    cells = Grid.from_rows([
        [1, 0, 0],
        [1, 1, 1],
        [1, 1, 1],
        [0, 1, 0],
    ])
    assert clear_full_rows(cells) == 2
    assert cells.to_rows() == ((0, 0, 0), (0, 0, 0), (1, 0, 0), (0, 1, 0))


def test_buttons_and_keys_share_commands():
    _, system = _system()
    system.handle_input(press(*system.layout.button("left").center))
    assert system.board.piece.x == 2
    system.handle_key("right")
    system.handle_key("right")
    assert system.board.piece.x == 4
    system.handle_input(press(*system.layout.button("pause").center))
    assert system.board.paused


def test_random_pieces_are_valid_types():
    bus = EventBus()
    world = create_world(bus, rng=random.Random(5))
    system = BlockStackSystem(world, bus)
    for _ in range(5):
        system.hard_drop()
        assert isinstance(system.board.next_type, PieceType)
