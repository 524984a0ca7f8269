from minigames.components.button import Button, ButtonShape, button_at
from minigames.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from minigames.ui.layout import block_layout, menu_buttons, mine_layout, number_layout


def test_board_hit_testing_maps_to_cells():
    layout = mine_layout(WINDOW_WIDTH, WINDOW_HEIGHT, 12, 10)
    board = layout.board
    assert board.cell_at(board.left, board.top) == (0, 0)
    assert board.cell_at(board.right - 1, board.bottom - 1) == (11, 9)
    assert board.cell_at(board.right, board.top) is None
    assert board.cell_at(board.left - 1, board.top) is None


def test_mine_board_fits_between_header_and_controls():
    layout = mine_layout(WINDOW_WIDTH, WINDOW_HEIGHT, 12, 10)
    assert layout.board.left >= 0 and layout.board.right <= WINDOW_WIDTH
    assert layout.button("back").top + layout.button("back").height < layout.board.top
    assert layout.button("restart").top > layout.board.bottom


def test_number_pad_has_nine_digits_below_board():
    layout = number_layout(WINDOW_WIDTH, WINDOW_HEIGHT, 9)
    digits = [b for b in layout.buttons if b.action.startswith("digit:")]
    assert [b.label for b in digits] == [str(n) for n in range(1, 10)]
    assert all(b.top > layout.board.bottom for b in digits)
    assert layout.board.width == layout.board.height


def test_block_layout_keeps_board_on_screen():
    layout = block_layout(WINDOW_WIDTH, WINDOW_HEIGHT, 20, 10)
    board = layout.board
    assert board.left >= layout.extras["screen_left"]
    assert layout.extras["info_left"] < layout.extras["screen_left"] + layout.extras["screen_width"]
    actions = {b.action for b in layout.buttons}
    assert actions == {"back", "pause", "restart", "drop", "rotate", "down", "left", "right"}
    for button in layout.buttons:
        assert button_at(layout.buttons, *button.center) is button


def test_circle_button_hit_region_is_round():
    button = Button("drop", "DROP", 0, 0, 100, 100, shape=ButtonShape.CIRCLE)
    assert button.contains(50, 50)
    assert button.contains(50, 1)
    assert not button.contains(2, 2)


def test_menu_buttons_do_not_overlap():
    buttons = menu_buttons(WINDOW_WIDTH, WINDOW_HEIGHT)
    for upper, lower in zip(buttons, buttons[1:]):
        assert upper.top + upper.height < lower.top
