# Mine grid
MINE_ROWS = 12
MINE_COLS = 10
MINE_COUNT = 15

# Block stack
BLOCK_ROWS = 20
BLOCK_COLS = 10
DROP_INTERVAL_BASE_MS = 500
DROP_INTERVAL_STEP_MS = 50
DROP_INTERVAL_MIN_MS = 100
LINE_SCORE = 100
LINES_PER_LEVEL = 10

# Number grid
NUMBER_SIZE = 9
NUMBER_BOX = 3
NUMBER_HOLES = 40

# Window defaults (logical pixels)
WINDOW_WIDTH = 420
WINDOW_HEIGHT = 820
WINDOW_TITLE = "Game Collection"

# Header strip that holds Back / title / New buttons. Mirrors the capsule
# button area the phone layout reserved at the top of the screen.
HEADER_TOP = 40
HEADER_HEIGHT = 32
HEADER_BOTTOM = HEADER_TOP + HEADER_HEIGHT + 8

# Vertical space reserved under each board for its control buttons.
MINE_CONTROLS_HEIGHT = 100
NUMBER_CONTROLS_HEIGHT = 120

# Colors (RGB / RGBA tuples, consumed by the drawing surface)
COLOR_BACKGROUND = (17, 17, 17)
COLOR_TEXT = (255, 255, 255)
COLOR_BUTTON = (51, 51, 51)
COLOR_BUTTON_OUTLINE = (255, 255, 255)
COLOR_HEADER_BUTTON = (102, 102, 102)
COLOR_HEADER_OUTLINE = (136, 136, 136)

COLOR_MINE_HIDDEN = (170, 170, 170)
COLOR_MINE_REVEALED = (221, 221, 221)
COLOR_MINE_GRID = (119, 119, 119)
COLOR_MINE = (200, 30, 30)
COLOR_FLAG = (230, 120, 20)
MINE_NUMBER_COLORS = {
    1: (25, 118, 210),
    2: (56, 142, 60),
    3: (211, 47, 47),
    4: (123, 31, 162),
    5: (255, 143, 0),
    6: (0, 151, 167),
    7: (66, 66, 66),
    8: (158, 158, 158),
}

COLOR_BLOCK_SHELL = (240, 209, 69)
COLOR_BLOCK_SCREEN = (156, 173, 136)
COLOR_BLOCK_GRID = (139, 154, 121)
COLOR_BLOCK_INK = (30, 40, 20)
COLOR_BLOCK_GREEN = (76, 175, 80)
COLOR_BLOCK_RED = (229, 57, 53)
COLOR_BLOCK_BLUE = (30, 136, 229)

COLOR_NUMBER_BACKGROUND = (245, 245, 220)
COLOR_NUMBER_INK = (51, 51, 51)
COLOR_NUMBER_THIN = (153, 153, 153)
COLOR_NUMBER_FIXED = (0, 0, 0)
COLOR_NUMBER_USER = (33, 150, 243)
COLOR_NUMBER_SELECTED = (100, 150, 255, 77)
COLOR_NUMBER_PAD = (76, 175, 80)
COLOR_NUMBER_PAD_OUTLINE = (46, 125, 50)
COLOR_WIN_TEXT = (76, 175, 80)
COLOR_OVERLAY = (0, 0, 0, 178)
