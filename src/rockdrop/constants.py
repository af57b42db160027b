BOARD_WIDTH = 10
BOARD_HEIGHT = 20

# Drop speed curve (milliseconds between gravity ticks).
INITIAL_SPEED_MS = 800
SPEED_STEP_MS = 150
MIN_SPEED_MS = 100

LINES_PER_LEVEL = 10

# Points for 0..4 rows cleared by a single lock.
BASE_POINTS = (0, 100, 300, 500, 800)
COMBO_STEP = 0.5

# Horizontal anchor shifts tried, in order, when a rotation does not fit in place.
WALL_KICK_OFFSETS = (-1, 1, -2, 2)

LEVEL_NAMES = (
    "Open Mic",
    "Local Gig",
    "Club Show",
    "Festival",
    "Arena Tour",
    "Stadium Show",
    "Headliner",
    "Legend",
    "Rock God",
    "Hall of Fame",
)

# Next-piece preview box (columns x rows).
PREVIEW_COLS = 4
PREVIEW_ROWS = 3

# Window & layout.
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 720
CELL_SIZE = 28
BOTTOM_MARGIN = 20
BOARD_MAX_WIDTH_PCT = 0.55
BOARD_MAX_HEIGHT_PCT = 0.92
SIDE_PANEL_WIDTH = 180
SIDE_GAP = 24
GHOST_ALPHA = 64

# Key symbols (pyglet/arcade codes). Kept as ints so the engine never imports arcade.
KEY_ENTER = 65293
KEY_ESCAPE = 65307
KEY_SPACE = 32
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_A = 97
KEY_D = 100
KEY_P = 112
KEY_S = 115
KEY_W = 119
