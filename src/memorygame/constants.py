# Board size limits (side length of the square grid).
MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 10
DEFAULT_BOARD_SIZE = 4

# Seconds a mismatched pair stays face-up before flipping back.
MISMATCH_DELAY = 1.0

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Memory Game"

# Board footprint relative to the window, below the header strip.
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.90
BOTTOM_MARGIN = 90
HEADER_HEIGHT = 110
TILE_GAP = 8
MIN_TILE_SIZE = 20

# Header controls ("-", "+") and footer reset button.
SIZE_BUTTON_SIZE = 44
RESET_BUTTON_WIDTH = 180
RESET_BUTTON_HEIGHT = 48

# Tile colors (face-down, face-up, solved) and text colors.
TILE_HIDDEN_COLOR = (209, 213, 219)
TILE_REVEALED_COLOR = (59, 130, 246)
TILE_SOLVED_COLOR = (34, 197, 94)
TILE_HIDDEN_TEXT_COLOR = (156, 163, 175)
TILE_FACE_TEXT_COLOR = (255, 255, 255)
BACKGROUND_COLOR = (243, 244, 246)
WIN_TEXT_COLOR = (22, 163, 74)
