from memorygame.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HEADER_HEIGHT,
    MIN_TILE_SIZE,
)


def compute_board_geometry(window_width: int, window_height: int, board_size: int):
    """Return (tile_size, start_x, start_y) for a square board of board_size cells per side.

    tile_size is the pitch of one cell (tile plus gap); start_x/start_y is the
    bottom-left corner of the board. Shared by rendering and input so clicks map
    onto exactly what was drawn.
    """
    available_h = window_height - BOTTOM_MARGIN - HEADER_HEIGHT
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = available_h * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / board_size, max_board_h / board_size))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total = board_size * tile_size
    start_x = (window_width - total) / 2
    start_y = BOTTOM_MARGIN + (available_h - total) / 2
    return tile_size, start_x, start_y


def position_at_point(x: float, y: float, window_width: int, window_height: int, board_size: int):
    """Map a window point to a tile position, or None when it misses the board.

    Positions run left to right, top row first, matching the deck order.
    """
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, board_size)
    total = board_size * tile_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    col = int((x - start_x) // tile_size)
    row_from_bottom = int((y - start_y) // tile_size)
    row = board_size - 1 - row_from_bottom
    if 0 <= row < board_size and 0 <= col < board_size:
        return row * board_size + col
    return None


def tile_center(position: int, window_width: int, window_height: int, board_size: int):
    """Center point of the cell holding position."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, board_size)
    row, col = divmod(position, board_size)
    row_from_bottom = board_size - 1 - row
    return (
        start_x + col * tile_size + tile_size / 2,
        start_y + row_from_bottom * tile_size + tile_size / 2,
    )
