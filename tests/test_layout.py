import pytest

from memorygame.constants import BOTTOM_MARGIN, HEADER_HEIGHT, MIN_TILE_SIZE
from memorygame.ui.layout import compute_board_geometry, position_at_point, tile_center


@pytest.mark.parametrize("size", range(2, 11))
def test_board_fits_between_footer_and_header(size):
    tile_size, start_x, start_y = compute_board_geometry(800, 720, size)
    total = tile_size * size
    assert start_x >= 0
    assert start_x + total <= 800
    assert start_y >= BOTTOM_MARGIN
    assert start_y + total <= 720 - HEADER_HEIGHT


def test_tiny_window_keeps_minimum_tile_size():
    tile_size, _, _ = compute_board_geometry(50, 220, 10)
    assert tile_size == MIN_TILE_SIZE


@pytest.mark.parametrize("size", [2, 3, 7])
def test_tile_centers_map_back_to_positions(size):
    for position in range(size * size):
        x, y = tile_center(position, 800, 720, size)
        assert position_at_point(x, y, 800, 720, size) == position


def test_position_zero_is_top_left():
    x0, y0 = tile_center(0, 800, 720, 3)
    x2, _ = tile_center(2, 800, 720, 3)
    _, y6 = tile_center(6, 800, 720, 3)
    assert x0 < x2
    assert y0 > y6


def test_points_outside_board_map_to_none():
    tile_size, start_x, start_y = compute_board_geometry(800, 720, 4)
    assert position_at_point(start_x - 1, start_y + 5, 800, 720, 4) is None
    assert position_at_point(start_x + 5, start_y - 1, 800, 720, 4) is None
    assert position_at_point(start_x + 4 * tile_size, start_y + 5, 800, 720, 4) is None
