from __future__ import annotations

from typing import TYPE_CHECKING

from memorygame.constants import (
    TILE_FACE_TEXT_COLOR,
    TILE_GAP,
    TILE_HIDDEN_COLOR,
    TILE_HIDDEN_TEXT_COLOR,
    TILE_REVEALED_COLOR,
    TILE_SOLVED_COLOR,
)

if TYPE_CHECKING:
    from memorygame.rendering.context import RenderContext


def tile_style(ctx: RenderContext, position: int):
    """Return (fill color, text color, label) for the tile at position."""
    state = ctx.state
    if position in state.solved:
        return TILE_SOLVED_COLOR, TILE_FACE_TEXT_COLOR, str(ctx.tiles[position].value)
    if position in state.revealed:
        return TILE_REVEALED_COLOR, TILE_FACE_TEXT_COLOR, str(ctx.tiles[position].value)
    return TILE_HIDDEN_COLOR, TILE_HIDDEN_TEXT_COLOR, "?"


class BoardRenderer:
    def __init__(self, gap: int = TILE_GAP):
        self._gap = gap

    def render(self, arcade, ctx: RenderContext) -> None:
        draw_size = max(ctx.tile_size - self._gap, 4)
        font_size = max(8, int(draw_size * 0.35))
        for tile in ctx.tiles:
            row, col = divmod(tile.position, ctx.board_size)
            row_from_bottom = ctx.board_size - 1 - row
            left = ctx.board_left + col * ctx.tile_size + self._gap / 2
            bottom = ctx.board_bottom + row_from_bottom * ctx.tile_size + self._gap / 2
            fill, text_color, label = tile_style(ctx, tile.position)
            arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, fill)
            arcade.draw_text(
                label,
                left + draw_size / 2,
                bottom + draw_size / 2,
                text_color,
                font_size,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
