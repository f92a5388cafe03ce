from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from esper import World

from memorygame.components.session_state import SessionState
from memorygame.components.tile import Tile
from memorygame.ui.layout import compute_board_geometry
from memorygame.utils.session import get_board, get_or_create_session_state


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    board_size: int
    tile_size: int
    board_left: float
    board_bottom: float
    state: SessionState
    tiles: List[Tile] = field(default_factory=list)

    @property
    def board_extent(self) -> float:
        return self.board_size * self.tile_size


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext | None:
    """Populate a RenderContext for the current frame, or None before the first session."""
    board = get_board(world)
    if board is None:
        return None
    tile_size, board_left, board_bottom = compute_board_geometry(window_width, window_height, board.size)
    tiles = [world.component_for_entity(ent, Tile) for ent in board.tile_entities]
    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        board_size=board.size,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        state=get_or_create_session_state(world),
        tiles=tiles,
    )
