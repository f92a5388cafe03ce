from esper import World

from memorygame.components.board import Board
from memorygame.components.session_state import SessionState


def get_or_create_session_state(world: World) -> SessionState:
    """Return the shared SessionState component, creating it if absent."""
    existing = list(world.get_component(SessionState))
    if existing:
        return existing[0][1]
    state = SessionState()
    world.create_entity(state)
    return state


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None
