import random

from esper import World
from memorygame.components.session_state import SessionState


def create_world(rng: random.Random | None = None) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global session state resource; GameEngine fills it on initialize.
    world.create_entity(SessionState())
    return world
