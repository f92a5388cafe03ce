from __future__ import annotations

import random
from collections import defaultdict

from esper import World

from memorygame.events.bus import EventBus, EVENT_TICK
from memorygame.systems.game_engine import GameEngine
from memorygame.world import create_world


def build_engine(size: int = 2, seed: int = 0, **kwargs) -> tuple[EventBus, World, GameEngine]:
    """Create a bus, world and engine with a seeded shuffle."""
    bus = EventBus()
    world = create_world(rng=random.Random(seed))
    engine = GameEngine(world, bus, size=size, rng=world.random, **kwargs)
    return bus, world, engine


def drive_ticks(bus: EventBus, n: int = 4, dt: float = 0.25) -> None:
    for _ in range(n):
        bus.emit(EVENT_TICK, dt=dt)


def pairs_by_value(engine: GameEngine) -> dict[int, list[int]]:
    """Map each tile value to the positions holding it."""
    positions: dict[int, list[int]] = defaultdict(list)
    for tile in engine.deck:
        positions[tile.value].append(tile.position)
    return dict(positions)


def mismatched_pair(engine: GameEngine) -> tuple[int, int]:
    """Return two unsolved positions holding different values."""
    deck = engine.deck
    first = next(tile for tile in deck if not engine.is_solved(tile.position))
    second = next(
        tile for tile in deck
        if tile.value != first.value and not engine.is_solved(tile.position)
    )
    return first.position, second.position
