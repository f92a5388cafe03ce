"""Arcade window and command line for the memory game.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import random

from arcade import Window, run, set_background_color

from memorygame.constants import (
    BACKGROUND_COLOR,
    DEFAULT_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from memorygame.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TICK
from memorygame.factories.controls import spawn_controls
from memorygame.systems.board_size import BoardSizeSystem
from memorygame.systems.game_engine import GameEngine
from memorygame.systems.input import InputSystem
from memorygame.systems.render import RenderSystem
from memorygame.utils.logger import setup_logging
from memorygame.world import create_world

logger = logging.getLogger(__name__)


class MemoryWindow(Window):
    def __init__(self, size: int = DEFAULT_BOARD_SIZE, seed: int | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(rng=random.Random(seed))
        self.engine = GameEngine(self.world, self.event_bus, size=size, rng=self.world.random)
        self.board_size_system = BoardSizeSystem(self.world, self.event_bus)
        spawn_controls(self.world, self.width, self.height)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        set_background_color(BACKGROUND_COLOR)

    def on_resize(self, width: int, height: int):
        spawn_controls(self.world, width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tile-matching memory game")
    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Grid side length ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the deck shuffle",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    args = parser.parse_args(argv)
    if not MIN_BOARD_SIZE <= args.size <= MAX_BOARD_SIZE:
        parser.error(f"--size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}")

    setup_logging(args.log_level)
    logger.info("Starting memory game on a %dx%d board", args.size, args.size)
    MemoryWindow(size=args.size, seed=args.seed)
    run()
    return 0

