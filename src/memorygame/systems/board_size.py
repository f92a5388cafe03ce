from __future__ import annotations

import logging

from esper import World

from memorygame.constants import MAX_BOARD_SIZE, MIN_BOARD_SIZE
from memorygame.events.bus import (
    EventBus,
    EVENT_BOARD_SIZE_CHANGED,
    EVENT_BOARD_SIZE_REJECTED,
    EVENT_BOARD_SIZE_REQUEST,
    EVENT_BOARD_SIZE_STEP,
)
from memorygame.utils.session import get_board

logger = logging.getLogger(__name__)


def parse_board_size(value) -> int | None:
    """Convert raw size input to an int, or None when it is not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        return int(value)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


class BoardSizeSystem:
    """Validates grid size changes before a new session is started.

    Typed values outside [MIN_BOARD_SIZE, MAX_BOARD_SIZE] are rejected outright;
    the +/- stepper clamps to the same range.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BOARD_SIZE_REQUEST, self.on_size_request)
        self.event_bus.subscribe(EVENT_BOARD_SIZE_STEP, self.on_size_step)

    def on_size_request(self, sender, **kwargs):
        raw = kwargs.get('size')
        size = parse_board_size(raw)
        if size is None:
            self._reject(raw, "not_an_integer")
            return
        if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            self._reject(raw, "out_of_range")
            return
        self._apply(size)

    def on_size_step(self, sender, **kwargs):
        delta = kwargs.get('delta')
        try:
            delta = int(delta)
        except (TypeError, ValueError):
            return
        current = self.current_size
        if current is None:
            return
        self._apply(max(MIN_BOARD_SIZE, min(MAX_BOARD_SIZE, current + delta)))

    @property
    def current_size(self) -> int | None:
        board = get_board(self.world)
        return board.size if board is not None else None

    def _apply(self, size: int) -> None:
        previous = self.current_size
        if previous == size:
            return
        logger.info("Board size changed from %s to %d", previous, size)
        self.event_bus.emit(EVENT_BOARD_SIZE_CHANGED, size=size, previous_size=previous)

    def _reject(self, value, reason: str) -> None:
        logger.warning("Rejected board size %r: %s", value, reason)
        self.event_bus.emit(EVENT_BOARD_SIZE_REJECTED, value=value, reason=reason)
