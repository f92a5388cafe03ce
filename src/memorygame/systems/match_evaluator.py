from __future__ import annotations

import logging
import math

from esper import World

from memorygame.components.pending_mismatch_reset import PendingMismatchReset
from memorygame.components.tile import Tile
from memorygame.constants import MISMATCH_DELAY
from memorygame.events.bus import (
    EventBus,
    EVENT_MATCH_FOUND,
    EVENT_MATCH_MISMATCH,
    EVENT_MISMATCH_RESET,
    EVENT_TICK,
)
from memorygame.utils.session import get_board, get_or_create_session_state

logger = logging.getLogger(__name__)

# Tolerance for accumulated float error when summing frame deltas.
_EPSILON = 1e-9


class MatchEvaluator:
    """Decides whether the two revealed tiles form a pair.

    A match is applied immediately. A mismatch leaves both tiles face-up and
    schedules a PendingMismatchReset entity that the tick handler counts down;
    input stays locked until it fires.
    """

    def __init__(self, world: World, event_bus: EventBus, delay: float = MISMATCH_DELAY):
        self.world = world
        self.event_bus = event_bus
        self.delay = max(0.0, float(delay))
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def evaluate(self, first: int, second: int) -> bool:
        state = get_or_create_session_state(self.world)
        first_tile = self._tile_at(first)
        second_tile = self._tile_at(second)
        positions = (first, second)
        if first_tile.value == second_tile.value:
            state.solved.update(positions)
            state.revealed.clear()
            state.input_locked = False
            logger.debug("Session %d: matched %s (value %d)", state.session_id, positions, first_tile.value)
            self.event_bus.emit(
                EVENT_MATCH_FOUND,
                positions=positions,
                value=first_tile.value,
                session_id=state.session_id,
            )
            return True
        self.world.create_entity(
            PendingMismatchReset(session_id=state.session_id, positions=positions, remaining=self.delay)
        )
        logger.debug("Session %d: mismatch %s, hiding in %.2fs", state.session_id, positions, self.delay)
        self.event_bus.emit(
            EVENT_MATCH_MISMATCH,
            positions=positions,
            session_id=state.session_id,
            delay=self.delay,
        )
        return False

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        if not math.isfinite(dt) or dt < 0:
            logger.warning("Ignoring tick with invalid dt %r", dt)
            return
        for ent, pending in list(self.world.get_component(PendingMismatchReset)):
            pending.remaining -= dt
            if pending.remaining <= _EPSILON:
                self._fire(ent, pending)

    @property
    def has_pending(self) -> bool:
        return any(True for _ in self.world.get_component(PendingMismatchReset))

    def cancel_pending(self) -> int:
        """Drop every scheduled flip-back; returns how many were cancelled."""
        entities = [ent for ent, _ in self.world.get_component(PendingMismatchReset)]
        for ent in entities:
            self.world.delete_entity(ent, immediate=True)
        if entities:
            logger.debug("Cancelled %d pending mismatch reset(s)", len(entities))
        return len(entities)

    def _fire(self, ent: int, pending: PendingMismatchReset) -> None:
        self.world.delete_entity(ent, immediate=True)
        state = get_or_create_session_state(self.world)
        if pending.session_id != state.session_id:
            logger.debug(
                "Dropping stale mismatch reset from session %d (live session %d)",
                pending.session_id,
                state.session_id,
            )
            return
        state.revealed.clear()
        state.input_locked = False
        self.event_bus.emit(
            EVENT_MISMATCH_RESET,
            positions=pending.positions,
            session_id=pending.session_id,
        )

    def _tile_at(self, position: int) -> Tile:
        board = get_board(self.world)
        if board is None:
            raise LookupError("no board has been initialized")
        return self.world.component_for_entity(board.tile_entities[position], Tile)
