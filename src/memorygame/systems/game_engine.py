from __future__ import annotations

import logging
import random
from typing import List

from esper import World

from memorygame.components.board import Board
from memorygame.components.session_state import SessionState
from memorygame.components.tile import Tile, Unpaired
from memorygame.constants import DEFAULT_BOARD_SIZE, MISMATCH_DELAY
from memorygame.events.bus import (
    EventBus,
    EVENT_BOARD_SIZE_CHANGED,
    EVENT_GAME_RESET_REQUEST,
    EVENT_GAME_WON,
    EVENT_MATCH_FOUND,
    EVENT_REVEAL_IGNORED,
    EVENT_SESSION_INITIALIZED,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_REVEALED,
)
from memorygame.factories.deck import DeckBuilder, orphan_values
from memorygame.systems.match_evaluator import MatchEvaluator
from memorygame.utils.session import get_or_create_session_state

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns the memory game session and routes every state change.

    The presentation layer drives it through ``initialize`` and ``reveal`` (or the
    tile click / size changed / reset request events) and reads ``deck``,
    ``is_face_up``, ``is_solved`` and ``won`` to draw the board.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        size: int = DEFAULT_BOARD_SIZE,
        rng: random.Random | None = None,
        deck_builder: DeckBuilder | None = None,
        match_evaluator: MatchEvaluator | None = None,
        mismatch_delay: float = MISMATCH_DELAY,
    ):
        self.world = world
        self.event_bus = event_bus
        self.deck_builder = deck_builder or DeckBuilder(rng)
        self.match_evaluator = match_evaluator or MatchEvaluator(world, event_bus, delay=mismatch_delay)
        self.board_entity = self.world.create_entity(Board(size=size))
        self.state: SessionState = get_or_create_session_state(world)
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_BOARD_SIZE_CHANGED, self.on_board_size_changed)
        self.event_bus.subscribe(EVENT_GAME_RESET_REQUEST, self.on_reset_request)
        self.event_bus.subscribe(EVENT_MATCH_FOUND, self.on_match_found)
        self.initialize(size)

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------
    def initialize(self, size: int | None = None) -> None:
        """Start a fresh session, keeping the current size when none is given."""
        board = self._board()
        if size is None:
            size = board.size
        tiles = self.deck_builder.build(size)
        self.match_evaluator.cancel_pending()
        for ent in board.tile_entities:
            self.world.delete_entity(ent, immediate=True)
        orphans = orphan_values(tiles)
        tile_entities: List[int] = []
        for tile in tiles:
            if tile.value in orphans:
                tile_entities.append(self.world.create_entity(tile, Unpaired()))
            else:
                tile_entities.append(self.world.create_entity(tile))
        board.size = size
        board.tile_entities = tile_entities

        state = self.state
        state.session_id += 1
        state.revealed.clear()
        state.solved.clear()
        state.input_locked = False
        state.won = False
        logger.info("Session %d started on a %dx%d board", state.session_id, size, size)
        self.event_bus.emit(
            EVENT_SESSION_INITIALIZED,
            session_id=state.session_id,
            size=size,
            cell_count=board.cell_count,
        )

    def on_board_size_changed(self, sender, **kwargs):
        size = kwargs.get('size')
        if size is None:
            return
        self.initialize(size)

    def on_reset_request(self, sender, **kwargs):
        self.initialize()

    # ------------------------------------------------------------------
    # Turn flow
    # ------------------------------------------------------------------
    def on_tile_click(self, sender, **kwargs):
        position = kwargs.get('position')
        if position is None:
            return
        self.reveal(position)

    def reveal(self, position: int) -> None:
        state = self.state
        if state.won:
            self._ignore(position, "game_won")
            return
        if state.input_locked:
            self._ignore(position, "input_locked")
            return
        if isinstance(position, bool) or not isinstance(position, int) or not 0 <= position < self.cell_count:
            self._ignore(position, "out_of_range", level=logging.WARNING)
            return
        if position in state.solved:
            self._ignore(position, "already_solved", level=logging.WARNING)
            return

        revealed_count = len(state.revealed)
        if revealed_count == 0:
            state.revealed.append(position)
            self.event_bus.emit(EVENT_TILE_REVEALED, position=position, value=self.tile_at(position).value)
        elif revealed_count == 1:
            first = state.revealed[0]
            if position == first:
                state.revealed.clear()
                self.event_bus.emit(EVENT_TILE_DESELECTED, position=position, reason="same_tile")
                return
            state.input_locked = True
            state.revealed.append(position)
            self.event_bus.emit(EVENT_TILE_REVEALED, position=position, value=self.tile_at(position).value)
            self.match_evaluator.evaluate(first, position)
        else:
            # Two face-up tiles without the lock means evaluation was skipped somewhere.
            logger.error(
                "Session %d: reveal(%r) with reveal set %r while unlocked",
                state.session_id,
                position,
                state.revealed,
            )
            self._ignore(position, "reveal_set_full")

    def on_match_found(self, sender, **kwargs):
        session_id = kwargs.get('session_id')
        if session_id is not None and session_id != self.state.session_id:
            return
        self._check_win()

    def _check_win(self) -> None:
        state = self.state
        if state.won:
            return
        board = self._board()
        if board.cell_count == 0:
            return
        orphan_positions = self.orphan_positions
        paired_positions = set(range(board.cell_count)) - orphan_positions
        if not paired_positions <= state.solved:
            return
        # The orphan tile can never be matched; it is revealed once every pair is found.
        state.solved.update(orphan_positions)
        state.won = True
        logger.info("Session %d won on a %dx%d board", state.session_id, board.size, board.size)
        self.event_bus.emit(EVENT_GAME_WON, session_id=state.session_id, size=board.size)

    def _ignore(self, position, reason: str, level: int = logging.DEBUG) -> None:
        logger.log(level, "Session %d: ignoring reveal(%r): %s", self.state.session_id, position, reason)
        self.event_bus.emit(EVENT_REVEAL_IGNORED, position=position, reason=reason)

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------
    def is_face_up(self, position: int) -> bool:
        return self.state.is_face_up(position)

    def is_solved(self, position: int) -> bool:
        return position in self.state.solved

    def tile_at(self, position: int) -> Tile:
        return self.world.component_for_entity(self._board().tile_entities[position], Tile)

    @property
    def deck(self) -> List[Tile]:
        return [self.world.component_for_entity(ent, Tile) for ent in self._board().tile_entities]

    @property
    def orphan_positions(self) -> set[int]:
        board = self._board()
        return {
            index
            for index, ent in enumerate(board.tile_entities)
            if self.world.has_component(ent, Unpaired)
        }

    @property
    def size(self) -> int:
        return self._board().size

    @property
    def cell_count(self) -> int:
        return self._board().cell_count

    @property
    def session_id(self) -> int:
        return self.state.session_id

    @property
    def revealed(self) -> tuple[int, ...]:
        return tuple(self.state.revealed)

    @property
    def solved(self) -> frozenset[int]:
        return frozenset(self.state.solved)

    @property
    def input_locked(self) -> bool:
        return self.state.input_locked

    @property
    def won(self) -> bool:
        return self.state.won

    def _board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)
