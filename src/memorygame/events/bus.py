from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"                    # payload: position=int
EVENT_BOARD_SIZE_REQUEST = "board_size_request"    # payload: size=Any (raw input value)
EVENT_BOARD_SIZE_STEP = "board_size_step"          # payload: delta=int
EVENT_GAME_RESET_REQUEST = "game_reset_request"    # payload: None


# ============================================================================
# SESSION LIFECYCLE
# ============================================================================
EVENT_BOARD_SIZE_CHANGED = "board_size_changed"    # payload: size=int, previous_size=int|None
EVENT_BOARD_SIZE_REJECTED = "board_size_rejected"  # payload: value=Any, reason=str
EVENT_SESSION_INITIALIZED = "session_initialized"  # payload: session_id=int, size=int, cell_count=int
EVENT_GAME_WON = "game_won"                        # payload: session_id=int, size=int


# ============================================================================
# TILE & MATCH MECHANICS
# ============================================================================
EVENT_TILE_REVEALED = "tile_revealed"              # payload: position=int, value=int
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: position=int, reason=str
EVENT_REVEAL_IGNORED = "reveal_ignored"            # payload: position=Any, reason=str
EVENT_MATCH_FOUND = "match_found"                  # payload: positions=(int,int), value=int, session_id=int
EVENT_MATCH_MISMATCH = "match_mismatch"            # payload: positions=(int,int), session_id=int, delay=float
EVENT_MISMATCH_RESET = "mismatch_reset"            # payload: positions=(int,int), session_id=int
