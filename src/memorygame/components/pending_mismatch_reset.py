from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class PendingMismatchReset:
    """Scheduled flip-back of a mismatched pair.

    remaining counts down in seconds on each tick; the reset only applies while
    session_id still names the live session.
    """
    session_id: int
    positions: Tuple[int, int]
    remaining: float
