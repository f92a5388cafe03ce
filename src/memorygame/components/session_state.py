"""Per-session game state shared by the engine and the match evaluator."""
from dataclasses import dataclass, field
from typing import List, Set


@dataclass
class SessionState:
    """Singleton component describing the current game session.

    revealed holds face-up but unsolved positions in reveal order (0..2 items).
    solved only grows within a session; a new session_id starts from empty sets.
    """
    session_id: int = 0
    revealed: List[int] = field(default_factory=list)
    solved: Set[int] = field(default_factory=set)
    input_locked: bool = False
    won: bool = False

    def is_face_up(self, position: int) -> bool:
        return position in self.solved or position in self.revealed
