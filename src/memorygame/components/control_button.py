"""Components for the clickable board controls (size stepper and reset)."""
from dataclasses import dataclass
from enum import Enum, auto


class ControlAction(Enum):
    """Actions that a control button can trigger."""
    DECREASE_SIZE = auto()
    INCREASE_SIZE = auto()
    RESET = auto()


@dataclass
class ControlButton:
    """Interactive button drawn around the board; x/y is the button center."""
    label: str
    action: ControlAction
    x: float
    y: float
    width: float = 44.0
    height: float = 44.0
    enabled: bool = True

    def contains(self, x: float, y: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.x - half_w <= x <= self.x + half_w
            and self.y - half_h <= y <= self.y + half_h
        )
