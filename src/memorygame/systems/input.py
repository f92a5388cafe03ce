from esper import World

from memorygame.components.control_button import ControlAction, ControlButton
from memorygame.events.bus import (
    EventBus,
    EVENT_BOARD_SIZE_REQUEST,
    EVENT_BOARD_SIZE_STEP,
    EVENT_GAME_RESET_REQUEST,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
)
from memorygame.ui.layout import position_at_point
from memorygame.utils.session import get_board

# Arcade key codes, kept local so input handling does not import arcade.
KEY_PLUS = 43
KEY_EQUAL = 61
KEY_MINUS = 45
KEY_NUM_ADD = 65451
KEY_NUM_SUBTRACT = 65453
KEY_R = 114
KEY_0 = 48
KEY_9 = 57


class InputSystem:
    """Turns window clicks and key presses into board events."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button (1) interacts with the board.
        if button != 1:
            return
        for _, control in self.world.get_component(ControlButton):
            if control.enabled and control.contains(x, y):
                self._activate(control.action)
                return
        board = get_board(self.world)
        if board is None:
            return
        position = position_at_point(x, y, self.window.width, self.window.height, board.size)
        if position is not None:
            self.event_bus.emit(EVENT_TILE_CLICK, position=position)

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol in (KEY_PLUS, KEY_EQUAL, KEY_NUM_ADD):
            self._activate(ControlAction.INCREASE_SIZE)
        elif symbol in (KEY_MINUS, KEY_NUM_SUBTRACT):
            self._activate(ControlAction.DECREASE_SIZE)
        elif symbol == KEY_R:
            self._activate(ControlAction.RESET)
        elif KEY_0 <= symbol <= KEY_9:
            # Digit keys type a size directly; 0 stands for 10.
            digit = symbol - KEY_0
            self.event_bus.emit(EVENT_BOARD_SIZE_REQUEST, size=digit or 10)

    def _activate(self, action: ControlAction) -> None:
        if action == ControlAction.DECREASE_SIZE:
            self.event_bus.emit(EVENT_BOARD_SIZE_STEP, delta=-1)
        elif action == ControlAction.INCREASE_SIZE:
            self.event_bus.emit(EVENT_BOARD_SIZE_STEP, delta=1)
        elif action == ControlAction.RESET:
            self.event_bus.emit(EVENT_GAME_RESET_REQUEST)
