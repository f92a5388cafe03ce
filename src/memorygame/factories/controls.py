"""Factory helpers for the board control buttons."""
from esper import World

from memorygame.components.control_button import ControlAction, ControlButton
from memorygame.constants import (
    BOTTOM_MARGIN,
    HEADER_HEIGHT,
    RESET_BUTTON_HEIGHT,
    RESET_BUTTON_WIDTH,
    SIZE_BUTTON_SIZE,
)


def spawn_controls(world: World, width: int, height: int) -> list[int]:
    """Create (or re-create for a new window size) the size stepper and reset button."""
    for ent in [ent for ent, _ in world.get_component(ControlButton)]:
        world.delete_entity(ent, immediate=True)

    center_x = width / 2
    stepper_y = height - HEADER_HEIGHT + SIZE_BUTTON_SIZE / 2 + 8
    button_specs = (
        ("-", ControlAction.DECREASE_SIZE, center_x - 70, stepper_y, SIZE_BUTTON_SIZE, SIZE_BUTTON_SIZE),
        ("+", ControlAction.INCREASE_SIZE, center_x + 70, stepper_y, SIZE_BUTTON_SIZE, SIZE_BUTTON_SIZE),
        ("Reset", ControlAction.RESET, center_x, BOTTOM_MARGIN / 2, RESET_BUTTON_WIDTH, RESET_BUTTON_HEIGHT),
    )
    entities = []
    for label, action, x, y, w, h in button_specs:
        entities.append(
            world.create_entity(ControlButton(label=label, action=action, x=x, y=y, width=w, height=h))
        )
    return entities
