from __future__ import annotations

from typing import TYPE_CHECKING

from memorygame.components.control_button import ControlAction, ControlButton
from memorygame.constants import MAX_BOARD_SIZE, MIN_BOARD_SIZE, WIN_TEXT_COLOR

if TYPE_CHECKING:
    from memorygame.rendering.context import RenderContext


def control_label(button: ControlButton, won: bool) -> str:
    if button.action == ControlAction.RESET:
        return "Play Again" if won else "Reset"
    return button.label


class ControlsRenderer:
    """Draws the title, size stepper, reset button and win banner."""

    def render(self, arcade, ctx: RenderContext) -> None:
        center_x = ctx.window_width / 2
        arcade.draw_text(
            "Memory Game",
            center_x,
            ctx.window_height - 24,
            arcade.color.BLACK,
            24,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        stepper_y = None
        for _, button in ctx.world.get_component(ControlButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill = arcade.color.GREEN if button.action == ControlAction.RESET else arcade.color.LIGHT_GRAY
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill)
            arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, arcade.color.DARK_GRAY, border_width=2)
            arcade.draw_text(
                control_label(button, ctx.state.won),
                button.x,
                button.y,
                arcade.color.BLACK,
                18,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
            if button.action != ControlAction.RESET:
                stepper_y = button.y
        if stepper_y is not None:
            arcade.draw_text(
                str(ctx.board_size),
                center_x,
                stepper_y,
                arcade.color.BLACK,
                20,
                anchor_x="center",
                anchor_y="center",
            )
            arcade.draw_text(
                f"Grid Size: ({MIN_BOARD_SIZE} - {MAX_BOARD_SIZE})",
                center_x,
                stepper_y + 34,
                arcade.color.BLACK,
                14,
                anchor_x="center",
                anchor_y="center",
            )
        if ctx.state.won:
            arcade.draw_text(
                "You Won!",
                center_x,
                ctx.board_bottom + ctx.board_extent / 2,
                WIN_TEXT_COLOR,
                40,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
