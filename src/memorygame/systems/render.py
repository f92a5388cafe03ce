from esper import World

from memorygame.events.bus import EventBus
from memorygame.rendering.board_renderer import BoardRenderer
from memorygame.rendering.context import RenderContext, build_render_context
from memorygame.rendering.controls_renderer import ControlsRenderer


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._board_renderer = BoardRenderer()
        self._controls_renderer = ControlsRenderer()

    def process(self) -> RenderContext | None:
        # Local import keeps tests headless without creating a window.
        import arcade
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        if ctx is None:
            return None
        # Headless safeguard: without an active window nothing is drawn.
        try:
            arcade.get_window()
        except Exception:
            return ctx
        self._board_renderer.render(arcade, ctx)
        self._controls_renderer.render(arcade, ctx)
        return ctx
