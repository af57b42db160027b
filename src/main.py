"""Entry point for the Rock Drop falling-block game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
from arcade import Window, run, set_background_color, color
from rockdrop.world import create_world
from rockdrop.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from rockdrop.events.bus import EVENT_KEY_PRESS, EVENT_TICK, EventBus
from rockdrop.systems.game_session import GameSession
from rockdrop.systems.input import InputSystem
from rockdrop.systems.render import RenderSystem


class RockDropWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Rock Drop", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        self.session = GameSession(self.world, self.event_bus)
        self.input_system = InputSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.session)

        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_close(self):
        self.session.stop()
        super().on_close()


def main():
    RockDropWindow()
    run()

if __name__ == "__main__":
    main()
