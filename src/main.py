"""Entry point for the 2048 sliding-tile game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from game2048.world import create_world
from game2048.constants import GAME_SIZE
from game2048.events.bus import EVENT_TICK, EVENT_KEY_PRESS, EventBus
from game2048.systems.animation import AnimationSystem
from game2048.systems.board import BoardSystem
from game2048.systems.input import InputSystem
from game2048.systems.move import MoveSystem
from game2048.systems.move_resolution import MoveResolutionSystem
from game2048.systems.render import RenderSystem


class Game2048Window(Window):
    def __init__(self):
        super().__init__(GAME_SIZE, GAME_SIZE, "2048")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        # Board and move systems
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.move_resolution_system = MoveResolutionSystem(self.world, self.event_bus)
        self.move_system = MoveSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        # Interface systems
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        set_background_color(color.WHITE)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = Game2048Window()
    run()

if __name__ == "__main__":
    main()
