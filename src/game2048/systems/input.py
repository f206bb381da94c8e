from typing import Dict, Optional

from game2048.components.direction import Direction
from game2048.constants import (
    KEY_A, KEY_D, KEY_DOWN, KEY_LEFT, KEY_N, KEY_RIGHT, KEY_S, KEY_UP, KEY_W,
)
from game2048.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOVE_REQUEST,
    EVENT_NEW_GAME_REQUEST,
)

DEFAULT_KEY_BINDINGS: Dict[int, Direction] = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_W: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_D: Direction.RIGHT,
}


class InputSystem:
    """Translates raw key presses into discrete move and new-game commands."""
    def __init__(
        self,
        event_bus: EventBus,
        key_bindings: Optional[Dict[int, Direction]] = None,
        new_game_key: Optional[int] = KEY_N,
    ):
        self.event_bus = event_bus
        self.key_bindings = dict(DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings)
        self.new_game_key = new_game_key
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        direction = self.key_bindings.get(symbol)
        if direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
        elif self.new_game_key is not None and symbol == self.new_game_key:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
