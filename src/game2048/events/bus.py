from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)

    def has_subscribers(self, name: str) -> bool:
        sig = self._signals.get(name)
        return bool(sig and sig.receivers)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int


# ============================================================================
# MOVES
# ============================================================================
EVENT_MOVE_REQUEST = "move_request"                # payload: direction=Direction
EVENT_MOVE_REJECTED = "move_rejected"              # payload: direction=Direction, reason=str
EVENT_MOVE_QUEUED = "move_queued"                  # payload: direction=Direction
EVENT_MOVE_RESOLVED = "move_resolved"              # payload: move_id=int, plan=MovePlan
EVENT_MOVE_COMPLETED = "move_completed"            # payload: move_id=int, plan=MovePlan, spawned=list[Tile]


# ============================================================================
# BOARD
# ============================================================================
EVENT_TILES_SPAWNED = "tiles_spawned"              # payload: tiles=list[(pos, value)], reason=str
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list, move_id=int|None
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list, move_id=int|None


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None
EVENT_GAME_STARTED = "game_started"                # payload: tiles=list[(pos, value)]
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                      # payload: moves_made=int, max_tile=int
