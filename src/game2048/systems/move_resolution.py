import logging
import random
from typing import List

from esper import World

from game2048.components.game_state import GameMode
from game2048.components.tile import Tile
from game2048.config import get_engine_config
from game2048.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_GAME_OVER,
    EVENT_MOVE_COMPLETED,
    EVENT_MOVE_REQUEST,
    EVENT_TILES_SPAWNED,
)
from game2048.systems.game_over import is_game_over
from game2048.systems.spawn import choose_spawn_count, spawn_tiles
from game2048.systems.state_utils import get_board, get_or_create_move_state
from game2048.utils.game_state import current_mode, set_game_mode

logger = logging.getLogger(__name__)


def enter_game_over_if_terminal(world: World, event_bus: EventBus) -> bool:
    """Switch to GAME_OVER and notify the sink once when the board is terminal."""
    board = get_board(world)
    if not is_game_over(board):
        return False
    if current_mode(world) == GameMode.GAME_OVER:
        return True
    state = get_or_create_move_state(world)
    state.pending_direction = None
    set_game_mode(world, event_bus, GameMode.GAME_OVER)
    logger.info("Game over after %d moves (max tile %d)", state.moves_made, board.max_value())
    event_bus.emit(EVENT_GAME_OVER, moves_made=state.moves_made, max_tile=board.max_value())
    return True


class MoveResolutionSystem:
    """Runs the post-move step once the whole slide animation of a plan finished.

    Spawns new tiles, runs the terminal check, then releases the in-flight
    guard and replays a queued command if one is waiting.
    """

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.event_bus.subscribe(EVENT_ANIMATION_COMPLETE, self.on_animation_complete)

    def on_animation_complete(self, sender, **kwargs):
        if kwargs.get('kind') != 'slide':
            return
        state = get_or_create_move_state(self.world)
        move_id = kwargs.get('move_id')
        if not state.in_flight or move_id != state.move_id:
            # Stale completion from a previous game or an already finished move.
            return
        self._finish_move()

    def _finish_move(self):
        state = get_or_create_move_state(self.world)
        plan = state.current_plan
        spawned = self._spawn_after_move()
        state.in_flight = False
        state.current_plan = None
        game_over = enter_game_over_if_terminal(self.world, self.event_bus)
        if not game_over:
            set_game_mode(self.world, self.event_bus, GameMode.READY)
        self.event_bus.emit(EVENT_MOVE_COMPLETED, move_id=state.move_id, plan=plan, spawned=spawned)
        pending = state.pending_direction
        if pending is not None and not game_over:
            state.pending_direction = None
            logger.debug("Replaying queued move %s", pending.value)
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=pending)

    def _spawn_after_move(self) -> List[Tile]:
        board = get_board(self.world)
        config = get_engine_config(self.world)
        count = choose_spawn_count(self._rng, config.double_spawn_chance)
        spawned = spawn_tiles(
            board,
            self._rng,
            count,
            values=config.tile_values,
            strategy=config.spawn_strategy,
        )
        if spawned:
            items = [(tile.position, tile.value) for tile in spawned]
            self.event_bus.emit(EVENT_TILES_SPAWNED, tiles=items, reason='move')
            self.event_bus.emit(EVENT_ANIMATION_START, kind='spawn', items=items, move_id=None)
        return spawned
