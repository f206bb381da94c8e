import logging
import random
from typing import Dict, List, Optional, Tuple

from esper import World

from game2048.components.board import Board
from game2048.components.game_state import GameMode
from game2048.components.tile import Tile
from game2048.config import get_engine_config
from game2048.events.bus import (
    EventBus,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_GAME_STARTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_TILES_SPAWNED,
)
from game2048.systems.move_resolution import enter_game_over_if_terminal
from game2048.systems.spawn import place_starting_tiles
from game2048.systems.state_utils import get_or_create_move_state
from game2048.utils.game_state import set_game_mode

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and its per-game lifecycle."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        cols: Optional[int] = None,
        rows: Optional[int] = None,
        *,
        rng: random.Random | None = None,
        start: bool = True,
    ):
        self.world = world
        self.event_bus = event_bus
        config = get_engine_config(world)
        self.cols = cols if cols is not None else config.cols
        self.rows = rows if rows is not None else config.rows
        self._rng = rng or getattr(world, "random", None) or random.Random()
        # Create a single board entity with Board component
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(cols=self.cols, rows=self.rows))
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        if start:
            self.new_game()

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def on_new_game_request(self, sender, **kwargs):
        self.new_game()

    def new_game(self) -> List[Tile]:
        """Replace the board with an empty one and place the starting tiles."""
        board = self._install_board(Board(cols=self.cols, rows=self.rows))
        config = get_engine_config(self.world)
        tiles = place_starting_tiles(
            board,
            self._rng,
            count=config.starting_tile_count,
            values=config.tile_values,
        )
        items = [(tile.position, tile.value) for tile in tiles]
        logger.info("New %dx%d game with %s", self.cols, self.rows, items)
        self.event_bus.emit(EVENT_GAME_STARTED, tiles=items)
        self.event_bus.emit(EVENT_TILES_SPAWNED, tiles=items, reason='start')
        self.event_bus.emit(EVENT_ANIMATION_START, kind='spawn', items=items, move_id=None)
        enter_game_over_if_terminal(self.world, self.event_bus)
        return tiles

    def load(self, values: Dict[Tuple[int, int], int]) -> Board:
        """Start a game from an explicit layout instead of random starting tiles.

        The layout is validated in full before it replaces the current board;
        a rejected layout leaves the running game untouched.
        """
        board = Board(cols=self.cols, rows=self.rows)
        for position, value in sorted(values.items()):
            board.place(position, value)
        self._install_board(board)
        items = sorted(board.snapshot().items())
        logger.info("Loaded %dx%d game with %s", self.cols, self.rows, items)
        self.event_bus.emit(EVENT_GAME_STARTED, tiles=items)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='load')
        enter_game_over_if_terminal(self.world, self.event_bus)
        return board

    def _install_board(self, board: Board) -> Board:
        # add_component replaces the previous game's board on the same entity.
        self.world.add_component(self.board_entity, board)
        state = get_or_create_move_state(self.world)
        state.in_flight = False
        state.pending_direction = None
        state.current_plan = None
        state.moves_made = 0
        set_game_mode(self.world, self.event_bus, GameMode.READY)
        return board
