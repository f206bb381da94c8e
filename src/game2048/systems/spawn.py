from __future__ import annotations

import logging
import random
from typing import List, Sequence

from game2048.components.board import Board
from game2048.components.tile import Coordinate, Tile
from game2048.constants import (
    DOUBLE_SPAWN_CHANCE,
    SPAWN_RETRY_LIMIT,
    SPAWN_STRATEGY_DIRECT,
    SPAWN_STRATEGY_REJECTION,
    STARTING_TILE_COUNT,
    STARTING_TILE_VALUES,
)

logger = logging.getLogger(__name__)


def choose_spawn_count(rng: random.Random, double_chance: float = DOUBLE_SPAWN_CHANCE) -> int:
    return 2 if rng.random() < double_chance else 1


def choose_tile_value(rng: random.Random, values: Sequence[int] = STARTING_TILE_VALUES) -> int:
    return rng.choice(list(values))


def sample_empty_cells(board: Board, count: int, rng: random.Random) -> List[Coordinate]:
    """Pick up to ``count`` distinct empty cells uniformly."""
    empty = sorted(board.empty_cells())
    if count <= 0 or not empty:
        return []
    return rng.sample(empty, min(count, len(empty)))


def sample_empty_cells_by_rejection(
    board: Board,
    count: int,
    rng: random.Random,
    *,
    max_attempts: int = SPAWN_RETRY_LIMIT,
) -> List[Coordinate]:
    """Draw random cells and retry occupied ones, at most ``max_attempts`` draws per tile."""
    chosen: List[Coordinate] = []
    for _ in range(max(count, 0)):
        for _attempt in range(max_attempts):
            position = (rng.randrange(board.cols), rng.randrange(board.rows))
            if position not in board and position not in chosen:
                chosen.append(position)
                break
        else:
            logger.debug("No empty cell found after %d draws", max_attempts)
            break
    return chosen


def spawn_tiles(
    board: Board,
    rng: random.Random,
    count: int,
    *,
    values: Sequence[int] = STARTING_TILE_VALUES,
    strategy: str = SPAWN_STRATEGY_DIRECT,
) -> List[Tile]:
    """Place up to ``count`` new tiles on empty cells and return them.

    Fewer tiles are placed when the board lacks room; a full board spawns
    nothing.
    """
    if strategy == SPAWN_STRATEGY_REJECTION:
        positions = sample_empty_cells_by_rejection(board, count, rng)
    elif strategy == SPAWN_STRATEGY_DIRECT:
        positions = sample_empty_cells(board, count, rng)
    else:
        raise ValueError(f"Unknown spawn strategy: {strategy!r}")
    spawned: List[Tile] = []
    for position in positions:
        spawned.append(board.place(position, choose_tile_value(rng, values)))
    if spawned:
        logger.debug("Spawned %s", [(tile.position, tile.value) for tile in spawned])
    return spawned


def place_starting_tiles(
    board: Board,
    rng: random.Random,
    *,
    count: int = STARTING_TILE_COUNT,
    values: Sequence[int] = STARTING_TILE_VALUES,
) -> List[Tile]:
    return spawn_tiles(board, rng, count, values=values, strategy=SPAWN_STRATEGY_DIRECT)
