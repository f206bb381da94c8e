from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from esper import World

from game2048.constants import (
    DOUBLE_SPAWN_CHANCE,
    GRID_COLS,
    GRID_ROWS,
    SPAWN_STRATEGY_DIRECT,
    SPAWN_STRATEGY_REJECTION,
    STARTING_TILE_COUNT,
    STARTING_TILE_VALUES,
)


@dataclass(slots=True)
class EngineConfig:
    """Tunable engine rules; defaults come from ``game2048.constants``."""

    cols: int = GRID_COLS
    rows: int = GRID_ROWS
    starting_tile_count: int = STARTING_TILE_COUNT
    tile_values: Tuple[int, ...] = field(default=STARTING_TILE_VALUES)
    double_spawn_chance: float = DOUBLE_SPAWN_CHANCE
    spawn_strategy: str = SPAWN_STRATEGY_DIRECT
    # Drop commands received mid-animation unless this keeps a single pending one.
    queue_moves: bool = False

    def __post_init__(self) -> None:
        if self.spawn_strategy not in (SPAWN_STRATEGY_DIRECT, SPAWN_STRATEGY_REJECTION):
            raise ValueError(f"Unknown spawn strategy: {self.spawn_strategy!r}")
        if not 0.0 <= self.double_spawn_chance <= 1.0:
            raise ValueError(f"double_spawn_chance must be within [0, 1], got {self.double_spawn_chance}")
        if not self.tile_values:
            raise ValueError("tile_values must not be empty")
        self.tile_values = tuple(self.tile_values)


def get_engine_config(world: World) -> EngineConfig:
    """Return the config attached by ``create_world``, falling back to defaults."""
    config = getattr(world, "engine_config", None)
    if isinstance(config, EngineConfig):
        return config
    return EngineConfig()
