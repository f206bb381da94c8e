import random

from esper import World
from .events.bus import EventBus
from game2048.components.game_state import GameState, GameMode
from game2048.components.move_state import MoveState
from game2048.config import EngineConfig


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.READY,
    *,
    config: EngineConfig | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "engine_config", config or EngineConfig())

    # Register the global game state and move bookkeeping resources.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    world.add_component(state_entity, MoveState())
    return world
