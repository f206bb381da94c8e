from esper import World

from game2048.components.board import Board
from game2048.components.move_state import MoveState


def get_or_create_move_state(world: World) -> MoveState:
    """Return the shared MoveState component, creating it if absent."""
    existing = list(world.get_component(MoveState))
    if existing:
        return existing[0][1]
    world.create_entity(MoveState())
    return list(world.get_component(MoveState))[0][1]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")
