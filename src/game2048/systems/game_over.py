from game2048.components.board import Board
from game2048.components.direction import Direction
from game2048.systems.move_resolver import resolve_move


def has_legal_move(board: Board) -> bool:
    return any(resolve_move(board, direction).any_tile_moved for direction in Direction)


def is_game_over(board: Board) -> bool:
    """True when the board is full and none of the four directions moves a tile.

    A full board can still hold adjacent equal values, so every direction is
    resolved before declaring the game over.
    """
    if not board.is_full():
        return False
    return not has_legal_move(board)
