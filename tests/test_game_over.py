from game2048.components.board import Board
from game2048.systems.game_over import has_legal_move, is_game_over
from tests.helpers import make_board

# Every cell distinct, so no two neighbours are equal.
DISTINCT = {(x, y): 2 ** (1 + x + 4 * y) for x in range(4) for y in range(4)}
# Checkerboard of 2/4 with no equal neighbours.
CHECKERBOARD = {
    (x, y): (2 if (x + y) % 2 == 0 else 4)
    for x in range(4)
    for y in range(4)
}


def test_full_board_without_equal_neighbours_is_game_over():
    for values in (DISTINCT, CHECKERBOARD):
        board = make_board(values)
        assert board.is_full()
        assert not has_legal_move(board)
        assert is_game_over(board)


def test_full_board_with_one_horizontal_pair_is_not_game_over():
    values = dict(DISTINCT)
    values[(1, 0)] = values[(0, 0)]
    board = make_board(values)
    assert board.is_full()
    assert has_legal_move(board)
    assert is_game_over(board) is False


def test_full_board_with_one_vertical_pair_is_not_game_over():
    values = dict(DISTINCT)
    values[(3, 3)] = values[(3, 2)]
    board = make_board(values)
    assert board.is_full()
    assert not is_game_over(board)


def test_board_with_empty_cell_is_never_over():
    values = dict(CHECKERBOARD)
    del values[(2, 2)]
    assert not is_game_over(make_board(values))
    assert not is_game_over(Board(cols=4, rows=4))


def test_check_is_pure():
    board = make_board(CHECKERBOARD)
    before = board.snapshot()
    is_game_over(board)
    assert board.snapshot() == before
