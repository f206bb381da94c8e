import random

import pytest

from game2048.components.board import Board
from game2048.components.direction import Direction
from game2048.systems.move_resolver import (
    Merge,
    MovePlan,
    Slide,
    apply_plan,
    legal_directions,
    resolve_move,
    scan_order,
)
from tests.helpers import make_board


def _resolved(values, direction, cols=4, rows=4):
    board = make_board(values, cols, rows)
    plan = resolve_move(board, direction)
    apply_plan(board, plan)
    return plan, board.snapshot()


def _random_board(rng: random.Random, cols=4, rows=4) -> Board:
    board = Board(cols=cols, rows=rows)
    for x in range(cols):
        for y in range(rows):
            if rng.random() < 0.6:
                board.place((x, y), rng.choice([2, 2, 4, 8]))
    return board


def test_direction_vectors():
    assert Direction.UP.vector == (0, -1)
    assert Direction.DOWN.vector == (0, 1)
    assert Direction.LEFT.vector == (-1, 0)
    assert Direction.RIGHT.vector == (1, 0)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, [(1, 0), (0, 2), (2, 3)]),
        (Direction.DOWN, [(2, 3), (0, 2), (1, 0)]),
        (Direction.LEFT, [(0, 2), (1, 0), (2, 3)]),
        (Direction.RIGHT, [(2, 3), (1, 0), (0, 2)]),
    ],
)
def test_scan_order_processes_leading_edge_first(direction, expected):
    assert scan_order([(0, 2), (1, 0), (2, 3)], direction) == expected


def test_merge_then_slide_does_not_chain():
    plan, result = _resolved({(0, 0): 2, (1, 0): 2, (3, 0): 2}, Direction.LEFT)
    assert result == {(0, 0): 4, (1, 0): 2}
    assert plan.actions == (
        Merge(source=(1, 0), target=(0, 0), value=4),
        Slide(source=(3, 0), target=(1, 0), value=2),
    )


def test_three_equal_tiles_merge_once():
    plan, result = _resolved({(0, 0): 2, (1, 0): 2, (2, 0): 2}, Direction.LEFT)
    assert result == {(0, 0): 4, (1, 0): 2}
    assert len(plan.merges) == 1
    assert len(plan.slides) == 1


def test_four_equal_tiles_make_two_pairs():
    _, result = _resolved({(0, 0): 2, (1, 0): 2, (2, 0): 2, (3, 0): 2}, Direction.RIGHT)
    assert result == {(3, 0): 4, (2, 0): 4}


def test_just_merged_tile_does_not_absorb_equal_follower():
    # 2+2 makes a 4 at the edge; the trailing 4 stops beside it.
    _, result = _resolved({(0, 0): 2, (1, 0): 2, (2, 0): 4}, Direction.LEFT)
    assert result == {(0, 0): 4, (1, 0): 4}


def test_slide_to_edge_past_gaps():
    plan, result = _resolved({(0, 3): 8}, Direction.UP)
    assert result == {(0, 0): 8}
    assert plan.actions == (Slide(source=(0, 3), target=(0, 0), value=8),)


def test_different_values_stop_adjacent():
    _, result = _resolved({(0, 0): 2, (0, 3): 4}, Direction.DOWN)
    assert result == {(0, 3): 4, (0, 2): 2}


def test_merge_across_gap():
    plan, result = _resolved({(0, 1): 16, (3, 1): 16}, Direction.RIGHT)
    assert result == {(3, 1): 32}
    assert plan.actions == (Merge(source=(0, 1), target=(3, 1), value=32),)


def test_tile_that_cannot_move_produces_no_action():
    plan = resolve_move(make_board({(0, 0): 2, (0, 1): 4}), Direction.UP)
    assert plan.actions == ()
    assert not plan.any_tile_moved


def test_empty_board_yields_noop_plan():
    plan = resolve_move(Board(cols=4, rows=4), Direction.LEFT)
    assert plan == MovePlan(direction=Direction.LEFT, actions=())
    assert not plan.any_tile_moved


def test_resolution_does_not_mutate_board():
    board = make_board({(0, 0): 2, (1, 0): 2, (3, 2): 4})
    before = board.snapshot()
    resolve_move(board, Direction.RIGHT)
    assert board.snapshot() == before


def test_non_square_board():
    _, result = _resolved({(0, 0): 2, (4, 0): 2, (2, 1): 8}, Direction.RIGHT, cols=5, rows=2)
    assert result == {(4, 0): 4, (4, 1): 8}


def test_as_items_payload():
    plan = resolve_move(make_board({(0, 0): 2, (1, 0): 2}), Direction.LEFT)
    assert plan.as_items() == [{'from': (1, 0), 'to': (0, 0), 'value': 4, 'merge': True}]


@pytest.mark.parametrize("seed", range(25))
def test_random_boards_hold_resolution_properties(seed):
    rng = random.Random(seed)
    board = _random_board(rng)
    for direction in Direction:
        first = resolve_move(board, direction)
        second = resolve_move(board, direction)
        assert first == second

        merge_targets = [action.target for action in first.merges]
        assert len(merge_targets) == len(set(merge_targets))
        for action in first.actions:
            assert board.in_bounds(action.target)
            assert action.source != action.target

        applied = Board(cols=board.cols, rows=board.rows)
        for position, value in board.snapshot().items():
            applied.place(position, value)
        apply_plan(applied, first)
        assert (applied.snapshot() != board.snapshot()) == first.any_tile_moved
        assert sum(applied.snapshot().values()) == sum(board.snapshot().values())
        for position, tile in ((t.position, t) for t in applied.tiles()):
            assert applied.get(position) is tile


def test_legal_directions():
    board = make_board({(0, 0): 2})
    assert set(legal_directions(board)) == {Direction.DOWN, Direction.RIGHT}
