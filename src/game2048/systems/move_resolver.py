from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple, Union

from game2048.components.board import Board
from game2048.components.direction import Direction
from game2048.components.tile import Coordinate


@dataclass(frozen=True, slots=True)
class Slide:
    source: Coordinate
    target: Coordinate
    value: int

    @property
    def merge(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Merge:
    """Mover lands on an equal tile; ``value`` is the doubled survivor."""
    source: Coordinate
    target: Coordinate
    value: int

    @property
    def merge(self) -> bool:
        return True


MoveAction = Union[Slide, Merge]


@dataclass(frozen=True, slots=True)
class MovePlan:
    """Resolved, not yet applied outcome of one directional command."""

    direction: Direction
    actions: Tuple[MoveAction, ...] = ()

    @property
    def any_tile_moved(self) -> bool:
        return any(action.source != action.target for action in self.actions)

    @property
    def merges(self) -> List[Merge]:
        return [action for action in self.actions if isinstance(action, Merge)]

    @property
    def slides(self) -> List[Slide]:
        return [action for action in self.actions if isinstance(action, Slide)]

    def as_items(self) -> List[dict]:
        """Animation payload: one dict per action."""
        return [
            {'from': action.source, 'to': action.target, 'value': action.value, 'merge': action.merge}
            for action in self.actions
        ]


def direction_vector(direction: Direction) -> Tuple[int, int]:
    return direction.vector


def scan_order(positions, direction: Direction) -> List[Coordinate]:
    """Sort positions so tiles nearest the target edge come first."""
    if direction is Direction.UP:
        key = lambda pos: (pos[1], pos[0])
    elif direction is Direction.DOWN:
        key = lambda pos: (-pos[1], pos[0])
    elif direction is Direction.LEFT:
        key = lambda pos: (pos[0], pos[1])
    else:
        key = lambda pos: (-pos[0], pos[1])
    return sorted(positions, key=key)


def resolve_move(board: Board, direction: Direction) -> MovePlan:
    """Compute where every tile lands for ``direction`` without touching the board.

    Tiles are walked one cell at a time on a private copy of the grid. A tile
    that was the target of a merge during this pass cannot absorb another one.
    """
    dx, dy = direction_vector(direction)
    cells: Dict[Coordinate, int] = board.snapshot()
    merged: Set[Coordinate] = set()
    actions: List[MoveAction] = []

    for start in scan_order(list(cells.keys()), direction):
        value = cells[start]
        current = start
        did_merge = False
        while True:
            nxt = (current[0] + dx, current[1] + dy)
            if not board.in_bounds(nxt):
                break
            occupant = cells.get(nxt)
            if occupant is None:
                current = nxt
                continue
            if occupant == value and nxt not in merged:
                current = nxt
                did_merge = True
                merged.add(nxt)
            break

        if current == start:
            continue
        del cells[start]
        if did_merge:
            cells[current] = value * 2
            actions.append(Merge(source=start, target=current, value=value * 2))
        else:
            cells[current] = value
            actions.append(Slide(source=start, target=current, value=value))

    return MovePlan(direction=direction, actions=tuple(actions))


def apply_plan(board: Board, plan: MovePlan) -> Board:
    """Replay plan actions on the board in resolution order."""
    for action in plan.actions:
        board.move_tile(action.source, action.target, merge=action.merge)
    return board


def legal_directions(board: Board) -> List[Direction]:
    return [direction for direction in Direction if resolve_move(board, direction).any_tile_moved]
