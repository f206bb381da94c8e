from __future__ import annotations

import random
from typing import Dict, Iterable, Tuple

from game2048.components.board import Board
from game2048.config import EngineConfig
from game2048.events.bus import EventBus
from game2048.systems.board import BoardSystem
from game2048.systems.move import MoveSystem
from game2048.systems.move_resolution import MoveResolutionSystem
from game2048.world import create_world

Layout = Dict[Tuple[int, int], int]


class FixedRandom(random.Random):
    """Seeded Random whose ``random()`` replays scripted floats.

    Once the script is exhausted the last value repeats; integer draws
    (choice, sample, randrange) stay seeded.
    """

    def __init__(self, floats: Iterable[float] = (0.5,), seed: int = 0):
        super().__init__(seed)
        self._floats = list(floats)
        self._last = self._floats[-1] if self._floats else 0.5

    def random(self) -> float:
        if self._floats:
            self._last = self._floats.pop(0)
        return self._last

    def getrandbits(self, k: int) -> int:
        # Keeps Random on the getrandbits path for integer draws.
        return super().getrandbits(k)


def make_board(values: Layout, cols: int = 4, rows: int = 4) -> Board:
    board = Board(cols=cols, rows=rows)
    for position, value in values.items():
        board.place(position, value)
    return board


def build_engine(
    layout: Layout | None = None,
    *,
    rng: random.Random | None = None,
    animate: bool = False,
    config: EngineConfig | None = None,
):
    """Wire bus, world and the move systems; optionally load an explicit layout."""
    bus = EventBus()
    world = create_world(bus, config=config, rng=rng or random.Random(0))
    MoveResolutionSystem(world, bus)
    moves = MoveSystem(world, bus, animate=animate)
    board_system = BoardSystem(world, bus, start=layout is None)
    if layout is not None:
        board_system.load(layout)
    return bus, world, board_system, moves
