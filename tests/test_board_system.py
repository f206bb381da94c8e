import random

import pytest

from game2048.components.animation_slide import SlideAnimation
from game2048.components.board import Board
from game2048.components.direction import Direction
from game2048.components.game_state import GameMode
from game2048.config import EngineConfig
from game2048.errors import BoardError, InvalidTileValueError, OutOfBoundsError
from game2048.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_BOARD_CHANGED,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_TICK,
    EVENT_TILES_SPAWNED,
    EventBus,
)
from game2048.systems.animation import AnimationSystem
from game2048.systems.board import BoardSystem
from game2048.systems.state_utils import get_board, get_or_create_move_state
from game2048.utils.game_state import current_mode
from game2048.world import create_world
from tests.helpers import build_engine


def test_new_game_places_two_starting_tiles():
    bus = EventBus(); world = create_world(bus, rng=random.Random(4))
    started, spawned = [], []
    bus.subscribe(EVENT_GAME_STARTED, lambda sender, **k: started.append(k))
    bus.subscribe(EVENT_TILES_SPAWNED, lambda sender, **k: spawned.append(k))

    system = BoardSystem(world, bus)

    board = get_board(world)
    assert board is system.board
    assert (board.cols, board.rows) == (4, 4)
    assert len(board) == 2
    assert all(tile.value in (2, 4) for tile in board.tiles())
    assert len(started) == 1
    assert spawned[0]['reason'] == 'start'
    assert sorted(spawned[0]['tiles']) == sorted(board.snapshot().items())
    assert current_mode(world) == GameMode.READY


def test_board_size_follows_config():
    bus = EventBus(); world = create_world(bus, config=EngineConfig(cols=6, rows=3))
    BoardSystem(world, bus)
    board = get_board(world)
    assert (board.cols, board.rows) == (6, 3)


def test_explicit_dimensions_override_config():
    bus = EventBus(); world = create_world(bus)
    system = BoardSystem(world, bus, 5, 2, start=False)
    assert (system.board.cols, system.board.rows) == (5, 2)
    assert len(system.board) == 0


def test_new_game_replaces_previous_board():
    bus = EventBus(); world = create_world(bus, rng=random.Random(1))
    system = BoardSystem(world, bus)
    old = system.board
    state = get_or_create_move_state(world)
    state.moves_made = 12
    system.new_game()
    assert system.board is not old
    assert len(system.board) == 2
    assert state.moves_made == 0
    assert len(world.get_component(Board)) == 1


def test_load_places_layout_and_reports_change():
    bus = EventBus(); world = create_world(bus)
    changes = []
    bus.subscribe(EVENT_BOARD_CHANGED, lambda sender, **k: changes.append(k))
    system = BoardSystem(world, bus, start=False)
    board = system.load({(0, 0): 2, (3, 3): 1024})
    assert board.snapshot() == {(0, 0): 2, (3, 3): 1024}
    assert changes == [{'reason': 'load'}]


def test_load_rejects_bad_layouts():
    bus = EventBus(); world = create_world(bus)
    system = BoardSystem(world, bus, start=False)
    with pytest.raises(OutOfBoundsError):
        system.load({(4, 0): 2})
    with pytest.raises(InvalidTileValueError):
        system.load({(0, 0): 3})


def test_loading_terminal_layout_ends_game():
    bus = EventBus(); world = create_world(bus, config=EngineConfig(cols=2, rows=2))
    over = []
    bus.subscribe(EVENT_GAME_OVER, lambda sender, **k: over.append(k))
    system = BoardSystem(world, bus, start=False)
    system.load({(0, 0): 2, (1, 0): 4, (0, 1): 4, (1, 1): 2})
    assert current_mode(world) == GameMode.GAME_OVER
    assert over == [{'moves_made': 0, 'max_tile': 4}]


def test_rejected_layout_keeps_running_game():
    bus, world, system, moves = build_engine({(0, 0): 2, (1, 0): 4})
    moves.submit_move(Direction.RIGHT)
    before = get_board(world).snapshot()
    state = get_or_create_move_state(world)
    started = []
    bus.subscribe(EVENT_GAME_STARTED, lambda sender, **k: started.append(k))

    with pytest.raises(BoardError):
        system.load({(0, 0): 8, (3, 3): 3})

    assert get_board(world).snapshot() == before
    assert state.moves_made == 1
    assert started == []


def test_load_drops_tweens_of_interrupted_move():
    bus, world, system, moves = build_engine({(0, 0): 2, (1, 0): 2, (3, 0): 2}, animate=True)
    anim = AnimationSystem(world, bus)
    completions = []
    bus.subscribe(EVENT_ANIMATION_COMPLETE, lambda sender, **k: completions.append(k))
    moves.submit_move(Direction.LEFT)
    assert anim.is_animating()

    system.load({(2, 2): 8})

    assert world.get_component(SlideAnimation) == []
    assert not anim.is_animating()
    assert not get_or_create_move_state(world).in_flight
    for _ in range(20):
        bus.emit(EVENT_TICK, dt=0.05)
    assert [c for c in completions if c['kind'] == 'slide'] == []
    assert get_board(world).snapshot() == {(2, 2): 8}
