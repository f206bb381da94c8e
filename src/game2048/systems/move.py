from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from esper import World

from game2048.components.direction import Direction
from game2048.components.game_state import GameMode
from game2048.config import get_engine_config
from game2048.events.bus import (
    EventBus,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_MOVE_QUEUED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_MOVE_RESOLVED,
)
from game2048.systems.move_resolver import MovePlan, apply_plan, resolve_move
from game2048.systems.state_utils import get_board, get_or_create_move_state
from game2048.utils.game_state import current_mode, set_game_mode

logger = logging.getLogger(__name__)

REASON_IN_PROGRESS = "in_progress"
REASON_GAME_OVER = "game_over"
REASON_QUEUED = "queued"


@dataclass(frozen=True, slots=True)
class MoveRejected:
    """Returned instead of a plan when a command is not executed right away."""
    direction: Direction
    reason: str

    @property
    def queued(self) -> bool:
        return self.reason == REASON_QUEUED


class MoveSystem:
    """Accepts directional commands and turns them into applied move plans.

    Only one plan may be in flight: commands arriving before the previous
    plan's animation completed are dropped, or kept in a single pending slot
    when ``queue_moves`` is enabled. With ``animate=False`` the completion is
    signalled immediately so spawn and the terminal check run synchronously.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        animate: bool = True,
        queue_moves: bool | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.animate = animate
        if queue_moves is None:
            queue_moves = get_engine_config(world).queue_moves
        self.queue_moves = queue_moves
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction is None:
            return
        self.submit_move(Direction(direction))

    def submit_move(self, direction: Direction) -> Union[MovePlan, MoveRejected]:
        state = get_or_create_move_state(self.world)
        if current_mode(self.world) == GameMode.GAME_OVER:
            return self._reject(direction, REASON_GAME_OVER)
        if state.in_flight:
            if self.queue_moves:
                state.pending_direction = direction
                logger.debug("Queued move %s behind move %d", direction.value, state.move_id)
                self.event_bus.emit(EVENT_MOVE_QUEUED, direction=direction)
                return MoveRejected(direction=direction, reason=REASON_QUEUED)
            return self._reject(direction, REASON_IN_PROGRESS)

        board = get_board(self.world)
        plan = resolve_move(board, direction)
        if not plan.any_tile_moved:
            logger.debug("Move %s changes nothing", direction.value)
            return plan

        apply_plan(board, plan)
        state.in_flight = True
        state.move_id += 1
        state.moves_made += 1
        state.current_plan = plan
        move_id = state.move_id
        logger.debug(
            "Move %d %s: %d slides, %d merges",
            move_id, direction.value, len(plan.slides), len(plan.merges),
        )
        set_game_mode(self.world, self.event_bus, GameMode.MOVING)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='move')
        self.event_bus.emit(EVENT_MOVE_RESOLVED, move_id=move_id, plan=plan)
        items = plan.as_items()
        if self.animate:
            self.event_bus.emit(EVENT_ANIMATION_START, kind='slide', items=items, move_id=move_id)
        else:
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='slide', items=items, move_id=move_id)
        return plan

    def _reject(self, direction: Direction, reason: str) -> MoveRejected:
        logger.debug("Rejected move %s: %s", direction.value, reason)
        self.event_bus.emit(EVENT_MOVE_REJECTED, direction=direction, reason=reason)
        return MoveRejected(direction=direction, reason=reason)
