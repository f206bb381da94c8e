from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from game2048.components.direction import Direction

if TYPE_CHECKING:
    from game2048.systems.move_resolver import MovePlan


@dataclass(slots=True)
class MoveState:
    """Tracks the move currently in flight and the optional queued command."""

    in_flight: bool = False
    move_id: int = 0
    pending_direction: Optional[Direction] = None
    moves_made: int = 0
    # Applied plan of the move in flight; kept until its animation completes.
    current_plan: Optional[MovePlan] = None
