from dataclasses import dataclass
from typing import Tuple

Coordinate = Tuple[int, int]


@dataclass(slots=True)
class Tile:
    """Occupant of one board cell.

    position mirrors the key the tile is stored under in its Board; value is a
    power of two >= 2.
    """
    position: Coordinate
    value: int


def is_valid_tile_value(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 2 and value & (value - 1) == 0
