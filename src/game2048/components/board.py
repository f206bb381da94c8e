from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set

from game2048.components.tile import Coordinate, Tile, is_valid_tile_value
from game2048.errors import (
    DestinationOccupiedError,
    InvalidTileValueError,
    OccupiedCellError,
    OutOfBoundsError,
    SourceEmptyError,
)


@dataclass(slots=True)
class Board:
    """Fixed-size grid holding at most one tile per (x, y) cell.

    Tiles are indexed by coordinate; the board is the only owner of its Tile
    records, so a tile's ``position`` always equals its key.
    """

    cols: int
    rows: int
    _tiles: Dict[Coordinate, Tile] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.cols}x{self.rows}")

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, position) -> bool:
        return position in self._tiles

    def __iter__(self) -> Iterator[Tile]:
        return iter(list(self._tiles.values()))

    @property
    def capacity(self) -> int:
        return self.cols * self.rows

    def in_bounds(self, position: Coordinate) -> bool:
        x, y = position
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get(self, position: Coordinate) -> Optional[Tile]:
        return self._tiles.get(position)

    def place(self, position: Coordinate, value: int) -> Tile:
        self._require_in_bounds(position)
        if not is_valid_tile_value(value):
            raise InvalidTileValueError(value)
        if position in self._tiles:
            raise OccupiedCellError(position)
        tile = Tile(position=position, value=value)
        self._tiles[position] = tile
        return tile

    def remove(self, position: Coordinate) -> None:
        self._tiles.pop(position, None)

    def move_tile(self, source: Coordinate, target: Coordinate, *, merge: bool = False) -> Tile:
        """Relocate the tile at source to target.

        With ``merge`` the tile currently at target must carry the same value;
        it is consumed and the mover doubles.
        """
        self._require_in_bounds(target)
        tile = self._tiles.get(source)
        if tile is None:
            raise SourceEmptyError(source)
        if source == target:
            return tile
        occupant = self._tiles.get(target)
        if merge:
            if occupant is None or occupant.value != tile.value:
                raise DestinationOccupiedError(source, target)
        elif occupant is not None:
            raise DestinationOccupiedError(source, target)
        del self._tiles[source]
        tile.position = target
        if merge:
            tile.value *= 2
        self._tiles[target] = tile
        return tile

    def is_full(self) -> bool:
        return len(self._tiles) == self.capacity

    def empty_cells(self) -> Set[Coordinate]:
        return {
            (x, y)
            for x in range(self.cols)
            for y in range(self.rows)
            if (x, y) not in self._tiles
        }

    def tiles(self) -> List[Tile]:
        return list(self._tiles.values())

    def snapshot(self) -> Dict[Coordinate, int]:
        """Return a detached coordinate -> value mapping."""
        return {position: tile.value for position, tile in self._tiles.items()}

    def clear(self) -> None:
        self._tiles.clear()

    def max_value(self) -> int:
        return max((tile.value for tile in self._tiles.values()), default=0)

    def _require_in_bounds(self, position: Coordinate) -> None:
        if not self.in_bounds(position):
            raise OutOfBoundsError(position, self.cols, self.rows)
