"""Invariant violations raised by board mutations.

These only surface when a plan is built or applied incorrectly, so callers are
expected to let them propagate.
"""


class BoardError(RuntimeError):
    """Base class for board invariant violations."""


class OutOfBoundsError(BoardError):
    def __init__(self, position, cols: int, rows: int):
        super().__init__(f"Position {position} is outside the {cols}x{rows} grid")
        self.position = position


class OccupiedCellError(BoardError):
    def __init__(self, position):
        super().__init__(f"Tile at position {position} already exists")
        self.position = position


class SourceEmptyError(BoardError):
    def __init__(self, position):
        super().__init__(f"No tile to move at position {position}")
        self.position = position


class DestinationOccupiedError(BoardError):
    def __init__(self, source, target):
        super().__init__(f"Cannot move tile from {source} onto occupied position {target}")
        self.source = source
        self.target = target


class InvalidTileValueError(BoardError, ValueError):
    def __init__(self, value):
        super().__init__(f"Tile value must be a power of two >= 2, got {value!r}")
        self.value = value
