from typing import Tuple

from game2048.constants import BOARD_MAX_PCT, GRID_COLS, GRID_ROWS, TILE_MARGIN


def compute_board_geometry(
    window_width: int,
    window_height: int,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
    margin: int = TILE_MARGIN,
):
    """Return (tile_size, start_x, start_y) for a board centred in the window.

    start_x/start_y is the bottom-left corner of the board in window
    coordinates; tiles are separated by ``margin`` pixels.
    """
    max_board_w = window_width * BOARD_MAX_PCT
    max_board_h = window_height * BOARD_MAX_PCT
    tile_by_w = (max_board_w - margin * (cols - 1)) / cols
    tile_by_h = (max_board_h - margin * (rows - 1)) / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < 20:
        tile_size = 20
    total_width = cols * tile_size + (cols - 1) * margin
    total_height = rows * tile_size + (rows - 1) * margin
    start_x = (window_width - total_width) / 2
    start_y = (window_height - total_height) / 2
    return tile_size, start_x, start_y


def cell_origin(
    position: Tuple[int, int],
    geometry: Tuple[int, float, float],
    rows: int = GRID_ROWS,
    margin: int = TILE_MARGIN,
) -> Tuple[float, float]:
    """Bottom-left pixel of a board cell; board row 0 is drawn at the top."""
    tile_size, start_x, start_y = geometry
    x, y = position
    left = start_x + x * (tile_size + margin)
    bottom = start_y + (rows - 1 - y) * (tile_size + margin)
    return left, bottom
