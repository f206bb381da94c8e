GRID_COLS = 4
GRID_ROWS = 4

# Starting tiles and spawned tiles share the same value set.
STARTING_TILE_COUNT = 2
STARTING_TILE_VALUES = (2, 4)

# Roughly one accepted move in five spawns two tiles instead of one.
DOUBLE_SPAWN_CHANCE = 0.2
# Upper bound on random draws per tile for the rejection spawn strategy.
SPAWN_RETRY_LIMIT = 100
SPAWN_STRATEGY_DIRECT = "direct"
SPAWN_STRATEGY_REJECTION = "rejection"

# Animation timings (seconds).
SLIDE_DURATION = 0.2
SPAWN_DURATION = 0.1

# Window / board geometry
GAME_SIZE = 720
TILE_MARGIN = 8
BOARD_MAX_PCT = 0.9

BACKGROUND_COLOR = (187, 173, 160)  # #bbada0
EMPTY_CELL_COLOR = (205, 193, 180)  # #cdc1b4
TILE_COLORS = {
    2: (238, 228, 218),     # #eee4da
    4: (237, 224, 200),     # #ede0c8
    8: (242, 177, 121),     # #f2b179
    16: (245, 149, 99),     # #f59563
    32: (246, 124, 95),     # #f67c5f
    64: (246, 94, 59),      # #f65e3b
    128: (237, 207, 114),   # #edcf72
    256: (237, 204, 97),    # #edcc61
    512: (237, 200, 80),    # #edc850
    1024: (237, 197, 63),   # #edc53f
    2048: (237, 194, 46),   # #edc22e
}
# Values beyond 2048 reuse a dark tile.
HIGH_TILE_COLOR = (60, 58, 50)
DARK_TEXT_COLOR = (119, 110, 101)   # #776e65
LIGHT_TEXT_COLOR = (249, 246, 242)  # #f9f6f2

# Key symbols as reported by arcade.key (pyglet codes).
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_A = 97
KEY_D = 100
KEY_N = 110
KEY_S = 115
KEY_W = 119
