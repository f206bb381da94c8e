import arcade
from esper import World

from game2048.components.animation_slide import SlideAnimation
from game2048.components.animation_spawn import SpawnAnimation
from game2048.components.game_state import GameMode
from game2048.constants import (
    BACKGROUND_COLOR, DARK_TEXT_COLOR, EMPTY_CELL_COLOR, HIGH_TILE_COLOR,
    LIGHT_TEXT_COLOR, TILE_COLORS, TILE_MARGIN,
)
from game2048.events.bus import EventBus
from game2048.systems.state_utils import get_board
from game2048.ui.layout import cell_origin, compute_board_geometry
from game2048.utils.game_state import current_mode


def tile_color(value: int):
    return TILE_COLORS.get(value, HIGH_TILE_COLOR)


def text_color(value: int):
    return DARK_TEXT_COLOR if value < 8 else LIGHT_TEXT_COLOR


def _ease(p: float) -> float:
    if p < 0.5:
        return 2 * p * p
    return -2 * p * p + 4 * p - 1


class RenderSystem:
    """Draws the board from the Board component plus in-flight tweens."""
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.use_easing = True

    def process(self):
        board = get_board(self.world)
        geometry = compute_board_geometry(self.window.width, self.window.height, board.cols, board.rows)
        tile_size, start_x, start_y = geometry
        total_w = board.cols * tile_size + (board.cols - 1) * TILE_MARGIN
        total_h = board.rows * tile_size + (board.rows - 1) * TILE_MARGIN
        arcade.draw_lbwh_rectangle_filled(
            start_x - TILE_MARGIN, start_y - TILE_MARGIN,
            total_w + 2 * TILE_MARGIN, total_h + 2 * TILE_MARGIN, BACKGROUND_COLOR,
        )
        for x in range(board.cols):
            for y in range(board.rows):
                left, bottom = cell_origin((x, y), geometry, board.rows)
                arcade.draw_lbwh_rectangle_filled(left, bottom, tile_size, tile_size, EMPTY_CELL_COLOR)

        slides = [slide for _, slide in self.world.get_component(SlideAnimation)]
        spawns = {spawn.pos: spawn for _, spawn in self.world.get_component(SpawnAnimation)}
        # Cells whose final tile is still being tweened in are drawn from the animation.
        hidden = {slide.dst for slide in slides}
        for slide in slides:
            if slide.merge:
                # The consumed partner stays visible until the mover arrives.
                self._draw_tile(slide.dst, slide.value // 2, geometry, board.rows)
        for tile in board.tiles():
            if tile.position in hidden:
                continue
            spawn = spawns.get(tile.position)
            scale = spawn.linear if spawn is not None else 1.0
            self._draw_tile(tile.position, tile.value, geometry, board.rows, scale=scale)
        for slide in slides:
            p = _ease(slide.linear) if self.use_easing else slide.linear
            src_left, src_bottom = cell_origin(slide.src, geometry, board.rows)
            dst_left, dst_bottom = cell_origin(slide.dst, geometry, board.rows)
            left = src_left + (dst_left - src_left) * p
            bottom = src_bottom + (dst_bottom - src_bottom) * p
            shown = slide.value // 2 if slide.merge and slide.linear < 1.0 else slide.value
            self._draw_tile_at(left, bottom, shown, tile_size)

        if current_mode(self.world) == GameMode.GAME_OVER:
            arcade.draw_text(
                "Game over - press N",
                self.window.width / 2, self.window.height / 2,
                DARK_TEXT_COLOR, font_size=tile_size / 3,
                anchor_x="center", anchor_y="center", font_name="Arial",
            )

    def _draw_tile(self, position, value, geometry, rows, scale: float = 1.0):
        tile_size = geometry[0]
        left, bottom = cell_origin(position, geometry, rows)
        size = max(tile_size * scale, 1)
        offset = (tile_size - size) / 2
        self._draw_tile_at(left + offset, bottom + offset, value, size)

    def _draw_tile_at(self, left, bottom, value, size):
        arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, tile_color(value))
        arcade.draw_text(
            str(value),
            left + size / 2, bottom + size / 2,
            text_color(value), font_size=max(size / 4, 6),
            anchor_x="center", anchor_y="center", font_name="Arial",
        )
