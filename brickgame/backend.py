"""Game mechanics built on the field, the block and collision tests."""

from __future__ import annotations

import time

from brickgame.board import Board
from brickgame.collisions import collides_with_blocks, will_collide_with_down
from brickgame.game_status import GameStatus
from brickgame.player import Player

MAX_LEVEL_COUNT = 10
TIME_STEPS_MS = (1000, 875, 625, 550, 425, 350, 325, 300, 250, 200, 150)


def overlay_block(player: Player, board: Board) -> None:
    """Settle the block into the field, one row above its current position."""
    top = player.y - 1
    for row_index, row in enumerate(player.board.cells):
        y = top + row_index
        if not 0 <= y < len(board.cells):
            continue
        for column_index, cell in enumerate(row):
            x = player.x + column_index
            if cell.is_set and 0 <= x < len(board.cells[y]):
                board.cells[y][x].copy_from(cell)


def drop_to_bottom(player: Player, board: Board) -> None:
    """Move the block down as far as it can fall."""
    while not (
        will_collide_with_down(player, board) or collides_with_blocks(player, board)
    ):
        player.move_down()
    player.move_up()


def update_predict_player(dest: Player, source: Player, board: Board) -> None:
    """Make ``dest`` a preview of where ``source`` would land."""
    dest.copy_from(source)
    drop_to_bottom(dest, board)
    dest.paint_predict()


def time_step_ms(game_status: GameStatus) -> int:
    """Return the fall interval for the current level, capping the level."""
    if game_status.level < 0:
        raise ValueError(f"level must not be negative: {game_status.level}")
    if game_status.level > MAX_LEVEL_COUNT:
        game_status.level = MAX_LEVEL_COUNT
    return TIME_STEPS_MS[game_status.level]


def time_in_ms() -> int:
    """Return the wall-clock time in milliseconds."""
    return int(time.time() * 1000)