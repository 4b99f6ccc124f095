import time

import pytest

from brickgame.backend import (
    drop_to_bottom,
    overlay_block,
    time_in_ms,
    time_step_ms,
    update_predict_player,
)
from brickgame.blocks import BlockColor, BlockType
from brickgame.board import Board
from brickgame.game_status import GameStatus
from brickgame.player import Player


def _o_player():
    player = Player()
    player.set_block_type(BlockType.O)
    player.place_at_spawn()
    return player


def _set_board_cells(board):
    return {
        (y, x)
        for y, row in enumerate(board.cells)
        for x, cell in enumerate(row)
        if cell.is_set
    }


def test_overlay_block_after_drop():
    board = Board()
    player = _o_player()
    drop_to_bottom(player, board)
    assert player.y == 17
    overlay_block(player, board)
    assert _set_board_cells(board) == {(17, 4), (17, 5), (18, 4), (18, 5)}
    assert board.cells[17][4].color == BlockColor.O


def test_overlay_block_on_another_block():
    board = Board()
    player = _o_player()
    drop_to_bottom(player, board)
    overlay_block(player, board)

    player.set_block_type(BlockType.O)
    player.place_at_spawn()
    drop_to_bottom(player, board)
    assert player.y == 14
    overlay_block(player, board)
    assert _set_board_cells(board) == {
        (14, 4), (14, 5), (15, 4), (15, 5),
        (17, 4), (17, 5), (18, 4), (18, 5),
    }


def test_update_predict_player():
    board = Board()
    player = Player()
    player.place_at_spawn()
    player.set_block_type(BlockType.J)
    predict = Player()
    update_predict_player(predict, player, board)
    assert predict.x == player.x
    assert predict.y == 16
    assert player.y == 0
    assert predict.block_type == BlockType.J
    set_colors = {
        cell.color for row in predict.board.cells for cell in row if cell.is_set
    }
    assert set_colors == {BlockColor.PREDICT}
    player_colors = {
        cell.color for row in player.board.cells for cell in row if cell.is_set
    }
    assert player_colors == {BlockColor.J}


def test_time_step_ms_values():
    status = GameStatus()
    status.level = 0
    assert time_step_ms(status) == 1000
    status.level = 1
    assert time_step_ms(status) == 875
    status.level = 2
    assert time_step_ms(status) == 625
    status.level = 10
    assert time_step_ms(status) == 150


def test_time_step_ms_caps_level():
    status = GameStatus(level=15)
    assert time_step_ms(status) == 150
    assert status.level == 10


def test_time_step_ms_negative_level():
    with pytest.raises(ValueError):
        time_step_ms(GameStatus(level=-1))


def test_time_in_ms_matches_wall_clock():
    now = time.time() * 1000
    assert abs(time_in_ms() - now) < 1000