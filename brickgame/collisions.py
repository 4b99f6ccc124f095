"""Collision tests between a falling block and the field."""

from __future__ import annotations

from collections.abc import Iterator

from brickgame.board import BOARD_WIDTH, Board, BoardSide
from brickgame.player import Player


def _player_cells(player: Player) -> Iterator[tuple[int, int]]:
    """Yield the field coordinates (x, y) of every filled cell of the block."""
    for row_index, row in enumerate(player.board.cells):
        for column_index, cell in enumerate(row):
            if cell.is_set:
                yield player.x + column_index, player.y + row_index


def _occupied(board: Board, x: int, y: int) -> bool:
    """Tell whether a field cell is filled; cells off the field count as empty."""
    if not 0 <= y < len(board.cells):
        return False
    row = board.cells[y]
    return 0 <= x < len(row) and row[x].is_set


def hits_side(board: Board, side: BoardSide, x: int, y: int) -> bool:
    """Tell whether the point lies beyond the given edge of the field."""
    if side == BoardSide.UP:
        return y < 0
    if side == BoardSide.DOWN:
        return y > board.height
    if side == BoardSide.LEFT:
        return x <= -1
    if side == BoardSide.RIGHT:
        return x >= board.width
    return False


def will_hit_side(board: Board, side: BoardSide, x: int, y: int) -> bool:
    """Tell whether one step towards the given edge takes the point past it."""
    if side == BoardSide.UP:
        return y - 1 < 0
    if side == BoardSide.DOWN:
        return y + 1 > board.height
    if side == BoardSide.LEFT:
        return x - 1 < 0
    if side == BoardSide.RIGHT:
        return x + 1 >= board.width
    return False


def collides_with_side(player: Player, board: Board, side: BoardSide) -> bool:
    """Tell whether any cell of the block lies beyond the given edge."""
    return any(hits_side(board, side, x, y) for x, y in _player_cells(player))


def will_collide_with_side(player: Player, board: Board, side: BoardSide) -> bool:
    """Tell whether moving towards the given edge takes any cell past it."""
    return any(will_hit_side(board, side, x, y) for x, y in _player_cells(player))


def collides_with_up(player: Player, board: Board) -> bool:
    return collides_with_side(player, board, BoardSide.UP)


def collides_with_down(player: Player, board: Board) -> bool:
    return collides_with_side(player, board, BoardSide.DOWN)


def collides_with_left(player: Player, board: Board) -> bool:
    return collides_with_side(player, board, BoardSide.LEFT)


def collides_with_right(player: Player, board: Board) -> bool:
    return collides_with_side(player, board, BoardSide.RIGHT)


def will_collide_with_up(player: Player, board: Board) -> bool:
    return will_collide_with_side(player, board, BoardSide.UP)


def will_collide_with_down(player: Player, board: Board) -> bool:
    return will_collide_with_side(player, board, BoardSide.DOWN)


def will_collide_with_left(player: Player, board: Board) -> bool:
    return will_collide_with_side(player, board, BoardSide.LEFT)


def will_collide_with_right(player: Player, board: Board) -> bool:
    return will_collide_with_side(player, board, BoardSide.RIGHT)


def collides(player: Player, board: Board) -> bool:
    """Tell whether the block is past any edge or overlaps settled cells."""
    return (
        collides_with_up(player, board)
        or collides_with_down(player, board)
        or collides_with_left(player, board)
        or collides_with_right(player, board)
        or collides_with_blocks(player, board)
    )


def collides_with_blocks(player: Player, board: Board) -> bool:
    """Tell whether the block overlaps any settled cell."""
    return any(_occupied(board, x, y) for x, y in _player_cells(player))


def will_collide_with_blocks_left(player: Player, board: Board) -> bool:
    """Tell whether moving left would overlap a settled cell or leave the field."""
    for x, y in _player_cells(player):
        target_x = x - 1
        if target_x < -1 or target_x > BOARD_WIDTH - 2:
            return True
        if _occupied(board, target_x, y):
            return True
    return False


def will_collide_with_blocks_right(player: Player, board: Board) -> bool:
    """Tell whether moving right would overlap a settled cell."""
    return any(_occupied(board, x + 1, y) for x, y in _player_cells(player))