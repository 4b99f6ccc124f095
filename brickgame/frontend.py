"""Drawing the game in a terminal window."""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING, Any

from brickgame.board import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    BOARDS_BEGIN,
    DELETE_KEY,
    ENTER_KEY,
    HUD_WIDTH,
    Board,
)
from brickgame.colors import (
    INIT_COLOR_PAIR,
    RECORD_1_COLOR_PAIR_INDEX,
    RECORD_2_COLOR_PAIR_INDEX,
    RECORD_3_COLOR_PAIR_INDEX,
    RECORD_4_5_COLOR_PAIR_INDEX,
    block_color_pair,
)
from brickgame.game_status import GameStatus
from brickgame.player import Player
from brickgame.records import Records

if TYPE_CHECKING:
    from brickgame.fsm import Game

MAX_LENGTH_NAME = 10

_RECORD_PAIRS = (
    RECORD_1_COLOR_PAIR_INDEX,
    RECORD_2_COLOR_PAIR_INDEX,
    RECORD_3_COLOR_PAIR_INDEX,
    RECORD_4_5_COLOR_PAIR_INDEX,
    RECORD_4_5_COLOR_PAIR_INDEX,
)


class CursesView:
    """Draws the field, the side panel and prompts into a curses window."""

    def __init__(self, window: Any, curses_module: Any = curses) -> None:
        self._window = window
        self._curses = curses_module

    def _put(self, y: int, x: int, text: str, attr: int | None = None) -> None:
        try:
            if attr is None:
                self._window.addstr(y, x, text)
            else:
                self._window.addstr(y, x, text, attr)
        except self._curses.error:
            pass

    def _hud(self, y: int, x: int, text: str) -> None:
        self._put(BOARDS_BEGIN + y, BOARDS_BEGIN + x, text)

    def _hud_char(self, y: int, x: int, ch: Any) -> None:
        try:
            self._window.addch(BOARDS_BEGIN + y, BOARDS_BEGIN + x, ch)
        except self._curses.error:
            pass

    def _pair(self, number: int) -> int:
        return self._curses.color_pair(number)

    def print_overlay(self) -> None:
        """Draw the frames of the field and of the side panel."""
        self.print_rectangle(0, BOARD_HEIGHT + 1, 0, BOARD_WIDTH + 1)
        self.print_rectangle(
            0, BOARD_HEIGHT + 1, BOARD_WIDTH + 2, BOARD_WIDTH + HUD_WIDTH + 3
        )
        self.print_rectangle(1, 6, BOARD_WIDTH + 3, BOARD_WIDTH + HUD_WIDTH + 2)
        self.print_rectangle(7, 9, BOARD_WIDTH + 3, BOARD_WIDTH + HUD_WIDTH + 2)
        self.print_rectangle(10, 12, BOARD_WIDTH + 3, BOARD_WIDTH + HUD_WIDTH + 2)
        self._hud(1, BOARD_WIDTH + 5, "Next")
        self._hud(7, BOARD_WIDTH + 5, "Score")
        self._hud(10, BOARD_WIDTH + 5, "Level")

    def print_name_prompt(self) -> None:
        """Draw an empty box asking for the player's name."""
        top = BOARD_HEIGHT // 2 - 5
        self.print_rectangle(
            top, BOARD_HEIGHT // 2 + 5, BOARDS_BEGIN, BOARDS_BEGIN + BOARD_WIDTH * 2
        )
        for y in range(top + 1, top + 10):
            for x in range(BOARDS_BEGIN + 1, BOARDS_BEGIN + 20):
                self._hud(y, x, " ")
        self._hud(7, 5, "Enter your name:")

    def print_rectangle(self, top_y: int, bottom_y: int, left_x: int, right_x: int) -> None:
        """Draw a line frame with the given corners."""
        c = self._curses
        self._hud_char(top_y, left_x, c.ACS_ULCORNER)
        for x in range(left_x + 1, right_x):
            self._hud_char(top_y, x, c.ACS_HLINE)
        self._hud_char(top_y, max(right_x, left_x + 1), c.ACS_URCORNER)
        for y in range(top_y + 1, bottom_y):
            self._hud_char(y, left_x, c.ACS_VLINE)
            self._hud_char(y, right_x, c.ACS_VLINE)
        self._hud_char(bottom_y, left_x, c.ACS_LLCORNER)
        for x in range(left_x + 1, right_x):
            self._hud_char(bottom_y, x, c.ACS_HLINE)
        self._hud_char(bottom_y, max(right_x, left_x + 1), c.ACS_LRCORNER)

    def print_game_status(self, game_status: GameStatus) -> None:
        """Show the score and the level."""
        self._hud(8, BOARD_WIDTH + 5, f"{game_status.score:7d}")
        self._hud(11, BOARD_WIDTH + 5, f"{game_status.level:7d}")

    def clear_game(self) -> None:
        """Blank the whole play area."""
        attr = self._pair(INIT_COLOR_PAIR)
        for row in range(24):
            for column in range(28):
                self._put(row + BOARDS_BEGIN + 1, column + BOARDS_BEGIN + 1, " ", attr)

    def print_game(self, game: Game) -> None:
        """Redraw everything: field, panel, records and the three blocks."""
        self.clear_game()
        self.print_overlay()
        self.print_board(game.board)
        self.print_game_status(game.game_status)
        self.print_records(game.records)
        self.print_block(game.predict_player)
        self.print_block(game.player)
        self.print_block(game.next_player)

    def print_board(self, board: Board) -> None:
        """Draw the settled cells of the field."""
        empty = self._pair(INIT_COLOR_PAIR)
        for row_index, row in enumerate(board.cells[:BOARD_HEIGHT]):
            for column_index, cell in enumerate(row[:BOARD_WIDTH]):
                y = row_index + BOARDS_BEGIN + 1
                x = column_index + BOARDS_BEGIN + 1
                if cell.is_set:
                    self._put(y, x, "S", self._pair(block_color_pair(cell.color)))
                else:
                    self._put(y, x, " ", empty)

    def print_block(self, player: Player) -> None:
        """Draw the filled cells of a block at its position."""
        for row_index, row in enumerate(player.board.cells):
            for column_index, cell in enumerate(row):
                if cell.is_set:
                    self._put(
                        player.y + BOARDS_BEGIN + 1 + row_index,
                        player.x + BOARDS_BEGIN + 1 + column_index,
                        "F",
                        self._pair(block_color_pair(cell.color)),
                    )

    def get_player_name(self) -> str:
        """Ask for a name, echoing it as typed, until Enter is pressed."""
        self.print_name_prompt()
        name = ""
        try:
            self._curses.flushinp()
        except self._curses.error:
            pass
        self._window.refresh()
        while (ch := self._window.getch()) != ENTER_KEY:
            if ch == self._curses.ERR:
                continue
            if ch in (self._curses.KEY_BACKSPACE, DELETE_KEY):
                if name:
                    name = name[:-1]
                    self._put(12, 6, " " * (MAX_LENGTH_NAME + 8))
                    self._put(12, 6, name)
                    try:
                        self._window.move(MAX_LENGTH_NAME, 6 + len(name))
                    except self._curses.error:
                        pass
                    self._window.refresh()
            elif len(name) < MAX_LENGTH_NAME - 1 and 32 <= ch < 127:
                name += chr(ch)
                self._put(12, 6, name)
                self._window.refresh()
        self._window.getch()
        return name

    def print_begin(self) -> None:
        """Show the start screen."""
        self.clear_game()
        self.print_rectangle(
            0,
            BOARDS_BEGIN + BOARD_HEIGHT - 1,
            0,
            BOARDS_BEGIN + BOARD_WIDTH + HUD_WIDTH + 1,
        )
        self._put(12, 8, "Press Enter")

    def print_pause(self) -> None:
        """Show the pause box over the game."""
        self.print_rectangle(
            8,
            BOARDS_BEGIN + BOARD_HEIGHT - 1 - 8,
            4,
            BOARDS_BEGIN + BOARD_WIDTH + HUD_WIDTH + 1 - 4,
        )
        for y in range(11, 15):
            for x in range(7, 23):
                self._put(y, x, " ")
        self._put(12, 8, "Game is paused")

    def print_records(self, records: Records) -> None:
        """Show the five best scores."""
        self.print_rectangle(13, 20, 13, 24)
        self._put(15, 17, "Records")
        for place, (record, pair) in enumerate(zip(records, _RECORD_PAIRS), start=1):
            self._put(15 + place, 16, f"{place}. {record.score:7d}", self._pair(pair))