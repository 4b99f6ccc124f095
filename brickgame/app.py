"""The terminal game: set up the screen and run the main loop."""

from __future__ import annotations

import argparse
import curses
import locale
from typing import Any

from brickgame.colors import init_game_colors
from brickgame.frontend import CursesView
from brickgame.fsm import Game, PlayerState, get_signal

INPUT_TIMEOUT_MS = 50


def game_loop(stdscr: Any) -> Game:
    """Play until the player quits; return the finished game."""
    view = CursesView(stdscr, curses)
    game = Game(view=view)
    view.print_begin()
    game.records.load(game.records_path)
    init_game_colors(curses)

    user_input = 0
    while True:
        finished = game.state == PlayerState.EXIT
        game.signal_action(get_signal(user_input))
        user_input = stdscr.getch()
        if finished:
            return game


def _prepare(stdscr: Any) -> None:
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    stdscr.timeout(INPUT_TIMEOUT_MS)
    stdscr.nodelay(True)
    curses.start_color()


def _run(stdscr: Any) -> None:
    _prepare(stdscr)
    game_loop(stdscr)


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="brickgame", description="Play the falling-block puzzle in a terminal."
    )
    parser.parse_args(argv)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    curses.wrapper(_run)
    return 0