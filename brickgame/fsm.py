"""The state machine that drives a game from player signals."""

from __future__ import annotations

import os
from collections.abc import Callable
from enum import IntEnum
from typing import Any, Optional

from brickgame.backend import (
    overlay_block,
    time_in_ms,
    time_step_ms,
    update_predict_player,
)
from brickgame.blocks import random_block_type
from brickgame.board import ENTER_KEY, ESCAPE_KEY, PAUSE_KEY, Board
from brickgame.collisions import (
    collides,
    collides_with_blocks,
    will_collide_with_blocks_left,
    will_collide_with_blocks_right,
    will_collide_with_down,
    will_collide_with_left,
    will_collide_with_right,
)
from brickgame.game_status import GameStatus
from brickgame.player import Player
from brickgame.records import RECORDS_FILE_NAME, Records

# Terminal key codes for the arrow keys.
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261

UNNAMED = "Unnamed"


class PlayerState(IntEnum):
    """The states of a game."""

    START = 0
    SPAWN = 1
    MOVING = 2
    COLLIDE = 3
    GAME_OVER = 4
    EXIT = 5
    PAUSE = 6


class Signal(IntEnum):
    """The inputs that drive the game."""

    NONE = 0
    MOVE_UP = 1
    MOVE_DOWN = 2
    MOVE_LEFT = 3
    MOVE_RIGHT = 4
    ESCAPE = 5
    ENTER = 6
    PAUSE = 7


_KEY_SIGNALS = {
    KEY_UP: Signal.MOVE_UP,
    KEY_DOWN: Signal.MOVE_DOWN,
    KEY_LEFT: Signal.MOVE_LEFT,
    KEY_RIGHT: Signal.MOVE_RIGHT,
    ESCAPE_KEY: Signal.ESCAPE,
    ENTER_KEY: Signal.ENTER,
    PAUSE_KEY: Signal.PAUSE,
}


def get_signal(user_input: int, hold: bool = False) -> Signal:
    """Translate a key code into a signal; a held key gives no signal."""
    if hold:
        return Signal.NONE
    return _KEY_SIGNALS.get(user_input, Signal.NONE)


class Game:
    """Everything one game needs, and the actions that change it.

    ``view`` is optional; without one the game runs headless and a finished
    game is recorded under an empty name, which the records ignore.
    """

    def __init__(
        self,
        view: Any | None = None,
        records: Records | None = None,
        clock: Callable[[], int] | None = None,
        records_path: str | os.PathLike[str] = RECORDS_FILE_NAME,
    ) -> None:
        self.view = view
        self.records_path = records_path
        self.records = records if records is not None else Records(path=records_path)
        self.clock = clock if clock is not None else time_in_ms
        self.board = Board()
        self.game_status = GameStatus()
        self.player = Player()
        self.player.reset()
        self.next_player = Player()
        self.next_player.reset_as_next()
        self.predict_player = Player()
        self.state = PlayerState.START
        self.last_moved_time = self.clock()

    def signal_action(self, signal: Signal) -> None:
        """Run the action for ``signal`` in the current state, then let gravity act."""
        action = _ACTIONS[self.state][Signal(signal)]
        if action is not None:
            action(self)
        if self.view is not None and self.state not in (
            PlayerState.START,
            PlayerState.PAUSE,
        ):
            self.view.print_game(self)

        now = self.clock()
        if self.state == PlayerState.MOVING:
            step = time_step_ms(self.game_status)
            if now - self.last_moved_time > step:
                self.last_moved_time = now
                self.move_down()

    def check_collisions(self) -> bool:
        """Switch to the collide state if the block has landed or overlaps."""
        if will_collide_with_down(self.player, self.board) or collides_with_blocks(
            self.player, self.board
        ):
            self.state = PlayerState.COLLIDE
            return True
        return False

    def spawn(self) -> None:
        """Bring the next block into play, or end the game if there is no room."""
        self.player.reset()
        self.player.place_at_spawn()
        self.player.set_block_type(self.next_player.block_type)
        if self.check_collisions():
            self.state = PlayerState.GAME_OVER
        else:
            update_predict_player(self.predict_player, self.player, self.board)
            self.next_player.set_block_type(random_block_type())
            self.state = PlayerState.MOVING

    def move_up(self) -> None:
        """Rotate the block, undoing the turn if it would not fit."""
        self.player.rotate_next()
        if collides(self.player, self.board):
            self.player.rotate_previous()
        update_predict_player(self.predict_player, self.player, self.board)
        self.check_collisions()

    def move_down(self) -> None:
        """Drop the block by one row."""
        self.player.move_down()
        self.check_collisions()

    def move_left(self) -> None:
        """Shift the block left if there is room."""
        if not will_collide_with_left(
            self.player, self.board
        ) and not will_collide_with_blocks_left(self.player, self.board):
            self.player.move_left()
        update_predict_player(self.predict_player, self.player, self.board)
        self.check_collisions()

    def move_right(self) -> None:
        """Shift the block right if there is room."""
        if not will_collide_with_right(
            self.player, self.board
        ) and not will_collide_with_blocks_right(self.player, self.board):
            self.player.move_right()
        update_predict_player(self.predict_player, self.player, self.board)
        self.check_collisions()

    def collide(self) -> None:
        """Settle the block, clear lines and score them."""
        overlay_block(self.player, self.board)
        self.state = PlayerState.SPAWN
        lines = self.board.handle_complete_lines()
        if lines > 0:
            self.game_status.add_score(lines)
            self.game_status.update_level()
            self.records.add(UNNAMED, self.game_status.score)

    def game_over(self) -> None:
        """Record the score under the player's name and start afresh."""
        name = self.view.get_player_name() if self.view is not None else ""
        self.records.remove(UNNAMED)
        self.records.add(name, self.game_status.score)
        self.board.reset()
        self.game_status.reset()
        self.state = PlayerState.START
        if self.view is not None:
            self.view.print_begin()

    def exit(self) -> None:
        """Save the records and stop."""
        self.records.save(self.records_path)
        self.state = PlayerState.EXIT

    def pause(self) -> None:
        """Toggle between paused and moving."""
        if self.state != PlayerState.PAUSE:
            self.state = PlayerState.PAUSE
            if self.view is not None:
                self.view.print_pause()
        else:
            self.state = PlayerState.MOVING


_Action = Optional[Callable[[Game], None]]

# Rows are states, columns are signals in their numeric order.
_ACTIONS: dict[PlayerState, tuple[_Action, ...]] = {
    PlayerState.START: (None, None, None, None, None, Game.exit, Game.spawn, None),
    PlayerState.SPAWN: (Game.spawn,) * 7 + (None,),
    PlayerState.MOVING: (
        None,
        Game.move_up,
        Game.move_down,
        Game.move_left,
        Game.move_right,
        Game.exit,
        None,
        Game.pause,
    ),
    PlayerState.COLLIDE: (Game.collide,) * 8,
    PlayerState.GAME_OVER: (Game.game_over,) * 6 + (Game.spawn, Game.collide),
    PlayerState.EXIT: (Game.exit,) * 8,
    PlayerState.PAUSE: (None,) * 7 + (Game.pause,),
}