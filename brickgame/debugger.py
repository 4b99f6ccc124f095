"""An on-screen panel showing signals, states and actions as they happen."""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING, Any, Callable

from brickgame.blocks import BlockType
from brickgame.fsm import PlayerState, Signal
from brickgame.player import Player

if TYPE_CHECKING:
    from brickgame.fsm import Game

_X = 40
_LABEL_WIDTH = 20

_SIGNAL_Y = 2
_NONE_SIGNAL_EVERY = 30
_SIGNAL_LINES = {
    Signal.ENTER: (1, "[Enter button]\n"),
    Signal.ESCAPE: (2, "[Escape button]\n"),
    Signal.MOVE_UP: (3, "[Move up button]\n"),
    Signal.MOVE_DOWN: (4, "[Move down button]\n"),
    Signal.MOVE_LEFT: (5, "[Move left button]\n"),
    Signal.MOVE_RIGHT: (6, "[Move right button]\n"),
}

_STATE_Y = 5
_STATE_LABELS = (
    "Start state",
    "Spawn state",
    "Moving state",
    "Shifting state",
    "Reach state",
    "Collide state",
    "Game Over state",
    "Exit state",
)
_STATE_PAIRS = (10, 11, 12, 13, 14, 15, 16, 17)
_SHOWN_STATES = {
    PlayerState.START,
    PlayerState.SPAWN,
    PlayerState.MOVING,
    PlayerState.COLLIDE,
    PlayerState.GAME_OVER,
    PlayerState.EXIT,
}

_PLAYER_Y = 15
_PLAYER_WIDTH = 18

_ACTION_Y = 20
_ACTION_LABELS = (
    "Action Spawn",
    "Action Move Up",
    "Action Move Down",
    "Action Move Left",
    "Action Move Right",
    "Action Collide",
    "",
    "",
)
_ACTION_PAIRS = (20, 21, 22, 23, 24, 25, 26, 27)
_ACTION_INDEX = {
    "spawn": 0,
    "move_up": 1,
    "move_down": 2,
    "move_left": 3,
    "move_right": 4,
    "collide": 5,
}

_BLANK_PAIR = 3
_HIGHLIGHT = 3
_STATE_REFRESH_TICKS = 10


def block_type_string(block_type: int) -> str:
    """Return the letter of a block type, or "?" for an unknown one."""
    try:
        return BlockType(block_type).name
    except ValueError:
        return "?"


class DebugPanel:
    """Draws diagnostics to the right of the game."""

    def __init__(self, window: Any, curses_module: Any = curses) -> None:
        self._window = window
        self._curses = curses_module
        self._none_count = 1
        self._state_fade = [0] * len(_STATE_LABELS)
        self._state_ticks = [0] * (PlayerState.EXIT + 1)
        self._action_fade = [0] * len(_ACTION_LABELS)

    def _put(self, y: int, x: int, text: str, attr: int | None = None) -> None:
        try:
            if attr is None:
                self._window.addstr(y, x, text)
            else:
                self._window.addstr(y, x, text, attr)
        except self._curses.error:
            pass

    def _init_pair(self, pair: int, foreground: int, background: int) -> None:
        try:
            self._curses.init_pair(pair, foreground, background)
        except self._curses.error:
            pass

    def _labelled_line(self, y: int, text: str, attr: int) -> None:
        self._put(y, _X, "[")
        self._put(y, _X + 1, text, attr)
        self._put(y, _X + _LABEL_WIDTH + 1, "]")

    def signal_info(self, signal: Signal) -> None:
        """Show the signal just received; the idle signal only now and then."""
        signal = Signal(signal)
        if signal == Signal.NONE:
            if self._none_count < _NONE_SIGNAL_EVERY:
                self._none_count += 1
            else:
                self._put(_SIGNAL_Y, _X, "[None signal]\n")
                self._none_count = 1
        elif signal in _SIGNAL_LINES:
            offset, text = _SIGNAL_LINES[signal]
            self._put(_SIGNAL_Y + offset, _X, text)

    def params_info(self, game: Game) -> None:
        """Show the game state, letting earlier states fade out."""
        c = self._curses
        state = PlayerState(game.state)
        colors = (0, c.COLOR_BLACK, c.COLOR_RED, c.COLOR_BLUE)
        for index in range(PlayerState.EXIT + 1):
            fade = self._state_fade[index]
            self._init_pair(_STATE_PAIRS[fade], colors[fade], c.COLOR_BLACK)
            if self._state_ticks[index] <= _STATE_REFRESH_TICKS:
                self._state_ticks[index] += 1
                continue
            self._state_ticks[index] = 0
            y = _STATE_Y + index
            if fade >= 1:
                fade -= 1
                self._state_fade[index] = fade
                label = _STATE_LABELS[index]
                attr = c.color_pair(_STATE_PAIRS[fade])
            else:
                self._init_pair(_BLANK_PAIR, c.COLOR_WHITE, c.COLOR_BLACK)
                label = ""
                attr = c.color_pair(_BLANK_PAIR)
            self._labelled_line(y, f"{label:>{_LABEL_WIDTH}}\n", attr)

        if state in _SHOWN_STATES:
            self._put(
                _STATE_Y + state, _X, f"[{_STATE_LABELS[state]:>{_LABEL_WIDTH}}]\n"
            )
        self._state_fade[state] = _HIGHLIGHT

    def player_position_info(self, player: Player) -> None:
        """Show the block's position and type."""
        self._put(_PLAYER_Y, _X, "[Player info]\n")
        self._put(_PLAYER_Y, _X, f"[x: {chr(player.x + ord('0')):>{_PLAYER_WIDTH}}]\n")
        self._put(
            _PLAYER_Y + 1, _X, f"[y: {chr(player.y + ord('0')):>{_PLAYER_WIDTH}}]\n"
        )
        self._put(
            _PLAYER_Y + 2,
            _X,
            f"[kBlocksBitmask: {block_type_string(player.block_type):>{_PLAYER_WIDTH - 5}}]\n",
        )

    def action_info(self, action_name: str | Callable[..., Any]) -> None:
        """Highlight the action just run; earlier highlights fade out.

        ``action_name`` is an action's name or the action itself.
        """
        c = self._curses
        colors = (0, c.COLOR_BLACK, c.COLOR_YELLOW, c.COLOR_WHITE)
        for index, label in enumerate(_ACTION_LABELS):
            fade = self._action_fade[index]
            self._init_pair(_ACTION_PAIRS[fade], colors[fade], c.COLOR_BLACK)
            y = _ACTION_Y + index
            if fade >= 1:
                attr = c.color_pair(_ACTION_PAIRS[fade])
                self._labelled_line(y, f"{label:<{_LABEL_WIDTH}}", attr)
                self._action_fade[index] = fade - 1
            else:
                self._init_pair(_BLANK_PAIR, c.COLOR_WHITE, c.COLOR_BLACK)
                attr = c.color_pair(_BLANK_PAIR)
                self._labelled_line(y, " " * _LABEL_WIDTH, attr)
        name = getattr(action_name, "__name__", action_name)
        self._action_fade[_ACTION_INDEX.get(name, 0)] = _HIGHLIGHT