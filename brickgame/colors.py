"""Colour numbers and colour pairs used to draw the game."""

from __future__ import annotations

from types import ModuleType
from typing import Any

from brickgame.blocks import BlockColor

BASE_COLOR_PAIR_INDEX = 100
RED_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 0
ORANGE_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 1
YELLOW_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 2
PINK_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 3
GREEN_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 4
BLUE_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 5
PURPLE_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 6

RECORD_1_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 7
RECORD_2_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 8
RECORD_3_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 9
RECORD_4_5_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 10

CUSTOM_COLOR_ORANGE = BASE_COLOR_PAIR_INDEX + 11
CUSTOM_COLOR_PINK = BASE_COLOR_PAIR_INDEX + 12
CUSTOM_COLOR_PURPLE = BASE_COLOR_PAIR_INDEX + 13
CUSTOM_COLOR_BROWN = BASE_COLOR_PAIR_INDEX + 14
CUSTOM_COLOR_SILVER = BASE_COLOR_PAIR_INDEX + 15
CUSTOM_COLOR_YELLOW = BASE_COLOR_PAIR_INDEX + 16
CUSTOM_COLOR_RED = BASE_COLOR_PAIR_INDEX + 17
CUSTOM_COLOR_GREEN = BASE_COLOR_PAIR_INDEX + 18
CUSTOM_COLOR_BLUE = BASE_COLOR_PAIR_INDEX + 19
CUSTOM_COLOR_PREDICT = BASE_COLOR_PAIR_INDEX + 20
CUSTOM_COLOR_GRAY = BASE_COLOR_PAIR_INDEX + 21

INIT_COLOR_PAIR = BASE_COLOR_PAIR_INDEX + 22
PREDICT_COLOR_PAIR_INDEX = BASE_COLOR_PAIR_INDEX + 23

BLOCK_COLOR_PAIRS: tuple[int, ...] = (
    RED_COLOR_PAIR_INDEX,
    ORANGE_COLOR_PAIR_INDEX,
    YELLOW_COLOR_PAIR_INDEX,
    PINK_COLOR_PAIR_INDEX,
    GREEN_COLOR_PAIR_INDEX,
    BLUE_COLOR_PAIR_INDEX,
    PURPLE_COLOR_PAIR_INDEX,
    PREDICT_COLOR_PAIR_INDEX,
)

# Colour number -> (red, green, blue) on the 0..1000 scale.
CUSTOM_COLORS: dict[int, tuple[int, int, int]] = {
    CUSTOM_COLOR_PINK: (980, 600, 790),
    CUSTOM_COLOR_ORANGE: (1000, 392, 0),
    CUSTOM_COLOR_BROWN: (592, 337, 290),
    CUSTOM_COLOR_SILVER: (752, 752, 752),
    CUSTOM_COLOR_YELLOW: (1000, 843, 0),
    CUSTOM_COLOR_PURPLE: (500, 0, 500),
    CUSTOM_COLOR_RED: (1000, 0, 0),
    CUSTOM_COLOR_GREEN: (0, 500, 0),
    CUSTOM_COLOR_BLUE: (25, 25, 830),
    CUSTOM_COLOR_PREDICT: (150, 150, 150),
    CUSTOM_COLOR_GRAY: (500, 500, 500),
}

# Pair number -> (foreground, background); None stands for black.
_SOLID_PAIRS: dict[int, int] = {
    RED_COLOR_PAIR_INDEX: CUSTOM_COLOR_RED,
    ORANGE_COLOR_PAIR_INDEX: CUSTOM_COLOR_ORANGE,
    YELLOW_COLOR_PAIR_INDEX: CUSTOM_COLOR_YELLOW,
    PINK_COLOR_PAIR_INDEX: CUSTOM_COLOR_PINK,
    GREEN_COLOR_PAIR_INDEX: CUSTOM_COLOR_GREEN,
    BLUE_COLOR_PAIR_INDEX: CUSTOM_COLOR_BLUE,
    PURPLE_COLOR_PAIR_INDEX: CUSTOM_COLOR_PURPLE,
    PREDICT_COLOR_PAIR_INDEX: CUSTOM_COLOR_PREDICT,
}

_TEXT_PAIRS: dict[int, int] = {
    RECORD_1_COLOR_PAIR_INDEX: CUSTOM_COLOR_YELLOW,
    RECORD_2_COLOR_PAIR_INDEX: CUSTOM_COLOR_SILVER,
    RECORD_3_COLOR_PAIR_INDEX: CUSTOM_COLOR_BROWN,
    RECORD_4_5_COLOR_PAIR_INDEX: CUSTOM_COLOR_GRAY,
}


def _call(curses_module: ModuleType | Any, name: str, *args: int) -> None:
    try:
        getattr(curses_module, name)(*args)
    except curses_module.error:
        pass


def init_game_colors(curses_module: ModuleType | Any) -> None:
    """Define the game's colours and colour pairs; failures are ignored."""
    black = curses_module.COLOR_BLACK
    for number, (red, green, blue) in CUSTOM_COLORS.items():
        _call(curses_module, "init_color", number, red, green, blue)
    for pair, color in _SOLID_PAIRS.items():
        _call(curses_module, "init_pair", pair, color, color)
    for pair, color in _TEXT_PAIRS.items():
        _call(curses_module, "init_pair", pair, color, black)
    _call(curses_module, "init_pair", INIT_COLOR_PAIR, black, black)


def block_color_pair(color: BlockColor) -> int:
    """Return the colour pair used to draw a cell of ``color``."""
    return BLOCK_COLOR_PAIRS[BlockColor(color)]