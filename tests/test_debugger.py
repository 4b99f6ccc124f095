from types import SimpleNamespace

from brickgame.blocks import BlockType
from brickgame.debugger import DebugPanel, block_type_string
from brickgame.fsm import Game, PlayerState, Signal
from brickgame.player import Player
from brickgame.records import Records


class FakeError(Exception):
    pass


class FakeWindow:
    def __init__(self):
        self.grid = {}

    def addstr(self, y, x, text, attr=0):
        for offset, ch in enumerate(text):
            self.grid[(y, x + offset)] = ch

    def text(self, y, x, length):
        return "".join(self.grid.get((y, x + i), "") for i in range(length))


def _panel():
    pairs = []
    module = SimpleNamespace(
        error=FakeError,
        COLOR_BLACK=0,
        COLOR_RED=1,
        COLOR_YELLOW=3,
        COLOR_BLUE=4,
        COLOR_WHITE=7,
        color_pair=lambda n: n * 256,
        init_pair=lambda *args: pairs.append(args),
    )
    window = FakeWindow()
    return DebugPanel(window, module), window, pairs


def test_block_type_string():
    assert block_type_string(BlockType.I) == "I"
    assert block_type_string(BlockType.T) == "T"
    assert block_type_string(BlockType.Z) == "Z"
    assert block_type_string(99) == "?"


def test_signal_info_buttons():
    panel, window, _ = _panel()
    panel.signal_info(Signal.ENTER)
    panel.signal_info(Signal.MOVE_LEFT)
    assert window.text(3, 40, 14) == "[Enter button]"
    assert window.text(7, 40, 18) == "[Move left button]"


def test_signal_info_none_is_shown_rarely():
    panel, window, _ = _panel()
    for _ in range(29):
        panel.signal_info(Signal.NONE)
    assert window.text(2, 40, 13) == ""
    panel.signal_info(Signal.NONE)
    assert window.text(2, 40, 13) == "[None signal]"


def test_signal_info_pause_draws_nothing():
    panel, window, _ = _panel()
    panel.signal_info(Signal.PAUSE)
    assert window.grid == {}


def test_params_info_shows_current_state():
    panel, window, pairs = _panel()
    game = Game(records=Records())
    panel.params_info(game)
    line = window.text(5, 40, 22)
    assert "Start state" in line
    assert line.startswith("[") and line.endswith("]")
    assert len(pairs) == PlayerState.EXIT + 1


def test_params_info_pause_not_printed():
    panel, window, _ = _panel()
    game = Game(records=Records())
    game.state = PlayerState.PAUSE
    panel.params_info(game)
    assert window.grid == {}


def test_player_position_info():
    panel, window, _ = _panel()
    player = Player()
    player.set_block_type(BlockType.L)
    player.place_at_spawn()
    panel.player_position_info(player)
    x_line = window.text(15, 40, 23)
    assert x_line.startswith("[x:") and x_line.endswith("3]")
    y_line = window.text(16, 40, 23)
    assert y_line.endswith("0]")
    assert window.text(17, 40, 31).endswith("L]")


def test_action_info_highlights_then_fades():
    panel, window, _ = _panel()
    panel.action_info(Game.move_left)
    assert "Action Move Left" not in window.text(23, 40, 22)
    panel.action_info("spawn")
    assert "Action Move Left" in window.text(23, 40, 22)
    assert "Action Spawn" not in window.text(20, 40, 22)
    for _ in range(3):
        panel.action_info("spawn")
    assert "Action Move Left" not in window.text(23, 40, 22)
    assert "Action Spawn" in window.text(20, 40, 22)