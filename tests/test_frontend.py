from types import SimpleNamespace

from brickgame.blocks import BlockColor, BlockType
from brickgame.board import Board
from brickgame.colors import INIT_COLOR_PAIR, RED_COLOR_PAIR_INDEX, block_color_pair
from brickgame.frontend import CursesView
from brickgame.fsm import Game
from brickgame.game_status import GameStatus
from brickgame.player import Player
from brickgame.records import Records


class FakeError(Exception):
    pass


def _fake_curses():
    return SimpleNamespace(
        error=FakeError,
        ERR=-1,
        KEY_BACKSPACE=263,
        ACS_ULCORNER="a",
        ACS_URCORNER="b",
        ACS_LLCORNER="c",
        ACS_LRCORNER="d",
        ACS_HLINE="-",
        ACS_VLINE="|",
        color_pair=lambda n: n * 256,
        flushinp=lambda: None,
    )


class FakeWindow:
    def __init__(self, keys=()):
        self.grid = {}
        self.attrs = {}
        self.keys = list(keys)

    def addstr(self, y, x, text, attr=0):
        for offset, ch in enumerate(text):
            self.grid[(y, x + offset)] = ch
            self.attrs[(y, x + offset)] = attr

    def addch(self, y, x, ch, attr=0):
        self.grid[(y, x)] = ch

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def refresh(self):
        pass

    def move(self, y, x):
        pass

    def text(self, y, x, length):
        return "".join(self.grid.get((y, x + i), "") for i in range(length))


def _view(keys=()):
    window = FakeWindow(keys)
    return CursesView(window, _fake_curses()), window


def test_print_rectangle_corners_and_edges():
    view, window = _view()
    view.print_rectangle(0, 3, 0, 4)
    assert window.grid[(2, 2)] == "a"
    assert window.grid[(2, 6)] == "b"
    assert window.grid[(5, 2)] == "c"
    assert window.grid[(5, 6)] == "d"
    assert window.text(2, 3, 3) == "---"
    assert window.grid[(3, 2)] == "|" and window.grid[(4, 6)] == "|"


def test_print_overlay_labels():
    view, window = _view()
    view.print_overlay()
    assert window.text(3, 17, 4) == "Next"
    assert window.text(9, 17, 5) == "Score"
    assert window.text(12, 17, 5) == "Level"


def test_print_game_status():
    view, window = _view()
    view.print_game_status(GameStatus(score=1500, level=2))
    assert window.text(10, 17, 7).strip() == "1500"
    assert window.text(13, 17, 7).strip() == "2"


def test_print_records():
    view, window = _view()
    records = Records()
    records.add("Arsenii8", 1200)
    view.print_records(records)
    assert window.text(15, 17, 7) == "Records"
    line = window.text(16, 16, 10)
    assert line.startswith("1.") and line.endswith("1200")
    assert window.text(17, 16, 10).endswith("0")


def test_print_board_draws_set_cells():
    view, window = _view()
    board = Board()
    board.cells[19][0].is_set = True
    board.cells[19][0].color = BlockColor.I
    view.print_board(board)
    assert window.grid[(22, 3)] == "S"
    assert window.attrs[(22, 3)] == RED_COLOR_PAIR_INDEX * 256
    assert window.grid[(22, 4)] == " "
    assert window.attrs[(22, 4)] == INIT_COLOR_PAIR * 256


def test_print_block_draws_shape():
    view, window = _view()
    player = Player()
    player.set_block_type(BlockType.O)
    player.place_at_spawn()
    view.print_block(player)
    drawn = {pos for pos, ch in window.grid.items() if ch == "F"}
    expected = {
        (player.y + 3 + r, player.x + 3 + c)
        for r, row in enumerate(player.board.cells)
        for c, cell in enumerate(row)
        if cell.is_set
    }
    assert drawn == expected
    assert len(drawn) == 4
    pos = next(iter(drawn))
    assert window.attrs[pos] == block_color_pair(BlockColor.O) * 256


def test_get_player_name_edits_and_finishes_on_enter():
    keys = [-1, ord("a"), ord("b"), 263, ord("c"), 10, -1]
    view, window = _view(keys)
    assert view.get_player_name() == "ac"
    assert window.keys == []


def test_get_player_name_delete_and_limit():
    keys = [ord("x")] * 12 + [127, 10, 0]
    view, _ = _view(keys)
    name = view.get_player_name()
    assert name == "x" * 8


def test_get_player_name_ignores_unprintable():
    view, _ = _view([1, 200, ord("z"), 10, 0])
    assert view.get_player_name() == "z"


def test_print_begin_and_pause():
    view, window = _view()
    view.print_begin()
    assert window.text(12, 8, 11) == "Press Enter"
    view.print_pause()
    assert window.text(12, 8, 14) == "Game is paused"


def test_print_game_draws_all_parts():
    view, window = _view()
    game = Game(view=view, records=Records())
    game.spawn()
    view.print_game(game)
    assert window.text(3, 17, 4) == "Next"
    assert window.text(15, 17, 7) == "Records"
    assert sum(1 for ch in window.grid.values() if ch == "F") >= 8