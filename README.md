# brickgame

A falling-block puzzle game that runs in a terminal. Pieces drop onto a
10 × 20 board; fill a row to clear it and earn points. A shadow piece shows
where the current piece will land, a side panel shows the next piece, your
score and level, and a table keeps the five best scores between sessions.

## Installing

```
pip install .
```

The game draws with the standard library's `curses` module, so it needs a
terminal that supports curses and colours. It has no other dependencies.

## Playing

```
brickgame
```

| Key   | Action                                   |
|-------|------------------------------------------|
| Enter | start a game                             |
| ← / → | move the piece sideways                  |
| ↓     | move the piece down one row              |
| ↑     | rotate the piece (undone if it won't fit)|
| p     | pause or resume                          |
| Esc   | save the records and quit                |

Pieces also fall on their own; the interval starts at 1000 ms and shortens
with each level, down to 150 ms at level 10.

Clearing 1, 2, 3 or 4 rows at once earns 100, 300, 700 or 1500 points.
Every 600 points raises the level by one, up to level 10.

When a new piece can no longer enter the board the game is over and you are
asked for your name (up to 9 printable characters, Backspace to correct,
Enter to finish). Your score then goes into the records table. While a game
is running its score is kept in the table under `Unnamed`; that entry is
replaced by your name at game over. A name already in the table only keeps
its best score.

The table is stored in `records.records` in the current directory, in a
fixed-size binary layout of five entries, and is rewritten on every change.

## Using the pieces in code

The game logic does not depend on the screen and can be driven directly:

```python
from brickgame.fsm import Game, PlayerState, Signal
from brickgame.records import Records

game = Game(records=Records())   # no view: runs headless, no records file
game.signal_action(Signal.ENTER)  # spawn the first piece
assert game.state == PlayerState.MOVING

game.signal_action(Signal.MOVE_LEFT)
print(game.player.x, game.player.y, game.game_status.score)
```

The modules:

- `brickgame.blocks` – `BlockType`, `BlockRotation`, `BlockColor`, the shape
  bitmasks and `random_block_type`, `next_rotation`, `previous_rotation`,
  `block_color`.
- `brickgame.cell`, `brickgame.player_board`, `brickgame.board` – `Cell`,
  the 4×4 `PlayerBoard` and the 10×20 `Board` with
  `handle_complete_lines`.
- `brickgame.player` – `Player`, a piece with position and rotation.
- `brickgame.collisions` – edge and block collision tests.
- `brickgame.backend` – `overlay_block`, `drop_to_bottom`,
  `update_predict_player`, `time_step_ms`, `time_in_ms`.
- `brickgame.game_status` – `GameStatus` (score and level).
- `brickgame.records` – `Record` and `Records` (`add`, `remove`, `sort`,
  `save`, `load`).
- `brickgame.fsm` – `Game`, `PlayerState`, `Signal` and `get_signal`, which
  maps curses key codes to signals. `Game` accepts an optional view, records
  table, clock function and records path.
- `brickgame.colors`, `brickgame.frontend` – the colour pairs and the
  `CursesView` that draws the game.
- `brickgame.debugger` – `DebugPanel`, which draws signals, states and
  actions beside the game; the `brickgame` command does not show it.
- `brickgame.app` – `game_loop` and `main`, behind the `brickgame` command.

## Limits

The command takes no options: there is no way to choose the records file,
the board size or the starting level from the command line. Holding a key
down does not repeat moves beyond what the terminal sends.

## Running the tests

```
pip install ".[test]"
pytest
```