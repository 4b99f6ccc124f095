"""The main playing field and line clearing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from brickgame.cell import Cell

BOARDS_BEGIN = 2
BOARD_HEIGHT = 20
BOARD_WIDTH = 10
HUD_WIDTH = 12

DELETE_KEY = 127
ESCAPE_KEY = 27
ENTER_KEY = 10
PAUSE_KEY = ord("p")


class BoardSide(IntEnum):
    """The four edges of the field."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def _empty_cells() -> list[list[Cell]]:
    return [[Cell() for _ in range(BOARD_WIDTH)] for _ in range(BOARD_HEIGHT)]


@dataclass
class Board:
    """A grid of settled cells, ``height`` rows by ``width`` columns."""

    height: int = BOARD_HEIGHT
    width: int = BOARD_WIDTH
    cells: list[list[Cell]] = field(default_factory=_empty_cells)

    def reset(self) -> None:
        """Restore the standard size and empty every cell."""
        self.width = BOARD_WIDTH
        self.height = BOARD_HEIGHT
        self.cells = _empty_cells()

    def handle_complete_lines(self) -> int:
        """Remove every complete line, let the rest fall, and return how many went."""
        removed = 0
        for row_index in range(self.height - 1, -1, -1):
            # A row may refill from above after a removal, so it is checked
            # a bounded number of times.
            for _ in range(self.height + 1):
                if self.is_line_complete(row_index):
                    removed += 1
                    self.remove_line(row_index)
                    self.apply_physics()
        return removed

    def remove_line(self, line_index: int) -> None:
        """Empty every cell of one row."""
        for cell in self.cells[line_index]:
            cell.clear()

    def is_line_complete(self, row_index: int) -> bool:
        """Tell whether every cell of the row is filled."""
        return all(cell.is_set for cell in self.cells[row_index])

    def apply_physics(self) -> None:
        """Close up empty rows by shifting the rows above them down."""
        for row_index in range(self.height - 1, -1, -1):
            if not any(cell.is_set for cell in self.cells[row_index]):
                self.shift_down(row_index)

    def shift_down(self, empty_row_index: int) -> None:
        """Move the rows above ``empty_row_index`` down by one, down to row 2."""
        for row_index in range(empty_row_index, 1, -1):
            self.copy_line(row_index, row_index - 1)

    def copy_line(self, dest_index: int, src_index: int) -> None:
        """Copy row ``src_index`` into row ``dest_index``."""
        for dest, src in zip(self.cells[dest_index], self.cells[src_index]):
            dest.copy_from(src)