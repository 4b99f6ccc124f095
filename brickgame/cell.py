"""A single square of a playing field."""

from __future__ import annotations

from dataclasses import dataclass

COLOR_BLACK = 0


@dataclass
class Cell:
    """A square that is either empty or filled with a colour."""

    color: int = COLOR_BLACK
    is_set: bool = False

    def clear(self) -> None:
        """Make the cell empty and black."""
        self.is_set = False
        self.color = COLOR_BLACK

    def copy_from(self, other: Cell) -> None:
        """Take colour and state from ``other``."""
        self.color = other.color
        self.is_set = other.is_set