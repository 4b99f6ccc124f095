"""The 4x4 grid that holds the shape of a falling block."""

from __future__ import annotations

from dataclasses import dataclass, field

from brickgame.blocks import BLOCK_BITMASKS, BlockRotation, BlockType, block_color
from brickgame.cell import Cell

PLAYER_BOARD_SIZE = 4


def _empty_grid() -> list[list[Cell]]:
    return [[Cell() for _ in range(PLAYER_BOARD_SIZE)] for _ in range(PLAYER_BOARD_SIZE)]


@dataclass
class PlayerBoard:
    """A small grid describing which cells a block occupies."""

    cells: list[list[Cell]] = field(default_factory=_empty_grid)

    def clear(self) -> None:
        """Empty every cell."""
        for row in self.cells:
            for cell in row:
                cell.clear()

    def copy_from(self, other: PlayerBoard) -> None:
        """Copy every cell of ``other`` into this grid."""
        for dest_row, src_row in zip(self.cells, other.cells):
            for dest, src in zip(dest_row, src_row):
                dest.copy_from(src)

    def set_block(self, block_type: BlockType, rotation: BlockRotation) -> None:
        """Fill the grid with the shape of ``block_type`` in ``rotation``."""
        color = block_color(block_type)
        mask = BLOCK_BITMASKS[BlockType(block_type)][BlockRotation(rotation)]
        bit = 1 << (PLAYER_BOARD_SIZE * PLAYER_BOARD_SIZE - 1)
        for row in self.cells:
            for cell in row:
                if mask & bit:
                    cell.color = color
                    cell.is_set = True
                else:
                    cell.clear()
                bit >>= 1