"""The falling block controlled by the player."""

from __future__ import annotations

from dataclasses import dataclass, field

from brickgame.blocks import (
    BlockColor,
    BlockRotation,
    BlockType,
    next_rotation,
    previous_rotation,
    random_block_type,
)
from brickgame.player_board import PlayerBoard

INIT_PLAYER_POS_X = 3
INIT_PLAYER_POS_Y = 0

INIT_NEXT_PLAYER_POS_X = 16
INIT_NEXT_PLAYER_POS_Y = 1


@dataclass
class Player:
    """A block with a position, a shape, a rotation and its 4x4 grid."""

    x: int = 0
    y: int = 0
    block_type: BlockType = BlockType.I
    rotation: BlockRotation = BlockRotation.FIRST
    board: PlayerBoard = field(default_factory=PlayerBoard)

    def reset(self) -> None:
        """Empty the grid and give the player a random block."""
        self.board.clear()
        self.set_block_type(random_block_type())

    def reset_as_next(self) -> None:
        """Reset and move to where the upcoming block is shown."""
        self.reset()
        self.x = INIT_NEXT_PLAYER_POS_X
        self.y = INIT_NEXT_PLAYER_POS_Y

    def place_at_spawn(self) -> None:
        """Move to the spawn position at the top of the field."""
        self.x = INIT_PLAYER_POS_X
        self.y = INIT_PLAYER_POS_Y

    def copy_from(self, other: Player) -> None:
        """Take position, shape, rotation and grid from ``other``."""
        self.x = other.x
        self.y = other.y
        self.block_type = other.block_type
        self.rotation = other.rotation
        self.board.copy_from(other.board)

    def set_block_type(self, block_type: BlockType) -> None:
        """Change the block shape and redraw the grid."""
        self.block_type = BlockType(block_type)
        self.update_board()

    def set_rotation(self, rotation: BlockRotation) -> None:
        """Record a rotation; the grid is redrawn in its first rotation."""
        self.rotation = BlockRotation(rotation)
        self.update_board()

    def rotate_next(self) -> None:
        """Turn to the following rotation and draw it."""
        self.set_rotation(next_rotation(self.rotation))
        self.board.set_block(self.block_type, self.rotation)

    def rotate_previous(self) -> None:
        """Turn back to the preceding rotation and draw it."""
        self.set_rotation(previous_rotation(self.rotation))
        self.board.set_block(self.block_type, self.rotation)

    def update_board(self) -> None:
        """Draw the block shape in its first rotation."""
        self.board.set_block(self.block_type, BlockRotation.FIRST)

    def paint_predict(self) -> None:
        """Colour every filled cell with the landing-preview colour."""
        for row in self.board.cells:
            for cell in row:
                if cell.is_set:
                    cell.color = BlockColor.PREDICT

    def move_by(self, dx: int, dy: int) -> None:
        """Shift the block by ``dx`` columns and ``dy`` rows."""
        self.x += dx
        self.y += dy

    def move_up(self) -> None:
        """Shift one row up."""
        self.move_by(0, -1)

    def move_down(self) -> None:
        """Shift one row down."""
        self.move_by(0, 1)

    def move_left(self) -> None:
        """Shift one column left."""
        self.move_by(-1, 0)

    def move_right(self) -> None:
        """Shift one column right."""
        self.move_by(1, 0)