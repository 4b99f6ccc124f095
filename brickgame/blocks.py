"""Tetromino shapes, rotations and colours."""

from __future__ import annotations

import random
from enum import IntEnum


class BlockType(IntEnum):
    """The seven tetromino shapes."""

    I = 0  # noqa: E741
    J = 1
    L = 2
    O = 3  # noqa: E741
    S = 4
    T = 5
    Z = 6


class BlockRotation(IntEnum):
    """The four rotation states of a block."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FORTH = 3


class BlockColor(IntEnum):
    """Colour index of each block type, plus the landing-preview colour."""

    I = 0  # noqa: E741
    J = 1
    L = 2
    O = 3  # noqa: E741
    S = 4
    T = 5
    Z = 6
    PREDICT = 7


# Each shape is a 4x4 grid packed into 16 bits, row-major, most significant
# bit first.
BLOCK_BITMASKS: dict[BlockType, tuple[int, int, int, int]] = {
    BlockType.I: (0b0100010001000100, 0b0000000011110000,
                  0b0100010001000100, 0b0000000011110000),
    BlockType.J: (0b0000001000100110, 0b0000010001110000,
                  0b0000001100100010, 0b0000000001110001),
    BlockType.L: (0b0000001000100011, 0b0000000001110100,
                  0b0000011000100010, 0b0000000101110000),
    BlockType.O: (0b0000011001100000, 0b0000011001100000,
                  0b0000011001100000, 0b0000011001100000),
    BlockType.S: (0b0000000000110110, 0b0000010001100010,
                  0b0000000000110110, 0b0000010001100010),
    BlockType.T: (0b0000001001110000, 0b0000001000110010,
                  0b0000000001110010, 0b0000001001100010),
    BlockType.Z: (0b0000000001100011, 0b0000001001100100,
                  0b0000000001100011, 0b0000001001100100),
}

_BLOCK_COLORS: dict[BlockType, BlockColor] = {
    block_type: BlockColor(block_type.value) for block_type in BlockType
}


def random_block_type() -> BlockType:
    """Return a uniformly chosen block type."""
    return random.choice(list(BlockType))


def next_rotation(rotation: BlockRotation) -> BlockRotation:
    """Return the rotation that follows ``rotation`` clockwise."""
    return BlockRotation((BlockRotation(rotation) + 1) % len(BlockRotation))


def previous_rotation(rotation: BlockRotation) -> BlockRotation:
    """Return the rotation that precedes ``rotation``."""
    return BlockRotation((BlockRotation(rotation) - 1) % len(BlockRotation))


def block_color(block_type: BlockType) -> BlockColor:
    """Return the colour used to draw ``block_type``."""
    return _BLOCK_COLORS[BlockType(block_type)]