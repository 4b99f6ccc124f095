import pytest

from brickgame.blocks import (
    BlockColor,
    BlockRotation,
    BlockType,
    block_color,
    next_rotation,
    previous_rotation,
    random_block_type,
)


def test_random_block_type_is_valid():
    for _ in range(50):
        block_type = random_block_type()
        assert block_type >= 0
        assert block_type in set(BlockType)


def test_next_rotation_sequence():
    rotation = BlockRotation.FIRST
    rotation = next_rotation(rotation)
    assert rotation == BlockRotation.SECOND
    rotation = next_rotation(rotation)
    assert rotation == BlockRotation.THIRD
    rotation = next_rotation(rotation)
    assert rotation == BlockRotation.FORTH
    rotation = next_rotation(rotation)
    assert rotation == BlockRotation.FIRST


def test_previous_rotation_sequence():
    rotation = BlockRotation.FIRST
    rotation = previous_rotation(rotation)
    assert rotation == BlockRotation.FORTH
    rotation = previous_rotation(rotation)
    assert rotation == BlockRotation.THIRD
    rotation = previous_rotation(rotation)
    assert rotation == BlockRotation.SECOND
    rotation = previous_rotation(rotation)
    assert rotation == BlockRotation.FIRST


@pytest.mark.parametrize("rotation", list(BlockRotation))
def test_next_and_previous_are_inverse(rotation):
    assert previous_rotation(next_rotation(rotation)) == rotation
    assert next_rotation(previous_rotation(rotation)) == rotation


@pytest.mark.parametrize("block_type", list(BlockType))
def test_block_color_matches_type(block_type):
    color = block_color(block_type)
    assert color.name == block_type.name
    assert color != BlockColor.PREDICT