from brickgame.cell import COLOR_BLACK, Cell


def test_default_cell_is_empty_black():
    cell = Cell()
    assert cell.is_set is False
    assert cell.color == COLOR_BLACK


def test_clear_resets_filled_cell():
    cell = Cell(color=5, is_set=True)
    cell.clear()
    assert cell.is_set is False
    assert cell.color == COLOR_BLACK


def test_copy_from_takes_color_and_state():
    source = Cell(color=3, is_set=True)
    dest = Cell()
    dest.copy_from(source)
    assert dest == source


def test_copy_from_is_independent():
    source = Cell(color=2, is_set=True)
    dest = Cell()
    dest.copy_from(source)
    source.clear()
    assert dest.color == 2
    assert dest.is_set is True
    assert source != dest