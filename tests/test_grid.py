import pytest

from kakuro.cells import BlackCell, ClueCell, EmptyCell, FixedCell, combinations_for
from kakuro.grid import Grid


def _small_grid():
    # #    3/   #
    # /3   _    _
    # #    _    #
    grid = Grid(3, 3)
    grid[0, 0] = BlackCell()
    grid[0, 1] = ClueCell(0, 3)
    grid[0, 2] = BlackCell()
    grid[1, 0] = ClueCell(3, 0)
    grid[1, 1] = EmptyCell()
    grid[1, 2] = EmptyCell()
    grid[2, 0] = BlackCell()
    grid[2, 1] = EmptyCell()
    grid[2, 2] = BlackCell()
    return grid


def test_new_grid_is_unset():
    grid = Grid(2, 3)
    assert grid.rows == 2
    assert grid.columns == 3
    assert all(grid[p] is None for p in grid.positions())


def test_positions_row_major():
    grid = Grid(2, 2)
    assert list(grid.positions()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_set_and_get():
    grid = Grid(2, 2)
    cell = FixedCell(5)
    grid[1, 0] = cell
    assert grid[1, 0] is cell
    replacement = BlackCell()
    grid[1, 0] = replacement
    assert grid[1, 0] is replacement


@pytest.mark.parametrize("position", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range(position):
    grid = Grid(2, 2)
    with pytest.raises(IndexError):
        grid[position]
    with pytest.raises(IndexError):
        grid[position] = BlackCell()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_render_format():
    grid = Grid(1, 3)
    grid[0, 0] = ClueCell(4, 0)
    grid[0, 1] = EmptyCell()
    assert grid.render() == "1 3\n4/ _   \n"


def test_render_line_count():
    grid = _small_grid()
    lines = grid.render().splitlines()
    assert lines[0] == "3 3"
    assert len(lines) == 4
    assert lines[1].split() == ["#", "/3", "#"]


def test_link_blocks():
    grid = _small_grid()
    grid.link_blocks()
    across = grid[1, 0]
    down = grid[0, 1]
    assert across.horizontal == [grid[1, 1], grid[1, 2]]
    assert across.vertical == []
    assert down.vertical == [grid[1, 1], grid[2, 1]]
    assert down.horizontal == []


def test_link_stops_at_clue_and_black():
    grid = Grid(1, 5)
    grid[0, 0] = ClueCell(3, 0)
    grid[0, 1] = EmptyCell()
    grid[0, 2] = ClueCell(5, 0)
    grid[0, 3] = FixedCell(2)
    grid[0, 4] = BlackCell()
    grid.link_blocks()
    assert grid[0, 0].horizontal == [grid[0, 1]]
    assert grid[0, 2].horizontal == [grid[0, 3]]


def test_link_stops_at_unset_square():
    grid = Grid(3, 1)
    grid[0, 0] = ClueCell(0, 4)
    grid[1, 0] = EmptyCell()
    grid.link_blocks()
    assert grid[0, 0].vertical == [grid[1, 0]]


def test_generate_all_combinations():
    grid = _small_grid()
    grid.link_blocks()
    grid.generate_all_combinations()
    assert grid[1, 0].combinations == combinations_for(3, 2)
    assert grid[0, 1].combinations == combinations_for(3, 2)