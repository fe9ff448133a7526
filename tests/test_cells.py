import pytest

from kakuro.cells import (
    BlackCell,
    Cell,
    ClueCell,
    EmptyCell,
    FixedCell,
    combinations_for,
)


def test_black_cell():
    cell = BlackCell()
    assert cell.render() == "#"
    assert cell.editable() is False


def test_empty_cell_blank_and_filled():
    cell = EmptyCell()
    assert cell.value == 0
    assert cell.render() == "_"
    assert cell.editable() is True
    cell.value = 7
    assert cell.render() == "7"


def test_fixed_cell():
    cell = FixedCell(4)
    assert cell.value == 4
    assert cell.render() == "4"
    assert cell.editable() is False


@pytest.mark.parametrize(
    "right, down, expected",
    [
        (12, 7, "12/7"),
        (12, 0, "12/"),
        (0, 7, "/7"),
        (0, 0, "#"),
    ],
)
def test_clue_render(right, down, expected):
    cell = ClueCell(right, down)
    assert cell.render() == expected
    assert cell.editable() is False


def test_cell_is_abstract():
    with pytest.raises(TypeError):
        Cell()


@pytest.mark.parametrize("target, count", [(3, 2), (10, 3), (24, 3), (45, 9), (15, 4)])
def test_combinations_invariants(target, count):
    combos = combinations_for(target, count)
    assert combos
    for combo in combos:
        assert len(combo) == count
        assert sum(combo) == target
        assert all(1 <= d <= 9 for d in combo)
    assert len(set(combos)) == len(combos)
    keys = [sorted(c) for c in combos]
    assert keys == sorted(keys)


def test_combinations_unique_cases():
    assert combinations_for(3, 2) == [frozenset({1, 2})]
    assert combinations_for(45, 9) == [frozenset(range(1, 10))]


def test_combinations_impossible():
    assert combinations_for(2, 2) == []
    assert combinations_for(50, 9) == []


def test_generate_horizontal_only():
    clue = ClueCell(3, 0)
    clue.add_horizontal(EmptyCell())
    clue.add_horizontal(EmptyCell())
    clue.generate_combinations()
    assert clue.combinations == combinations_for(3, 2)


def test_generate_both_directions_concatenates():
    clue = ClueCell(3, 24)
    clue.add_horizontal(EmptyCell())
    clue.add_horizontal(EmptyCell())
    for _ in range(3):
        clue.add_vertical(EmptyCell())
    clue.generate_combinations()
    assert clue.combinations == combinations_for(3, 2) + combinations_for(24, 3)


def test_generate_without_runs_leaves_nothing():
    clue = ClueCell(10, 10)
    clue.generate_combinations()
    assert clue.combinations == []


def test_add_cells_keeps_order():
    clue = ClueCell(5, 5)
    a, b = EmptyCell(), FixedCell(2)
    clue.add_horizontal(a)
    clue.add_horizontal(b)
    clue.add_vertical(b)
    assert clue.horizontal == [a, b]
    assert clue.vertical[0] is b