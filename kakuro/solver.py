"""Backtracking solver for Kakuro grids."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .cells import BlackCell, Cell, ClueCell, EmptyCell, FixedCell
from .grid import Grid


@dataclass(frozen=True)
class Coord:
    """A (row, column) position in a grid."""

    i: int
    j: int


def find_empty_cells(grid: Grid) -> list[Coord]:
    """Return the positions of all editable cells in row-major order."""
    return [
        Coord(i, j)
        for i, j in grid.positions()
        if (cell := grid[i, j]) is not None and cell.editable()
    ]


def _digit(cell: Cell) -> int:
    if isinstance(cell, (EmptyCell, FixedCell)):
        return cell.value
    return 0


def check_block_sum(block: Sequence[Cell], target: int, value: int) -> bool:
    """Check a run with ``value`` placed in its first cell.

    The run passes when its non-zero digits are distinct and their sum does
    not exceed ``target``.
    """
    first = block[0] if block else None
    seen: set[int] = set()
    total = 0
    for cell in block:
        digit = value if cell is first else _digit(cell)
        if digit:
            if digit in seen:
                return False
            seen.add(digit)
            total += digit
    return total <= target


def _fits_combinations(
    block: Sequence[Cell],
    combinations: Sequence[frozenset[int]],
    target: Cell,
    value: int,
) -> bool:
    values: list[int | None] = []
    for cell in block:
        if cell is target:
            values.append(value)
        elif isinstance(cell, EmptyCell):
            values.append(cell.value or None)
        elif isinstance(cell, FixedCell):
            values.append(cell.value)
    placed = [v for v in values if v is not None]
    distinct = len(set(placed)) == len(placed)
    return any(
        len(combination) == len(values)
        and distinct
        and all(v in combination for v in placed)
        for combination in combinations
    )


def _governing_clue(grid: Grid, i: int, j: int, di: int, dj: int) -> ClueCell | None:
    i, j = i + di, j + dj
    while i >= 0 and j >= 0:
        cell = grid[i, j]
        if isinstance(cell, ClueCell):
            return cell
        if cell is None or isinstance(cell, BlackCell):
            return None
        i, j = i + di, j + dj
    return None


def is_valid_placement(grid: Grid, i: int, j: int, value: int) -> bool:
    """Return whether ``value`` at (i, j) fits the runs crossing that cell.

    Each run must still match one of its clue's digit combinations; the grid's
    blocks and combinations must have been prepared beforehand.
    """
    cell = grid[i, j]
    if cell is None or not cell.editable():
        return False
    horizontal = _governing_clue(grid, i, j, 0, -1)
    if horizontal is not None and horizontal.right_sum > 0:
        if not _fits_combinations(horizontal.horizontal, horizontal.combinations, cell, value):
            return False
    vertical = _governing_clue(grid, i, j, -1, 0)
    if vertical is not None and vertical.down_sum > 0:
        if not _fits_combinations(vertical.vertical, vertical.combinations, cell, value):
            return False
    return True


def _is_complete(grid: Grid) -> bool:
    for i, j in grid.positions():
        cell = grid[i, j]
        if isinstance(cell, EmptyCell) and (
            cell.value == 0 or not is_valid_placement(grid, i, j, cell.value)
        ):
            return False
    return True


def _backtrack(grid: Grid, empties: Sequence[Coord], index: int) -> bool:
    if index == len(empties):
        return _is_complete(grid)
    coord = empties[index]
    cell = grid[coord.i, coord.j]
    if not isinstance(cell, EmptyCell):
        return False
    for value in range(1, 10):
        if is_valid_placement(grid, coord.i, coord.j, value):
            cell.value = value
            if _backtrack(grid, empties, index + 1):
                return True
            cell.value = 0
    return False


def solve(grid: Grid) -> bool:
    """Fill the grid's blank cells in place; return whether a solution was found."""
    empties = find_empty_cells(grid)
    grid.link_blocks()
    grid.generate_all_combinations()
    return _backtrack(grid, empties, 0)