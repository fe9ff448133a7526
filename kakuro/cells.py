"""Cell types that make up a Kakuro grid."""

from __future__ import annotations

from abc import ABC, abstractmethod

DIGITS = range(1, 10)


def combinations_for(target: int, count: int) -> list[frozenset[int]]:
    """Return every set of ``count`` distinct digits 1-9 summing to ``target``.

    Sets are produced in lexicographic order of their sorted digits.
    """
    found: list[frozenset[int]] = []

    def extend(start: int, total: int, chosen: list[int]) -> None:
        if len(chosen) == count:
            if total == target:
                found.append(frozenset(chosen))
            return
        for digit in DIGITS[start - 1:]:
            if total + digit > target:
                break
            chosen.append(digit)
            extend(digit + 1, total + digit, chosen)
            chosen.pop()

    extend(1, 0, [])
    return found


class Cell(ABC):
    """A single square of the grid."""

    @abstractmethod
    def render(self) -> str:
        """Return the textual form of the cell."""

    @abstractmethod
    def editable(self) -> bool:
        """Return whether the solver may write a digit into the cell."""


class BlackCell(Cell):
    """A blocked square."""

    def render(self) -> str:
        return "#"

    def editable(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "BlackCell()"


class EmptyCell(Cell):
    """A square to be filled; a value of 0 means still blank."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def render(self) -> str:
        return "_" if self.value == 0 else str(self.value)

    def editable(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"EmptyCell({self.value})"


class FixedCell(Cell):
    """A square holding a digit given in advance."""

    def __init__(self, value: int) -> None:
        self.value = value

    def render(self) -> str:
        return str(self.value)

    def editable(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"FixedCell({self.value})"


class ClueCell(Cell):
    """A square carrying the sums of the runs to its right and below it."""

    def __init__(self, right_sum: int, down_sum: int) -> None:
        self.right_sum = right_sum
        self.down_sum = down_sum
        self.horizontal: list[Cell] = []
        self.vertical: list[Cell] = []
        self.combinations: list[frozenset[int]] = []

    def add_horizontal(self, cell: Cell) -> None:
        """Append a cell to the run to the right."""
        self.horizontal.append(cell)

    def add_vertical(self, cell: Cell) -> None:
        """Append a cell to the run below."""
        self.vertical.append(cell)

    def render(self) -> str:
        if self.right_sum > 0 and self.down_sum > 0:
            return f"{self.right_sum}/{self.down_sum}"
        if self.right_sum > 0:
            return f"{self.right_sum}/"
        if self.down_sum > 0:
            return f"/{self.down_sum}"
        return "#"

    def editable(self) -> bool:
        return False

    def generate_combinations(self) -> None:
        """Fill ``combinations`` with the digit sets valid for the linked runs.

        The horizontal run's sets replace any earlier content; the vertical
        run's sets are appended after them.
        """
        if self.horizontal:
            self.combinations = combinations_for(self.right_sum, len(self.horizontal))
        if self.vertical:
            self.combinations.extend(combinations_for(self.down_sum, len(self.vertical)))

    def __repr__(self) -> str:
        return f"ClueCell({self.right_sum}, {self.down_sum})"