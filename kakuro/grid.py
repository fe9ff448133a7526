"""The rectangular Kakuro grid."""

from __future__ import annotations

from collections.abc import Iterator

from .cells import BlackCell, Cell, ClueCell


class Grid:
    """A rows-by-columns array of cells; unset squares hold ``None``."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(f"invalid grid size {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self._cells: list[list[Cell | None]] = [[None] * columns for _ in range(rows)]

    def _check(self, position: tuple[int, int]) -> tuple[int, int]:
        i, j = position
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexError(f"position {position} outside {self.rows}x{self.columns} grid")
        return i, j

    def __getitem__(self, position: tuple[int, int]) -> Cell | None:
        i, j = self._check(position)
        return self._cells[i][j]

    def __setitem__(self, position: tuple[int, int], cell: Cell | None) -> None:
        i, j = self._check(position)
        self._cells[i][j] = cell

    def positions(self) -> Iterator[tuple[int, int]]:
        """Yield every (row, column) pair in row-major order."""
        for i in range(self.rows):
            for j in range(self.columns):
                yield i, j

    def render(self) -> str:
        """Return the grid as text: a size line, then one line per row."""
        lines = [f"{self.rows} {self.columns}"]
        for row in self._cells:
            lines.append("".join((" " if cell is None else cell.render()) + " " for cell in row))
        return "\n".join(lines) + "\n"

    def _run(self, i: int, j: int, di: int, dj: int) -> Iterator[Cell]:
        i, j = i + di, j + dj
        while i < self.rows and j < self.columns:
            cell = self._cells[i][j]
            if cell is None or isinstance(cell, (BlackCell, ClueCell)):
                return
            yield cell
            i, j = i + di, j + dj

    def link_blocks(self) -> None:
        """Attach to every clue the cells of the runs it governs."""
        for i, j in self.positions():
            clue = self._cells[i][j]
            if not isinstance(clue, ClueCell):
                continue
            if clue.right_sum > 0:
                for cell in self._run(i, j, 0, 1):
                    clue.add_horizontal(cell)
            if clue.down_sum > 0:
                for cell in self._run(i, j, 1, 0):
                    clue.add_vertical(cell)

    def generate_all_combinations(self) -> None:
        """Compute the digit combinations of every clue."""
        for row in self._cells:
            for cell in row:
                if isinstance(cell, ClueCell):
                    cell.generate_combinations()