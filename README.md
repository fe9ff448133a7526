# kakuro

A Kakuro solver. It reads a grid from a text file, a JSON file or from the
console, links every clue to the run of cells it governs, works out which
sets of distinct digits 1–9 can make each clue's sum, and fills the empty
cells by backtracking.

## Installation

```
pip install .
```

## Command line

```
kakuro
```

(`python -m kakuro.cli` does the same.) The command takes no options apart
from `--help`. It asks on standard input how the grid should be loaded:

1. from a text file (`.kakuro`) — it then asks for the path
2. typed in line by line at the console
3. from a JSON file (`.json`) — it then asks for the path

It prints the initial grid, then either the solved grid or a message that no
solution was found.

Exit status: `1` for an invalid menu choice or a malformed grid, `0`
otherwise — including when the file cannot be opened, in which case an error
is written to standard error and nothing is solved.

## Grid formats

### Text file

The first line holds the number of rows and columns. Each following line
holds one row of whitespace-separated cells; tokens beyond the column count
are ignored, and a row with too few tokens is an error.

| Token  | Meaning                                              |
|--------|------------------------------------------------------|
| `#`    | black cell                                           |
| `_`    | empty cell to fill                                   |
| `7`    | fixed digit                                          |
| `a/b`  | clue: `a` is the downward sum, `b` the rightward sum |

Either side of a clue may be left blank, e.g. `/3` or `4/`; a blank side
counts as 0.

```
3 3
# 4/ 3/
/3 _ _
/4 _ _
```

### Console entry

Same tokens as the text file, except that in a clue `a/b` the left number is
the rightward sum and the right number the downward sum.

### JSON file

```json
{
  "lignes": 3,
  "colonnes": 3,
  "grille": [
    ["#", "0/4", "0/3"],
    ["3/0", ".", "."],
    ["4/0", ".", "."]
  ]
}
```

`#` is a black cell, `.` an empty cell, a plain number a fixed digit, and
`a/b` a clue with `a` the rightward sum and `b` the downward sum. Any other
string (including one that does not begin with a digit, such as `/3`) is
logged as a warning and the cell is left unset.

## Library use

```python
from kakuro.loaders import load_text
from kakuro.solver import solve

grid = load_text("puzzle.kakuro")
if solve(grid):
    print(grid.render(), end="")
```

- `kakuro.loaders`: `parse_text(text)`, `load_text(path)`,
  `parse_json(data)`, `load_json(path)` and
  `load_interactive(stdin=None, stdout=None)` each return a `Grid`.
  Malformed input raises `GridFormatError` (a `ValueError`).
- `kakuro.grid.Grid(rows, columns)`: cells are read and written as
  `grid[i, j]` (unset squares hold `None`); `positions()` yields every
  `(row, column)` pair; `render()` returns the grid as text;
  `link_blocks()` and `generate_all_combinations()` prepare the clues.
- `kakuro.cells`: `BlackCell`, `EmptyCell(value=0)`, `FixedCell(value)` and
  `ClueCell(right_sum, down_sum)`, plus `combinations_for(target, count)`,
  which lists every set of `count` distinct digits 1–9 summing to `target`.
- `kakuro.solver`: `solve(grid)` links the clues, computes their
  combinations and fills the empty cells in place, returning whether a
  solution was found. `find_empty_cells(grid)`, `is_valid_placement(grid,
  i, j, value)` and `check_block_sum(block, target, value)` are available
  for finer use.

## What it does not do

The package only solves grids it is given. It does not generate puzzles,
save solved grids to a file, or offer hints or a graphical interface; the
solved grid is only printed or returned in memory.

## Running the tests

```
pip install .[test]
pytest
```