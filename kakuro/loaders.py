"""Reading grids from text files, JSON documents and an interactive console."""

from __future__ import annotations

import json
import logging
import re
import string
import sys
from itertools import chain, islice, repeat
from typing import Any, TextIO

from .cells import BlackCell, Cell, ClueCell, EmptyCell, FixedCell
from .grid import Grid

log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GridFormatError(ValueError):
    """Raised when a grid description cannot be understood."""


def _to_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise GridFormatError(f"not a number: {text!r}")
    return int(match.group(1))


def _split_clue(token: str) -> tuple[int, int]:
    """Return the numbers before and after the slash; a missing side is 0."""
    before, _, after = token.partition("/")
    return (_to_int(before) if before else 0, _to_int(after) if after else 0)


def _new_grid(rows: int, columns: int) -> Grid:
    try:
        return Grid(rows, columns)
    except ValueError as exc:
        raise GridFormatError(str(exc)) from exc


def _console_cell(token: str, *, down_first: bool) -> Cell:
    if token == "#":
        return BlackCell()
    if token == "_":
        return EmptyCell()
    if "/" in token:
        first, second = _split_clue(token)
        return ClueCell(second, first) if down_first else ClueCell(first, second)
    return FixedCell(_to_int(token))


def _fill_row(grid: Grid, i: int, line: str, *, down_first: bool) -> None:
    tokens = line.split()
    if len(tokens) < grid.columns:
        raise GridFormatError(
            f"row {i + 1}: expected {grid.columns} cells, found {len(tokens)}"
        )
    for j, token in enumerate(tokens[: grid.columns]):
        grid[i, j] = _console_cell(token, down_first=down_first)


def parse_text(text: str) -> Grid:
    """Build a grid from the ``.kakuro`` text format.

    The first line holds the row and column counts; each following line holds
    one row of whitespace-separated cells: ``#`` for a black square, ``_`` for
    a blank, ``down/right`` for a clue and a number for a given digit.
    """
    lines = text.splitlines()
    header = lines[0].split() if lines else []
    if len(header) < 2:
        raise GridFormatError("missing grid size")
    grid = _new_grid(_to_int(header[0]), _to_int(header[1]))
    body = chain(lines[1:], repeat(""))
    for i, line in enumerate(islice(body, grid.rows)):
        _fill_row(grid, i, line, down_first=True)
    return grid


def load_text(path: str) -> Grid:
    """Read a grid from a ``.kakuro`` text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_text(handle.read())


def _json_cell(value: Any) -> Cell | None:
    if not isinstance(value, str):
        raise GridFormatError(f"cell must be a string, not {value!r}")
    if value == "#":
        return BlackCell()
    if value == ".":
        return EmptyCell()
    if value[:1] and value[:1] in string.digits:
        if "/" in value:
            right, down = _split_clue(value)
            return ClueCell(right, down)
        return FixedCell(_to_int(value))
    log.warning("Format inconnu: %s", value)
    return None


def parse_json(data: Any) -> Grid:
    """Build a grid from a decoded JSON document.

    The document holds ``lignes``, ``colonnes`` and ``grille``, a list of rows
    of strings: ``#`` black, ``.`` blank, ``right/down`` a clue and a number a
    given digit. Unrecognised cells are reported and left unset.
    """
    try:
        rows, columns, layout = data["lignes"], data["colonnes"], data["grille"]
    except (KeyError, TypeError) as exc:
        raise GridFormatError(f"missing grid field: {exc}") from exc
    if not all(isinstance(n, int) and not isinstance(n, bool) for n in (rows, columns)):
        raise GridFormatError("grid size must be integers")
    grid = _new_grid(rows, columns)
    for i, j in grid.positions():
        try:
            value = layout[i][j]
        except (IndexError, KeyError, TypeError) as exc:
            raise GridFormatError(f"missing cell at row {i + 1}, column {j + 1}") from exc
        grid[i, j] = _json_cell(value)
    return grid


def load_json(path: str) -> Grid:
    """Read a grid from a JSON file."""
    with open(path, encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise GridFormatError(f"invalid JSON: {exc}") from exc
    return parse_json(data)


def _prompt_int(stdin: TextIO, stdout: TextIO, prompt: str) -> int:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise GridFormatError("unexpected end of input")
    return _to_int(line)


def load_interactive(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Grid:
    """Ask for a grid on the console, one row per line.

    Rows use the text-file tokens, except that clues are written ``right/down``.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write("=== Mode manuel ===\n")
    rows = _prompt_int(stdin, stdout, "Entrez la hauteur (lignes) : ")
    columns = _prompt_int(stdin, stdout, "Entrez la largeur (colonnes) : ")
    grid = _new_grid(rows, columns)
    stdout.write("Entrez la grille ligne par ligne (comme dans un fichier .kakuro) :\n")
    for i in range(rows):
        stdout.write(f"Ligne {i + 1}: ")
        stdout.flush()
        _fill_row(grid, i, stdin.readline(), down_first=False)
    return grid