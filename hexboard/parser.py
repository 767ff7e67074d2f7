"""Reading Hex boards drawn as ASCII art."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from hexboard.board import BLUE, EMPTY, RED, Board

_CELL = re.compile(r"<(?: (.))?")
_CELL_VALUES = frozenset((RED, BLUE, EMPTY))


class ParseError(ValueError):
    """Raised when the input does not describe a board in the expected layout."""


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        line = next(lines)
    except StopIteration:
        raise ParseError(f"input ended before the {what}") from None
    return line.rstrip("\r\n")


def _board_size(header: str) -> int:
    dash = header.find("-")
    if dash < 0:
        raise ParseError(f"board header has no edge marker: {header!r}")
    return dash // 3 + 1


def _row_cells(line: str) -> list[str]:
    values = []
    for match in _CELL.finditer(line):
        value = match.group(1)
        if value is None:
            raise ParseError(f"malformed cell in line: {line!r}")
        if value not in _CELL_VALUES:
            raise ParseError(f"invalid cell value {value!r} in line: {line!r}")
        values.append(value)
    return values


def parse_board(lines: Iterable[str]) -> Board:
    """Read one board: the top edge line, its diagonal rows and the bottom edge line.

    The board size follows from the indentation of the top edge line. When
    given an iterator, exactly the lines of the board are consumed from it.
    """
    source = iter(lines)
    size = _board_size(_next_line(source, "board header"))
    last = size - 1
    cells = [[EMPTY] * size for _ in range(size)]
    for diagonal in range(2 * size - 1):
        line = _next_line(source, f"board line {diagonal + 1}")
        values = _row_cells(line)
        expected = size - abs(diagonal - last)
        if len(values) != expected:
            raise ParseError(
                f"board line {diagonal + 1} holds {len(values)} cells, "
                f"expected {expected}"
            )
        top = min(diagonal, last)
        for offset, value in enumerate(values):
            row = top - offset
            cells[row][diagonal - row] = value
    _next_line(source, "board footer")
    return Board(cells)