"""Hex board representation, win detection and position sanity checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

RED = "r"
BLUE = "b"
EMPTY = " "
PLAYERS = (RED, BLUE)
_CELL_VALUES = frozenset((RED, BLUE, EMPTY))

# Hex adjacency in the row/column layout used by the board.
_NEIGHBOURS = ((1, 0), (0, 1), (1, 1), (-1, 0), (0, -1), (-1, -1))


class Board:
    """A square Hex board.

    Red connects the left column to the right column, blue connects the
    top row to the bottom row. Cells hold ``"r"``, ``"b"`` or ``" "``.
    """

    __slots__ = ("_cells",)

    def __init__(self, rows: Iterable[Iterable[str]]) -> None:
        cells = [list(row) for row in rows]
        size = len(cells)
        for row in cells:
            if len(row) != size:
                raise ValueError("board must be square")
            for cell in row:
                if cell not in _CELL_VALUES:
                    raise ValueError(f"invalid cell value: {cell!r}")
        self._cells = cells

    @property
    def size(self) -> int:
        return len(self._cells)

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple("".join(row) for row in self._cells)

    def __getitem__(self, position: tuple[int, int]) -> str:
        row, col = position
        return self._cells[row][col]

    def __setitem__(self, position: tuple[int, int], value: str) -> None:
        if value not in _CELL_VALUES:
            raise ValueError(f"invalid cell value: {value!r}")
        row, col = position
        self._cells[row][col] = value

    def __iter__(self) -> Iterator[tuple[tuple[int, int], str]]:
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield (r, c), cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({list(self.rows)!r})"

    def count(self, colour: str) -> int:
        """Number of cells holding ``colour``."""
        return sum(row.count(colour) for row in self._cells)

    def empty_count(self) -> int:
        """Number of empty cells."""
        return self.count(EMPTY)

    def copy(self) -> Board:
        return Board(self._cells)

    def only(self, colour: str) -> Board:
        """A copy keeping only the pieces of ``colour``."""
        return Board(
            [cell if cell == colour else EMPTY for cell in row] for row in self._cells
        )

    def without_nth(self, index: int) -> Board:
        """A copy with the ``index``-th piece (row-major order) removed.

        An index that matches no piece leaves the copy unchanged.
        """
        result = self.copy()
        pieces = (pos for pos, cell in self if cell != EMPTY)
        for number, pos in enumerate(pieces):
            if number == index:
                result[pos] = EMPTY
                break
        return result

    def transposed(self) -> Board:
        return Board(zip(*self._cells))

    def has_won(self, player: str) -> bool:
        """Whether ``player`` has a connected chain between its two edges."""
        if player not in PLAYERS:
            return False
        size = self.size
        last = size - 1
        if player == RED:
            starts = [(i, 0) for i in range(size) if self._cells[i][0] == RED]
        else:
            starts = [(0, i) for i in range(size) if self._cells[0][i] == BLUE]

        visited = set(starts)
        queue = deque(starts)
        while queue:
            row, col = queue.popleft()
            if (player == RED and col == last) or (player == BLUE and row == last):
                return True
            for dr, dc in _NEIGHBOURS:
                nr, nc = row + dr, col + dc
                if (
                    0 <= nr < size
                    and 0 <= nc < size
                    and (nr, nc) not in visited
                    and self._cells[nr][nc] == player
                ):
                    visited.add((nr, nc))
                    queue.append((nr, nc))
        return False


def is_board_correct(red: int, blue: int) -> bool:
    """Whether the piece counts fit alternate play with red moving first."""
    return red == blue or red == blue + 1


def _win_needs_every_move(board: Board, colour: str) -> bool:
    pieces = board.only(colour)
    return any(
        not pieces.without_nth(i).has_won(colour)
        for i in range(pieces.count(colour))
    )


def is_board_possible(board: Board) -> bool:
    """Whether the position could arise in a game that stopped at the first win."""
    red = board.count(RED)
    blue = board.count(BLUE)
    if not is_board_correct(red, blue):
        return False
    if board.has_won(RED):
        return red - 1 == blue and _win_needs_every_move(board, RED)
    if board.has_won(BLUE):
        return red == blue and _win_needs_every_move(board, BLUE)
    return True