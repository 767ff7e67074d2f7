"""Questions about winning quickly against an opponent who plays no blocking moves."""

from __future__ import annotations

from collections.abc import Iterator

from hexboard.board import BLUE, EMPTY, PLAYERS, RED, Board, is_board_possible


def _check_colour(colour: str) -> None:
    if colour not in PLAYERS:
        raise ValueError(f"unknown colour: {colour!r}")


def _is_open_position(board: Board) -> bool:
    return (
        is_board_possible(board)
        and not board.has_won(RED)
        and not board.has_won(BLUE)
    )


def _on_turn(colour: str, board: Board) -> bool:
    return (colour == RED) == (board.count(RED) == board.count(BLUE))


def _empty_cells(board: Board) -> Iterator[tuple[int, int]]:
    return (pos for pos, cell in board if cell == EMPTY)


def can_win_in_one_move(board: Board, colour: str) -> bool:
    """Whether ``colour`` can win with its next stone."""
    _check_colour(colour)
    free = board.empty_count()
    if free == 0 or not _is_open_position(board):
        return False
    required = 1 if _on_turn(colour, board) else 2
    if free < required:
        return False

    trial = board.copy()
    for pos in list(_empty_cells(board)):
        trial[pos] = colour
        if trial.has_won(colour):
            return True
        trial[pos] = EMPTY
    return False


def can_win_in_two_moves(board: Board, colour: str) -> bool:
    """Whether ``colour`` can win with its next two stones, both of them needed."""
    _check_colour(colour)
    free = board.empty_count()
    if free <= 2 or not _is_open_position(board):
        return False
    required = 3 if _on_turn(colour, board) else 4
    if free < required:
        return False

    empties = list(_empty_cells(board))
    trial = board.copy()
    for first in empties:
        trial[first] = colour
        for second in empties:
            if second == first:
                continue
            trial[second] = colour
            if trial.has_won(colour):
                trial[first] = EMPTY
                if not trial.has_won(colour):
                    return True
                trial[first] = colour
                trial[second] = EMPTY
                if not trial.has_won(colour):
                    return True
            trial[second] = EMPTY
        trial[first] = EMPTY
    return False