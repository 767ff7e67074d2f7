"""Answer queries about Hex boards read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from itertools import chain

from hexboard.analysis import can_win_in_one_move, can_win_in_two_moves
from hexboard.board import BLUE, RED, Board, is_board_correct, is_board_possible
from hexboard.parser import ParseError, parse_board
from hexboard.queries import Query, classify_query

# These answers are not followed by a blank line.
_NO_TRAILING_BLANK = frozenset(
    {
        Query.CAN_RED_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT,
        Query.CAN_BLUE_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT,
        Query.CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT,
    }
)


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def answer(board: Board, query: Query) -> str | None:
    """The reply to ``query`` about ``board``, or None for unanswered queries."""
    red = board.count(RED)
    blue = board.count(BLUE)
    match query:
        case Query.BOARD_SIZE:
            return str(board.size)
        case Query.PAWNS_NUMBER:
            return str(red + blue)
        case Query.IS_BOARD_CORRECT:
            return _yes_no(is_board_correct(red, blue))
        case Query.IS_GAME_OVER:
            if not is_board_correct(red, blue):
                return "NO"
            if board.has_won(RED):
                return "YES RED"
            if board.has_won(BLUE):
                return "YES BLUE"
            return "NO"
        case Query.IS_BOARD_POSSIBLE:
            return _yes_no(is_board_possible(board))
        case Query.CAN_RED_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT:
            return _yes_no(can_win_in_one_move(board, RED))
        case Query.CAN_BLUE_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT:
            return _yes_no(can_win_in_one_move(board, BLUE))
        case Query.CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT:
            return _yes_no(can_win_in_two_moves(board, RED))
        case Query.CAN_BLUE_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT:
            return _yes_no(can_win_in_two_moves(board, BLUE))
        case _:
            return None


def run(lines: Iterable[str]) -> Iterator[str]:
    """Read boards and queries from ``lines`` and yield the output lines.

    A line starting with a space opens a new board; any other non-blank
    line is a query about the most recent board.
    """
    source = (line.rstrip("\r\n") for line in lines)
    board: Board | None = None
    for line in source:
        if not line:
            continue
        if line.startswith(" "):
            board = parse_board(chain([line], source))
            continue
        if board is None:
            raise ParseError(f"query before any board: {line!r}")
        query = classify_query(line)
        reply = answer(board, query)
        if reply is None:
            continue
        yield reply
        if query not in _NO_TRAILING_BLANK:
            yield ""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hexboard",
        description="Read Hex boards and queries from standard input and answer them.",
    )
    parser.parse_args(argv)
    try:
        for line in run(sys.stdin):
            print(line)
    except ValueError as exc:
        print(f"hexboard: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())