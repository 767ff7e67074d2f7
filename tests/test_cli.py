import io

import pytest

from hexboard.board import Board
from hexboard.cli import answer, main, run
from hexboard.parser import ParseError
from hexboard.queries import Query


def render(rows):
    size = len(rows)
    edge = " " * (3 * (size - 1) + 1) + "---"
    lines = [edge]
    for diagonal in range(2 * size - 1):
        top = min(diagonal, size - 1)
        count = size - abs(diagonal - (size - 1))
        cells = [rows[top - j][diagonal - top + j] for j in range(count)]
        lines.append(" --" + "-".join(f"< {c} >" for c in cells) + "--")
    lines.append(edge)
    return lines


RED_WON = ["rrr", "bb ", "   "]
BLUE_WON = ["br ", "br ", "b r"]
OVERFULL_RED = ["rrr", "   ", "   "]
OPEN = ["rb ", "r  ", "  b"]


def test_answer_board_size_and_pawns():
    board = Board(RED_WON)
    assert answer(board, Query.BOARD_SIZE) == str(board.size)
    assert answer(board, Query.PAWNS_NUMBER) == "5"


def test_answer_game_over():
    assert answer(Board(RED_WON), Query.IS_GAME_OVER) == "YES RED"
    assert answer(Board(BLUE_WON), Query.IS_GAME_OVER) == "YES BLUE"
    assert answer(Board(OPEN), Query.IS_GAME_OVER) == "NO"


def test_incorrect_board_is_never_over():
    board = Board(OVERFULL_RED)
    assert answer(board, Query.IS_BOARD_CORRECT) == "NO"
    assert answer(board, Query.IS_GAME_OVER) == "NO"
    assert answer(board, Query.IS_BOARD_POSSIBLE) == "NO"


def test_answer_possible_positions():
    assert answer(Board(RED_WON), Query.IS_BOARD_POSSIBLE) == "YES"
    assert answer(Board(BLUE_WON), Query.IS_BOARD_POSSIBLE) == "YES"


def test_answer_naive_opponent_queries():
    board = Board(OPEN)
    assert answer(board, Query.CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT) == "YES"
    assert answer(board, Query.CAN_BLUE_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT) == "YES"
    assert answer(Board(["rr ", "bb ", "   "]), Query.CAN_RED_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT) == "YES"


@pytest.mark.parametrize(
    "query",
    [
        Query.CAN_RED_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT,
        Query.CAN_BLUE_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT,
        Query.CAN_RED_WIN_IN_2_MOVES_WITH_PERFECT_OPPONENT,
        Query.CAN_BLUE_WIN_IN_2_MOVES_WITH_PERFECT_OPPONENT,
    ],
)
def test_perfect_opponent_queries_are_unanswered(query):
    assert answer(Board(OPEN), query) is None


def test_run_simple_queries():
    lines = render(RED_WON) + ["BOARD_SIZE", "IS_BOARD_CORRECT", "IS_GAME_OVER"]
    assert list(run(lines)) == ["3", "", "YES", "", "YES RED", ""]


def test_run_naive_answers_spacing():
    lines = render(OPEN) + [
        "CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT",
        "CAN_BLUE_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT",
    ]
    assert list(run(lines)) == ["YES", "YES", ""]


def test_run_skips_perfect_opponent_queries():
    lines = render(OPEN) + ["CAN_RED_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT"]
    assert list(run(lines)) == []


def test_run_several_boards():
    lines = (
        render(RED_WON)
        + ["IS_GAME_OVER", ""]
        + render(BLUE_WON)
        + ["IS_GAME_OVER", ""]
    )
    assert list(run(lines)) == ["YES RED", "", "YES BLUE", ""]


def test_run_query_before_board_raises():
    with pytest.raises(ParseError):
        list(run(["BOARD_SIZE"]))


def test_main_reads_stdin(monkeypatch, capsys):
    text = "\n".join(render(["r ", "b "]) + ["BOARD_SIZE"]) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == "2\n\n"


def test_main_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("BOARD_SIZE\n"))
    assert main([]) == 1
    assert "query before any board" in capsys.readouterr().err