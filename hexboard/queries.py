"""Recognition of the query lines that follow a board."""

from __future__ import annotations

from enum import Enum


class Query(Enum):
    BOARD_SIZE = 1
    PAWNS_NUMBER = 2
    IS_BOARD_CORRECT = 3
    IS_GAME_OVER = 4
    IS_BOARD_POSSIBLE = 5
    CAN_RED_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT = 6
    CAN_BLUE_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT = 7
    CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT = 8
    CAN_BLUE_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT = 9
    CAN_RED_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT = 10
    CAN_BLUE_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT = 11
    CAN_RED_WIN_IN_2_MOVES_WITH_PERFECT_OPPONENT = 12
    CAN_BLUE_WIN_IN_2_MOVES_WITH_PERFECT_OPPONENT = 13


def classify_query(text: str) -> Query:
    """Identify a query from the distinguishing characters of its name."""
    if not text:
        raise ValueError("empty query")

    def at(index: int) -> str:
        return text[index] if index < len(text) else ""

    first = text[0]
    if first == "B":
        return Query.BOARD_SIZE
    if first == "P":
        return Query.PAWNS_NUMBER
    if first == "I":
        if at(3) == "B":
            if at(9) == "C":
                return Query.IS_BOARD_CORRECT
            return Query.IS_BOARD_POSSIBLE
        return Query.IS_GAME_OVER

    if at(4) == "R":
        if at(15) == "1":
            if at(27) == "N":
                return Query.CAN_RED_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT
            return Query.CAN_RED_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT
        if at(28) == "N":
            return Query.CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT
        return Query.CAN_RED_WIN_IN_2_MOVES_WITH_PERFECT_OPPONENT

    if at(16) == "1":
        if at(28) == "N":
            return Query.CAN_BLUE_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT
        return Query.CAN_BLUE_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT
    if at(29) == "N":
        return Query.CAN_BLUE_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT
    return Query.CAN_BLUE_WIN_IN_2_MOVES_WITH_PERFECT_OPPONENT