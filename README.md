# hexboard

`hexboard` reads positions of the game Hex, drawn as ASCII art, and
answers questions about them: how big the board is, how many pawns are
on it, whether the position is legal, whether someone has already won,
and whether a player can win within one or two moves against an
opponent who does not try to block.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `hexboard` command reads from standard input and writes its answers
to standard output:

```
hexboard < positions.txt
```

It takes no options besides `--help`. If the input cannot be read as
boards and questions, it prints `hexboard: <reason>` to standard error
and exits with status 1.

### Input

The input is a sequence of boards, each followed by the questions to ask
about it. Blank lines are ignored.

A board is a diamond of hexagonal cells drawn between two edge lines. A
line that starts with a space opens a new board: it is the top edge, and
the position of its first `-` gives the board size (`position // 3 + 1`).
It is followed by `2 * size - 1` lines, one per diagonal of the board,
holding `size - |d - (size - 1)|` cells for diagonal `d`. A cell is
written `< r >` for a red pawn, `< b >` for a blue pawn and `<   >` for an
empty cell. One more line, the bottom edge, closes the board.

Any other non-blank line is a question about the most recent board. A
question before any board is an error.

### Questions

| Question                                      | Answer                          |
|-----------------------------------------------|---------------------------------|
| `BOARD_SIZE`                                  | the length of a side            |
| `PAWNS_NUMBER`                                | the number of pawns on the board|
| `IS_BOARD_CORRECT`                            | `YES` or `NO`                   |
| `IS_GAME_OVER`                                | `YES RED`, `YES BLUE` or `NO`   |
| `IS_BOARD_POSSIBLE`                           | `YES` or `NO`                   |
| `CAN_RED_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT`   | `YES` or `NO`                   |
| `CAN_BLUE_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT`  | `YES` or `NO`                   |
| `CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT`  | `YES` or `NO`                   |
| `CAN_BLUE_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT` | `YES` or `NO`                   |

Questions are recognised by a few distinguishing characters rather than
matched in full, so they should be written exactly as above.

Each answer is printed on its own line followed by a blank line, except
the answers to `CAN_RED_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT`,
`CAN_BLUE_WIN_IN_1_MOVE_WITH_NAIVE_OPPONENT` and
`CAN_RED_WIN_IN_2_MOVES_WITH_NAIVE_OPPONENT`, which are not followed by a
blank line.

### Rules applied

- Red connects the left and right edges of the board, blue connects the
  top and bottom.
- Red always moves first, so a board is *correct* when red has as many
  pawns as blue or exactly one more. `IS_GAME_OVER` answers `NO` for a
  board that is not correct.
- A board is *possible* when it is correct and, if somebody has won, the
  winner made the last move and at least one of the winner's pawns is
  needed for the win (so the game would not have ended earlier).
- The winning questions answer `NO` for a board that is not possible, on
  which someone has already won, or which has too few empty cells for the
  player's moves together with the opponent's moves in between. For two
  moves, both new pawns must be needed for the win.

## What it does not do

Questions about winning against a *perfect* opponent
(`CAN_RED_WIN_IN_1_MOVE_WITH_PERFECT_OPPONENT` and the like) are
recognised but not answered: they produce no output. The package does
not play games, suggest moves or draw boards.

## Library

The same work is available from Python:

- `hexboard.parser.parse_board(lines)` reads one drawn board into a
  `Board`, consuming exactly its lines when given an iterator, and raises
  `ParseError` (a `ValueError`) when the drawing is malformed.
- `hexboard.board.Board(rows)` holds a square grid of `"r"`, `"b"` and
  `" "` cells (`RED`, `BLUE` and `EMPTY`), raising `ValueError` for other
  shapes or values. It has `size`, `rows`, indexing by `(row, col)`,
  iteration over `((row, col), cell)` pairs, equality, and the methods
  `count`, `empty_count`, `copy`, `only`, `without_nth`, `transposed` and
  `has_won`.
- `hexboard.board.is_board_correct(red, blue)` and
  `hexboard.board.is_board_possible(board)` check legality.
- `hexboard.analysis.can_win_in_one_move(board, colour)` and
  `hexboard.analysis.can_win_in_two_moves(board, colour)` answer the
  naive-opponent questions; they raise `ValueError` for a colour other
  than `"r"` or `"b"`.
- `hexboard.queries.classify_query(text)` maps a question line to a
  member of the `Query` enum, raising `ValueError` for an empty line.
- `hexboard.cli.answer(board, query)` returns the text answer to one
  question, or `None` for questions that are not answered, and
  `hexboard.cli.run(lines)` yields the output lines for a whole input.

```python
from hexboard.board import Board
from hexboard.analysis import can_win_in_one_move

board = Board(["r  ", "rb ", " b "])
print(board.has_won("r"), can_win_in_one_move(board, "r"))
```