"""
Text driver: read moves, print boards, run the turn loop.
"""

import re
from typing import Callable

from .board import BoardState, Coordinate, WinScore
from .errors import IllegalMoveError
from .game import Game, GamePhase

_SEPARATORS = re.compile(r"[\s,;]+")

RESULT_MESSAGES = {
    WinScore.WIN: "Good game! You won!",
    WinScore.DRAW: "Game is a draw.",
    WinScore.LOSS: "Oops! You lost. :(",
}


def parse_coordinate(text: str, size: int) -> Coordinate:
    """
    Parse a 1-based move like "2,3", "2 3" or "23" into a zero-based Coordinate.

    Raises:
        ValueError: the text is not two numbers in 1..size
    """
    text = text.strip()
    parts = [p for p in _SEPARATORS.split(text) if p]
    if len(parts) == 1 and len(parts[0]) == 2:
        parts = list(parts[0])
    if len(parts) != 2:
        raise ValueError(f"expected <row>,<col>, got {text!r}")
    row, col = (int(p) for p in parts)
    if not (1 <= row <= size and 1 <= col <= size):
        raise ValueError(f"row and column must be between 1 and {size}")
    return Coordinate(row - 1, col - 1)


def _changed_cell(before: BoardState, after: BoardState) -> Coordinate:
    return next(rc for rc in before.all_coordinates() if before[rc] is not after[rc])


def play_interactive(
    game: Game,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
):
    """Play `game` to the end against a human on the console."""
    print_fn("Beginning a new game of tic tac toe!")
    if len(game.history) > 1:
        print_fn("AI move:")
    print_fn(game.state.render())

    while not game.is_over:
        try:
            text = input_fn("Your move: [<row>,<col>] ")
        except (EOFError, KeyboardInterrupt):
            print_fn("\nGame aborted")
            return
        try:
            coord = parse_coordinate(text, game.state.size)
        except ValueError as e:
            print_fn(f"Invalid input: {e}")
            continue
        try:
            game.make_player_move(coord)
        except IllegalMoveError as e:
            print_fn(f"Illegal move ({e}). Ignoring.")
            continue
        print_fn(game.state.render())

        if game.phase is GamePhase.AWAITING_AI:
            print_fn("AI move...")
            before = len(game.history)
            game.make_ai_move()
            if len(game.history) - before == 2:
                ai_state, forced_state = game.history[-2:]
                print_fn(ai_state.render())
                rc = _changed_cell(ai_state, forced_state)
                print_fn(f"Forced move: {rc.row + 1},{rc.col + 1}")
            print_fn(game.state.render())

    print_fn(RESULT_MESSAGES[game.result])
    print_fn("Good night.")
