"""
Exceptions raised at the boundary between the game driver and the core.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class IllegalMoveError(TicTacToeError):
    """A move targets an occupied cell or is made out of turn."""


class NoMovesAvailableError(TicTacToeError):
    """The search was asked to move on a board where the game is already over."""


class OutOfBoundsError(TicTacToeError, IndexError):
    """A coordinate lies outside the board."""
