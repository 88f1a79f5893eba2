"""
tttab - TicTacToe on an N x N board against an exact alpha-beta search.

The core is an immutable board model and a minimax search with alpha-beta
pruning; a small controller and text driver play it against a human.
"""

from .errors import TicTacToeError, IllegalMoveError, NoMovesAvailableError, OutOfBoundsError
from .board import BoardState, CellMark, Coordinate, Move, WinScore, iter_reachable_states
from .search import Score, SearchEngine, SearchResult, choose_ai_move, minimax_score
from .game import Game, GameConfig, GamePhase
from .symmetries import transform_board, all_symmetries, canonical_key
from .eval import (
    EvalConfig,
    eval_vs_random,
    eval_self_play,
    eval_exhaustive,
    eval_symmetry_consistency,
)

__version__ = "0.1.0"
__all__ = [
    "TicTacToeError",
    "IllegalMoveError",
    "NoMovesAvailableError",
    "OutOfBoundsError",
    "BoardState",
    "CellMark",
    "Coordinate",
    "Move",
    "WinScore",
    "iter_reachable_states",
    "Score",
    "SearchEngine",
    "SearchResult",
    "choose_ai_move",
    "minimax_score",
    "Game",
    "GameConfig",
    "GamePhase",
    "transform_board",
    "all_symmetries",
    "canonical_key",
    "EvalConfig",
    "eval_vs_random",
    "eval_self_play",
    "eval_exhaustive",
    "eval_symmetry_consistency",
]
