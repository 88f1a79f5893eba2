"""
Exact minimax search with alpha-beta pruning.

The board is small enough to search every line to the end, so there is no
evaluation function: every leaf is a terminal state scored WIN/DRAW/LOSS
for the AI, paired with the ply depth it was reached at.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import BoardState, CellMark, WinScore
from .errors import NoMovesAvailableError

logger = logging.getLogger(__name__)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Score:
    """
    Search result paired with its depth.

    Ordering: WIN > DRAW > LOSS. A WIN at a smaller depth beats a WIN at a
    larger one, a LOSS at a larger depth beats a LOSS at a smaller one.
    DRAWs are equal whatever their depth.
    """
    result: WinScore
    depth: int

    def _key(self) -> Tuple[int, int]:
        if self.result is WinScore.WIN:
            return (int(self.result), -self.depth)
        if self.result is WinScore.LOSS:
            return (int(self.result), self.depth)
        return (int(self.result), 0)

    def __eq__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())


@dataclass(frozen=True)
class SearchResult:
    """Chosen next state, its score, and how many states were visited."""
    score: Score
    state: BoardState
    nodes: int


class _NodeCounter:
    __slots__ = ("nodes",)

    def __init__(self):
        self.nodes = 0


class SearchEngine:
    """
    Minimax with alpha-beta pruning, maximizing for `ai_mark`.

    The engine holds only the two marks; alpha and beta travel as arguments,
    so one engine can serve any number of games.
    """

    def __init__(self, ai_mark: CellMark, opponent_mark: Optional[CellMark] = None):
        if opponent_mark is None:
            opponent_mark = ai_mark.opponent
        if CellMark.EMPTY in (ai_mark, opponent_mark) or ai_mark is opponent_mark:
            raise ValueError(f"invalid marks: ai={ai_mark}, opponent={opponent_mark}")
        self.ai_mark = ai_mark
        self.opponent_mark = opponent_mark

    def max_value(
        self,
        state: BoardState,
        alpha: Score,
        beta: Score,
        depth: int,
        counter: Optional[_NodeCounter] = None,
    ) -> Tuple[Score, BoardState]:
        """
        Best (score, successor) for the AI to move.

        For a terminal state the state itself is returned.
        """
        if counter is not None:
            counter.nodes += 1
        if state.is_terminal():
            return Score(state.score_for(self.ai_mark), depth), state

        best, best_state = Score(WinScore.LOSS, depth), state
        for _, child in state.successors(self.ai_mark):
            score, _ = self.min_value(child, alpha, beta, depth + 1, counter)
            if score > best:
                best, best_state = score, child
            alpha = max(alpha, best)
            if alpha >= beta:
                break  # Prune
        return best, best_state

    def min_value(
        self,
        state: BoardState,
        alpha: Score,
        beta: Score,
        depth: int,
        counter: Optional[_NodeCounter] = None,
    ) -> Tuple[Score, BoardState]:
        """Worst (score, successor) for the AI with the opponent to move."""
        if counter is not None:
            counter.nodes += 1
        if state.is_terminal():
            return Score(state.score_for(self.ai_mark), depth), state

        best, best_state = Score(WinScore.WIN, depth), state
        for _, child in state.successors(self.opponent_mark):
            score, _ = self.max_value(child, alpha, beta, depth + 1, counter)
            if score < best:
                best, best_state = score, child
            beta = min(beta, best)
            if beta <= alpha:
                break  # Prune
        return best, best_state

    def search(self, state: BoardState) -> SearchResult:
        """
        Run the full search from `state` with the AI to move.

        Raises:
            NoMovesAvailableError: the game on `state` is already over.
        """
        if not state.successors(self.ai_mark):
            raise NoMovesAvailableError("no move available: the game is over")

        counter = _NodeCounter()
        score, best_state = self.max_value(
            state,
            alpha=Score(WinScore.LOSS, 0),
            beta=Score(WinScore.WIN, 0),
            depth=0,
            counter=counter,
        )
        logger.debug("%s searched %d states, best %s at depth %d",
                     self.ai_mark.value, counter.nodes, score.result.name, score.depth)
        return SearchResult(score=score, state=best_state, nodes=counter.nodes)

    def choose_ai_move(self, state: BoardState) -> BoardState:
        """State after the AI's best move."""
        return self.search(state).state


def choose_ai_move(state: BoardState, ai_mark: CellMark, opponent_mark: Optional[CellMark] = None) -> BoardState:
    """Pick the AI's next state on `state`. See SearchEngine.search."""
    return SearchEngine(ai_mark, opponent_mark).choose_ai_move(state)


def minimax_score(
    state: BoardState,
    ai_mark: CellMark,
    opponent_mark: Optional[CellMark] = None,
    maximizing: bool = True,
) -> WinScore:
    """
    Plain minimax value of `state` for `ai_mark`, without pruning or depth.

    Slow, but a useful reference for the pruned search.
    """
    if opponent_mark is None:
        opponent_mark = ai_mark.opponent
    if state.is_terminal():
        return state.score_for(ai_mark)

    mover = ai_mark if maximizing else opponent_mark
    values = [
        minimax_score(child, ai_mark, opponent_mark, not maximizing)
        for _, child in state.successors(mover)
    ]
    return max(values) if maximizing else min(values)
