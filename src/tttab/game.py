"""
Game controller: whose turn it is, human moves, AI moves, and the outcome.

Phases:
  AWAITING_HUMAN -> AWAITING_AI   human move that does not end the game
  AWAITING_HUMAN -> FINISHED      human move that wins or fills the board
  AWAITING_AI    -> AWAITING_HUMAN AI move that does not end the game
  AWAITING_AI    -> FINISHED      AI move that ends the game
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import BoardState, CellMark, Coordinate, Move, WinScore
from .errors import IllegalMoveError, NoMovesAvailableError
from .search import SearchEngine

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Game configuration."""

    # Board side length
    size: int = 3

    # Human plays CROSS and moves first
    human_first: bool = True

    # AI moving first takes the top-left corner without searching
    ai_opens_corner: bool = True

    # Play the human's only remaining move automatically
    auto_forced_move: bool = False


class GamePhase(Enum):
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_AI = "awaiting_ai"
    FINISHED = "finished"


class Game:
    """
    One game of a human against the search engine.

    If the AI moves first, its opening move is made during construction,
    so a new game always starts in AWAITING_HUMAN.
    """

    def __init__(self, config: Optional[GameConfig] = None, engine: Optional[SearchEngine] = None):
        self.config = config or GameConfig()
        self.human_mark = CellMark.CROSS if self.config.human_first else CellMark.CIRCLE
        self.ai_mark = self.human_mark.opponent
        self.engine = engine or SearchEngine(self.ai_mark, self.human_mark)
        if (self.engine.ai_mark, self.engine.opponent_mark) != (self.ai_mark, self.human_mark):
            raise ValueError("engine marks do not match the game's marks")

        self.state = BoardState.new_empty(self.config.size)
        self.history: List[BoardState] = [self.state]
        self.phase = GamePhase.AWAITING_HUMAN if self.config.human_first else GamePhase.AWAITING_AI

        if self.phase is GamePhase.AWAITING_AI:
            if self.config.ai_opens_corner:
                self._set_state(self.state.apply_move(Move(self.ai_mark, Coordinate(0, 0))), GamePhase.AWAITING_HUMAN)
            else:
                self.make_ai_move()

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.FINISHED

    @property
    def result(self) -> WinScore:
        """Outcome for the human; DRAW until somebody has won."""
        return self.state.score_for(self.human_mark)

    def _set_state(self, state: BoardState, next_phase: GamePhase):
        self.state = state
        self.history.append(state)
        self._set_phase(GamePhase.FINISHED if state.is_terminal() else next_phase)

    def _set_phase(self, phase: GamePhase):
        self.phase = phase
        logger.debug("phase -> %s", phase.value)

    def make_player_move(self, coord: Coordinate):
        """
        Place the human's mark at `coord`.

        Raises:
            IllegalMoveError: not the human's turn, or the cell is taken.
            OutOfBoundsError: `coord` is off the board.
        """
        if self.phase is not GamePhase.AWAITING_HUMAN:
            raise IllegalMoveError(f"cannot move now: game is {self.phase.value}")
        coord = Coordinate(*coord)
        if self.state.cell_at(coord) is not CellMark.EMPTY:
            raise IllegalMoveError(f"cell ({coord.row}, {coord.col}) is already taken")
        self._set_state(self.state.apply_move(Move(self.human_mark, coord)), GamePhase.AWAITING_AI)

    def make_ai_move(self):
        """
        Let the engine move.

        A board with no moves left finishes the game.
        """
        if self.phase is not GamePhase.AWAITING_AI:
            raise IllegalMoveError(f"AI cannot move now: game is {self.phase.value}")
        try:
            next_state = self.engine.choose_ai_move(self.state)
        except NoMovesAvailableError:
            self._set_phase(GamePhase.FINISHED)
            return
        self._set_state(next_state, GamePhase.AWAITING_HUMAN)

        if self.config.auto_forced_move and self.phase is GamePhase.AWAITING_HUMAN:
            successors = self.state.successors(self.human_mark)
            if len(successors) == 1:
                logger.debug("forced human move at %s", successors[0][0].coordinate)
                self._set_state(successors[0][1], GamePhase.AWAITING_AI)
