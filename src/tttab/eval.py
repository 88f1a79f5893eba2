"""
Evaluation functions.

Plays the search engine against random and exhaustive opponents, against
itself, and checks that its scores agree across board symmetries.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import numpy as np
from tqdm.auto import trange

from .board import BoardState, CellMark, WinScore
from .search import SearchEngine
from .symmetries import all_symmetries


@dataclass
class EvalConfig:
    """Evaluation configuration."""

    # Random seed
    seed: int = 0

    # Board side length
    size: int = 3

    # Games against the random opponent
    games: int = 200

    # Also walk every opponent line
    exhaustive: bool = False


def eval_vs_random(
    games: int = 200,
    size: int = 3,
    seed: int = 0,
    show_progress: bool = False,
) -> Dict[str, float]:
    """
    Evaluate the engine vs a uniformly random opponent.

    The engine plays CROSS in even games and CIRCLE in odd ones.

    Returns:
        Dict with 'games', 'ai_w', 'ai_d', 'ai_l' (rates)
    """
    if games < 1:
        raise ValueError(f"games must be at least 1, got {games}")
    rng = np.random.default_rng(seed)
    engines = {mark: SearchEngine(mark) for mark in (CellMark.CROSS, CellMark.CIRCLE)}
    replies: Dict[BoardState, BoardState] = {}
    wins = draws = losses = 0

    for g in trange(games, desc="vs Random", disable=not show_progress):
        ai_side = CellMark.CROSS if (g % 2 == 0) else CellMark.CIRCLE
        state = BoardState.new_empty(size)
        mover = CellMark.CROSS

        while not state.is_terminal():
            if mover is ai_side:
                if state not in replies:
                    replies[state] = engines[ai_side].choose_ai_move(state)
                state = replies[state]
            else:
                successors = state.successors(mover)
                _, state = successors[int(rng.integers(len(successors)))]
            mover = mover.opponent

        result = state.score_for(ai_side)
        if result is WinScore.WIN:
            wins += 1
        elif result is WinScore.DRAW:
            draws += 1
        else:
            losses += 1

    total = wins + draws + losses
    return {
        "games": total,
        "ai_w": wins / total,
        "ai_d": draws / total,
        "ai_l": losses / total,
    }


def eval_self_play(size: int = 3) -> WinScore:
    """Play the engine against itself from the empty board. Returns CROSS's result."""
    engines = {mark: SearchEngine(mark) for mark in (CellMark.CROSS, CellMark.CIRCLE)}
    state = BoardState.new_empty(size)
    mover = CellMark.CROSS
    while not state.is_terminal():
        state = engines[mover].choose_ai_move(state)
        mover = mover.opponent
    return state.score_for(CellMark.CROSS)


def eval_exhaustive(ai_first: bool = True, size: int = 3) -> Dict[str, int]:
    """
    Play the engine against every legal opponent line.

    The engine's reply to each board is computed once and reused.

    Returns:
        Dict with 'games', 'ai_w', 'ai_d', 'ai_l' (counts)
    """
    ai_mark = CellMark.CROSS if ai_first else CellMark.CIRCLE
    engine = SearchEngine(ai_mark)
    replies: Dict[BoardState, BoardState] = {}
    counts = {WinScore.WIN: 0, WinScore.DRAW: 0, WinScore.LOSS: 0}

    stack = [(BoardState.new_empty(size), CellMark.CROSS)]
    while stack:
        state, mover = stack.pop()
        if state.is_terminal():
            counts[state.score_for(ai_mark)] += 1
            continue
        if mover is ai_mark:
            if state not in replies:
                replies[state] = engine.choose_ai_move(state)
            stack.append((replies[state], mover.opponent))
        else:
            for _, child in state.successors(mover):
                stack.append((child, mover.opponent))

    return {
        "games": sum(counts.values()),
        "ai_w": counts[WinScore.WIN],
        "ai_d": counts[WinScore.DRAW],
        "ai_l": counts[WinScore.LOSS],
    }


def eval_symmetry_consistency(
    states: Iterable[BoardState],
    mover: Optional[CellMark] = None,
) -> List[BoardState]:
    """
    Check that every symmetric image of a state gets the same search score.

    Args:
        states: non-terminal boards to check
        mover: side to move; inferred from the mark counts (CROSS first) when None

    Returns:
        The states whose images disagree (empty when consistent)
    """
    mismatches = []
    for state in states:
        if state.is_terminal():
            continue
        side = mover
        if side is None:
            side = CellMark.CROSS if state.count(CellMark.CROSS) == state.count(CellMark.CIRCLE) else CellMark.CIRCLE
        engine = SearchEngine(side)
        scores = {engine.search(image).score for image in all_symmetries(state)}
        if len(scores) != 1:
            mismatches.append(state)
    return mismatches
