"""Tests for the evaluation harness and board symmetries."""

import pytest

from tttab import (
    BoardState,
    WinScore,
    all_symmetries,
    canonical_key,
    eval_exhaustive,
    eval_self_play,
    eval_symmetry_consistency,
    eval_vs_random,
    iter_reachable_states,
    transform_board,
)


@pytest.mark.parametrize("ai_first", [True, False])
def test_exhaustive_ai_never_loses(ai_first):
    results = eval_exhaustive(ai_first=ai_first)

    assert results["games"] > 0
    assert results["ai_l"] == 0
    assert results["ai_w"] + results["ai_d"] == results["games"]


def test_self_play_is_a_draw():
    assert eval_self_play(3) is WinScore.DRAW


def test_vs_random():
    results = eval_vs_random(games=20, seed=1)

    assert results["games"] == 20
    assert results["ai_l"] == 0
    assert results["ai_w"] + results["ai_d"] == pytest.approx(1.0)


def test_symmetries_of_a_board():
    state = BoardState.from_rows(["XO-", "---", "---"])

    assert transform_board(state, 0) == state
    assert transform_board(state, 1) == BoardState.from_rows(["--X", "--O", "---"])
    assert transform_board(state, 4) == BoardState.from_rows(["-OX", "---", "---"])
    assert transform_board(state, 6) == BoardState.from_rows(["X--", "O--", "---"])
    assert len(set(all_symmetries(state))) == 8
    assert len({canonical_key(s) for s in all_symmetries(state)}) == 1


def test_bad_symmetry_id():
    with pytest.raises(ValueError):
        transform_board(BoardState.new_empty(3), 8)


def test_distinct_positions_up_to_symmetry():
    keys = {canonical_key(s) for s in iter_reachable_states(3)}

    assert len(keys) == 765


def test_search_scores_agree_across_symmetries():
    states = [
        BoardState.from_rows(["X--", "-O-", "---"]),
        BoardState.from_rows(["XO-", "-X-", "---"]),
        BoardState.from_rows(["X-O", "---", "-X-"]),
    ]

    assert eval_symmetry_consistency(states) == []


@pytest.mark.parametrize("games", [0, -1])
def test_vs_random_needs_at_least_one_game(games):
    with pytest.raises(ValueError):
        eval_vs_random(games=games)
