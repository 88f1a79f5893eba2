"""Tests for the board state model."""

import pytest

from tttab import BoardState, CellMark, Coordinate, Move, OutOfBoundsError, WinScore, iter_reachable_states

X, O, E = CellMark.CROSS, CellMark.CIRCLE, CellMark.EMPTY


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_new_empty_is_not_full_and_has_no_winner(size):
    state = BoardState.new_empty(size)

    assert state.size == size
    assert not state.is_full()
    assert state.winning_mark() is None
    assert not state.is_terminal()
    assert len(state.empty_coordinates()) == size * size


def test_size_below_one_is_rejected():
    with pytest.raises(ValueError):
        BoardState.new_empty(0)


def test_non_square_rows_are_rejected():
    with pytest.raises(ValueError):
        BoardState.from_rows(["XO", "X"])


def test_single_cell_board_ends_after_one_move():
    state = BoardState.new_empty(1).apply_move(Move(O, Coordinate(0, 0)))

    assert state.is_full()
    assert state.winning_mark() is O
    assert state.successors(X) == []


@pytest.mark.parametrize("rows, winner", [
    (["XXX", "OO-", "---"], X),
    (["XO-", "XO-", "-O-"], O),
    (["X-O", "OX-", "--X"], X),
    (["X-O", "XO-", "O--"], O),
    (["XO-", "---", "---"], None),
])
def test_winning_mark_checks_rows_columns_and_diagonals(rows, winner):
    assert BoardState.from_rows(rows).winning_mark() is winner


def test_winning_mark_on_4x4_anti_diagonal():
    state = BoardState.from_rows(["XXXO", "XXO-", "-O--", "O---"])

    assert state.winning_mark() is O


def test_winning_mark_checks_cross_first():
    # not reachable in play; only the check order decides
    state = BoardState.from_rows(["OOO", "XXX", "---"])

    assert state.winning_mark() is X


def test_full_board_without_line_is_a_draw():
    state = BoardState.from_rows(["XOX", "XOO", "OXX"])

    assert state.winning_mark() is None
    assert state.is_full()
    assert state.is_terminal()
    assert state.score_for(X) is WinScore.DRAW
    assert state.score_for(O) is WinScore.DRAW
    assert state.successors(X) == []


def test_score_for_winner_and_loser():
    state = BoardState.from_rows(["XXX", "OO-", "---"])

    assert state.score_for(X) is WinScore.WIN
    assert state.score_for(O) is WinScore.LOSS


def test_successors_are_row_major_over_empty_cells():
    state = BoardState.from_rows(["X-O", "-X-", "O--"])

    successors = state.successors(O)

    assert [move.coordinate for move, _ in successors] == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]
    for move, child in successors:
        assert move.mark is O
        assert child.cell_at(move.coordinate) is O


def test_successors_of_won_board_are_empty():
    state = BoardState.from_rows(["XXX", "OO-", "---"])

    assert state.successors(O) == []


def test_each_successor_fills_exactly_one_cell():
    state = BoardState.from_rows(["X--", "-O-", "---"])
    empty = len(state.empty_coordinates())

    for _, child in state.successors(X):
        assert len(child.empty_coordinates()) == empty - 1


def test_apply_move_changes_only_the_target_cell():
    state = BoardState.from_rows(["X--", "-O-", "---"])
    target = Coordinate(2, 1)

    child = state.apply_move(Move(X, target))

    assert child.cell_at(target) is X
    for rc in state.all_coordinates():
        if rc != target:
            assert child.cell_at(rc) is state.cell_at(rc)
    # the parent state is untouched
    assert state.cell_at(target) is E


@pytest.mark.parametrize("coord", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_bounds_coordinates_raise(coord):
    state = BoardState.new_empty(3)

    with pytest.raises(OutOfBoundsError):
        state.cell_at(Coordinate(*coord))
    with pytest.raises(IndexError):
        state.apply_move(Move(X, Coordinate(*coord)))


def test_states_compare_by_value():
    a = BoardState.new_empty().apply_move(Move(X, Coordinate(1, 1)))
    b = BoardState.from_rows(["---", "-X-", "---"])

    assert a == b
    assert hash(a) == hash(b)
    assert a[Coordinate(1, 1)] is X


def test_render():
    assert BoardState.from_rows(["XO-", "---", "--x"]).render() == "X O -\n- - -\n- - X"


def test_opponent():
    assert X.opponent is O
    assert O.opponent is X
    with pytest.raises(ValueError):
        E.opponent


def test_reachable_states_3x3():
    states = list(iter_reachable_states(3))

    assert len(states) == 5478
    assert states[0] == BoardState.new_empty(3)
    # successors are empty exactly on terminal states
    for state in states[::50]:
        mover = X if state.count(X) == state.count(O) else O
        assert (len(state.successors(mover)) == 0) == state.is_terminal()
