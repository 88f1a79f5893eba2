"""
D4 symmetries of a square board (8 transforms).

Rotations: 0°, 90°, 180°, 270°
Reflections: horizontal, vertical, main diagonal, anti-diagonal
"""

from typing import List

import numpy as np

from .board import BoardState

N_SYMMETRIES = 8


def _to_array(state: BoardState) -> np.ndarray:
    return np.array([[cell.value for cell in row] for row in state.cells])


def _transform(grid: np.ndarray, sym_id: int) -> np.ndarray:
    if sym_id == 0:   return grid                      # identity
    elif sym_id == 1: return np.rot90(grid, -1)        # rotate 90
    elif sym_id == 2: return np.rot90(grid, 2)         # rotate 180
    elif sym_id == 3: return np.rot90(grid, 1)         # rotate 270
    elif sym_id == 4: return np.fliplr(grid)           # reflect horizontal
    elif sym_id == 5: return np.flipud(grid)           # reflect vertical
    elif sym_id == 6: return grid.T                    # reflect main diag
    elif sym_id == 7: return np.rot90(grid, 2).T       # reflect anti-diag
    raise ValueError(f"symmetry id must be in 0..{N_SYMMETRIES - 1}, got {sym_id}")


def transform_board(state: BoardState, sym_id: int) -> BoardState:
    """
    Apply symmetry transform to board.

    Args:
        state: board to transform
        sym_id: symmetry ID (0-7)

    Returns:
        Transformed board
    """
    return BoardState.from_rows(_transform(_to_array(state), sym_id).tolist())


def all_symmetries(state: BoardState) -> List[BoardState]:
    """Return all 8 symmetric versions of a board."""
    return [transform_board(state, k) for k in range(N_SYMMETRIES)]


def canonical_key(state: BoardState) -> str:
    """Smallest row-major string among the board's symmetric images."""
    grid = _to_array(state)
    return min("".join(_transform(grid, k).ravel()) for k in range(N_SYMMETRIES))
