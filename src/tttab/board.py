"""
TicTacToe board model.

Board representation: tuple of rows, each a tuple of CellMark, size x size.
  - CellMark.EMPTY:  "-"
  - CellMark.CROSS:  "X" (moves first)
  - CellMark.CIRCLE: "O"

A BoardState is never mutated: every move returns a new state.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from .errors import OutOfBoundsError


class CellMark(Enum):
    """Contents of a single cell."""
    EMPTY = "-"
    CROSS = "X"
    CIRCLE = "O"

    @property
    def opponent(self) -> "CellMark":
        """The other player's mark."""
        if self is CellMark.CROSS:
            return CellMark.CIRCLE
        if self is CellMark.CIRCLE:
            return CellMark.CROSS
        raise ValueError("EMPTY has no opponent")


PLAYER_MARKS = (CellMark.CROSS, CellMark.CIRCLE)


class WinScore(IntEnum):
    """Game result relative to one player."""
    WIN = 1
    DRAW = 0
    LOSS = -1


class Coordinate(NamedTuple):
    """Zero-based (row, col) position."""
    row: int
    col: int


@dataclass(frozen=True)
class Move:
    """Place `mark` at `coordinate`."""
    mark: CellMark
    coordinate: Coordinate


Rows = Tuple[Tuple[CellMark, ...], ...]


@dataclass(frozen=True)
class BoardState:
    """Immutable snapshot of a square board."""
    cells: Rows

    def __post_init__(self):
        size = len(self.cells)
        if size < 1:
            raise ValueError("board size must be at least 1")
        for row in self.cells:
            if len(row) != size:
                raise ValueError(f"board must be square, got a row of {len(row)} in a {size}x{size} board")

    @classmethod
    def new_empty(cls, size: int = 3) -> "BoardState":
        """Board with every cell empty."""
        if size < 1:
            raise ValueError("board size must be at least 1")
        return cls(tuple(tuple(CellMark.EMPTY for _ in range(size)) for _ in range(size)))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Union[CellMark, str]]]) -> "BoardState":
        """
        Build a board from rows of marks.

        Cells may be CellMark values or their characters ("-", "X", "O"),
        so `BoardState.from_rows(["XX-", "OO-", "---"])` works.
        """
        return cls(tuple(
            tuple(c if isinstance(c, CellMark) else CellMark(c.upper()) for c in row)
            for row in rows
        ))

    @property
    def size(self) -> int:
        return len(self.cells)

    def _check(self, coord: Coordinate):
        row, col = coord
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfBoundsError(f"coordinate ({row}, {col}) outside {self.size}x{self.size} board")

    def cell_at(self, coord: Coordinate) -> CellMark:
        """Mark at `coord`. Raises OutOfBoundsError outside the board."""
        self._check(coord)
        return self.cells[coord[0]][coord[1]]

    __getitem__ = cell_at

    def all_coordinates(self) -> List[Coordinate]:
        """Every coordinate in row-major order."""
        return [Coordinate(r, c) for r in range(self.size) for c in range(self.size)]

    def empty_coordinates(self) -> List[Coordinate]:
        return [rc for rc in self.all_coordinates() if self.cells[rc.row][rc.col] is CellMark.EMPTY]

    def count(self, mark: CellMark) -> int:
        return sum(row.count(mark) for row in self.cells)

    def _lines(self) -> Iterator[Sequence[CellMark]]:
        # rows, columns, main diagonal, anti-diagonal
        n = self.size
        yield from self.cells
        for col in range(n):
            yield [self.cells[row][col] for row in range(n)]
        yield [self.cells[i][i] for i in range(n)]
        yield [self.cells[n - 1 - i][i] for i in range(n)]

    def winning_mark(self) -> Optional[CellMark]:
        """
        Mark that fills a complete row, column or diagonal, if any.

        CROSS is checked before CIRCLE; both can only win at once on a board
        that legal play never produces.
        """
        for mark in PLAYER_MARKS:
            for line in self._lines():
                if all(cell is mark for cell in line):
                    return mark
        return None

    def is_full(self) -> bool:
        return all(cell is not CellMark.EMPTY for row in self.cells for cell in row)

    def is_terminal(self) -> bool:
        return self.is_full() or self.winning_mark() is not None

    def score_for(self, mark: CellMark) -> WinScore:
        """Result for `mark`: DRAW when nobody has won."""
        winner = self.winning_mark()
        if winner is None:
            return WinScore.DRAW
        return WinScore.WIN if winner is mark else WinScore.LOSS

    def successors(self, mark: CellMark) -> List[Tuple[Move, "BoardState"]]:
        """
        All (move, resulting state) pairs for `mark`, row-major.

        Empty for terminal states.
        """
        if self.is_terminal():
            return []
        moves = [Move(mark, rc) for rc in self.empty_coordinates()]
        return [(move, self.apply_move(move)) for move in moves]

    def apply_move(self, move: Move) -> "BoardState":
        """
        New state with the move's cell set.

        The target cell is not checked for emptiness; callers only pass moves
        that come from `successors` or that they have checked themselves.
        """
        self._check(move.coordinate)
        row, col = move.coordinate
        new_row = self.cells[row][:col] + (move.mark,) + self.cells[row][col + 1:]
        return BoardState(self.cells[:row] + (new_row,) + self.cells[row + 1:])

    def render(self) -> str:
        """One line per row, cells separated by spaces."""
        return "\n".join(" ".join(cell.value for cell in row) for row in self.cells)

    def __str__(self) -> str:
        return self.render()


def iter_reachable_states(size: int = 3, first: CellMark = CellMark.CROSS) -> Iterator[BoardState]:
    """
    Iterate over every state reachable from the empty board.

    Players alternate starting with `first`; play stops at the first win.
    Each state is yielded once, in breadth-first order (empty board first).
    """
    start = BoardState.new_empty(size)
    seen = {start}
    queue = deque([(start, first)])
    while queue:
        state, mark = queue.popleft()
        yield state
        for _, child in state.successors(mark):
            if child not in seen:
                seen.add(child)
                queue.append((child, mark.opponent))
