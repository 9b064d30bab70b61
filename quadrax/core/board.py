"""Board representation for QuadraX."""

from enum import IntEnum
from typing import Iterable, List

import numpy as np

from ..config import BOARD_SIZE, NUM_CELLS
from ..errors import IndexOutOfRangeError


class Cell(IntEnum):
    """Value held by a single board cell."""

    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell.PLAYER_TWO if self is Cell.PLAYER_ONE else Cell.PLAYER_ONE

    @property
    def symbol(self) -> str:
        return {Cell.EMPTY: ".", Cell.PLAYER_ONE: "X", Cell.PLAYER_TWO: "O"}[self]


PLAYERS = (Cell.PLAYER_ONE, Cell.PLAYER_TWO)
_VALID_VALUES = [int(c) for c in Cell]


def check_index(index: int) -> int:
    """Return index as an int, raising IndexOutOfRangeError outside [0, 16)."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfRangeError(index)
    if not 0 <= int(index) < NUM_CELLS:
        raise IndexOutOfRangeError(index)
    return int(index)


def check_player(player) -> Cell:
    """Return player as a Cell, raising ValueError unless it is PLAYER_ONE or PLAYER_TWO."""
    if isinstance(player, bool) or player not in PLAYERS:
        raise ValueError(f"{player!r} is not a player (expected 1 or 2)")
    return Cell(int(player))


class Board:
    """Sixteen cells in row-major order (row = index // 4, col = index % 4)."""

    __slots__ = ("cells",)

    def __init__(self, cells=None):
        if cells is None:
            cells = np.zeros(NUM_CELLS, dtype=np.int8)
        raw = np.asarray(cells).reshape(-1)
        if raw.shape != (NUM_CELLS,):
            raise ValueError(f"Board must have {NUM_CELLS} cells, got {raw.size}")
        if not np.all(np.isin(raw, _VALID_VALUES)):
            raise ValueError("Board cells must be 0 (empty), 1 or 2")
        self.cells = raw.astype(np.int8, copy=True)

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_list(cls, values: Iterable[int]) -> "Board":
        return cls(list(values))

    def to_list(self) -> List[int]:
        return [int(v) for v in self.cells]

    def get(self, index: int) -> Cell:
        return Cell(int(self.cells[check_index(index)]))

    def __getitem__(self, index: int) -> Cell:
        return self.get(index)

    def is_empty(self, index: int) -> bool:
        return self.cells[check_index(index)] == Cell.EMPTY

    def copy(self) -> "Board":
        """Deep copy; the clone shares no storage with this board."""
        new = Board.__new__(Board)
        new.cells = self.cells.copy()
        return new

    def empty_indices(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self.cells == Cell.EMPTY)]

    def indices_of(self, player: Cell) -> List[int]:
        return [int(i) for i in np.flatnonzero(self.cells == player)]

    def count(self, value: Cell) -> int:
        return int(np.count_nonzero(self.cells == value))

    def is_full(self) -> bool:
        return not np.any(self.cells == Cell.EMPTY)

    def grid(self) -> np.ndarray:
        """4x4 read-only view of the cells."""
        view = self.cells.reshape(BOARD_SIZE, BOARD_SIZE)
        view.flags.writeable = False
        return view

    def render(self) -> str:
        rows = []
        for r in range(BOARD_SIZE):
            cells = self.cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
            rows.append(" ".join(Cell(int(v)).symbol for v in cells))
        return "\n".join(rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    # Mutable through .cells, so not usable as a dict key
    __hash__ = None

    def __len__(self) -> int:
        return NUM_CELLS

    def __iter__(self):
        return (Cell(int(v)) for v in self.cells)

    def __repr__(self) -> str:
        return f"Board({self.to_list()})"


def clone(board: Board) -> Board:
    """Deep copy of board, required before any hypothetical mutation."""
    return board.copy()
