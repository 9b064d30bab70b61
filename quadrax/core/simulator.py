"""Apply hypothetical moves to board copies.

Every function returns a new Board; the caller's board is never modified.
"""

from ..errors import CellOccupiedError, NotOwnerError, SamePositionError
from .board import Board, Cell, check_index, check_player
from .moves import Move, Movement, Placement


def apply_placement(board: Board, index: int, player: Cell) -> Board:
    """Place a new piece for player on an empty cell."""
    player = check_player(player)
    index = check_index(index)
    if not board.is_empty(index):
        raise CellOccupiedError(index)
    new_board = board.copy()
    new_board.cells[index] = player
    return new_board


def apply_movement(board: Board, from_: int, to: int, player: Cell) -> Board:
    """Move one of player's pieces to any empty cell (no adjacency rule)."""
    player = check_player(player)
    from_ = check_index(from_)
    to = check_index(to)
    if from_ == to:
        raise SamePositionError(from_)
    if board.get(from_) != player:
        raise NotOwnerError(from_, player)
    if not board.is_empty(to):
        raise CellOccupiedError(to)
    new_board = board.copy()
    new_board.cells[from_] = Cell.EMPTY
    new_board.cells[to] = player
    return new_board


def apply_move(board: Board, move: Move, player: Cell) -> Board:
    if isinstance(move, Placement):
        return apply_placement(board, move.position, player)
    if isinstance(move, Movement):
        return apply_movement(board, move.from_, move.to, player)
    raise TypeError(f"Not a move: {move!r}")
