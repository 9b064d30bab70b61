"""Legal move generation for both game phases."""

from typing import List

from .board import Board, Cell, check_player
from .moves import Move, Movement, Phase, Placement, phase_of


def legal_placements(board: Board) -> List[Placement]:
    """Every empty cell, ascending."""
    return [Placement(i) for i in board.empty_indices()]


def legal_movements(board: Board, player: Cell) -> List[Movement]:
    """Own pieces (outer, ascending) x empty cells (inner, ascending)."""
    empties = board.empty_indices()
    return [Movement(src, dst) for src in board.indices_of(player) for dst in empties]


def legal_moves(board: Board, player: Cell, phase: Phase) -> List[Move]:
    """All legal moves for player in phase; empty when none exist."""
    player = check_player(player)
    if phase is Phase.PLACEMENT:
        return list(legal_placements(board))
    if phase is Phase.MOVEMENT:
        return list(legal_movements(board, player))
    raise ValueError(f"Unknown phase: {phase!r}")


def is_legal(board: Board, player: Cell, phase: Phase, move: Move) -> bool:
    """True if move is one of legal_moves(board, player, phase)."""
    if phase_of(move) is not phase:
        return False
    return move in legal_moves(board, player, phase)
