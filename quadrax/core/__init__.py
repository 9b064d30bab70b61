"""Board model, pattern catalog, moves, simulation and move generation."""

from .board import PLAYERS, Board, Cell, clone
from .enumerator import is_legal, legal_moves, legal_movements, legal_placements
from .moves import Move, Movement, Phase, Placement, phase_of
from .patterns import (
    Pattern,
    PatternKind,
    adjacent_positions,
    all_lines,
    all_patterns,
    all_squares,
    patterns_containing,
)
from .simulator import apply_move, apply_movement, apply_placement

__all__ = [
    "Board",
    "Cell",
    "PLAYERS",
    "clone",
    "Move",
    "Movement",
    "Placement",
    "Phase",
    "phase_of",
    "Pattern",
    "PatternKind",
    "all_squares",
    "all_lines",
    "all_patterns",
    "patterns_containing",
    "adjacent_positions",
    "apply_placement",
    "apply_movement",
    "apply_move",
    "legal_moves",
    "legal_placements",
    "legal_movements",
    "is_legal",
]
