"""Catalog of QuadraX winning patterns.

Two families win the game: the nine 2x2 squares and the ten 4-cell lines
(4 rows, 4 columns, 2 diagonals). The catalog is constant data; the order of
each family is part of the contract because win reporting returns the first
match in catalog order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import numpy as np

from ..config import BOARD_SIZE
from .board import check_index


class PatternKind(Enum):
    """Winning pattern families."""

    SQUARE_2x2 = "2x2 square"
    LINE_4 = "4-in-a-line"


@dataclass(frozen=True)
class Pattern:
    kind: PatternKind
    indices: Tuple[int, int, int, int]

    def __contains__(self, index: int) -> bool:
        return index in self.indices

    def __iter__(self):
        return iter(self.indices)


def _build_squares() -> Tuple[Pattern, ...]:
    squares = []
    for r in range(BOARD_SIZE - 1):
        for c in range(BOARD_SIZE - 1):
            top_left = r * BOARD_SIZE + c
            squares.append(Pattern(PatternKind.SQUARE_2x2, (
                top_left,
                top_left + 1,
                top_left + BOARD_SIZE,
                top_left + BOARD_SIZE + 1,
            )))
    return tuple(squares)


def _build_lines() -> Tuple[Pattern, ...]:
    n = BOARD_SIZE
    rows = [tuple(r * n + c for c in range(n)) for r in range(n)]
    cols = [tuple(r * n + c for r in range(n)) for c in range(n)]
    main_diag = tuple(i * n + i for i in range(n))
    anti_diag = tuple(i * n + (n - 1 - i) for i in range(n))
    return tuple(
        Pattern(PatternKind.LINE_4, idx) for idx in rows + cols + [main_diag, anti_diag]
    )


SQUARES: Tuple[Pattern, ...] = _build_squares()
LINES: Tuple[Pattern, ...] = _build_lines()
ALL_PATTERNS: Tuple[Pattern, ...] = SQUARES + LINES

# (19, 4) index table aligned with ALL_PATTERNS, for vectorized lookups
PATTERN_INDEX = np.array([p.indices for p in ALL_PATTERNS], dtype=np.intp)
PATTERN_INDEX.flags.writeable = False
NUM_SQUARES = len(SQUARES)


def all_squares() -> Tuple[Pattern, ...]:
    return SQUARES


def all_lines() -> Tuple[Pattern, ...]:
    return LINES


def all_patterns() -> Tuple[Pattern, ...]:
    """Squares followed by lines."""
    return ALL_PATTERNS


def patterns_containing(index: int) -> List[Pattern]:
    """All winning patterns (lines first, then squares) that use a cell."""
    index = check_index(index)
    return [p for p in LINES + SQUARES if index in p.indices]


def adjacent_positions(index: int) -> List[int]:
    """Cells in the 8-neighbourhood of index, ascending."""
    index = check_index(index)
    row, col = divmod(index, BOARD_SIZE)
    adjacent = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            r, c = row + dr, col + dc
            if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
                adjacent.append(r * BOARD_SIZE + c)
    return adjacent
