"""Win and threat detection for QuadraX positions.

All functions are pure: candidate moves are simulated on board copies and the
caller's board is never touched. Pattern scans are vectorized over the
(19, 4) pattern index table, squares first and lines after, so catalog order
is preserved in every result.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..config import RulesConfig, get_default_rules
from ..core.board import PLAYERS, Board, Cell, check_player
from ..core.moves import Move, Phase, phase_of
from ..core.patterns import ALL_PATTERNS, NUM_SQUARES, PATTERN_INDEX, Pattern, PatternKind
from ..core.simulator import apply_move
from ..errors import WrongPhaseMoveError


@dataclass(frozen=True)
class Threat:
    """A move that leaves its player one cell short of a pattern."""

    move: Move
    kind: PatternKind
    positions: Tuple[int, int, int, int]
    needs_position: int


def pattern_counts(board: Board, player: Cell) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Per-pattern (own, empty, opponent) piece counts, aligned with ALL_PATTERNS."""
    player = check_player(player)
    cells = board.cells[PATTERN_INDEX]
    own = np.count_nonzero(cells == player, axis=1)
    empty = np.count_nonzero(cells == Cell.EMPTY, axis=1)
    return own, empty, 4 - own - empty


def _scan_order(rules: RulesConfig) -> List[int]:
    squares = list(range(NUM_SQUARES))
    lines = list(range(NUM_SQUARES, len(ALL_PATTERNS)))
    if rules.win_priority == "line":
        return lines + squares
    return squares + lines


def check_win(
    board: Board, player: Cell, rules: Optional[RulesConfig] = None
) -> Optional[Pattern]:
    """Return the winning pattern for player, or None.

    Squares are scanned before lines by default, so a board that holds both a
    completed square and a completed line reports the square. Within a family
    the first match in catalog order is returned.
    """
    player = check_player(player)
    rules = rules or get_default_rules()
    complete = np.all(board.cells[PATTERN_INDEX] == player, axis=1)
    for i in _scan_order(rules):
        if complete[i]:
            return ALL_PATTERNS[i]
    return None


def check_win_all(
    board: Board, rules: Optional[RulesConfig] = None
) -> Dict[Cell, Optional[Pattern]]:
    """check_win for both players independently."""
    return {player: check_win(board, player, rules) for player in PLAYERS}


def _check_phase(move: Move, phase: Phase) -> None:
    if phase_of(move) is not phase:
        raise WrongPhaseMoveError(
            f"{type(move).__name__} {move} is not a {phase.value} move"
        )


def find_winning_moves(
    board: Board,
    player: Cell,
    candidate_moves: Iterable[Move],
    phase: Phase,
    rules: Optional[RulesConfig] = None,
) -> List[Move]:
    """Candidate moves that complete a pattern for player, in candidate order."""
    player = check_player(player)
    winning = []
    for move in candidate_moves:
        _check_phase(move, phase)
        if check_win(apply_move(board, move, player), player, rules) is not None:
            winning.append(move)
    return winning


def threats_on_board(board: Board, player: Cell) -> List[Tuple[Pattern, int]]:
    """(pattern, missing index) for every live 3-of-4 pattern of player."""
    own, empty, _ = pattern_counts(board, player)
    found = []
    for i in np.flatnonzero((own == 3) & (empty == 1)):
        pattern = ALL_PATTERNS[i]
        missing = next(idx for idx in pattern.indices if board.cells[idx] == Cell.EMPTY)
        found.append((pattern, missing))
    return found


def find_threats(
    board: Board,
    player: Cell,
    candidate_moves: Iterable[Move],
    phase: Phase,
) -> List[Threat]:
    """Threats produced by each candidate move.

    A pattern qualifies when, after the move, it holds exactly three of the
    player's pieces and one empty cell. One move can produce several threats;
    two or more from a single move is a fork.
    """
    player = check_player(player)
    threats = []
    for move in candidate_moves:
        _check_phase(move, phase)
        after = apply_move(board, move, player)
        for pattern, missing in threats_on_board(after, player):
            threats.append(Threat(
                move=move,
                kind=pattern.kind,
                positions=pattern.indices,
                needs_position=missing,
            ))
    return threats
