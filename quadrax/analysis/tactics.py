"""Tactical helpers and the scripted move selector.

Built on the threat detector: counting live threats, fork and block
detection, critical blocking cells, and a deterministic heuristic scorer used
by the scripted opponent. None of these functions mutate their inputs.
"""

from typing import List, Optional, Tuple

from ..config import ScoringConfig
from ..core.board import Board, Cell, check_player
from ..core.enumerator import legal_moves
from ..core.moves import Move, Movement, Phase
from ..core.patterns import PatternKind, patterns_containing
from ..core.simulator import apply_move
from .threat_detector import check_win, find_winning_moves, threats_on_board

CENTER = (5, 6, 9, 10)
CORNERS = (0, 3, 12, 15)
EDGES = (1, 2, 4, 7, 8, 11, 13, 14)

# Blocking priority per pattern family; squares are the primary win condition
_BLOCK_BASE = {PatternKind.SQUARE_2x2: 100, PatternKind.LINE_4: 90}


def count_threats(board: Board, player: Cell) -> int:
    """Number of patterns holding 3 of player's pieces and 1 empty cell."""
    return len(threats_on_board(board, player))


def winning_targets(board: Board, player: Cell, phase: Phase) -> List[int]:
    """Distinct cells where player could complete a pattern on their next move."""
    candidates = legal_moves(board, player, phase)
    targets = {move.target for move in find_winning_moves(board, player, candidates, phase)}
    return sorted(targets)


def creates_fork(board: Board, move: Move, player: Cell, phase: Phase) -> bool:
    """True if, after move, player has two or more distinct winning cells.

    A single blocking move cannot cover both, so a fork wins unless the
    opponent wins first.
    """
    after = apply_move(board, move, player)
    return len(winning_targets(after, player, phase)) >= 2


def blocks_opponent_threat(board: Board, move: Move, player: Cell) -> bool:
    """True if move reduces the number of live opponent threats."""
    opponent = player.opponent()
    before = count_threats(board, opponent)
    after = count_threats(apply_move(board, move, player), opponent)
    return after < before


def critical_blocking_positions(board: Board, opponent: Cell) -> List[Tuple[int, int]]:
    """Empty cells ranked by how much of the opponent's play they would block.

    A cell scores for every pattern through it that is free of our pieces:
    patterns with three opponent pieces are critical, two are setups.
    Returns (position, priority) pairs, highest priority first.
    """
    opponent = check_player(opponent)
    ranked = []
    for position in board.empty_indices():
        priority = 0
        for pattern in patterns_containing(position):
            values = [board.cells[i] for i in pattern.indices]
            theirs = sum(1 for v in values if v == opponent)
            empty = sum(1 for v in values if v == Cell.EMPTY)
            if theirs + empty != 4:
                continue
            if theirs == 3:
                priority += _BLOCK_BASE[pattern.kind] + 50
            elif theirs == 2:
                priority += _BLOCK_BASE[pattern.kind] + 20
        if priority > 0:
            ranked.append((position, priority))
    ranked.sort(key=lambda item: item[1], reverse=True)
    return ranked


def _positional_bonus(position: int, scoring: ScoringConfig) -> float:
    if position in CENTER:
        return scoring.center
    if position in EDGES:
        return scoring.edge
    return scoring.corner


def score_move(
    board: Board,
    move: Move,
    player: Cell,
    phase: Phase,
    scoring: Optional[ScoringConfig] = None,
    next_phase: Optional[Phase] = None,
) -> float:
    """Heuristic value of move for player; higher is better.

    Args:
        board: Position before the move
        move: Candidate move (must be legal for player in phase)
        player: Mover
        phase: Phase the move is played in
        scoring: Heuristic weights (defaults to ScoringConfig())
        next_phase: Phase of the opponent's reply, when it differs from phase

    Returns:
        Score, with scoring.win for a move that wins outright
    """
    scoring = scoring or ScoringConfig()
    next_phase = next_phase or phase
    opponent = player.opponent()

    after = apply_move(board, move, player)
    if check_win(after, player) is not None:
        return scoring.win

    # Pattern potential, measured with the moved piece lifted off its source
    base = board.copy()
    if isinstance(move, Movement):
        base.cells[move.from_] = Cell.EMPTY
    target = move.target

    score = 0.0
    for pattern in patterns_containing(target):
        values = [base.cells[i] for i in pattern.indices]
        ours = sum(1 for v in values if v == player)
        theirs = sum(1 for v in values if v == opponent)
        if theirs == 0:
            if ours == 2:
                score += scoring.two_of_four
            elif ours == 1:
                score += scoring.one_of_four
        elif ours == 0:
            if theirs == 3:
                score += scoring.block_win
            elif theirs == 2:
                score += scoring.disrupt_two

    if len(winning_targets(after, player, phase)) >= 2:
        score += scoring.fork

    score += _positional_bonus(target, scoring)

    opponent_wins = winning_targets(after, opponent, next_phase)
    if opponent_wins:
        score -= scoring.allows_win_penalty
    elif next_phase is Phase.PLACEMENT:
        for reply in after.empty_indices():
            reply_board = after.copy()
            reply_board.cells[reply] = opponent
            if len(winning_targets(reply_board, opponent, Phase.PLACEMENT)) >= 2:
                score -= scoring.allows_fork_penalty
                break

    return score


def select_move(
    board: Board,
    player: Cell,
    phase: Phase,
    scoring: Optional[ScoringConfig] = None,
    next_phase: Optional[Phase] = None,
) -> Optional[Move]:
    """Pick a move for the scripted opponent, or None if no move is legal.

    Immediate wins come first; otherwise the highest score_move wins, with
    ties going to the earliest candidate in legal_moves order.
    """
    candidates = legal_moves(board, player, phase)
    if not candidates:
        return None

    wins = find_winning_moves(board, player, candidates, phase)
    if wins:
        return wins[0]

    best_move, best_score = None, float("-inf")
    for move in candidates:
        score = score_move(board, move, player, phase, scoring, next_phase)
        if score > best_score:
            best_move, best_score = move, score
    return best_move
