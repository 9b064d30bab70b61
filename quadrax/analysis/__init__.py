"""Win/threat evaluation and tactical analysis."""

from .tactics import (
    blocks_opponent_threat,
    count_threats,
    creates_fork,
    critical_blocking_positions,
    score_move,
    select_move,
    winning_targets,
)
from .threat_detector import (
    Threat,
    check_win,
    check_win_all,
    find_threats,
    find_winning_moves,
    threats_on_board,
)

__all__ = [
    "Threat",
    "check_win",
    "check_win_all",
    "find_winning_moves",
    "find_threats",
    "threats_on_board",
    "count_threats",
    "winning_targets",
    "creates_fork",
    "blocks_opponent_threat",
    "critical_blocking_positions",
    "score_move",
    "select_move",
]
