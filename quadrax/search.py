"""Depth-limited alpha-beta search over game states."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .analysis.tactics import CENTER, count_threats
from .analysis.threat_detector import find_winning_moves
from .config import ScoringConfig
from .core.moves import Move
from .game.state import GameState, Winner, apply_move

logger = logging.getLogger(__name__)

WIN_SCORE = 100000.0


@dataclass
class SearchResult:
    """Result of a minimax search."""

    move: Optional[Move] = None
    score: float = 0.0
    nodes_visited: int = 0


class MinimaxSearcher:
    """Negamax with alpha-beta pruning.

    Scores are from the point of view of the player to move. Wins are worth
    WIN_SCORE plus the remaining depth, so shorter wins are preferred. Leaf
    positions are scored by live threats and center control.
    """

    def __init__(self, depth: int = 2, scoring: Optional[ScoringConfig] = None):
        if depth is None or depth < 1:
            raise ValueError("depth must be >= 1")
        self.depth = depth
        self.scoring = scoring or ScoringConfig()
        self.nodes_visited = 0

    def search(self, state: GameState) -> SearchResult:
        """Best move for state.current_player; move is None once the game has ended."""
        self.nodes_visited = 0
        if not state.active:
            return SearchResult()

        best_move, best_score = None, float("-inf")
        alpha, beta = float("-inf"), float("inf")
        for move in self._ordered_moves(state):
            score = self._score_child(state, move, self.depth, alpha, beta)
            if score > best_score:
                best_move, best_score = move, score
            alpha = max(alpha, score)

        logger.debug(
            "Search depth %d picked %s (score %.1f, %d nodes)",
            self.depth, best_move, best_score, self.nodes_visited,
        )
        return SearchResult(best_move, best_score, self.nodes_visited)

    def _score_child(self, state: GameState, move: Move, depth: int,
                     alpha: float, beta: float) -> float:
        child = state.copy()
        result = apply_move(child, move)
        self.nodes_visited += 1
        if result.winner is Winner.TIE:
            return 0.0
        if result.ended:
            return WIN_SCORE + depth
        if depth == 1:
            return -self.evaluate(child)
        return -self._negamax(child, depth - 1, -beta, -alpha)

    def _negamax(self, state: GameState, depth: int, alpha: float, beta: float) -> float:
        best = float("-inf")
        for move in self._ordered_moves(state):
            score = self._score_child(state, move, depth, alpha, beta)
            best = max(best, score)
            alpha = max(alpha, score)
            if alpha >= beta:
                break
        return best

    def _ordered_moves(self, state: GameState) -> List[Move]:
        # Winning moves first so cutoffs come early
        moves = state.legal_moves()
        wins = find_winning_moves(state.board, state.current_player, moves, state.phase)
        return wins + [m for m in moves if m not in wins]

    def evaluate(self, state: GameState) -> float:
        """Static value of a non-terminal state for the player to move."""
        player = state.current_player
        opponent = player.opponent()
        board = state.board
        threats = count_threats(board, player) - count_threats(board, opponent)
        center = sum(
            1 if board.cells[i] == player else -1 if board.cells[i] == opponent else 0
            for i in CENTER
        )
        return threats * self.scoring.two_of_four + center * self.scoring.center
