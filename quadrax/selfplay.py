"""Play complete games between move-choosing agents.

An agent is any callable taking a GameState and returning one of its legal
moves. The engine itself never calls agents; this module is the driver used
by the scripts and integration tests.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm

from .analysis.tactics import select_move
from .config import RulesConfig, ScoringConfig, get_default_rules
from .core.board import Cell
from .core.moves import Move
from .game.state import GameState, Winner, apply_move, new_game
from .search import MinimaxSearcher

logger = logging.getLogger(__name__)

Agent = Callable[[GameState], Move]


def random_agent(seed: Optional[int] = None) -> Agent:
    """Agent that plays a uniformly random legal move."""
    rng = np.random.default_rng(seed)

    def choose(state: GameState) -> Move:
        moves = state.legal_moves()
        return moves[int(rng.integers(len(moves)))]

    return choose


def scripted_agent(scoring: Optional[ScoringConfig] = None) -> Agent:
    """Agent backed by analysis.tactics.select_move."""

    def choose(state: GameState) -> Move:
        return select_move(
            state.board, state.current_player, state.phase, scoring, state.reply_phase()
        )

    return choose


def search_agent(depth: int = 2, scoring: Optional[ScoringConfig] = None) -> Agent:
    """Agent backed by a depth-limited MinimaxSearcher."""
    searcher = MinimaxSearcher(depth, scoring)

    def choose(state: GameState) -> Move:
        return searcher.search(state).move

    return choose


@dataclass
class GameRecord:
    """Result of one played game."""

    winner: Optional[Winner]
    moves: List[Tuple[Cell, Move]] = field(default_factory=list)
    truncated: bool = False

    @property
    def num_moves(self) -> int:
        return len(self.moves)


def play_game(
    agent_one: Agent,
    agent_two: Agent,
    rules: Optional[RulesConfig] = None,
    max_moves: int = 200,
) -> GameRecord:
    """Play one game; stops after max_moves with winner None and truncated set."""
    if max_moves <= 0:
        raise ValueError("max_moves must be > 0")
    state = new_game(rules or get_default_rules())
    agents: Dict[Cell, Agent] = {Cell.PLAYER_ONE: agent_one, Cell.PLAYER_TWO: agent_two}

    while state.active and state.move_count < max_moves:
        move = agents[state.current_player](state)
        apply_move(state, move)

    if state.active:
        logger.debug("Game truncated after %d moves", state.move_count)
        return GameRecord(winner=None, moves=list(state.history), truncated=True)
    return GameRecord(winner=state.winner, moves=list(state.history))


def play_match(
    agent_one: Agent,
    agent_two: Agent,
    num_games: int,
    rules: Optional[RulesConfig] = None,
    max_moves: int = 200,
    disable_tqdm: bool = False,
) -> Dict[str, int]:
    """Play num_games and tally results by outcome."""
    tally = {"player_one": 0, "player_two": 0, "tie": 0, "truncated": 0}

    # Conditionally create progress bar based on disable_tqdm flag
    if not disable_tqdm:
        game_pbar = tqdm(range(num_games), desc="Games", leave=False, unit="game")
    else:
        game_pbar = range(num_games)

    for _ in game_pbar:
        record = play_game(agent_one, agent_two, rules, max_moves)
        if record.truncated:
            tally["truncated"] += 1
        else:
            tally[record.winner.value] += 1
        if not disable_tqdm:
            game_pbar.set_postfix(tally)

    if not disable_tqdm:
        game_pbar.close()

    return tally
