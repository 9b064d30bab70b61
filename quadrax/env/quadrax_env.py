import logging
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ..config import NUM_CELLS, RulesConfig, get_default_rules, get_rules
from ..core.board import Cell
from ..core.moves import Move, Movement, Phase, Placement
from ..errors import QuadraXError
from ..game.state import Winner, apply_move, new_game

logger = logging.getLogger(__name__)

# Actions 0..15 place on a cell; 16 + from * 16 + to moves a piece
NUM_ACTIONS = NUM_CELLS + NUM_CELLS * NUM_CELLS


def encode_action(move: Move) -> int:
    """Map a move to its discrete action index."""
    if isinstance(move, Placement):
        return move.position
    if isinstance(move, Movement):
        return NUM_CELLS + move.from_ * NUM_CELLS + move.to
    raise TypeError(f"Not a move: {move!r}")


def decode_action(action: int) -> Move:
    """Inverse of encode_action; raises ValueError for out-of-range actions."""
    action = int(action)
    if not 0 <= action < NUM_ACTIONS:
        raise ValueError(f"Action {action} outside [0, {NUM_ACTIONS})")
    if action < NUM_CELLS:
        return Placement(action)
    from_, to = divmod(action - NUM_CELLS, NUM_CELLS)
    return Movement(from_, to)


class QuadraXEnv(gym.Env):
    """QuadraX environment following Gymnasium interface"""

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(self, rules: Optional[RulesConfig] = None, rule_profile: Optional[str] = None,
                 render_mode: Optional[str] = None):
        super().__init__()
        if rules is not None and rule_profile is not None:
            raise ValueError("Pass either rules or rule_profile, not both")
        if rule_profile is not None:
            rules = get_rules(rule_profile)
        self.rules = rules or get_default_rules()
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(NUM_ACTIONS)

        # Observation space: raw board (0 empty, 1/2 players) + metadata
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=2, shape=(NUM_CELLS,), dtype=np.int8),
                "current_player": spaces.Discrete(2),
                "phase": spaces.Discrete(2),
                "action_mask": spaces.Box(
                    low=0, high=1, shape=(NUM_ACTIONS,), dtype=np.bool_
                ),
            }
        )

        self.reset()

    def reset(
        self, seed: Optional[int] = None, options: Optional[Dict] = None
    ) -> Tuple[Dict, Dict]:
        super().reset(seed=seed)
        self.state = new_game(self.rules)
        self.invalid_move = False
        return self._get_observation(), {}

    def step(self, action: int) -> Tuple[Dict, float, bool, bool, Dict[str, Any]]:
        # If game already over, remain terminated and return current observation
        if self.terminated:
            return self._get_observation(), 0.0, True, False, {"game_over": True}

        if not isinstance(action, (int, np.integer)):
            return self._reject(f"non-integer action {action!r}")
        try:
            move = decode_action(action)
            mover = self.state.current_player
            result = apply_move(self.state, move)
        except (ValueError, QuadraXError) as exc:
            return self._reject(str(exc))

        info: Dict[str, Any] = {"move": str(move), "phase": self.state.phase.value}
        if result.phase_changed:
            info["phase_changed"] = True
        if result.winner is Winner.TIE:
            info["draw"] = True
            return self._get_observation(), 0.0, True, False, info
        if result.winner is not None:
            info["winner"] = int(mover)
            info["pattern"] = list(result.winning_pattern.indices)
            return self._get_observation(), 1.0, True, False, info

        return self._get_observation(), 0.0, False, False, info

    def _reject(self, reason: str) -> Tuple[Dict, float, bool, bool, Dict[str, Any]]:
        """Invalid move - terminate episode with a penalty for the mover."""
        logger.debug("Invalid action rejected: %s", reason)
        self.invalid_move = True
        return self._get_observation(), -1.0, True, False, {"invalid_move": True, "reason": reason}

    def _get_observation(self) -> Dict:
        return {
            "board": self.state.board.cells.copy(),
            "current_player": 0 if self.state.current_player is Cell.PLAYER_ONE else 1,
            "phase": 0 if self.state.phase is Phase.PLACEMENT else 1,
            "action_mask": self._get_action_mask(),
        }

    def _get_action_mask(self) -> np.ndarray:
        """Return mask of legal actions"""
        mask = np.zeros(NUM_ACTIONS, dtype=np.bool_)
        for move in self.state.legal_moves():
            mask[encode_action(move)] = True
        return mask

    def get_legal_actions(self) -> np.ndarray:
        """Get list of legal action indices"""
        return np.flatnonzero(self._get_action_mask())

    @property
    def terminated(self) -> bool:
        return self.invalid_move or not self.state.active

    def render(self) -> Optional[str]:
        """Render the board state"""
        text = self.state.board.render()
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text + "\n")
        return None
