"""Centralized configuration for the QuadraX engine.

Rules that the source game leaves open (placement quota, which win family
takes priority) are explicit configuration rather than constants, so every
GameState records the rules it is played under.
"""

from dataclasses import dataclass, field
from typing import Dict, Literal

BOARD_SIZE = 4
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

WinPriority = Literal["square", "line"]


# ============================================================================
# Game rules
# ============================================================================

@dataclass(frozen=True)
class RulesConfig:
    """Rules a game is played under."""
    # Pieces each player places before the movement phase begins
    pieces_per_player: int = 4
    # Pattern family reported first when a board holds both kinds of win
    win_priority: WinPriority = "square"
    description: str = field(default="", compare=False)

    def __post_init__(self):
        if not isinstance(self.pieces_per_player, int) or not (
            1 <= self.pieces_per_player <= NUM_CELLS // 2
        ):
            raise ValueError(
                f"pieces_per_player must be an integer in [1, {NUM_CELLS // 2}], "
                f"got {self.pieces_per_player!r}"
            )
        if self.win_priority not in ("square", "line"):
            raise ValueError(
                f"win_priority must be 'square' or 'line', got {self.win_priority!r}"
            )

    @property
    def total_placements(self) -> int:
        """Number of placements in the whole placement phase"""
        return 2 * self.pieces_per_player


RULES_PRESETS: Dict[str, RulesConfig] = {
    "classic": RulesConfig(
        pieces_per_player=4,
        description="4 pieces each, then move anywhere (tournament rules)",
    ),
    "full_board": RulesConfig(
        pieces_per_player=8,
        description="8 pieces each; placement fills the board",
    ),
    "line_priority": RulesConfig(
        pieces_per_player=4,
        win_priority="line",
        description="Classic quota, 4-in-a-line reported before 2x2 squares",
    ),
}


def get_rules(name: str) -> RulesConfig:
    """Look up a rules preset by name."""
    if name not in RULES_PRESETS:
        raise ValueError(
            f"Unknown rules preset: {name}. Available: {list(RULES_PRESETS.keys())}"
        )
    return RULES_PRESETS[name]


# Global default rules (can be overridden)
DEFAULT_RULES = RULES_PRESETS["classic"]


def set_default_rules(config: RulesConfig):
    """Set the global default rules."""
    global DEFAULT_RULES
    DEFAULT_RULES = config


def get_default_rules() -> RulesConfig:
    """Get the global default rules."""
    return DEFAULT_RULES


# ============================================================================
# Heuristic move scoring
# ============================================================================

@dataclass
class ScoringConfig:
    """Weights used by the scripted move scorer in analysis.tactics"""
    win: float = 1000.0
    block_win: float = 500.0
    fork: float = 200.0
    # Per-pattern bonuses for patterns free of opponent pieces
    two_of_four: float = 100.0
    one_of_four: float = 25.0
    # Disrupting an opponent pattern with two pieces and two empties
    disrupt_two: float = 80.0
    center: float = 8.0
    edge: float = 4.0
    corner: float = 2.0
    # Leaving the opponent an immediate win
    allows_win_penalty: float = 900.0
    # Allowing the opponent a double threat on their next placement
    allows_fork_penalty: float = 1500.0
