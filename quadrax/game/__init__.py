"""Game phase and turn state machine."""

from .state import GameState, MoveResult, Winner, apply_move, new_game, reset

__all__ = ["GameState", "MoveResult", "Winner", "apply_move", "new_game", "reset"]
