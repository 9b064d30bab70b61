"""
QuadraX: 4x4 tic-tac-toe with a placement phase and a movement phase.

Components:
- core: board model, pattern catalog, moves, simulation and move generation
- analysis: win/threat evaluation, tactics and the scripted move selector
- game: phase/turn state machine
- env: Gymnasium environment over the state machine
- serialization: pydantic wire models
- search: depth-limited alpha-beta move search
"""

from .analysis import check_win, check_win_all, find_threats, find_winning_moves, select_move
from .config import RulesConfig, get_default_rules, get_rules, set_default_rules
from .core import Board, Cell, Movement, Phase, Placement, legal_moves
from .errors import QuadraXError
from .game import GameState, Winner, apply_move, new_game, reset
from .search import MinimaxSearcher

__version__ = "0.1.0"
