"""Game phase and turn state machine.

A GameState is owned by exactly one caller (one game session). The engine
keeps no process-wide game state; concurrent access to the same instance
needs external locking.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..analysis.threat_detector import check_win
from ..config import RulesConfig, get_default_rules
from ..core.board import PLAYERS, Board, Cell, check_player
from ..core.enumerator import is_legal, legal_moves
from ..core.moves import Move, Phase, Placement, phase_of
from ..core.patterns import Pattern
from ..core.simulator import apply_move as apply_move_to_board
from ..errors import (
    CannotResetActiveGameError,
    GameNotActiveError,
    IllegalMoveError,
    WrongPhaseMoveError,
)

logger = logging.getLogger(__name__)


class Winner(Enum):
    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"
    TIE = "tie"

    @classmethod
    def from_player(cls, player: Cell) -> "Winner":
        if player is Cell.PLAYER_ONE:
            return cls.PLAYER_ONE
        if player is Cell.PLAYER_TWO:
            return cls.PLAYER_TWO
        raise ValueError(f"{player!r} is not a player")


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one accepted move."""

    move: Move
    player: Cell
    phase: Phase  # phase after the move
    phase_changed: bool
    winning_pattern: Optional[Pattern] = None
    winner: Optional[Winner] = None

    @property
    def ended(self) -> bool:
        return self.winner is not None


@dataclass
class GameState:
    """Canonical state of one QuadraX game."""

    rules: RulesConfig = field(default_factory=get_default_rules)
    board: Board = field(default_factory=Board.empty)
    phase: Phase = Phase.PLACEMENT
    current_player: Cell = Cell.PLAYER_ONE
    placed: Dict[Cell, int] = field(default_factory=lambda: {p: 0 for p in PLAYERS})
    move_count: int = 0
    winner: Optional[Winner] = None
    active: bool = True
    history: List[Tuple[Cell, Move]] = field(default_factory=list)

    def __post_init__(self):
        self.current_player = check_player(self.current_player)
        if set(self.placed) != set(PLAYERS):
            raise ValueError("placed must have one count per player")
        self.placed = {Cell(p): int(n) for p, n in self.placed.items()}
        for player, count in self.placed.items():
            if not 0 <= count <= self.rules.pieces_per_player:
                raise ValueError(
                    f"Placed count {count} for {player.name} outside "
                    f"[0, {self.rules.pieces_per_player}]"
                )
        self.phase = Phase(self.phase)
        for player in PLAYERS:
            on_board = self.board.count(player)
            if on_board != self.placed[player]:
                raise ValueError(
                    f"{player.name} has {on_board} pieces on the board "
                    f"but {self.placed[player]} placed"
                )
        quota_met = all(n == self.rules.pieces_per_player for n in self.placed.values())
        if self.phase is Phase.MOVEMENT and not quota_met:
            raise ValueError("Movement phase requires both players to have placed their quota")
        if self.phase is Phase.PLACEMENT and quota_met and self.active:
            raise ValueError("Placement is complete; an active game must be in the movement phase")
        if self.active and self.winner is not None:
            raise ValueError("An active game cannot have a winner")
        if not self.active and self.winner is None:
            raise ValueError("An ended game must have a winner")

    @property
    def ended(self) -> bool:
        return not self.active

    def copy(self) -> "GameState":
        return GameState(
            rules=self.rules,
            board=self.board.copy(),
            phase=self.phase,
            current_player=self.current_player,
            placed=dict(self.placed),
            move_count=self.move_count,
            winner=self.winner,
            active=self.active,
            history=list(self.history),
        )

    def reply_phase(self) -> Phase:
        """Phase the opponent will move in after the current player's move."""
        if self.phase is Phase.PLACEMENT:
            quota = self.rules.pieces_per_player
            opponent = self.current_player.opponent()
            if self.placed[self.current_player] + 1 >= quota and self.placed[opponent] >= quota:
                return Phase.MOVEMENT
        return self.phase

    def legal_moves(self) -> List[Move]:
        """Legal moves for the player to move (empty once the game ends)."""
        if not self.active:
            return []
        return legal_moves(self.board, self.current_player, self.phase)

    def outcome(self) -> Dict[str, Optional[str]]:
        """Terminal outcome as consumed by settlement: {ended, winner}."""
        return {
            "ended": not self.active,
            "winner": self.winner.value if self.winner is not None else None,
        }


def new_game(rules: Optional[RulesConfig] = None) -> GameState:
    """Fresh game: empty board, PLAYER_ONE to move, placement phase."""
    return GameState(rules=rules or get_default_rules())


def apply_move(state: GameState, move: Move) -> MoveResult:
    """Validate and apply move for the player to move.

    Raises:
        GameNotActiveError: the game has ended
        WrongPhaseMoveError: the move's shape does not match the phase
        IllegalMoveError: the move is not among the legal moves

    A rejected move leaves state untouched.
    """
    if not state.active:
        raise GameNotActiveError("Game has ended; reset it to play again")
    if phase_of(move) is not state.phase:
        raise WrongPhaseMoveError(
            f"{type(move).__name__} submitted during {state.phase.value} phase"
        )
    mover = state.current_player
    if not is_legal(state.board, mover, state.phase, move):
        raise IllegalMoveError(f"{move} is not legal for {mover.name}")

    state.board = apply_move_to_board(state.board, move, mover)
    state.move_count += 1
    if isinstance(move, Placement):
        state.placed[mover] += 1
    state.history.append((mover, move))
    logger.debug("Move %d: %s plays %s", state.move_count, mover.name, move)

    pattern = check_win(state.board, mover, state.rules)
    if pattern is not None:
        state.active = False
        state.winner = Winner.from_player(mover)
        logger.info(
            "%s wins with %s %s", mover.name, pattern.kind.value, list(pattern.indices)
        )
        return MoveResult(move, mover, state.phase, False, pattern, state.winner)

    phase_changed = False
    quota = state.rules.pieces_per_player
    if state.phase is Phase.PLACEMENT and all(
        state.placed[p] >= quota for p in PLAYERS
    ):
        state.phase = Phase.MOVEMENT
        phase_changed = True
        logger.info("Placement complete after %d moves; movement phase begins",
                    state.move_count)

    next_player = mover.opponent()
    if state.phase is Phase.MOVEMENT and not legal_moves(state.board, next_player, state.phase):
        state.active = False
        state.winner = Winner.TIE
        logger.info("%s has no legal movement; game is a tie", next_player.name)
        return MoveResult(move, mover, state.phase, phase_changed, None, state.winner)

    state.current_player = next_player
    return MoveResult(move, mover, state.phase, phase_changed)


def reset(state: GameState) -> GameState:
    """Fresh initial state with the same rules; only allowed once a game ended."""
    if state.active:
        raise CannotResetActiveGameError("Cannot reset a game that is still active")
    return new_game(state.rules)
