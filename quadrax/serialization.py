"""Wire models for boards, moves and game states.

Boards travel as 16 row-major ints in {0, 1, 2}. A move carrying a "from"
key is a movement; one without it is a placement.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import RulesConfig
from .core.board import Board, Cell
from .core.moves import Move, Movement, Phase, Placement
from .game.state import GameState, Winner

CellInt = Literal[0, 1, 2]
PlayerInt = Literal[1, 2]


class PlacementModel(BaseModel):
    """Placement of a new piece."""
    model_config = ConfigDict(extra="forbid")

    position: int = Field(..., ge=0, lt=16)


class MovementModel(BaseModel):
    """Relocation of an existing piece."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    from_: int = Field(..., ge=0, lt=16, alias="from")
    to: int = Field(..., ge=0, lt=16)


MoveModel = Union[PlacementModel, MovementModel]


class HistoryEntryModel(BaseModel):
    """One accepted move and the player who made it."""
    model_config = ConfigDict(extra="forbid")

    player: PlayerInt
    move: MoveModel


class OutcomeModel(BaseModel):
    """Terminal outcome consumed by settlement."""
    ended: bool
    winner: Optional[Literal["player_one", "player_two", "tie"]] = None


class GameStateModel(BaseModel):
    """Serializable snapshot of a GameState."""
    board: List[CellInt] = Field(..., min_length=16, max_length=16)
    phase: Literal["placement", "movement"]
    current_player: PlayerInt
    placed: Dict[int, int]
    move_count: int = Field(..., ge=0)
    winner: Optional[Literal["player_one", "player_two", "tie"]] = None
    active: bool
    pieces_per_player: int = Field(4, ge=1, le=8)
    win_priority: Literal["square", "line"] = "square"
    history: List[HistoryEntryModel] = Field(default_factory=list)

    @field_validator("placed")
    @classmethod
    def _both_players(cls, value: Dict[int, int]) -> Dict[int, int]:
        if set(value) != {1, 2}:
            raise ValueError("placed must have counts for players 1 and 2")
        return value

    @model_validator(mode="after")
    def _consistent(self) -> "GameStateModel":
        for player in (1, 2):
            if self.board.count(player) != self.placed[player]:
                raise ValueError(
                    f"board holds {self.board.count(player)} pieces of player {player} "
                    f"but placed says {self.placed[player]}"
                )
        if self.phase == "movement" and any(
            n != self.pieces_per_player for n in self.placed.values()
        ):
            raise ValueError("movement phase requires both quotas to be placed")
        if self.active != (self.winner is None):
            raise ValueError("an ended game needs a winner and an active game must not have one")
        return self


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def board_to_list(board: Board) -> List[int]:
    return board.to_list()


def board_from_list(values: List[int]) -> Board:
    return Board.from_list(values)


def move_to_dict(move: Move) -> Dict[str, int]:
    if isinstance(move, Placement):
        return PlacementModel(position=move.position).model_dump()
    if isinstance(move, Movement):
        return MovementModel(from_=move.from_, to=move.to).model_dump(by_alias=True)
    raise TypeError(f"Not a move: {move!r}")


def move_from_dict(data: Dict[str, Any]) -> Move:
    """Parse a move, discriminating on the presence of "from"."""
    if "from" in data or "from_" in data:
        model = MovementModel.model_validate(data)
        return Movement(model.from_, model.to)
    model = PlacementModel.model_validate(data)
    return Placement(model.position)


def _move_from_model(model: MoveModel) -> Move:
    if isinstance(model, MovementModel):
        return Movement(model.from_, model.to)
    return Placement(model.position)


def state_to_model(state: GameState) -> GameStateModel:
    return GameStateModel(
        board=state.board.to_list(),
        phase=state.phase.value,
        current_player=int(state.current_player),
        placed={int(p): n for p, n in state.placed.items()},
        move_count=state.move_count,
        winner=state.winner.value if state.winner is not None else None,
        active=state.active,
        pieces_per_player=state.rules.pieces_per_player,
        win_priority=state.rules.win_priority,
        history=[
            {"player": int(player), "move": move_to_dict(move)}
            for player, move in state.history
        ],
    )


def state_from_model(model: GameStateModel) -> GameState:
    return GameState(
        rules=RulesConfig(
            pieces_per_player=model.pieces_per_player,
            win_priority=model.win_priority,
        ),
        board=Board.from_list(model.board),
        phase=Phase(model.phase),
        current_player=Cell(model.current_player),
        placed={Cell(p): n for p, n in model.placed.items()},
        move_count=model.move_count,
        winner=Winner(model.winner) if model.winner is not None else None,
        active=model.active,
        history=[
            (Cell(entry.player), _move_from_model(entry.move))
            for entry in model.history
        ],
    )


def state_to_json(state: GameState) -> str:
    return state_to_model(state).model_dump_json(by_alias=True)


def state_from_json(payload: str) -> GameState:
    return state_from_model(GameStateModel.model_validate_json(payload))


def outcome_of(state: GameState) -> OutcomeModel:
    return OutcomeModel(**state.outcome())
