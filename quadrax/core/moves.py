"""Move and phase types.

A move is one of two shapes: a Placement drops a new piece on an empty cell,
a Movement relocates one of the mover's pieces to any empty cell. Callers
dispatch with isinstance over exactly these two classes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import SamePositionError
from .board import check_index


class Phase(Enum):
    PLACEMENT = "placement"
    MOVEMENT = "movement"


@dataclass(frozen=True)
class Placement:
    position: int

    def __post_init__(self):
        object.__setattr__(self, "position", check_index(self.position))

    @property
    def target(self) -> int:
        return self.position

    def __str__(self) -> str:
        return f"place@{self.position}"


@dataclass(frozen=True)
class Movement:
    from_: int
    to: int

    def __post_init__(self):
        object.__setattr__(self, "from_", check_index(self.from_))
        object.__setattr__(self, "to", check_index(self.to))
        if self.from_ == self.to:
            raise SamePositionError(self.from_)

    @property
    def target(self) -> int:
        return self.to

    def __str__(self) -> str:
        return f"{self.from_}->{self.to}"


Move = Union[Placement, Movement]


def phase_of(move: Move) -> Phase:
    """Phase in which a move of this shape is legal."""
    if isinstance(move, Placement):
        return Phase.PLACEMENT
    if isinstance(move, Movement):
        return Phase.MOVEMENT
    raise TypeError(f"Not a move: {move!r}")
