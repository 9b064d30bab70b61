"""Exception types raised by the QuadraX engine."""


class QuadraXError(Exception):
    """Base class for all engine errors."""


class IndexOutOfRangeError(QuadraXError, IndexError):
    """Board index outside [0, 16)."""

    def __init__(self, index):
        super().__init__(f"Board index {index} out of range [0, 16)")
        self.index = index


# ---------------------------------------------------------------------------
# Move simulation errors
# ---------------------------------------------------------------------------

class InvalidMoveError(QuadraXError, ValueError):
    """A hypothetical or real move cannot be applied to the board."""


class CellOccupiedError(InvalidMoveError):
    def __init__(self, index: int):
        super().__init__(f"Cell {index} is already occupied")
        self.index = index


class NotOwnerError(InvalidMoveError):
    def __init__(self, index: int, player):
        super().__init__(f"Cell {index} does not hold a piece of {player!r}")
        self.index = index
        self.player = player


class SamePositionError(InvalidMoveError):
    def __init__(self, index: int):
        super().__init__(f"Movement source and target are both {index}")
        self.index = index


# ---------------------------------------------------------------------------
# State machine errors
# ---------------------------------------------------------------------------

class GameRuleError(QuadraXError):
    """A move or request that the game rules reject in the current state."""


class WrongPhaseMoveError(GameRuleError):
    pass


class IllegalMoveError(GameRuleError):
    pass


class GameNotActiveError(GameRuleError):
    pass


class CannotResetActiveGameError(GameRuleError):
    pass
