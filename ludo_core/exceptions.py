class LudoError(Exception):
    """Base exception for corrupted or inconsistent game state."""

    pass


class InvariantError(LudoError):
    """Raised when a token or board violates a state invariant."""

    pass


class UnknownTokenError(LudoError, KeyError):
    """Raised when a token id does not exist on the board."""

    pass


class IllegalMoveError(LudoError):
    """Raised when the engine is asked to apply a move that is not legal."""

    pass
