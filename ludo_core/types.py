from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from .board import BoardState
    from .token import Token


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3


class TokenState(Enum):
    """Lifecycle of a token."""

    AT_BASE = "at_base"
    ON_BOARD = "on_board"
    FINISHED = "finished"


class Phase(Enum):
    SETUP = "setup"
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_SELECTION = "awaiting_selection"
    RESOLVING = "resolving"
    GAME_OVER = "game_over"


class GameEvent(Enum):
    """Discrete triggers consumed by the sound layer."""

    DICE_ROLL = "dice_roll"
    SIX = "six"
    THREE_SIXES = "three_sixes"
    NO_MOVES = "no_moves"
    TOKEN_OUT = "token_out"
    TOKEN_MOVE = "token_move"
    CAPTURE = "capture"
    TOKEN_HOME = "token_home"
    BONUS_TURN = "bonus_turn"
    TURN_CHANGE = "turn_change"
    WIN = "win"


@dataclass(frozen=True, slots=True)
class MoveResult:
    board: "BoardState"
    token: "Token"  # mover after the move
    old_progress: int
    captured: Optional["Token"] = None  # victim as it stood before capture

    @property
    def exited_base(self) -> bool:
        return self.old_progress < 0

    @property
    def finished(self) -> bool:
        return self.token.is_finished()

    @property
    def entered_home_lane(self) -> bool:
        return self.token.in_home_lane()


@dataclass(frozen=True, slots=True)
class MoveRecord:
    player: int
    token_id: str
    dice_value: int
    old_progress: int
    new_progress: int
    captured_id: Optional[str] = None
