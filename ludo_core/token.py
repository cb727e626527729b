"""
Token representation for Ludo game.
Each active player owns 4 tokens that travel the ring and their home lane.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .config import config
from .exceptions import InvariantError
from .geometry import absolute_cell
from .types import Color, TokenState


@dataclass(frozen=True, slots=True)
class Token:
    """
    Immutable token state. Moving a token yields a new instance.
    """

    player: int  # slot 0..3
    index: int  # 0..3 within the player
    state: TokenState = TokenState.AT_BASE
    progress: int = config.BASE_PROGRESS  # -1 base, 0..51 ring, 52..55 lane, 56 finished
    ring_cell: int = field(default=-1, init=False, compare=False)

    def __post_init__(self):
        """Validate state/progress agreement and cache the ring cell."""
        if self.state is TokenState.AT_BASE:
            consistent = self.progress == config.BASE_PROGRESS
        elif self.state is TokenState.FINISHED:
            consistent = self.progress == config.FINISH_PROGRESS
        else:
            consistent = 0 <= self.progress < config.FINISH_PROGRESS
        if not consistent:
            raise InvariantError(
                f"Token {self.player}-{self.index} cannot be {self.state.value} "
                f"at progress {self.progress}"
            )
        object.__setattr__(self, "ring_cell", absolute_cell(self.player, self.progress))

    @classmethod
    def at_base(cls, player: int, index: int) -> "Token":
        return cls(player=player, index=index)

    @property
    def token_id(self) -> str:
        return f"{self.player}-{self.index}"

    @property
    def color(self) -> Color:
        return Color(self.player)

    def is_at_base(self) -> bool:
        return self.state is TokenState.AT_BASE

    def is_on_board(self) -> bool:
        return self.state is TokenState.ON_BOARD

    def is_finished(self) -> bool:
        return self.state is TokenState.FINISHED

    def on_ring(self) -> bool:
        """OnBoard and still on the shared ring (capturable zone)."""
        return self.is_on_board() and self.progress < config.HOME_LANE_START

    def in_home_lane(self) -> bool:
        return (
            self.is_on_board()
            and config.HOME_LANE_START <= self.progress < config.FINISH_PROGRESS
        )

    def moved_to(self, progress: int) -> "Token":
        state = (
            TokenState.FINISHED
            if progress == config.FINISH_PROGRESS
            else TokenState.ON_BOARD
        )
        return replace(self, state=state, progress=progress)

    def sent_to_base(self) -> "Token":
        return replace(self, state=TokenState.AT_BASE, progress=config.BASE_PROGRESS)

    def to_dict(self) -> dict:
        """Convert token to dictionary for presentation consumers."""
        return {
            "token_id": self.token_id,
            "player": self.player,
            "color": self.color.name.lower(),
            "index": self.index,
            "state": self.state.value,
            "progress": self.progress,
            "ring_cell": self.ring_cell,
        }

    def __str__(self) -> str:
        return f"Token({self.token_id}: {self.state.value} at {self.progress})"
