from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from .board import BoardState
from .config import config
from .types import GameEvent, MoveRecord, Phase


@dataclass(frozen=True, slots=True)
class GameState:
    """Public snapshot of a session. Every transition returns a new one."""

    phase: Phase = Phase.SETUP
    player_count: int = 4
    computer_slots: FrozenSet[int] = frozenset()
    slots: Tuple[int, ...] = ()
    board: Optional[BoardState] = None
    current_player: int = 0
    dice_value: Optional[int] = None
    consecutive_sixes: int = 0
    legal_tokens: FrozenSet[str] = frozenset()
    selected_token: Optional[str] = None  # only set while resolving
    winner: Optional[int] = None
    message: str = ""
    events: Tuple[GameEvent, ...] = ()
    history: Tuple[MoveRecord, ...] = field(default=(), repr=False)

    @property
    def current_name(self) -> str:
        return config.PLAYER_NAMES[self.current_player]

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def is_computer(self, player: int) -> bool:
        return player in self.computer_slots

    def to_dict(self) -> dict:
        """Serializable view for presentation consumers."""
        return {
            "phase": self.phase.value,
            "player_count": self.player_count,
            "slots": list(self.slots),
            "computer_slots": sorted(self.computer_slots),
            "current_player": self.current_player,
            "dice_value": self.dice_value,
            "consecutive_sixes": self.consecutive_sixes,
            "moveable_tokens": sorted(self.legal_tokens),
            "tokens": (
                [tok.to_dict() for tok in self.board.all_tokens()]
                if self.board is not None
                else []
            ),
            "winner": self.winner,
            "message": self.message,
            "events": [event.value for event in self.events],
        }
