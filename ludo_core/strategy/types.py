from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..board import BoardState
    from ..token import Token


@dataclass(slots=True)
class MoveOption:
    """Structured metadata about a legal move."""

    token: "Token"
    dice_roll: int
    current_progress: int
    new_progress: int
    exits_base: bool
    finishes: bool
    enters_home_lane: bool
    lands_on_ring: bool
    lands_on_safe: bool
    can_capture: bool
    captured_progress: Optional[int]
    landing_threat: float
    current_threat: float
    on_safe_cell: bool

    @property
    def token_id(self) -> str:
        return self.token.token_id


@dataclass(slots=True)
class StrategyContext:
    """Input payload shared by strategies."""

    player: int
    dice_roll: int
    board: "BoardState"
    moves: List[MoveOption]
    on_board_count: int
    finished_count: int
