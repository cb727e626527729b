from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .base import BaseStrategy
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    """Uniformly random legal move."""

    name: ClassVar[str] = "random"

    rng: random.Random = field(default_factory=random.Random)

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        if not ctx.moves:
            return None
        return self.rng.choice(ctx.moves)
