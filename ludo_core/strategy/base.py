from __future__ import annotations

import random
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional

from loguru import logger

from ..config import ai_config
from .features import build_move_options
from .types import MoveOption, StrategyContext

if TYPE_CHECKING:
    from ..board import BoardState


class BaseStrategy:
    """Base class for computer players with shared move selection."""

    name: ClassVar[str] = "base"
    rng: random.Random

    def decide(
        self,
        player: int,
        dice_roll: int,
        board: "BoardState",
        legal: Iterable[str] | None = None,
    ) -> Optional[str]:
        """Pick the id of the token to move, or None when nothing can move."""
        ctx = build_move_options(player, int(dice_roll), board, legal)
        move = self.select_move(ctx)
        return move.token_id if move is not None else None

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        if not ctx.moves:
            return None
        if len(ctx.moves) == 1:
            return ctx.moves[0]

        scored = [(move, self._score_move(ctx, move)) for move in ctx.moves]
        # Stable: equal scores keep token order
        scored.sort(key=lambda item: item[1], reverse=True)
        logger.debug(
            f"{self.name} scores for player {ctx.player} on {ctx.dice_roll}: "
            + ", ".join(f"{m.token_id}={s:.0f}" for m, s in scored)
        )

        (best, best_score), (runner_up, runner_score) = scored[0], scored[1]
        if abs(best_score - runner_score) < ai_config.tie_margin:
            if self.rng.random() < ai_config.tie_probability:
                return runner_up
        return best

    def _score_move(
        self, ctx: StrategyContext, move: MoveOption
    ) -> float:  # pragma: no cover - abstract
        raise NotImplementedError
