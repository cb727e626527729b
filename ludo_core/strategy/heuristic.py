from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar

from ..config import ai_config
from .base import BaseStrategy
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class HeuristicStrategy(BaseStrategy):
    """Finishing first, then captures, safety and steady progress.

    Landing threat is subtracted and leaving a threatened cell is rewarded, so
    the computer player weighs opponents one roll ahead.
    """

    name: ClassVar[str] = "heuristic"

    rng: random.Random = field(default_factory=random.Random)
    finish_bonus: float = ai_config.finish_bonus
    capture_bonus: float = ai_config.capture_bonus
    deep_capture_bonus: float = ai_config.deep_capture_bonus
    deep_capture_progress: int = ai_config.deep_capture_progress
    exit_no_tokens_bonus: float = ai_config.exit_no_tokens_bonus
    exit_one_token_bonus: float = ai_config.exit_one_token_bonus
    exit_default_bonus: float = ai_config.exit_default_bonus
    exit_max_finished: int = ai_config.exit_max_finished
    safe_landing_bonus: float = ai_config.safe_landing_bonus
    home_lane_bonus: float = ai_config.home_lane_bonus
    progress_weight: float = ai_config.progress_weight
    escape_bonus: float = ai_config.escape_bonus
    leave_safe_penalty: float = ai_config.leave_safe_penalty
    leave_safe_max_progress: int = ai_config.leave_safe_max_progress

    def _score_move(self, ctx: StrategyContext, move: MoveOption) -> float:
        score = 0.0

        # 1) Finishing beats everything else
        if move.finishes:
            score += self.finish_bonus

        # 2) Captures, worth more against far-travelled prey
        if move.can_capture:
            score += self.capture_bonus
            if move.captured_progress > self.deep_capture_progress:
                score += self.deep_capture_bonus

        # 3) Board presence on a six
        if move.exits_base:
            if ctx.on_board_count == 0:
                score += self.exit_no_tokens_bonus
            elif ctx.on_board_count == 1 and ctx.finished_count < self.exit_max_finished:
                score += self.exit_one_token_bonus
            else:
                score += self.exit_default_bonus
            return score

        # 4) Positional bonuses for tokens already out
        if move.lands_on_safe:
            score += self.safe_landing_bonus
        if move.enters_home_lane:
            score += self.home_lane_bonus

        # 5) Prefer the most travelled token
        score += self.progress_weight * move.current_progress

        # 6) Danger at the landing cell, relief for escaping a threatened one
        score -= move.landing_threat
        if move.current_threat > 0:
            score += self.escape_bonus

        # 7) Keep a safe token parked when a six could bring out another
        if (
            move.dice_roll == 6
            and move.on_safe_cell
            and move.current_progress < self.leave_safe_max_progress
        ):
            score -= self.leave_safe_penalty

        return score
