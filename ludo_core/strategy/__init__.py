"""Computer-player strategies for choosing which token to move."""

from .base import BaseStrategy
from .features import build_move_options, threat_score
from .heuristic import HeuristicStrategy
from .random_strategy import RandomStrategy
from .registry import STRATEGY_REGISTRY, available, create
from .types import MoveOption, StrategyContext

__all__ = [
    "BaseStrategy",
    "HeuristicStrategy",
    "RandomStrategy",
    "MoveOption",
    "StrategyContext",
    "STRATEGY_REGISTRY",
    "build_move_options",
    "threat_score",
    "available",
    "create",
]
