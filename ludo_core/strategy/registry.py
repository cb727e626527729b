from __future__ import annotations

import random
from typing import Dict, Type

from .base import BaseStrategy
from .heuristic import HeuristicStrategy
from .random_strategy import RandomStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    HeuristicStrategy.name: HeuristicStrategy,
    RandomStrategy.name: RandomStrategy,
}


def create(strategy_name: str, rng: random.Random | None = None, **kwargs) -> BaseStrategy:
    cls = STRATEGY_REGISTRY.get(strategy_name.lower())
    if cls is None:
        raise KeyError(f"Unknown strategy '{strategy_name}'.")
    if rng is not None:
        kwargs["rng"] = rng
    return cls(**kwargs)


def available() -> Dict[str, Type[BaseStrategy]]:
    return dict(STRATEGY_REGISTRY)
