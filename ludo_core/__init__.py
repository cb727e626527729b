"""
Ludo rules engine.
Move legality, captures, turn control and a heuristic computer player for
2-4 player four-color Ludo.
"""

from .board import BoardState
from .config import ai_config, config, session_config
from .controller import new_game
from .game import LudoGame
from .rules import (
    apply_move,
    check_winner,
    is_legal,
    legal_moves,
    next_player,
    roll_dice,
)
from .state import GameState
from .strategy import HeuristicStrategy, RandomStrategy
from .token import Token
from .types import Color, GameEvent, MoveRecord, MoveResult, Phase, TokenState

__all__ = [
    "LudoGame",
    "GameState",
    "BoardState",
    "Token",
    "TokenState",
    "Color",
    "Phase",
    "GameEvent",
    "MoveResult",
    "MoveRecord",
    "HeuristicStrategy",
    "RandomStrategy",
    "new_game",
    "roll_dice",
    "is_legal",
    "legal_moves",
    "apply_move",
    "check_winner",
    "next_player",
    "config",
    "ai_config",
    "session_config",
]
