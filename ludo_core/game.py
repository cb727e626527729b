"""Session object owning one game's state, its dice and its computer players."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional

from loguru import logger

from . import controller
from .config import session_config
from .exceptions import InvariantError
from .rules import legal_moves, roll_dice
from .state import GameState
from .strategy import BaseStrategy, create
from .types import Phase


@dataclass(slots=True)
class LudoGame:
    """Holds the current ``GameState`` and routes triggers through the reducer.

    ``rng`` drives the dice and is handed to computer strategies created here,
    so a seeded instance replays identically.
    """

    rng: random.Random = field(default_factory=random.Random)
    strategies: Dict[int, BaseStrategy] = field(default_factory=dict)
    default_strategy: str = session_config.computer_strategy
    state: GameState = field(default_factory=controller.initial_state)

    # --- Setup ---
    def start(
        self, player_count: int = session_config.num_players, computer_slots: Iterable[int] = ()
    ) -> GameState:
        """Configure seats and begin a fresh game.

        Unsupported player counts keep the previous count (see ``set_player_count``).
        """
        state = controller.reset(self.state)
        state = controller.set_player_count(state, player_count)
        for slot in computer_slots:
            state = controller.set_computer(state, slot, True)
        self.state = controller.start_game(state)
        return self.state

    def set_player_count(self, player_count: int) -> GameState:
        self.state = controller.set_player_count(self.state, player_count)
        return self.state

    def set_computer(self, slot: int, is_computer: bool = True) -> GameState:
        self.state = controller.set_computer(self.state, slot, is_computer)
        return self.state

    def start_game(self) -> GameState:
        self.state = controller.start_game(self.state)
        return self.state

    def reset(self) -> GameState:
        self.state = controller.reset(self.state)
        return self.state

    # --- Play ---
    def roll_dice(self) -> int:
        return roll_dice(self.rng)

    def roll(self, dice_value: Optional[int] = None) -> GameState:
        """Roll (or apply a given value) for the current player."""
        if self.state.phase is not Phase.AWAITING_ROLL:
            logger.debug(f"Ignoring roll in phase {self.state.phase.value}")
            return self.state
        value = self.roll_dice() if dice_value is None else dice_value
        self.state = controller.roll(self.state, value)
        return self.state

    def select(self, token_id: str) -> GameState:
        self.state = controller.select(self.state, token_id)
        return self.state

    def legal_moves(self, player: Optional[int] = None, dice_value: Optional[int] = None) -> FrozenSet[str]:
        if self.state.board is None:
            return frozenset()
        player = self.state.current_player if player is None else player
        dice_value = self.state.dice_value if dice_value is None else dice_value
        if dice_value is None:
            return frozenset()
        return legal_moves(player, dice_value, self.state.board)

    # --- Computer players ---
    def is_current_player_computer(self) -> bool:
        return self.state.is_computer(self.state.current_player)

    def strategy_for(self, player: int) -> BaseStrategy:
        strategy = self.strategies.get(player)
        if strategy is None:
            strategy = create(self.default_strategy, rng=self.rng)
            self.strategies[player] = strategy
        return strategy

    def play_computer_step(self) -> bool:
        """Perform one roll or one selection for a computer seat.

        Returns False when the current seat is human or the game is not in a
        phase a computer can act on.
        """
        state = self.state
        if state.phase not in (Phase.AWAITING_ROLL, Phase.AWAITING_SELECTION):
            return False
        if not self.is_current_player_computer():
            return False

        if state.phase is Phase.AWAITING_ROLL:
            self.roll()
            return True

        player = state.current_player
        choice = self.strategy_for(player).decide(
            player, state.dice_value, state.board, state.legal_tokens
        )
        if choice is None:
            raise InvariantError(f"Strategy returned no move for player {player}")
        logger.debug(f"Computer player {player} moves {choice} on {state.dice_value}")
        self.select(choice)
        return True

    def run_computer_turns(self, max_steps: int = session_config.max_steps) -> GameState:
        """Let computer seats act until a human must act or the game ends."""
        for _ in range(max_steps):
            if not self.play_computer_step():
                break
        else:
            logger.warning(f"Stopped computer play after {max_steps} steps")
        return self.state
