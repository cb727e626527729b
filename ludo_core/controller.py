"""Turn controller: the game phases as a pure reducer.

Each transition takes the current ``GameState`` plus a trigger and returns the
next ``GameState``. Triggers that do not fit the current phase return the
state unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from loguru import logger

from .board import BoardState
from .config import config
from .rules import apply_move, check_winner, legal_moves, next_player, next_slot
from .state import GameState
from .types import GameEvent, MoveRecord, Phase


def _name(player: int) -> str:
    return config.PLAYER_NAMES[player]


def _reject(state: GameState, reason: str) -> GameState:
    logger.debug(f"Ignoring trigger in phase {state.phase.value}: {reason}")
    return state


def active_slots(player_count: int) -> tuple[int, ...]:
    return config.ACTIVE_SLOTS[player_count]


def initial_state() -> GameState:
    return GameState()


def new_game(player_count: int = 4, computer_slots: Iterable[int] = ()) -> GameState:
    """Configured and started game.

    Raises ``ValueError`` for a player count other than 2, 3 or 4.
    """
    if player_count not in config.ACTIVE_SLOTS:
        raise ValueError(f"player_count must be 2, 3 or 4, got {player_count}")
    state = replace(
        initial_state(),
        player_count=player_count,
        computer_slots=frozenset(computer_slots),
    )
    return start_game(state)


# --- Setup ---
def set_player_count(state: GameState, player_count: int) -> GameState:
    if state.phase is not Phase.SETUP:
        return _reject(state, "player count can only change during setup")
    if player_count not in config.ACTIVE_SLOTS:
        logger.warning(f"Unsupported player count {player_count}; keeping {state.player_count}")
        return state
    return replace(state, player_count=player_count)


def set_computer(state: GameState, slot: int, is_computer: bool = True) -> GameState:
    if state.phase is not Phase.SETUP:
        return _reject(state, "computer seats can only change during setup")
    if not 0 <= slot < config.MAX_PLAYERS:
        logger.warning(f"Unknown slot {slot}")
        return state
    slots = set(state.computer_slots)
    if is_computer:
        slots.add(slot)
    else:
        slots.discard(slot)
    return replace(state, computer_slots=frozenset(slots))


def start_game(state: GameState) -> GameState:
    if state.phase is not Phase.SETUP:
        return _reject(state, "game already started")
    slots = active_slots(state.player_count)
    first = slots[0]
    logger.debug(f"Starting {state.player_count}-player game with slots {slots}")
    return replace(
        state,
        phase=Phase.AWAITING_ROLL,
        slots=slots,
        # Computer flags only matter for seats in play
        computer_slots=frozenset(s for s in state.computer_slots if s in slots),
        board=BoardState.new(slots),
        current_player=first,
        dice_value=None,
        consecutive_sixes=0,
        legal_tokens=frozenset(),
        selected_token=None,
        winner=None,
        message=f"{_name(first)}'s turn. Roll the dice!",
        events=(),
        history=(),
    )


# --- Play ---
def roll(state: GameState, dice_value: int) -> GameState:
    if state.phase is not Phase.AWAITING_ROLL:
        return _reject(state, "roll while not awaiting a roll")
    if not config.DICE_MIN <= dice_value <= config.DICE_MAX:
        return _reject(state, f"dice value {dice_value} out of range")

    player = state.current_player
    is_six = dice_value == config.EXIT_ROLL
    events = [GameEvent.DICE_ROLL]

    if is_six and state.consecutive_sixes + 1 >= config.MAX_CONSECUTIVE_SIXES:
        following = next_slot(player, state.slots)
        logger.debug(f"Player {player} rolled three sixes; turn forfeited")
        return replace(
            state,
            dice_value=dice_value,
            current_player=following,
            consecutive_sixes=0,
            legal_tokens=frozenset(),
            message=f"Three 6s in a row! Turn lost. {_name(following)}'s turn.",
            events=(*events, GameEvent.THREE_SIXES, GameEvent.TURN_CHANGE),
        )

    moveable = legal_moves(player, dice_value, state.board)
    if not moveable:
        # Wasted roll: no bonus even on a six
        following = next_slot(player, state.slots)
        return replace(
            state,
            dice_value=dice_value,
            current_player=following,
            consecutive_sixes=0,
            legal_tokens=frozenset(),
            message=f"No moves available. {_name(following)}'s turn.",
            events=(*events, GameEvent.NO_MOVES, GameEvent.TURN_CHANGE),
        )

    if is_six:
        events.append(GameEvent.SIX)
    prompt = "Click your token to move." if len(moveable) == 1 else "Choose a token to move."
    return replace(
        state,
        phase=Phase.AWAITING_SELECTION,
        dice_value=dice_value,
        consecutive_sixes=state.consecutive_sixes + 1 if is_six else 0,
        legal_tokens=moveable,
        message=f"Rolled {dice_value}! {prompt}",
        events=tuple(events),
    )


def select(state: GameState, token_id: str) -> GameState:
    if state.phase is not Phase.AWAITING_SELECTION:
        return _reject(state, "selection while not awaiting a selection")
    if token_id not in state.legal_tokens:
        return _reject(state, f"token {token_id} is not a legal choice")
    resolving = replace(state, phase=Phase.RESOLVING, selected_token=token_id)
    return resolve(resolving)


def resolve(state: GameState) -> GameState:
    """Apply the selected move and settle win, bonus turn or turn change."""
    if state.phase is not Phase.RESOLVING:
        return _reject(state, "nothing to resolve")
    player = state.current_player
    dice_value = state.dice_value
    token = state.board.token(state.selected_token)
    result = apply_move(token, dice_value, state.board)
    captured = result.captured

    events = [GameEvent.TOKEN_OUT if result.exited_base else GameEvent.TOKEN_MOVE]
    if captured is not None:
        events.append(GameEvent.CAPTURE)
    if result.finished:
        events.append(GameEvent.TOKEN_HOME)

    record = MoveRecord(
        player=player,
        token_id=token.token_id,
        dice_value=dice_value,
        old_progress=result.old_progress,
        new_progress=result.token.progress,
        captured_id=captured.token_id if captured is not None else None,
    )
    resolved = replace(
        state,
        board=result.board,
        legal_tokens=frozenset(),
        selected_token=None,
        history=(*state.history, record),
    )

    if check_winner(player, result.board):
        logger.debug(f"Player {player} wins after {len(resolved.history)} moves")
        return replace(
            resolved,
            phase=Phase.GAME_OVER,
            winner=player,
            message=f"{state.current_name} wins!",
            events=(*events, GameEvent.WIN),
        )

    following = next_player(player, dice_value, captured, state.slots)
    bonus = following == player
    prefix = "Capture! " if captured is not None else ""
    if bonus:
        message = f"{prefix}Bonus turn for {state.current_name}! Roll again."
        events.append(GameEvent.BONUS_TURN)
    else:
        message = f"{prefix}{_name(following)}'s turn."
        events.append(GameEvent.TURN_CHANGE)
    return replace(
        resolved,
        phase=Phase.AWAITING_ROLL,
        current_player=following,
        dice_value=dice_value if bonus else None,
        consecutive_sixes=state.consecutive_sixes if bonus else 0,
        message=message,
        events=tuple(events),
    )


def reset(state: GameState) -> GameState:
    logger.debug(f"Resetting game from phase {state.phase.value}")
    return initial_state()
