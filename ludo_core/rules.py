"""Move engine: legality, move application, captures, wins and turn order.

Every function reads one immutable ``BoardState`` and, when it changes
anything, returns a new one.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from loguru import logger

from .board import BoardState
from .config import config
from .exceptions import IllegalMoveError
from .geometry import is_safe_cell
from .token import Token
from .types import MoveResult


def roll_dice(rng: random.Random) -> int:
    return rng.randint(config.DICE_MIN, config.DICE_MAX)


def is_legal(token: Token, dice_value: int) -> bool:
    if token.is_finished():
        return False
    if token.is_at_base():
        return dice_value == config.EXIT_ROLL
    # Exact count required to finish
    return token.progress + dice_value <= config.FINISH_PROGRESS


def legal_moves(player: int, dice_value: int, board: BoardState) -> frozenset[str]:
    return frozenset(
        tok.token_id for tok in board.tokens_of(player) if is_legal(tok, dice_value)
    )


def destination(token: Token, dice_value: int) -> int:
    """Progress a legal move lands on."""
    if token.is_at_base():
        return 0
    return token.progress + dice_value


def _resolve_capture(mover: Token, board: BoardState) -> tuple[BoardState, Optional[Token]]:
    cell = mover.ring_cell
    if is_safe_cell(cell):
        return board, None
    occupants = board.ring_occupants(cell, exclude_player=mover.player)
    if not occupants:
        return board, None
    # Only one token is captured; the rest of a same-owner stack stays put
    victim = occupants[0]
    logger.debug(f"Token {mover.token_id} captures {victim.token_id} on cell {cell}")
    return board.with_token(victim.sent_to_base()), victim


def apply_move(token: Token, dice_value: int, board: BoardState) -> MoveResult:
    """Move ``token`` by ``dice_value`` and resolve any capture.

    Raises ``IllegalMoveError`` for a move that ``is_legal`` rejects; callers
    are expected to pick from ``legal_moves``.
    """
    current = board.token(token.token_id)
    if not is_legal(current, dice_value):
        raise IllegalMoveError(
            f"Token {current.token_id} cannot move {dice_value} from {current.progress}"
        )

    moved = current.moved_to(destination(current, dice_value))
    new_board = board.with_token(moved)
    captured = None
    # Home lane and finish are capture-proof
    if moved.on_ring():
        new_board, captured = _resolve_capture(moved, new_board)

    return MoveResult(
        board=new_board,
        token=moved,
        old_progress=current.progress,
        captured=captured,
    )


def check_winner(player: int, board: BoardState) -> bool:
    return all(tok.is_finished() for tok in board.tokens_of(player))


def next_slot(current: int, active_slots: Sequence[int]) -> int:
    idx = list(active_slots).index(current)
    return active_slots[(idx + 1) % len(active_slots)]


def next_player(
    current: int,
    dice_value: int,
    captured: Optional[Token],
    active_slots: Sequence[int],
) -> int:
    """Rolling a six or capturing keeps the turn; otherwise rotate."""
    if dice_value == config.EXIT_ROLL or captured is not None:
        return current
    return next_slot(current, active_slots)
