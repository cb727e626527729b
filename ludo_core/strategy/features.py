from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..config import ai_config, config
from ..geometry import absolute_cell, is_safe_cell
from ..rules import apply_move, destination, legal_moves
from .types import MoveOption, StrategyContext

if TYPE_CHECKING:
    from ..board import BoardState
    from ..token import Token


def threat_score(player: int, cell: int, board: "BoardState") -> float:
    """How exposed ``cell`` is to opponents able to land on it next roll.

    Each opposing ring token contributes once, for the smallest roll that
    reaches the cell without leaving the ring; closer threats weigh more.
    """
    danger = 0.0
    for opp in board.opponents_of(player):
        if not opp.is_on_board():
            continue
        for dice in range(config.DICE_MIN, config.DICE_MAX + 1):
            reach = opp.progress + dice
            if reach >= config.RING_SIZE:
                continue
            if absolute_cell(opp.player, reach) == cell:
                danger += (config.DICE_MAX + 1 - dice) * ai_config.threat_unit
                break
    return danger


def _cell_threat(token: "Token", board: "BoardState") -> float:
    if not token.on_ring() or is_safe_cell(token.ring_cell):
        return 0.0
    return threat_score(token.player, token.ring_cell, board)


def _create_move_option(
    token: "Token", dice_roll: int, board: "BoardState"
) -> MoveOption:
    result = apply_move(token, dice_roll, board)
    moved = result.token
    lands_on_ring = moved.on_ring()
    captured = result.captured
    return MoveOption(
        token=token,
        dice_roll=dice_roll,
        current_progress=token.progress,
        new_progress=destination(token, dice_roll),
        exits_base=token.is_at_base(),
        finishes=moved.is_finished(),
        enters_home_lane=moved.in_home_lane(),
        lands_on_ring=lands_on_ring,
        lands_on_safe=lands_on_ring and is_safe_cell(moved.ring_cell),
        can_capture=captured is not None,
        captured_progress=captured.progress if captured is not None else None,
        # Threats are projected on the board as it stands before the move
        landing_threat=(
            threat_score(token.player, moved.ring_cell, board)
            if lands_on_ring and not is_safe_cell(moved.ring_cell)
            else 0.0
        ),
        current_threat=_cell_threat(token, board),
        on_safe_cell=token.on_ring() and is_safe_cell(token.ring_cell),
    )


def build_move_options(
    player: int,
    dice_roll: int,
    board: "BoardState",
    token_ids: Iterable[str] | None = None,
) -> StrategyContext:
    """Convert board state and legal moves into a strategy context."""
    allowed = (
        frozenset(token_ids)
        if token_ids is not None
        else legal_moves(player, dice_roll, board)
    )
    moves = [
        _create_move_option(tok, dice_roll, board)
        for tok in board.tokens_of(player)
        if tok.token_id in allowed
    ]
    return StrategyContext(
        player=player,
        dice_roll=dice_roll,
        board=board,
        moves=moves,
        on_board_count=board.on_board_count(player),
        finished_count=board.finished_count(player),
    )
