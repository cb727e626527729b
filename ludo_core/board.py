"""
Board representation for Ludo game.
An immutable snapshot of every active player's tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np

from .config import config
from .exceptions import InvariantError, UnknownTokenError
from .geometry import BOARD_SIZE, token_coordinates
from .token import Token


@dataclass(frozen=True, slots=True)
class BoardState:
    """Owns token placement for the active slots (no rule logic).

    Updates return a new snapshot sharing every untouched token tuple with the
    previous one, so older snapshots held by callers stay valid.
    """

    slots: Tuple[int, ...]  # active slots in rotation order
    tokens: Tuple[Tuple[Token, ...], ...]  # aligned with slots

    def __post_init__(self) -> None:
        if len(self.slots) != len(self.tokens):
            raise InvariantError("Every active slot needs exactly one token group")
        for slot, group in zip(self.slots, self.tokens):
            if len(group) != config.TOKENS_PER_PLAYER:
                raise InvariantError(
                    f"Player {slot} has {len(group)} tokens, "
                    f"expected {config.TOKENS_PER_PLAYER}"
                )
            if any(t.player != slot or t.index != i for i, t in enumerate(group)):
                raise InvariantError(f"Token group of player {slot} is out of order")

    @classmethod
    def new(cls, slots: Sequence[int]) -> "BoardState":
        groups = tuple(
            tuple(Token.at_base(slot, i) for i in range(config.TOKENS_PER_PLAYER))
            for slot in slots
        )
        return cls(slots=tuple(slots), tokens=groups)

    def _resolve_index(self, player: int) -> int:
        """Map a slot id (0..3) to its position in self.slots."""
        for idx, slot in enumerate(self.slots):
            if slot == player:
                return idx
        raise InvariantError(f"Player {player} is not active on this board")

    def tokens_of(self, player: int) -> Tuple[Token, ...]:
        return self.tokens[self._resolve_index(player)]

    def token(self, token_id: str) -> Token:
        for group in self.tokens:
            for tok in group:
                if tok.token_id == token_id:
                    return tok
        raise UnknownTokenError(token_id)

    def all_tokens(self) -> Iterator[Token]:
        for group in self.tokens:
            yield from group

    def opponents_of(self, player: int) -> Iterator[Token]:
        for slot, group in zip(self.slots, self.tokens):
            if slot != player:
                yield from group

    def ring_occupants(self, cell: int, *, exclude_player: int | None = None) -> list[Token]:
        """Ring tokens resting on an absolute cell."""
        return [
            tok
            for tok in self.all_tokens()
            if tok.on_ring()
            and tok.ring_cell == cell
            and (exclude_player is None or tok.player != exclude_player)
        ]

    def with_token(self, token: Token) -> "BoardState":
        """Return a new board where ``token`` replaces its previous version."""
        idx = self._resolve_index(token.player)
        group = list(self.tokens[idx])
        if not 0 <= token.index < len(group):
            raise UnknownTokenError(token.token_id)
        group[token.index] = token
        groups = list(self.tokens)
        groups[idx] = tuple(group)
        return BoardState(slots=self.slots, tokens=tuple(groups))

    def finished_count(self, player: int) -> int:
        return sum(1 for tok in self.tokens_of(player) if tok.is_finished())

    def on_board_count(self, player: int) -> int:
        return sum(1 for tok in self.tokens_of(player) if tok.is_on_board())

    def occupancy_grid(self, out: np.ndarray | None = None) -> np.ndarray:
        """Build a (4, 15, 15) array counting tokens per color on each grid cell.

        Channel ``c`` holds color ``c``; inactive colors stay zero. Indexed as
        ``grid[color, row, col]``.
        """
        shape = (config.MAX_PLAYERS, BOARD_SIZE, BOARD_SIZE)
        if out is not None:
            if out.shape != shape:
                raise ValueError(f"Expected grid of shape {shape}")
            grid = out
        else:
            grid = np.zeros(shape, dtype=np.int64)
        grid.fill(0)
        for tok in self.all_tokens():
            col, row = token_coordinates(tok)
            grid[tok.player, row, col] += 1
        return grid

    def to_dict(self) -> dict:
        return {
            "slots": list(self.slots),
            "tokens": [tok.to_dict() for tok in self.all_tokens()],
        }

    def __str__(self) -> str:
        lines = ["Board State:"]
        for tok in self.all_tokens():
            if not tok.is_at_base():
                lines.append(str(tok))
        return "\n".join(lines)
