"""Static board geometry for the 15x15 Ludo grid.

Coordinates are ``(col, row)`` pairs. Ring indices are absolute (0..51) and
shared by all colors; a color's own progress maps onto the ring through its
entry offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

import numpy as np

from .config import config

if TYPE_CHECKING:
    from .token import Token

Coord = Tuple[int, int]

BOARD_SIZE = 15
CENTER: Coord = (7, 7)

_RING: List[Coord] = [
    # Red start row, heading right
    (1, 6), (2, 6), (3, 6), (4, 6), (5, 6),
    # Up the left side of the green arm
    (6, 5), (6, 4), (6, 3), (6, 2), (6, 1), (6, 0),
    (7, 0), (8, 0),
    # Green column, heading down
    (8, 1), (8, 2), (8, 3), (8, 4), (8, 5),
    (9, 6), (10, 6), (11, 6), (12, 6), (13, 6), (14, 6),
    (14, 7), (14, 8),
    # Yellow row, heading left
    (13, 8), (12, 8), (11, 8), (10, 8), (9, 8),
    (8, 9), (8, 10), (8, 11), (8, 12), (8, 13), (8, 14),
    (7, 14), (6, 14),
    # Blue column, heading up
    (6, 13), (6, 12), (6, 11), (6, 10), (6, 9),
    (5, 8), (4, 8), (3, 8), (2, 8), (1, 8), (0, 8),
    (0, 7), (0, 6),
]

_HOME_LANES: List[List[Coord]] = [
    [(1, 7), (2, 7), (3, 7), (4, 7), (5, 7), (6, 7)],  # Red: left to center
    [(7, 1), (7, 2), (7, 3), (7, 4), (7, 5), (7, 6)],  # Green: top to center
    [(13, 7), (12, 7), (11, 7), (10, 7), (9, 7), (8, 7)],  # Yellow: right to center
    [(7, 13), (7, 12), (7, 11), (7, 10), (7, 9), (7, 8)],  # Blue: bottom to center
]

_HOME_BASES: List[List[Coord]] = [
    [(2, 2), (3, 2), (2, 3), (3, 3)],  # Red: top-left
    [(11, 2), (12, 2), (11, 3), (12, 3)],  # Green: top-right
    [(11, 11), (12, 11), (11, 12), (12, 12)],  # Yellow: bottom-right
    [(2, 11), (3, 11), (2, 12), (3, 12)],  # Blue: bottom-left
]


def _build_ring() -> np.ndarray:
    ring = np.asarray(_RING, dtype=np.int64)
    if ring.shape != (config.RING_SIZE, 2):
        raise ValueError(f"Ring must have {config.RING_SIZE} cells, got {len(ring)}")
    if len({tuple(c) for c in ring.tolist()}) != config.RING_SIZE:
        raise ValueError("Ring coordinates must be distinct")
    return ring


def _build_lanes() -> np.ndarray:
    lanes = np.asarray(_HOME_LANES, dtype=np.int64)
    if lanes.shape != (config.MAX_PLAYERS, config.HOME_LANE_SIZE, 2):
        raise ValueError(f"Each home lane must have {config.HOME_LANE_SIZE} cells")
    return lanes


RING_COORDS: np.ndarray = _build_ring()  # (52, 2)
HOME_LANE_COORDS: np.ndarray = _build_lanes()  # (4, 6, 2)
HOME_BASE_COORDS: np.ndarray = np.asarray(_HOME_BASES, dtype=np.int64)  # (4, 4, 2)
ENTRY_OFFSETS: Tuple[int, ...] = tuple(config.ENTRY_OFFSETS)
SAFE_CELLS: frozenset[int] = frozenset(config.SAFE_CELLS)


def absolute_cell(player: int, progress: int) -> int:
    """Map a player's progress to an absolute ring index, or -1 off the ring."""
    if not 0 <= progress < config.RING_SIZE:
        return -1
    return (ENTRY_OFFSETS[player] + progress) % config.RING_SIZE


def is_safe_cell(cell: int) -> bool:
    return cell in SAFE_CELLS


def ring_coordinate(cell: int) -> Coord:
    col, row = RING_COORDS[cell]
    return int(col), int(row)


def progress_coordinate(player: int, progress: int, index: int = 0) -> Coord:
    """Grid cell for a progress value; ``index`` picks the base slot at -1."""
    if progress < 0:
        col, row = HOME_BASE_COORDS[player][index]
        return int(col), int(row)
    if progress >= config.FINISH_PROGRESS:
        return CENTER
    if progress < config.RING_SIZE:
        return ring_coordinate(absolute_cell(player, progress))
    col, row = HOME_LANE_COORDS[player][progress - config.HOME_LANE_START]
    return int(col), int(row)


def token_coordinates(token: "Token") -> Coord:
    return progress_coordinate(token.player, token.progress, token.index)


def move_path(player: int, progress: int, dice_value: int) -> List[Coord]:
    """Cells visited hop by hop when moving ``dice_value`` from ``progress``.

    Leaving base is a single hop onto the entry cell.
    """
    if progress < 0:
        return [progress_coordinate(player, 0)]
    last = min(progress + dice_value, config.FINISH_PROGRESS)
    return [progress_coordinate(player, p) for p in range(progress + 1, last + 1)]
