"""
Square Distance Tables

    bonus[a][b]  = 14 - (rank delta + file delta)  -- king tropism
    metric[a][b] = max(rank delta, file delta)     -- Chebyshev distance,
                                                      used in pawn races

Both tables depend only on board geometry, so they are built once per
process and shared.
"""

from dataclasses import dataclass
from functools import lru_cache

import chess
import numpy as np

from chess_params.utils.numeric import freeze

TROPISM_BASE = 14


@dataclass(frozen=True, eq=False)
class DistanceTables:
    """Read-only (64, 64) distance tables indexed by python-chess squares."""

    bonus: np.ndarray
    metric: np.ndarray


@lru_cache(maxsize=1)
def distance_tables() -> DistanceTables:
    """Build (once) and return the distance tables."""
    bonus = np.zeros((64, 64), dtype=np.int32)
    metric = np.zeros((64, 64), dtype=np.int32)

    for sq1 in chess.SQUARES:
        for sq2 in chess.SQUARES:
            rank_delta = abs(chess.square_rank(sq1) - chess.square_rank(sq2))
            file_delta = abs(chess.square_file(sq1) - chess.square_file(sq2))
            bonus[sq1, sq2] = TROPISM_BASE - (rank_delta + file_delta)
            metric[sq1, sq2] = max(rank_delta, file_delta)

    return DistanceTables(bonus=freeze(bonus), metric=freeze(metric))
