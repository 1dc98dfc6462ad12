"""
Mobility Table Builder

Maps the number of squares a piece can reach to a bonus. Two models:

    - mob_style 0: affine formula per piece kind
    - mob_style 1: one tuned slot per reachable-square count

The queen always uses the formula.
"""

import logging
from typing import Dict, Mapping, Tuple

import chess
import numpy as np

from chess_params.params.slots import MOBILITY_SIZES, mobility_slots
from chess_params.params.store import ParameterStore
from chess_params.utils.numeric import freeze_mapping

logger = logging.getLogger(__name__)

MobilityTables = Mapping[chess.PieceType, np.ndarray]

# (multiplier mg, multiplier eg, pivot): score = multiplier * (count - pivot)
MOBILITY_FORMULAS = {
    chess.KNIGHT: (4, 4, 4),
    chess.BISHOP: (5, 5, 6),
    chess.ROOK: (2, 4, 7),
    chess.QUEEN: (1, 2, 14),
}


def formula_mobility(piece_type: chess.PieceType, count: int, endgame: bool) -> int:
    """Affine mobility score for ``count`` reachable squares."""
    mg_mul, eg_mul, pivot = MOBILITY_FORMULAS[piece_type]
    return (eg_mul if endgame else mg_mul) * (count - pivot)


def build_mobility(store: ParameterStore) -> Tuple[MobilityTables, MobilityTables]:
    """
    Build midgame and endgame mobility curves.

    Args:
        store: Parameter store providing mob_style and tuned mobility slots

    Returns:
        (mg, eg): read-only mappings keyed by piece type (knight, bishop, rook, queen)
        of read-only arrays indexed by reachable-square count
    """
    mg: Dict[chess.PieceType, np.ndarray] = {}
    eg: Dict[chess.PieceType, np.ndarray] = {}

    for piece_type, size in MOBILITY_SIZES.items():
        tuned = store.mob_style == 1 and piece_type != chess.QUEEN
        for endgame, target in ((False, mg), (True, eg)):
            if tuned:
                values = [store[slot] for slot in mobility_slots(piece_type, endgame)]
            else:
                values = [formula_mobility(piece_type, i, endgame) for i in range(size)]
            target[piece_type] = np.array(values, dtype=np.int32)

    logger.debug(f"Built mobility tables (style {store.mob_style})")
    return freeze_mapping(mg), freeze_mapping(eg)
