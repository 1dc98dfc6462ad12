"""
Pawn Structure Builders

Backward pawns:
    One midgame penalty per file; central files cost more.

Passed pawns:
    Per-rank bonuses for ranks 2-7, indexed 0-7 by absolute board rank.
    Both end ranks are always zero; Black's table is White's reversed, so
    Black's rank-7 bonus sits at index 1.
"""

import logging
from typing import Mapping, Tuple

import chess
import numpy as np

from chess_params.params.slots import Param, passer_slots
from chess_params.params.store import ParameterStore
from chess_params.utils.numeric import freeze, freeze_mapping

logger = logging.getLogger(__name__)

# Correction added to BACKWARD_MG, files a-h
BACKWARD_FILE_CORRECTION = (3, 1, -1, -3, -3, -1, 1, 3)


def build_backward(store: ParameterStore) -> np.ndarray:
    """
    Build the backward pawn midgame penalty per file.

    Returns:
        Read-only array of length 8, indexed by chess.square_file
    """
    base = store[Param.BACKWARD_MG]
    return freeze(np.array(
        [base + correction for correction in BACKWARD_FILE_CORRECTION],
        dtype=np.int32,
    ))


def _passer_table(store: ParameterStore, endgame: bool) -> Mapping[chess.Color, np.ndarray]:
    white = np.zeros(8, dtype=np.int32)
    for rank_index, slot in enumerate(passer_slots(endgame), start=1):
        white[rank_index] = store[slot]
    black = white[::-1].copy()
    return freeze_mapping({chess.WHITE: white, chess.BLACK: black})


def build_passers(store: ParameterStore) -> Tuple[Mapping[chess.Color, np.ndarray], Mapping[chess.Color, np.ndarray]]:
    """
    Build passed pawn bonuses by rank.

    Returns:
        (mg, eg): read-only mappings keyed by color of read-only arrays of length 8,
        indexed by chess.square_rank
    """
    mg = _passer_table(store, endgame=False)
    eg = _passer_table(store, endgame=True)
    logger.debug("Built passed pawn tables")
    return mg, eg
