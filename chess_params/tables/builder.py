"""
Derived Table Assembly

Runs every builder against a parameter store, in a fixed order:

    1. piece-square tables (+ special tables)
    2. mobility curves
    3. pawn-count adjustments and imbalance
    4. backward pawn penalties
    5. passed pawn bonuses
    6. king-danger curve

The result is an immutable EvalTables snapshot. Changing the store later
does not affect an existing snapshot; build a new one instead.
"""

import logging
from dataclasses import dataclass
from typing import Mapping

import chess
import numpy as np

from chess_params.params.store import ParameterStore
from chess_params.tables.king_danger import build_king_danger
from chess_params.tables.material import build_imbalance, build_pawn_count_tables
from chess_params.tables.mobility import build_mobility
from chess_params.tables.pawns import build_backward, build_passers
from chess_params.tables.pst import build_pst, build_special_pst

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class EvalTables:
    """
    Derived evaluation tables, all read-only numpy arrays.

    Per-side and per-piece tables sit in read-only mappings. Snapshots
    compare by identity.

    Attributes:
        mg_pst, eg_pst: {color: (7, 64)} indexed [piece_type, square]
        special_pst: {color: (6, 64)} indexed [SpecialSquare, square]
        mobility_mg, mobility_eg: {piece_type: (count,)}
        knight_pawn_adj, rook_pawn_adj: (9,) indexed by own pawn count
        imbalance: (9, 9) indexed by imbalance_index()
        backward_mg: (8,) indexed by file
        passed_mg, passed_eg: {color: (8,)} indexed by rank
        danger: (511,) indexed by king-attack score
    """

    mg_pst: Mapping[chess.Color, np.ndarray]
    eg_pst: Mapping[chess.Color, np.ndarray]
    special_pst: Mapping[chess.Color, np.ndarray]
    mobility_mg: Mapping[chess.PieceType, np.ndarray]
    mobility_eg: Mapping[chess.PieceType, np.ndarray]
    knight_pawn_adj: np.ndarray
    rook_pawn_adj: np.ndarray
    imbalance: np.ndarray
    backward_mg: np.ndarray
    passed_mg: Mapping[chess.Color, np.ndarray]
    passed_eg: Mapping[chess.Color, np.ndarray]
    danger: np.ndarray


def build_tables(store: ParameterStore) -> EvalTables:
    """
    Derive every evaluation table from the store's current values.

    Raises:
        TemplateMismatchError: If the imbalance template is inconsistent
    """
    mg_pst, eg_pst = build_pst(store)
    special_pst = build_special_pst()
    mobility_mg, mobility_eg = build_mobility(store)
    knight_pawn_adj, rook_pawn_adj = build_pawn_count_tables(store)
    imbalance = build_imbalance(store)
    backward_mg = build_backward(store)
    passed_mg, passed_eg = build_passers(store)
    danger = build_king_danger()

    logger.debug(f"Derived tables rebuilt from {store!r}")
    return EvalTables(
        mg_pst=mg_pst,
        eg_pst=eg_pst,
        special_pst=special_pst,
        mobility_mg=mobility_mg,
        mobility_eg=mobility_eg,
        knight_pawn_adj=knight_pawn_adj,
        rook_pawn_adj=rook_pawn_adj,
        imbalance=imbalance,
        backward_mg=backward_mg,
        passed_mg=passed_mg,
        passed_eg=passed_eg,
        danger=danger,
    )
