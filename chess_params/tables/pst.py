"""
Piece-Square Table Builder

Combines weighted material values with weighted positional templates:

    mg[side][piece][sq] = value_mg * W_MATERIAL / 100 + template_mg * W_PST / 100

Kings carry no material, only the template term. Tables are side-relative:
Black's table is White's reflected across the board's horizontal midline,
so ``mg[WHITE][p][sq] == mg[BLACK][p][chess.square_mirror(sq)]``.
"""

import logging
from typing import Mapping, Tuple

import chess
import numpy as np

from chess_params.params.slots import Param
from chess_params.params.store import ParameterStore
from chess_params.tables.templates import SPECIAL_TEMPLATES, SpecialSquare, pst_template, template_value
from chess_params.utils.numeric import freeze_mapping, scale

logger = logging.getLogger(__name__)

SideTables = Mapping[chess.Color, np.ndarray]

# (midgame slot, endgame slot) holding each piece's material value
MATERIAL_SLOTS = {
    chess.PAWN: (Param.PAWN_MG, Param.PAWN_EG),
    chess.KNIGHT: (Param.KNIGHT_MG, Param.KNIGHT_EG),
    chess.BISHOP: (Param.BISHOP_MG, Param.BISHOP_EG),
    chess.ROOK: (Param.ROOK_MG, Param.ROOK_EG),
    chess.QUEEN: (Param.QUEEN_MG, Param.QUEEN_EG),
}


def relative_square(square: chess.Square, color: chess.Color) -> chess.Square:
    """Square as seen from ``color``'s side of the board."""
    return square if color == chess.WHITE else chess.square_mirror(square)


def build_pst(store: ParameterStore) -> Tuple[SideTables, SideTables]:
    """
    Build midgame and endgame piece-square tables.

    Args:
        store: Parameter store providing values, weights and pst_style

    Returns:
        (mg, eg): read-only mappings keyed by color, each a read-only (7, 64) array
        indexed [piece_type, square]; row 0 is unused
    """
    material_weight = store[Param.W_MATERIAL]
    pst_weight = store[Param.W_PST]

    mg = {color: np.zeros((7, 64), dtype=np.int32) for color in chess.COLORS}
    eg = {color: np.zeros((7, 64), dtype=np.int32) for color in chess.COLORS}

    for piece_type in chess.PIECE_TYPES:
        mg_template = pst_template(store.pst_style, piece_type, endgame=False)
        eg_template = pst_template(store.pst_style, piece_type, endgame=True)

        if piece_type in MATERIAL_SLOTS:
            mg_slot, eg_slot = MATERIAL_SLOTS[piece_type]
            mg_material = scale(store[mg_slot], material_weight)
            eg_material = scale(store[eg_slot], material_weight)
        else:
            mg_material = eg_material = 0

        for square in chess.SQUARES:
            mg_value = mg_material + scale(template_value(mg_template, square), pst_weight)
            eg_value = eg_material + scale(template_value(eg_template, square), pst_weight)
            for color in chess.COLORS:
                target = relative_square(square, color)
                mg[color][piece_type, target] = mg_value
                eg[color][piece_type, target] = eg_value

    logger.debug(f"Built piece-square tables (style {store.pst_style})")
    return freeze_mapping(mg), freeze_mapping(eg)


def build_special_pst() -> SideTables:
    """
    Build the special positional tables (outposts, defended and phalanx pawns).

    Copied from the templates without weighting, mirrored for Black.

    Returns:
        Read-only mapping keyed by color of read-only (6, 64) arrays indexed
        [SpecialSquare, square]
    """
    special = {color: np.zeros((len(SpecialSquare), 64), dtype=np.int32) for color in chess.COLORS}

    for category, template in SPECIAL_TEMPLATES.items():
        for square in chess.SQUARES:
            value = template_value(template, square)
            for color in chess.COLORS:
                special[color][category, relative_square(square, color)] = value

    return freeze_mapping(special)
