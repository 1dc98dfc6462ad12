"""
Evaluation Parameter Slots

Every tunable number the evaluator reads has one slot in the ``Param``
enumeration. Slot values are contiguous integers so that groups (mobility
curves, passer bonuses) can be addressed by offset.

Naming:
    - ``_MG`` / ``_EG`` suffixes mark midgame / endgame halves
    - ``W_`` prefix marks a percentage weight (100 = neutral)
    - ``_ATT1`` / ``_ATT2``, ``_CHK`` and ``_CONTACT`` slots are not bonuses;
      their sum indexes the king-danger curve
"""

from enum import IntEnum, auto
from typing import List

import chess


class Param(IntEnum):
    """Enumerated evaluation parameter slots."""

    # Piece values
    PAWN_MG = 0
    KNIGHT_MG = auto()
    BISHOP_MG = auto()
    ROOK_MG = auto()
    QUEEN_MG = auto()
    PAWN_EG = auto()
    KNIGHT_EG = auto()
    BISHOP_EG = auto()
    ROOK_EG = auto()
    QUEEN_EG = auto()

    # Material adjustments
    BISHOP_PAIR = auto()
    KNIGHT_PAIR = auto()
    ROOK_PAIR = auto()
    ELEPHANTIASIS = auto()  # queen loses this much per enemy minor
    IMB_EXCHANGE = auto()
    IMB_MINOR = auto()
    IMB_MAJOR = auto()
    IMB_TWO_MINORS = auto()
    IMB_ALL = auto()
    KNIGHT_CLOSED = auto()  # knight gain per own pawn
    ROOK_OPEN = auto()      # rook loss per own pawn

    # King attack
    KNIGHT_ATT1 = auto()
    KNIGHT_ATT2 = auto()
    BISHOP_ATT1 = auto()
    BISHOP_ATT2 = auto()
    ROOK_ATT1 = auto()
    ROOK_ATT2 = auto()
    QUEEN_ATT1 = auto()
    QUEEN_ATT2 = auto()
    KNIGHT_CHECK = auto()
    BISHOP_CHECK = auto()
    ROOK_CHECK = auto()
    QUEEN_CHECK = auto()
    ROOK_CONTACT = auto()
    QUEEN_CONTACT = auto()

    # King tropism
    KNIGHT_TROPISM_MG = auto()
    KNIGHT_TROPISM_EG = auto()
    BISHOP_TROPISM_MG = auto()
    BISHOP_TROPISM_EG = auto()
    ROOK_TROPISM_MG = auto()
    ROOK_TROPISM_EG = auto()
    QUEEN_TROPISM_MG = auto()
    QUEEN_TROPISM_EG = auto()

    # Weights
    W_MATERIAL = auto()
    W_PST = auto()
    W_OWN_ATT = auto()
    W_OPP_ATT = auto()
    W_OWN_MOB = auto()
    W_OPP_MOB = auto()
    W_THREATS = auto()
    W_TROPISM = auto()
    W_FORWARD = auto()
    W_PASSERS = auto()
    W_MASS = auto()
    W_CHAINS = auto()
    W_OUTPOSTS = auto()
    W_LINES = auto()
    W_STRUCT = auto()
    W_SHIELD = auto()
    W_STORM = auto()
    W_CENTER = auto()

    # Pawn structure
    DOUBLED_MG = auto()
    DOUBLED_EG = auto()
    ISOLATED_MG = auto()
    ISOLATED_EG = auto()
    ISOLATED_OPEN = auto()
    BACKWARD_MG = auto()
    BACKWARD_EG = auto()
    BACKWARD_OPEN = auto()
    PAWN_BIND = auto()
    PAWN_BAD_BIND = auto()
    PAWN_ISLAND = auto()
    PAWN_THREAT = auto()

    # Pawn chains
    CHAIN_BIG = auto()
    CHAIN_SMALL = auto()
    CHAIN_STORM_1 = auto()
    CHAIN_STORM_2 = auto()
    CHAIN_STORM_FAIL = auto()

    # Passed pawns, ranks 2-7
    PASSED_MG_2 = auto()
    PASSED_MG_3 = auto()
    PASSED_MG_4 = auto()
    PASSED_MG_5 = auto()
    PASSED_MG_6 = auto()
    PASSED_MG_7 = auto()
    PASSED_EG_2 = auto()
    PASSED_EG_3 = auto()
    PASSED_EG_4 = auto()
    PASSED_EG_5 = auto()
    PASSED_EG_6 = auto()
    PASSED_EG_7 = auto()

    # Passed pawn percentage modifiers
    PASSED_BLOCKED_MUL = auto()
    PASSED_OUR_STOP_MUL = auto()
    PASSED_OPP_STOP_MUL = auto()
    PASSED_DEFENDED_MUL = auto()
    PASSED_STOP_DEFENDED_MUL = auto()

    # King's pawn shield
    SHIELD_NONE = auto()
    SHIELD_2 = auto()
    SHIELD_3 = auto()
    SHIELD_4 = auto()
    SHIELD_5 = auto()
    SHIELD_6 = auto()
    SHIELD_7 = auto()

    # Pawn storm
    STORM_OPEN = auto()
    STORM_3 = auto()
    STORM_4 = auto()
    STORM_5 = auto()

    # Knight
    KNIGHT_TRAPPED = auto()
    KNIGHT_BLOCKS_C = auto()
    KNIGHT_OWN_HALF = auto()
    KNIGHT_REACH = auto()
    MINOR_SHIELD = auto()

    # Bishop
    BISHOP_FIANCHETTO = auto()
    BISHOP_KING = auto()
    BISHOP_BAD_FIANCHETTO = auto()
    BISHOP_TRAPPED_A2 = auto()
    BISHOP_TRAPPED_A3 = auto()
    BISHOP_BLOCKED = auto()
    BISHOP_FIANCHETTO_BLOCKED_MG = auto()
    BISHOP_FIANCHETTO_BLOCKED_EG = auto()
    BISHOP_WING = auto()
    BISHOP_OWN_HALF = auto()
    BISHOP_REACH = auto()
    BISHOP_TOUCH = auto()
    BISHOP_OWN_PAWN = auto()
    BISHOP_OPP_PAWN = auto()
    BISHOP_RETURN = auto()

    # Rook
    ROOK_SEVENTH_MG = auto()
    ROOK_SEVENTH_EG = auto()
    ROOKS_SEVENTH_MG = auto()
    ROOKS_SEVENTH_EG = auto()
    ROOK_OPEN_MG = auto()
    ROOK_OPEN_EG = auto()
    ROOK_GOOD_HALF_MG = auto()
    ROOK_GOOD_HALF_EG = auto()
    ROOK_BAD_HALF_MG = auto()
    ROOK_BAD_HALF_EG = auto()
    ROOK_QUEEN_MG = auto()
    ROOK_QUEEN_EG = auto()
    ROOK_BLOCKED = auto()

    # Queen
    QUEEN_SEVENTH_MG = auto()
    QUEEN_SEVENTH_EG = auto()

    # King
    KING_NO_LUFT = auto()
    KING_CASTLED = auto()

    # Forwardness
    KNIGHT_FORWARD = auto()
    BISHOP_FORWARD = auto()
    ROOK_FORWARD = auto()
    QUEEN_FORWARD = auto()

    # Mobility, one slot per reachable-square count
    KNIGHT_MOB_MG_0 = auto()
    KNIGHT_MOB_MG_1 = auto()
    KNIGHT_MOB_MG_2 = auto()
    KNIGHT_MOB_MG_3 = auto()
    KNIGHT_MOB_MG_4 = auto()
    KNIGHT_MOB_MG_5 = auto()
    KNIGHT_MOB_MG_6 = auto()
    KNIGHT_MOB_MG_7 = auto()
    KNIGHT_MOB_MG_8 = auto()
    KNIGHT_MOB_EG_0 = auto()
    KNIGHT_MOB_EG_1 = auto()
    KNIGHT_MOB_EG_2 = auto()
    KNIGHT_MOB_EG_3 = auto()
    KNIGHT_MOB_EG_4 = auto()
    KNIGHT_MOB_EG_5 = auto()
    KNIGHT_MOB_EG_6 = auto()
    KNIGHT_MOB_EG_7 = auto()
    KNIGHT_MOB_EG_8 = auto()
    BISHOP_MOB_MG_0 = auto()
    BISHOP_MOB_MG_1 = auto()
    BISHOP_MOB_MG_2 = auto()
    BISHOP_MOB_MG_3 = auto()
    BISHOP_MOB_MG_4 = auto()
    BISHOP_MOB_MG_5 = auto()
    BISHOP_MOB_MG_6 = auto()
    BISHOP_MOB_MG_7 = auto()
    BISHOP_MOB_MG_8 = auto()
    BISHOP_MOB_MG_9 = auto()
    BISHOP_MOB_MG_10 = auto()
    BISHOP_MOB_MG_11 = auto()
    BISHOP_MOB_MG_12 = auto()
    BISHOP_MOB_MG_13 = auto()
    BISHOP_MOB_EG_0 = auto()
    BISHOP_MOB_EG_1 = auto()
    BISHOP_MOB_EG_2 = auto()
    BISHOP_MOB_EG_3 = auto()
    BISHOP_MOB_EG_4 = auto()
    BISHOP_MOB_EG_5 = auto()
    BISHOP_MOB_EG_6 = auto()
    BISHOP_MOB_EG_7 = auto()
    BISHOP_MOB_EG_8 = auto()
    BISHOP_MOB_EG_9 = auto()
    BISHOP_MOB_EG_10 = auto()
    BISHOP_MOB_EG_11 = auto()
    BISHOP_MOB_EG_12 = auto()
    BISHOP_MOB_EG_13 = auto()
    ROOK_MOB_MG_0 = auto()
    ROOK_MOB_MG_1 = auto()
    ROOK_MOB_MG_2 = auto()
    ROOK_MOB_MG_3 = auto()
    ROOK_MOB_MG_4 = auto()
    ROOK_MOB_MG_5 = auto()
    ROOK_MOB_MG_6 = auto()
    ROOK_MOB_MG_7 = auto()
    ROOK_MOB_MG_8 = auto()
    ROOK_MOB_MG_9 = auto()
    ROOK_MOB_MG_10 = auto()
    ROOK_MOB_MG_11 = auto()
    ROOK_MOB_MG_12 = auto()
    ROOK_MOB_MG_13 = auto()
    ROOK_MOB_MG_14 = auto()
    ROOK_MOB_EG_0 = auto()
    ROOK_MOB_EG_1 = auto()
    ROOK_MOB_EG_2 = auto()
    ROOK_MOB_EG_3 = auto()
    ROOK_MOB_EG_4 = auto()
    ROOK_MOB_EG_5 = auto()
    ROOK_MOB_EG_6 = auto()
    ROOK_MOB_EG_7 = auto()
    ROOK_MOB_EG_8 = auto()
    ROOK_MOB_EG_9 = auto()
    ROOK_MOB_EG_10 = auto()
    ROOK_MOB_EG_11 = auto()
    ROOK_MOB_EG_12 = auto()
    ROOK_MOB_EG_13 = auto()
    ROOK_MOB_EG_14 = auto()


# Reachable-square counts covered by each mobility curve (inclusive max + 1)
MOBILITY_SIZES = {
    chess.KNIGHT: 9,
    chess.BISHOP: 14,
    chess.ROOK: 15,
    chess.QUEEN: 28,
}

# Slots holding the five imbalance categories
IMBALANCE_CATEGORIES = frozenset({
    Param.IMB_EXCHANGE,
    Param.IMB_MINOR,
    Param.IMB_MAJOR,
    Param.IMB_TWO_MINORS,
    Param.IMB_ALL,
})


def mobility_slots(piece_type: chess.PieceType, endgame: bool) -> List[Param]:
    """
    Slots of an explicitly tuned mobility curve.

    Args:
        piece_type: chess.KNIGHT, chess.BISHOP or chess.ROOK
        endgame: True for the endgame curve

    Returns:
        One slot per reachable-square count, starting at zero

    Raises:
        ValueError: For piece kinds without tuned mobility (queen, pawn, king)
    """
    if piece_type not in (chess.KNIGHT, chess.BISHOP, chess.ROOK):
        raise ValueError(f"No tuned mobility slots for {chess.piece_name(piece_type)}")

    phase = "EG" if endgame else "MG"
    prefix = chess.piece_name(piece_type).upper()
    return [Param[f"{prefix}_MOB_{phase}_{i}"] for i in range(MOBILITY_SIZES[piece_type])]


def passer_slots(endgame: bool) -> List[Param]:
    """Passed pawn bonus slots for ranks 2-7, in rank order."""
    phase = "EG" if endgame else "MG"
    return [Param[f"PASSED_{phase}_{rank}"] for rank in range(2, 8)]
