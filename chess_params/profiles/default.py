"""
Default Profile

Weights tuned automatically. Most positional and material slots are
declared tunable with the ranges the tuner may explore. King attack,
check and contact weights and the own/opponent attack and mobility
weights are bounded but not tunable: they feed the non-linear king-danger
curve or are set per side, and tuning them independently is unstable.
"""

import chess

from chess_params.params.slots import Param, mobility_slots
from chess_params.params.store import ParameterStore

# (slot, value, min, max, tunable)
DEFAULT_VALUES = [
    # Piece values
    (Param.PAWN_MG, 91, 50, 150, True),
    (Param.KNIGHT_MG, 305, 200, 400, True),
    (Param.BISHOP_MG, 334, 200, 400, True),
    (Param.ROOK_MG, 501, 400, 600, True),
    (Param.QUEEN_MG, 1001, 800, 1200, True),
    (Param.PAWN_EG, 105, 50, 150, True),
    (Param.KNIGHT_EG, 301, 200, 400, True),
    (Param.BISHOP_EG, 315, 200, 400, True),
    (Param.ROOK_EG, 543, 400, 600, True),
    (Param.QUEEN_EG, 1014, 800, 1200, True),

    # Material adjustments
    (Param.BISHOP_PAIR, 51, 0, 100, True),
    (Param.KNIGHT_PAIR, 0, -50, 50, True),
    (Param.ROOK_PAIR, -22, -50, 50, True),
    (Param.ELEPHANTIASIS, 10, -50, 50, True),
    (Param.IMB_EXCHANGE, 31, -50, 50, True),
    (Param.IMB_MINOR, 58, 0, 100, True),
    (Param.IMB_MAJOR, 55, 0, 100, True),
    (Param.IMB_TWO_MINORS, 29, 0, 100, True),
    (Param.IMB_ALL, 65, 0, 100, True),
    (Param.KNIGHT_CLOSED, 6, -50, 50, True),
    (Param.ROOK_OPEN, 0, -50, 50, True),

    # King attack: indexes into the king-danger curve, tune with care
    (Param.KNIGHT_ATT1, 6, 0, 50, False),
    (Param.KNIGHT_ATT2, 4, 0, 50, False),
    (Param.BISHOP_ATT1, 7, 0, 50, False),
    (Param.BISHOP_ATT2, 2, 0, 50, False),
    (Param.ROOK_ATT1, 10, 0, 50, False),
    (Param.ROOK_ATT2, 4, 0, 50, False),
    (Param.QUEEN_ATT1, 16, 0, 50, False),
    (Param.QUEEN_ATT2, 5, 0, 50, False),
    (Param.KNIGHT_CHECK, 11, 0, 50, False),
    (Param.BISHOP_CHECK, 18, 0, 50, False),
    (Param.ROOK_CHECK, 16, 0, 50, False),
    (Param.QUEEN_CHECK, 12, 0, 50, False),
    (Param.ROOK_CONTACT, 29, 0, 50, False),
    (Param.QUEEN_CONTACT, 36, 0, 50, False),

    # King tropism
    (Param.KNIGHT_TROPISM_MG, 13, -50, 50, True),
    (Param.KNIGHT_TROPISM_EG, -11, -50, 50, True),
    (Param.BISHOP_TROPISM_MG, 2, -50, 50, True),
    (Param.BISHOP_TROPISM_EG, -9, -50, 50, True),
    (Param.ROOK_TROPISM_MG, -1, -50, 50, True),
    (Param.ROOK_TROPISM_EG, -7, -50, 50, True),
    (Param.QUEEN_TROPISM_MG, 7, -50, 50, True),
    (Param.QUEEN_TROPISM_EG, 14, -50, 50, True),

    # Varia
    (Param.W_MATERIAL, 98, 0, 200, True),
    (Param.W_PST, 73, 0, 200, True),

    # Per-side attack and mobility weights, the core of personalities
    (Param.W_OWN_ATT, 100, 0, 500, False),
    (Param.W_OPP_ATT, 100, 0, 500, False),
    (Param.W_OWN_MOB, 103, 0, 500, False),
    (Param.W_OPP_MOB, 103, 0, 500, False),

    # Positional weights
    (Param.W_THREATS, 109, 0, 500, True),
    (Param.W_TROPISM, 25, 0, 500, True),
    (Param.W_FORWARD, 0, 0, 500, False),
    (Param.W_PASSERS, 102, 0, 500, True),
    (Param.W_MASS, 98, 0, 500, True),
    (Param.W_CHAINS, 100, 0, 500, True),
    (Param.W_OUTPOSTS, 73, 0, 500, True),
    (Param.W_LINES, 109, 0, 500, True),
    (Param.W_STRUCT, 113, 0, 500, True),
    (Param.W_SHIELD, 120, 0, 500, True),
    (Param.W_STORM, 95, 0, 500, True),
    (Param.W_CENTER, 48, 0, 500, True),

    # Pawn structure
    (Param.DOUBLED_MG, -8, -50, 0, True),
    (Param.DOUBLED_EG, -21, -50, 0, True),
    (Param.ISOLATED_MG, -7, -50, 0, True),
    (Param.ISOLATED_EG, -7, -50, 0, True),
    (Param.ISOLATED_OPEN, -13, -50, 0, True),
    (Param.BACKWARD_MG, -2, -50, 0, True),
    (Param.BACKWARD_EG, -1, -50, 0, True),
    (Param.BACKWARD_OPEN, -10, -50, 0, True),
    (Param.PAWN_BIND, 2, 0, 50, True),
    (Param.PAWN_BAD_BIND, 13, 0, 50, True),  # "wing triangle" like a4-b3-c4
    (Param.PAWN_ISLAND, 5, 0, 50, True),
    (Param.PAWN_THREAT, 3, 0, 50, True),

    # Pawn chains
    (Param.CHAIN_BIG, 38, 0, 50, True),
    (Param.CHAIN_SMALL, 27, 0, 50, True),
    (Param.CHAIN_STORM_1, 12, 0, 50, True),  # like g5 in the King's Indian
    (Param.CHAIN_STORM_2, 3, 0, 50, True),   # like g4 in the King's Indian
    (Param.CHAIN_STORM_FAIL, 32, 0, 50, True),

    # Passed pawns per rank
    (Param.PASSED_MG_2, 2, 0, 300, True),
    (Param.PASSED_MG_3, 2, 0, 300, True),
    (Param.PASSED_MG_4, 11, 0, 300, True),
    (Param.PASSED_MG_5, 33, 0, 300, True),
    (Param.PASSED_MG_6, 71, 0, 300, True),
    (Param.PASSED_MG_7, 135, 0, 300, True),
    (Param.PASSED_EG_2, 12, 0, 300, True),
    (Param.PASSED_EG_3, 21, 0, 300, True),
    (Param.PASSED_EG_4, 48, 0, 300, True),
    (Param.PASSED_EG_5, 93, 0, 300, True),
    (Param.PASSED_EG_6, 161, 0, 300, True),
    (Param.PASSED_EG_7, 266, 0, 300, True),

    # Passed pawn percentage modifiers
    (Param.PASSED_BLOCKED_MUL, 42, 0, 50, True),
    (Param.PASSED_OUR_STOP_MUL, 27, 0, 50, True),
    (Param.PASSED_OPP_STOP_MUL, 29, 0, 50, True),
    (Param.PASSED_DEFENDED_MUL, 6, 0, 50, True),
    (Param.PASSED_STOP_DEFENDED_MUL, 6, 0, 50, True),

    # King's pawn shield
    (Param.SHIELD_NONE, -40, -50, 50, True),
    (Param.SHIELD_2, 2, -50, 50, True),
    (Param.SHIELD_3, -6, -50, 50, True),
    (Param.SHIELD_4, -15, -50, 50, True),
    (Param.SHIELD_5, -23, -50, 50, True),
    (Param.SHIELD_6, -24, -50, 50, True),
    (Param.SHIELD_7, -35, -50, 50, True),

    # Pawn storm
    (Param.STORM_OPEN, -6, -50, 50, True),
    (Param.STORM_3, -16, -50, 50, True),
    (Param.STORM_4, -16, -50, 50, True),
    (Param.STORM_5, -3, -50, 50, True),

    # Knight
    (Param.KNIGHT_TRAPPED, -168, -300, 0, True),
    (Param.KNIGHT_BLOCKS_C, -17, -50, 0, True),
    (Param.KNIGHT_OWN_HALF, -1, -50, 0, True),
    (Param.KNIGHT_REACH, 11, 0, 50, True),
    (Param.MINOR_SHIELD, 5, 0, 50, True),

    # Bishop
    (Param.BISHOP_FIANCHETTO, 13, 0, 50, True),
    (Param.BISHOP_KING, 20, 0, 50, True),
    (Param.BISHOP_BAD_FIANCHETTO, -27, -50, 0, True),
    (Param.BISHOP_TRAPPED_A2, -138, -300, 0, True),
    (Param.BISHOP_TRAPPED_A3, -45, -300, 0, True),
    (Param.BISHOP_BLOCKED, -45, -100, 0, True),
    (Param.BISHOP_FIANCHETTO_BLOCKED_MG, -12, -50, 0, True),
    (Param.BISHOP_FIANCHETTO_BLOCKED_EG, -20, -50, 0, True),
    (Param.BISHOP_WING, 3, 0, 50, True),
    (Param.BISHOP_OWN_HALF, -7, -50, 0, True),
    (Param.BISHOP_REACH, 2, 0, 50, True),
    (Param.BISHOP_TOUCH, 5, 0, 50, True),
    (Param.BISHOP_OWN_PAWN, -3, -50, 0, False),
    (Param.BISHOP_OPP_PAWN, -1, -50, 0, False),
    (Param.BISHOP_RETURN, 7, 0, 50, True),

    # Rook
    (Param.ROOK_SEVENTH_MG, 16, 0, 50, True),
    (Param.ROOK_SEVENTH_EG, 32, 0, 50, True),
    (Param.ROOKS_SEVENTH_MG, 20, 0, 50, True),
    (Param.ROOKS_SEVENTH_EG, 31, 0, 50, True),
    (Param.ROOK_OPEN_MG, 30, 0, 50, True),
    (Param.ROOK_OPEN_EG, 2, 0, 50, True),
    (Param.ROOK_GOOD_HALF_MG, 15, 0, 50, True),
    (Param.ROOK_GOOD_HALF_EG, 20, 0, 50, True),
    (Param.ROOK_BAD_HALF_MG, 0, 0, 50, True),
    (Param.ROOK_BAD_HALF_EG, 0, 0, 50, True),
    (Param.ROOK_QUEEN_MG, 9, 0, 50, True),
    (Param.ROOK_QUEEN_EG, 18, 0, 50, True),
    (Param.ROOK_BLOCKED, -50, -100, 0, True),

    # Queen
    (Param.QUEEN_SEVENTH_MG, 0, 0, 50, True),
    (Param.QUEEN_SEVENTH_EG, 2, 0, 50, True),

    # King
    (Param.KING_NO_LUFT, -11, -50, 0, True),
    (Param.KING_CASTLED, 32, 0, 50, True),

    # Forwardness
    (Param.KNIGHT_FORWARD, 1, 0, 50, False),
    (Param.BISHOP_FORWARD, 1, 0, 50, False),
    (Param.ROOK_FORWARD, 2, 0, 50, False),
    (Param.QUEEN_FORWARD, 4, 0, 50, False),
]

# Tuned mobility curves, one value per reachable-square count; range [-50, 50]
DEFAULT_MOBILITY = {
    (chess.KNIGHT, False): [-32, -14, -7, -7, 2, 7, 13, 13, 25],
    (chess.KNIGHT, True): [-41, -20, -7, 0, 3, 12, 9, 11, 2],
    (chess.BISHOP, False): [-41, -24, -16, -9, -7, 0, 4, 6, 8, 10, 16, 24, 17, 22],
    (chess.BISHOP, True): [-43, -40, -19, -6, 1, 3, 5, 8, 15, 11, 10, 13, 22, 19],
    (chess.ROOK, False): [-14, -16, -14, -9, -9, -10, -5, -2, -3, -2, 5, 7, 9, 23, 24],
    (chess.ROOK, True): [-28, -50, -38, -14, -9, 1, 2, 8, 9, 15, 18, 22, 22, 24, 29],
}
MOBILITY_RANGE = (-50, 50)


def load_default_values(store: ParameterStore) -> None:
    """Populate ``store`` with the automatically tuned weights."""
    for slot, value, lo, hi, tunable in DEFAULT_VALUES:
        store.set_value(slot, value, lo, hi, tunable)

    lo, hi = MOBILITY_RANGE
    for (piece_type, endgame), curve in DEFAULT_MOBILITY.items():
        for slot, value in zip(mobility_slots(piece_type, endgame), curve):
            store.set_value(slot, value, lo, hi, True)

    store.pst_style = 0
    store.mob_style = 1
