"""
Personality Profile

Hand-picked weights giving a pleasant out-of-the-box opponent, the base
that named personalities adjust. No slot is bounded or tunable.
Mobility uses the formula model, so the tuned mobility slots stay at zero.
"""

from chess_params.params.slots import Param
from chess_params.params.store import ParameterStore

PERSONALITY_VALUES = {
    # Piece values
    Param.PAWN_MG: 95,
    Param.KNIGHT_MG: 310,
    Param.BISHOP_MG: 322,
    Param.ROOK_MG: 514,
    Param.QUEEN_MG: 1000,
    Param.PAWN_EG: 110,
    Param.KNIGHT_EG: 305,
    Param.BISHOP_EG: 320,
    Param.ROOK_EG: 529,
    Param.QUEEN_EG: 1013,

    # Material adjustments
    Param.BISHOP_PAIR: 51,
    Param.KNIGHT_PAIR: -9,
    Param.ROOK_PAIR: -9,
    Param.ELEPHANTIASIS: 4,
    Param.IMB_EXCHANGE: 30,
    Param.IMB_MINOR: 53,
    Param.IMB_MAJOR: 60,
    Param.IMB_TWO_MINORS: 44,
    Param.IMB_ALL: 80,
    Param.KNIGHT_CLOSED: 6,
    Param.ROOK_OPEN: 3,

    # King attack
    Param.KNIGHT_ATT1: 6,
    Param.KNIGHT_ATT2: 3,
    Param.BISHOP_ATT1: 6,
    Param.BISHOP_ATT2: 2,
    Param.ROOK_ATT1: 9,
    Param.ROOK_ATT2: 4,
    Param.QUEEN_ATT1: 16,
    Param.QUEEN_ATT2: 5,
    Param.KNIGHT_CHECK: 4,
    Param.BISHOP_CHECK: 6,
    Param.ROOK_CHECK: 11,
    Param.QUEEN_CHECK: 12,
    Param.ROOK_CONTACT: 24,
    Param.QUEEN_CONTACT: 36,

    # King tropism
    Param.KNIGHT_TROPISM_MG: 3,
    Param.KNIGHT_TROPISM_EG: 3,
    Param.BISHOP_TROPISM_MG: 2,
    Param.BISHOP_TROPISM_EG: 1,
    Param.ROOK_TROPISM_MG: 2,
    Param.ROOK_TROPISM_EG: 1,
    Param.QUEEN_TROPISM_MG: 2,
    Param.QUEEN_TROPISM_EG: 4,

    # Varia
    Param.W_MATERIAL: 100,
    Param.W_PST: 75,

    # Per-side attack and mobility weights
    Param.W_OWN_ATT: 100,
    Param.W_OPP_ATT: 100,
    Param.W_OWN_MOB: 100,
    Param.W_OPP_MOB: 100,

    # Positional weights
    Param.W_THREATS: 109,
    Param.W_TROPISM: 20,
    Param.W_FORWARD: 0,
    Param.W_PASSERS: 100,
    Param.W_MASS: 100,
    Param.W_CHAINS: 100,
    Param.W_OUTPOSTS: 78,
    Param.W_LINES: 100,
    Param.W_STRUCT: 100,
    Param.W_SHIELD: 119,
    Param.W_STORM: 99,
    Param.W_CENTER: 50,

    # Pawn structure
    Param.DOUBLED_MG: -12,
    Param.DOUBLED_EG: -23,
    Param.ISOLATED_MG: -10,
    Param.ISOLATED_EG: -20,
    Param.ISOLATED_OPEN: -10,
    Param.BACKWARD_MG: -8,
    Param.BACKWARD_EG: -8,
    Param.BACKWARD_OPEN: -10,
    Param.PAWN_BIND: 5,
    Param.PAWN_BAD_BIND: 10,
    Param.PAWN_ISLAND: 7,
    Param.PAWN_THREAT: 4,

    # Pawn chains
    Param.CHAIN_BIG: 18,
    Param.CHAIN_SMALL: 13,
    Param.CHAIN_STORM_1: 4,
    Param.CHAIN_STORM_2: 12,
    Param.CHAIN_STORM_FAIL: 10,

    # Passed pawns per rank
    Param.PASSED_MG_2: 11,
    Param.PASSED_MG_3: 12,
    Param.PASSED_MG_4: 24,
    Param.PASSED_MG_5: 45,
    Param.PASSED_MG_6: 78,
    Param.PASSED_MG_7: 130,
    Param.PASSED_EG_2: 22,
    Param.PASSED_EG_3: 23,
    Param.PASSED_EG_4: 57,
    Param.PASSED_EG_5: 96,
    Param.PASSED_EG_6: 161,
    Param.PASSED_EG_7: 260,

    # Passed pawn percentage modifiers
    Param.PASSED_BLOCKED_MUL: 24,
    Param.PASSED_OUR_STOP_MUL: 14,
    Param.PASSED_OPP_STOP_MUL: 10,
    Param.PASSED_DEFENDED_MUL: 4,
    Param.PASSED_STOP_DEFENDED_MUL: 4,

    # King's pawn shield
    Param.SHIELD_NONE: -36,
    Param.SHIELD_2: 2,
    Param.SHIELD_3: -11,
    Param.SHIELD_4: -20,
    Param.SHIELD_5: -27,
    Param.SHIELD_6: -32,
    Param.SHIELD_7: -35,

    # Pawn storm
    Param.STORM_OPEN: -16,
    Param.STORM_3: -32,
    Param.STORM_4: -16,
    Param.STORM_5: -8,

    # Knight
    Param.KNIGHT_TRAPPED: -150,
    Param.KNIGHT_BLOCKS_C: -20,
    Param.KNIGHT_OWN_HALF: -5,
    Param.KNIGHT_REACH: 4,
    Param.MINOR_SHIELD: 5,

    # Bishop
    Param.BISHOP_FIANCHETTO: 4,
    Param.BISHOP_KING: 6,
    Param.BISHOP_BAD_FIANCHETTO: -20,
    Param.BISHOP_TRAPPED_A2: -150,
    Param.BISHOP_TRAPPED_A3: -50,
    Param.BISHOP_BLOCKED: -50,
    Param.BISHOP_FIANCHETTO_BLOCKED_MG: -10,
    Param.BISHOP_FIANCHETTO_BLOCKED_EG: -20,
    Param.BISHOP_WING: 10,
    Param.BISHOP_OWN_HALF: -5,
    Param.BISHOP_REACH: 2,
    Param.BISHOP_TOUCH: 4,
    Param.BISHOP_OWN_PAWN: -3,
    Param.BISHOP_OPP_PAWN: -1,
    Param.BISHOP_RETURN: 10,

    # Rook
    Param.ROOK_SEVENTH_MG: 16,
    Param.ROOK_SEVENTH_EG: 32,
    Param.ROOKS_SEVENTH_MG: 8,
    Param.ROOKS_SEVENTH_EG: 16,
    Param.ROOK_OPEN_MG: 14,
    Param.ROOK_OPEN_EG: 14,
    Param.ROOK_GOOD_HALF_MG: 7,
    Param.ROOK_GOOD_HALF_EG: 7,
    Param.ROOK_BAD_HALF_MG: 5,
    Param.ROOK_BAD_HALF_EG: 5,
    Param.ROOK_QUEEN_MG: 5,
    Param.ROOK_QUEEN_EG: 5,
    Param.ROOK_BLOCKED: -50,

    # Queen
    Param.QUEEN_SEVENTH_MG: 4,
    Param.QUEEN_SEVENTH_EG: 8,

    # King
    Param.KING_NO_LUFT: -15,
    Param.KING_CASTLED: 10,

    # Forwardness
    Param.KNIGHT_FORWARD: 1,
    Param.BISHOP_FORWARD: 1,
    Param.ROOK_FORWARD: 2,
    Param.QUEEN_FORWARD: 4,
}


def load_personality_values(store: ParameterStore) -> None:
    """Populate ``store`` with the hand-tuned personality weights."""
    for slot, value in PERSONALITY_VALUES.items():
        store.assign(slot, value)

    store.pst_style = 0
    store.mob_style = 0
