"""
Static Template Data

Raw material for the derived tables: piece-square templates, special
positional tables, the pawn-count coefficient shape and the tagged
imbalance template. Nothing here depends on parameter values.

Piece-square templates are written from White's point of view, laid out the
way a board is printed (row 0 = rank 8, row 7 = rank 1). Use
``template_value`` to read one by python-chess square index.

Template styles:
    - Style 0: hand-written tables
    - Style 1: tables generated from per-file and per-rank profiles

Reference:
    Fruit 2.1 piece-square formulas
    https://www.chessprogramming.org/Fruit
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Tuple, Union

import chess
import numpy as np

from chess_params.params.slots import Param


def template_value(table: np.ndarray, square: chess.Square) -> int:
    """Read a printed-layout (8, 8) template at a python-chess square."""
    return int(table[7 - chess.square_rank(square), chess.square_file(square)])


#fmt: off
# ============================================================================
# Style 0 piece-square templates (centipawns, scaled later by W_PST)
# ============================================================================

PAWN_MG_0 = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 8
    [ 10,  10,  10,  10,  10,  10,  10,  10],  # Rank 7
    [  4,   4,   6,   8,   8,   6,   4,   4],  # Rank 6
    [  2,   2,   4,  10,  10,   4,   2,   2],  # Rank 5
    [ -2,   0,   4,  12,  12,   4,   0,  -2],  # Rank 4
    [ -4,  -2,   2,   4,   4,   2,  -2,  -4],  # Rank 3
    [ -4,  -2,   0,  -8,  -8,   0,  -2,  -4],  # Rank 2
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 1
], dtype=np.int32)

PAWN_EG_0 = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [ 30,  30,  30,  30,  30,  30,  30,  30],
    [ 18,  18,  16,  14,  14,  16,  18,  18],
    [ 10,  10,   8,   6,   6,   8,  10,  10],
    [  4,   4,   2,   0,   0,   2,   4,   4],
    [  0,   0,  -2,  -4,  -4,  -2,   0,   0],
    [ -2,  -2,  -4,  -6,  -6,  -4,  -2,  -2],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)

# Knights on the rim are dim
KNIGHT_MG_0 = np.array([
    [-50, -30, -20, -15, -15, -20, -30, -50],
    [-30, -15,   0,   5,   5,   0, -15, -30],
    [-20,   5,  15,  20,  20,  15,   5, -20],
    [-15,  10,  20,  25,  25,  20,  10, -15],
    [-15,   5,  15,  20,  20,  15,   5, -15],
    [-20,   0,  10,  12,  12,  10,   0, -20],
    [-30, -15,   0,   2,   2,   0, -15, -30],
    [-50, -35, -20, -15, -15, -20, -35, -50],
], dtype=np.int32)

KNIGHT_EG_0 = np.array([
    [-40, -30, -20, -15, -15, -20, -30, -40],
    [-30, -15,  -5,   0,   0,  -5, -15, -30],
    [-20,  -5,   5,  10,  10,   5,  -5, -20],
    [-15,   0,  10,  15,  15,  10,   0, -15],
    [-15,   0,  10,  15,  15,  10,   0, -15],
    [-20,  -5,   5,  10,  10,   5,  -5, -20],
    [-30, -15,  -5,   0,   0,  -5, -15, -30],
    [-40, -30, -20, -15, -15, -20, -30, -40],
], dtype=np.int32)

# Long diagonals and fianchetto squares; c1/f1 penalised to encourage development
BISHOP_MG_0 = np.array([
    [-10,  -5,  -5,  -5,  -5,  -5,  -5, -10],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   4,   6,   6,   4,   0,  -5],
    [ -5,   4,   6,  10,  10,   6,   4,  -5],
    [ -5,   2,  10,  10,  10,  10,   2,  -5],
    [ -5,   8,   8,   8,   8,   8,   8,  -5],
    [ -5,  10,   2,   4,   4,   2,  10,  -5],
    [-10,  -5, -12,  -5,  -5, -12,  -5, -10],
], dtype=np.int32)

BISHOP_EG_0 = np.array([
    [-10,  -6,  -4,  -2,  -2,  -4,  -6, -10],
    [ -6,  -2,   0,   2,   2,   0,  -2,  -6],
    [ -4,   0,   4,   6,   6,   4,   0,  -4],
    [ -2,   2,   6,   8,   8,   6,   2,  -2],
    [ -2,   2,   6,   8,   8,   6,   2,  -2],
    [ -4,   0,   4,   6,   6,   4,   0,  -4],
    [ -6,  -2,   0,   2,   2,   0,  -2,  -6],
    [-10,  -6,  -4,  -2,  -2,  -4,  -6, -10],
], dtype=np.int32)

ROOK_MG_0 = np.array([
    [  0,   0,   2,   4,   4,   2,   0,   0],
    [ 10,  12,  12,  12,  12,  12,  12,  10],
    [ -4,   0,   0,   0,   0,   0,   0,  -4],
    [ -4,   0,   0,   0,   0,   0,   0,  -4],
    [ -4,   0,   0,   0,   0,   0,   0,  -4],
    [ -4,   0,   0,   0,   0,   0,   0,  -4],
    [ -6,   0,   0,   0,   0,   0,   0,  -6],
    [ -4,  -2,   2,   6,   6,   2,  -2,  -4],
], dtype=np.int32)

ROOK_EG_0 = np.array([
    [  4,   4,   4,   4,   4,   4,   4,   4],
    [  8,   8,   8,   8,   8,   8,   8,   8],
    [  2,   2,   2,   2,   2,   2,   2,   2],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [ -2,  -2,  -2,  -2,  -2,  -2,  -2,  -2],
    [ -4,  -4,  -4,  -4,  -4,  -4,  -4,  -4],
], dtype=np.int32)

QUEEN_MG_0 = np.array([
    [-10,  -5,  -5,  -2,  -2,  -5,  -5, -10],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   4,   4,   4,   4,   0,  -5],
    [ -2,   0,   4,   5,   5,   4,   0,  -2],
    [ -2,   0,   4,   5,   5,   4,   0,  -2],
    [ -5,   2,   4,   4,   4,   4,   2,  -5],
    [ -5,   0,   2,   0,   0,   0,   0,  -5],
    [-10,  -5,  -5,  -2,  -2,  -5,  -5, -10],
], dtype=np.int32)

QUEEN_EG_0 = np.array([
    [-20, -12,  -8,  -4,  -4,  -8, -12, -20],
    [-12,  -4,   0,   4,   4,   0,  -4, -12],
    [ -8,   0,   8,  12,  12,   8,   0,  -8],
    [ -4,   4,  12,  16,  16,  12,   4,  -4],
    [ -4,   4,  12,  16,  16,  12,   4,  -4],
    [ -8,   0,   8,  12,  12,   8,   0,  -8],
    [-12,  -4,   0,   4,   4,   0,  -4, -12],
    [-20, -12,  -8,  -4,  -4,  -8, -12, -20],
], dtype=np.int32)

# Stay behind the pawn shield in the middlegame
KING_MG_0 = np.array([
    [-40, -40, -40, -50, -50, -40, -40, -40],
    [-40, -40, -40, -50, -50, -40, -40, -40],
    [-40, -40, -40, -50, -50, -40, -40, -40],
    [-30, -35, -35, -40, -40, -35, -35, -30],
    [-20, -25, -25, -30, -30, -25, -25, -20],
    [-10, -15, -15, -20, -20, -15, -15, -10],
    [ 10,  10,   0, -10, -10,   0,  10,  10],
    [ 20,  30,  15,   0,   5,   0,  30,  20],
], dtype=np.int32)

# Centralise in the endgame
KING_EG_0 = np.array([
    [-50, -35, -25, -20, -20, -25, -35, -50],
    [-35, -15,  -5,   0,   0,  -5, -15, -35],
    [-25,  -5,  10,  15,  15,  10,  -5, -25],
    [-20,   0,  15,  25,  25,  15,   0, -20],
    [-20,   0,  15,  25,  25,  15,   0, -20],
    [-25,  -5,  10,  15,  15,  10,  -5, -25],
    [-35, -15,  -5,   0,   0,  -5, -15, -35],
    [-50, -35, -25, -20, -20, -25, -35, -50],
], dtype=np.int32)


# ============================================================================
# Special positional tables (not scaled by weights)
# ============================================================================

KNIGHT_OUTPOST = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   2,   4,   8,   8,   4,   2,   0],
    [  0,   2,   6,  10,  10,   6,   2,   0],
    [  0,   1,   4,   6,   6,   4,   1,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)

BISHOP_OUTPOST = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   1,   3,   4,   4,   3,   1,   0],
    [  0,   2,   4,   6,   6,   4,   2,   0],
    [  0,   1,   2,   3,   3,   2,   1,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)

DEFENDED_PAWN_MG = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  8,   8,   8,   8,   8,   8,   8,   8],
    [  6,   6,   6,   6,   6,   6,   6,   6],
    [  4,   4,   5,   6,   6,   5,   4,   4],
    [  2,   2,   3,   5,   5,   3,   2,   2],
    [  1,   1,   2,   3,   3,   2,   1,   1],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)

PHALANX_PAWN_MG = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [ 10,  10,  10,  10,  10,  10,  10,  10],
    [  6,   6,   7,   8,   8,   7,   6,   6],
    [  3,   4,   6,   8,   8,   6,   4,   3],
    [  2,   3,   4,   6,   6,   4,   3,   2],
    [  0,   1,   2,   3,   3,   2,   1,   0],
    [  0,   0,   1,   1,   1,   1,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)

DEFENDED_PAWN_EG = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [ 12,  12,  12,  12,  12,  12,  12,  12],
    [  8,   8,   8,   8,   8,   8,   8,   8],
    [  5,   5,   5,   5,   5,   5,   5,   5],
    [  3,   3,   3,   3,   3,   3,   3,   3],
    [  1,   1,   1,   1,   1,   1,   1,   1],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)

PHALANX_PAWN_EG = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [ 14,  14,  14,  14,  14,  14,  14,  14],
    [ 10,  10,  10,  10,  10,  10,  10,  10],
    [  6,   6,   6,   6,   6,   6,   6,   6],
    [  3,   3,   3,   3,   3,   3,   3,   3],
    [  1,   1,   1,   1,   1,   1,   1,   1],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)
#fmt: on


# ============================================================================
# Style 1: formula-generated templates
# ============================================================================
# Each table is the sum of a per-file and a per-rank profile, indexed
# 0-7 from the a-file / first rank.

_LINE = (-3, -1, 0, 1, 1, 0, -1, -3)
_PAWN_FILE = (-3, -1, 0, 1, 1, 0, -1, -3)
_KNIGHT_LINE = (-4, -2, 0, 1, 1, 0, -2, -4)
_KNIGHT_RANK = (-2, -1, 0, 1, 2, 3, 2, 1)
_KING_FILE = (3, 4, 2, 0, 0, 2, 4, 3)
_KING_RANK = (1, 0, -2, -3, -4, -5, -6, -7)


def _from_formula(formula: Callable[[int, int], int]) -> np.ndarray:
    """Build a printed-layout template from ``formula(file, rank)``."""
    table = np.zeros((8, 8), dtype=np.int32)
    for rank in range(8):
        for file in range(8):
            table[7 - rank, file] = formula(file, rank)
    return table


def _pawn_mg(file: int, rank: int) -> int:
    if rank in (0, 7):
        return 0
    score = _PAWN_FILE[file] * 5
    if file in (3, 4) and rank in (3, 4):
        score += 10
    return score


def _knight_mg(file: int, rank: int) -> int:
    score = (_KNIGHT_LINE[file] + _KNIGHT_LINE[rank]) * 5 + _KNIGHT_RANK[rank] * 5
    if rank == 7 and file in (0, 7):
        score -= 100  # trapped in the enemy corner
    return score


def _bishop_mg(file: int, rank: int) -> int:
    score = (_LINE[file] + _LINE[rank]) * 2
    if rank == 0:
        score -= 10
    if file == rank or file + rank == 7:
        score += 4
    return score


def _queen_mg(file: int, rank: int) -> int:
    return -5 if rank == 0 else 0


STYLE_1 = {
    (chess.PAWN, False): _from_formula(_pawn_mg),
    (chess.PAWN, True): _from_formula(lambda f, r: 0),
    (chess.KNIGHT, False): _from_formula(_knight_mg),
    (chess.KNIGHT, True): _from_formula(lambda f, r: (_KNIGHT_LINE[f] + _KNIGHT_LINE[r]) * 5),
    (chess.BISHOP, False): _from_formula(_bishop_mg),
    (chess.BISHOP, True): _from_formula(lambda f, r: (_LINE[f] + _LINE[r]) * 3),
    (chess.ROOK, False): _from_formula(lambda f, r: _LINE[f] * 3),
    (chess.ROOK, True): _from_formula(lambda f, r: 0),
    (chess.QUEEN, False): _from_formula(_queen_mg),
    (chess.QUEEN, True): _from_formula(lambda f, r: (_LINE[f] + _LINE[r]) * 4),
    (chess.KING, False): _from_formula(lambda f, r: (_KING_FILE[f] + _KING_RANK[r]) * 10),
    (chess.KING, True): _from_formula(lambda f, r: (_LINE[f] + _LINE[r]) * 12),
}

STYLE_0 = {
    (chess.PAWN, False): PAWN_MG_0,
    (chess.PAWN, True): PAWN_EG_0,
    (chess.KNIGHT, False): KNIGHT_MG_0,
    (chess.KNIGHT, True): KNIGHT_EG_0,
    (chess.BISHOP, False): BISHOP_MG_0,
    (chess.BISHOP, True): BISHOP_EG_0,
    (chess.ROOK, False): ROOK_MG_0,
    (chess.ROOK, True): ROOK_EG_0,
    (chess.QUEEN, False): QUEEN_MG_0,
    (chess.QUEEN, True): QUEEN_EG_0,
    (chess.KING, False): KING_MG_0,
    (chess.KING, True): KING_EG_0,
}

PST_TEMPLATES: Dict[int, Dict[Tuple[chess.PieceType, bool], np.ndarray]] = {
    0: STYLE_0,
    1: STYLE_1,
}

for _style in PST_TEMPLATES.values():
    for _table in _style.values():
        _table.setflags(write=False)


def pst_template(style: int, piece_type: chess.PieceType, endgame: bool) -> np.ndarray:
    """
    Raw piece-square template.

    Args:
        style: Template style (0 or 1)
        piece_type: python-chess piece type
        endgame: True for the endgame table

    Returns:
        Read-only (8, 8) array in printed layout

    Raises:
        ValueError: If the style does not exist
    """
    if style not in PST_TEMPLATES:
        raise ValueError(f"Unknown piece-square style {style}, expected one of {sorted(PST_TEMPLATES)}")
    return PST_TEMPLATES[style][(piece_type, endgame)]


class SpecialSquare(IntEnum):
    """Categories of the special positional tables."""
    KNIGHT_OUTPOST = 0
    BISHOP_OUTPOST = 1
    DEFENDED_PAWN_MG = 2
    PHALANX_PAWN_MG = 3
    DEFENDED_PAWN_EG = 4
    PHALANX_PAWN_EG = 5


SPECIAL_TEMPLATES = {
    SpecialSquare.KNIGHT_OUTPOST: KNIGHT_OUTPOST,
    SpecialSquare.BISHOP_OUTPOST: BISHOP_OUTPOST,
    SpecialSquare.DEFENDED_PAWN_MG: DEFENDED_PAWN_MG,
    SpecialSquare.PHALANX_PAWN_MG: PHALANX_PAWN_MG,
    SpecialSquare.DEFENDED_PAWN_EG: DEFENDED_PAWN_EG,
    SpecialSquare.PHALANX_PAWN_EG: PHALANX_PAWN_EG,
}


# ============================================================================
# Material
# ============================================================================

# Multiplier applied to the knight/rook pawn-count slots, by own pawn count 0-8
PAWN_COUNT_COEFFICIENTS = (-4, -3, -2, -1, 0, 1, 2, 3, 4)


@dataclass(frozen=True)
class CategoryRef:
    """Imbalance template cell taking its value from a parameter slot."""

    slot: Param
    sign: int = 1

    def __neg__(self) -> "CategoryRef":
        return CategoryRef(self.slot, -self.sign)


ImbalanceCell = Union[int, CategoryRef]

EXC = CategoryRef(Param.IMB_EXCHANGE)
MIN = CategoryRef(Param.IMB_MINOR)
MAJ = CategoryRef(Param.IMB_MAJOR)
TWO = CategoryRef(Param.IMB_TWO_MINORS)
ALL = CategoryRef(Param.IMB_ALL)

# Row: major-piece balance + 4, column: minor-piece balance + 4.
# Antisymmetric: cell[i][j] == -cell[8 - i][8 - j].
#fmt: off
IMBALANCE_TEMPLATE: Tuple[Tuple[ImbalanceCell, ...], ...] = (
    #  n=-4   n=-3   n=-2   n=-1   n=0    n=+1   n=+2   n=+3   n=+4
    (-ALL,  -ALL,  -ALL,  -ALL,  -MAJ,  -120,   -90,   -60,   -30),  # R=-4
    (-ALL,  -ALL,  -ALL,  -ALL,  -MAJ,   -90,   -60,   -30,     0),  # R=-3
    (-ALL,  -ALL,  -ALL,  -ALL,  -MAJ,   -60,     0,    30,    60),  # R=-2
    (-ALL,  -ALL,  -ALL,  -ALL,  -MAJ,  -EXC,   TWO,    60,    90),  # R=-1
    (-MIN,  -MIN,  -MIN,  -MIN,     0,   MIN,   MIN,   MIN,   MIN),  # R=0
    ( -90,   -60,  -TWO,   EXC,   MAJ,   ALL,   ALL,   ALL,   ALL),  # R=+1
    ( -60,   -30,     0,    60,   MAJ,   ALL,   ALL,   ALL,   ALL),  # R=+2
    (   0,    30,    60,    90,   MAJ,   ALL,   ALL,   ALL,   ALL),  # R=+3
    (  30,    60,    90,   120,   MAJ,   ALL,   ALL,   ALL,   ALL),  # R=+4
)
#fmt: on
