"""
King-Danger Curve

Maps an accumulated king-attack score (the sum of the ``_ATT``, ``_CHK``
and ``_CONTACT`` slots of attacking pieces) to a centipawn penalty.

The raw accumulator follows ``0.027 * i * i`` while that curve is flat,
then grows by at most 8 units per step, and stops at 1280. Entries are the
accumulator rescaled to centipawns (``* 100 / 256``), so the curve tops
out at 500.

Reference:
    https://www.chessprogramming.org/King_Safety#Attack_Units
"""

import numpy as np

from chess_params.utils.numeric import freeze

DANGER_SIZE = 511
DANGER_RAW_CAP = 1280.0
DANGER_STEP = 8.0
DANGER_CURVATURE = 0.027


def build_king_danger() -> np.ndarray:
    """
    Build the king-danger curve.

    Returns:
        Read-only array of length 511; entry 0 is zero
    """
    danger = np.zeros(DANGER_SIZE, dtype=np.int32)

    t = 0
    for i in range(1, DANGER_SIZE):
        t = int(min(DANGER_RAW_CAP, min(DANGER_CURVATURE * i * i, t + DANGER_STEP)))
        danger[i] = (t * 100) // 256

    return freeze(danger)
