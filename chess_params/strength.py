"""
Strength Scaling

Turns a target rating into runtime weakening knobs:

    - node-rate cap (nodes per second)
    - evaluation blur (centipawns of noise)
    - opening book depth (plies)

The node-rate formula follows Michael Byrne's CraftySkill node budget,
divided by 7 to give a speed yielding similar results at blitz. A random
jitter of +/-25 rating points is applied on every call; pass a seeded
``random.Random`` for reproducible results.
"""

import logging
import random
from typing import Optional

from chess_params.config import FULL_BOOK_DEPTH, EngineSettings
from chess_params.utils.numeric import trunc_div

logger = logging.getLogger(__name__)

ELO_JITTER = 25
SPEED_BASE = 1.0069555500567
BLUR_THRESHOLD = 1500
BOOK_THRESHOLD = 2000
BOOK_FLOOR = 700


def elo_to_speed(elo: int, rng: Optional[random.Random] = None) -> int:
    """
    Node-rate cap for a target rating.

    Args:
        elo: Target rating
        rng: Random source (module-level ``random`` if None)

    Returns:
        Nodes per second
    """
    source = rng if rng is not None else random
    rating = source.randint(elo - ELO_JITTER, elo + ELO_JITTER)
    exponent = (trunc_div(rating, 1200) - 1) + (rating - 1200)
    search_nodes = int(pow(SPEED_BASE, exponent) * 128)
    return trunc_div(search_nodes, 7)


def elo_to_blur(elo: int) -> int:
    """Evaluation noise: grows linearly below 1500, zero above."""
    if elo < BLUR_THRESHOLD:
        return trunc_div(BLUR_THRESHOLD - elo, 4)
    return 0


def elo_to_book_depth(elo: int) -> int:
    """Book depth in plies: one per 100 points above 700, full from 2000."""
    if elo < BOOK_THRESHOLD:
        return trunc_div(elo - BOOK_FLOOR, 100)
    return FULL_BOOK_DEPTH


def set_speed(settings: EngineSettings, elo: int, rng: Optional[random.Random] = None) -> None:
    """
    Apply a target rating to the weakening knobs of ``settings``.

    With weakening off, the node-rate cap and blur are cleared and the book
    is used to full depth.
    """
    if not settings.weakening:
        settings.nps_limit = 0
        settings.eval_blur = 0
        settings.book_depth = FULL_BOOK_DEPTH
        return

    settings.nps_limit = elo_to_speed(elo, rng)
    settings.eval_blur = elo_to_blur(elo)
    settings.book_depth = elo_to_book_depth(elo)
    logger.info(
        f"Strength set to {elo}: nps_limit={settings.nps_limit}, "
        f"eval_blur={settings.eval_blur}, book_depth={settings.book_depth}"
    )
