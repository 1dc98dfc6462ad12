"""
Material Adjustment and Imbalance Builder

Pawn-count tables:
    Knights gain and rooks lose value as own pawns accumulate:
    ``knight_pawn_adj[n] = PAWN_COUNT_COEFFICIENTS[n] * KNIGHT_CLOSED``.

Imbalance table:
    A 9x9 template indexed by (major-piece balance + 4, minor-piece
    balance + 4). Cells are either literal bonuses or references to one of
    the five imbalance category slots, possibly negated. References are
    resolved against the store's current values.
"""

import logging
from typing import Sequence, Tuple

import numpy as np

from chess_params.params.slots import IMBALANCE_CATEGORIES, Param
from chess_params.params.store import ParameterStore
from chess_params.tables.templates import (
    IMBALANCE_TEMPLATE,
    PAWN_COUNT_COEFFICIENTS,
    CategoryRef,
    ImbalanceCell,
)
from chess_params.utils.numeric import freeze

logger = logging.getLogger(__name__)

IMBALANCE_SIZE = 9


class TemplateMismatchError(ValueError):
    """Raised when the imbalance template does not match the category slots."""


def build_pawn_count_tables(store: ParameterStore) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build knight and rook value adjustments by own pawn count.

    Returns:
        (knight_adj, rook_adj): read-only arrays of length 9
    """
    knight = [c * store[Param.KNIGHT_CLOSED] for c in PAWN_COUNT_COEFFICIENTS]
    rook = [c * store[Param.ROOK_OPEN] for c in PAWN_COUNT_COEFFICIENTS]
    return (
        freeze(np.array(knight, dtype=np.int32)),
        freeze(np.array(rook, dtype=np.int32)),
    )


def validate_imbalance_template(template: Sequence[Sequence[ImbalanceCell]]) -> None:
    """
    Check the template shape and its category references.

    Raises:
        TemplateMismatchError: If the template is not 9x9, references a slot
            that is not an imbalance category, or leaves a category unused
    """
    if len(template) != IMBALANCE_SIZE or any(len(row) != IMBALANCE_SIZE for row in template):
        raise TemplateMismatchError(f"Imbalance template must be {IMBALANCE_SIZE}x{IMBALANCE_SIZE}")

    referenced = set()
    for i, row in enumerate(template):
        for j, cell in enumerate(row):
            if isinstance(cell, CategoryRef):
                if cell.slot not in IMBALANCE_CATEGORIES:
                    raise TemplateMismatchError(
                        f"Cell ({i}, {j}) references {cell.slot.name}, "
                        f"which is not an imbalance category"
                    )
                referenced.add(cell.slot)
            elif not isinstance(cell, int):
                raise TemplateMismatchError(f"Cell ({i}, {j}) has unsupported value {cell!r}")

    missing = IMBALANCE_CATEGORIES - referenced
    if missing:
        names = ", ".join(sorted(slot.name for slot in missing))
        raise TemplateMismatchError(f"Imbalance template never references {names}")


def build_imbalance(
    store: ParameterStore,
    template: Sequence[Sequence[ImbalanceCell]] = IMBALANCE_TEMPLATE,
) -> np.ndarray:
    """
    Resolve the imbalance template against current category values.

    Args:
        store: Parameter store providing the five category slots
        template: Tagged 9x9 template

    Returns:
        Read-only (9, 9) array

    Raises:
        TemplateMismatchError: See validate_imbalance_template
    """
    validate_imbalance_template(template)

    table = np.zeros((IMBALANCE_SIZE, IMBALANCE_SIZE), dtype=np.int32)
    for i, row in enumerate(template):
        for j, cell in enumerate(row):
            if isinstance(cell, CategoryRef):
                table[i, j] = cell.sign * store[cell.slot]
            else:
                table[i, j] = cell

    logger.debug("Built imbalance table")
    return freeze(table)


def imbalance_index(major_balance: int, minor_balance: int) -> Tuple[int, int]:
    """Table index for a material balance, clamped to the table edges."""
    return (
        min(max(major_balance + 4, 0), IMBALANCE_SIZE - 1),
        min(max(minor_balance + 4, 0), IMBALANCE_SIZE - 1),
    )
