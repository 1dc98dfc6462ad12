"""
Integer helpers shared by the table builders.

Derived tables must match the engine's integer arithmetic exactly, where
division truncates toward zero rather than flooring.
"""

from types import MappingProxyType
from typing import Mapping, TypeVar

import numpy as np

K = TypeVar("K")


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Integer division truncating toward zero.

    Python's ``//`` floors, so ``-365 // 100 == -4``; this returns ``-3``.
    """
    if denominator == 0:
        raise ZeroDivisionError("trunc_div by zero")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def scale(value: int, percent: int) -> int:
    """Apply a percentage weight: ``value * percent / 100``, truncated."""
    return trunc_div(value * percent, 100)


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    array.setflags(write=False)
    return array


def freeze_mapping(tables: Mapping[K, np.ndarray]) -> Mapping[K, np.ndarray]:
    """Read-only view over a dict of tables, each frozen in turn."""
    return MappingProxyType({key: freeze(table) for key, table in tables.items()})
