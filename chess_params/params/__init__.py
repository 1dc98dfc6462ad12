"""
Parameters Module

Key Components:
    - Param: Enumeration of every evaluation slot
    - ParameterStore: Slot values, bounds and tunability flags
    - ParameterBoundsError: Raised for out-of-range values
"""

from chess_params.params.slots import Param, mobility_slots, passer_slots
from chess_params.params.store import ParameterBoundsError, ParameterStore, TunableParam

__all__ = [
    'Param',
    'ParameterStore',
    'ParameterBoundsError',
    'TunableParam',
    'mobility_slots',
    'passer_slots',
]
