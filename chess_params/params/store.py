"""
Parameter Store

Holds the current value of every evaluation slot together with the bounds
and tunability flags used by external tuning tools.

Bounds policy:
    A value outside its declared [min, max] range is rejected. The store
    raises ParameterBoundsError before assigning, so a failed call leaves
    the slot untouched.

The store does not track which derived tables depend on which slot. After
changing values, rebuild the tables (see EngineParams.rebuild).
"""

import logging
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, TextIO

import chess

from chess_params.params.slots import Param

logger = logging.getLogger(__name__)

PST_STYLES = (0, 1)
MOBILITY_STYLES = (0, 1)


class ParameterBoundsError(ValueError):
    """Raised when a slot is given a value outside its declared range."""

    def __init__(self, slot: Param, value: int, min_value: int, max_value: int):
        self.slot = slot
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"{slot.name}: value {value} outside [{min_value}, {max_value}]"
        )


@dataclass(frozen=True)
class TunableParam:
    """One tunable slot as exposed to tuning tools."""

    name: str
    value: int
    min_value: int
    max_value: int


class ParameterStore:
    """
    Named evaluation slots with bounds and tunability flags.

    Attributes:
        values: Current value of every slot (0 until assigned)
        min_value: Lower bound per slot, for slots given bounds
        max_value: Upper bound per slot, for slots given bounds
        tunable: Whether the slot is exposed to tuning tools
        keep_piece: Tendency to keep own pieces, per piece type (reserved)
        pst_style: Piece-square template set selector
        mob_style: 0 = formula mobility, 1 = tuned mobility slots
    """

    def __init__(self, pst_style: int = 0, mob_style: int = 0):
        self.values: Dict[Param, int] = {slot: 0 for slot in Param}
        self.min_value: Dict[Param, int] = {}
        self.max_value: Dict[Param, int] = {}
        self.tunable: Dict[Param, bool] = {slot: False for slot in Param}
        self.keep_piece: Dict[chess.PieceType, int] = {
            piece_type: 0 for piece_type in chess.PIECE_TYPES
        }
        self._pst_style = 0
        self._mob_style = 0
        self.pst_style = pst_style
        self.mob_style = mob_style

    @property
    def pst_style(self) -> int:
        return self._pst_style

    @pst_style.setter
    def pst_style(self, style: int) -> None:
        if style not in PST_STYLES:
            raise ValueError(f"pst_style should be one of {PST_STYLES}, got {style}")
        self._pst_style = style

    @property
    def mob_style(self) -> int:
        return self._mob_style

    @mob_style.setter
    def mob_style(self, style: int) -> None:
        if style not in MOBILITY_STYLES:
            raise ValueError(f"mob_style should be one of {MOBILITY_STYLES}, got {style}")
        self._mob_style = style

    def __getitem__(self, slot: Param) -> int:
        return self.values[slot]

    def set_value(
        self,
        slot: Param,
        value: int,
        min_value: int,
        max_value: int,
        tunable: bool = True,
    ) -> None:
        """
        Assign a value and record its bounds and tunability.

        Args:
            slot: Parameter slot
            value: New value
            min_value: Inclusive lower bound
            max_value: Inclusive upper bound
            tunable: Expose the slot to tuning tools

        Raises:
            ParameterBoundsError: If value is outside [min_value, max_value]
        """
        if min_value > max_value:
            raise ValueError(
                f"{slot.name}: empty range [{min_value}, {max_value}]"
            )
        if not min_value <= value <= max_value:
            logger.error(f"{slot.name}: {value} outside [{min_value}, {max_value}]")
            raise ParameterBoundsError(slot, value, min_value, max_value)

        self.values[slot] = value
        self.min_value[slot] = min_value
        self.max_value[slot] = max_value
        self.tunable[slot] = tunable

    def assign(self, slot: Param, value: int) -> None:
        """Assign a value without bounds; the slot becomes non-tunable."""
        self.values[slot] = value
        self.min_value.pop(slot, None)
        self.max_value.pop(slot, None)
        self.tunable[slot] = False

    def update(self, slot: Param, value: int) -> None:
        """
        Change the value of an existing slot, keeping its bounds.

        Used by tuning tools at runtime. Slots with recorded bounds are
        checked against them; slots without bounds accept any value.

        Raises:
            ParameterBoundsError: If value is outside the recorded range
        """
        if slot in self.min_value:
            lo, hi = self.min_value[slot], self.max_value[slot]
            if not lo <= value <= hi:
                logger.error(f"{slot.name}: {value} outside [{lo}, {hi}]")
                raise ParameterBoundsError(slot, value, lo, hi)

        logger.debug(f"{slot.name}: {self.values[slot]} -> {value}")
        self.values[slot] = value

    def tunable_values(self) -> List[TunableParam]:
        """Name, current value and bounds of every tunable slot, in slot order."""
        return [
            TunableParam(slot.name, self.values[slot], self.min_value[slot], self.max_value[slot])
            for slot in Param
            if self.tunable[slot]
        ]

    def format_tunable_values(self, per_line: int = 4) -> str:
        """Render tunable slots as fixed-width "name : value" cells."""
        cells = [f"{p.name:>14} : {p.value:4d}" for p in self.tunable_values()]
        lines = [
            "     ".join(cells[i:i + per_line])
            for i in range(0, len(cells), per_line)
        ]
        return "\n".join(lines)

    def print_tunable_values(self, file: Optional[TextIO] = None) -> None:
        """Print every tunable slot and its current value."""
        out = file if file is not None else sys.stdout
        print("", file=out)
        print(self.format_tunable_values(), file=out)
        print("", file=out)

    def __repr__(self) -> str:
        n_tunable = sum(self.tunable.values())
        return (
            f"ParameterStore(slots={len(self.values)}, tunable={n_tunable}, "
            f"pst_style={self.pst_style}, mob_style={self.mob_style})"
        )
