"""
Engine Parameters

One explicit configuration object per engine instance: the parameter
store, the engine settings, and the tables derived from them. Pass it by
reference to the evaluator; several instances can coexist.

Lifecycle:
    params = EngineParams.from_profile("default")   # load + rebuild
    params.tables.mg_pst[chess.WHITE][chess.KNIGHT, chess.E4]
    params.tune(Param.W_PST, 80)                     # bounded update + rebuild

The tables snapshot is replaced wholesale on every rebuild, so readers
holding the previous snapshot never see a half-built state. Mutation is not
synchronized; callers that tune while searching must serialize access.
"""

import logging
import random
from typing import Optional

from chess_params.config import EngineSettings
from chess_params.params.slots import Param
from chess_params.params.store import ParameterStore
from chess_params.profiles import load_profile
from chess_params.strength import set_speed
from chess_params.tables.builder import EvalTables, build_tables
from chess_params.tables.distance import DistanceTables, distance_tables

logger = logging.getLogger(__name__)


class EngineParams:
    """
    Parameter store, settings and derived tables of one engine.

    Attributes:
        store: Slot values, bounds and style selectors
        settings: Strength, book and timing settings
        tables: Tables derived from ``store`` by the last rebuild()
        distance: Square distance tables (shared, never rebuilt)
    """

    def __init__(self, store: ParameterStore, settings: Optional[EngineSettings] = None):
        self.store = store
        self.settings = settings if settings is not None else EngineSettings()
        self.distance: DistanceTables = distance_tables()
        self.tables: EvalTables = build_tables(self.store)

    @classmethod
    def from_profile(cls, name: str = 'default') -> "EngineParams":
        """Load a named profile and derive its tables."""
        store, settings = load_profile(name)
        return cls(store, settings)

    def rebuild(self) -> EvalTables:
        """Re-derive every table from the store's current values."""
        self.tables = build_tables(self.store)
        logger.info("Evaluation tables rebuilt")
        return self.tables

    def tune(self, slot: Param, value: int) -> EvalTables:
        """
        Change one tunable slot within its bounds, then rebuild all tables.

        Slots the profile marks non-tunable (king attack, own vs. opponent
        weights) are refused; use store.update() to change them deliberately.

        Raises:
            ValueError: If the slot is not tunable
            ParameterBoundsError: If value is outside the slot's range;
                the store and tables are left unchanged
        """
        if not self.store.tunable[slot]:
            logger.error(f"{slot.name} is not tunable")
            raise ValueError(f"{slot.name} is not tunable")

        self.store.update(slot, value)
        return self.rebuild()

    def set_speed(self, elo: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        """Apply a target rating (defaults to settings.elo) to the weakening knobs."""
        target = elo if elo is not None else self.settings.elo
        set_speed(self.settings, target, rng)

    def print_tunable_values(self) -> None:
        """Print every tunable slot and its current value."""
        self.store.print_tunable_values()

    def __repr__(self) -> str:
        return f"EngineParams(store={self.store!r}, settings={self.settings!r})"
