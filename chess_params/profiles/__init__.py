"""
Profiles Module

Initial parameter sets. Exactly one profile populates a store:

    - "default": automatically tuned, tunable slots carry tuning ranges
    - "personality": hand-tuned base for engine personalities, no tunable slots

Both profiles start from full-strength EngineSettings.
"""

import logging
from typing import Callable, Dict, Tuple

from chess_params.config import EngineSettings
from chess_params.params.store import ParameterStore
from chess_params.profiles.default import load_default_values
from chess_params.profiles.personality import load_personality_values

logger = logging.getLogger(__name__)

PROFILES: Dict[str, Callable[[ParameterStore], None]] = {
    'default': load_default_values,
    'personality': load_personality_values,
}


def load_profile(name: str) -> Tuple[ParameterStore, EngineSettings]:
    """
    Create a store populated by the named profile.

    Args:
        name: "default" or "personality"

    Returns:
        (store, settings)

    Raises:
        ValueError: If the profile is unknown
    """
    if name not in PROFILES:
        raise ValueError(f"Unknown profile '{name}', expected one of {sorted(PROFILES)}")

    store = ParameterStore()
    PROFILES[name](store)
    logger.info(f"Loaded '{name}' profile: {store!r}")
    return store, EngineSettings()


def load_default_profile() -> Tuple[ParameterStore, EngineSettings]:
    """Store and settings of the automatically tuned profile."""
    return load_profile('default')


def load_personality_profile() -> Tuple[ParameterStore, EngineSettings]:
    """Store and settings of the hand-tuned personality profile."""
    return load_profile('personality')


__all__ = [
    'PROFILES',
    'load_profile',
    'load_default_profile',
    'load_personality_profile',
]
