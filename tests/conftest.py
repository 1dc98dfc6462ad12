"""Shared fixtures."""

import pytest

from chess_params import EngineParams


@pytest.fixture
def default_params():
    """Engine parameters loaded from the default profile."""
    return EngineParams.from_profile("default")


@pytest.fixture
def personality_params():
    """Engine parameters loaded from the personality profile."""
    return EngineParams.from_profile("personality")
