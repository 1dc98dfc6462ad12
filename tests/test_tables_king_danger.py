"""
Unit Tests for the King-Danger Curve
"""

import numpy as np

from chess_params.tables.king_danger import DANGER_SIZE, build_king_danger


class TestKingDanger:
    """Tests for the saturating king-danger curve."""

    def test_size(self):
        assert len(build_king_danger()) == DANGER_SIZE == 511

    def test_starts_at_zero(self):
        danger = build_king_danger()
        assert danger[0] == 0
        assert danger[1] == 0

    def test_non_decreasing(self):
        danger = build_king_danger()
        for i in range(1, 510):
            assert danger[i] <= danger[i + 1], f"danger[{i}] > danger[{i + 1}]"

    def test_bounded(self):
        danger = build_king_danger()
        assert danger.min() >= 0
        assert danger.max() <= 500
        assert danger[510] == 500

    def test_quadratic_region(self):
        """Early entries follow 0.027 * i^2, rescaled by 100 / 256."""
        danger = build_king_danger()
        assert danger[10] == 0
        assert danger[100] == 105

    def test_growth_is_capped(self):
        """At most 8 raw units per step, i.e. at most 4 centipawns."""
        danger = build_king_danger()
        assert np.diff(danger).max() <= 4

    def test_saturates(self):
        danger = build_king_danger()
        assert danger[300] == 500
        assert (danger[300:] == 500).all()

    def test_deterministic(self):
        assert (build_king_danger() == build_king_danger()).all()
