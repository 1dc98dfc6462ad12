"""
Unit Tests for Distance Tables
"""

import chess

from chess_params.tables import distance_tables


class TestDistanceTables:
    """Tests for tropism bonus and Chebyshev distance."""

    def test_same_square(self):
        tables = distance_tables()
        for square in chess.SQUARES:
            assert tables.bonus[square, square] == 14
            assert tables.metric[square, square] == 0

    def test_symmetric(self):
        tables = distance_tables()
        assert (tables.bonus == tables.bonus.T).all()
        assert (tables.metric == tables.metric.T).all()

    def test_corners(self):
        tables = distance_tables()
        assert tables.bonus[chess.A1, chess.H8] == 0
        assert tables.metric[chess.A1, chess.H8] == 7
        assert tables.bonus[chess.A1, chess.H1] == 7
        assert tables.metric[chess.A1, chess.H1] == 7

    def test_knight_jump(self):
        tables = distance_tables()
        assert tables.bonus[chess.G1, chess.F3] == 11
        assert tables.metric[chess.G1, chess.F3] == 2

    def test_metric_matches_python_chess(self):
        tables = distance_tables()
        for a in chess.SQUARES:
            for b in chess.SQUARES:
                assert tables.metric[a, b] == chess.square_distance(a, b)

    def test_built_once(self):
        assert distance_tables() is distance_tables()

    def test_shared_by_engine_params(self, default_params, personality_params):
        assert default_params.distance is personality_params.distance


class TestDistanceSnapshot:
    def test_compares_by_identity(self):
        assert distance_tables() == distance_tables()
