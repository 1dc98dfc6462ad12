"""
Unit Tests for Utilities

Tests for integer helpers and logger setup.
"""

import logging

import numpy as np
import pytest

from chess_params.utils import freeze, freeze_mapping, scale, setup_logger, trunc_div


class TestIntegerHelpers:
    """Division must truncate toward zero, not floor."""

    @pytest.mark.parametrize("numerator,denominator,expected", [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (-365, 100, -3),
        (0, 5, 0),
    ])
    def test_trunc_div(self, numerator, denominator, expected):
        assert trunc_div(numerator, denominator) == expected

    def test_trunc_div_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)

    def test_scale(self):
        assert scale(91, 98) == 89
        assert scale(-50, 73) == -36
        assert scale(305, 100) == 305

    def test_freeze(self):
        array = freeze(np.zeros(3, dtype=np.int32))
        with pytest.raises(ValueError):
            array[0] = 1

    def test_freeze_mapping(self):
        tables = freeze_mapping({"a": np.zeros(3, dtype=np.int32)})

        with pytest.raises(TypeError):
            tables["a"] = None
        with pytest.raises(ValueError):
            tables["a"][0] = 1


class TestSetupLogger:
    """Tests for the package logger."""

    def test_levels(self):
        assert setup_logger(debug=True).level == logging.DEBUG
        assert setup_logger(debug=False).level == logging.INFO

    def test_single_handler(self):
        setup_logger()
        logger = setup_logger()
        assert logger.name == "chess_params"
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "params.log"
        logger = setup_logger(log_file=log_file)
        logger.info("tables rebuilt")
        for handler in logger.handlers:
            handler.flush()

        assert "[INFO] tables rebuilt" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
