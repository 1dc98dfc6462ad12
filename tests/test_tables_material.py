"""
Unit Tests for Material Tables

Tests for pawn-count adjustments and the imbalance table, focusing on:
    - Coefficient shape times the tunable slot
    - Category references resolved with their sign
    - Antisymmetry of the imbalance table
    - Loud failure on template mismatches
"""

import pytest

from chess_params import Param, ParameterStore, TemplateMismatchError
from chess_params.tables.material import (
    build_imbalance,
    build_pawn_count_tables,
    imbalance_index,
    validate_imbalance_template,
)
from chess_params.tables.templates import IMBALANCE_TEMPLATE, CategoryRef


class TestPawnCountTables:
    """Tests for knight/rook adjustments by own pawn count."""

    def test_default(self, default_params):
        tables = default_params.tables
        assert list(tables.knight_pawn_adj) == [6 * (n - 4) for n in range(9)]
        assert list(tables.rook_pawn_adj) == [0] * 9

    def test_personality(self, personality_params):
        tables = personality_params.tables
        assert list(tables.rook_pawn_adj) == [3 * (n - 4) for n in range(9)]

    def test_follows_store(self):
        store = ParameterStore()
        store.assign(Param.KNIGHT_CLOSED, -2)
        knight, _ = build_pawn_count_tables(store)

        assert knight[0] == 8
        assert knight[4] == 0
        assert knight[8] == -8


class TestImbalance:
    """Tests for the imbalance table."""

    def test_categories_resolved(self, default_params):
        imbalance = default_params.tables.imbalance

        assert imbalance[imbalance_index(1, -1)] == 31    # exchange up
        assert imbalance[imbalance_index(-1, 1)] == -31
        assert imbalance[imbalance_index(0, 1)] == 58     # minor up
        assert imbalance[imbalance_index(1, 0)] == 55     # major up
        assert imbalance[imbalance_index(-1, 2)] == 29    # two minors for a rook
        assert imbalance[imbalance_index(1, -2)] == -29
        assert imbalance[imbalance_index(2, 3)] == 65     # up in both
        assert imbalance[imbalance_index(0, 0)] == 0

    def test_literal_cells_kept(self, default_params):
        imbalance = default_params.tables.imbalance
        assert imbalance[8, 0] == 30
        assert imbalance[0, 8] == -30
        assert imbalance[6, 2] == 0

    @pytest.mark.parametrize("profile_fixture", ["default_params", "personality_params"])
    def test_antisymmetric(self, request, profile_fixture):
        imbalance = request.getfixturevalue(profile_fixture).tables.imbalance
        for i in range(9):
            for j in range(9):
                assert imbalance[i, j] == -imbalance[8 - i, 8 - j]

    def test_rebuild_picks_up_new_value(self, default_params):
        default_params.tune(Param.IMB_EXCHANGE, -20)

        assert default_params.tables.imbalance[imbalance_index(1, -1)] == -20
        assert default_params.tables.imbalance[imbalance_index(-1, 1)] == 20

    def test_index_clamped(self):
        assert imbalance_index(0, 0) == (4, 4)
        assert imbalance_index(7, -9) == (8, 0)
        assert imbalance_index(-5, 5) == (0, 8)


class TestTemplateValidation:
    """A template that does not match the category slots fails loudly."""

    def _template_with(self, i, j, cell):
        rows = [list(row) for row in IMBALANCE_TEMPLATE]
        rows[i][j] = cell
        return rows

    def test_shipped_template_valid(self):
        validate_imbalance_template(IMBALANCE_TEMPLATE)

    def test_foreign_slot_rejected(self):
        template = self._template_with(4, 4, CategoryRef(Param.PAWN_MG))

        with pytest.raises(TemplateMismatchError, match="PAWN_MG"):
            build_imbalance(ParameterStore(), template)

    def test_unused_category_rejected(self):
        rows = [
            [0 if isinstance(cell, CategoryRef) and cell.slot == Param.IMB_ALL else cell
             for cell in row]
            for row in IMBALANCE_TEMPLATE
        ]

        with pytest.raises(TemplateMismatchError, match="IMB_ALL"):
            build_imbalance(ParameterStore(), rows)

    def test_wrong_shape_rejected(self):
        with pytest.raises(TemplateMismatchError):
            build_imbalance(ParameterStore(), IMBALANCE_TEMPLATE[:8])

    def test_unsupported_cell_rejected(self):
        template = self._template_with(0, 0, "A_EXC")

        with pytest.raises(TemplateMismatchError):
            validate_imbalance_template(template)

    def test_negated_reference(self):
        ref = -CategoryRef(Param.IMB_MINOR)
        assert ref.sign == -1
        assert (-ref).sign == 1
