"""
Unit Tests for Piece-Square Tables

Tests for the piece-square table builder, focusing on:
    - Side mirroring (Black's table is White's reflected)
    - Weighted material + template arithmetic with truncating division
    - Special tables copied from templates
"""

import chess
import pytest

from chess_params import EngineParams, Param, build_tables
from chess_params.tables import SpecialSquare
from chess_params.tables.pst import build_pst, build_special_pst, relative_square
from chess_params.tables.templates import KNIGHT_MG_0, pst_template, template_value


class TestMirroring:
    """Tests for side-relative placement."""

    @pytest.mark.parametrize("profile", ["default", "personality"])
    @pytest.mark.parametrize("pst_style", [0, 1])
    def test_black_mirrors_white(self, profile, pst_style):
        """whitePst[piece][s] == blackPst[piece][mirror(s)] for all squares."""
        params = EngineParams.from_profile(profile)
        params.store.pst_style = pst_style
        mg, eg = build_pst(params.store)

        for piece_type in chess.PIECE_TYPES:
            for square in chess.SQUARES:
                mirror = chess.square_mirror(square)
                assert mg[chess.WHITE][piece_type, square] == mg[chess.BLACK][piece_type, mirror]
                assert eg[chess.WHITE][piece_type, square] == eg[chess.BLACK][piece_type, mirror]

    def test_special_tables_mirrored(self):
        special = build_special_pst()

        for category in SpecialSquare:
            for square in chess.SQUARES:
                assert (
                    special[chess.WHITE][category, square]
                    == special[chess.BLACK][category, chess.square_mirror(square)]
                )

    def test_relative_square(self):
        assert relative_square(chess.E2, chess.WHITE) == chess.E2
        assert relative_square(chess.E2, chess.BLACK) == chess.E7


class TestValues:
    """Tests for the weighted value arithmetic."""

    def test_pawn_on_zero_template_square(self, default_params):
        """91 * 98 / 100 + 0 * 73 / 100 == 89."""
        mg = default_params.tables.mg_pst

        assert template_value(pst_template(0, chess.PAWN, False), chess.A1) == 0
        assert mg[chess.WHITE][chess.PAWN, chess.A1] == 89
        assert mg[chess.BLACK][chess.PAWN, chess.A8] == 89

    def test_knight_centre(self, default_params):
        """305 * 98 / 100 = 298, 20 * 73 / 100 = 14."""
        assert template_value(KNIGHT_MG_0, chess.E4) == 20
        assert default_params.tables.mg_pst[chess.WHITE][chess.KNIGHT, chess.E4] == 312
        assert default_params.tables.mg_pst[chess.BLACK][chess.KNIGHT, chess.E5] == 312

    def test_negative_template_truncates_toward_zero(self, default_params):
        """-50 * 73 / 100 is -36, not -37."""
        assert template_value(KNIGHT_MG_0, chess.A1) == -50
        assert default_params.tables.mg_pst[chess.WHITE][chess.KNIGHT, chess.A1] == 298 - 36

    def test_king_has_no_material(self, default_params):
        """King entries use only the weighted template."""
        mg = default_params.tables.mg_pst
        template = pst_template(0, chess.KING, False)

        for square in chess.SQUARES:
            raw = template_value(template, square)
            expected = int(raw * 73 / 100)
            assert mg[chess.WHITE][chess.KING, square] == expected

    def test_formula_matches_every_square(self, personality_params):
        """Personality weights: material 100, pst 75."""
        store = personality_params.store
        eg = personality_params.tables.eg_pst
        template = pst_template(0, chess.ROOK, True)

        for square in chess.SQUARES:
            expected = store[Param.ROOK_EG] + int(template_value(template, square) * 75 / 100)
            assert eg[chess.WHITE][chess.ROOK, square] == expected

    def test_weights_rescale(self, default_params):
        """Raising W_MATERIAL raises every non-king entry."""
        before = default_params.tables.mg_pst[chess.WHITE][chess.QUEEN, chess.D1]
        default_params.tune(Param.W_MATERIAL, 120)
        after = default_params.tables.mg_pst[chess.WHITE][chess.QUEEN, chess.D1]

        assert after > before

    def test_styles_differ(self, default_params):
        style0 = default_params.tables.mg_pst[chess.WHITE].copy()
        default_params.store.pst_style = 1
        style1 = default_params.rebuild().mg_pst[chess.WHITE]

        assert (style0 != style1).any()


class TestTemplates:
    """Tests for the raw templates."""

    @pytest.mark.parametrize("pst_style", [0, 1])
    def test_pawn_back_ranks_empty(self, pst_style):
        """Pawns never stand on the first or last rank."""
        for endgame in (False, True):
            template = pst_template(pst_style, chess.PAWN, endgame)
            for file in range(8):
                assert template_value(template, chess.square(file, 0)) == 0
                assert template_value(template, chess.square(file, 7)) == 0

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            pst_template(5, chess.PAWN, False)

    def test_outpost_value(self):
        special = build_special_pst()
        assert special[chess.WHITE][SpecialSquare.KNIGHT_OUTPOST, chess.D5] == 10
        assert special[chess.BLACK][SpecialSquare.KNIGHT_OUTPOST, chess.D4] == 10
        assert special[chess.WHITE][SpecialSquare.KNIGHT_OUTPOST, chess.D4] == 6


class TestReadOnly:
    """Derived tables cannot be written to."""

    def test_pst_frozen(self, default_params):
        with pytest.raises(ValueError):
            default_params.tables.mg_pst[chess.WHITE][chess.PAWN, chess.E4] = 0

    def test_imbalance_frozen(self, default_params):
        with pytest.raises(ValueError):
            default_params.tables.imbalance[4, 4] = 1

    @pytest.mark.parametrize("field", ["mg_pst", "eg_pst", "special_pst", "passed_mg", "passed_eg"])
    def test_side_mappings_frozen(self, default_params, field):
        """Whole per-side tables cannot be replaced in a shared snapshot."""
        tables = getattr(default_params.tables, field)

        with pytest.raises(TypeError):
            tables[chess.WHITE] = None
        assert tables[chess.WHITE] is not None

    @pytest.mark.parametrize("field", ["mobility_mg", "mobility_eg"])
    def test_mobility_mappings_frozen(self, default_params, field):
        tables = getattr(default_params.tables, field)

        with pytest.raises(TypeError):
            tables[chess.KNIGHT] = None
        with pytest.raises(TypeError):
            del tables[chess.QUEEN]

    def test_snapshots_compare_by_identity(self, default_params):
        """Comparing snapshots does not compare arrays element-wise."""
        rebuilt = build_tables(default_params.store)

        assert default_params.tables == default_params.tables
        assert default_params.tables != rebuilt
