"""
Unit Tests for the Parameter Store

Tests for slot bookkeeping, focusing on:
    - Bounds recording and rejection of out-of-range values
    - Unbounded assignment and runtime updates
    - The tunable-slot dump used by tuning tools
"""

import io

import chess
import pytest

from chess_params.params import Param, ParameterBoundsError, ParameterStore, TunableParam
from chess_params.params.slots import MOBILITY_SIZES, mobility_slots, passer_slots
from chess_params.profiles import load_profile
from chess_params.profiles.default import DEFAULT_MOBILITY, DEFAULT_VALUES


class TestSetValue:
    """Tests for bounded assignment."""

    @pytest.fixture
    def store(self):
        return ParameterStore()

    def test_in_range_value_recorded(self, store):
        """Value, bounds and tunability are all recorded."""
        store.set_value(Param.BISHOP_PAIR, 51, 0, 100, True)

        assert store.values[Param.BISHOP_PAIR] == 51
        assert store.min_value[Param.BISHOP_PAIR] == 0
        assert store.max_value[Param.BISHOP_PAIR] == 100
        assert store.tunable[Param.BISHOP_PAIR] is True

    def test_bounds_are_inclusive(self, store):
        """Both ends of the range are accepted."""
        store.set_value(Param.ROOK_PAIR, -50, -50, 50, True)
        assert store[Param.ROOK_PAIR] == -50

        store.set_value(Param.ROOK_PAIR, 50, -50, 50, True)
        assert store[Param.ROOK_PAIR] == 50

    def test_non_tunable_slot(self, store):
        """Bounds are recorded for non-tunable slots too."""
        store.set_value(Param.QUEEN_CONTACT, 36, 0, 50, False)

        assert store.tunable[Param.QUEEN_CONTACT] is False
        assert store.max_value[Param.QUEEN_CONTACT] == 50

    @pytest.mark.parametrize("value", [-1, 101, 1000])
    def test_out_of_range_rejected(self, store, value):
        """Out-of-range values raise and leave the store untouched."""
        with pytest.raises(ParameterBoundsError, match="BISHOP_PAIR"):
            store.set_value(Param.BISHOP_PAIR, value, 0, 100, True)

        assert store[Param.BISHOP_PAIR] == 0
        assert Param.BISHOP_PAIR not in store.min_value
        assert store.tunable[Param.BISHOP_PAIR] is False

    def test_bounds_error_details(self, store):
        """The error carries the slot and the violated range."""
        with pytest.raises(ParameterBoundsError) as excinfo:
            store.set_value(Param.PAWN_MG, 200, 50, 150, True)

        error = excinfo.value
        assert error.slot == Param.PAWN_MG
        assert error.value == 200
        assert (error.min_value, error.max_value) == (50, 150)
        assert isinstance(error, ValueError)

    def test_empty_range_rejected(self, store):
        """A minimum above the maximum is a configuration error."""
        with pytest.raises(ValueError, match="empty range"):
            store.set_value(Param.PAWN_MG, 100, 150, 50, True)

    def test_every_default_value_in_range(self):
        """The default profile declares consistent ranges."""
        for slot, value, lo, hi, _ in DEFAULT_VALUES:
            assert lo <= value <= hi, f"{slot.name} = {value} outside [{lo}, {hi}]"


class TestAssignAndUpdate:
    """Tests for unbounded assignment and runtime updates."""

    def test_assign_clears_bounds(self):
        """assign() leaves the slot without bounds and non-tunable."""
        store = ParameterStore()
        store.set_value(Param.W_PST, 73, 0, 200, True)
        store.assign(Param.W_PST, 500)

        assert store[Param.W_PST] == 500
        assert store.tunable[Param.W_PST] is False
        assert Param.W_PST not in store.min_value
        assert Param.W_PST not in store.max_value

    def test_update_within_bounds(self):
        """update() keeps the recorded bounds."""
        store = ParameterStore()
        store.set_value(Param.W_PST, 73, 0, 200, True)
        store.update(Param.W_PST, 120)

        assert store[Param.W_PST] == 120
        assert store.max_value[Param.W_PST] == 200
        assert store.tunable[Param.W_PST] is True

    def test_update_out_of_bounds(self):
        """update() rejects values outside the recorded range."""
        store = ParameterStore()
        store.set_value(Param.W_PST, 73, 0, 200, True)

        with pytest.raises(ParameterBoundsError):
            store.update(Param.W_PST, 201)
        assert store[Param.W_PST] == 73

    def test_update_unbounded_slot(self):
        """Slots without bounds accept any value."""
        store = ParameterStore()
        store.update(Param.W_CENTER, -999)
        assert store[Param.W_CENTER] == -999


class TestStyles:
    """Tests for the style selectors."""

    def test_defaults(self):
        store = ParameterStore()
        assert store.pst_style == 0
        assert store.mob_style == 0

    @pytest.mark.parametrize("attribute", ["pst_style", "mob_style"])
    def test_unknown_style_rejected(self, attribute):
        store = ParameterStore()
        with pytest.raises(ValueError):
            setattr(store, attribute, 7)

    def test_keep_piece_reserved(self):
        """Keep-piece tendencies exist for every piece type and start at zero."""
        store = ParameterStore()
        assert set(store.keep_piece) == set(chess.PIECE_TYPES)
        assert all(v == 0 for v in store.keep_piece.values())


class TestTunableDump:
    """Tests for the tuning-tool views of the store."""

    def test_default_tunable_count(self):
        """Every tunable default slot plus every tuned mobility slot is listed."""
        store, _ = load_profile("default")
        expected = sum(1 for entry in DEFAULT_VALUES if entry[4])
        expected += sum(len(curve) for curve in DEFAULT_MOBILITY.values())

        assert len(store.tunable_values()) == expected

    def test_tunable_record(self):
        """Records carry name, value and bounds."""
        store, _ = load_profile("default")
        records = {p.name: p for p in store.tunable_values()}

        assert records["PAWN_MG"] == TunableParam("PAWN_MG", 91, 50, 150)
        assert "QUEEN_CONTACT" not in records
        assert "W_OWN_ATT" not in records

    def test_personality_has_no_tunable_slots(self):
        store, _ = load_profile("personality")
        assert store.tunable_values() == []
        assert store.format_tunable_values() == ""

    def test_format_four_per_line(self):
        """Cells are fixed width, four to a line."""
        store = ParameterStore()
        for i, slot in enumerate([Param.PAWN_MG, Param.KNIGHT_MG, Param.BISHOP_MG,
                                  Param.ROOK_MG, Param.QUEEN_MG]):
            store.set_value(slot, 100 + i, 0, 2000, True)

        lines = store.format_tunable_values().splitlines()

        assert len(lines) == 2
        assert lines[0].count(" : ") == 4
        assert lines[1] == f"{'QUEEN_MG':>14} : {104:4d}"

    def test_print_tunable_values(self):
        """print_tunable_values writes the dump to the given stream."""
        store, _ = load_profile("default")
        out = io.StringIO()
        store.print_tunable_values(file=out)

        text = out.getvalue()
        assert "PAWN_MG :   91" in text
        assert "W_MATERIAL :   98" in text
        assert "KNIGHT_ATT1" not in text


class TestSlotGroups:
    """Tests for slot group helpers."""

    @pytest.mark.parametrize("piece_type", [chess.KNIGHT, chess.BISHOP, chess.ROOK])
    @pytest.mark.parametrize("endgame", [False, True])
    def test_mobility_slots_length(self, piece_type, endgame):
        slots = mobility_slots(piece_type, endgame)
        assert len(slots) == MOBILITY_SIZES[piece_type]
        assert slots == list(range(slots[0], slots[0] + len(slots)))

    def test_mobility_slots_names(self):
        assert mobility_slots(chess.ROOK, True)[14] == Param.ROOK_MOB_EG_14
        assert mobility_slots(chess.KNIGHT, False)[0] == Param.KNIGHT_MOB_MG_0

    def test_queen_has_no_mobility_slots(self):
        with pytest.raises(ValueError):
            mobility_slots(chess.QUEEN, False)

    def test_passer_slots(self):
        assert passer_slots(False) == [
            Param.PASSED_MG_2, Param.PASSED_MG_3, Param.PASSED_MG_4,
            Param.PASSED_MG_5, Param.PASSED_MG_6, Param.PASSED_MG_7,
        ]
        assert passer_slots(True)[-1] == Param.PASSED_EG_7
