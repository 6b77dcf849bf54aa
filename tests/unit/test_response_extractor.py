"""
Unit Tests for the Response Extractor.

Tests cover:
- Per-trade table extraction with header and total rows dropped
- Sentence and bullet fallbacks
- Legend parsing and classification notes
- Stated totals and installation notes
- Empty and malformed text recorded as notes, never raised
- Boundary validation (non-string text, unknown trade)
- Same reply, same result on every run
"""

import pytest

from takeoff.config.errors import ErrorCode, ValidationError
from takeoff.models.analysis import NotePriority, NoteCode
from takeoff.models.catalog import MatchLevel
from takeoff.models.records import PipeMaterial, PipeTypeCode, RecordKind, Trade
from takeoff.services.response_extractor import (
    note_priority,
    parse_installation_notes,
    parse_stated_totals,
    parse_type_areas,
)

from tests.fixtures.sample_responses import (
    ACOUSTICAL_RESPONSE,
    ACOUSTICAL_SENTENCES,
    ACOUSTICAL_UNKNOWN_LEGEND,
    CARPENTRY_RESPONSE,
    FRAMING_RESPONSE,
    FRAMING_SENTENCES,
    MECHANICAL_BULLETS,
    MECHANICAL_RESPONSE,
    PLUMBING_MALFORMED,
    PLUMBING_ODD_SIZE,
    PLUMBING_RESPONSE,
    PLUMBING_SENTENCES,
    SHEATHING_RESPONSE,
    SHEATHING_TYPES_ONLY,
)


def _codes(notes):
    return [note.code for note in notes]


# =============================================================================
# Test: Empty Input
# =============================================================================


class TestEmptyText:
    """Empty replies yield empty results and a single note."""

    @pytest.mark.parametrize("trade", list(Trade))
    def test_empty_text_every_trade(self, extractor, trade):
        result = extractor.extract("", trade)

        assert result.all_records == []
        assert _codes(result.notes) == [NoteCode.EXTRACTION_EMPTY]

    def test_empty_note_names_primary_categories(self, extractor):
        result = extractor.extract("", Trade.PLUMBING)

        assert result.notes[0].context["categories"] == ["pipes", "fixtures", "valves"]
        assert result.strategies == {"pipes": None, "fixtures": None, "valves": None}

    def test_secondary_categories_not_reported(self, extractor):
        result = extractor.extract("", Trade.MECHANICAL)

        assert result.notes[0].context["categories"] == ["materials"]


# =============================================================================
# Test: Validation
# =============================================================================


class TestValidation:
    """Contract violations at the boundary raise."""

    def test_non_string_text(self, extractor):
        with pytest.raises(ValidationError) as exc_info:
            extractor.extract(None, Trade.PLUMBING)
        assert exc_info.value.code == ErrorCode.INVALID_TEXT

    def test_unknown_trade(self, extractor):
        with pytest.raises(ValidationError) as exc_info:
            extractor.extract("", "roofing")
        assert exc_info.value.code == ErrorCode.UNKNOWN_TRADE

    def test_trade_identifier_string(self, extractor):
        assert extractor.extract("", " Plumbing ").trade == Trade.PLUMBING


# =============================================================================
# Test: Plumbing
# =============================================================================


class TestPlumbingExtraction:
    """Tests for pipe, fixture and valve extraction."""

    def test_pipe_table(self, extractor):
        result = extractor.extract(PLUMBING_RESPONSE, Trade.PLUMBING)
        pipes = result.records_for("pipes")

        assert [(pipe.type_code, pipe.size, pipe.length) for pipe in pipes] == [
            (PipeTypeCode.SOIL, '4"', 120),
            (PipeTypeCode.SOIL, '4"', 100),
            (PipeTypeCode.VENT, '2"', 85),
            (PipeTypeCode.COLD_WATER, '3/4"', 150.5),
        ]
        assert pipes[3].material == PipeMaterial.COPPER
        assert result.strategies["pipes"] == "pipe_section_table"

    def test_fixture_table(self, extractor):
        result = extractor.extract(PLUMBING_RESPONSE, Trade.PLUMBING)
        fixtures = result.records_for("fixtures")

        assert [(f.fixture_type, f.quantity) for f in fixtures] == [
            ("Water Closet", 4),
            ("Lavatory", 3),
            ("Floor Drain", 2),
        ]
        assert fixtures[0].connections == "CW, SP, VP"

    def test_valve_table(self, extractor):
        result = extractor.extract(PLUMBING_RESPONSE, Trade.PLUMBING)
        valves = result.records_for("valves")

        assert [(v.valve_type, v.size, v.quantity) for v in valves] == [
            ("Ball Valve", '3/4"', 6),
            ("Backflow Preventer", '2"', 1),
        ]

    def test_totals_and_notes(self, extractor):
        result = extractor.extract(PLUMBING_RESPONSE, Trade.PLUMBING)

        assert result.stated_totals.labor_hours == 96
        assert result.notes == []
        assert [note.priority for note in result.installation_notes] == [
            NotePriority.HIGH,
            NotePriority.LOW,
        ]
        assert result.legend == {}

    def test_sentences(self, extractor):
        result = extractor.extract(PLUMBING_SENTENCES, Trade.PLUMBING)

        pipes = result.records_for("pipes")
        assert [(p.type_code, p.size, p.length) for p in pipes] == [
            (PipeTypeCode.COLD_WATER, '3/4"', 150),
            (PipeTypeCode.SOIL, '4"', 220),
        ]
        assert [(f.fixture_type, f.quantity) for f in result.records_for("fixtures")] == [
            ("Water Closet", 4),
            ("Floor Drain", 2),
        ]
        assert [(v.valve_type, v.quantity) for v in result.records_for("valves")] == [("Ball valve", 3)]
        assert result.strategies == {
            "pipes": "pipe_sentence",
            "fixtures": "fixture_sentence",
            "valves": "valve_sentence",
        }
        assert result.notes == []

    def test_malformed_row_noted(self, extractor):
        result = extractor.extract(PLUMBING_MALFORMED, Trade.PLUMBING)
        pipes = result.records_for("pipes")

        assert [(p.type_code, p.size, p.length) for p in pipes] == [(PipeTypeCode.STORM, '6"', 75)]
        malformed = [n for n in result.notes if n.code == NoteCode.MALFORMED_NUMERIC_TOKEN]
        assert len(malformed) == 1
        assert malformed[0].context["field"] == "length"
        assert [row.reason for row in result.unreadable_for("pipes")] == ["unreadable length 'approx. 40'"]
        assert all(record.kind != RecordKind.UNKNOWN for record in result.all_records)


# =============================================================================
# Test: Wall Trades
# =============================================================================


class TestWallExtraction:
    """Tests for sheathing, framing and carpentry walls."""

    def test_sheathing_walls_and_legend(self, extractor):
        result = extractor.extract(SHEATHING_RESPONSE, Trade.SHEATHING)
        walls = result.records_for("wall_sections")

        assert [(w.name, w.type_code, w.area) for w in walls] == [
            ("North Elevation", "P", 960),
            ("South Elevation", "P", None),
            ("East Elevation", "PT", 480),
            ("West Elevation", "CB", 400),
        ]
        assert list(result.legend) == ["P", "PT", "CB"]
        assert result.legend["CB"].integrated_barrier
        assert result.legend["P"].match == MatchLevel.LEGEND
        assert result.stated_totals.total_area == 2800
        assert result.stated_totals.cement_board_lf == 240
        assert result.notes == []

    def test_sheathing_type_area_table(self, extractor):
        result = extractor.extract(SHEATHING_TYPES_ONLY, Trade.SHEATHING)

        assert [(t.code, t.area, t.sheets) for t in result.type_areas] == [("E", 1000, 32)]
        assert result.stated_totals.total_area == 1000

    def test_framing_table_openings(self, extractor):
        result = extractor.extract(FRAMING_RESPONSE, Trade.FRAMING)
        walls = result.records_for("wall_sections")

        assert [(w.type_code, w.length, w.height, w.opening_count) for w in walls] == [
            ("6", 120, 10, 2),
            ("12", 30, 9, None),
        ]
        assert result.legend["6"].resolved_code == "metal_6"
        assert result.legend["12"].resolved_code == "wood_2x4"
        assert result.strategies["wall_sections"] == "wall_section_table"

    def test_framing_sentences(self, extractor):
        result = extractor.extract(FRAMING_SENTENCES, Trade.FRAMING)
        walls = result.records_for("wall_sections")

        assert [(w.name, w.type_code, w.length, w.height, w.opening_count) for w in walls] == [
            ("Corridor A", "6", 120, 10, 2),
            ("Storage", "12", 24, 9, None),
        ]
        assert result.strategies["wall_sections"] == "wall_sentence"
        assert result.legend == {}

    def test_carpentry_legend_descriptions(self, extractor):
        result = extractor.extract(CARPENTRY_RESPONSE, Trade.CARPENTRY)

        assert list(result.legend) == ["A", "B"]
        assert "1-hour" in result.legend["A"].description
        assert len(result.records_for("wall_sections")) == 2


# =============================================================================
# Test: Acoustical
# =============================================================================


class TestAcousticalExtraction:
    """Tests for ceiling sections, grid items and legends."""

    def test_ceiling_table_and_legend(self, extractor):
        result = extractor.extract(ACOUSTICAL_RESPONSE, Trade.ACOUSTICAL)
        ceilings = result.records_for("ceiling_sections")

        assert [(c.name, c.type_code, c.area) for c in ceilings] == [
            ("Office 101", "ACP", 400),
            ("Corridor", "ACT", 250),
            ("Restroom", "GYP", 96),
            ("Office 102", "ACP", 200),
        ]
        assert list(result.legend) == ["ACP", "ACT", "GYP"]
        assert result.legend["ACP"].description == "2x4 Armstrong lay-in acoustical panel"
        assert result.stated_totals.total_area == 946
        assert result.records_for("grid_items") == []
        assert result.notes == []

    def test_sentences_and_grid_list(self, extractor):
        result = extractor.extract(ACOUSTICAL_SENTENCES, Trade.ACOUSTICAL)

        assert [(c.name, c.type_code, c.area) for c in result.records_for("ceiling_sections")] == [
            ("Lobby", "ACT", 320),
            ("Conference Room", "ACP", 180),
        ]
        assert [(g.description, g.quantity) for g in result.records_for("grid_items")] == [
            ("Main runners", 30),
            ("Cross tees", 120),
        ]
        # The paren form outside a legend section is not a legend row
        assert result.legend == {}

    def test_unknown_legend_code_noted(self, extractor):
        result = extractor.extract(ACOUSTICAL_UNKNOWN_LEGEND, Trade.ACOUSTICAL)

        assert _codes(result.notes) == [NoteCode.CLASSIFICATION_AMBIGUOUS]
        assert result.legend["XYZ"].resolved_code == "DEFAULT"


class TestParseLegend:
    """Tests for legend rows."""

    def test_quantity_table_is_not_a_legend(self, extractor):
        legend, notes = extractor.parse_legend("## Legend\n| ACP | 2x4 panel | 400 |", Trade.ACOUSTICAL)

        assert legend == {}
        assert notes == []

    def test_description_with_code_in_parens(self, extractor):
        legend, _ = extractor.parse_legend("## Legend\n- Lay-in acoustical panel (ACP)", Trade.ACOUSTICAL)

        assert legend["ACP"].description == "Lay-in acoustical panel"
        assert legend["ACP"].match == MatchLevel.LEGEND

    def test_first_definition_wins(self, extractor):
        text = "## Legend\n| ACT | 2x2 acoustical tile |\n- ACT: gypsum board"

        legend, _ = extractor.parse_legend(text, Trade.ACOUSTICAL)

        assert legend["ACT"].description == "2x2 acoustical tile"

    def test_header_rows_ignored(self, extractor):
        legend, _ = extractor.parse_legend("## Legend\n| Code | Description |\n| Note | See sheet A1 |", Trade.ACOUSTICAL)

        assert legend == {}


# =============================================================================
# Test: Mechanical
# =============================================================================


class TestMechanicalExtraction:
    """Tests for material and labor lines."""

    def test_material_and_labor_tables(self, extractor):
        result = extractor.extract(MECHANICAL_RESPONSE, Trade.MECHANICAL)
        materials = result.records_for("materials")

        assert [(m.description, m.quantity, m.unit, m.unit_cost) for m in materials] == [
            ("Type I kitchen exhaust hood", 1, "EA", 9000),
            ('Welded grease duct 14"', 40, "LF", 150),
            ("Exhaust fan, upblast", 1, "EA", None),
            ("Custom louver assembly", 2, "EA", 400),
            ("Widget bracket", 3, "EA", None),
        ]
        assert [(l.task, l.hours, l.rate) for l in result.records_for("labor")] == [
            ("Hood installation", 24, 95),
            ("Duct installation", 60, 95),
        ]
        assert result.stated_totals.labor_hours == 84

    def test_bullets(self, extractor):
        result = extractor.extract(MECHANICAL_BULLETS, Trade.MECHANICAL)

        assert [(m.description, m.quantity, m.unit, m.unit_cost) for m in result.records_for("materials")] == [
            ("Rooftop unit, 10 ton", 1, "EA", 14000),
            ("Galvanized supply duct", 120, "LF", None),
        ]
        assert result.strategies["materials"] == "material_bullet"
        assert result.records_for("labor") == []


# =============================================================================
# Test: Totals and Notes Helpers
# =============================================================================


class TestTotalsAndNotes:
    """Tests for stated totals and installation note parsing."""

    def test_grand_total_area(self):
        totals = parse_stated_totals("Grand Total: 1,250 sq ft")

        assert totals.total_area == 1250
        assert totals.labor_hours is None

    def test_type_areas(self):
        assert [t.code for t in parse_type_areas(SHEATHING_TYPES_ONLY)] == ["E"]

    def test_note_priority(self):
        assert note_priority("Fire stopping is required at all penetrations") == NotePriority.HIGH
        assert note_priority("Consider a pre-rock inspection") == NotePriority.LOW
        assert note_priority("Verify stud gauge with engineer") == NotePriority.MEDIUM

    def test_sentence_notes_without_bullets(self):
        notes = parse_installation_notes("## Notes\nAll work must comply with local code. Use care.")

        assert [note.text for note in notes] == ["All work must comply with local code."]
        assert notes[0].priority == NotePriority.HIGH

    def test_no_notes_section(self):
        assert parse_installation_notes("- must be fire stopped everywhere") == []


# =============================================================================
# Test: Determinism
# =============================================================================


REPLIES = [
    (PLUMBING_RESPONSE, Trade.PLUMBING),
    (PLUMBING_SENTENCES, Trade.PLUMBING),
    (PLUMBING_MALFORMED, Trade.PLUMBING),
    (PLUMBING_ODD_SIZE, Trade.PLUMBING),
    (SHEATHING_RESPONSE, Trade.SHEATHING),
    (SHEATHING_TYPES_ONLY, Trade.SHEATHING),
    (ACOUSTICAL_RESPONSE, Trade.ACOUSTICAL),
    (ACOUSTICAL_SENTENCES, Trade.ACOUSTICAL),
    (ACOUSTICAL_UNKNOWN_LEGEND, Trade.ACOUSTICAL),
    (FRAMING_RESPONSE, Trade.FRAMING),
    (FRAMING_SENTENCES, Trade.FRAMING),
    (CARPENTRY_RESPONSE, Trade.CARPENTRY),
    (MECHANICAL_RESPONSE, Trade.MECHANICAL),
    (MECHANICAL_BULLETS, Trade.MECHANICAL),
]


class TestDeterminism:
    """Extraction is a pure function of the reply text."""

    @pytest.mark.parametrize("text,trade", REPLIES)
    def test_repeat_runs_match(self, extractor, text, trade):
        first = extractor.extract(text, trade)
        second = extractor.extract(text, trade)

        assert first.model_dump() == second.model_dump()

    @pytest.mark.parametrize("text,trade", REPLIES)
    def test_other_trades_never_raise(self, extractor, text, trade):
        for other in Trade:
            assert extractor.extract(text, other).trade == other
