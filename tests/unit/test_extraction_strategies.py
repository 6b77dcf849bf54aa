"""
Unit Tests for Extraction Strategies.

Tests the pattern layer under the response extractor:
- Heading detection and section splitting
- Header, separator and summary row skipping
- Strategy chains (first success wins, notes kept from every attempt)
- Unreadable rows (noted and kept as unknown records)
- Fixture and valve name standardization
"""

import re

import pytest

from takeoff.models.analysis import NoteCode
from takeoff.models.records import RecordKind
from takeoff.services.extraction_strategies import (
    FIXTURE_STRATEGIES,
    PIPE_STRATEGIES,
    ExtractionStrategy,
    build_fixture_strict,
    build_grid_item,
    build_pipe,
    build_valve_sentence,
    heading_title,
    is_header_token,
    run_chain,
    section_text,
    split_sections,
    standard_fixture_name,
    standard_valve_name,
)

from tests.fixtures.sample_responses import PLUMBING_MALFORMED, PLUMBING_RESPONSE


# =============================================================================
# Test: Sections
# =============================================================================


class TestHeadings:
    """Tests for heading detection."""

    def test_markdown_heading(self):
        assert heading_title("## Pipe Schedule") == "Pipe Schedule"

    def test_bold_heading(self):
        assert heading_title("**Fixtures**:") == "Fixtures"

    def test_colon_heading(self):
        assert heading_title("Grid components:") == "Grid components"

    def test_table_row_is_not_heading(self):
        assert heading_title("| WC | Water closet | 4 |") is None

    def test_plain_sentence_is_not_heading(self):
        assert heading_title("Install 4 water closets and 2 floor drains.") is None


class TestSplitSections:
    """Tests for splitting text into headed sections."""

    def test_preamble_has_empty_heading(self):
        sections = split_sections("intro line\n## Pipes\n| a | b | c |")

        assert sections[0] == ("", "intro line")
        assert sections[1] == ("Pipes", "| a | b | c |")

    def test_document_order(self):
        titles = [title for title, _ in split_sections(PLUMBING_RESPONSE)]

        assert titles == ["", "Pipe Schedule", "Fixtures", "Valves", "Installation Notes"]

    def test_section_text_skips_legend(self):
        text = "## Ceiling Legend\n| ACP | panel |\n## Ceiling Areas\n| Office | ACP | 400 |"

        body = section_text(text, ("ceiling",))

        assert "Office" in body
        assert "panel" not in body

    def test_section_text_without_match(self):
        assert section_text("## Valves\n| x | y | 1 |", ("pipe",)) is None


class TestHeaderTokens:
    """Tests for header row detection."""

    def test_known_headers(self):
        assert is_header_token("Pipe Type")
        assert is_header_token("**Qty**")

    def test_data_cell(self):
        assert not is_header_token("Soil/Waste")


# =============================================================================
# Test: Strategy Application
# =============================================================================


class TestStrategy:
    """Tests for a single strategy run."""

    def test_header_separator_and_total_rows_skipped(self):
        outcome = PIPE_STRATEGIES[0].apply(PLUMBING_RESPONSE)

        assert outcome.header_rows == 1
        assert [record.length for record in outcome.records] == [120, 100, 85, 150.5]
        assert all(record.kind == RecordKind.PIPE for record in outcome.records)
        assert all(record.strategy == "pipe_section_table" for record in outcome.records)

    def test_scoped_strategy_ignores_other_sections(self):
        outcome = PIPE_STRATEGIES[0].apply("## Valves\n| Ball Valve | 3/4\" | 6 |")

        assert outcome.records == []
        assert not outcome.succeeded

    def test_malformed_number_noted_and_row_kept_unreadable(self):
        outcome = PIPE_STRATEGIES[0].apply(PLUMBING_MALFORMED)
        pipes = [record for record in outcome.records if record.kind == RecordKind.PIPE]
        unknown = [record for record in outcome.records if record.kind == RecordKind.UNKNOWN]

        assert [record.pipe_type for record in pipes] == ["Storm"]
        assert [record.raw for record in unknown] == ['Vent | 2" | approx. 40']
        assert unknown[0].reason == "unreadable length 'approx. 40'"
        assert len(outcome.notes) == 1
        assert outcome.notes[0].code == NoteCode.MALFORMED_NUMERIC_TOKEN
        assert outcome.notes[0].context["token"] == "approx. 40"

    def test_pure(self):
        first = PIPE_STRATEGIES[0].apply(PLUMBING_RESPONSE)
        second = PIPE_STRATEGIES[0].apply(PLUMBING_RESPONSE)

        assert first.records == second.records


class TestRunChain:
    """Tests for ordered strategy chains."""

    def test_first_success_wins(self):
        outcome, notes = run_chain(PIPE_STRATEGIES, PLUMBING_RESPONSE)

        assert outcome.strategy == "pipe_section_table"
        assert notes == []

    def test_falls_through_to_sentences(self):
        text = "- Vent pipe 2\": 85 ft"

        outcome, _ = run_chain(PIPE_STRATEGIES, text)

        assert outcome.strategy == "pipe_sentence"
        assert outcome.records[0].pipe_type == "Vent"
        assert outcome.records[0].size == '2"'
        assert outcome.records[0].length == 85

    def test_no_match(self):
        outcome, notes = run_chain(PIPE_STRATEGIES, "Nothing useful here.")

        assert outcome is None
        assert notes == []

    def test_notes_kept_from_failed_attempts(self):
        broken = ExtractionStrategy(
            "broken_table",
            re.compile(r"^\|\s*([^|\n]+?)\s*\|\s*([^|\n]*?)\s*\|\s*([^|\n]+?)\s*\|", re.MULTILINE),
            build_pipe,
        )
        text = "| Vent | 2\" | lots |\n- Vent pipe 2\": 85 ft"

        outcome, notes = run_chain((broken,) + PIPE_STRATEGIES[1:], text)

        assert outcome.strategy == "pipe_sentence"
        assert [note.code for note in notes] == [NoteCode.MALFORMED_NUMERIC_TOKEN]


class TestUnreadableRows:
    """Every builder notes an unreadable number and keeps the row."""

    def test_unscoped_fixture_table(self):
        outcome = FIXTURE_STRATEGIES[1].apply("| Water Closet | Floor mount | several |")

        assert not outcome.succeeded
        assert outcome.records[0].kind == RecordKind.UNKNOWN
        assert outcome.records[0].raw == "Water Closet | Floor mount | several"
        assert [note.context["field"] for note in outcome.notes] == ["quantity"]

    def test_non_fixture_row_ignored(self):
        notes = []

        assert build_fixture_strict(("Cleanup", "Site", "several"), notes) is None
        assert notes == []

    @pytest.mark.parametrize(
        "builder,groups,token",
        [
            (build_grid_item, ("Main runners", "n/a", ""), "n/a"),
            (build_valve_sentence, ("a few", '3/4"', "ball valve"), "a few"),
        ],
    )
    def test_builders_note_token(self, builder, groups, token):
        notes = []

        record = builder(groups, notes)

        assert record.kind == RecordKind.UNKNOWN
        assert notes[0].code == NoteCode.MALFORMED_NUMERIC_TOKEN
        assert notes[0].context["token"] == token

    def test_unreadable_rows_do_not_win(self):
        broken = ExtractionStrategy("broken_table", PIPE_STRATEGIES[0].pattern, build_pipe)

        outcome = broken.apply("| Vent | 2\" | lots |")

        assert len(outcome.records) == 1
        assert not outcome.succeeded


# =============================================================================
# Test: Name Standardization
# =============================================================================


class TestStandardNames:
    """Tests for fixture and valve names."""

    def test_fixture_abbreviation(self):
        assert standard_fixture_name("WC") == "Water Closet"
        assert standard_fixture_name("FD") == "Floor Drain"

    def test_fixture_plural(self):
        assert standard_fixture_name("Floor Drains") == "Floor Drain"
        assert standard_fixture_name("Lavatories") == "Lavatory"

    def test_fixture_parenthetical_dropped(self):
        assert standard_fixture_name("Water Closet (ADA)") == "Water Closet"

    def test_valve_phrases(self):
        assert standard_valve_name("RPZ backflow assembly") == "Backflow Preventer"
        assert standard_valve_name("p-trap w/ insulation") == "P-Trap with Insulation"
        assert standard_valve_name("ball valves") == "Ball valve"
