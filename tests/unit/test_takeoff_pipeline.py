"""
Unit Tests for the Takeoff Pipeline.

Tests end-to-end runs over sample replies:
- Empty replies for every trade
- Nearest-size pricing through the full pipeline
- Grand totals and contingency
- Installation notes by trade and analysis type
- Unknown type codes and room names
- Input validation
"""

import pytest

from takeoff.config.errors import ValidationError
from takeoff.models.analysis import AnalysisType, CostKind, NoteCode
from takeoff.models.records import Trade

from tests.fixtures.sample_responses import (
    PLUMBING_ODD_SIZE,
    PLUMBING_RESPONSE,
    SHEATHING_RESPONSE,
)


SHEATHING_WITH_NOTES = SHEATHING_RESPONSE + """
## Installation Notes

- Stagger panel joints at least 16 inches between courses.
"""


# =============================================================================
# Test: Empty Replies
# =============================================================================


class TestEmptyReply:
    """An empty reply yields an empty, noted result for every trade."""

    @pytest.mark.parametrize("trade", list(Trade))
    def test_empty_text(self, pipeline, full_config, trade):
        result = pipeline.analyze("", trade, full_config)

        assert result.items == []
        assert result.total_area == 0
        assert result.grand_totals.total == 0
        assert [note.code for note in result.notes] == [NoteCode.EXTRACTION_EMPTY]

    def test_trade_identifier_string(self, pipeline):
        result = pipeline.analyze("", " Plumbing ")

        assert result.trade == Trade.PLUMBING
        assert result.analysis_type == AnalysisType.FULL


# =============================================================================
# Test: Plumbing
# =============================================================================


class TestPlumbingRun:
    """Full plumbing analysis."""

    def test_nearest_size_price(self, pipeline, full_config):
        result = pipeline.analyze(PLUMBING_ODD_SIZE, "plumbing", full_config)
        pipe = result.category("Soil/Waste Pipe").items[0]

        assert pipe.unit_price == 15.50
        assert pipe.size == '5"'
        assert len(result.notes_with(NoteCode.PRICING_LOOKUP_MISS)) == 1
        assert result.notes_with(NoteCode.EXTRACTION_EMPTY) != []

    def test_grand_totals(self, pipeline, full_config):
        result = pipeline.analyze(PLUMBING_RESPONSE, Trade.PLUMBING, full_config)
        totals = result.grand_totals

        assert totals.materials == pytest.approx(9310.1)
        assert totals.labor == pytest.approx(179.85 * 85)
        assert totals.contingency == pytest.approx(totals.subtotal * 0.10)
        assert totals.total == pytest.approx(totals.subtotal * 1.10)
        assert result.notes == []

    def test_sections_and_legend_carried(self, pipeline, full_config):
        result = pipeline.analyze(PLUMBING_RESPONSE, Trade.PLUMBING, full_config)

        assert len(result.sections) == 9
        assert result.total_linear_feet == 455.5
        assert result.labor_hours == pytest.approx(179.8485)

    def test_installation_notes_kept(self, pipeline, costs_config):
        result = pipeline.analyze(PLUMBING_RESPONSE, Trade.PLUMBING, costs_config)

        assert len(result.installation_notes) == 2
        assert all(item.kind == CostKind.MATERIAL for item in result.items)

    def test_materials_only_has_zero_prices(self, pipeline, materials_config):
        result = pipeline.analyze(PLUMBING_RESPONSE, Trade.PLUMBING, materials_config)

        assert result.items != []
        assert all(item.total_price == 0 for item in result.items)
        assert result.grand_totals.total == 0


# =============================================================================
# Test: Installation Notes
# =============================================================================


class TestInstallationNotes:
    """Installation notes outside plumbing need a full analysis."""

    def test_dropped_for_costs_run(self, pipeline, costs_config):
        result = pipeline.analyze(SHEATHING_WITH_NOTES, Trade.SHEATHING, costs_config)

        assert result.installation_notes == []

    def test_kept_for_full_run(self, pipeline, full_config):
        result = pipeline.analyze(SHEATHING_WITH_NOTES, Trade.SHEATHING, full_config)

        assert [note.text for note in result.installation_notes] == [
            "Stagger panel joints at least 16 inches between courses."
        ]


# =============================================================================
# Test: Output
# =============================================================================


class TestOutput:
    """Tests for the camelCase output structure."""

    def test_output_keys(self, pipeline, full_config):
        output = pipeline.analyze(PLUMBING_RESPONSE, Trade.PLUMBING, full_config).to_output()

        assert output["trade"] == "plumbing"
        assert output["analysisType"] == "full"
        assert output["wasteFactorPct"] == 10.0
        assert set(output["grandTotals"]) == {
            "materials",
            "labor",
            "equipment",
            "subtotal",
            "contingency",
            "generalConditions",
            "overheadProfit",
            "total",
        }
        assert output["categoryTotals"][0]["category"] == "Soil/Waste Pipe"
        assert output["notes"] == []

    def test_note_codes_in_output(self, pipeline, full_config):
        output = pipeline.analyze("", Trade.FRAMING, full_config).to_output()

        assert output["notes"][0]["code"] == "ExtractionEmpty"


# =============================================================================
# Test: Unknown Type Codes
# =============================================================================


class TestUnknownTypeCodes:
    """Codes missing from the legend and catalog fall back to the trade default."""

    @pytest.mark.parametrize(
        "trade,text,type_code",
        [
            (Trade.ACOUSTICAL, "Lobby (XYZ): 1,200 sq ft", "XYZ"),
            (Trade.SHEATHING, "Corridor A (Q): 100 ft x 9 ft", "Q"),
            (Trade.FRAMING, "North wall (Q): 120 ft x 10 ft", "Q"),
        ],
    )
    def test_default_entry_with_note(self, pipeline, full_config, trade, text, type_code):
        result = pipeline.analyze(text, trade, full_config)

        ambiguous = [note for note in result.notes if note.code == NoteCode.CLASSIFICATION_AMBIGUOUS]
        assert len(ambiguous) == 1
        assert ambiguous[0].context["type_code"] == type_code
        assert ambiguous[0].context["match"] == "default"
        assert result.items

    def test_carpentry_unknown_code(self, pipeline, full_config):
        result = pipeline.analyze("North wall (Q): 120 ft x 10 ft", Trade.CARPENTRY, full_config)

        assert result.items
        assert result.grand_totals.total > 0

    def test_room_name_is_not_a_material(self, pipeline, full_config):
        result = pipeline.analyze("Open Office: 2,000 sq ft", Trade.ACOUSTICAL, full_config)

        ceiling = result.category("Ceiling Materials")
        ambiguous = [note for note in result.notes if note.code == NoteCode.CLASSIFICATION_AMBIGUOUS]
        assert ceiling is not None
        assert ceiling.items[0].quantity > 0
        assert ambiguous[0].context["section"] == "Open Office"
        assert ambiguous[0].context["resolved_code"] == "DEFAULT"

    def test_wall_name_is_not_a_material(self, pipeline, full_config):
        result = pipeline.analyze("Plywood Storage (Q): 100 ft x 9 ft", Trade.SHEATHING, full_config)

        panels = [item for item in result.items if item.code == "Q"]
        assert [item.description for item in panels] == ['1/2" OSB Sheathing']


# =============================================================================
# Test: Validation
# =============================================================================


class TestValidation:
    """Invalid inputs are rejected before any work is done."""

    def test_unknown_trade(self, pipeline):
        with pytest.raises(ValidationError) as exc_info:
            pipeline.analyze("## Pipe Schedule", "roofing")

        assert exc_info.value.field == "trade"

    def test_text_must_be_string(self, pipeline):
        with pytest.raises(ValidationError):
            pipeline.analyze(None, Trade.PLUMBING)
