"""
Unit Tests for the Aggregator and Totals Models.

Tests cover:
- Category grouping in first-appearance order
- Grand totals with non-compounding markups
- Item and category total validation
- Breakdown helper
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from takeoff.models.analysis import (
    AnalysisConfig,
    CategoryTotal,
    CostKind,
    GrandTotals,
    PricedItem,
)
from takeoff.models.records import PipeRecord, PipeTypeCode, Trade
from takeoff.services.aggregator import Aggregator, breakdown, group_by_category


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def items():
    return [
        PricedItem.create("Studs", '3-5/8" Metal Stud', 10, 5.25),
        PricedItem.create("Track", '3-5/8" Metal Track', 20, 3.75, unit="LF"),
        PricedItem.create("Studs", '6" Metal Stud', 4, 7.85),
        PricedItem.create("Framing Labor", "Framing installation labor", 2, 65.0, kind=CostKind.LABOR, unit="HR"),
        PricedItem.create("Equipment", "Laser Level", 5, 75.0, kind=CostKind.EQUIPMENT, unit="DAY"),
    ]


@pytest.fixture
def markup_config():
    return AnalysisConfig(
        contingency_rate=0.10,
        general_conditions_rate=0.05,
        overhead_profit_rate=0.10,
    )


# =============================================================================
# Test: Grouping
# =============================================================================


class TestGroupByCategory:
    """Tests for category grouping."""

    def test_first_appearance_order(self, items):
        totals = group_by_category(items)

        assert [c.category for c in totals] == ["Studs", "Track", "Framing Labor", "Equipment"]

    def test_each_item_in_one_category(self, items):
        totals = group_by_category(items)

        assert sum(len(c.items) for c in totals) == len(items)
        assert totals[0].subtotal == pytest.approx(52.5 + 31.4)

    def test_category_kind(self, items):
        kinds = {c.category: c.kind for c in group_by_category(items)}

        assert kinds["Framing Labor"] == CostKind.LABOR
        assert kinds["Equipment"] == CostKind.EQUIPMENT
        assert kinds["Studs"] == CostKind.MATERIAL

    def test_empty(self):
        assert group_by_category([]) == []


# =============================================================================
# Test: Grand Totals
# =============================================================================


class TestGrandTotals:
    """Tests for markups on the subtotal."""

    def test_buckets(self, items, markup_config):
        totals = GrandTotals.calculate(group_by_category(items), markup_config)

        assert totals.materials == pytest.approx(158.9)
        assert totals.labor == pytest.approx(130.0)
        assert totals.equipment == pytest.approx(375.0)
        assert totals.subtotal == pytest.approx(663.9)

    def test_markups_do_not_compound(self, items, markup_config):
        totals = GrandTotals.calculate(group_by_category(items), markup_config)

        assert totals.contingency == pytest.approx(66.39)
        assert totals.general_conditions == pytest.approx(33.195)
        assert totals.overhead_profit == pytest.approx(66.39)
        assert totals.total == pytest.approx(663.9 * 1.25)

    def test_default_contingency(self, items):
        config = AnalysisConfig(general_conditions_rate=0, overhead_profit_rate=0)

        totals = GrandTotals.calculate(group_by_category(items), config)

        assert config.contingency_rate == 0.10
        assert totals.total == pytest.approx(663.9 * 1.10)


# =============================================================================
# Test: Validation
# =============================================================================


class TestTotalsValidation:
    """Totals must agree with their parts."""

    def test_create_rounds_unit_price(self):
        item = PricedItem.create("Misc", "Allowance", 1, 295.8049)

        assert item.unit_price == 295.8
        assert item.total_price == 295.8

    def test_mismatched_item_total_rejected(self):
        with pytest.raises(PydanticValidationError):
            PricedItem(category="Studs", description="Stud", quantity=2, unit_price=5.0, total_price=11.0)

    def test_negative_quantity_rejected(self):
        with pytest.raises(PydanticValidationError):
            PricedItem.create("Studs", "Stud", -1, 5.0)

    def test_mismatched_subtotal_rejected(self, items):
        with pytest.raises(PydanticValidationError):
            CategoryTotal(category="Studs", items=items[:1], subtotal=1.0)


# =============================================================================
# Test: Aggregator
# =============================================================================


class TestAggregator:
    """Tests for result assembly."""

    def test_result_fields(self, items, markup_config):
        result = Aggregator().aggregate(
            items,
            markup_config,
            trade=Trade.FRAMING,
            labor_hours=2.0,
            total_area=300.0,
            total_linear_feet=30.0,
        )

        assert result.trade == Trade.FRAMING
        assert result.waste_factor_pct == 10.0
        assert result.labor_hours == 2.0
        assert result.grand_totals.subtotal == pytest.approx(663.9)
        assert result.category("Track").subtotal == pytest.approx(75.0)
        assert result.category("Missing") is None
        assert len(result.items) == 5

    def test_no_items(self, markup_config):
        result = Aggregator().aggregate([], markup_config, trade=Trade.PLUMBING)

        assert result.category_totals == []
        assert result.grand_totals.total == 0


class TestBreakdown:
    """Tests for the breakdown helper."""

    def test_sums_by_enum_key(self):
        pipes = [
            PipeRecord(pipe_type="Soil", type_code=PipeTypeCode.SOIL, size='4"', length=120),
            PipeRecord(pipe_type="Vent", type_code=PipeTypeCode.VENT, size='2"', length=85),
            PipeRecord(pipe_type="Soil", type_code=PipeTypeCode.SOIL, size='4"', length=100),
        ]

        assert breakdown(pipes, "type_code", "length") == {"SP": 220.0, "VP": 85.0}

    def test_empty_keys_skipped(self):
        pipes = [PipeRecord(pipe_type="Vent", length=10), PipeRecord(pipe_type="Vent", size='2"', length=5)]

        assert breakdown(pipes, "size", "length") == {'2"': 5.0}

    def test_default_value_is_quantity(self, items):
        assert breakdown(items, "unit") == {"EA": 14.0, "LF": 20.0, "HR": 2.0, "DAY": 5.0}
