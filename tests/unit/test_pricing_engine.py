"""
Unit Tests for the Pricing Engine.

Tests the tiered price lookup:
- Exact size match
- Nearest size fallback (ties resolve to the larger size)
- Per-type and global defaults
- Named item lookups with partial matches and fixed labor hours
- Missing trade tables
"""

import pytest

from takeoff.config.errors import CatalogError
from takeoff.models.catalog import MaterialCatalog
from takeoff.models.records import Trade
from takeoff.services.catalog_data import DEFAULT_CATALOG
from takeoff.services.pricing_engine import (
    PriceTier,
    PricingEngine,
    match_name,
    nearest_size,
)


# =============================================================================
# Test: Size Matching
# =============================================================================


class TestNearestSize:
    """Tests for nearest size selection."""

    def test_closest_size(self):
        assert nearest_size(['2"', '3"', '4"'], 3.2) == '3"'

    def test_tie_resolves_to_larger(self):
        assert nearest_size(['4"', '6"'], 5.0) == '6"'
        assert nearest_size(['1"', '2"'], 1.5) == '2"'

    def test_unreadable_sizes_are_ignored(self):
        assert nearest_size(["n/a", '2"'], 10.0) == '2"'

    def test_no_sizes(self):
        assert nearest_size([], 2.0) is None


class TestMatchName:
    """Tests for named item matching."""

    def test_exact_is_case_insensitive(self):
        key, tier = match_name(["Ball Valve", "Gate Valve"], "ball valve")

        assert key == "Ball Valve"
        assert tier == PriceTier.EXACT

    def test_longest_contained_key_wins(self):
        key, tier = match_name(["LAV", "Lavatory"], "Wall hung lavatory")

        assert key == "Lavatory"
        assert tier == PriceTier.PARTIAL_NAME

    def test_no_match(self):
        assert match_name(["Ball Valve"], "Widget") == (None, PriceTier.GLOBAL_DEFAULT)

    def test_blank_name(self):
        assert match_name(["Ball Valve"], "  ") == (None, PriceTier.GLOBAL_DEFAULT)


# =============================================================================
# Test: Sized Pricing
# =============================================================================


class TestPrice:
    """Tests for sized item pricing tiers."""

    def test_exact_size(self, pricing):
        quote = pricing.price(Trade.PLUMBING, "CW", '3/4"', "Copper")

        assert quote.unit_cost == 9.85
        assert quote.tier == PriceTier.EXACT
        assert not quote.is_miss

    def test_exact_size_ignores_formatting(self, pricing):
        quote = pricing.price(Trade.PLUMBING, "SP", "1 1/2 in", "PVC")

        assert quote.unit_cost == 4.75
        assert quote.tier == PriceTier.EXACT

    def test_pvc_5_inch_resolves_to_6_inch(self, pricing):
        quote = pricing.price(Trade.PLUMBING, "SP", '5"', "PVC")

        assert quote.unit_cost == 15.50
        assert quote.tier == PriceTier.NEAREST_SIZE
        assert quote.key == '6"'
        assert quote.is_miss

    def test_unknown_material_uses_type_default(self, pricing):
        quote = pricing.price(Trade.PLUMBING, "SP", '4"', "Cast Iron")

        assert quote.unit_cost == 6.50
        assert quote.tier == PriceTier.TYPE_DEFAULT

    def test_unreadable_size_uses_type_default(self, pricing):
        quote = pricing.price(Trade.PLUMBING, "VP", "", "PVC")

        assert quote.unit_cost == 4.75
        assert quote.tier == PriceTier.TYPE_DEFAULT

    def test_global_default(self, pricing):
        quote = pricing.price(Trade.PLUMBING, None, None, None)

        assert quote.unit_cost == 10.00
        assert quote.tier == PriceTier.GLOBAL_DEFAULT

    def test_lumber_sizes(self, pricing):
        quote = pricing.price(Trade.FRAMING, "stud", "2x6", "wood stud")

        assert quote.unit_cost == 6.75
        assert quote.tier == PriceTier.EXACT


# =============================================================================
# Test: Named Pricing
# =============================================================================


class TestPriceNamed:
    """Tests for fixtures, valves, accessories and equipment."""

    def test_exact_fixture_with_labor(self, pricing):
        quote = pricing.price_named(Trade.PLUMBING, "fixtures", "Water Closet")

        assert quote.unit_cost == 550.00
        assert quote.tier == PriceTier.EXACT
        assert quote.labor_hours == 3.0

    def test_partial_fixture_name(self, pricing):
        quote = pricing.price_named(Trade.PLUMBING, "fixtures", "Wall hung lavatory")

        assert quote.unit_cost == 325.00
        assert quote.tier == PriceTier.PARTIAL_NAME
        assert quote.labor_hours == 2.5

    def test_unknown_valve_uses_table_default(self, pricing):
        quote = pricing.price_named(Trade.PLUMBING, "valves", "Mystery widget")

        assert quote.unit_cost == 150.00
        assert quote.tier == PriceTier.GLOBAL_DEFAULT
        assert quote.labor_hours == 0.5

    def test_valve_setup_hours(self, pricing):
        assert pricing.labor_hours_named(Trade.PLUMBING, "valves", "Backflow Preventer") == 1.5

    def test_unknown_table_raises(self, pricing):
        with pytest.raises(CatalogError) as exc_info:
            pricing.price_named(Trade.SHEATHING, "fixtures", "Water Closet")

        assert exc_info.value.details == {"table": "fixtures", "trade": "sheathing"}

    def test_unknown_table_for_labor(self, pricing):
        with pytest.raises(CatalogError):
            pricing.labor_hours_named(Trade.ACOUSTICAL, "valves", "Ball Valve")


class TestMaterialLaborRate:
    """Tests for per-material labor rates."""

    def test_known_material(self, pricing):
        assert pricing.material_labor_rate(Trade.PLUMBING, "PVC") == 0.25

    def test_default_rate(self, pricing):
        assert pricing.material_labor_rate(Trade.PLUMBING, None) == 0.30

    def test_trade_without_rates(self, pricing):
        assert pricing.material_labor_rate(Trade.MECHANICAL, "steel") == 0.0


# =============================================================================
# Test: Catalog Injection
# =============================================================================


class TestCatalogInjection:
    """Tests for catalogs missing a trade."""

    def test_missing_trade_raises_catalog_error(self):
        catalog = MaterialCatalog(trades={Trade.PLUMBING: DEFAULT_CATALOG.for_trade(Trade.PLUMBING)})
        engine = PricingEngine(catalog)

        with pytest.raises(CatalogError) as exc_info:
            engine.price(Trade.SHEATHING, "P", None, None)
        assert exc_info.value.trade == "sheathing"
