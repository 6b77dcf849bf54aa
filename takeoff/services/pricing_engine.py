"""Pricing engine for takeoff items.

Looks up unit costs against the injected MaterialCatalog with explicit
fallback tiers. Every lookup returns a usable price; the tier tells the
caller whether a fallback was needed.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict

from takeoff.config.errors import CatalogError
from takeoff.models.catalog import MaterialCatalog, NamedPriceTable
from takeoff.models.records import Trade
from takeoff.utils.measurements import normalize_size, parse_size_inches

logger = structlog.get_logger(__name__)

SIZE_TIE_TOLERANCE = 1e-9


# =============================================================================
# ENUMS AND RESULTS
# =============================================================================


class PriceTier(str, Enum):
    """Lookup tier that produced a price."""

    EXACT = "exact"
    NEAREST_SIZE = "nearest_size"
    PARTIAL_NAME = "partial_name"
    TYPE_DEFAULT = "type_default"
    GLOBAL_DEFAULT = "global_default"


class PriceQuote(BaseModel):
    """Result of a price lookup."""

    model_config = ConfigDict(frozen=True)

    unit_cost: float
    tier: PriceTier
    key: Optional[str] = None
    labor_hours: float = 0.0

    @property
    def is_miss(self) -> bool:
        return self.tier != PriceTier.EXACT


# =============================================================================
# SIZE AND NAME MATCHING
# =============================================================================


def nearest_size(sizes: Iterable[str], target: float) -> Optional[str]:
    """Pick the size closest to target.

    Equal distances resolve to the larger size; identical numeric sizes
    keep the first one in iteration order.
    """
    best_key = None
    best_value = None
    best_diff = None
    for key in sizes:
        value = parse_size_inches(key)
        if value is None:
            continue
        diff = abs(value - target)
        if best_key is None or diff < best_diff - SIZE_TIE_TOLERANCE:
            best_key, best_value, best_diff = key, value, diff
        elif abs(diff - best_diff) <= SIZE_TIE_TOLERANCE and value > best_value:
            best_key, best_value, best_diff = key, value, diff
    return best_key


def match_name(keys: Iterable[str], name: str) -> Tuple[Optional[str], PriceTier]:
    """Match a name against table keys.

    Exact (case-insensitive) match first, then containment in either
    direction with the longest key winning.
    """
    wanted = name.strip().lower()
    if not wanted:
        return None, PriceTier.GLOBAL_DEFAULT

    keys = list(keys)
    for key in keys:
        if key.lower() == wanted:
            return key, PriceTier.EXACT

    best = None
    for key in keys:
        lowered = key.lower()
        if lowered in wanted or wanted in lowered:
            if best is None or len(key) > len(best):
                best = key
    if best is not None:
        return best, PriceTier.PARTIAL_NAME
    return None, PriceTier.GLOBAL_DEFAULT


# =============================================================================
# PRICING ENGINE
# =============================================================================


class PricingEngine:
    """Tiered price lookup against an injected catalog."""

    def __init__(self, catalog: MaterialCatalog):
        self.catalog = catalog

    def price(
        self,
        trade: Trade,
        type_code: Optional[str],
        size: Optional[str],
        material: Optional[str],
    ) -> PriceQuote:
        """Look up a unit cost for a sized item.

        Tiers:
            1. exact ``sized_prices[material][size]``
            2. nearest catalog size for the material
            3. per-type constant when the material is unknown or the size
               cannot be read
            4. the trade's global default
        """
        trade_catalog = self.catalog.for_trade(trade)
        table = trade_catalog.sized_prices.get(material) if material else None

        if table:
            wanted = normalize_size(size or "")
            for key, cost in table.items():
                if normalize_size(key) == wanted:
                    return PriceQuote(unit_cost=cost, tier=PriceTier.EXACT, key=key)

            target = parse_size_inches(size or "")
            if target is not None:
                key = nearest_size(table.keys(), target)
                if key is not None:
                    logger.debug(
                        "price_nearest_size",
                        trade=trade.value,
                        material=material,
                        size=size,
                        matched_size=key,
                    )
                    return PriceQuote(unit_cost=table[key], tier=PriceTier.NEAREST_SIZE, key=key)

        if type_code and type_code in trade_catalog.type_prices:
            logger.debug(
                "price_type_default",
                trade=trade.value,
                type_code=type_code,
                material=material,
                size=size,
            )
            return PriceQuote(
                unit_cost=trade_catalog.type_prices[type_code],
                tier=PriceTier.TYPE_DEFAULT,
                key=type_code,
            )

        logger.debug(
            "price_global_default",
            trade=trade.value,
            type_code=type_code,
            material=material,
            size=size,
        )
        return PriceQuote(unit_cost=trade_catalog.global_default_price, tier=PriceTier.GLOBAL_DEFAULT)

    def price_named(self, trade: Trade, table_name: str, name: str) -> PriceQuote:
        """Look up a named item (fixture, valve, accessory, equipment).

        The quote also carries the table's fixed labor hours for the item.
        """
        table = self._named_table(trade, table_name)
        key, tier = match_name(table.prices.keys(), name)
        unit_cost = table.prices[key] if key is not None else table.default
        if tier != PriceTier.EXACT:
            logger.debug(
                "price_named_fallback",
                trade=trade.value,
                table=table_name,
                name=name,
                matched=key,
                tier=tier.value,
            )
        return PriceQuote(
            unit_cost=unit_cost,
            tier=tier,
            key=key,
            labor_hours=self.labor_hours_named(trade, table_name, name),
        )

    def labor_hours_named(self, trade: Trade, table_name: str, name: str) -> float:
        """Fixed installation hours for a named item."""
        table = self._named_table(trade, table_name)
        key, _ = match_name(table.labor_hours.keys(), name)
        if key is None:
            return table.default_labor_hours
        return table.labor_hours[key]

    def material_labor_rate(self, trade: Trade, material: Optional[str]) -> float:
        """Labor hours per unit for a material, or the trade's default rate."""
        rates = self.catalog.for_trade(trade).material_labor_rates
        if material and material in rates:
            return rates[material]
        return rates.get("default", 0.0)

    def _named_table(self, trade: Trade, table_name: str) -> NamedPriceTable:
        trade_catalog = self.catalog.for_trade(trade)
        try:
            return trade_catalog.named_prices[table_name]
        except KeyError:
            raise CatalogError(
                f"No price table {table_name!r} for trade {trade.value!r}",
                trade=trade.value,
                details={"table": table_name},
            ) from None
