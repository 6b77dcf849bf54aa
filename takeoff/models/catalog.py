"""Material catalog models.

The catalog is immutable configuration injected into a pipeline run. Each
trade carries its known entries, the ordered classification rules used to
infer entries from free text, and the price tables consulted by the
pricing engine.
"""

import re
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from takeoff.config.errors import CatalogError
from takeoff.models.records import Trade


# =============================================================================
# ENUMS
# =============================================================================


class MatchLevel(str, Enum):
    """How a catalog entry was resolved."""

    LEGEND = "legend"               # Code defined in the drawing legend
    EXACT = "exact"                 # Code found in the trade catalog
    KEYWORD = "keyword"             # Keyword rule matched the description
    SIZE_PATTERN = "size_pattern"   # Only a size could be read
    DEFAULT = "default"             # Nothing matched

    @property
    def is_low_specificity(self) -> bool:
        return self in (MatchLevel.SIZE_PATTERN, MatchLevel.DEFAULT)


# =============================================================================
# CATALOG ENTRY MODELS
# =============================================================================


class MaterialCatalogEntry(BaseModel):
    """A material variant: what it is, how it is sold and what it costs."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Type code, e.g. 'ACP' or 'SP'")
    description: str = Field(..., description="Standard description")
    unit_size: float = Field(default=1.0, ge=0, description="Coverage per unit (sq ft per sheet, 0 for none)")
    unit_cost: float = Field(default=0.0, ge=0, description="Cost per unit")
    labor_rate: float = Field(default=0.0, ge=0, description="Labor hours per unit of measure")
    unit: str = Field(default="EA", description="Unit of measure")
    material: Optional[str] = Field(default=None, description="Material used for sized price lookups")
    integrated_barrier: bool = Field(default=False, description="Panel carries its own weather barrier")
    match: MatchLevel = Field(default=MatchLevel.EXACT)
    catalog_code: Optional[str] = Field(default=None, description="Catalog code this entry resolved to")

    @property
    def resolved_code(self) -> str:
        return self.catalog_code or self.code


class KeywordRule(BaseModel):
    """Keyword set that maps a description to a catalog code.

    Every keyword must be present (case-insensitive) for the rule to match,
    starting at a word boundary: "wood" matches "wood studs", not "plywood".
    """

    model_config = ConfigDict(frozen=True)

    keywords: Tuple[str, ...]
    code: str

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return all(re.search(r"(?<![a-z0-9])" + re.escape(keyword), lowered) for keyword in self.keywords)


class SizeRule(BaseModel):
    """Size pattern that fixes a unit size and optionally a code."""

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., description="Case-insensitive regular expression")
    unit_size: Optional[float] = None
    code: Optional[str] = None

    @model_validator(mode="after")
    def check_target(self) -> "SizeRule":
        """A size rule must set a unit size or a code."""
        if self.unit_size is None and self.code is None:
            raise ValueError(f"Size rule {self.pattern!r} sets neither unit_size nor code")
        return self


class NamedPriceTable(BaseModel):
    """Prices keyed by item name (fixtures, valves, accessories)."""

    model_config = ConfigDict(frozen=True)

    prices: Dict[str, float]
    default: float = Field(..., ge=0)
    labor_hours: Dict[str, float] = Field(default_factory=dict)
    default_labor_hours: float = Field(default=0.0, ge=0)


# =============================================================================
# TRADE CATALOG
# =============================================================================


class TradeCatalog(BaseModel):
    """Everything the classifier and pricing engine know about one trade."""

    model_config = ConfigDict(frozen=True)

    trade: Trade
    entries: Tuple[MaterialCatalogEntry, ...]
    default_code: str
    keyword_rules: Tuple[KeywordRule, ...] = ()
    size_rules: Tuple[SizeRule, ...] = ()
    code_aliases: Dict[str, str] = Field(default_factory=dict)

    # Sized price table: material -> size -> unit cost, in lookup order
    sized_prices: Dict[str, Dict[str, float]] = Field(default_factory=dict)
    type_prices: Dict[str, float] = Field(default_factory=dict)
    global_default_price: float = Field(default=0.0, ge=0)

    named_prices: Dict[str, NamedPriceTable] = Field(default_factory=dict)
    material_labor_rates: Dict[str, float] = Field(default_factory=dict)
    labor_rate_per_hour: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def check_default_code(self) -> "TradeCatalog":
        """The default code must name one of the entries."""
        if self.entry(self.default_code) is None:
            raise ValueError(f"Default code {self.default_code!r} is not a catalog entry for {self.trade.value}")
        return self

    def entry(self, code: str) -> Optional[MaterialCatalogEntry]:
        """Return the entry with an exact (case-insensitive) code."""
        wanted = code.upper()
        for item in self.entries:
            if item.code.upper() == wanted:
                return item
        return None

    @property
    def default_entry(self) -> MaterialCatalogEntry:
        return self.entry(self.default_code)


class MaterialCatalog(BaseModel):
    """Immutable set of trade catalogs."""

    model_config = ConfigDict(frozen=True)

    trades: Dict[Trade, TradeCatalog]

    def for_trade(self, trade: Trade) -> TradeCatalog:
        """Return the catalog for a trade.

        Raises:
            CatalogError: If the catalog has no tables for the trade.
        """
        try:
            return self.trades[trade]
        except KeyError:
            raise CatalogError(
                f"Catalog has no tables for trade {trade.value!r}",
                trade=trade.value,
            ) from None
