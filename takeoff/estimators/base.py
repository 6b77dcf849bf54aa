"""Base Trade Estimator for the takeoff pipeline.

Abstract base class for the per-trade estimators. An estimator turns the
records of one ExtractionResult into priced items using the material
classifier, the quantity calculator and the pricing engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Type

import structlog

from takeoff.models.analysis import (
    AnalysisConfig,
    AnalysisNote,
    CostKind,
    NoteCode,
    PricedItem,
)
from takeoff.models.catalog import MaterialCatalog, MaterialCatalogEntry
from takeoff.models.records import Trade
from takeoff.services.material_classifier import classify, normalize_code
from takeoff.services.pricing_engine import PriceQuote, PricingEngine
from takeoff.services.response_extractor import ExtractionResult

logger = structlog.get_logger(__name__)


@dataclass
class TradeEstimate:
    """Priced items and quantities produced for one trade."""

    items: List[PricedItem] = field(default_factory=list)
    labor_hours: float = 0.0
    total_area: float = 0.0
    total_linear_feet: float = 0.0
    breakdowns: Dict[str, Dict[str, float]] = field(default_factory=dict)
    notes: List[AnalysisNote] = field(default_factory=list)

    def note(self, code: NoteCode, message: str, **context) -> None:
        self.notes.append(AnalysisNote(code=code, message=message, context=context))


class TradeEstimator(ABC):
    """Abstract base class for trade estimators.

    Provides:
    - Catalog entry resolution (legend first, then the classifier)
    - Priced item helpers that honour the analysis type
    - Audit notes for ambiguous classification and pricing fallbacks

    Subclasses must set ``trade`` and implement:
    - estimate(extraction, config) - the trade's takeoff
    """

    trade: Trade

    def __init__(self, catalog: MaterialCatalog, pricing: Optional[PricingEngine] = None):
        """Initialize TradeEstimator.

        Args:
            catalog: Injected material catalog.
            pricing: Optional pricing engine sharing the same catalog.
        """
        self.catalog = catalog
        self.trade_catalog = catalog.for_trade(self.trade)
        self.pricing = pricing or PricingEngine(catalog)

    @abstractmethod
    def estimate(self, extraction: ExtractionResult, config: AnalysisConfig) -> TradeEstimate:
        """Price the extracted records.

        Args:
            extraction: Records, legend and stated totals for this trade.
            config: Run configuration.

        Returns:
            TradeEstimate with priced items and quantities.
        """
        pass

    def labor_rate(self, config: AnalysisConfig) -> float:
        """Configured hourly labor rate, or the trade default."""
        if config.labor_rate_per_hour is not None:
            return config.labor_rate_per_hour
        return self.trade_catalog.labor_rate_per_hour

    def records(
        self,
        extraction: ExtractionResult,
        category: str,
        record_type: Type,
    ) -> List:
        """Typed records of one category.

        Unreadable rows were already noted during extraction and are skipped.
        """
        skipped = extraction.unreadable_for(category)
        if skipped:
            logger.debug(
                "unreadable_rows_skipped",
                trade=self.trade.value,
                category=category,
                rows=[record.raw for record in skipped],
            )
        return [record for record in extraction.records_for(category) if isinstance(record, record_type)]

    def resolve_entry(
        self,
        code: Optional[str],
        description: Optional[str],
        extraction: ExtractionResult,
        estimate: TradeEstimate,
        section: Optional[str] = None,
    ) -> MaterialCatalogEntry:
        """Legend entry for a code, else the classifier's entry.

        Low-specificity classifications add a ClassificationAmbiguous note.
        Section and room names are not material descriptions; pass them as
        ``section`` so they only label the note.
        """
        normalized = normalize_code(code)
        if normalized and normalized in extraction.legend:
            return extraction.legend[normalized]

        entry = classify(code, description, self.trade, self.catalog)
        if entry.match.is_low_specificity:
            logger.warning(
                "classification_ambiguous",
                trade=self.trade.value,
                code=code,
                description=description,
                match=entry.match.value,
            )
            estimate.note(
                NoteCode.CLASSIFICATION_AMBIGUOUS,
                f"'{description or code or section}' resolved to {entry.resolved_code} by {entry.match.value} match",
                trade=self.trade.value,
                type_code=code,
                section=section,
                description=description,
                resolved_code=entry.resolved_code,
                match=entry.match.value,
            )
        return entry

    # -------------------------------------------------------------------------
    # Priced item helpers
    # -------------------------------------------------------------------------

    def add_material(
        self,
        estimate: TradeEstimate,
        config: AnalysisConfig,
        category: str,
        description: str,
        quantity: float,
        unit_price: float,
        *,
        code: Optional[str] = None,
        size: Optional[str] = None,
        unit: str = "EA",
        tier: Optional[str] = None,
    ) -> Optional[PricedItem]:
        """Add a material line; prices are zero for quantity-only runs."""
        if quantity <= 0:
            return None
        item = PricedItem.create(
            category,
            description,
            quantity,
            unit_price if config.is_priced else 0.0,
            kind=CostKind.MATERIAL,
            code=code,
            size=size,
            unit=unit,
            price_tier=tier,
        )
        estimate.items.append(item)
        return item

    def add_quoted(
        self,
        estimate: TradeEstimate,
        config: AnalysisConfig,
        category: str,
        description: str,
        quantity: float,
        quote: PriceQuote,
        **kwargs,
    ) -> Optional[PricedItem]:
        """Add a material line priced by a quote, noting fallback tiers."""
        if quote.is_miss and config.is_priced and quantity > 0:
            estimate.note(
                NoteCode.PRICING_LOOKUP_MISS,
                f"No exact price for '{description}'; used {quote.tier.value}",
                trade=self.trade.value,
                description=description,
                tier=quote.tier.value,
                matched=quote.key,
                unit_cost=quote.unit_cost,
            )
        return self.add_material(
            estimate,
            config,
            category,
            description,
            quantity,
            quote.unit_cost,
            tier=quote.tier.value,
            **kwargs,
        )

    def add_labor(
        self,
        estimate: TradeEstimate,
        config: AnalysisConfig,
        category: str,
        description: str,
        hours: float,
        rate: float,
    ) -> Optional[PricedItem]:
        """Add a labor line (full analysis only)."""
        if not config.includes_labor or hours <= 0:
            return None
        item = PricedItem.create(
            category,
            description,
            round(hours, 2),
            rate,
            kind=CostKind.LABOR,
            unit="HR",
        )
        estimate.items.append(item)
        return item

    def add_equipment(
        self,
        estimate: TradeEstimate,
        config: AnalysisConfig,
        category: str,
        description: str,
        quantity: float,
        rate: float,
        unit: str = "DAY",
    ) -> Optional[PricedItem]:
        """Add an equipment line (full analysis only)."""
        if not config.includes_labor or quantity <= 0:
            return None
        item = PricedItem.create(
            category,
            description,
            quantity,
            rate,
            kind=CostKind.EQUIPMENT,
            unit=unit,
        )
        estimate.items.append(item)
        return item
