"""Aggregator for priced takeoff items.

Groups priced items into category totals (in first-appearance order),
computes grand totals with non-compounding markups and assembles the
AnalysisResult.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

import structlog

from takeoff.models.analysis import (
    AnalysisConfig,
    AnalysisNote,
    AnalysisResult,
    CategoryTotal,
    GrandTotals,
    InstallationNote,
    PricedItem,
)
from takeoff.models.catalog import MaterialCatalogEntry
from takeoff.models.records import ExtractedRecord, Trade

logger = structlog.get_logger(__name__)


def breakdown(items: Iterable[Any], key: str, value: str = "quantity") -> Dict[str, float]:
    """Sum ``value`` per ``key`` attribute, keeping first-seen key order.

    Works on priced items and extracted records alike; items whose key is
    empty are skipped.

    Example:
        breakdown(pipe_records, "size", "length") -> {'4"': 220.0, '2"': 85.0}
    """
    totals: Dict[str, float] = {}
    for item in items:
        label = getattr(item, key, None)
        if isinstance(label, Enum):
            label = label.value
        if not label:
            continue
        totals[str(label)] = totals.get(str(label), 0.0) + float(getattr(item, value))
    return totals


def group_by_category(items: Iterable[PricedItem]) -> List[CategoryTotal]:
    """Category totals in the order categories first appear."""
    grouped: Dict[str, List[PricedItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return [CategoryTotal.from_items(category, category_items) for category, category_items in grouped.items()]


class Aggregator:
    """Assemble the AnalysisResult from priced items."""

    def aggregate(
        self,
        items: List[PricedItem],
        config: AnalysisConfig,
        *,
        trade: Trade,
        sections: Optional[List[ExtractedRecord]] = None,
        legend: Optional[List[MaterialCatalogEntry]] = None,
        labor_hours: float = 0.0,
        total_area: float = 0.0,
        total_linear_feet: float = 0.0,
        breakdowns: Optional[Dict[str, Dict[str, float]]] = None,
        notes: Optional[List[AnalysisNote]] = None,
        installation_notes: Optional[List[InstallationNote]] = None,
    ) -> AnalysisResult:
        """Total the items and build the result.

        Args:
            items: Priced items; each lands in exactly one category.
            config: Run configuration (markup rates, analysis type).
            trade: Trade the items were estimated for.

        Returns:
            AnalysisResult with category and grand totals.
        """
        category_totals = group_by_category(items)
        grand_totals = GrandTotals.calculate(category_totals, config)

        logger.info(
            "estimate_aggregated",
            trade=trade.value,
            categories=len(category_totals),
            items=len(items),
            subtotal=round(grand_totals.subtotal, 2),
            total=round(grand_totals.total, 2),
        )

        return AnalysisResult(
            trade=trade,
            analysis_type=config.analysis_type,
            waste_factor_pct=config.waste_pct_for(trade),
            sections=list(sections or []),
            legend=list(legend or []),
            category_totals=category_totals,
            grand_totals=grand_totals,
            labor_hours=labor_hours,
            total_area=total_area,
            total_linear_feet=total_linear_feet,
            breakdowns=dict(breakdowns or {}),
            notes=list(notes or []),
            installation_notes=list(installation_notes or []),
        )
