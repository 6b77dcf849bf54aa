"""Takeoff Pipeline.

Runs one analysis end to end:
1. ResponseExtractor turns the raw reply into records, legend and totals
2. The trade estimator classifies, measures and prices those records
3. Aggregator groups items into category and grand totals

The pipeline keeps no state between runs; the catalog is injected and
never mutated.
"""

import time
from typing import Optional

import structlog

from takeoff.estimators import ESTIMATORS
from takeoff.models.analysis import AnalysisConfig, AnalysisResult, AnalysisType
from takeoff.models.catalog import MaterialCatalog
from takeoff.models.records import Trade
from takeoff.services.aggregator import Aggregator
from takeoff.services.catalog_data import DEFAULT_CATALOG
from takeoff.services.pricing_engine import PricingEngine
from takeoff.services.response_extractor import ResponseExtractor
from takeoff.utils.pipeline_logger import (
    log_analysis_complete,
    log_analysis_failed,
    log_analysis_start,
    log_extraction_summary,
)

logger = structlog.get_logger(__name__)


class TakeoffPipeline:
    """Extraction, estimation and aggregation for any supported trade."""

    def __init__(self, catalog: MaterialCatalog = DEFAULT_CATALOG):
        self.catalog = catalog
        self.extractor = ResponseExtractor(catalog)
        self.pricing = PricingEngine(catalog)
        self.estimators = {trade: cls(catalog, self.pricing) for trade, cls in ESTIMATORS.items()}
        self.aggregator = Aggregator()
        logger.debug("takeoff_pipeline_initialized", trades=[trade.value for trade in self.estimators])

    def analyze(self, text: str, trade, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
        """Produce an AnalysisResult from raw analysis text.

        Args:
            text: Reply from the text-generation service.
            trade: Trade or trade identifier.
            config: Run configuration; defaults apply when omitted.

        Returns:
            AnalysisResult. Irregularities in the text are reported as
            notes, never raised.

        Raises:
            ValidationError: If text is not a string or the trade is unknown.
        """
        trade = Trade.parse(trade)
        config = config or AnalysisConfig()
        started = time.monotonic()
        stage = "extraction"

        log_analysis_start(trade.value, config.analysis_type.value, len(text) if isinstance(text, str) else 0)

        try:
            extraction = self.extractor.extract(text, trade)
            log_extraction_summary(
                trade.value,
                {category: len(records) for category, records in extraction.records.items()},
                extraction.strategies,
                len(extraction.notes),
            )

            stage = "estimation"
            estimate = self.estimators[trade].estimate(extraction, config)

            stage = "aggregation"
            include_installation = trade == Trade.PLUMBING or config.analysis_type == AnalysisType.FULL
            result = self.aggregator.aggregate(
                estimate.items,
                config,
                trade=trade,
                sections=extraction.all_records,
                legend=list(extraction.legend.values()),
                labor_hours=estimate.labor_hours,
                total_area=estimate.total_area,
                total_linear_feet=estimate.total_linear_feet,
                breakdowns=estimate.breakdowns,
                notes=extraction.notes + estimate.notes,
                installation_notes=extraction.installation_notes if include_installation else [],
            )
        except Exception as e:
            log_analysis_failed(trade.value, stage, str(e))
            raise

        log_analysis_complete(
            trade.value,
            result.grand_totals.total,
            len(result.items),
            len(result.notes),
            int((time.monotonic() - started) * 1000),
        )
        return result
