"""Pipeline Logger for takeoff runs.

Provides highly visible, formatted banners for run start, extraction,
completion and failure. Banners are printed only when
TAKEOFF_LOG_BANNERS is set; the structured log events are always emitted.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import structlog

from takeoff.config.settings import settings

logger = structlog.get_logger()

# Visual markers for different log types
BANNER_WIDTH = 80
PIPELINE_BANNER_CHAR = "█"
EXTRACTION_BANNER_CHAR = "─"
FAILURE_BANNER_CHAR = "!"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with timestamps, console output and a level filter."""
    level_value = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
    )


def _create_banner(char: str, text: str, width: int = BANNER_WIDTH) -> str:
    """Create a centered banner with given character."""
    text_with_spaces = f" {text} "
    padding = (width - len(text_with_spaces)) // 2
    return char * padding + text_with_spaces + char * (width - padding - len(text_with_spaces))


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def log_analysis_start(trade: str, analysis_type: str, text_length: int) -> None:
    """Log run start with prominent banner."""
    if settings.log_banners:
        print("\n")
        print(PIPELINE_BANNER_CHAR * BANNER_WIDTH)
        print(_create_banner(PIPELINE_BANNER_CHAR, "TAKEOFF ANALYSIS STARTED"))
        print(PIPELINE_BANNER_CHAR * BANNER_WIDTH)
        print(f"║ Trade         : {trade}")
        print(f"║ Analysis Type : {analysis_type}")
        print(f"║ Text Length   : {text_length:,} chars")
        print(f"║ Timestamp     : {_timestamp()}")
        print(PIPELINE_BANNER_CHAR * BANNER_WIDTH)

    logger.info(
        "analysis_start_logged",
        trade=trade,
        analysis_type=analysis_type,
        text_length=text_length,
    )


def log_extraction_summary(
    trade: str,
    record_counts: Dict[str, int],
    strategies: Dict[str, Optional[str]],
    note_count: int,
) -> None:
    """Log which strategy produced each category and how many records it found."""
    if settings.log_banners:
        print(EXTRACTION_BANNER_CHAR * BANNER_WIDTH)
        print(_create_banner(EXTRACTION_BANNER_CHAR, f"EXTRACTION: {trade.upper()}"))
        print(EXTRACTION_BANNER_CHAR * BANNER_WIDTH)
        for category, count in record_counts.items():
            print(f"║ {category:<18}: {count:>4} records via {strategies.get(category) or 'none'}")
        print(f"║ Notes             : {note_count}")
        print(EXTRACTION_BANNER_CHAR * BANNER_WIDTH)

    logger.info(
        "extraction_summary_logged",
        trade=trade,
        record_counts=record_counts,
        strategies=strategies,
        note_count=note_count,
    )


def log_analysis_complete(
    trade: str,
    total: float,
    item_count: int,
    note_count: int,
    duration_ms: int,
) -> None:
    """Log run completion with summary."""
    if settings.log_banners:
        print(PIPELINE_BANNER_CHAR * BANNER_WIDTH)
        print(_create_banner(PIPELINE_BANNER_CHAR, "✓ TAKEOFF COMPLETED"))
        print(PIPELINE_BANNER_CHAR * BANNER_WIDTH)
        print(f"║ Trade       : {trade}")
        print(f"║ Line Items  : {item_count}")
        print(f"║ Notes       : {note_count}")
        print(f"║ Grand Total : ${total:,.2f}")
        print(f"║ Duration    : {duration_ms:,} ms")
        print(PIPELINE_BANNER_CHAR * BANNER_WIDTH)
        print("\n")

    logger.info(
        "analysis_complete_logged",
        trade=trade,
        total=round(total, 2),
        item_count=item_count,
        note_count=note_count,
        duration_ms=duration_ms,
    )


def log_analysis_failed(trade: str, stage: str, error: str) -> None:
    """Log run failure with details."""
    if settings.log_banners:
        print("\n")
        print(FAILURE_BANNER_CHAR * BANNER_WIDTH)
        print(_create_banner(FAILURE_BANNER_CHAR, "✗ TAKEOFF FAILED"))
        print(FAILURE_BANNER_CHAR * BANNER_WIDTH)
        print(f"║ Trade     : {trade}")
        print(f"║ Stage     : {stage}")
        print(f"║ Error     : {error}")
        print(f"║ Timestamp : {_timestamp()}")
        print(FAILURE_BANNER_CHAR * BANNER_WIDTH)
        print("\n")

    logger.error(
        "analysis_failed_logged",
        trade=trade,
        stage=stage,
        error=error,
    )
