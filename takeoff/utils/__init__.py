"""Utility modules for the takeoff engine."""

from takeoff.utils.pipeline_logger import (
    configure_logging,
    log_analysis_start,
    log_extraction_summary,
    log_analysis_complete,
    log_analysis_failed,
)

__all__ = [
    "configure_logging",
    "log_analysis_start",
    "log_extraction_summary",
    "log_analysis_complete",
    "log_analysis_failed",
]
