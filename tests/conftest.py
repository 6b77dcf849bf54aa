"""Pytest configuration and shared fixtures for takeoff tests."""

import os
import sys

import pytest


# ============================================================================
# Ensure the takeoff package is importable without installation
# ============================================================================
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from takeoff.models.analysis import AnalysisConfig, AnalysisType  # noqa: E402
from takeoff.services.catalog_data import DEFAULT_CATALOG  # noqa: E402
from takeoff.services.pricing_engine import PricingEngine  # noqa: E402
from takeoff.services.response_extractor import ResponseExtractor  # noqa: E402
from takeoff.services.takeoff_pipeline import TakeoffPipeline  # noqa: E402


# ============================================================================
# Catalog and Services
# ============================================================================

@pytest.fixture
def catalog():
    """Default material catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def pricing(catalog):
    """Pricing engine over the default catalog."""
    return PricingEngine(catalog)


@pytest.fixture
def extractor(catalog):
    """Response extractor over the default catalog."""
    return ResponseExtractor(catalog)


@pytest.fixture
def pipeline(catalog):
    """Full takeoff pipeline over the default catalog."""
    return TakeoffPipeline(catalog)


# ============================================================================
# Configurations
# ============================================================================

@pytest.fixture
def full_config():
    """Full analysis with fixed markups so totals are predictable."""
    return AnalysisConfig(
        analysis_type=AnalysisType.FULL,
        contingency_rate=0.10,
        general_conditions_rate=0.0,
        overhead_profit_rate=0.0,
    )


@pytest.fixture
def costs_config():
    """Material pricing only, no labor or equipment."""
    return AnalysisConfig(
        analysis_type=AnalysisType.COSTS,
        contingency_rate=0.10,
        general_conditions_rate=0.0,
        overhead_profit_rate=0.0,
    )


@pytest.fixture
def materials_config():
    """Quantities only."""
    return AnalysisConfig(analysis_type=AnalysisType.MATERIALS)
