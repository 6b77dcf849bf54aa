"""Plumbing estimator.

Prices pipe runs by system type, material and size, and fixtures and
valves from their named price tables. Labor follows the material rate,
size bracket and fixed fixture/valve hours, with the overhead multiplier.
"""

from typing import Dict, List, Tuple

from takeoff.estimators.base import TradeEstimate, TradeEstimator
from takeoff.models.analysis import AnalysisConfig, NoteCode
from takeoff.models.records import FixtureRecord, PipeMaterial, PipeRecord, PipeTypeCode, Trade, ValveRecord
from takeoff.services.aggregator import breakdown
from takeoff.services.quantity_calculator import (
    apply_waste,
    pipe_labor_hours,
    plumbing_labor_hours,
    sum_pipe_lengths,
)
from takeoff.services.response_extractor import ExtractionResult
from takeoff.utils.measurements import parse_size_inches

FIXTURES_CATEGORY = "Fixtures"
VALVES_CATEGORY = "Valves & Specialties"
LABOR_CATEGORY = "Plumbing Labor"


class PlumbingEstimator(TradeEstimator):
    """Pipes, fixtures and valves."""

    trade = Trade.PLUMBING

    def estimate(self, extraction: ExtractionResult, config: AnalysisConfig) -> TradeEstimate:
        estimate = TradeEstimate()
        waste_pct = config.waste_pct_for(self.trade)

        pipes = self.records(extraction, "pipes", PipeRecord)
        fixtures = self.records(extraction, "fixtures", FixtureRecord)
        valves = self.records(extraction, "valves", ValveRecord)

        pipe_hours = self._price_pipes(pipes, waste_pct, config, estimate)
        fixture_hours = self._price_fixtures(fixtures, config, estimate)
        valve_hours = self._price_valves(valves, config, estimate)

        estimate.labor_hours = plumbing_labor_hours(pipe_hours, fixture_hours, valve_hours)
        self.add_labor(
            estimate,
            config,
            LABOR_CATEGORY,
            "Plumbing installation labor",
            estimate.labor_hours,
            self.labor_rate(config),
        )

        estimate.total_linear_feet = sum(pipe.length for pipe in pipes)
        estimate.total_area = extraction.stated_totals.total_area or 0.0
        estimate.breakdowns["by_type"] = breakdown(pipes, "type_code", "length")
        estimate.breakdowns["by_size"] = breakdown(pipes, "size", "length")
        if extraction.stated_totals.labor_hours is not None:
            estimate.breakdowns["stated"] = {"labor_hours": extraction.stated_totals.labor_hours}
        return estimate

    def _price_pipes(self, pipes: List[PipeRecord], waste_pct: float, config, estimate) -> List[float]:
        materials: Dict[str, PipeMaterial] = {}
        for pipe in pipes:
            materials.setdefault(pipe.type_code.value, pipe.material)
            if pipe.type_code == PipeTypeCode.UNKNOWN:
                estimate.note(
                    NoteCode.CLASSIFICATION_AMBIGUOUS,
                    f"Pipe type '{pipe.pipe_type}' did not match a known system",
                    trade=self.trade.value,
                    pipe_type=pipe.pipe_type,
                )

        runs: List[Tuple[str, str, float]] = [(pipe.type_code.value, pipe.size, pipe.length) for pipe in pipes]
        hours = []
        for (type_code, size), length in sum_pipe_lengths(runs).items():
            material = materials[type_code]
            material_name = None if material == PipeMaterial.UNKNOWN else material.value
            entry = self.trade_catalog.entry(type_code)
            quote = self.pricing.price(self.trade, type_code, size, material_name)

            description = " ".join(part for part in (size, material_name, entry.description) if part)
            self.add_quoted(
                estimate,
                config,
                entry.description,
                description,
                apply_waste(length, waste_pct),
                quote,
                code=type_code,
                size=size or None,
                unit="LF",
            )
            hours.append(
                pipe_labor_hours(
                    length,
                    self.pricing.material_labor_rate(self.trade, material_name),
                    parse_size_inches(size),
                )
            )
        return hours

    def _price_fixtures(self, fixtures: List[FixtureRecord], config, estimate) -> List[float]:
        hours = []
        for fixture in fixtures:
            quote = self.pricing.price_named(self.trade, "fixtures", fixture.fixture_type)
            self.add_quoted(
                estimate,
                config,
                FIXTURES_CATEGORY,
                fixture.fixture_type,
                fixture.quantity,
                quote,
                code=quote.key,
            )
            hours.append(quote.labor_hours * fixture.quantity)
        return hours

    def _price_valves(self, valves: List[ValveRecord], config, estimate) -> List[float]:
        hours = []
        for valve in valves:
            quote = self.pricing.price_named(self.trade, "valves", valve.valve_type)
            description = f"{valve.size} {valve.valve_type}".strip()
            self.add_quoted(
                estimate,
                config,
                VALVES_CATEGORY,
                description,
                valve.quantity,
                quote,
                code=quote.key,
                size=valve.size or None,
            )
            hours.append(quote.labor_hours * valve.quantity)
        return hours
