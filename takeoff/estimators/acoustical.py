"""Acoustical ceiling estimator."""

from typing import Dict, List, Tuple

from takeoff.estimators.base import TradeEstimate, TradeEstimator
from takeoff.models.analysis import AnalysisConfig
from takeoff.models.catalog import MaterialCatalogEntry
from takeoff.models.records import CeilingSectionRecord, GridItemRecord, Trade
from takeoff.services.material_classifier import normalize_code
from takeoff.services.quantity_calculator import (
    calculate_grid_system,
    calculate_gypsum_ceiling_framing,
    calculate_wood_ceiling_support,
    ceiling_units,
)
from takeoff.services.response_extractor import ExtractionResult

CEILING_CATEGORY = "Ceiling Materials"
GRID_CATEGORY = "Grid System"
SUPPORT_CATEGORY = "Ceiling Support"
LABOR_CATEGORY = "Ceiling Labor"

# Catalog codes by the support system they need
PANEL_CODES = ("ACP",)
TILE_CODES = ("ACT", "DEFAULT")
GYPSUM_CODES = ("GYP",)
WOOD_CODES = ("WOOD",)


class AcousticalEstimator(TradeEstimator):
    """Ceiling units per type, grid components and support framing."""

    trade = Trade.ACOUSTICAL

    def estimate(self, extraction: ExtractionResult, config: AnalysisConfig) -> TradeEstimate:
        estimate = TradeEstimate()
        waste_pct = config.waste_pct_for(self.trade)
        sections = self.records(extraction, "ceiling_sections", CeilingSectionRecord)

        types = self._areas_by_type(sections, extraction, estimate)
        system_areas = {"panel": 0.0, "tile": 0.0, "gypsum": 0.0, "wood": 0.0}
        labor_hours = 0.0

        for code, (entry, area) in types.items():
            units = ceiling_units(area, entry.unit_size, waste_pct)
            self.add_material(
                estimate,
                config,
                CEILING_CATEGORY,
                entry.description,
                units,
                entry.unit_cost * entry.unit_size,
                code=code,
                unit="EA",
                tier=entry.match.value,
            )
            labor_hours += area * entry.labor_rate

            base = entry.resolved_code.upper()
            if base in PANEL_CODES:
                system_areas["panel"] += area
            elif base in TILE_CODES:
                system_areas["tile"] += area
            elif base in GYPSUM_CODES:
                system_areas["gypsum"] += area
            elif base in WOOD_CODES:
                system_areas["wood"] += area

        if config.include_grid_system:
            self._add_support(estimate, config, system_areas)

        estimate.labor_hours = labor_hours
        self.add_labor(
            estimate,
            config,
            LABOR_CATEGORY,
            "Ceiling installation labor",
            labor_hours,
            self.labor_rate(config),
        )

        section_area = sum(section.area for section in sections)
        estimate.total_area = section_area if sections else (extraction.stated_totals.total_area or 0.0)
        estimate.breakdowns["by_type"] = {code: area for code, (_, area) in types.items()}
        reported = self.records(extraction, "grid_items", GridItemRecord)
        if reported:
            estimate.breakdowns["reported_grid"] = {item.description: item.quantity for item in reported}
        return estimate

    def _areas_by_type(
        self,
        sections: List[CeilingSectionRecord],
        extraction: ExtractionResult,
        estimate: TradeEstimate,
    ) -> Dict[str, Tuple[MaterialCatalogEntry, float]]:
        types: Dict[str, Tuple[MaterialCatalogEntry, float]] = {}
        for section in sections:
            code = normalize_code(section.type_code)
            key = code or self.trade_catalog.default_code
            if key in types:
                entry, area = types[key]
                types[key] = (entry, area + section.area)
                continue
            entry = self.resolve_entry(code, None, extraction, estimate, section=section.name)
            types[key] = (entry, section.area)
        return types

    def _add_support(self, estimate: TradeEstimate, config: AnalysisConfig, areas: Dict[str, float]) -> None:
        grid = calculate_grid_system(areas["panel"], areas["tile"])
        for name, quantity in (
            ("Main Runner", grid.main_runners),
            ("Cross Tee 4'", grid.cross_tees_4),
            ("Cross Tee 2'", grid.cross_tees_2),
            ("Wall Molding", grid.wall_molding),
            ("Hanger Wire", grid.hanger_wire),
        ):
            self._add_grid_item(estimate, config, GRID_CATEGORY, name, quantity, "EA")

        gypsum = calculate_gypsum_ceiling_framing(areas["gypsum"])
        self._add_grid_item(estimate, config, SUPPORT_CATEGORY, "Carrying Channel", gypsum.carrying_channel, "LF")
        self._add_grid_item(estimate, config, SUPPORT_CATEGORY, "Furring Channel", gypsum.furring_channel, "LF")
        self._add_grid_item(estimate, config, SUPPORT_CATEGORY, "Hanger Wire", gypsum.hanger_wire, "EA")

        wood = calculate_wood_ceiling_support(areas["wood"])
        self._add_grid_item(estimate, config, SUPPORT_CATEGORY, "Furring Strip", wood.furring_strips, "LF")
        self._add_grid_item(estimate, config, SUPPORT_CATEGORY, "Mounting Clip", wood.mounting_clips, "EA")

    def _add_grid_item(self, estimate, config, category: str, name: str, quantity: int, unit: str) -> None:
        if quantity <= 0:
            return
        quote = self.pricing.price_named(self.trade, "grid", name)
        self.add_quoted(estimate, config, category, name, quantity, quote, unit=unit)
