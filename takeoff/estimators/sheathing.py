"""Sheathing estimator.

Panel area is summed per type code from the first source that has data:
wall sections, then the per-type area table, then the stated grand total
(assigned to the default panel). Each type yields sheets with waste;
fasteners, house wrap and base cement board are priced as accessories.
"""

import math
from typing import Dict, List, Tuple

from takeoff.estimators.base import TradeEstimate, TradeEstimator
from takeoff.models.analysis import AnalysisConfig
from takeoff.models.catalog import MaterialCatalogEntry
from takeoff.models.records import Trade, WallSectionRecord
from takeoff.services.material_classifier import normalize_code
from takeoff.services.quantity_calculator import (
    HOUSE_WRAP_ROLL_SF,
    SHEETS_PER_FASTENER_BOX,
    calculate_panels,
    cement_board_base,
)
from takeoff.services.response_extractor import ExtractionResult

PANELS_CATEGORY = "Sheathing Panels"
ACCESSORIES_CATEGORY = "Accessories"
LABOR_CATEGORY = "Sheathing Labor"

SHEETS_PER_LABOR_HOUR = 4
WRAP_SF_PER_LABOR_HOUR = 500


class SheathingEstimator(TradeEstimator):
    """Wall sheathing panels and accessories."""

    trade = Trade.SHEATHING

    def estimate(self, extraction: ExtractionResult, config: AnalysisConfig) -> TradeEstimate:
        estimate = TradeEstimate()
        waste_pct = config.waste_pct_for(self.trade)
        walls = self.records(extraction, "wall_sections", WallSectionRecord)

        areas = self._areas_by_type(walls, extraction, config)
        total_sheets = 0
        wrap_area = 0.0

        for code, (description, area) in areas.items():
            entry = self.resolve_entry(code, description, extraction, estimate)
            panels = calculate_panels(area, entry.unit_size, waste_pct, entry.integrated_barrier)
            total_sheets += panels.sheets_with_waste
            if not entry.integrated_barrier:
                wrap_area += area
            self.add_material(
                estimate,
                config,
                PANELS_CATEGORY,
                entry.description,
                panels.sheets_with_waste,
                entry.unit_cost,
                code=code,
                unit="SHT",
                tier=entry.match.value,
            )

        if total_sheets:
            self._add_accessory(
                estimate, config, "Fasteners", math.ceil(total_sheets / SHEETS_PER_FASTENER_BOX), "BOX"
            )
        if wrap_area:
            self._add_accessory(estimate, config, "House Wrap", math.ceil(wrap_area / HOUSE_WRAP_ROLL_SF), "ROLL")

        cement_board_lf = extraction.stated_totals.cement_board_lf
        if cement_board_lf:
            cement_area, cement_sheets = cement_board_base(cement_board_lf)
            self._add_accessory(estimate, config, "Cement Board", cement_sheets, "SHT")
            estimate.breakdowns["cement_board"] = {"linear_feet": cement_board_lf, "area": cement_area}

        estimate.labor_hours = total_sheets / SHEETS_PER_LABOR_HOUR + wrap_area / WRAP_SF_PER_LABOR_HOUR
        self.add_labor(
            estimate,
            config,
            LABOR_CATEGORY,
            "Sheathing and house wrap installation",
            estimate.labor_hours,
            self.labor_rate(config),
        )

        estimate.total_area = sum(area for _, area in areas.values())
        estimate.total_linear_feet = sum(wall.length for wall in walls)
        estimate.breakdowns["by_type"] = {code: area for code, (_, area) in areas.items()}
        return estimate

    def _areas_by_type(
        self,
        walls: List[WallSectionRecord],
        extraction: ExtractionResult,
        config: AnalysisConfig,
    ) -> Dict[str, Tuple[str, float]]:
        """(description, area) per type code, in first-seen order."""
        areas: Dict[str, Tuple[str, float]] = {}

        def add(code: str, description: str, area: float) -> None:
            code = normalize_code(code) or self.trade_catalog.default_code
            known_description, total = areas.get(code, (description, 0.0))
            areas[code] = (known_description, total + area)

        if walls:
            for wall in walls:
                add(wall.type_code or "", "", wall.wall_area(config.default_wall_height))
        elif extraction.type_areas:
            for row in extraction.type_areas:
                add(row.code, row.description, row.area)
        elif extraction.stated_totals.total_area:
            default: MaterialCatalogEntry = self.trade_catalog.default_entry
            add(default.code, default.description, extraction.stated_totals.total_area)
        return areas

    def _add_accessory(self, estimate, config, name: str, quantity: int, unit: str) -> None:
        quote = self.pricing.price_named(self.trade, "accessories", name)
        self.add_quoted(estimate, config, ACCESSORIES_CATEGORY, name, quantity, quote, unit=unit)
