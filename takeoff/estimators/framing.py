"""Framing estimator.

Walls are resolved to a stud type through the legend or the classifier,
then framed with the quantity calculator. Studs and track are priced by
(kind, size, material); openings, corners, blocking and fasteners come
from the accessory table.
"""

from typing import List

from takeoff.estimators.base import TradeEstimate, TradeEstimator
from takeoff.models.analysis import AnalysisConfig
from takeoff.models.catalog import MatchLevel, MaterialCatalogEntry
from takeoff.models.records import StudType, Trade, WallSectionRecord
from takeoff.services.catalog_data import STUD_SPECS
from takeoff.services.quantity_calculator import FramingSectionInput, calculate_framing
from takeoff.services.response_extractor import ExtractionResult

STUDS_CATEGORY = "Studs"
TRACK_CATEGORY = "Track"
ACCESSORIES_CATEGORY = "Framing Accessories"
LABOR_CATEGORY = "Framing Labor"

LABOR_HOURS_PER_STUD = 0.02
LABOR_HOURS_PER_TRACK_LF = 0.015


def stud_type_for(entry: MaterialCatalogEntry) -> StudType:
    """Stud type named by a resolved framing entry."""
    try:
        return StudType(entry.resolved_code)
    except ValueError:
        return StudType.METAL_3_5_8


class FramingEstimator(TradeEstimator):
    """Studs, track and framing accessories for wall sections."""

    trade = Trade.FRAMING

    def estimate(self, extraction: ExtractionResult, config: AnalysisConfig) -> TradeEstimate:
        estimate = TradeEstimate()
        walls = self.records(extraction, "wall_sections", WallSectionRecord)
        sections = self._framing_inputs(walls, extraction, config, estimate)

        quantities = calculate_framing(
            sections,
            config.stud_spacing_in,
            config.waste_pct_for(self.trade),
            config.use_metal_framing,
        )

        for stud_type, count in quantities.studs.items():
            description, size, material = STUD_SPECS[stud_type]
            quote = self.pricing.price(self.trade, "stud", size, f"{material} stud")
            self.add_quoted(
                estimate, config, STUDS_CATEGORY, description, count, quote,
                code=stud_type.value, size=size,
            )
        for stud_type, length in quantities.track.items():
            _, size, material = STUD_SPECS[stud_type]
            quote = self.pricing.price(self.trade, "track", size, f"{material} track")
            self.add_quoted(
                estimate, config, TRACK_CATEGORY, f"{size} {material.title()} Track", length, quote,
                code=stud_type.value, size=size, unit="LF",
            )

        for name, quantity, unit in (
            ("Header", quantities.headers, "EA"),
            ("King Stud", quantities.king_studs, "EA"),
            ("Cripple Stud", quantities.cripple_studs, "EA"),
            ("Corner Backing", quantities.corner_backing, "EA"),
            ("Blocking", quantities.blocking, "LF"),
            ("Screws", quantities.screw_boxes, "BOX"),
            ("Nails", quantities.nail_boxes, "BOX"),
        ):
            if quantity:
                quote = self.pricing.price_named(self.trade, "accessories", name)
                self.add_quoted(estimate, config, ACCESSORIES_CATEGORY, name, quantity, quote, unit=unit)

        total_studs = sum(quantities.studs.values()) + quantities.king_studs + quantities.cripple_studs
        total_track = sum(quantities.track.values())
        estimate.labor_hours = total_studs * LABOR_HOURS_PER_STUD + total_track * LABOR_HOURS_PER_TRACK_LF
        self.add_labor(
            estimate,
            config,
            LABOR_CATEGORY,
            "Framing installation labor",
            estimate.labor_hours,
            self.labor_rate(config),
        )

        estimate.total_area = quantities.total_wall_area
        estimate.total_linear_feet = quantities.total_linear_feet
        estimate.breakdowns["by_stud_type"] = {key.value: float(count) for key, count in quantities.studs.items()}
        estimate.breakdowns["openings"] = {"total": float(quantities.total_openings)}
        return estimate

    def _framing_inputs(
        self,
        walls: List[WallSectionRecord],
        extraction: ExtractionResult,
        config: AnalysisConfig,
        estimate: TradeEstimate,
    ) -> List[FramingSectionInput]:
        sections = []
        for wall in walls:
            entry = self.resolve_entry(wall.type_code, None, extraction, estimate, section=wall.name)
            stud_type = stud_type_for(entry)
            if entry.match == MatchLevel.DEFAULT and not config.use_metal_framing:
                stud_type = StudType.WOOD_2X4
            sections.append(
                FramingSectionInput(
                    length=wall.length,
                    height=wall.height or config.default_wall_height,
                    stud_type=stud_type,
                    opening_count=wall.opening_count,
                )
            )
        return sections
