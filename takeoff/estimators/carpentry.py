"""Carpentry estimator.

Wall types are read from the legend description (or the section name)
to get stud material and size, spacing, fire rating, exposure and
sheathing. Each wall contributes studs, track, sheathing, fire-rated
materials and screws; crew labor is split by role and equipment is
rented for the configured number of days.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from takeoff.estimators.base import TradeEstimate, TradeEstimator
from takeoff.estimators.framing import stud_type_for
from takeoff.models.analysis import AnalysisConfig
from takeoff.models.records import StudType, Trade, WallSectionRecord
from takeoff.services.catalog_data import STUD_SPECS
from takeoff.services.material_classifier import WallTypeProfile, infer_wall_type, normalize_code
from takeoff.services.quantity_calculator import (
    apply_waste,
    calculate_crew_hours,
    carpentry_screw_boxes,
    fire_caulk_tubes,
    stud_count,
)
from takeoff.services.response_extractor import ExtractionResult

STUDS_CATEGORY = "Studs"
TRACK_CATEGORY = "Track"
SHEATHING_CATEGORY = "Sheathing"
FIRE_RATED_CATEGORY = "Fire-Rated Materials"
FASTENERS_CATEGORY = "Fasteners"
MISC_CATEGORY = "Miscellaneous"
LABOR_CATEGORY = "Crew Labor"
EQUIPMENT_CATEGORY = "Equipment"

MISC_MATERIALS_RATE = 0.10
LIFT_WALL_AREA_SF = 2000

# (equipment name, units)
BASE_EQUIPMENT = (("Screw Gun", 3), ("Laser Level", 1), ("Chop Saw", 1))
FIRE_RATED_EQUIPMENT = ("Caulking Gun", 2)
EXTERIOR_EQUIPMENT = ("Hammer Drill", 1)
LIFT_EQUIPMENT = ("Scissor Lift", 1)


def stud_type_from_profile(profile: WallTypeProfile) -> StudType:
    """Stud type described by a wall type profile."""
    if profile.stud_material == "wood":
        return StudType.WOOD_2X6 if profile.stud_size == "2x6" else StudType.WOOD_2X4
    if profile.stud_size.startswith("2-1/2"):
        return StudType.METAL_2_1_2
    if profile.stud_size == '6"':
        return StudType.METAL_6
    return StudType.METAL_3_5_8


@dataclass
class CarpentryTotals:
    """Raw carpentry quantities summed across walls (before waste)."""

    studs: Dict[StudType, int] = field(default_factory=dict)
    stud_linear_feet: float = 0.0
    track: Dict[StudType, float] = field(default_factory=dict)
    sheathing: Dict[Tuple[str, str], float] = field(default_factory=dict)
    fire_gypsum_area: float = 0.0
    fire_rated_area: float = 0.0
    fire_caulk: int = 0
    screw_boxes: int = 0
    wall_area: float = 0.0
    wall_linear_feet: float = 0.0
    has_fire_rated: bool = False
    has_exterior: bool = False


class CarpentryEstimator(TradeEstimator):
    """Metal and wood stud wall construction."""

    trade = Trade.CARPENTRY

    def estimate(self, extraction: ExtractionResult, config: AnalysisConfig) -> TradeEstimate:
        estimate = TradeEstimate()
        waste_pct = config.waste_pct_for(self.trade)
        walls = self.records(extraction, "wall_sections", WallSectionRecord)
        totals = self._takeoff(walls, extraction, config, estimate)

        self._price_materials(totals, waste_pct, config, estimate)

        materials_cost = sum(item.total_price for item in estimate.items)
        if materials_cost:
            self.add_material(
                estimate,
                config,
                MISC_CATEGORY,
                "Miscellaneous fasteners, connectors and accessories",
                1,
                materials_cost * MISC_MATERIALS_RATE,
                unit="LS",
            )

        crew_hours = calculate_crew_hours(
            totals.stud_linear_feet,
            sum(totals.track.values()),
            sum(totals.sheathing.values()),
            totals.wall_linear_feet,
            totals.fire_rated_area,
        )
        for role, hours in crew_hours.items():
            quote = self.pricing.price_named(self.trade, "crew", role)
            rate = config.labor_rate_per_hour if config.labor_rate_per_hour is not None else quote.unit_cost
            self.add_labor(estimate, config, LABOR_CATEGORY, role, hours, rate)
        estimate.labor_hours = sum(crew_hours.values())

        self._add_equipment(totals, config, estimate)

        estimate.total_area = totals.wall_area
        estimate.total_linear_feet = totals.wall_linear_feet
        estimate.breakdowns["crew_hours"] = crew_hours
        estimate.breakdowns["by_stud_type"] = {key.value: float(count) for key, count in totals.studs.items()}
        return estimate

    def _takeoff(
        self,
        walls: List[WallSectionRecord],
        extraction: ExtractionResult,
        config: AnalysisConfig,
        estimate: TradeEstimate,
    ) -> CarpentryTotals:
        totals = CarpentryTotals()
        for wall in walls:
            code = normalize_code(wall.type_code)
            legend_entry = extraction.legend.get(code) if code else None
            description = legend_entry.description if legend_entry else wall.name
            profile = infer_wall_type(description)

            if legend_entry is None and code in self.trade_catalog.code_aliases:
                stud_type = stud_type_for(self.resolve_entry(code, description, extraction, estimate))
            else:
                stud_type = stud_type_from_profile(profile)

            height = wall.height or config.default_wall_height
            area = wall.wall_area(config.default_wall_height)
            studs = stud_count(wall.length, profile.spacing_in or config.stud_spacing_in)

            totals.studs[stud_type] = totals.studs.get(stud_type, 0) + studs
            totals.stud_linear_feet += studs * height
            totals.track[stud_type] = totals.track.get(stud_type, 0.0) + wall.length * 2
            totals.screw_boxes += carpentry_screw_boxes(studs)
            totals.wall_area += area
            totals.wall_linear_feet += wall.length
            totals.has_exterior = totals.has_exterior or profile.is_exterior

            if profile.sheathing:
                key = (profile.sheathing, profile.sheathing_thickness)
                totals.sheathing[key] = totals.sheathing.get(key, 0.0) + area

            if profile.is_fire_rated:
                totals.has_fire_rated = True
                totals.fire_rated_area += area
                totals.fire_caulk += fire_caulk_tubes(wall.length)
                if profile.sheathing != "gypsum":
                    totals.fire_gypsum_area += area
        return totals

    def _price_materials(self, totals: CarpentryTotals, waste_pct: float, config, estimate) -> None:
        for stud_type, count in totals.studs.items():
            description, size, material = STUD_SPECS[stud_type]
            quote = self.pricing.price(self.trade, "stud", size, f"{material} stud")
            self.add_quoted(
                estimate, config, STUDS_CATEGORY, description, apply_waste(count, waste_pct), quote,
                code=stud_type.value, size=size,
            )
        for stud_type, length in totals.track.items():
            _, size, material = STUD_SPECS[stud_type]
            quote = self.pricing.price(self.trade, "track", size, f"{material} track")
            self.add_quoted(
                estimate, config, TRACK_CATEGORY, f"{size} {material.title()} Track",
                apply_waste(length, waste_pct), quote, code=stud_type.value, size=size, unit="LF",
            )
        for (kind, thickness), area in totals.sheathing.items():
            quote = self.pricing.price(self.trade, "sheathing", thickness, kind)
            self.add_quoted(
                estimate, config, SHEATHING_CATEGORY, f"{thickness} {kind.title()}",
                apply_waste(area, waste_pct), quote, size=thickness, unit="SF",
            )

        if totals.fire_gypsum_area:
            self._add_accessory(
                estimate, config, FIRE_RATED_CATEGORY, "Fire-Rated Gypsum",
                apply_waste(totals.fire_gypsum_area, waste_pct), "SF",
            )
        if totals.fire_caulk:
            self._add_accessory(estimate, config, FIRE_RATED_CATEGORY, "Fire Caulk", totals.fire_caulk, "EA")
        if totals.screw_boxes:
            self._add_accessory(
                estimate, config, FASTENERS_CATEGORY, "Self-Drilling Screws", totals.screw_boxes, "BOX"
            )

    def _add_accessory(self, estimate, config, category: str, name: str, quantity: float, unit: str) -> None:
        quote = self.pricing.price_named(self.trade, "accessories", name)
        self.add_quoted(estimate, config, category, name, quantity, quote, unit=unit)

    def _add_equipment(self, totals: CarpentryTotals, config: AnalysisConfig, estimate: TradeEstimate) -> None:
        if not totals.wall_linear_feet:
            return
        equipment = list(BASE_EQUIPMENT)
        if totals.has_fire_rated:
            equipment.append(FIRE_RATED_EQUIPMENT)
        if totals.has_exterior:
            equipment.append(EXTERIOR_EQUIPMENT)
        if totals.wall_area > LIFT_WALL_AREA_SF:
            equipment.append(LIFT_EQUIPMENT)

        days = config.equipment_rental_days
        for name, units in equipment:
            quote = self.pricing.price_named(self.trade, "equipment", name)
            self.add_equipment(
                estimate,
                config,
                EQUIPMENT_CATEGORY,
                f"{name} x{units} ({days} days)",
                units * days,
                quote.unit_cost,
            )
