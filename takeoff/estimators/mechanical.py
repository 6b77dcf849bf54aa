"""Mechanical (HVAC) estimator.

Material lines are matched to the catalog by keyword. A unit cost stated
in the analysis is only used when no keyword matched. Labor comes from
the reported labor lines, or from catalog labor hours per unit.
"""

from typing import Dict

from takeoff.estimators.base import TradeEstimate, TradeEstimator
from takeoff.models.analysis import AnalysisConfig, NoteCode
from takeoff.models.catalog import MatchLevel
from takeoff.models.records import LaborLineRecord, MaterialLineRecord, Trade
from takeoff.services.material_classifier import classify
from takeoff.services.quantity_calculator import apply_waste
from takeoff.services.response_extractor import ExtractionResult

LABOR_CATEGORY = "Mechanical Labor"

# Catalog code -> category
CATEGORY_BY_CODE: Dict[str, str] = {
    "HOOD": "Kitchen Exhaust",
    "GREASE-DUCT": "Kitchen Exhaust",
    "EF": "Equipment",
    "MAU": "Equipment",
    "RTU": "Equipment",
    "CURB": "Equipment",
    "DUCT": "Ductwork & Air Distribution",
    "FLEX": "Ductwork & Air Distribution",
    "DAMPER": "Ductwork & Air Distribution",
    "DIFFUSER": "Ductwork & Air Distribution",
    "GRILLE": "Ductwork & Air Distribution",
    "INSULATION": "Ductwork & Air Distribution",
    "THERMOSTAT": "Controls",
    "SENSOR": "Controls",
    "REFRIGERANT": "Piping",
    "GAS": "Piping",
}
DEFAULT_CATEGORY = "Miscellaneous"


class MechanicalEstimator(TradeEstimator):
    """HVAC material lines and labor."""

    trade = Trade.MECHANICAL

    def estimate(self, extraction: ExtractionResult, config: AnalysisConfig) -> TradeEstimate:
        estimate = TradeEstimate()
        waste_pct = config.waste_pct_for(self.trade)
        materials = self.records(extraction, "materials", MaterialLineRecord)
        labor_lines = self.records(extraction, "labor", LaborLineRecord)

        catalog_hours = 0.0
        linear_feet = 0.0
        for line in materials:
            entry = classify(None, line.description, self.trade, self.catalog)
            quantity = apply_waste(line.quantity, waste_pct) if waste_pct else line.quantity

            if entry.match == MatchLevel.KEYWORD:
                unit_price, tier = entry.unit_cost, entry.match.value
            elif line.unit_cost is not None:
                unit_price, tier = line.unit_cost, "stated"
            else:
                unit_price, tier = entry.unit_cost, entry.match.value
                if config.is_priced:
                    estimate.note(
                        NoteCode.PRICING_LOOKUP_MISS,
                        f"No catalog price for '{line.description}'; used default",
                        trade=self.trade.value,
                        description=line.description,
                        unit_cost=unit_price,
                    )
            if entry.match.is_low_specificity:
                estimate.note(
                    NoteCode.CLASSIFICATION_AMBIGUOUS,
                    f"'{line.description}' did not match a mechanical catalog item",
                    trade=self.trade.value,
                    description=line.description,
                    match=entry.match.value,
                )

            self.add_material(
                estimate,
                config,
                CATEGORY_BY_CODE.get(entry.resolved_code, DEFAULT_CATEGORY),
                line.description,
                quantity,
                unit_price,
                code=entry.resolved_code,
                unit=line.unit,
                tier=tier,
            )
            catalog_hours += line.quantity * entry.labor_rate
            if line.unit == "LF":
                linear_feet += line.quantity

        default_rate = self.labor_rate(config)
        if labor_lines:
            for line in labor_lines:
                rate = line.rate if line.rate is not None and config.labor_rate_per_hour is None else default_rate
                self.add_labor(estimate, config, LABOR_CATEGORY, line.task, line.hours, rate)
            estimate.labor_hours = sum(line.hours for line in labor_lines)
        else:
            self.add_labor(estimate, config, LABOR_CATEGORY, "Mechanical installation labor", catalog_hours, default_rate)
            estimate.labor_hours = catalog_hours

        estimate.total_linear_feet = linear_feet
        estimate.total_area = extraction.stated_totals.total_area or 0.0
        if extraction.stated_totals.labor_hours is not None:
            estimate.breakdowns["stated"] = {"labor_hours": extraction.stated_totals.labor_hours}
        return estimate
