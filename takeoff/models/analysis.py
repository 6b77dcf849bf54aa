"""Analysis configuration and result models.

This module defines the input configuration for one pipeline run and the
AnalysisResult it produces: priced items grouped into category totals,
grand totals with markups, labor hours and the audit notes collected
along the way.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from takeoff.config.settings import settings
from takeoff.models.catalog import MaterialCatalogEntry
from takeoff.models.records import ExtractedRecord, Trade


PRICE_TOLERANCE = 1e-6

# Default waste factor (percent) per trade
DEFAULT_WASTE_FACTORS: Dict[Trade, float] = {
    Trade.SHEATHING: 15.0,
    Trade.ACOUSTICAL: 10.0,
    Trade.FRAMING: 10.0,
    Trade.CARPENTRY: 10.0,
    Trade.PLUMBING: 10.0,
    Trade.MECHANICAL: 0.0,
}


# =============================================================================
# ENUMS
# =============================================================================


class AnalysisType(str, Enum):
    """Depth of the requested analysis."""

    MATERIALS = "materials"   # Quantities only
    COSTS = "costs"           # Quantities with material pricing
    FULL = "full"             # Pricing plus labor, equipment and notes


class CostKind(str, Enum):
    """Which grand-total bucket a category feeds."""

    MATERIAL = "material"
    LABOR = "labor"
    EQUIPMENT = "equipment"


class NoteCode(str, Enum):
    """Non-fatal irregularities recorded during a run."""

    EXTRACTION_EMPTY = "ExtractionEmpty"
    CLASSIFICATION_AMBIGUOUS = "ClassificationAmbiguous"
    PRICING_LOOKUP_MISS = "PricingLookupMiss"
    MALFORMED_NUMERIC_TOKEN = "MalformedNumericToken"


class NotePriority(str, Enum):
    """Priority of an installation note."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# CONFIGURATION
# =============================================================================


class AnalysisConfig(BaseModel):
    """Options for a single pipeline run."""

    waste_factor_pct: Optional[float] = Field(
        default=None, ge=0, description="Waste percentage; trade default when omitted"
    )
    analysis_type: AnalysisType = Field(default=AnalysisType.FULL)
    include_grid_system: bool = Field(default=True, description="Price ceiling grid components")
    contingency_rate: float = Field(default_factory=lambda: settings.contingency_rate, ge=0)
    general_conditions_rate: float = Field(default_factory=lambda: settings.general_conditions_rate, ge=0)
    overhead_profit_rate: float = Field(default_factory=lambda: settings.overhead_profit_rate, ge=0)
    labor_rate_per_hour: Optional[float] = Field(
        default=None, ge=0, description="Hourly labor rate; trade default when omitted"
    )
    stud_spacing_in: float = Field(default_factory=lambda: settings.stud_spacing_in, gt=0)
    default_wall_height: float = Field(default_factory=lambda: settings.default_wall_height, gt=0)
    use_metal_framing: bool = Field(default=True)
    equipment_rental_days: int = Field(default_factory=lambda: settings.equipment_rental_days, ge=0)
    project_scale: Optional[str] = Field(default=None, description="Drawing scale passed to the prompt")

    def waste_pct_for(self, trade: Trade) -> float:
        """Configured waste percentage, or the trade default."""
        if self.waste_factor_pct is not None:
            return self.waste_factor_pct
        return DEFAULT_WASTE_FACTORS[trade]

    @property
    def is_priced(self) -> bool:
        return self.analysis_type != AnalysisType.MATERIALS

    @property
    def includes_labor(self) -> bool:
        return self.analysis_type == AnalysisType.FULL


# =============================================================================
# NOTES
# =============================================================================


class AnalysisNote(BaseModel):
    """Audit note for a recovered irregularity."""

    code: NoteCode
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


class InstallationNote(BaseModel):
    """Installation consideration reported in the analysis text."""

    text: str
    priority: NotePriority = NotePriority.MEDIUM


# =============================================================================
# PRICED ITEMS AND TOTALS
# =============================================================================


class PricedItem(BaseModel):
    """A quantity with its unit and extended price."""

    category: str = Field(..., description="Category this item is totalled under")
    kind: CostKind = Field(default=CostKind.MATERIAL)
    description: str
    code: Optional[str] = None
    size: Optional[str] = None
    quantity: float = Field(..., ge=0)
    unit: str = "EA"
    unit_price: float = Field(..., ge=0)
    total_price: float = Field(..., ge=0)
    price_tier: Optional[str] = Field(default=None, description="Pricing tier that produced unit_price")

    @model_validator(mode="after")
    def validate_total(self) -> "PricedItem":
        """Ensure total_price == quantity * unit_price."""
        expected = self.quantity * self.unit_price
        if abs(self.total_price - expected) > PRICE_TOLERANCE:
            raise ValueError(
                f"total_price {self.total_price} does not equal "
                f"quantity {self.quantity} x unit_price {self.unit_price}"
            )
        return self

    @classmethod
    def create(
        cls,
        category: str,
        description: str,
        quantity: float,
        unit_price: float,
        **kwargs: Any,
    ) -> "PricedItem":
        """Build an item, deriving total_price from quantity and unit_price."""
        unit_price = round(unit_price, 2)
        return cls(
            category=category,
            description=description,
            quantity=quantity,
            unit_price=unit_price,
            total_price=quantity * unit_price,
            **kwargs,
        )


class CategoryTotal(BaseModel):
    """Priced items of one category and their subtotal."""

    category: str
    kind: CostKind = CostKind.MATERIAL
    items: List[PricedItem] = Field(default_factory=list)
    subtotal: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def validate_subtotal(self) -> "CategoryTotal":
        """Ensure subtotal equals the sum of item totals."""
        expected = sum(item.total_price for item in self.items)
        if abs(self.subtotal - expected) > PRICE_TOLERANCE:
            raise ValueError(
                f"Category {self.category!r} subtotal {self.subtotal} != item sum {expected}"
            )
        return self

    @classmethod
    def from_items(cls, category: str, items: List[PricedItem]) -> "CategoryTotal":
        """Total a category from its items."""
        kind = items[0].kind if items else CostKind.MATERIAL
        return cls(
            category=category,
            kind=kind,
            items=list(items),
            subtotal=sum(item.total_price for item in items),
        )


class GrandTotals(BaseModel):
    """Grand totals with markups computed from the subtotal."""

    materials: float = 0.0
    labor: float = 0.0
    equipment: float = 0.0
    subtotal: float = 0.0
    contingency: float = 0.0
    general_conditions: float = 0.0
    overhead_profit: float = 0.0
    total: float = 0.0

    @classmethod
    def calculate(
        cls,
        category_totals: List[CategoryTotal],
        config: AnalysisConfig,
    ) -> "GrandTotals":
        """Sum category subtotals and apply markups.

        Contingency, general conditions and overhead/profit are each a
        percentage of the same subtotal; none compounds on another.
        """
        buckets = {kind: 0.0 for kind in CostKind}
        for category in category_totals:
            buckets[category.kind] += category.subtotal

        subtotal = sum(category.subtotal for category in category_totals)
        contingency = subtotal * config.contingency_rate
        general_conditions = subtotal * config.general_conditions_rate
        overhead_profit = subtotal * config.overhead_profit_rate

        return cls(
            materials=buckets[CostKind.MATERIAL],
            labor=buckets[CostKind.LABOR],
            equipment=buckets[CostKind.EQUIPMENT],
            subtotal=subtotal,
            contingency=contingency,
            general_conditions=general_conditions,
            overhead_profit=overhead_profit,
            total=subtotal + contingency + general_conditions + overhead_profit,
        )


# =============================================================================
# ANALYSIS RESULT
# =============================================================================


class AnalysisResult(BaseModel):
    """Sole output artifact of a pipeline run."""

    trade: Trade
    analysis_type: AnalysisType = AnalysisType.FULL
    waste_factor_pct: float = 0.0

    sections: List[ExtractedRecord] = Field(default_factory=list)
    legend: List[MaterialCatalogEntry] = Field(default_factory=list)

    category_totals: List[CategoryTotal] = Field(default_factory=list)
    grand_totals: GrandTotals = Field(default_factory=GrandTotals)

    labor_hours: float = Field(default=0.0, ge=0)
    total_area: float = Field(default=0.0, ge=0)
    total_linear_feet: float = Field(default=0.0, ge=0)
    breakdowns: Dict[str, Dict[str, float]] = Field(default_factory=dict)

    notes: List[AnalysisNote] = Field(default_factory=list)
    installation_notes: List[InstallationNote] = Field(default_factory=list)

    def notes_with(self, code: NoteCode) -> List[AnalysisNote]:
        """Notes carrying the given code."""
        return [note for note in self.notes if note.code == code]

    def category(self, name: str) -> Optional[CategoryTotal]:
        """Category total by name."""
        for category in self.category_totals:
            if category.category == name:
                return category
        return None

    @property
    def items(self) -> List[PricedItem]:
        return [item for category in self.category_totals for item in category.items]

    def to_output(self) -> Dict[str, Any]:
        """Convert to the camelCase structure handed to persistence and rendering.

        Returns:
            Dict with trade, sections, categoryTotals, grandTotals,
            laborHours and notes.
        """
        totals = self.grand_totals
        return {
            "trade": self.trade.value,
            "analysisType": self.analysis_type.value,
            "wasteFactorPct": self.waste_factor_pct,
            "sections": [record.model_dump(mode="json") for record in self.sections],
            "legend": [
                {
                    "code": entry.code,
                    "description": entry.description,
                    "unitSize": entry.unit_size,
                    "unitCost": entry.unit_cost,
                    "laborRate": entry.labor_rate,
                }
                for entry in self.legend
            ],
            "categoryTotals": [
                {
                    "category": category.category,
                    "kind": category.kind.value,
                    "subtotal": round(category.subtotal, 2),
                    "items": [
                        {
                            "description": item.description,
                            "code": item.code,
                            "size": item.size,
                            "quantity": item.quantity,
                            "unit": item.unit,
                            "unitPrice": item.unit_price,
                            "totalPrice": round(item.total_price, 2),
                        }
                        for item in category.items
                    ],
                }
                for category in self.category_totals
            ],
            "grandTotals": {
                "materials": round(totals.materials, 2),
                "labor": round(totals.labor, 2),
                "equipment": round(totals.equipment, 2),
                "subtotal": round(totals.subtotal, 2),
                "contingency": round(totals.contingency, 2),
                "generalConditions": round(totals.general_conditions, 2),
                "overheadProfit": round(totals.overhead_profit, 2),
                "total": round(totals.total, 2),
            },
            "laborHours": round(self.labor_hours, 2),
            "totalArea": self.total_area,
            "totalLinearFeet": self.total_linear_feet,
            "breakdowns": self.breakdowns,
            "notes": [
                {"code": note.code.value, "message": note.message, "context": note.context}
                for note in self.notes
            ],
            "installationNotes": [
                {"text": note.text, "priority": note.priority.value}
                for note in self.installation_notes
            ],
        }
