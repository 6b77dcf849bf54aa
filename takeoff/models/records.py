"""Extracted takeoff record models.

Records are the structured candidates pulled out of a raw analysis reply.
They form a closed union discriminated on ``kind``; anything the extractor
could not type lands in ``UnknownRecord`` instead of being silently
defaulted.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from takeoff.config.errors import ErrorCode, ValidationError


# =============================================================================
# ENUMS
# =============================================================================


class Trade(str, Enum):
    """Construction trade handled by the takeoff pipeline."""

    PLUMBING = "plumbing"
    SHEATHING = "sheathing"
    ACOUSTICAL = "acoustical"
    FRAMING = "framing"
    CARPENTRY = "carpentry"
    MECHANICAL = "mechanical"

    @classmethod
    def parse(cls, value: Union[str, "Trade"]) -> "Trade":
        """Resolve a trade identifier.

        Raises:
            ValidationError: If the identifier is not a known trade.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError(
            f"Unknown trade identifier: {value!r}",
            field="trade",
            details={"known_trades": [t.value for t in cls]},
            code=ErrorCode.UNKNOWN_TRADE,
        )


class RecordKind(str, Enum):
    """Discriminator for extracted records."""

    PIPE = "pipe"
    FIXTURE = "fixture"
    VALVE = "valve"
    WALL_SECTION = "wall_section"
    CEILING_SECTION = "ceiling_section"
    MATERIAL_LINE = "material_line"
    LABOR_LINE = "labor_line"
    GRID_ITEM = "grid_item"
    UNKNOWN = "unknown"


class PipeTypeCode(str, Enum):
    """Standard plumbing pipe system codes."""

    SOIL = "SP"
    GREASE_WASTE = "GW"
    STORM = "ST"
    VENT = "VP"
    COLD_WATER = "CW"
    HOT_WATER = "HW"
    HOT_WATER_CIRCULATION = "HWC"
    GAS = "G"
    FIRE_PROTECTION = "FP"
    UNKNOWN = "UNKNOWN"


class PipeMaterial(str, Enum):
    """Pipe material used for pricing and labor rates."""

    PVC = "PVC"
    COPPER = "Copper"
    CARBON_STEEL = "Carbon Steel"
    CAST_IRON = "Cast Iron"
    UNKNOWN = "Unknown"


class StudType(str, Enum):
    """Framing stud variants."""

    METAL_2_1_2 = "metal_2_1_2"
    METAL_3_5_8 = "metal_3_5_8"
    METAL_6 = "metal_6"
    WOOD_2X4 = "wood_2x4"
    WOOD_2X6 = "wood_2x6"

    @property
    def is_wood(self) -> bool:
        return self.value.startswith("wood")


# =============================================================================
# RECORD MODELS
# =============================================================================


class _RecordBase(BaseModel):
    """Fields shared by every extracted record."""

    strategy: str = Field(default="manual", description="Extraction strategy that produced the record")


class PipeRecord(_RecordBase):
    """A pipe run of one system type and size."""

    kind: Literal[RecordKind.PIPE] = RecordKind.PIPE
    pipe_type: str = Field(..., description="Pipe type as written in the analysis")
    type_code: PipeTypeCode = Field(default=PipeTypeCode.UNKNOWN)
    size: str = Field(default="", description="Nominal size, e.g. 1-1/2\"")
    length: float = Field(..., ge=0, description="Linear feet")
    material: PipeMaterial = Field(default=PipeMaterial.UNKNOWN)


class FixtureRecord(_RecordBase):
    """A counted plumbing fixture."""

    kind: Literal[RecordKind.FIXTURE] = RecordKind.FIXTURE
    fixture_type: str
    description: str = ""
    quantity: int = Field(..., ge=0)
    connections: Optional[str] = None


class ValveRecord(_RecordBase):
    """A counted valve or specialty item."""

    kind: Literal[RecordKind.VALVE] = RecordKind.VALVE
    valve_type: str
    size: str = ""
    quantity: int = Field(..., ge=0)


class WallSectionRecord(_RecordBase):
    """A wall run used by sheathing, framing and carpentry."""

    kind: Literal[RecordKind.WALL_SECTION] = RecordKind.WALL_SECTION
    name: str
    type_code: Optional[str] = None
    length: float = Field(..., ge=0, description="Length in feet")
    height: Optional[float] = Field(default=None, ge=0, description="Height in feet")
    area: Optional[float] = Field(default=None, ge=0, description="Stated area in square feet")
    opening_count: Optional[int] = Field(default=None, ge=0)

    def wall_area(self, default_height: float) -> float:
        """Stated area, or length times height."""
        if self.area is not None and self.area > 0:
            return self.area
        height = self.height if self.height else default_height
        return self.length * height


class CeilingSectionRecord(_RecordBase):
    """A ceiling area of one acoustical type."""

    kind: Literal[RecordKind.CEILING_SECTION] = RecordKind.CEILING_SECTION
    name: str
    type_code: Optional[str] = None
    area: float = Field(..., ge=0, description="Area in square feet")


class MaterialLineRecord(_RecordBase):
    """A mechanical material line."""

    kind: Literal[RecordKind.MATERIAL_LINE] = RecordKind.MATERIAL_LINE
    description: str
    quantity: float = Field(..., ge=0)
    unit: str = "EA"
    unit_cost: Optional[float] = Field(default=None, ge=0, description="Unit cost stated in the analysis")


class LaborLineRecord(_RecordBase):
    """A labor task with estimated hours."""

    kind: Literal[RecordKind.LABOR_LINE] = RecordKind.LABOR_LINE
    task: str
    hours: float = Field(..., ge=0)
    rate: Optional[float] = Field(default=None, ge=0)


class GridItemRecord(_RecordBase):
    """A ceiling grid component reported by the analysis."""

    kind: Literal[RecordKind.GRID_ITEM] = RecordKind.GRID_ITEM
    description: str
    quantity: float = Field(..., ge=0)
    unit: str = "EA"


class UnknownRecord(_RecordBase):
    """A row the extractor matched but could not type."""

    kind: Literal[RecordKind.UNKNOWN] = RecordKind.UNKNOWN
    raw: str
    reason: str


ExtractedRecord = Annotated[
    Union[
        PipeRecord,
        FixtureRecord,
        ValveRecord,
        WallSectionRecord,
        CeilingSectionRecord,
        MaterialLineRecord,
        LaborLineRecord,
        GridItemRecord,
        UnknownRecord,
    ],
    Field(discriminator="kind"),
]
