"""Prompt Builder for blueprint analysis requests.

Builds the trade-specific instruction text sent to the text-generation
service. The output format section asks for exactly the tables and lines
the ResponseExtractor reads, so a well-behaved reply extracts on the
first strategy of every category.
"""

from enum import Enum
from typing import Dict, List, Sequence

import structlog
from pydantic import BaseModel, Field

from takeoff.models.analysis import AnalysisConfig, AnalysisType
from takeoff.models.records import Trade

logger = structlog.get_logger(__name__)


# =============================================================================
# ENUMS AND MODELS
# =============================================================================


class SheetType(str, Enum):
    """Kind of blueprint sheet supplied with a request."""

    FLOOR_PLAN = "floor_plan"
    TRADE_PLAN = "trade_plan"
    LEGEND = "legend"
    RISER = "riser"
    DETAILS = "details"
    SCHEDULE = "schedule"
    OTHER = "other"


class HVACSystemType(str, Enum):
    """Mechanical systems the analysis can focus on."""

    KITCHEN_EXHAUST = "kitchen_exhaust"
    MAKEUP_AIR = "makeup_air"
    ROOFTOP_EQUIPMENT = "rooftop_equipment"
    DUCTWORK = "ductwork"
    CONTROLS = "controls"


class BlueprintSheet(BaseModel):
    """A blueprint image supplied with the request."""

    name: str = Field(..., description="File or sheet name")
    sheet_type: SheetType = Field(default=SheetType.OTHER)


# =============================================================================
# PROMPT TEXT
# =============================================================================

TRADE_LABELS: Dict[Trade, str] = {
    Trade.PLUMBING: "plumbing",
    Trade.SHEATHING: "exterior wall sheathing",
    Trade.ACOUSTICAL: "acoustical ceiling",
    Trade.FRAMING: "wall framing",
    Trade.CARPENTRY: "metal and wood stud carpentry",
    Trade.MECHANICAL: "HVAC / mechanical",
}

TRADE_INTRO: Dict[Trade, str] = {
    Trade.PLUMBING: (
        "Identify the plumbing legend, symbols, pipe types and scale. Determine the linear "
        "footage of each type and size of pipe (waste, vent, cold water, hot water, gas, etc.), "
        "and count all fixtures, valves and specialty items."
    ),
    Trade.SHEATHING: (
        "Identify every exterior wall, its length and height, and the sheathing type shown in "
        "the legend. Report areas per sheathing type and the linear feet of wall requiring base "
        "cement board."
    ),
    Trade.ACOUSTICAL: (
        "First identify all ceiling material types from the legend (like ACP, ACT, GYP) with "
        "their descriptions. Then measure the area of every ceiling section and assign its type."
    ),
    Trade.FRAMING: (
        "Identify every wall section with its wall type number from the legend, its length, "
        "height and the number of door and window openings."
    ),
    Trade.CARPENTRY: (
        "Identify every wall type in the legend (stud material, size, spacing, fire rating and "
        "sheathing) and every wall section with its type, length and height."
    ),
    Trade.MECHANICAL: (
        "Create a material takeoff for the mechanical systems listed below, including equipment, "
        "ductwork, accessories and controls, with labor broken down by task."
    ),
}

SHEET_DESCRIPTIONS: Dict[SheetType, str] = {
    SheetType.FLOOR_PLAN: "Floor plan showing overall building layout",
    SheetType.TRADE_PLAN: "{trade} plan showing layout and locations",
    SheetType.LEGEND: "{trade} legend with symbols and descriptions",
    SheetType.RISER: "Riser diagram showing vertical connections",
    SheetType.DETAILS: "Details sheet with installation specifics",
    SheetType.SCHEDULE: "Fixture and equipment schedule",
}

ANALYSIS_INSTRUCTIONS: Dict[AnalysisType, str] = {
    AnalysisType.MATERIALS: "Focus only on accurate lengths, areas, counts and material quantities without cost information.",
    AnalysisType.COSTS: "Include both material quantities and cost estimates based on current industry pricing.",
    AnalysisType.FULL: (
        "Provide a comprehensive analysis including material quantities, cost estimates and "
        "installation notes. Include special considerations for routing, installation "
        "requirements and code compliance."
    ),
}

OUTPUT_FORMATS: Dict[Trade, List[str]] = {
    Trade.PLUMBING: [
        "## Pipe Schedule",
        "| Pipe Type | Size | Length (LF) |",
        "## Fixtures",
        "| Fixture | Description | Quantity | Connections |",
        "## Valves",
        "| Valve Type | Size | Quantity |",
    ],
    Trade.SHEATHING: [
        "## Legend",
        "| Code | Description |",
        "## Wall Sections",
        "| Wall | Type | Length (ft) | Height (ft) | Area (sf) |",
        "## Sheathing Types",
        "| Code | Description | Area (sf) | Sheets |",
        "Total Area: N sq ft",
        "Total linear feet requiring base cement board: N ft",
    ],
    Trade.ACOUSTICAL: [
        "## Legend",
        "| Code | Description |",
        "## Ceiling Areas",
        "| Room | Type | Area (sf) |",
        "## Grid Components",
        "| Component | Quantity | Unit |",
        "Total Ceiling Area: N sq ft",
    ],
    Trade.FRAMING: [
        "## Legend",
        "| Code | Description |",
        "## Wall Sections",
        "| Wall | Type | Length (ft) | Height (ft) | Openings |",
    ],
    Trade.CARPENTRY: [
        "## Wall Type Legend",
        "| Code | Description |",
        "## Wall Sections",
        "| Wall | Type | Length (ft) | Height (ft) | Openings |",
    ],
    Trade.MECHANICAL: [
        "## Materials",
        "| Item | Quantity | Unit | Unit Cost | Total |",
        "## Labor",
        "| Task | Hours | Rate |",
        "Total Labor Hours: N",
    ],
}

HVAC_SYSTEM_FOCUS: Dict[HVACSystemType, List[str]] = {
    HVACSystemType.KITCHEN_EXHAUST: [
        "KITCHEN EXHAUST SYSTEM:",
        "- Identify hood type, dimensions and requirements (Type I or Type II)",
        "- List all grease duct components, including straight runs, elbows, cleanouts and access doors",
        "- Identify exhaust fan specifications, including CFM and static pressure",
        "- Include all required fire-rated enclosure materials",
    ],
    HVACSystemType.MAKEUP_AIR: [
        "MAKEUP AIR SYSTEM:",
        "- Identify makeup air unit type, capacities and heating elements",
        "- Include ductwork components and distribution",
        "- Include roof curbs and mounting hardware",
    ],
    HVACSystemType.ROOFTOP_EQUIPMENT: [
        "ROOFTOP EQUIPMENT:",
        "- Include specifications for all rooftop units (RTUs)",
        "- List all required curbs, adapters and structural supports",
        "- Include gas piping, refrigerant piping and condensate drainage",
    ],
    HVACSystemType.DUCTWORK: [
        "DUCTWORK SYSTEM:",
        "- Calculate quantities for all supply, return and exhaust ductwork in linear feet",
        "- Include insulation requirements",
        "- List all dampers, diffusers, grilles and registers",
    ],
    HVACSystemType.CONTROLS: [
        "CONTROL SYSTEMS:",
        "- Identify all controllers, thermostats and sensors",
        "- Include interface components with building automation systems",
    ],
}


# =============================================================================
# PROMPT BUILDER
# =============================================================================


class PromptBuilder:
    """Build analysis instructions for a trade."""

    def build(
        self,
        trade,
        config: AnalysisConfig,
        sheets: Sequence[BlueprintSheet] = (),
        system_types: Sequence[HVACSystemType] = (),
    ) -> str:
        """Build the instruction text.

        Args:
            trade: Trade or trade identifier.
            config: Run configuration (analysis type, scale).
            sheets: Blueprint sheets supplied with the request.
            system_types: Mechanical systems to focus on.

        Returns:
            Prompt text.

        Raises:
            ValidationError: If the trade is unknown.
        """
        trade = Trade.parse(trade)
        label = TRADE_LABELS[trade]

        lines = [
            f"I need you to analyze these {label} blueprint images and perform a detailed material takeoff.",
            "",
            TRADE_INTRO[trade],
        ]

        if config.project_scale:
            lines.append(f"The provided project scale is {config.project_scale}. Use it to calculate accurate dimensions.")
        else:
            lines.append(
                "Identify the project scale from the drawings and use it for your calculations. "
                "If it is not visible, use standard assumptions."
            )

        lines.append(ANALYSIS_INSTRUCTIONS[config.analysis_type])

        if trade == Trade.MECHANICAL and system_types:
            lines.append("")
            lines.append("FOCUS ON THESE SPECIFIC SYSTEMS:")
            for system_type in system_types:
                lines.extend(HVAC_SYSTEM_FOCUS[HVACSystemType(system_type)])

        lines.append("")
        lines.append("Format your response with these headings and markdown tables, one row per item:")
        lines.extend(OUTPUT_FORMATS[trade])
        if config.analysis_type == AnalysisType.FULL:
            lines.append("## Installation Notes")
            lines.append("- One bullet per installation consideration")

        if sheets:
            lines.append("")
            lines.append("I've provided the following blueprint images for your analysis:")
            for sheet in sheets:
                lines.append(f"- {self._describe_sheet(sheet, label)}")

        prompt = "\n".join(lines) + "\n"
        logger.debug(
            "prompt_built",
            trade=trade.value,
            analysis_type=config.analysis_type.value,
            sheets=len(sheets),
            characters=len(prompt),
        )
        return prompt

    def _describe_sheet(self, sheet: BlueprintSheet, label: str) -> str:
        template = SHEET_DESCRIPTIONS.get(sheet.sheet_type)
        if template is None:
            return sheet.name
        description = template.format(trade=label[0].upper() + label[1:])
        return f"{description} ({sheet.name})"
