"""Quantity calculations for takeoff sections.

Pure, stateless geometry and spacing math per trade. Functions accept plain
numbers so they serve AI-extracted and manually entered sections alike.
Every unit count is rounded up, and negative inputs are rejected.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from takeoff.config.errors import ErrorCode, ValidationError, require_non_negative
from takeoff.models.records import StudType


# Framing
BLOCKING_RATIO = 0.2
FASTENERS_PER_STUD = 4
SCREWS_PER_BOX = 100
NAILS_PER_BOX = 50
OPENING_SPACING_FT = 12

# Sheathing
SHEETS_PER_FASTENER_BOX = 10
HOUSE_WRAP_ROLL_SF = 1000
CEMENT_BOARD_HEIGHT_FT = 0.67
CEMENT_BOARD_SHEET_SF = 32

# Ceiling grid allowance for overlaps and cut ends
GRID_ALLOWANCE = 1.1
MAIN_RUNNER_LENGTH_FT = 12
WALL_MOLDING_LENGTH_FT = 10
HANGER_WIRE_SPACING_SF = 16
WOOD_FURRING_RATIO = 0.75
WOOD_FURRING_ALLOWANCE = 1.15

# Plumbing
PLUMBING_LABOR_OVERHEAD = 1.15

# Carpentry crew hours per unit
CREW_LABOR_RATES: Dict[str, Dict[str, float]] = {
    "Foreman": {"studs": 0.016, "track": 0.012, "sheathing": 0.004, "supervision": 0.06},
    "Journeyman": {"studs": 0.025, "track": 0.020, "sheathing": 0.008, "fire_rated": 0.010},
    "Apprentice": {"studs": 0.030, "track": 0.025, "sheathing": 0.012},
}
CARPENTRY_SCREWS_PER_STUD = 6
FIRE_CAULK_SPACING_FT = 10


def apply_waste(quantity: float, waste_pct: float) -> int:
    """Quantity with waste added, rounded up.

    ``ceil(quantity * (1 + waste_pct / 100))``
    """
    require_non_negative("quantity", quantity)
    require_non_negative("waste_pct", waste_pct)
    return math.ceil(round(quantity * (1 + waste_pct / 100), 9))


# =============================================================================
# FRAMING
# =============================================================================


def stud_count(length: float, spacing_in: float) -> int:
    """Studs for a wall run: ``ceil(length / spacing_ft) + 1``."""
    require_non_negative("length", length)
    require_non_negative("spacing_in", spacing_in)
    if spacing_in == 0:
        raise ValidationError(
            "spacing_in must be greater than zero",
            field="spacing_in",
            code=ErrorCode.INVALID_FIELD,
        )
    spacing_ft = spacing_in / 12
    return math.ceil(round(length / spacing_ft, 9)) + 1


def default_opening_count(length: float) -> int:
    """Openings assumed for a wall when none were reported."""
    require_non_negative("length", length)
    return math.ceil(length / OPENING_SPACING_FT)


@dataclass
class WallFramingQuantities:
    """Framing quantities for a single wall section (before waste)."""

    stud_count: int
    track_length: float
    opening_count: int
    headers: int
    king_studs: int
    cripple_studs: int
    wall_area: float


def calculate_wall_framing(
    length: float,
    height: float,
    spacing_in: float,
    opening_count: Optional[int] = None,
) -> WallFramingQuantities:
    """Framing members for one wall section.

    Each opening adds one header, two king studs and two cripple studs.
    """
    require_non_negative("height", height)
    studs = stud_count(length, spacing_in)
    if opening_count is None:
        opening_count = default_opening_count(length)
    require_non_negative("opening_count", opening_count)
    return WallFramingQuantities(
        stud_count=studs,
        track_length=length * 2,
        opening_count=opening_count,
        headers=opening_count,
        king_studs=opening_count * 2,
        cripple_studs=opening_count * 2,
        wall_area=length * height,
    )


@dataclass
class FramingSectionInput:
    """A wall section reduced to what framing math needs."""

    length: float
    height: float
    stud_type: StudType = StudType.METAL_3_5_8
    opening_count: Optional[int] = None


@dataclass
class FramingQuantities:
    """Framing takeoff for a set of wall sections, waste applied once."""

    studs: Dict[StudType, int] = field(default_factory=dict)
    track: Dict[StudType, int] = field(default_factory=dict)
    headers: int = 0
    king_studs: int = 0
    cripple_studs: int = 0
    corner_backing: int = 0
    blocking: int = 0
    screw_boxes: int = 0
    nail_boxes: int = 0
    total_linear_feet: float = 0.0
    total_wall_area: float = 0.0
    total_openings: int = 0
    wall_corners: int = 0


def calculate_framing(
    sections: Iterable[FramingSectionInput],
    spacing_in: float,
    waste_pct: float,
    use_metal_framing: bool = True,
) -> FramingQuantities:
    """Framing materials for all wall sections.

    Corner backing is ``ceil(section_count / 2) * 2``, blocking is 20% of
    the total wall length, and fastener boxes are sized from the total stud
    count (studs, king studs and cripple studs). Waste is applied once to
    every count at the end.
    """
    require_non_negative("waste_pct", waste_pct)
    sections = list(sections)
    studs: Dict[StudType, int] = {}
    track: Dict[StudType, float] = {}
    result = FramingQuantities()

    for section in sections:
        wall = calculate_wall_framing(section.length, section.height, spacing_in, section.opening_count)
        studs[section.stud_type] = studs.get(section.stud_type, 0) + wall.stud_count
        track[section.stud_type] = track.get(section.stud_type, 0.0) + wall.track_length
        result.headers += wall.headers
        result.king_studs += wall.king_studs
        result.cripple_studs += wall.cripple_studs
        result.total_linear_feet += section.length
        result.total_wall_area += wall.wall_area
        result.total_openings += wall.opening_count

    result.wall_corners = math.ceil(len(sections) / 2)
    corner_backing = result.wall_corners * 2
    blocking = math.ceil(round(result.total_linear_feet * BLOCKING_RATIO, 9))

    total_studs = sum(studs.values()) + result.king_studs + result.cripple_studs
    if use_metal_framing:
        screw_boxes = math.ceil(total_studs * FASTENERS_PER_STUD / SCREWS_PER_BOX)
        nail_boxes = 0
    else:
        screw_boxes = 0
        nail_boxes = math.ceil(total_studs * FASTENERS_PER_STUD / NAILS_PER_BOX)

    result.studs = {key: apply_waste(count, waste_pct) for key, count in studs.items()}
    result.track = {key: apply_waste(length, waste_pct) for key, length in track.items()}
    result.headers = apply_waste(result.headers, waste_pct)
    result.king_studs = apply_waste(result.king_studs, waste_pct)
    result.cripple_studs = apply_waste(result.cripple_studs, waste_pct)
    result.corner_backing = apply_waste(corner_backing, waste_pct)
    result.blocking = apply_waste(blocking, waste_pct)
    result.screw_boxes = apply_waste(screw_boxes, waste_pct)
    result.nail_boxes = apply_waste(nail_boxes, waste_pct)
    return result


# =============================================================================
# SHEATHING / PANELS
# =============================================================================


def sheets_needed(area: float, unit_area: float) -> int:
    """Whole units to cover an area; zero when the unit covers nothing."""
    require_non_negative("area", area)
    require_non_negative("unit_area", unit_area)
    if unit_area == 0:
        return 0
    return math.ceil(round(area / unit_area, 9))


@dataclass
class PanelQuantities:
    """Panel takeoff for one material type."""

    area: float
    sheets_needed: int
    sheets_with_waste: int
    fastener_boxes: int
    house_wrap_rolls: int


def calculate_panels(
    area: float,
    unit_area: float,
    waste_pct: float,
    integrated_barrier: bool = False,
) -> PanelQuantities:
    """Sheets, fasteners and house wrap for a panel area.

    House wrap is skipped for integrated-barrier materials.
    """
    needed = sheets_needed(area, unit_area)
    with_waste = apply_waste(needed, waste_pct)
    return PanelQuantities(
        area=area,
        sheets_needed=needed,
        sheets_with_waste=with_waste,
        fastener_boxes=math.ceil(with_waste / SHEETS_PER_FASTENER_BOX),
        house_wrap_rolls=0 if integrated_barrier else math.ceil(area / HOUSE_WRAP_ROLL_SF),
    )


def cement_board_base(linear_feet: float) -> Tuple[float, int]:
    """Base cement board strip: (area in sq ft, 4x8 sheets)."""
    require_non_negative("linear_feet", linear_feet)
    area = linear_feet * CEMENT_BOARD_HEIGHT_FT
    return area, math.ceil(round(area / CEMENT_BOARD_SHEET_SF, 9))


# =============================================================================
# ACOUSTICAL CEILINGS
# =============================================================================


def ceiling_units(area: float, unit_size: float, waste_pct: float) -> int:
    """Ceiling units including waste; open ceilings (unit size 0) need none."""
    needed = sheets_needed(area, unit_size)
    if needed == 0:
        return 0
    return apply_waste(needed, waste_pct)


@dataclass
class GridQuantities:
    """Suspended grid components for lay-in ceilings."""

    main_runners: int = 0
    cross_tees_4: int = 0
    cross_tees_2: int = 0
    wall_molding: int = 0
    hanger_wire: int = 0


def calculate_grid_system(panel_area: float, tile_area: float) -> GridQuantities:
    """Grid components for 2x4 panel and 2x2 tile ceilings.

    2' cross tees are only needed to split 2x4 grid cells for 2x2 tiles.
    """
    require_non_negative("panel_area", panel_area)
    require_non_negative("tile_area", tile_area)
    area = panel_area + tile_area
    if area == 0:
        return GridQuantities()
    runner_feet = math.ceil(area / 4 * GRID_ALLOWANCE)
    perimeter = math.ceil(math.sqrt(area) * 4 * GRID_ALLOWANCE)
    return GridQuantities(
        main_runners=math.ceil(runner_feet / MAIN_RUNNER_LENGTH_FT),
        cross_tees_4=math.ceil(area / 8 * GRID_ALLOWANCE),
        cross_tees_2=math.ceil(tile_area / 4 * GRID_ALLOWANCE),
        wall_molding=math.ceil(perimeter / WALL_MOLDING_LENGTH_FT),
        hanger_wire=math.ceil(area / HANGER_WIRE_SPACING_SF),
    )


@dataclass
class GypsumCeilingQuantities:
    """Suspension framing for gypsum board ceilings (linear feet / pieces)."""

    carrying_channel: int = 0
    furring_channel: int = 0
    hanger_wire: int = 0


def calculate_gypsum_ceiling_framing(area: float) -> GypsumCeilingQuantities:
    require_non_negative("area", area)
    if area == 0:
        return GypsumCeilingQuantities()
    return GypsumCeilingQuantities(
        carrying_channel=math.ceil(area / 4 * GRID_ALLOWANCE),
        furring_channel=math.ceil(area * GRID_ALLOWANCE),
        hanger_wire=math.ceil(area / HANGER_WIRE_SPACING_SF),
    )


@dataclass
class WoodCeilingQuantities:
    """Support for wood plank ceilings."""

    furring_strips: int = 0
    mounting_clips: int = 0


def calculate_wood_ceiling_support(area: float) -> WoodCeilingQuantities:
    require_non_negative("area", area)
    if area == 0:
        return WoodCeilingQuantities()
    return WoodCeilingQuantities(
        furring_strips=math.ceil(area * WOOD_FURRING_RATIO * WOOD_FURRING_ALLOWANCE),
        mounting_clips=math.ceil(area / 2),
    )


# =============================================================================
# PLUMBING
# =============================================================================


def size_multiplier(size_inches: Optional[float]) -> float:
    """Labor multiplier by pipe size bracket.

    <=1": 0.8, <=2": 1.0, <=4": 1.2, larger: 1.5. Unreadable sizes use 1.0.
    """
    if size_inches is None:
        return 1.0
    require_non_negative("size_inches", size_inches)
    if size_inches <= 1:
        return 0.8
    if size_inches <= 2:
        return 1.0
    if size_inches <= 4:
        return 1.2
    return 1.5


def pipe_labor_hours(length: float, material_rate: float, size_inches: Optional[float]) -> float:
    """Installation hours for a pipe run before overhead."""
    require_non_negative("length", length)
    require_non_negative("material_rate", material_rate)
    return length * material_rate * size_multiplier(size_inches)


def plumbing_labor_hours(
    pipe_hours: Iterable[float],
    fixture_hours: Iterable[float] = (),
    valve_hours: Iterable[float] = (),
) -> float:
    """Total plumbing labor with the 15% overhead multiplier."""
    total = 0.0
    for hours in list(pipe_hours) + list(fixture_hours) + list(valve_hours):
        total += require_non_negative("hours", hours)
    return total * PLUMBING_LABOR_OVERHEAD


def sum_pipe_lengths(runs: Iterable[Tuple[str, str, float]]) -> Dict[Tuple[str, str], float]:
    """Linear feet summed by (type, size), in first-seen order."""
    totals: Dict[Tuple[str, str], float] = {}
    for pipe_type, size, length in runs:
        require_non_negative("length", length)
        key = (pipe_type, size)
        totals[key] = totals.get(key, 0.0) + length
    return totals


# =============================================================================
# CARPENTRY
# =============================================================================


def calculate_crew_hours(
    stud_linear_feet: float,
    track_linear_feet: float,
    sheathing_sf: float,
    wall_linear_feet: float,
    fire_rated_sf: float = 0.0,
) -> Dict[str, float]:
    """Crew hours by role for metal or wood stud wall construction."""
    for name, value in (
        ("stud_linear_feet", stud_linear_feet),
        ("track_linear_feet", track_linear_feet),
        ("sheathing_sf", sheathing_sf),
        ("wall_linear_feet", wall_linear_feet),
        ("fire_rated_sf", fire_rated_sf),
    ):
        require_non_negative(name, value)

    hours: Dict[str, float] = {}
    for role, rates in CREW_LABOR_RATES.items():
        role_hours = (
            stud_linear_feet * rates["studs"]
            + track_linear_feet * rates["track"]
            + sheathing_sf * rates["sheathing"]
        )
        role_hours += wall_linear_feet * rates.get("supervision", 0.0)
        role_hours += fire_rated_sf * rates.get("fire_rated", 0.0)
        hours[role] = role_hours
    return hours


def fire_caulk_tubes(length: float) -> int:
    require_non_negative("length", length)
    return math.ceil(length / FIRE_CAULK_SPACING_FT)


def carpentry_screw_boxes(studs: int) -> int:
    require_non_negative("studs", studs)
    return math.ceil(studs * CARPENTRY_SCREWS_PER_STUD / SCREWS_PER_BOX)
