"""Extraction strategies for raw analysis text.

Each strategy is a named regular expression plus a row builder. A strategy
can be scoped to the sections of the reply whose heading mentions one of
its keywords. Strategies are pure: the same text always yields the same
records and notes.

Strategy chains per trade category live at the bottom of this module; the
ResponseExtractor walks them in order and keeps the first that produces a
typed record. Rows whose numbers cannot be read come back as UnknownRecord
alongside a MalformedNumericToken note.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import structlog

from takeoff.models.analysis import AnalysisNote, NoteCode
from takeoff.models.records import (
    CeilingSectionRecord,
    ExtractedRecord,
    FixtureRecord,
    GridItemRecord,
    LaborLineRecord,
    MaterialLineRecord,
    PipeRecord,
    Trade,
    UnknownRecord,
    ValveRecord,
    WallSectionRecord,
)
from takeoff.utils.measurements import normalize_text, parse_number

logger = structlog.get_logger(__name__)


# =============================================================================
# HEADER AND SECTION DETECTION
# =============================================================================

HEADER_KEYWORDS = frozenset({
    "type", "pipe type", "pipe", "size", "pipe size", "length", "length (lf)", "length (ft)",
    "linear feet", "description", "quantity", "qty", "code", "symbol", "material",
    "item", "name", "wall", "wall section", "section", "area", "area (sf)", "area (sq ft)",
    "task", "fixture", "fixture type", "valve", "valve type", "room", "location",
    "ceiling section", "component", "unit", "units", "count", "mark", "tag",
})

_SEPARATOR_RE = re.compile(r"^[\s:|-]*-{2,}[\s:|-]*$")
_SUMMARY_ROW_RE = re.compile(r"^\**\s*(?:sub\s*-?\s*)?total\b", re.IGNORECASE)

_HEADING_PATTERNS = (
    re.compile(r"^\s*#{1,6}\s*(.+?)\s*#*\s*$"),
    re.compile(r"^\s*\*\*(.+?)\*\*:?\s*$"),
    re.compile(r"^\s*\d+[.)]\s+([^|\n:]{1,60}?[^.|\n:])\s*$"),
    re.compile(r"^\s*([A-Z][A-Za-z0-9 /&(),'-]{2,60}):\s*$"),
    re.compile(r"^\s*([A-Z][A-Z0-9 /&(),'-]{3,60})\s*$"),
)


def is_header_token(token: str) -> bool:
    """True if the first captured token of a row names a column."""
    cleaned = token.strip().strip("*").strip().lower()
    return cleaned in HEADER_KEYWORDS


def heading_title(line: str) -> Optional[str]:
    """Heading text of a line, or None when the line is not a heading."""
    if line.lstrip().startswith("|"):
        return None
    for pattern in _HEADING_PATTERNS:
        match = pattern.match(line)
        if match:
            return match.group(1).strip()
    return None


def split_sections(text: str) -> List[Tuple[str, str]]:
    """Split text into (heading, body) pairs in document order.

    Text before the first heading is returned with an empty heading.
    """
    sections: List[Tuple[str, List[str]]] = [("", [])]
    for line in text.splitlines():
        title = heading_title(line)
        if title is not None:
            sections.append((title, []))
        else:
            sections[-1][1].append(line)
    return [(title, "\n".join(lines)) for title, lines in sections if title or lines]


def section_text(text: str, keywords: Sequence[str]) -> Optional[str]:
    """Joined bodies of every section whose heading mentions a keyword.

    Legend sections never count as data sections.
    """
    bodies = [
        body
        for title, body in split_sections(text)
        if title
        and "legend" not in title.lower()
        and any(keyword in title.lower() for keyword in keywords)
    ]
    if not bodies:
        return None
    return "\n".join(bodies)


# =============================================================================
# STRATEGY
# =============================================================================

RowBuilder = Callable[[Tuple[str, ...], List[AnalysisNote]], Optional[ExtractedRecord]]


@dataclass
class StrategyOutcome:
    """Records and notes produced by one strategy attempt."""

    strategy: str
    records: List[ExtractedRecord] = field(default_factory=list)
    notes: List[AnalysisNote] = field(default_factory=list)
    header_rows: int = 0

    @property
    def succeeded(self) -> bool:
        return any(not isinstance(record, UnknownRecord) for record in self.records)


@dataclass(frozen=True)
class ExtractionStrategy:
    """A named pattern whose matches are turned into records."""

    name: str
    pattern: re.Pattern
    build: RowBuilder
    scope: Tuple[str, ...] = ()

    def apply(self, text: str) -> StrategyOutcome:
        """Run the pattern over the text (or its scoped sections)."""
        outcome = StrategyOutcome(strategy=self.name)
        body = section_text(text, self.scope) if self.scope else text
        if not body:
            return outcome

        for match in self.pattern.finditer(body):
            groups = tuple((group or "").strip() for group in match.groups())
            first = groups[0] if groups else ""
            if not first or _SEPARATOR_RE.match(first) or _SUMMARY_ROW_RE.match(first):
                continue
            if is_header_token(first):
                outcome.header_rows += 1
                continue
            record = self.build(groups, outcome.notes)
            if record is not None:
                record.strategy = self.name
                outcome.records.append(record)
        return outcome


def run_chain(strategies: Sequence[ExtractionStrategy], text: str) -> Tuple[Optional[StrategyOutcome], List[AnalysisNote]]:
    """Try strategies in order; the first producing a typed record wins.

    Returns:
        (winning outcome or None, notes from every attempted strategy)
    """
    notes: List[AnalysisNote] = []
    for strategy in strategies:
        outcome = strategy.apply(text)
        notes.extend(outcome.notes)
        logger.debug(
            "extraction_strategy_attempt",
            strategy=strategy.name,
            records=len(outcome.records),
            header_rows=outcome.header_rows,
        )
        if outcome.succeeded:
            return outcome, notes
    return None, notes


# =============================================================================
# TOKEN HELPERS
# =============================================================================


def malformed_note(field_name: str, token: str, row: Sequence[str]) -> AnalysisNote:
    return AnalysisNote(
        code=NoteCode.MALFORMED_NUMERIC_TOKEN,
        message=f"Skipped row with unreadable {field_name} {token!r}",
        context={"field": field_name, "token": token, "row": list(row)},
    )


def required_number(token: str, field_name: str, row: Sequence[str], notes: List[AnalysisNote]) -> Optional[float]:
    """Parse a required number, noting the row when it cannot be read."""
    value = parse_number(token)
    if value is None:
        notes.append(malformed_note(field_name, token, row))
    return value


def unreadable_row(field_name: str, token: str, row: Sequence[str]) -> UnknownRecord:
    """The row kept verbatim when a required number cannot be read."""
    return UnknownRecord(raw=" | ".join(cell for cell in row if cell), reason=f"unreadable {field_name} {token!r}")


def optional_number(token: str) -> Optional[float]:
    """First number in a token such as '$85/hr', or None."""
    if not token:
        return None
    match = re.search(r"\d[\d,]*(?:\.\d+)?", normalize_text(token))
    if not match:
        return None
    return float(match.group(0).replace(",", ""))


def whole_count(value: float) -> int:
    """Counts are whole units, rounded up."""
    return int(math.ceil(round(value, 9)))


def clean_label(token: str) -> str:
    return re.sub(r"\s+", " ", token.strip().strip("*").strip()).strip(" -:")


def clean_size(token: str) -> str:
    return normalize_text(token).strip().strip("()").strip()


# =============================================================================
# NAME STANDARDIZATION
# =============================================================================

FIXTURE_WORDS = (
    "closet", "sink", "drain", "interceptor", "fountain", "bibb", "lavatory", "urinal",
    "shower", "tub", "toilet", "cooler", "filler", "eyewash", "hydrant",
)

STANDARD_FIXTURE_NAMES: Dict[str, str] = {
    "wc": "Water Closet",
    "lav": "Lavatory",
    "fd": "Floor Drain",
    "fld": "Floor Drain",
    "fs": "Floor Sink",
    "fls": "Floor Sink",
    "rd": "Roof Drain",
    "ur": "Urinal",
    "water closet": "Water Closet",
    "toilet": "Water Closet",
    "lavatory": "Lavatory",
    "floor drain": "Floor Drain",
    "floor sink": "Floor Sink",
    "roof drain": "Roof Drain",
    "urinal": "Urinal",
}

# Ordered: most specific phrase first
STANDARD_VALVE_NAMES: Tuple[Tuple[str, str], ...] = (
    ("gate/ball", "Gate/Ball Valve"),
    ("os&y", "OS&Y Valve"),
    ("backflow", "Backflow Preventer"),
    ("pressure reducing", "Pressure Reducing Valve"),
    ("prv", "Pressure Reducing Valve"),
    ("tempering", "Tempering Valve"),
    ("balancing", "Balancing Valve"),
    ("gas cock", "Gas Cock"),
    ("check", "Check Valve"),
    ("cleanout", "Cleanout"),
)


def standard_fixture_name(name: str) -> str:
    """Standard fixture name: 'WC' -> 'Water Closet', 'floor drains' -> 'Floor Drain'."""
    label = clean_label(name)
    base = re.sub(r"\s*\(.*?\)", "", label).strip() or label
    lowered = base.lower()
    if lowered in STANDARD_FIXTURE_NAMES:
        return STANDARD_FIXTURE_NAMES[lowered]
    if lowered.endswith("ies"):
        base = base[:-3] + "y"
    elif lowered.endswith("s") and not lowered.endswith("ss"):
        base = base[:-1]
    return STANDARD_FIXTURE_NAMES.get(base.lower(), base)


def standard_valve_name(name: str) -> str:
    """Standard valve name: 'p-trap w/ insulation' -> 'P-Trap with Insulation'."""
    label = clean_label(name)
    lowered = label.lower()
    if "trap" in lowered:
        return "P-Trap with Insulation" if "insul" in lowered else "P-Trap"
    for phrase, standard in STANDARD_VALVE_NAMES:
        if phrase in lowered:
            return standard
    singular = re.sub(r"(valve|cleanout|cock)s\b", r"\1", label, flags=re.IGNORECASE)
    return singular[:1].upper() + singular[1:] if singular else label


# =============================================================================
# ROW BUILDERS
# =============================================================================


def build_pipe(groups, notes):
    pipe_type, size, length_token = groups[0], groups[1], groups[2]
    length = required_number(length_token, "length", groups, notes)
    if length is None:
        return unreadable_row("length", length_token, groups)
    return PipeRecord(pipe_type=clean_label(pipe_type), size=clean_size(size), length=length)


def build_fixture(groups, notes):
    fixture_type, description, quantity_token = groups[0], groups[1], groups[2]
    quantity = required_number(quantity_token, "quantity", groups, notes)
    if quantity is None:
        return unreadable_row("quantity", quantity_token, groups)
    connections = groups[3] if len(groups) > 3 and groups[3] else None
    return FixtureRecord(
        fixture_type=standard_fixture_name(fixture_type),
        description=clean_label(description),
        quantity=whole_count(quantity),
        connections=connections,
    )


def build_fixture_strict(groups, notes):
    # Outside a fixture section only rows naming a fixture count
    text = f"{groups[0]} {groups[1]}".lower()
    if not any(word in text for word in FIXTURE_WORDS):
        return None
    return build_fixture(groups, notes)


def build_fixture_sentence(groups, notes):
    quantity_token, name = groups[0], groups[1]
    quantity = required_number(quantity_token, "quantity", groups, notes)
    if quantity is None:
        return unreadable_row("quantity", quantity_token, groups)
    return FixtureRecord(
        fixture_type=standard_fixture_name(name),
        description=clean_label(name),
        quantity=whole_count(quantity),
    )


def build_valve(groups, notes):
    valve_type, size, quantity_token = groups[0], groups[1], groups[2]
    quantity = required_number(quantity_token, "quantity", groups, notes)
    if quantity is None:
        return unreadable_row("quantity", quantity_token, groups)
    return ValveRecord(valve_type=standard_valve_name(valve_type), size=clean_size(size), quantity=whole_count(quantity))


def build_valve_sentence(groups, notes):
    quantity_token, size, name = groups[0], groups[1], groups[2]
    return build_valve((name, size, quantity_token), notes)


def make_wall_builder(fifth_column: Optional[str]) -> RowBuilder:
    """Wall row builder; the optional fifth column is 'area' or 'openings'."""

    def build_wall(groups, notes):
        name, type_code, length_token, height_token = groups[0], groups[1], groups[2], groups[3]
        length = required_number(length_token, "length", groups, notes)
        if length is None:
            return unreadable_row("length", length_token, groups)
        height = required_number(height_token, "height", groups, notes) if height_token else None
        if height_token and height is None:
            return unreadable_row("height", height_token, groups)

        area = None
        openings = None
        extra = groups[4] if len(groups) > 4 else ""
        if extra and fifth_column == "area":
            area = required_number(extra, "area", groups, notes)
            if area is None:
                return unreadable_row("area", extra, groups)
        elif extra and fifth_column == "openings":
            value = required_number(extra, "opening count", groups, notes)
            if value is None:
                return unreadable_row("opening count", extra, groups)
            openings = whole_count(value)

        return WallSectionRecord(
            name=clean_label(name),
            type_code=clean_label(type_code) or None,
            length=length,
            height=height,
            area=area,
            opening_count=openings,
        )

    return build_wall


build_wall_sentence = make_wall_builder("openings")


def build_ceiling(groups, notes):
    name, type_code, area_token = groups[0], groups[1], groups[2]
    area = required_number(area_token, "area", groups, notes)
    if area is None:
        return unreadable_row("area", area_token, groups)
    return CeilingSectionRecord(name=clean_label(name), type_code=clean_label(type_code) or None, area=area)


def build_ceiling_trailing_code(groups, notes):
    name, area_token, type_code = groups[0], groups[1], groups[2]
    return build_ceiling((name, type_code, area_token), notes)


def build_grid_item(groups, notes):
    description, quantity_token = groups[0], groups[1]
    quantity = required_number(quantity_token, "quantity", groups, notes)
    if quantity is None:
        return unreadable_row("quantity", quantity_token, groups)
    unit = groups[2] if len(groups) > 2 and groups[2] else "EA"
    return GridItemRecord(description=clean_label(description), quantity=quantity, unit=unit.upper())


def build_material_priced(groups, notes):
    description, quantity_token, unit, unit_cost_token = groups[0], groups[1], groups[2], groups[3]
    quantity = required_number(quantity_token, "quantity", groups, notes)
    if quantity is None:
        return unreadable_row("quantity", quantity_token, groups)
    return MaterialLineRecord(
        description=clean_label(description),
        quantity=quantity,
        unit=(unit or "EA").upper(),
        unit_cost=optional_number(unit_cost_token),
    )


def build_material_plain(groups, notes):
    description, quantity_token, unit = groups[0], groups[1], groups[2]
    quantity = required_number(quantity_token, "quantity", groups, notes)
    if quantity is None:
        return unreadable_row("quantity", quantity_token, groups)
    return MaterialLineRecord(description=clean_label(description), quantity=quantity, unit=(unit or "EA").upper())


def build_labor_line(groups, notes):
    task, hours_token = groups[0], groups[1]
    hours = required_number(hours_token, "hours", groups, notes)
    if hours is None:
        return unreadable_row("hours", hours_token, groups)
    rate = optional_number(groups[2]) if len(groups) > 2 else None
    return LaborLineRecord(task=clean_label(task), hours=hours, rate=rate)



# =============================================================================
# PATTERNS
# =============================================================================

_NUM = r"\d[\d,]*(?:\.\d+)?"
_CELL = r"[ \t]*([^|\n]*?)[ \t]*\|"
_ROW3 = re.compile(r"^\s*\|" + _CELL * 3, re.MULTILINE)
_ROW3_OPT4 = re.compile(r"^\s*\|" + _CELL * 3 + r"(?:" + _CELL + r")?", re.MULTILINE)
_ROW2_OPT3 = re.compile(r"^\s*\|" + _CELL * 2 + r"(?:" + _CELL + r")?", re.MULTILINE)

PIPE_TABLE_STRICT = re.compile(
    r"^\s*\|\s*([^|\n]+?)\s*\|\s*([^|\n]*\d[^|\n]*?)\s*\|\s*(" + _NUM + r")\s*(?:ft|lf|feet|')?\s*\|",
    re.MULTILINE | re.IGNORECASE,
)
PIPE_SENTENCE = re.compile(
    r"^[ \t]*(?:[-•*]|\d+[.)])?[ \t]*([A-Za-z /]+?)[ \t]+(?:pipe|piping)(?:[ \t]+([^:\n]+?))?[ \t]*:[ \t]*("
    + _NUM + r")[ \t]*(?:ft|feet|lf|')",
    re.MULTILINE | re.IGNORECASE,
)
FIXTURE_SENTENCE = re.compile(
    r"(\d+)\s+([A-Za-z][A-Za-z ]*?(?:closet|sink|drain|interceptor|fountain|bibb|lavator(?:y|ie)|urinal|shower|toilet|cooler)s?)\b",
    re.IGNORECASE,
)
VALVE_TABLE_STRICT = re.compile(
    r"^\s*\|\s*([^|\n]*?(?:valve|cleanout|trap|backflow|cock|arrestor|breaker|primer)[^|\n]*?)\s*\|\s*([^|\n]*?)\s*\|\s*(\d+)\s*\|",
    re.MULTILINE | re.IGNORECASE,
)
VALVE_SENTENCE = re.compile(
    r"(\d+)\s*(?:[x×-]\s*)?(?:(\d+(?:-\d+/\d+|/\d+)?\s*\")\s+)?"
    r"([A-Za-z&/ -]*?(?:valve|cleanout|p-trap|backflow preventer|gas cock))s?\b",
    re.IGNORECASE,
)
WALL_ROW5 = re.compile(
    r"^\s*\|\s*([^|\n]+?)\s*\|\s*([^|\n]{1,12}?)\s*\|" + _CELL * 3,
    re.MULTILINE,
)
WALL_ROW4 = re.compile(
    r"^\s*\|\s*([^|\n]+?)\s*\|\s*([^|\n]{1,12}?)\s*\|" + _CELL * 2 + r"\s*$",
    re.MULTILINE,
)
WALL_SENTENCE = re.compile(
    r"^[ \t]*(?:[-•*]|\d+[.)])?[ \t]*([A-Za-z0-9][\w .#/-]*?)[ \t]*(?:\(([^)\n]{1,12})\))?[ \t]*:[ \t]*("
    + _NUM + r")[ \t]*(?:ft|feet|'|lf)\.?(?:[ \t]*long)?"
    r"(?:[ \t]*(?:x|×|by)[ \t]*(" + _NUM + r")[ \t]*(?:ft|feet|')\.?(?:[ \t]*(?:high|tall))?)?"
    r"(?:[^\n]*?(\d+)[ \t]+openings?)?",
    re.MULTILINE | re.IGNORECASE,
)
SHEATHING_TYPES_TABLE = re.compile(
    r"^\s*\|\s*([A-Za-z]{1,3})\s*\|\s*([^|\n]+?)\s*\|\s*(" + _NUM + r")\s*\|\s*(\d+)\s*\|",
    re.MULTILINE,
)
CEILING_TABLE = re.compile(
    r"^\s*\|\s*([^|\n]+?)\s*\|\s*([^|\n]{1,10}?)\s*\|\s*([^|\n]+?)\s*\|",
    re.MULTILINE,
)
CEILING_TABLE_STRICT = re.compile(
    r"^\s*\|\s*([^|\n]+?)\s*\|\s*([A-Z0-9-]{1,10})\s*\|\s*(" + _NUM + r")\s*(?:sf|sq\.?\s*ft)?\s*\|",
    re.MULTILINE | re.IGNORECASE,
)
CEILING_SENTENCE = re.compile(
    r"^[ \t]*(?:[-•*]|\d+[.)])?[ \t]*([A-Za-z0-9][\w .#/-]*?)[ \t]*\(([A-Za-z0-9-]{1,10})\)[ \t]*[:–-][ \t]*("
    + _NUM + r")[ \t]*(?:sq\.?[ \t]*ft\.?|sf|square[ \t]+feet)",
    re.MULTILINE | re.IGNORECASE,
)
CEILING_SENTENCE_TRAILING = re.compile(
    r"^[ \t]*(?:[-•*]|\d+[.)])?[ \t]*([A-Za-z0-9][\w .#/-]*?)[ \t]*:[ \t]*("
    + _NUM + r")[ \t]*(?:sq\.?[ \t]*ft\.?|sf|square[ \t]+feet)[ \t]*(?:of[ \t]+)?(?-i:([A-Z0-9-]{2,10})\b)?",
    re.MULTILINE | re.IGNORECASE,
)
GRID_TABLE = re.compile(
    r"^\s*\|\s*([^|\n]*?(?:runner|tee|molding|moulding|channel|wire|clip)[^|\n]*?)\s*\|\s*(" + _NUM + r")\s*\|(?:\s*([A-Za-z.]{1,6})\s*\|)?",
    re.MULTILINE | re.IGNORECASE,
)
GRID_LIST = re.compile(
    r"^[ \t]*[-•*][ \t]*([^:\n]*?(?:runners?|tees?|molding|moulding|channels?|wire|clips?)[^:\n]*?)[ \t]*:[ \t]*("
    + _NUM + r")[ \t]*([A-Za-z.]{1,6})?",
    re.MULTILINE | re.IGNORECASE,
)
MATERIAL_ROW5 = re.compile(r"^\s*\|" + _CELL * 5, re.MULTILINE)
MATERIAL_ROW3 = re.compile(r"^\s*\|" + _CELL * 3 + r"\s*$", re.MULTILINE)
MATERIAL_BULLET = re.compile(
    r"^[ \t]*[-•*][ \t]*([^:\n]+?)[ \t]*:[ \t]*(" + _NUM + r")[ \t]*([A-Za-z]{1,4})\b(?:[^\n$]*\$[ \t]*(" + _NUM + r"))?",
    re.MULTILINE,
)


# =============================================================================
# STRATEGY CHAINS
# =============================================================================

PIPE_STRATEGIES = (
    ExtractionStrategy("pipe_section_table", _ROW3, build_pipe, scope=("pipe", "piping")),
    ExtractionStrategy("pipe_table", PIPE_TABLE_STRICT, build_pipe),
    ExtractionStrategy("pipe_sentence", PIPE_SENTENCE, build_pipe),
)

FIXTURE_STRATEGIES = (
    ExtractionStrategy("fixture_section_table", _ROW3_OPT4, build_fixture, scope=("fixture",)),
    ExtractionStrategy("fixture_table", _ROW3_OPT4, build_fixture_strict),
    ExtractionStrategy("fixture_sentence", FIXTURE_SENTENCE, build_fixture_sentence),
)

VALVE_STRATEGIES = (
    ExtractionStrategy("valve_section_table", _ROW3, build_valve, scope=("valve", "specialt")),
    ExtractionStrategy("valve_table", VALVE_TABLE_STRICT, build_valve),
    ExtractionStrategy("valve_sentence", VALVE_SENTENCE, build_valve_sentence),
)


def wall_strategies(fifth_column: str) -> Tuple[ExtractionStrategy, ...]:
    """Wall section chain; the fifth table column is area or openings."""
    builder = make_wall_builder(fifth_column)
    return (
        ExtractionStrategy("wall_section_table", WALL_ROW5, builder, scope=("wall",)),
        ExtractionStrategy("wall_section_table_short", WALL_ROW4, builder, scope=("wall",)),
        ExtractionStrategy("wall_table", WALL_ROW5, builder),
        ExtractionStrategy("wall_sentence", WALL_SENTENCE, build_wall_sentence),
    )


CEILING_STRATEGIES = (
    ExtractionStrategy("ceiling_section_table", CEILING_TABLE, build_ceiling, scope=("ceiling", "room", "area")),
    ExtractionStrategy("ceiling_table", CEILING_TABLE_STRICT, build_ceiling),
    ExtractionStrategy("ceiling_sentence", CEILING_SENTENCE, build_ceiling),
    ExtractionStrategy("ceiling_sentence_trailing_code", CEILING_SENTENCE_TRAILING, build_ceiling_trailing_code),
)

GRID_STRATEGIES = (
    ExtractionStrategy("grid_table", GRID_TABLE, build_grid_item),
    ExtractionStrategy("grid_list", GRID_LIST, build_grid_item),
)

MATERIAL_STRATEGIES = (
    ExtractionStrategy("material_priced_table", MATERIAL_ROW5, build_material_priced, scope=("material", "equipment")),
    ExtractionStrategy("material_table", MATERIAL_ROW3, build_material_plain, scope=("material", "equipment")),
    ExtractionStrategy("material_bullet", MATERIAL_BULLET, build_material_priced),
)

LABOR_STRATEGIES = (
    ExtractionStrategy("labor_table", _ROW2_OPT3, build_labor_line, scope=("labor",)),
)


@dataclass(frozen=True)
class CategorySpec:
    """An extraction category and its strategy chain."""

    name: str
    strategies: Tuple[ExtractionStrategy, ...]
    primary: bool = True


TRADE_CATEGORIES: Dict[Trade, Tuple[CategorySpec, ...]] = {
    Trade.PLUMBING: (
        CategorySpec("pipes", PIPE_STRATEGIES),
        CategorySpec("fixtures", FIXTURE_STRATEGIES),
        CategorySpec("valves", VALVE_STRATEGIES),
    ),
    Trade.SHEATHING: (
        CategorySpec("wall_sections", wall_strategies("area")),
    ),
    Trade.FRAMING: (
        CategorySpec("wall_sections", wall_strategies("openings")),
    ),
    Trade.CARPENTRY: (
        CategorySpec("wall_sections", wall_strategies("openings")),
    ),
    Trade.ACOUSTICAL: (
        CategorySpec("ceiling_sections", CEILING_STRATEGIES),
        CategorySpec("grid_items", GRID_STRATEGIES, primary=False),
    ),
    Trade.MECHANICAL: (
        CategorySpec("materials", MATERIAL_STRATEGIES),
        CategorySpec("labor", LABOR_STRATEGIES, primary=False),
    ),
}
