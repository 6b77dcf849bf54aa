"""Response Extractor for the takeoff pipeline.

Turns the freeform reply of the analysis service into structured records.
Each trade category runs its strategy chain (first success wins); legend
rows, stated totals and installation notes are read alongside. Malformed
text never raises: irregularities are returned as AnalysisNotes.
"""

import re
from typing import Dict, List, Optional, Tuple

import structlog
from pydantic import BaseModel, Field

from takeoff.config.errors import ErrorCode, ValidationError
from takeoff.models.analysis import AnalysisNote, InstallationNote, NoteCode, NotePriority
from takeoff.models.catalog import MatchLevel, MaterialCatalog, MaterialCatalogEntry
from takeoff.models.records import ExtractedRecord, PipeRecord, Trade, UnknownRecord
from takeoff.services.extraction_strategies import (
    SHEATHING_TYPES_TABLE,
    TRADE_CATEGORIES,
    clean_label,
    is_header_token,
    run_chain,
    split_sections,
)
from takeoff.services.material_classifier import (
    classify,
    classify_pipe,
    normalize_code,
    pipe_material,
    pipe_type_code,
)
from takeoff.utils.measurements import normalize_text, parse_number

logger = structlog.get_logger(__name__)


# Trades whose drawings define material codes in a legend
LEGEND_TRADES = frozenset({Trade.ACOUSTICAL, Trade.SHEATHING, Trade.FRAMING, Trade.CARPENTRY})

LEGEND_HEADER_WORDS = frozenset({"note", "notes", "total", "legend", "key"})

_NUM = r"\d[\d,]*(?:\.\d+)?"

_LEGEND_TABLE_RE = re.compile(
    r"^\s*\|\s*\**([A-Za-z0-9][A-Za-z0-9-]*)\**\s*\|\s*([^|\n]+?)\s*\|(?:\s*([^|\n]*?)\s*\|)?\s*$",
    re.MULTILINE,
)
_LEGEND_LINE_RE = re.compile(
    r"^[ \t]*(?:[-•*][ \t]*)?\**([A-Z0-9][A-Z0-9-]{0,11})\**[ \t]*(?:-|–|:)[ \t]+(.+?)[ \t]*$",
    re.MULTILINE,
)
_LEGEND_PAREN_RE = re.compile(
    r"^[ \t]*(?:[-•*][ \t]*)?([A-Za-z][^()\n|:]{2,80}?)[ \t]*\(([A-Z0-9][A-Z0-9-]{0,11})\)",
    re.MULTILINE,
)

_TOTAL_AREA_RES = (
    re.compile(
        r"total\s+(?:ceiling\s+|wall\s+|sheathing\s+)?area\s*:?\s*\**\s*(" + _NUM + r")",
        re.IGNORECASE,
    ),
    re.compile(
        r"grand\s+total\s*:?\s*\**\s*(" + _NUM + r")\s*(?:sq\.?\s*ft\.?|sf|square\s+feet)",
        re.IGNORECASE,
    ),
)
_LABOR_HOURS_RE = re.compile(r"(?:total\s+)?labor\s+hours\s*:?\s*\**\s*(" + _NUM + r")", re.IGNORECASE)
_CEMENT_BOARD_RE = re.compile(
    r"total\s+linear\s+feet\s+requiring\s+base\s+cement\s+board\s*:?\s*\**\s*(" + _NUM + r")",
    re.IGNORECASE,
)

_NOTE_BULLET_RE = re.compile(r"^\s*(?:[-•*]|\d+[.)])\s+(.+?)\s*$", re.MULTILINE)
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_NOTE_SECTION_WORDS = ("note", "installation", "consideration")

HIGH_PRIORITY_WORDS = ("critical", "required", "must", "code", "safety", "emergency", "danger", "warning")
LOW_PRIORITY_WORDS = ("consider", "option", "suggestion", "recommend", "may", "might")
MIN_NOTE_LENGTH = 15


# =============================================================================
# RESULT MODELS
# =============================================================================


class StatedTotals(BaseModel):
    """Totals the analysis reported directly."""

    total_area: Optional[float] = None
    labor_hours: Optional[float] = None
    cement_board_lf: Optional[float] = None


class TypeArea(BaseModel):
    """A row of a per-type area table (sheathing)."""

    code: str
    description: str
    area: float = Field(..., ge=0)
    sheets: Optional[int] = None


class ExtractionResult(BaseModel):
    """Everything the extractor read from one analysis reply."""

    trade: Trade
    records: Dict[str, List[ExtractedRecord]] = Field(default_factory=dict)
    unreadable: Dict[str, List[UnknownRecord]] = Field(default_factory=dict)
    strategies: Dict[str, Optional[str]] = Field(default_factory=dict)
    legend: Dict[str, MaterialCatalogEntry] = Field(default_factory=dict)
    type_areas: List[TypeArea] = Field(default_factory=list)
    stated_totals: StatedTotals = Field(default_factory=StatedTotals)
    installation_notes: List[InstallationNote] = Field(default_factory=list)
    notes: List[AnalysisNote] = Field(default_factory=list)

    def records_for(self, category: str) -> List[ExtractedRecord]:
        return self.records.get(category, [])

    def unreadable_for(self, category: str) -> List[UnknownRecord]:
        return self.unreadable.get(category, [])

    @property
    def all_records(self) -> List[ExtractedRecord]:
        return [record for records in self.records.values() for record in records]


# =============================================================================
# EXTRACTOR
# =============================================================================


class ResponseExtractor:
    """Extract structured takeoff records from raw analysis text."""

    def __init__(self, catalog: MaterialCatalog):
        self.catalog = catalog

    def extract(self, text: str, trade) -> ExtractionResult:
        """Extract records, legend, totals and notes for a trade.

        Args:
            text: Raw analysis reply.
            trade: Trade or trade identifier.

        Returns:
            ExtractionResult; categories with no matching strategy are empty.

        Raises:
            ValidationError: If text is not a string or the trade is unknown.
        """
        if not isinstance(text, str):
            raise ValidationError(
                f"Analysis text must be a string, got {type(text).__name__}",
                field="text",
                code=ErrorCode.INVALID_TEXT,
            )
        trade = Trade.parse(trade)
        text = normalize_text(text)

        result = ExtractionResult(trade=trade)
        empty_categories = []

        for category in TRADE_CATEGORIES[trade]:
            outcome, notes = run_chain(category.strategies, text)
            result.notes.extend(notes)
            found = outcome.records if outcome else []
            records = [record for record in found if not isinstance(record, UnknownRecord)]
            result.unreadable[category.name] = [record for record in found if isinstance(record, UnknownRecord)]
            for record in records:
                if isinstance(record, PipeRecord):
                    self._classify_pipe(record)
            result.records[category.name] = records
            result.strategies[category.name] = outcome.strategy if outcome else None
            if not records and category.primary:
                empty_categories.append(category.name)
            logger.debug(
                "category_extracted",
                trade=trade.value,
                category=category.name,
                strategy=result.strategies[category.name],
                records=len(records),
                unreadable=len(result.unreadable[category.name]),
            )

        if trade in LEGEND_TRADES:
            result.legend, legend_notes = self.parse_legend(text, trade)
            result.notes.extend(legend_notes)
        if trade == Trade.SHEATHING:
            result.type_areas = parse_type_areas(text)

        result.stated_totals = parse_stated_totals(text)
        result.installation_notes = parse_installation_notes(text)

        if empty_categories:
            logger.warning(
                "extraction_empty",
                trade=trade.value,
                categories=empty_categories,
            )
            result.notes.append(
                AnalysisNote(
                    code=NoteCode.EXTRACTION_EMPTY,
                    message=f"No records extracted for: {', '.join(empty_categories)}",
                    context={"trade": trade.value, "categories": empty_categories},
                )
            )

        logger.info(
            "extraction_complete",
            trade=trade.value,
            records=len(result.all_records),
            legend_entries=len(result.legend),
            notes=len(result.notes),
        )
        return result

    def _classify_pipe(self, record: PipeRecord) -> None:
        entry = classify_pipe(record.pipe_type, self.catalog)
        record.type_code = pipe_type_code(entry)
        record.material = pipe_material(entry)

    # -------------------------------------------------------------------------
    # Legend
    # -------------------------------------------------------------------------

    def parse_legend(self, text: str, trade: Trade) -> Tuple[Dict[str, MaterialCatalogEntry], List[AnalysisNote]]:
        """Parse legend rows into classified catalog entries keyed by code.

        The legend section is used when one exists, otherwise the whole
        text. The 'description (CODE)' form is only read inside a legend
        section. The first definition of a code wins.
        """
        legend_body = _legend_section(text)
        body = legend_body if legend_body is not None else text

        rows: List[Tuple[str, str]] = []
        for match in _LEGEND_TABLE_RE.finditer(body):
            extra = (match.group(3) or "").strip()
            if extra and parse_number(extra) is not None:
                continue
            rows.append((match.group(1), match.group(2)))
        for match in _LEGEND_LINE_RE.finditer(body):
            rows.append((match.group(1), match.group(2)))
        if legend_body is not None:
            for match in _LEGEND_PAREN_RE.finditer(body):
                rows.append((match.group(2), match.group(1)))

        legend: Dict[str, MaterialCatalogEntry] = {}
        notes: List[AnalysisNote] = []
        for raw_code, raw_description in rows:
            code = normalize_code(raw_code)
            description = clean_label(raw_description)
            if code in legend or not _is_legend_row(code, description):
                continue
            entry = classify(code, description, trade, self.catalog)
            if entry.match.is_low_specificity:
                notes.append(
                    AnalysisNote(
                        code=NoteCode.CLASSIFICATION_AMBIGUOUS,
                        message=f"Legend code {code} resolved by {entry.match.value} match",
                        context={"code": code, "description": description, "match": entry.match.value},
                    )
                )
            legend[code] = entry.model_copy(update={"description": description, "match": MatchLevel.LEGEND})

        logger.debug("legend_parsed", trade=trade.value, codes=list(legend))
        return legend, notes


def _legend_section(text: str) -> Optional[str]:
    bodies = [body for title, body in split_sections(text) if "legend" in title.lower()]
    if not bodies:
        return None
    return "\n".join(bodies)


def _is_legend_row(code: str, description: str) -> bool:
    if not code or len(code) >= 10:
        return False
    if is_header_token(code) or code.lower() in LEGEND_HEADER_WORDS:
        return False
    if is_header_token(description) or description.lower() in LEGEND_HEADER_WORDS:
        return False
    if set(description) <= set("-: "):
        return False
    return sum(1 for char in description if char.isalpha()) >= 3


# =============================================================================
# TOTALS AND NOTES
# =============================================================================


def parse_type_areas(text: str) -> List[TypeArea]:
    """Rows of a '| code | description | area | sheets |' table."""
    areas = []
    for match in SHEATHING_TYPES_TABLE.finditer(text):
        code, description, area_token, sheets_token = (group.strip() for group in match.groups())
        if is_header_token(code):
            continue
        area = parse_number(area_token)
        if area is None:
            continue
        areas.append(
            TypeArea(
                code=normalize_code(code),
                description=clean_label(description),
                area=area,
                sheets=int(sheets_token),
            )
        )
    return areas


def parse_stated_totals(text: str) -> StatedTotals:
    """Totals stated in the reply (area, labor hours, cement board LF)."""
    totals = StatedTotals()
    for pattern in _TOTAL_AREA_RES:
        match = pattern.search(text)
        if match:
            totals.total_area = float(match.group(1).replace(",", ""))
            break
    match = _LABOR_HOURS_RE.search(text)
    if match:
        totals.labor_hours = float(match.group(1).replace(",", ""))
    match = _CEMENT_BOARD_RE.search(text)
    if match:
        totals.cement_board_lf = float(match.group(1).replace(",", ""))
    return totals


def note_priority(text: str) -> NotePriority:
    """High for safety and code language, low for suggestions."""
    lowered = text.lower()
    if any(re.search(rf"\b{word}\b", lowered) for word in HIGH_PRIORITY_WORDS):
        return NotePriority.HIGH
    if any(re.search(rf"\b{word}\b", lowered) for word in LOW_PRIORITY_WORDS):
        return NotePriority.LOW
    return NotePriority.MEDIUM


def parse_installation_notes(text: str) -> List[InstallationNote]:
    """Bullets under a notes/installation heading, else its long sentences."""
    bodies = [
        body
        for title, body in split_sections(text)
        if title and any(word in title.lower() for word in _NOTE_SECTION_WORDS)
    ]
    notes: List[InstallationNote] = []
    for body in bodies:
        items = [item.strip("* ") for item in _NOTE_BULLET_RE.findall(body)]
        if not items:
            items = [
                sentence.strip()
                for sentence in _SENTENCE_SPLIT_RE.split(" ".join(body.split()))
                if len(sentence.strip()) > MIN_NOTE_LENGTH
            ]
        for item in items:
            if item:
                notes.append(InstallationNote(text=item, priority=note_priority(item)))
    return notes
