"""Material classification for takeoff records.

Infers a standardized catalog entry from whatever code and description the
analysis provided. Resolution runs in a fixed order (exact code, keyword
rules, size pattern, trade default) and always yields a usable entry; the
entry's ``match`` level records how specific the resolution was.
"""

import re
from typing import Optional

import structlog
from pydantic import BaseModel

from takeoff.models.catalog import MatchLevel, MaterialCatalog, MaterialCatalogEntry, TradeCatalog
from takeoff.models.records import PipeMaterial, PipeTypeCode, Trade
from takeoff.utils.measurements import normalize_text

logger = structlog.get_logger(__name__)


def normalize_code(raw_code: Optional[str]) -> str:
    """Canonical form of a legend or wall type code.

    '[12|A]' -> '12', ' acp ' -> 'ACP'.
    """
    if not raw_code:
        return ""
    code = raw_code.strip().replace("[", "").replace("]", "")
    code = code.split("|")[0].strip()
    return code.upper()


def classify(
    raw_code: Optional[str],
    raw_description: Optional[str],
    trade: Trade,
    catalog: MaterialCatalog,
) -> MaterialCatalogEntry:
    """Resolve a catalog entry for a code and description.

    Args:
        raw_code: Type code as written (may be empty).
        raw_description: Free-text description (may be empty).
        trade: Trade whose catalog is consulted.
        catalog: Injected material catalog.

    Returns:
        A catalog entry. Its code is the raw code when one was given so
        entries stay unique per code within a run.
    """
    trade_catalog = catalog.for_trade(trade)
    code = normalize_code(raw_code)
    description = normalize_text(raw_description or "").strip()

    # 1. Exact code (after trade aliases)
    if code:
        entry = trade_catalog.entry(trade_catalog.code_aliases.get(code, code))
        if entry is not None:
            return _resolved(entry, code, description, MatchLevel.EXACT)

    # 2. Keyword rules, most specific first
    for text in (description, code):
        if not text:
            continue
        for rule in trade_catalog.keyword_rules:
            if rule.matches(text):
                return _resolved(trade_catalog.entry(rule.code), code, description, MatchLevel.KEYWORD)

    # 3. Size pattern
    entry = _match_size_rule(trade_catalog, description)
    if entry is not None:
        return _resolved(entry, code, description, MatchLevel.SIZE_PATTERN)

    # 4. Trade default
    logger.debug(
        "classification_default",
        trade=trade.value,
        code=raw_code,
        description=raw_description,
    )
    return _resolved(trade_catalog.default_entry, code, description, MatchLevel.DEFAULT)


def _match_size_rule(trade_catalog: TradeCatalog, description: str) -> Optional[MaterialCatalogEntry]:
    for rule in trade_catalog.size_rules:
        if re.search(rule.pattern, description, re.IGNORECASE):
            base = trade_catalog.entry(rule.code) if rule.code else trade_catalog.default_entry
            if rule.unit_size is not None:
                return base.model_copy(update={"unit_size": rule.unit_size})
            return base
    return None


def _resolved(
    entry: MaterialCatalogEntry,
    code: str,
    description: str,
    match: MatchLevel,
) -> MaterialCatalogEntry:
    update = {"match": match, "catalog_code": entry.resolved_code}
    if code:
        update["code"] = code
    if description and match != MatchLevel.EXACT:
        update["description"] = description
    return entry.model_copy(update=update)


def classify_pipe(pipe_type: str, catalog: MaterialCatalog) -> MaterialCatalogEntry:
    """Classify a plumbing pipe description to a pipe system entry."""
    code = pipe_type.strip().upper()
    if code in {member.value for member in PipeTypeCode}:
        return classify(code, pipe_type, Trade.PLUMBING, catalog)
    return classify(None, pipe_type, Trade.PLUMBING, catalog)


def pipe_type_code(entry: MaterialCatalogEntry) -> PipeTypeCode:
    """Enum form of a plumbing entry's code."""
    base = entry.resolved_code.upper()
    for member in PipeTypeCode:
        if member.value == base:
            return member
    return PipeTypeCode.UNKNOWN


def pipe_material(entry: MaterialCatalogEntry) -> PipeMaterial:
    """Enum form of a plumbing entry's material."""
    for member in PipeMaterial:
        if member.value == entry.material:
            return member
    return PipeMaterial.UNKNOWN


# =============================================================================
# WALL TYPE INFERENCE (carpentry)
# =============================================================================

_STUD_SIZE_RE = re.compile(r"(\d+(?:[-\s]\d+/\d+)?|\d+/\d+)\s*[\"']\s*(?:metal|wood|stud)", re.IGNORECASE)
_LUMBER_RE = re.compile(r"\b(2\s*x\s*[46])\b", re.IGNORECASE)
_SPACING_RE = re.compile(r"(?:@|at)\s*(\d+)\s*[\"']?\s*(?:o\.?c\.?|on center)", re.IGNORECASE)
_FIRE_RATING_RE = re.compile(r"(\d+)(?:\s*-\s*|\s+)?(?:hr|hour)", re.IGNORECASE)
_THICKNESS_RE = re.compile(r"(\d+/\d+|\d+)\s*[\"']\s*(?:type\s*x\s*)?(?:gyp|gypsum|drywall|plywood|osb|cement)", re.IGNORECASE)

SHEATHING_KINDS = (
    ("cement board", ("cement board", "cement", "durock")),
    ("gypsum", ("gypsum", "gyp", "drywall", "gwb")),
    ("plywood", ("plywood",)),
    ("osb", ("osb",)),
)

DEFAULT_SHEATHING_THICKNESS = {
    "gypsum": '5/8"',
    "plywood": '1/2"',
    "osb": '7/16"',
    "cement board": '1/2"',
}


class WallTypeProfile(BaseModel):
    """Construction attributes of a wall type read from its description."""

    stud_material: str = "metal"
    stud_size: str = '3-5/8"'
    spacing_in: Optional[float] = None
    fire_rating_hr: float = 0.0
    is_exterior: bool = False
    is_load_bearing: bool = False
    sheathing: Optional[str] = None
    sheathing_thickness: Optional[str] = None

    @property
    def is_fire_rated(self) -> bool:
        return self.fire_rating_hr > 0


def infer_wall_type(description: Optional[str]) -> WallTypeProfile:
    """Infer a wall type profile from a legend or section description.

    A description mentioning 'fire' or 'rated' without hours is a 1-hr wall.
    """
    text = normalize_text(description or "")
    lowered = text.lower()
    profile = {}

    if re.search(r"\bwood\b", lowered) or _LUMBER_RE.search(text):
        profile["stud_material"] = "wood"
        lumber = _LUMBER_RE.search(text)
        profile["stud_size"] = re.sub(r"\s+", "", lumber.group(1)).lower() if lumber else "2x4"
    else:
        size = _STUD_SIZE_RE.search(text)
        if size:
            profile["stud_size"] = re.sub(r"\s+", "-", size.group(1).strip()) + '"'

    spacing = _SPACING_RE.search(text)
    if spacing:
        profile["spacing_in"] = float(spacing.group(1))

    rating = _FIRE_RATING_RE.search(text)
    if rating:
        profile["fire_rating_hr"] = float(rating.group(1))
    elif "fire" in lowered or "rated" in lowered:
        profile["fire_rating_hr"] = 1.0

    profile["is_exterior"] = "exterior" in lowered or "perimeter" in lowered
    profile["is_load_bearing"] = "load bearing" in lowered or "load-bearing" in lowered or "bearing wall" in lowered

    for kind, keywords in SHEATHING_KINDS:
        if any(keyword in lowered for keyword in keywords):
            profile["sheathing"] = kind
            thickness = _THICKNESS_RE.search(text)
            profile["sheathing_thickness"] = (
                thickness.group(1) + '"' if thickness else DEFAULT_SHEATHING_THICKNESS[kind]
            )
            break

    return WallTypeProfile(**profile)
