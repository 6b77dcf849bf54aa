"""Parsing helpers for numbers and nominal sizes found in analysis text."""

import re
from typing import Optional

_QUOTE_TRANSLATION = str.maketrans({
    "“": '"', "”": '"', "″": '"', "′": "'",
    "‘": "'", "’": "'", "×": "x",
})

_NUMBER_RE = re.compile(
    r"^\$?\s*(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?|\.\d+)"
    r"\s*(?:ft\.?|feet|lf|sf|sq\.?\s*ft\.?|'|ea|hrs?\.?|hours?)?$",
    re.IGNORECASE,
)
_DIMENSION_RE = re.compile(r"(\d+(?:\.\d+)?)\s*'?\s*x\s*(\d+(?:\.\d+)?)", re.IGNORECASE)
_MIXED_FRACTION_RE = re.compile(r"(\d+)\s*[-\s]\s*(\d+)\s*/\s*(\d+)")
_FRACTION_RE = re.compile(r"(?<![\d.])(\d+)\s*/\s*(\d+)")
_DECIMAL_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


def normalize_text(value: str) -> str:
    """Replace typographic quotes and multiplication signs with ASCII."""
    return value.translate(_QUOTE_TRANSLATION)


def parse_number(token: str) -> Optional[float]:
    """Parse a numeric token such as '1,250', '120 ft' or '$3.25'.

    Returns:
        The value, or None when the token is not a clean number.
    """
    if token is None:
        return None
    match = _NUMBER_RE.match(normalize_text(token).strip())
    if not match:
        return None
    return float(match.group(1).replace(",", ""))


def parse_size_inches(size: str) -> Optional[float]:
    """Parse a nominal size to a number.

    Handles mixed fractions ('1-1/2"'), plain fractions ('3/4"'), whole or
    decimal inches ('6"', '2.5 in') and lumber dimensions ('2x4' -> 4).
    """
    if not size:
        return None
    text = normalize_text(size)

    dimension = _DIMENSION_RE.search(text)
    if dimension:
        return float(dimension.group(2))

    mixed = _MIXED_FRACTION_RE.search(text)
    if mixed:
        whole, numerator, denominator = (int(group) for group in mixed.groups())
        if denominator == 0:
            return None
        return whole + numerator / denominator

    fraction = _FRACTION_RE.search(text)
    if fraction:
        numerator, denominator = (int(group) for group in fraction.groups())
        if denominator == 0:
            return None
        return numerator / denominator

    decimal = _DECIMAL_RE.search(text)
    if decimal:
        return float(decimal.group(0))
    return None


def normalize_size(size: str) -> str:
    """Canonical form of a nominal size for exact table lookups.

    '1 1/2 in' -> '1-1/2"', '4' -> '4"', '2 x 4' -> '2x4'.
    """
    if not size:
        return ""
    text = normalize_text(size).strip()
    text = re.sub(r"(\d)\s+(\d+/\d+)", r"\1-\2", text)
    text = re.sub(r"\s*(?:inches|inch|in\.?)$", '"', text, flags=re.IGNORECASE)
    text = re.sub(r"\s+", "", text)
    text = text.replace("''", '"')
    if re.fullmatch(r"[\d./-]+", text):
        text += '"'
    return text.lower() if "x" in text.lower() else text
