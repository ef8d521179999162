"""Normalize certificate dates returned by the model to ISO ``YYYY-MM-DD``.

The prompt already demands ISO dates; this is the deterministic check behind
it. Anything that is not one of the accepted shapes is rejected rather than
guessed.
"""

import re
from datetime import date

from pdp_extractor.structured.exceptions import ExtractionFormatError

_MONTHS: dict[str, int] = {
    "january": 1, "jan": 1, "janvier": 1, "janv": 1,
    "february": 2, "feb": 2, "fevrier": 2, "février": 2, "fevr": 2, "févr": 2,
    "march": 3, "mar": 3, "mars": 3,
    "april": 4, "apr": 4, "avril": 4, "avr": 4,
    "may": 5, "mai": 5,
    "june": 6, "jun": 6, "juin": 6,
    "july": 7, "jul": 7, "juillet": 7, "juil": 7,
    "august": 8, "aug": 8, "aout": 8, "août": 8,
    "september": 9, "sep": 9, "sept": 9, "septembre": 9,
    "october": 10, "oct": 10, "octobre": 10,
    "november": 11, "nov": 11, "novembre": 11,
    "december": 12, "dec": 12, "decembre": 12, "décembre": 12, "déc": 12,
}

_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_DAY_FIRST_RE = re.compile(r"^(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{4})$")
_MONTH_FIRST_RE = re.compile(r"^([^\W\d_]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})$")
_DAY_MONTH_RE = re.compile(r"^(\d{1,2})(?:er)?\s+([^\W\d_]+)\.?,?\s+(\d{4})$")
_YEAR_RE = re.compile(r"^(\d{4})$")
_NULL_MARKERS = frozenset({"", "null", "none", "n/a"})


def normalize_date(raw: str | None, field_name: str = "date") -> str | None:
    """Return *raw* as ``YYYY-MM-DD``, or None when no date is given.

    Accepted inputs: ``YYYY-MM-DD``, ``DD/MM/YYYY`` (``.`` and ``-`` also work
    as separators), ``Month DD, YYYY`` and ``DD Month YYYY`` with English or
    French month names, and a bare ``YYYY`` which means 31 December.

    Raises:
        ExtractionFormatError: if the value is not a string or not a real date.
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ExtractionFormatError(f"'{field_name}' must be a string or null")
    value = raw.strip()
    if value.lower() in _NULL_MARKERS:
        return None

    year, month, day = _split(value, field_name)
    try:
        return date(year, month, day).isoformat()
    except ValueError as exc:
        raise ExtractionFormatError(f"'{field_name}' is not a valid date: {raw!r}") from exc


def _split(value: str, field_name: str) -> tuple[int, int, int]:
    match = _ISO_RE.match(value)
    if match:
        year, month, day = match.groups()
        return int(year), int(month), int(day)

    match = _DAY_FIRST_RE.match(value)
    if match:
        day, month, year = match.groups()
        return int(year), int(month), int(day)

    match = _MONTH_FIRST_RE.match(value)
    if match:
        month_name, day, year = match.groups()
        return int(year), _month_number(month_name, value, field_name), int(day)

    match = _DAY_MONTH_RE.match(value)
    if match:
        day, month_name, year = match.groups()
        return int(year), _month_number(month_name, value, field_name), int(day)

    match = _YEAR_RE.match(value)
    if match:
        return int(match.group(1)), 12, 31

    raise ExtractionFormatError(f"'{field_name}' has an unrecognized date format: {value!r}")


def _month_number(name: str, value: str, field_name: str) -> int:
    month = _MONTHS.get(name.lower())
    if month is None:
        raise ExtractionFormatError(f"'{field_name}' has an unknown month name: {value!r}")
    return month
