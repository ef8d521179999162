"""Infer certification type, year and person name from a filename.

Certificates are frequently attached as scans named after their holder and
training, e.g. ``GWO-WAH_Elie Amour.pdf`` or ``H0B0_ELIE_2025.pdf``. When the
content cannot be read, the filename is the only signal left.
"""

import re
from pathlib import PurePath

NO_INFORMATION = "no information extracted from filename"

_CERTIFICATION_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"GWO", re.IGNORECASE), "GWO certification"),
    (
        re.compile(
            r"H0B0|H0V|B0V|B1V|B2V|H1V|H2V|(?<![a-z])(?:BR|BC)(?![a-z])",
            re.IGNORECASE,
        ),
        "Electrical habilitation",
    ),
    (re.compile(r"First.*Aid|SST", re.IGNORECASE), "First Aid"),
    (re.compile(r"WAH|Working.*at.*Heights?", re.IGNORECASE), "Working at Heights"),
    (re.compile(r"IRATA|rope.*access", re.IGNORECASE), "IRATA rope access"),
    (re.compile(r"BST", re.IGNORECASE), "BST Safety Training"),
]

# a bare year, or the year leading a YYYYMMDD date stamp
_YEAR_RE = re.compile(r"(?<!\d)(20\d{2})(?:\d{4})?(?!\d)")
_SEPARATOR_RE = re.compile(r"[_\-.\s]+")
_MIN_NAME_TOKEN_LENGTH = 3


def describe_filename(filename: str) -> str:
    """Return labelled hints extracted from *filename*, never an empty string."""
    fragments: list[str] = []
    fragments.extend(_detect_certifications(filename))

    year = _detect_year(filename)
    if year is not None:
        fragments.append(f"implied expiry year: {year}")

    names = _detect_name_tokens(filename)
    if names:
        fragments.append(f"possible name: {' '.join(names)}")

    return ", ".join(fragments) or NO_INFORMATION


def _detect_certifications(filename: str) -> list[str]:
    return [label for pattern, label in _CERTIFICATION_PATTERNS if pattern.search(filename)]


def _detect_year(filename: str) -> str | None:
    years = _YEAR_RE.findall(filename)
    return years[-1] if years else None


def _detect_name_tokens(filename: str) -> list[str]:
    stem = PurePath(filename).stem
    return [
        token
        for token in _SEPARATOR_RE.split(stem)
        if len(token) >= _MIN_NAME_TOKEN_LENGTH and token.isalpha()
    ]
