"""Validates raw parsed JSON and builds a StructuredResult."""

from typing import Any

from pdp_extractor.structured.dates import normalize_date
from pdp_extractor.structured.exceptions import ExtractionFormatError
from pdp_extractor.structured.models import Certification, Company, StructuredResult, Worker

_COMPANY_FIELDS = (
    "name",
    "address",
    "legal_representative_name",
    "legal_representative_phone",
    "legal_representative_email",
    "hse_responsible",
)
_WORKER_FIELDS = ("first_name", "last_name", "phone", "email")
_CERTIFICATION_FIELDS = ("certification_type", "certification_name")
_DATE_FIELDS = ("issue_date", "expiry_date")


def validate_and_build(data: dict[str, Any]) -> StructuredResult:
    """Validate raw parsed JSON and build a StructuredResult.

    Missing sections get their empty defaults: an all-null company, no
    workers, no certification and false flags. Empty strings become None and
    every date is normalized to ``YYYY-MM-DD``.

    Raises:
        ExtractionFormatError: on any type or date violation.
    """
    company = _build_company(data.get("company"))
    workers = _build_workers(data.get("workers"))
    certification = _build_certification(data.get("certification"), "certification")
    return StructuredResult(
        company=company,
        workers=workers,
        certification=certification,
        risk_analysis=_build_flag(data.get("risk_analysis"), "risk_analysis"),
        operational_mode=_build_flag(data.get("operational_mode"), "operational_mode"),
    )


def _build_company(raw: Any) -> Company:
    if raw is None:
        return Company()
    if not isinstance(raw, dict):
        raise ExtractionFormatError("'company' must be an object or null")
    values = {name: _optional_str(raw.get(name), f"company.{name}") for name in _COMPANY_FIELDS}
    return Company(**values)


def _build_workers(raw: Any) -> list[Worker]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ExtractionFormatError("'workers' must be a list")
    return [_build_worker(item, index) for index, item in enumerate(raw)]


def _build_worker(raw: Any, index: int) -> Worker:
    if not isinstance(raw, dict):
        raise ExtractionFormatError(f"Worker at index {index} must be an object")
    values = {
        name: _optional_str(raw.get(name), f"workers[{index}].{name}") for name in _WORKER_FIELDS
    }
    certifications_raw = raw.get("certifications")
    if certifications_raw is None:
        certifications_raw = []
    if not isinstance(certifications_raw, list):
        raise ExtractionFormatError(f"Worker at index {index}: 'certifications' must be a list")
    certifications: list[Certification] = []
    for cert_index, item in enumerate(certifications_raw):
        certification = _build_certification(
            item, f"workers[{index}].certifications[{cert_index}]"
        )
        if certification is None:
            raise ExtractionFormatError(
                f"Worker at index {index}: certification {cert_index} must be an object"
            )
        certifications.append(certification)
    return Worker(**values, certifications=certifications)


def _build_certification(raw: Any, path: str) -> Certification | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ExtractionFormatError(f"'{path}' must be an object or null")
    values = {name: _optional_str(raw.get(name), f"{path}.{name}") for name in _CERTIFICATION_FIELDS}
    dates = {name: normalize_date(raw.get(name), f"{path}.{name}") for name in _DATE_FIELDS}
    return Certification(**values, **dates)


def _build_flag(raw: Any, name: str) -> bool:
    if raw is None:
        return False
    if not isinstance(raw, bool):
        raise ExtractionFormatError(f"'{name}' must be a boolean")
    return raw


def _optional_str(raw: Any, path: str) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ExtractionFormatError(f"'{path}' must be a string or null")
    value = raw.strip()
    return value or None
