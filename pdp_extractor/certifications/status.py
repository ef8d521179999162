import calendar
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from pdp_extractor.structured.models import Certification, StructuredResult


class CertificationStatus(str, Enum):
    VALID = "valid"
    EXPIRING_SOON = "expiring_soon"
    EXPIRED = "expired"


@dataclass(frozen=True)
class CertificationAlert:
    """A certificate that is expired or expires within the warning window."""

    worker_name: str
    certification_name: str
    expiry_date: str
    days_until_expiry: int
    status: CertificationStatus


@dataclass(frozen=True)
class CertificationSummary:
    alerts: list[CertificationAlert] = field(default_factory=list)
    valid_count: int = 0
    expiring_soon_count: int = 0
    expired_count: int = 0


def certification_status(
    expiry_date: date,
    today: date,
    warning_months: int = 12,
) -> CertificationStatus:
    if expiry_date < today:
        return CertificationStatus.EXPIRED
    if expiry_date <= add_months(today, warning_months):
        return CertificationStatus.EXPIRING_SOON
    return CertificationStatus.VALID


def summarize_certifications(
    result: StructuredResult,
    today: date | None = None,
    warning_months: int = 12,
) -> CertificationSummary:
    """Classify every dated certificate of *result* against *today*.

    Certificates without an expiry date are not counted. Alerts are sorted
    by days until expiry, most urgent first.
    """
    today = today if today is not None else date.today()
    alerts: list[CertificationAlert] = []
    counts = {status: 0 for status in CertificationStatus}

    for worker_name, certification in _dated_certifications(result):
        expiry = date.fromisoformat(certification.expiry_date or "")
        status = certification_status(expiry, today, warning_months)
        counts[status] += 1
        if status is CertificationStatus.VALID:
            continue
        alerts.append(
            CertificationAlert(
                worker_name=worker_name,
                certification_name=(
                    certification.certification_name or certification.certification_type or ""
                ),
                expiry_date=expiry.isoformat(),
                days_until_expiry=(expiry - today).days,
                status=status,
            )
        )

    alerts.sort(key=lambda alert: alert.days_until_expiry)
    return CertificationSummary(
        alerts=alerts,
        valid_count=counts[CertificationStatus.VALID],
        expiring_soon_count=counts[CertificationStatus.EXPIRING_SOON],
        expired_count=counts[CertificationStatus.EXPIRED],
    )


def check_certifications(
    result: StructuredResult,
    today: date | None = None,
    warning_months: int = 12,
) -> list[CertificationAlert]:
    """Return alerts for expired and soon-to-expire certificates, most urgent first."""
    return summarize_certifications(result, today, warning_months).alerts


def add_months(day: date, months: int) -> date:
    """Shift *day* by whole months, clamping to the last day of the target month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _dated_certifications(result: StructuredResult) -> list[tuple[str, Certification]]:
    dated = [
        (worker.full_name, certification)
        for worker in result.workers
        for certification in worker.certifications
        if certification.expiry_date
    ]
    if result.certification is not None and result.certification.expiry_date:
        dated.append(("", result.certification))
    return dated
