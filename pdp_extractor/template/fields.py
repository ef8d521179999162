"""Flat placeholder map consumed by the PDP document template renderer."""

import re
from datetime import date

from pdp_extractor.structured.models import StructuredResult, Worker

MAX_TECHNICIANS = 10

_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|\s]+")


def build_template_fields(result: StructuredResult, windfarm_name: str) -> dict[str, str]:
    """Map a structured result to template placeholder values.

    Technician slots are numbered from 1 over the workers that have a name,
    at most ``MAX_TECHNICIANS``; unused slots are left out entirely so the
    renderer can drop their table rows. ``technician{i}_name`` holds the last
    name and ``technician{i}_surname`` the first name, as the template expects.
    """
    company = result.company
    fields: dict[str, str] = {
        "windfarm_name": windfarm_name or "",
        "company_name": company.name or "",
        # the template spells it with one "d"
        "company_adress": company.address or "",
        "company_legal_representant_name": company.legal_representative_name or "",
        "company_legal_representant_phone": company.legal_representative_phone or "",
        "company_legal_representant_email": company.legal_representative_email or "",
        "company_hse_responsible": company.hse_responsible or "",
    }

    named_workers = [worker for worker in result.workers if _has_name(worker)]
    for slot, worker in enumerate(named_workers[:MAX_TECHNICIANS], start=1):
        fields[f"technician{slot}_name"] = worker.last_name or ""
        fields[f"technician{slot}_surname"] = worker.first_name or ""

    fields["risk_analysis"] = _oui_non(result.risk_analysis)
    fields["operational_mode"] = _oui_non(result.operational_mode)
    return fields


def generated_document_filename(windfarm_name: str, on: date | None = None) -> str:
    """Return ``PDP_<windfarm>_<YYYY-MM-DD>.docx`` with path-unsafe characters replaced."""
    day = on if on is not None else date.today()
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", windfarm_name.strip()).strip("_") or "windfarm"
    return f"PDP_{safe_name}_{day.isoformat()}.docx"


def _has_name(worker: Worker) -> bool:
    return bool(worker.first_name or worker.last_name)


def _oui_non(flag: bool) -> str:
    return "Oui" if flag else "Non"
