from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class Certification:
    """A training certificate. Dates are ISO ``YYYY-MM-DD`` or None."""

    certification_type: str | None = None
    certification_name: str | None = None
    issue_date: str | None = None
    expiry_date: str | None = None


@dataclass(frozen=True)
class Worker:
    """A technician who will work on site."""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: str | None = None
    certifications: list[Certification] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@dataclass(frozen=True)
class Company:
    """The contractor performing the intervention."""

    name: str | None = None
    address: str | None = None
    legal_representative_name: str | None = None
    legal_representative_phone: str | None = None
    legal_representative_email: str | None = None
    hse_responsible: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class StructuredResult:
    """Output of the structured extraction step for one or more files."""

    company: Company = field(default_factory=Company)
    workers: list[Worker] = field(default_factory=list)
    certification: Certification | None = None
    risk_analysis: bool = False
    operational_mode: bool = False
