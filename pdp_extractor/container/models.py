from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawAttachment:
    """A document attachment pulled out of a container, before text extraction."""

    filename: str
    content_type: str
    payload: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.payload)


@dataclass(frozen=True)
class ParsedContainer:
    """Header metadata, body text and relevant attachments of one input file."""

    subject: str = ""
    sender: str = ""
    recipients: str = ""
    body_text: str = ""
    attachments: list[RawAttachment] = field(default_factory=list)

    @property
    def header_text(self) -> str:
        lines = [
            f"{label}: {value}"
            for label, value in (
                ("Subject", self.subject),
                ("From", self.sender),
                ("To", self.recipients),
            )
            if value
        ]
        return "\n".join(lines)
