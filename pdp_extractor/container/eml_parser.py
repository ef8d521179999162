"""RFC822 (.eml) container decomposition."""

import html
import re
from email import policy
from email.message import EmailMessage
from email.parser import BytesParser
from pathlib import PurePath
from typing import ClassVar

from pdp_extractor.container.base import BaseContainerParser
from pdp_extractor.container.exceptions import ContainerParseError
from pdp_extractor.container.models import ParsedContainer, RawAttachment
from pdp_extractor.logging.logger import Log


class EmlContainerParser(BaseContainerParser):
    """Parses an email into headers, body text and document attachments.

    Only attachments whose filename extension marks them as documents are
    kept: declared content types are unreliable in the wild, the filename is
    authoritative.
    """

    RELEVANT_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {"pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "txt"}
    )

    _TAG_RE: ClassVar[re.Pattern[str]] = re.compile(r"<[^>]+>")
    _BLOCK_TAG_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"<\s*(br|/p|/div|/tr|/li|/h\d)\b[^>]*>", re.IGNORECASE
    )
    _HIDDEN_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"<(script|style)\b.*?</\1\s*>", re.IGNORECASE | re.DOTALL
    )
    _BLANK_LINES_RE: ClassVar[re.Pattern[str]] = re.compile(r"\n\s*\n\s*\n+")

    def parse(self, data: bytes, filename: str = "message.eml") -> ParsedContainer:
        if not isinstance(data, (bytes, bytearray)) or not data.strip():
            raise ContainerParseError(f"{filename}: empty or non-binary container")
        try:
            message = BytesParser(policy=policy.default).parsebytes(bytes(data))
            container = self._build_container(message)
        except ContainerParseError:
            raise
        except Exception as exc:
            raise ContainerParseError(f"{filename}: failed to parse email: {exc}") from exc

        Log.info(
            f"Parsed {filename}: subject={container.subject!r}, "
            f"body {len(container.body_text)} chars, "
            f"{len(container.attachments)} relevant attachments"
        )
        return container

    def is_relevant(self, attachment_filename: str | None) -> bool:
        if not attachment_filename:
            return False
        return PurePath(attachment_filename).suffix.lower().lstrip(".") in self.RELEVANT_EXTENSIONS

    def _build_container(self, message: EmailMessage) -> ParsedContainer:
        if not message.keys():
            raise ContainerParseError("no RFC822 headers found")
        return ParsedContainer(
            subject=str(message.get("Subject", "") or ""),
            sender=str(message.get("From", "") or ""),
            recipients=str(message.get("To", "") or ""),
            body_text=self._body_text(message),
            attachments=self._attachments(message),
        )

    def _body_text(self, message: EmailMessage) -> str:
        body = message.get_body(preferencelist=("plain", "html"))
        if body is None:
            return ""
        content = self._part_text(body)
        if body.get_content_type() == "text/html":
            content = self._html_to_text(content)
        return content.strip()

    def _attachments(self, message: EmailMessage) -> list[RawAttachment]:
        attachments: list[RawAttachment] = []
        for part in message.walk():
            if part.is_multipart():
                continue
            raw_name = part.get_filename()
            if not self.is_relevant(raw_name):
                if raw_name:
                    Log.debug(f"Skipping attachment {raw_name} ({part.get_content_type()})")
                continue
            name = PurePath(str(raw_name).replace("\\", "/")).name
            payload = part.get_payload(decode=True) or b""
            attachments.append(
                RawAttachment(
                    filename=name,
                    content_type=part.get_content_type(),
                    payload=payload,
                )
            )
            Log.debug(f"Attachment {name} ({part.get_content_type()}) - {len(payload)} bytes")
        return attachments

    @staticmethod
    def _part_text(part: EmailMessage) -> str:
        try:
            content = part.get_content()
        except (LookupError, UnicodeDecodeError):
            payload = part.get_payload(decode=True) or b""
            return payload.decode("utf-8", errors="replace")
        if isinstance(content, bytes):
            return content.decode("utf-8", errors="replace")
        return str(content)

    def _html_to_text(self, markup: str) -> str:
        text = self._HIDDEN_RE.sub("", markup)
        text = self._BLOCK_TAG_RE.sub("\n", text)
        text = self._TAG_RE.sub("", text)
        text = html.unescape(text)
        return self._BLANK_LINES_RE.sub("\n\n", text)
