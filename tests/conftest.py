import io
from email.message import EmailMessage

import openpyxl
import pytest
from reportlab.lib.pagesizes import A4, letter
from reportlab.pdfgen import canvas

CERTIFICATE_LINES = [
    "GLOBAL WIND ORGANISATION - Basic Safety Training",
    "Working at Heights module completed by Jane Doe",
    "Training provider: North Sea Safety Academy, Esbjerg",
    "Date of issue: 14/03/2023",
    "Valid until: 13/03/2025",
]


def _pdf(pages: list[list[str]], pagesize: tuple[float, float] = letter) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=pagesize)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def certificate_pdf_bytes() -> bytes:
    """Generate a certificate-like PDF with well over 100 characters of text."""
    return _pdf([CERTIFICATE_LINES], pagesize=A4)


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf([[]])


@pytest.fixture()
def blank_multi_page_pdf_bytes() -> bytes:
    """Generate a five-page PDF without any text, like an image-only scan."""
    return _pdf([[] for _ in range(5)])


@pytest.fixture()
def xlsx_bytes() -> bytes:
    """Generate a workbook with a workers sheet and a company sheet."""
    workbook = openpyxl.Workbook()
    workers = workbook.active
    workers.title = "Workers"
    workers.append(["First name", "Last name", "GWO expiry"])
    workers.append(["Jane", "Doe", "2025-03-13"])
    workers.append([None, None, None])
    workers.append(["Elie", "Amour", "2026-06-30"])
    company = workbook.create_sheet("Company")
    company.append(["Name", "Windserv SAS"])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def eml_bytes(certificate_pdf_bytes: bytes, xlsx_bytes: bytes) -> bytes:
    """Generate an email with a body, two document attachments and one ignored image."""
    message = EmailMessage()
    message["Subject"] = "PDP intervention Parc Eolien des Hauts"
    message["From"] = "hse@windserv.example"
    message["To"] = "site@windfarm.example"
    message.set_content(
        "Bonjour,\n\nPlease find attached the certificates of our technicians.\n"
        "Company: Windserv SAS, 12 rue du Vent, Nantes\n"
    )
    message.add_attachment(
        certificate_pdf_bytes,
        maintype="application",
        subtype="pdf",
        filename="GWO-WAH_Jane Doe.pdf",
    )
    message.add_attachment(
        xlsx_bytes,
        maintype="application",
        subtype="vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        filename="workers.xlsx",
    )
    message.add_attachment(
        b"\x89PNG\r\n\x1a\n fake image",
        maintype="image",
        subtype="png",
        filename="logo.png",
    )
    return message.as_bytes()
