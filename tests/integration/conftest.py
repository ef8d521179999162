from email.message import EmailMessage

import pytest

from pdp_extractor.config.settings import Settings
from pdp_extractor.llm.example_client_adapter import ExampleClientAdapter


@pytest.fixture()
def example_settings() -> Settings:
    """Settings wired to the offline example LLM provider."""
    return Settings(llm_provider="example", vision_enabled=True, vision_max_pages=1)


@pytest.fixture()
def example_client() -> ExampleClientAdapter:
    return ExampleClientAdapter(
        response={
            "company": {"name": "Windserv SAS", "address": "12 rue du Vent, Nantes"},
            "workers": [
                {
                    "first_name": "Jane",
                    "last_name": "Doe",
                    "certifications": [
                        {
                            "certification_type": "GWO",
                            "certification_name": "GWO Working at Heights",
                            "issue_date": "14/03/2023",
                            "expiry_date": "13/03/2025",
                        }
                    ],
                }
            ],
            "certification": None,
            "risk_analysis": True,
            "operational_mode": False,
        }
    )


@pytest.fixture()
def scanned_certificate_eml_bytes(blank_multi_page_pdf_bytes: bytes) -> bytes:
    """Generate an email whose only certificate is an image-only scan."""
    message = EmailMessage()
    message["Subject"] = "Certificats techniciens"
    message["From"] = "hse@windserv.example"
    message["To"] = "site@windfarm.example"
    message.set_content("Voir la piece jointe.\n")
    message.add_attachment(
        blank_multi_page_pdf_bytes,
        maintype="application",
        subtype="pdf",
        filename="GWO-WAH_Jane Doe.pdf",
    )
    return message.as_bytes()
