from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    llm_provider: str = "openai"
    llm_api_key: str = ""
    llm_base_url: str = ""
    llm_model_name: str = "gpt-4o-mini"
    llm_vision_model_name: str = "gpt-4o-mini"
    llm_timeout_seconds: int = 60
    llm_temperature: float = 0.0

    pdf_native_engine: str = "pdfplumber"
    pdf_fallback_engine: str = "pymupdf"
    pdf_min_text_chars: int = 100
    pdf_fallback_max_pages: int = 10

    vision_enabled: bool = True
    vision_min_text_chars: int = 50
    vision_max_pages: int = Field(default=1, ge=1, le=3)
    vision_dpi: int = 200
    vision_max_dimension: int = 2000
    vision_max_tokens: int = 4096

    aggregate_segment_max_chars: int = 10_000

    batch_max_workers: int = Field(default=1, ge=1)
    progress_queue_size: int = 256

    certification_warning_months: int = 12
