from pathlib import Path

from pdp_extractor.llm.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

EXTRACTION_PROMPT = "extraction_prompt.txt"
EXTRACTION_SCHEMA = "extraction_schema.json"
VISION_OCR_PROMPT = "vision_ocr_prompt.txt"


def load_prompt_template(name: str = EXTRACTION_PROMPT, path: Path | None = None) -> str:
    """Load a prompt template from a file.

    Args:
        name: File name of a bundled prompt under ``llm/prompts``.
        path: Explicit path overriding the bundled file.

    Returns:
        The raw template string with placeholders.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the structured-extraction JSON schema.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / EXTRACTION_SCHEMA
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load JSON schema: {exc}") from exc
