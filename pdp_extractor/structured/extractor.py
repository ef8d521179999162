"""LLM-backed structured extraction of PDP paperwork."""

import json
import re
from pathlib import Path

from pdp_extractor.llm.client_base import BaseLLMClient
from pdp_extractor.llm.prompt_loader import EXTRACTION_PROMPT, load_json_schema, load_prompt_template
from pdp_extractor.logging.logger import Log
from pdp_extractor.structured.base import BaseStructuredExtractor
from pdp_extractor.structured.exceptions import ExtractionFormatError
from pdp_extractor.structured.models import StructuredResult
from pdp_extractor.structured.validator import validate_and_build

_OPENING_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*")
_CLOSING_FENCE_RE = re.compile(r"\s*```$")


class StructuredExtractor(BaseStructuredExtractor):
    """Extracts company, workers and certifications from aggregated text with one LLM call."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(EXTRACTION_PROMPT, prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    def extract(self, text: str) -> StructuredResult:
        """Send the aggregated text once and validate the JSON answer."""
        prompt = self._build_prompt(text)
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        result = validate_and_build(parsed)

        Log.info(
            f"Structured extraction complete: company={result.company.name!r}, "
            f"{len(result.workers)} workers"
        )
        return result

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            aggregated_text=text,
            json_schema=self._json_schema,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            cleaned = _OPENING_FENCE_RE.sub("", cleaned)
            cleaned = _CLOSING_FENCE_RE.sub("", cleaned)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionFormatError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ExtractionFormatError("JSON response must be an object")
        return parsed
