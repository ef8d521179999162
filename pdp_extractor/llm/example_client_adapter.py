"""Example LLM client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLLMClient and register the provider in LLMClientFactory.
"""

import json
from typing import ClassVar

from pdp_extractor.llm.client_base import BaseLLMClient


class ExampleClientAdapter(BaseLLMClient):
    """Example adapter that returns fixed, schema-valid responses.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters (OpenAI, Anthropic, etc.).
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "company": {
            "name": None,
            "address": None,
            "legal_representative_name": None,
            "legal_representative_phone": None,
            "legal_representative_email": None,
            "hse_responsible": None,
        },
        "workers": [],
        "certification": None,
        "risk_analysis": False,
        "operational_mode": False,
    }

    DEFAULT_TRANSCRIPTION: ClassVar[str] = ""

    def __init__(
        self,
        response: dict[str, object] | None = None,
        transcription: str | None = None,
    ) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE
        self._transcription = (
            transcription if transcription is not None else self.DEFAULT_TRANSCRIPTION
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return json.dumps(self._response)

    def create_vision_completion(
        self,
        *,
        model: str,
        prompt: str,
        images: list[bytes],
        max_tokens: int,
    ) -> str:
        _ = model, prompt, images, max_tokens
        return self._transcription
