from abc import ABC, abstractmethod


class BaseLLMClient(ABC):
    """Contract for provider-specific LLM clients.

    One instance is built at startup and injected into both the vision OCR
    tier and the structured extractor.
    """

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider's JSON-object response as plain text."""

    @abstractmethod
    def create_vision_completion(
        self,
        *,
        model: str,
        prompt: str,
        images: list[bytes],
        max_tokens: int,
    ) -> str:
        """Return the provider's free-text answer about PNG page images."""
