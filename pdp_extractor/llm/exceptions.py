class LLMError(Exception):
    """Raised when an LLM call does not produce a usable response."""


class LLMNetworkError(LLMError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class PromptLoadError(LLMError):
    """Raised when a bundled prompt or schema file cannot be read."""
