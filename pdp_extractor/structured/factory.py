from pdp_extractor.config.settings import Settings
from pdp_extractor.llm.client_base import BaseLLMClient
from pdp_extractor.structured.base import BaseStructuredExtractor
from pdp_extractor.structured.extractor import StructuredExtractor


class StructuredExtractorFactory:
    """Creates the structured extractor on top of the shared LLM client."""

    @classmethod
    def create(cls, settings: Settings, llm_client: BaseLLMClient) -> BaseStructuredExtractor:
        model = "example" if settings.llm_provider.lower() == "example" else settings.llm_model_name
        return StructuredExtractor(
            client=llm_client,
            model=model,
            temperature=settings.llm_temperature,
        )
