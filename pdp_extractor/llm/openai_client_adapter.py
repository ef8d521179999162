import base64
from typing import Any

import httpx
import openai

from pdp_extractor.llm.client_base import BaseLLMClient
from pdp_extractor.llm.exceptions import LLMError, LLMNetworkError
from pdp_extractor.logging.logger import Log


class OpenAIClientAdapter(BaseLLMClient):
    """LLM client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        return self._complete(
            model=model,
            temperature=temperature,
            response_format={"type": "json_object"},
            messages=messages,
        )

    def create_vision_completion(
        self,
        *,
        model: str,
        prompt: str,
        images: list[bytes],
        max_tokens: int,
    ) -> str:
        content: list[dict[str, Any]] = [{"type": "text", "text": prompt}]
        content.extend(
            {
                "type": "image_url",
                "image_url": {"url": f"data:image/png;base64,{base64.b64encode(image).decode('ascii')}"},
            }
            for image in images
        )
        return self._complete(
            model=model,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": content}],
        )

    def _complete(self, **request: Any) -> str:
        try:
            response = self._client.chat.completions.create(**request)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LLMNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise LLMNetworkError(f"AI provider API error: {exc}") from exc

        usage = getattr(response, "usage", None)
        if usage is not None:
            Log.info(
                f"LLM usage for {request['model']}: "
                f"prompt={usage.prompt_tokens} completion={usage.completion_tokens} "
                f"total={usage.total_tokens} tokens"
            )

        if not response.choices:
            raise LLMError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LLMError("AI returned empty response")
        return content
