from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from pdp_extractor.llm.exceptions import LLMError, LLMNetworkError
from pdp_extractor.llm.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    response.usage.prompt_tokens = 10
    response.usage.completion_tokens = 5
    response.usage.total_tokens = 15
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "pdp_extractor.llm.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


def _chat(adapter: OpenAIClientAdapter, system_prompt: str = "system") -> str:
    return adapter.create_chat_completion(
        model="m",
        temperature=0.0,
        system_prompt=system_prompt,
        user_prompt="user",
    )


class TestChatCompletion:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        assert _chat(_make_adapter(mock_client)) == '{"ok": true}'

    def test_requests_json_object(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _chat(_make_adapter(mock_client))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["temperature"] == 0.0
        assert kwargs["messages"][-1] == {"role": "user", "content": "user"}

    def test_omits_empty_system_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _chat(_make_adapter(mock_client), system_prompt="")
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert [m["role"] for m in messages] == ["user"]

    def test_passes_timeout_and_base_url(self) -> None:
        with patch("pdp_extractor.llm.openai_client_adapter.openai.OpenAI") as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="http://x/v1")
        mock_cls.assert_called_once_with(api_key="k", timeout=12, base_url="http://x/v1")

    def test_logs_token_usage(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        adapter = _make_adapter(mock_client)
        with patch("pdp_extractor.llm.openai_client_adapter.Log") as mock_log:
            _chat(adapter)
        assert any("total=15" in c.args[0] for c in mock_log.info.call_args_list)

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(LLMError, match="empty response"):
            _chat(_make_adapter(mock_client))

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = _make_mock_response("{}")
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(LLMError, match="no choices"):
            _chat(_make_adapter(mock_client))


class TestNetworkErrors:
    def test_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(LLMNetworkError, match="network error"):
            _chat(_make_adapter(mock_client))

    def test_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(LLMNetworkError, match="network error"):
            _chat(_make_adapter(mock_client))

    def test_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(LLMNetworkError, match="API error"):
            _chat(_make_adapter(mock_client))


class TestVisionCompletion:
    def test_sends_base64_png_parts(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("GWO 2025")
        adapter = _make_adapter(mock_client)
        result = adapter.create_vision_completion(
            model="vision",
            prompt="Transcribe",
            images=[b"\x89PNG-one", b"\x89PNG-two"],
            max_tokens=256,
        )
        assert result == "GWO 2025"
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["max_tokens"] == 256
        content = kwargs["messages"][0]["content"]
        assert content[0] == {"type": "text", "text": "Transcribe"}
        assert len(content) == 3
        assert content[1]["image_url"]["url"].startswith("data:image/png;base64,")
