"""Tests for LLMClient (Claude API wrapper)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from company_research.clients.llm_client import LLMClient
from company_research.errors import ExtractionError
from company_research.models.company import CompanyProfile

TOOL = "company_info_extraction"


def _text_block(text: str) -> MagicMock:
    return MagicMock(type="text", text=text)


def _tool_block(payload: dict, name: str = TOOL) -> MagicMock:
    block = MagicMock(type="tool_use", input=payload)
    block.name = name
    return block


def _make_api_message(
    *blocks: MagicMock, input_tokens: int = 100, output_tokens: int = 50
) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = list(blocks)
    return message


def _client_returning(mock_cls, *side_effect) -> MagicMock:
    mock_client = MagicMock()
    mock_client.messages.create = AsyncMock(side_effect=list(side_effect))
    mock_cls.return_value = mock_client
    return mock_client


class TestLLMClientInit:
    def test_init_default_creates_client_with_no_kwargs(self):
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient()
            mock_cls.assert_called_once_with()

    def test_init_with_both_params_passes_both(self):
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key", timeout=30.0)
            mock_cls.assert_called_once_with(api_key="test-key", timeout=30.0)


class TestLLMClientGenerateStructured:
    async def test_tool_call_validated_into_schema(self):
        payload = {"company_name": "Acme Corp", "ceo": "Wile E. Coyote"}
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = _client_returning(mock_cls, _make_api_message(_tool_block(payload)))
            llm = LLMClient()
            profile = await llm.generate_structured(
                "extract", CompanyProfile, system="sys", tool_name=TOOL
            )

        assert profile == CompanyProfile(company_name="Acme Corp", ceo="Wile E. Coyote")
        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["tool_choice"] == {"type": "tool", "name": TOOL}
        assert kwargs["tools"][0]["input_schema"] == CompanyProfile.model_json_schema()
        assert kwargs["system"] == "sys"

    async def test_text_reply_with_json_is_accepted(self):
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                _make_api_message(_text_block('```json\n{"company_name": "Acme Corp"}\n```')),
            )
            llm = LLMClient()
            profile = await llm.generate_structured("extract", CompanyProfile, tool_name=TOOL)

        assert profile.company_name == "Acme Corp"

    async def test_schema_violation_raises_extraction_error(self):
        payload = {"ceo": "Nobody"}
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, _make_api_message(_tool_block(payload)))
            llm = LLMClient()
            with pytest.raises(ExtractionError, match="CompanyProfile"):
                await llm.generate_structured("extract", CompanyProfile, tool_name=TOOL)

    async def test_free_text_reply_raises_extraction_error(self):
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, _make_api_message(_text_block("I cannot help with that.")))
            llm = LLMClient()
            with pytest.raises(ExtractionError):
                await llm.generate_structured("extract", CompanyProfile, tool_name=TOOL)

    async def test_api_failure_raises_extraction_error(self):
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(mock_cls, RuntimeError("connection reset"))
            llm = LLMClient(max_retries=1)
            with pytest.raises(ExtractionError, match="connection reset"):
                await llm.generate_structured("extract", CompanyProfile, tool_name=TOOL)

    async def test_retries_transient_failure(self):
        """A failed API call is retried before the reply is validated."""
        payload = {"company_name": "Acme Corp"}
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = _client_returning(
                mock_cls, RuntimeError("overloaded"), _make_api_message(_tool_block(payload))
            )
            llm = LLMClient(max_retries=2)
            profile = await llm.generate_structured("extract", CompanyProfile, tool_name=TOOL)

        assert profile.company_name == "Acme Corp"
        assert mock_client.messages.create.await_count == 2

    async def test_schema_violation_not_retried(self):
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = _client_returning(mock_cls, _make_api_message(_tool_block({})))
            llm = LLMClient(max_retries=3)
            with pytest.raises(ExtractionError):
                await llm.generate_structured("extract", CompanyProfile, tool_name=TOOL)

        assert mock_client.messages.create.await_count == 1

    async def test_usage_appended_to_caller_list(self):
        payload = {"company_name": "Acme Corp"}
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            _client_returning(
                mock_cls,
                _make_api_message(_tool_block(payload), input_tokens=20, output_tokens=8),
            )
            llm = LLMClient()
            usage: list[tuple[str, int, int]] = []
            await llm.generate_structured(
                "extract",
                CompanyProfile,
                tool_name=TOOL,
                model="claude-haiku-4-5-20251001",
                usage=usage,
            )

        assert usage == [("claude-haiku-4-5-20251001", 20, 8)]

    async def test_tool_schema_advertises_news_limit(self):
        payload = {"company_name": "Acme Corp"}
        with patch("company_research.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = _client_returning(mock_cls, _make_api_message(_tool_block(payload)))
            llm = LLMClient()
            await llm.generate_structured("extract", CompanyProfile, tool_name=TOOL)

        schema = mock_client.messages.create.call_args.kwargs["tools"][0]["input_schema"]
        assert schema["properties"]["latest_news_stories"]["maxItems"] == 2
