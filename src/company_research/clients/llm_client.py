"""Claude API wrapper with async support, retry logic and structured output."""

from __future__ import annotations

import logging
from typing import TypeVar

import anthropic
from pydantic import BaseModel, ValidationError
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential

from company_research.errors import ExtractionError
from company_research.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class LLMClient:
    """Async Claude API client with exponential-backoff retries.

    Safe to share between concurrent requests: token usage is reported to the
    caller's ``usage`` list instead of being kept on the client.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        max_retries: int = 3,
    ):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self.max_retries = max_retries

    async def _call_api(self, **kwargs) -> anthropic.types.Message:
        """Make the actual API call with retry logic."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(min=1, max=10),
            reraise=True,
        ):
            with attempt:
                return await self.client.messages.create(**kwargs)

    async def generate_structured(
        self,
        prompt: str,
        schema: type[ModelT],
        *,
        system: str = "",
        tool_name: str = "structured_output",
        model: str = "claude-haiku-4-5-20251001",
        temperature: float = 0.0,
        max_tokens: int = 4096,
        usage: list[tuple[str, int, int]] | None = None,
    ) -> ModelT:
        """Ask Claude for output constrained to ``schema``.

        The schema is offered as the only tool and the model is forced to call
        it. The tool input (or, failing that, JSON found in a text reply) is
        validated against ``schema``. Any failure raises ExtractionError.

        When ``usage`` is given, one (model, input_tokens, output_tokens)
        entry is appended to it for the call.
        """
        logger.debug("Structured LLM call: model=%s, tool=%s", model, tool_name)
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
            "tools": [
                {
                    "name": tool_name,
                    "description": schema.__doc__ or f"Record a {schema.__name__}.",
                    "input_schema": schema.model_json_schema(),
                }
            ],
            "tool_choice": {"type": "tool", "name": tool_name},
        }
        if system:
            kwargs["system"] = system
        try:
            message = await self._call_api(**kwargs)
        except Exception as exc:
            logger.error("LLM call failed", exc_info=True)
            raise ExtractionError(f"Language model call failed: {exc}") from exc

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        if usage is not None:
            usage.append((model, input_tokens, output_tokens))

        payload = _structured_payload(message, tool_name)
        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            logger.error("LLM output failed %s validation: %s", schema.__name__, exc)
            raise ExtractionError(
                f"Model output does not match {schema.__name__}: {exc}"
            ) from exc


def _structured_payload(message: anthropic.types.Message, tool_name: str) -> dict:
    """Pull the structured object out of a Claude message."""
    for block in message.content:
        if getattr(block, "type", None) == "tool_use" and block.name == tool_name:
            return block.input

    text = "".join(
        block.text for block in message.content if getattr(block, "type", None) == "text"
    )
    try:
        data = extract_json(text)
    except ValueError as exc:
        raise ExtractionError("Model returned neither a tool call nor JSON") from exc
    if not isinstance(data, dict):
        raise ExtractionError(f"Expected JSON object from LLM, got {type(data).__name__}")
    return data
