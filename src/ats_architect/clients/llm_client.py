"""Async Claude API wrapper with retries and token accounting."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anthropic
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential

from ats_architect.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"


@dataclass
class LLMResponse:
    """Response text plus usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Claude client; only the raw API call is retried."""

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
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(
        self,
        prompt: str,
        system: str,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> anthropic.types.Message:
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(min=1, max=10),
            reraise=True,
        ):
            with attempt:
                return await self.client.messages.create(**kwargs)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage."""
        logger.debug("LLM call: model=%s", model)
        try:
            message = await self._call_api(
                prompt=prompt,
                system=system,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception:
            logger.error("LLM call failed", exc_info=True)
            raise
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        text = "".join(block.text for block in message.content if getattr(block, "type", "text") == "text")
        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)

    async def generate_json(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ) -> dict | list:
        """Send a prompt and parse JSON out of the response."""
        response = await self.generate(
            prompt=prompt,
            system=system,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return extract_json(response.text)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
