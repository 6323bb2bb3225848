"""Async LLM client routed through LiteLLM.

Two call shapes are used:

- ``complete()``: chat completion via ``litellm.acompletion()``; returns the
  first choice's content.
- ``complete_with_file()``: Responses-API call via ``litellm.aresponses()``
  with a document attached by URL; returns the concatenated output text.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Awaitable, Callable, TypeVar

from blueprint_ai.core.config import LLMConfig
from blueprint_ai.exceptions import NonRetryableError, RetryableError

log = logging.getLogger(__name__)

T = TypeVar("T")


class LLMClient:
    """Async LLM client using LiteLLM."""

    def __init__(self, config: LLMConfig) -> None:
        self._config = config

    @property
    def model(self) -> str:
        return self._config.model

    @staticmethod
    def _is_retryable(exc: Exception) -> bool:
        """Classify whether an LLM API error may be retried.

        Non-retryable: AuthenticationError, BadRequestError, NotFoundError (4xx non-429).
        Retryable (default): everything else including rate limits, timeouts, 5xx.
        """
        from litellm.exceptions import (
            AuthenticationError,
            BadRequestError,
            NotFoundError,
        )

        non_retryable = (AuthenticationError, BadRequestError, NotFoundError)
        return not isinstance(exc, non_retryable)

    def _connection_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"model": self._config.model}
        if self._config.api_key:
            kwargs["api_key"] = self._config.api_key
        if self._config.base_url:
            kwargs["api_base"] = self._config.base_url
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        return kwargs

    async def _call(self, fn: Callable[[], Awaitable[T]]) -> T:
        """Run ``fn`` with the configured attempt budget (one attempt by default)."""
        max_retries = self._config.max_retries
        last_error: Exception | None = None
        for attempt in range(max_retries):
            try:
                return await fn()
            except Exception as e:
                last_error = e
                if not self._is_retryable(e):
                    raise NonRetryableError(f"Non-retryable LLM error: {e}") from e

                if attempt < max_retries - 1:
                    base_wait = min(2 ** attempt, self._config.retry_max_delay)
                    wait = base_wait + random.uniform(0, base_wait * self._config.retry_jitter_factor)
                    log.warning(
                        "LLM retry %d/%d: %s (wait=%.1fs)",
                        attempt + 1, max_retries, e, wait,
                    )
                    await asyncio.sleep(wait)

        if max_retries == 1:
            raise RetryableError(f"LLM API call failed: {last_error}") from last_error
        raise RetryableError(
            f"LLM API failed after {max_retries} attempts: {last_error}"
        ) from last_error

    async def complete(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        temperature: float | None = None,
    ) -> str:
        """Single chat completion, returns the first choice's content (may be empty)."""
        from litellm import acompletion

        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        kwargs = self._connection_kwargs()
        kwargs["messages"] = messages
        effective_temp = temperature if temperature is not None else self._config.temperature
        if effective_temp is not None:
            kwargs["temperature"] = effective_temp

        response = await self._call(lambda: acompletion(**kwargs))
        return response.choices[0].message.content or ""

    async def complete_with_file(
        self,
        instruction: str,
        file_url: str,
        *,
        system_prompt: str | None = None,
    ) -> str:
        """Responses-API call with a document attached by URL.

        Returns the model's output text exactly as produced.
        """
        from litellm import aresponses

        input_items: list[dict[str, Any]] = []
        if system_prompt:
            input_items.append({"role": "system", "content": system_prompt})
        input_items.append(
            {
                "role": "user",
                "content": [
                    {"type": "input_text", "text": instruction},
                    {"type": "input_file", "file_url": file_url},
                ],
            }
        )

        kwargs = self._connection_kwargs()
        kwargs["input"] = input_items

        response = await self._call(lambda: aresponses(**kwargs))
        return self.output_text(response)

    @staticmethod
    def output_text(response: Any) -> str:
        """Collect the ``output_text`` parts of a Responses-API result."""
        direct = getattr(response, "output_text", None)
        if isinstance(direct, str):
            return direct

        def _get(obj: Any, key: str) -> Any:
            if isinstance(obj, dict):
                return obj.get(key)
            return getattr(obj, key, None)

        parts: list[str] = []
        for item in _get(response, "output") or []:
            if _get(item, "type") != "message":
                continue
            for content in _get(item, "content") or []:
                if _get(content, "type") == "output_text":
                    parts.append(_get(content, "text") or "")
        return "".join(parts)
