"""HTTP backend: drives a run against a running blueprint-ai server.

Mirrors a browser client of the API: one POST per document to
``/api/summarise-file`` followed by one POST to ``/api/generate-blueprint``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from blueprint_ai.exceptions import PromptTemplateError, SummarizationError, SynthesisError

log = logging.getLogger(__name__)

SUMMARISE_PATH = "/api/summarise-file"
BLUEPRINT_PATH = "/api/generate-blueprint"
PROMPT_TEMPLATE_PATH = "/api/prompt-template"


def _error_message(response: httpx.Response) -> str:
    """Pull the ``error`` field out of an error response, falling back to the status line."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"


class HTTPPipelineBackend:
    """Summarizer and synthesizer backed by the blueprint-ai HTTP API.

    No timeout is applied unless one is given; a stalled server stalls the run.

    Usage::

        async with HTTPPipelineBackend("http://localhost:8080") as backend:
            run = await BlueprintOrchestrator(backend, backend).run(urls, template)
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> HTTPPipelineBackend:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def summarize(self, file_url: str) -> str:
        log.debug("Requesting summary", extra={"file_url": file_url})
        try:
            response = await self._client.post(SUMMARISE_PATH, json={"fileUrl": file_url})
        except httpx.HTTPError as exc:
            raise SummarizationError(str(exc) or type(exc).__name__) from exc

        if response.is_error:
            raise SummarizationError(_error_message(response))
        return response.json().get("summary") or ""

    async def synthesize(self, prompt: str, summaries: str) -> str:
        """Return the blueprint text.

        Raises:
            SynthesisError: The server answered with an error payload or the
                request could not be sent.
        """
        try:
            response = await self._client.post(
                BLUEPRINT_PATH,
                json={"prompt": prompt, "summaries": summaries},
            )
        except httpx.HTTPError as exc:
            raise SynthesisError(str(exc) or type(exc).__name__) from exc

        if response.is_error:
            raise SynthesisError(_error_message(response))
        return response.json().get("blueprint") or ""

    async def fetch_prompt_template(self) -> str:
        """Fetch the server's blueprint template.

        Raises:
            PromptTemplateError: The template could not be retrieved or is empty.
        """
        try:
            response = await self._client.get(PROMPT_TEMPLATE_PATH)
        except httpx.HTTPError as exc:
            raise PromptTemplateError(f"Failed to load prompt: {exc}") from exc

        if response.is_error:
            raise PromptTemplateError(f"Failed to load prompt: {_error_message(response)}")
        prompt = response.json().get("prompt") or ""
        if not prompt:
            raise PromptTemplateError("Failed to load prompt: server returned an empty template")
        return prompt
