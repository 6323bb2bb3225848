"""Tests for the HTTP pipeline backend against a mocked transport."""

from __future__ import annotations

import json

import httpx
import pytest

from blueprint_ai.exceptions import PromptTemplateError, SummarizationError, SynthesisError
from blueprint_ai.pipeline import HTTPPipelineBackend


def _backend(handler) -> HTTPPipelineBackend:
    client = httpx.AsyncClient(base_url="http://server", transport=httpx.MockTransport(handler))
    return HTTPPipelineBackend("http://server", client=client)


class TestSummarize:
    @pytest.mark.asyncio
    async def test_posts_file_url(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"summary": "S"})

        async with _backend(handler) as backend:
            assert await backend.summarize("https://x.example/a.pdf") == "S"

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/api/summarise-file"
        assert json.loads(seen[0].content) == {"fileUrl": "https://x.example/a.pdf"}

    @pytest.mark.asyncio
    async def test_error_payload_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "LLM API call failed: 503"})

        async with _backend(handler) as backend:
            with pytest.raises(SummarizationError, match="LLM API call failed: 503"):
                await backend.summarize("https://x.example/a.pdf")

    @pytest.mark.asyncio
    async def test_non_json_error_uses_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with _backend(handler) as backend:
            with pytest.raises(SummarizationError, match="HTTP 502"):
                await backend.summarize("https://x.example/a.pdf")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _backend(handler) as backend:
            with pytest.raises(SummarizationError, match="connection refused"):
                await backend.summarize("https://x.example/a.pdf")


class TestSynthesize:
    @pytest.mark.asyncio
    async def test_posts_prompt_and_summaries(self) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"blueprint": "{}"})

        async with _backend(handler) as backend:
            assert await backend.synthesize("P", "S") == "{}"
        assert bodies == [{"prompt": "P", "summaries": "S"}]

    @pytest.mark.asyncio
    async def test_missing_blueprint_is_empty(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"blueprint": None})

        async with _backend(handler) as backend:
            assert await backend.synthesize("P", "S") == ""

    @pytest.mark.asyncio
    async def test_error_payload_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "Unknown error"})

        async with _backend(handler) as backend:
            with pytest.raises(SynthesisError, match="Unknown error"):
                await backend.synthesize("P", "S")


class TestFetchPromptTemplate:
    @pytest.mark.asyncio
    async def test_returns_prompt(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/prompt-template"
            return httpx.Response(200, json={"prompt": "Write JSON."})

        async with _backend(handler) as backend:
            assert await backend.fetch_prompt_template() == "Write JSON."

    @pytest.mark.asyncio
    async def test_empty_prompt_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"prompt": ""})

        async with _backend(handler) as backend:
            with pytest.raises(PromptTemplateError, match="empty template"):
                await backend.fetch_prompt_template()

    @pytest.mark.asyncio
    async def test_not_found_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "Not Found"})

        async with _backend(handler) as backend:
            with pytest.raises(PromptTemplateError, match="HTTP 404"):
                await backend.fetch_prompt_template()


@pytest.mark.asyncio
async def test_injected_client_is_not_closed() -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
    async with HTTPPipelineBackend("http://server", client=client):
        pass
    assert not client.is_closed
    await client.aclose()
