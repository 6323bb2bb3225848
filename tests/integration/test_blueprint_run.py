"""End-to-end runs: orchestrator over HTTP against the real routers, LLM mocked."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi import FastAPI

from blueprint_ai.api.middleware.error_handler import register_error_handlers
from blueprint_ai.api.routes import blueprint, summarise
from blueprint_ai.blueprint import parse_blueprint
from blueprint_ai.models import ProcessingStatus
from blueprint_ai.pipeline import BlueprintOrchestrator, HTTPPipelineBackend
from blueprint_ai.providers.llm_client import LLMClient
from blueprint_ai.services import BlueprintService, SummarizationService
from tests.fakes.fake_llm import chat_response, make_llm_config, responses_response


def _build_app() -> FastAPI:
    """App with real services; state is set directly since ASGITransport skips lifespan."""
    client = LLMClient(make_llm_config())
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(summarise.router, prefix="/api")
    app.include_router(blueprint.router, prefix="/api")
    app.state.prompt_template = "TEMPLATE"
    app.state.summarization_service = SummarizationService(client)
    app.state.blueprint_service = BlueprintService(client)
    return app


def _backend(app: FastAPI) -> HTTPPipelineBackend:
    client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
    return HTTPPipelineBackend("http://testserver", client=client)


class TestHTTPRun:
    @pytest.mark.asyncio
    async def test_full_run(self, two_urls: list[str], sample_blueprint_text: str) -> None:
        async def _mock_aresponses(**kwargs):
            file_url = kwargs["input"][-1]["content"][1]["file_url"]
            return responses_response(f"summary of {file_url.rsplit('/', 1)[-1]}")

        app = _build_app()
        with (
            patch("litellm.aresponses", side_effect=_mock_aresponses),
            patch("litellm.acompletion", new_callable=AsyncMock) as mock_acomp,
        ):
            mock_acomp.return_value = chat_response(f"```json\n{sample_blueprint_text}\n```")
            async with _backend(app) as backend:
                prompt = await backend.fetch_prompt_template()
                run = await BlueprintOrchestrator(backend, backend).run(two_urls, prompt)

        assert run.count(ProcessingStatus.DONE) == 2
        assert run.aggregate == (
            "\n### labs%20March.pdf\nsummary of labs%20March.pdf"
            "\n\n"
            "\n### mammogram.pdf\nsummary of mammogram.pdf"
        )
        sent = mock_acomp.call_args.kwargs["messages"][-1]["content"]
        assert sent.startswith("TEMPLATE\n\n\n Below is the summary")
        assert sent.endswith(run.aggregate)
        assert parse_blueprint(run.blueprint).personalized_health_profile.name == "Jane Doe"

    @pytest.mark.asyncio
    async def test_failed_document_and_failed_synthesis(self, two_urls: list[str]) -> None:
        async def _mock_aresponses(**kwargs):
            file_url = kwargs["input"][-1]["content"][1]["file_url"]
            if file_url == two_urls[0]:
                raise RuntimeError("file could not be downloaded")
            return responses_response("second summary")

        app = _build_app()
        with (
            patch("litellm.aresponses", side_effect=_mock_aresponses),
            patch("litellm.acompletion", new_callable=AsyncMock) as mock_acomp,
        ):
            mock_acomp.side_effect = RuntimeError("model overloaded")
            async with _backend(app) as backend:
                run = await BlueprintOrchestrator(backend, backend).run(two_urls, "TEMPLATE")

        first, second = (run.status_of(r) for r in run.references)
        assert first.state is ProcessingStatus.ERROR
        assert first.error == "LLM API call failed: file could not be downloaded"
        assert second.state is ProcessingStatus.DONE
        assert run.aggregate == "\n### mammogram.pdf\nsecond summary"
        assert run.blueprint_error == "LLM API call failed: model overloaded"
        assert run.blueprint == "No blueprint generated."
