"""Tests for the summarization and blueprint services."""

from __future__ import annotations

import pytest

from blueprint_ai.exceptions import MissingInputError, NonRetryableError
from blueprint_ai.prompts import get_prompt
from blueprint_ai.services import BlueprintService, SummarizationService, build_blueprint_prompt
from tests.fakes.fake_llm import FakeLLMClient


class TestSummarizationService:
    @pytest.mark.asyncio
    async def test_returns_raw_model_output(self) -> None:
        client = FakeLLMClient(file_output='  {"summary": "ok"}\n')
        service = SummarizationService(client)

        result = await service.summarize("https://x.example/a.pdf")

        assert result == '  {"summary": "ok"}\n'
        call = client.file_calls[0]
        assert call["file_url"] == "https://x.example/a.pdf"
        assert call["instruction"] == get_prompt("SUMMARIZE_USER_PROMPT")
        assert call["system_prompt"] == get_prompt("SUMMARIZE_SYSTEM_PROMPT")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("file_url", [None, "", "   "])
    async def test_missing_url_makes_no_call(self, file_url: str | None) -> None:
        client = FakeLLMClient()
        with pytest.raises(MissingInputError, match="fileUrl is required"):
            await SummarizationService(client).summarize(file_url)
        assert client.file_calls == []

    @pytest.mark.asyncio
    async def test_upstream_errors_propagate(self) -> None:
        client = FakeLLMClient(error=NonRetryableError("invalid file"))
        with pytest.raises(NonRetryableError):
            await SummarizationService(client, log_prompts=False).summarize("https://x.example/a.pdf")


class TestBlueprintService:
    def test_prompt_layout(self) -> None:
        final = build_blueprint_prompt("TEMPLATE", "\n### a.pdf\nA")
        assert final == (
            "TEMPLATE\n\n\n Below is the summary of all the medical files/test/reports "
            "of the primary user:\n\n### a.pdf\nA"
        )

    @pytest.mark.asyncio
    async def test_strips_model_output(self) -> None:
        client = FakeLLMClient(completion='\n  {"ok": true}  \n')
        result = await BlueprintService(client).synthesize("TEMPLATE", "SUMMARIES")

        assert result == '{"ok": true}'
        assert client.completion_calls[0]["prompt"] == build_blueprint_prompt("TEMPLATE", "SUMMARIES")

    @pytest.mark.asyncio
    async def test_empty_summaries_still_calls_model(self) -> None:
        client = FakeLLMClient(completion="")
        result = await BlueprintService(client, log_prompts=False).synthesize("TEMPLATE", "")
        assert result == ""
        assert len(client.completion_calls) == 1
