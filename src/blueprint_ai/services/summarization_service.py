"""Per-document summarization: one file-attached LLM call per document URL."""

from __future__ import annotations

import logging

from blueprint_ai.exceptions import MissingInputError
from blueprint_ai.prompts.registry import get_prompt
from blueprint_ai.providers.llm_client import LLMClient

log = logging.getLogger(__name__)


class SummarizationService:
    """Sends one document plus the fixed extraction instruction to the LLM.

    The model output is returned untouched; nothing here checks that it is
    JSON. Upstream failures propagate to the caller.
    """

    def __init__(self, client: LLMClient, *, log_prompts: bool = True) -> None:
        self._client = client
        self._log_prompts = log_prompts

    async def summarize(self, file_url: str | None) -> str:
        """Summarize the document at ``file_url``.

        Raises:
            MissingInputError: If ``file_url`` is missing or blank. No LLM
                call is made in that case.
        """
        if not file_url or not file_url.strip():
            raise MissingInputError("fileUrl is required")

        system_prompt = get_prompt("SUMMARIZE_SYSTEM_PROMPT")
        instruction = get_prompt("SUMMARIZE_USER_PROMPT")

        if self._log_prompts:
            log.info(
                "Summarization prompt",
                extra={"file_url": file_url, "system_prompt": system_prompt, "instruction": instruction},
            )

        output = await self._client.complete_with_file(
            instruction,
            file_url,
            system_prompt=system_prompt,
        )

        if self._log_prompts:
            log.info("GPT output", extra={"file_url": file_url, "output": output})
        else:
            log.info("Summarized document", extra={"file_url": file_url, "output_chars": len(output)})

        return output
