"""Blueprint synthesis: one LLM call over the concatenated document summaries."""

from __future__ import annotations

import logging

from blueprint_ai.prompts.registry import get_prompt
from blueprint_ai.providers.llm_client import LLMClient

log = logging.getLogger(__name__)


def build_blueprint_prompt(prompt: str, summaries: str) -> str:
    """Join the template and the summary block into the final instruction."""
    return f"{prompt}{get_prompt('BLUEPRINT_SUMMARIES_HEADER')}{summaries}"


class BlueprintService:
    """Synthesizes the health blueprint text from a prompt template and summaries.

    The returned text is expected to be JSON but is not validated here.
    """

    def __init__(self, client: LLMClient, *, log_prompts: bool = True) -> None:
        self._client = client
        self._log_prompts = log_prompts

    async def synthesize(self, prompt: str, summaries: str) -> str:
        """Return the first choice's text, stripped of surrounding whitespace."""
        final_prompt = build_blueprint_prompt(prompt, summaries)

        if self._log_prompts:
            log.info("Final Prompt", extra={"prompt": final_prompt})
        else:
            log.info("Synthesizing blueprint", extra={"prompt_chars": len(final_prompt)})

        content = await self._client.complete(final_prompt)
        return content.strip()
