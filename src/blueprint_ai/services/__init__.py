"""Services wrapping the two LLM calls of a run."""

from __future__ import annotations

from blueprint_ai.services.blueprint_service import BlueprintService, build_blueprint_prompt
from blueprint_ai.services.summarization_service import SummarizationService

__all__ = ["BlueprintService", "SummarizationService", "build_blueprint_prompt"]
