"""blueprint-ai: summarize a set of medical documents with an LLM and synthesize a health blueprint.

Usage::

    from blueprint_ai import (
        AppSettings, LLMClient,
        SummarizationService, BlueprintService, BlueprintOrchestrator,
        parse_blueprint,
    )

    client = LLMClient(settings.llm)
    orchestrator = BlueprintOrchestrator(SummarizationService(client), BlueprintService(client))
    run = await orchestrator.run(settings.documents.urls, template)
    blueprint = parse_blueprint(run.blueprint)
"""

from __future__ import annotations

from blueprint_ai.blueprint import BlueprintDocument, parse_blueprint
from blueprint_ai.core.config import AppSettings
from blueprint_ai.models import (
    DocumentReference,
    FileStatus,
    GenerationRun,
    ProcessingStatus,
    RunState,
    SummaryEntry,
)
from blueprint_ai.pipeline import BlueprintOrchestrator, HTTPPipelineBackend
from blueprint_ai.providers.llm_client import LLMClient
from blueprint_ai.services import BlueprintService, SummarizationService

__all__ = [
    "AppSettings",
    "BlueprintDocument",
    "BlueprintOrchestrator",
    "BlueprintService",
    "DocumentReference",
    "FileStatus",
    "GenerationRun",
    "HTTPPipelineBackend",
    "LLMClient",
    "ProcessingStatus",
    "RunState",
    "SummarizationService",
    "SummaryEntry",
    "parse_blueprint",
]
