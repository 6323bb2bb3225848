"""Sequential generation pipeline and its backends."""

from __future__ import annotations

from blueprint_ai.pipeline.http_backend import HTTPPipelineBackend
from blueprint_ai.pipeline.orchestrator import BlueprintOrchestrator

__all__ = ["BlueprintOrchestrator", "HTTPPipelineBackend"]
