"""Protocols the orchestrator depends on."""

from __future__ import annotations

from blueprint_ai.interfaces.pipeline import IBlueprintSynthesizer, ISummarizer

__all__ = ["IBlueprintSynthesizer", "ISummarizer"]
