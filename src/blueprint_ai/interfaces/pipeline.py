"""Summarizer and synthesizer protocols.

Both the in-process services and the HTTP client backends satisfy these,
so the orchestrator runs the same way against either.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ISummarizer(Protocol):
    """Produces the summary text for one document."""

    async def summarize(self, file_url: str) -> str:
        """Return the raw summary text for the document at ``file_url``.

        Raises on any failure; the orchestrator records the message against
        that document and moves on.
        """
        ...


@runtime_checkable
class IBlueprintSynthesizer(Protocol):
    """Produces the blueprint text from a template and the summary block."""

    async def synthesize(self, prompt: str, summaries: str) -> str:
        """Return the synthesized blueprint text (possibly empty)."""
        ...
