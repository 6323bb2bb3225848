"""Output formatter protocol — the contract blueprint formatters implement."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from blueprint_ai.blueprint.models import BlueprintDocument


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for blueprint output formatters (JSON, text, etc.)."""

    def format(self, blueprint: BlueprintDocument, **kwargs: Any) -> bytes:
        """Render the blueprint into output bytes."""
        ...

    def format_to_file(self, blueprint: BlueprintDocument, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format."""
        ...


__all__ = ["IOutputFormatter"]
