"""JSON output formatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from blueprint_ai.blueprint.models import BlueprintDocument


class JSONFormatter:
    """Renders a BlueprintDocument as indented JSON bytes, omitting absent fields."""

    def format(self, blueprint: BlueprintDocument, **kwargs: Any) -> bytes:
        return blueprint.model_dump_json(indent=2, exclude_none=True).encode()

    def format_to_file(self, blueprint: BlueprintDocument, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(blueprint, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
