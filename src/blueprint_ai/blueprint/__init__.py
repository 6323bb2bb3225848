"""Health blueprint document model and parsing."""

from __future__ import annotations

from blueprint_ai.blueprint.models import BlueprintDocument
from blueprint_ai.blueprint.parser import extract_json_object, parse_blueprint

__all__ = ["BlueprintDocument", "extract_json_object", "parse_blueprint"]
