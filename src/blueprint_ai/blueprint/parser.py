"""Parse LLM blueprint text into a ``BlueprintDocument``."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from blueprint_ai.blueprint.models import BlueprintDocument
from blueprint_ai.exceptions import JSONParseError

log = logging.getLogger(__name__)


def _try_parse(s: str) -> Any | None:
    """Attempt JSON parse with a trailing-comma fixup."""
    s = s.strip()
    if not s:
        return None
    try:
        return json.loads(s)
    except json.JSONDecodeError:
        pass
    s = re.sub(r",\s*([}\]])", r"\1", s)
    try:
        return json.loads(s)
    except json.JSONDecodeError:
        return None


def _first_balanced_object(content: str) -> str | None:
    """Return the first balanced ``{...}`` span, ignoring braces inside strings."""
    idx = content.find("{")
    if idx == -1:
        return None
    depth = 0
    in_string = False
    escape = False
    for i in range(idx, len(content)):
        ch = content[i]
        if escape:
            escape = False
            continue
        if ch == "\\":
            escape = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return content[idx : i + 1]
    return None


def extract_json_object(content: str) -> dict[str, Any]:
    """Pull a JSON object out of an LLM response.

    Tries, in order: a ```json fence, a bare ``` fence, the whole text, the
    first balanced ``{...}`` span.

    Raises:
        JSONParseError: No JSON object could be recovered.
    """
    candidates: list[str] = []
    for marker in ("```json", "```"):
        start = content.find(marker)
        if start != -1:
            inner = content[start + len(marker):]
            end = inner.find("```")
            if end != -1:
                candidates.append(inner[:end])
    candidates.append(content)
    span = _first_balanced_object(content)
    if span:
        candidates.append(span)

    for candidate in candidates:
        result = _try_parse(candidate)
        if isinstance(result, dict):
            return result

    log.error(
        "Failed to parse JSON from blueprint response",
        extra={"response_length": len(content), "response_preview": content[:200]},
    )
    raise JSONParseError("Blueprint response is not a JSON object", raw_response=content)


def parse_blueprint(text: str) -> BlueprintDocument:
    """Parse blueprint text into typed records.

    Raises:
        JSONParseError: The text holds no JSON object, or the object's shape
            cannot be coerced into the blueprint records.
    """
    data = extract_json_object(text)
    try:
        return BlueprintDocument.model_validate(data)
    except ValidationError as exc:
        raise JSONParseError(f"Blueprint JSON has an unexpected shape: {exc}", raw_response=text) from exc
