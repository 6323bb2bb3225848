"""Prompt registry: bundled templates plus the file-backed blueprint template.

Usage::

    system = get_prompt("SUMMARIZE_SYSTEM_PROMPT")

    # Once at startup:
    template = load_blueprint_template(settings.prompt)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blueprint_ai.exceptions import PromptTemplateError

if TYPE_CHECKING:
    from blueprint_ai.core.config import PromptConfig

logger = logging.getLogger(__name__)


def get_prompt(name: str) -> str:
    """Return a bundled prompt by constant name.

    Raises:
        KeyError: If no prompt with that name exists.
    """
    from blueprint_ai.prompts.templates import _PROMPT_DATA

    try:
        return _PROMPT_DATA[name]
    except KeyError:
        raise KeyError(f"Prompt not found: {name}") from None


def load_blueprint_template(config: PromptConfig) -> str:
    """Load the blueprint synthesis template, used verbatim as the instruction prefix.

    Reads ``config.template_path`` when set; otherwise returns the bundled
    ``BLUEPRINT_DEFAULT_TEMPLATE``.

    Raises:
        PromptTemplateError: If the configured file is unreadable or empty.
    """
    if config.template_path is None:
        logger.info("Using bundled blueprint template")
        return get_prompt("BLUEPRINT_DEFAULT_TEMPLATE")

    try:
        text = config.template_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(
            f"Failed to read prompt template {config.template_path}: {exc}"
        ) from exc

    if not text.strip():
        raise PromptTemplateError(f"Prompt template {config.template_path} is empty")

    logger.info(
        "Loaded blueprint template",
        extra={"path": str(config.template_path), "chars": len(text)},
    )
    return text
