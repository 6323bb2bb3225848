"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blueprint_ai.core.config import AppSettings

log = logging.getLogger(__name__)

# Providers that run locally or route auth themselves
_NO_KEY_PROVIDERS = frozenset({"ollama", "litellm"})

# Process-wide credential litellm reads when no explicit key is configured
_PROVIDER_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "azure": "AZURE_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_key(settings)
    _check_prompt_template(settings)
    _check_documents(settings)


def _check_api_key(settings: AppSettings) -> None:
    """Reject a missing credential for providers that need one."""
    provider = settings.llm.provider
    if provider in _NO_KEY_PROVIDERS or settings.llm.api_key:
        return
    env_var = _PROVIDER_KEY_ENV.get(provider, "")
    if not env_var or not os.environ.get(env_var):
        raise ValueError(
            f"BLUEPRINT_LLM_API_KEY (or {env_var or 'the provider key'}) is required "
            f"for provider '{provider}'."
        )


def _check_prompt_template(settings: AppSettings) -> None:
    path = settings.prompt.template_path
    if path is not None and not path.is_file():
        raise ValueError(f"BLUEPRINT_PROMPT_TEMPLATE_PATH does not point to a file: {path}")


def _check_documents(settings: AppSettings) -> None:
    """Warn when no document references are configured."""
    if not settings.documents.urls:
        log.warning(
            "BLUEPRINT_DOCUMENTS_URLS is empty; runs will synthesize a blueprint "
            "from an empty summary block."
        )
