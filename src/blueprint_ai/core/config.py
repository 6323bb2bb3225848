"""Nested pydantic-settings configuration for the application.

Each group reads its own ``BLUEPRINT_<GROUP>_*`` env vars::

    export BLUEPRINT_LLM_MODEL=openai/gpt-5-mini
    export BLUEPRINT_DOCUMENTS_URLS='["https://example.org/a.pdf"]'
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

_STORAGE_ROOT = "https://whgeuauulzwtyigriged.supabase.co/storage/v1/object/public/media/Amy%20Samuel"

DEFAULT_DOCUMENT_URLS: list[str] = [
    f"{_STORAGE_ROOT}/Amy's%20Allelica%20polygenic%20panel%20(1).pdf",
    f"{_STORAGE_ROOT}/0057.AS___CRR___Year_2.pdf",
    f"{_STORAGE_ROOT}/amy%20labs.pdf",
    f"{_STORAGE_ROOT}/Amy%20Shpall%20Medical%20Report%20Dec%202023%20(1).pdf",
    f"{_STORAGE_ROOT}/Amy%20Shpall%20Medical%20Report%20July%202025%20(2).pdf",
    f"{_STORAGE_ROOT}/Amy's%20Alzheimer's%20risk%20report%20(1).pdf",
    f"{_STORAGE_ROOT}/Amy's%20InBody,%20EKG,%20Labs%20March%2025%20(1).pdf",
    f"{_STORAGE_ROOT}/Amy's%20mammogram%20May%20'25.pdf",
    f"{_STORAGE_ROOT}/Decades%20Health%20Summary.pdf",
    f"{_STORAGE_ROOT}/Grail%20Order%20558-ECVI-L4Z%20-%20Test%20Result%20Report%20GAL0YLFFLR-1%20(1).pdf",
]


class LLMConfig(BaseSettings):
    """LLM backend configuration.

    Env vars use ``BLUEPRINT_LLM_`` prefix. An empty ``api_key`` lets litellm
    fall back to the provider's own env var (e.g. ``OPENAI_API_KEY``).
    ``timeout=None`` means calls wait indefinitely; ``max_retries=1`` means a
    single attempt.
    """

    model_config = {"env_prefix": "BLUEPRINT_LLM_"}

    provider: Literal["openai", "azure", "anthropic", "ollama", "litellm"] = "openai"
    model: str = "openai/gpt-5-mini"
    api_key: str = ""
    base_url: str | None = None
    temperature: float | None = None
    timeout: float | None = None
    max_retries: int = Field(default=1, ge=1)
    retry_max_delay: float = 30.0
    retry_jitter_factor: float = 0.5


class DocumentsConfig(BaseSettings):
    """Static document reference list.

    Env vars use ``BLUEPRINT_DOCUMENTS_`` prefix; ``URLS`` is a JSON array.
    """

    model_config = {"env_prefix": "BLUEPRINT_DOCUMENTS_"}

    urls: list[str] = Field(default_factory=lambda: list(DEFAULT_DOCUMENT_URLS))


class PromptConfig(BaseSettings):
    """Blueprint prompt template source.

    Env vars use ``BLUEPRINT_PROMPT_`` prefix. When ``template_path`` is unset
    the bundled template is used.
    """

    model_config = {"env_prefix": "BLUEPRINT_PROMPT_"}

    template_path: Path | None = None


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``BLUEPRINT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "BLUEPRINT_OBSERVABILITY_"}

    service_name: str = "blueprint-ai"
    log_level: str = "INFO"
    log_prompts: bool = True


class APIConfig(BaseSettings):
    """HTTP API configuration.

    Env vars use ``BLUEPRINT_API_`` prefix.
    """

    model_config = {"env_prefix": "BLUEPRINT_API_"}

    title: str = "blueprint-ai"
    description: str = "Medical document summarization and health blueprint synthesis"
    host: str = "0.0.0.0"
    port: int = 8080


class ClientConfig(BaseSettings):
    """Settings for driving a run against a remote server.

    Env vars use ``BLUEPRINT_CLIENT_`` prefix. With no ``server_url`` the CLI
    runs the pipeline in-process.
    """

    model_config = {"env_prefix": "BLUEPRINT_CLIENT_"}

    server_url: str | None = None
    timeout: float | None = None


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    documents: DocumentsConfig = Field(default_factory=DocumentsConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
