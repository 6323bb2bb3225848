"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from blueprint_ai.api.middleware.error_handler import register_error_handlers
from blueprint_ai.api.routes import blueprint, health, summarise
from blueprint_ai.core.config import APIConfig, AppSettings
from blueprint_ai.core.startup_checks import validate_settings
from blueprint_ai.hooks import setup_logging
from blueprint_ai.prompts import load_blueprint_template
from blueprint_ai.providers.llm_client import LLMClient
from blueprint_ai.services import BlueprintService, SummarizationService


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("blueprint-ai")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    validate_settings(settings)
    setup_logging(settings.observability)

    client = LLMClient(settings.llm)
    log_prompts = settings.observability.log_prompts

    app.state.settings = settings
    app.state.prompt_template = load_blueprint_template(settings.prompt)
    app.state.summarization_service = SummarizationService(client, log_prompts=log_prompts)
    app.state.blueprint_service = BlueprintService(client, log_prompts=log_prompts)
    yield


def create_app() -> FastAPI:
    """Build the application with all routers and error handlers attached."""
    api_config = APIConfig()
    application = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(application)
    application.include_router(health.router)
    application.include_router(summarise.router, prefix="/api")
    application.include_router(blueprint.router, prefix="/api")
    return application


app = create_app()
