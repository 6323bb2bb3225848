"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from blueprint_ai.exceptions import BlueprintError, LLMClientError, MissingInputError

log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(MissingInputError)
    async def handle_missing_input(request: Request, exc: MissingInputError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "missing_input"})

    @app.exception_handler(LLMClientError)
    async def handle_llm_error(request: Request, exc: LLMClientError) -> JSONResponse:
        log.error("Upstream LLM call failed on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "llm_error"})

    @app.exception_handler(BlueprintError)
    async def handle_generic_error(request: Request, exc: BlueprintError) -> JSONResponse:
        log.error("Request failed on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "blueprint_error"})
