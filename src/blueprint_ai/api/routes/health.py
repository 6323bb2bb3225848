"""Liveness and readiness checks."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])

# Set on app.state by the lifespan before requests are served
_REQUIRED_STATE = ("prompt_template", "summarization_service", "blueprint_service")


@router.get("/health")
async def health() -> dict[str, str]:
    """The process is up."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request) -> JSONResponse:
    """503 until the template and both services are wired onto the app."""
    missing = [name for name in _REQUIRED_STATE if getattr(request.app.state, name, None) is None]
    if missing:
        return JSONResponse(status_code=503, content={"status": "not_ready", "missing": missing})
    return JSONResponse(content={"status": "ready"})
