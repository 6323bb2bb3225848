"""Blueprint synthesis endpoint."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

log = logging.getLogger(__name__)

router = APIRouter(tags=["blueprint"])


class BlueprintRequest(BaseModel):
    """Prompt template plus the concatenated document summaries."""

    prompt: str = ""
    summaries: str = ""


class BlueprintResponse(BaseModel):
    """Synthesized blueprint text (expected to be JSON, not validated)."""

    blueprint: Optional[str] = None


@router.post("/generate-blueprint", response_model=BlueprintResponse)
async def generate_blueprint(req: Request):
    """Synthesize the health blueprint.

    The body is read and validated inside the handler so that every failure,
    a malformed body included, is logged and answered with 500
    ``{"error": ...}``.
    """
    try:
        request = BlueprintRequest.model_validate(await req.json())
        service = req.app.state.blueprint_service
        blueprint = await service.synthesize(request.prompt, request.summaries)
        return BlueprintResponse(blueprint=blueprint)
    except Exception as exc:
        log.exception("Blueprint generation failed")
        return JSONResponse(status_code=500, content={"error": str(exc) or "Unknown error"})


class PromptTemplateResponse(BaseModel):
    """The blueprint template loaded at startup."""

    prompt: str


@router.get("/prompt-template", response_model=PromptTemplateResponse)
async def prompt_template(req: Request) -> PromptTemplateResponse:
    """Serve the blueprint template so remote clients use the server's copy."""
    return PromptTemplateResponse(prompt=req.app.state.prompt_template)
