"""Per-document summarization endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

router = APIRouter(tags=["summarization"])


class SummariseRequest(BaseModel):
    """Request to summarize one document."""

    model_config = ConfigDict(populate_by_name=True)

    file_url: Optional[str] = Field(default=None, alias="fileUrl")


class SummariseResponse(BaseModel):
    """Raw model output for one document."""

    summary: str


@router.post("/summarise-file", response_model=SummariseResponse)
async def summarise_file(req: Request, request: Optional[SummariseRequest] = None):
    """Summarize the document at ``fileUrl``.

    Answers 400 without contacting the LLM when ``fileUrl`` is missing.
    Upstream failures are left to the application error handlers.
    """
    file_url = request.file_url if request is not None else None
    if not file_url:
        return JSONResponse(status_code=400, content={"error": "fileUrl is required"})

    service = req.app.state.summarization_service
    summary = await service.summarize(file_url)
    return SummariseResponse(summary=summary)
