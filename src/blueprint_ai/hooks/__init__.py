"""Observability hooks: logging setup and per-run context tracking."""

from __future__ import annotations

from blueprint_ai.hooks.logging_config import setup_logging
from blueprint_ai.hooks.run_tracker import end_run, get_current_run, start_run, track_stage

__all__ = [
    "end_run",
    "get_current_run",
    "setup_logging",
    "start_run",
    "track_stage",
]
