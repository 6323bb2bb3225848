"""Per-run tracking using ContextVars.

Binds the active run's ``run_id`` (and the current stage name) into the
structlog context so every log line of a run can be correlated.

Usage::

    start_run(run)
    with track_stage("summarize") as stage:
        ...
    end_run()
    print(run.total_duration_ms)
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Generator

import structlog

from blueprint_ai.models import GenerationRun, StageMetrics

_current_run: ContextVar[GenerationRun | None] = ContextVar("blueprint_current_run", default=None)


def get_current_run() -> GenerationRun | None:
    """Get the active run, or None if no run is active."""
    return _current_run.get()


def start_run(run: GenerationRun) -> GenerationRun:
    """Activate ``run`` for the current context."""
    _current_run.set(run)
    structlog.contextvars.bind_contextvars(run_id=run.run_id)
    return run


def end_run() -> GenerationRun | None:
    """Deactivate the current run and return it. Returns None if no run is active."""
    run = _current_run.get()
    if run is None:
        return None
    _current_run.set(None)
    structlog.contextvars.unbind_contextvars("run_id")
    return run


@contextmanager
def track_stage(name: str) -> Generator[StageMetrics, None, None]:
    """Record a StageMetrics entry on the current run.

    Timing is still measured when no run is active; it is just not stored.
    """
    run = _current_run.get()
    stage = StageMetrics(stage=name, started_at=datetime.now(timezone.utc))
    structlog.contextvars.bind_contextvars(stage=name)

    try:
        yield stage
    finally:
        stage.ended_at = datetime.now(timezone.utc)
        if stage.started_at:
            stage.duration_ms = (stage.ended_at - stage.started_at).total_seconds() * 1000
        if run is not None:
            run.stages.append(stage)
        structlog.contextvars.unbind_contextvars("stage")
