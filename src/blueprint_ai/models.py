"""Pydantic data models for a blueprint generation run.

A ``GenerationRun`` is the run-scoped state owned by the orchestrator: the
per-document status map, the ordered summary entries, the aggregate block
and the final blueprint text. A new instance is built for every run.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from blueprint_ai.exceptions import InvalidTransitionError

NO_BLUEPRINT_PLACEHOLDER = "No blueprint generated."
SUMMARY_SEPARATOR = "\n\n"

# ── Document references ──────────────────────────────────────────────


class DocumentReference(BaseModel):
    """Immutable locator of one source medical document."""

    model_config = ConfigDict(frozen=True)

    url: str

    @property
    def label(self) -> str:
        """Everything after the last ``/``, kept as-is (percent-encoding and query included).

        This is the heading each summary gets in the aggregate block. A URL
        ending in ``/`` has no trailing segment and is labelled by the URL.
        """
        return self.url.rsplit("/", 1)[-1] or self.url


# ── Status tracking ──────────────────────────────────────────────────


class ProcessingStatus(str, Enum):
    """Per-document processing state."""

    PENDING = "pending"
    PROCESSING = "processing"
    DONE = "done"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (ProcessingStatus.DONE, ProcessingStatus.ERROR)


_ALLOWED_TRANSITIONS: dict[ProcessingStatus, frozenset[ProcessingStatus]] = {
    ProcessingStatus.PENDING: frozenset({ProcessingStatus.PROCESSING}),
    ProcessingStatus.PROCESSING: frozenset({ProcessingStatus.DONE, ProcessingStatus.ERROR}),
    ProcessingStatus.DONE: frozenset(),
    ProcessingStatus.ERROR: frozenset(),
}


class FileStatus(BaseModel):
    """Status record for one document reference."""

    state: ProcessingStatus = ProcessingStatus.PENDING
    summary: Optional[str] = None
    error: Optional[str] = None

    def transition(self, new_state: ProcessingStatus) -> None:
        if new_state not in _ALLOWED_TRANSITIONS[self.state]:
            raise InvalidTransitionError(
                f"Cannot move from {self.state.value!r} to {new_state.value!r}"
            )
        self.state = new_state


class RunState(str, Enum):
    """Run-level lifecycle. There is no path back to ``idle``."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


# ── Run results ──────────────────────────────────────────────────────


class SummaryEntry(BaseModel):
    """A labelled summary of one successfully processed document."""

    reference: DocumentReference
    text: str

    @property
    def label(self) -> str:
        return self.reference.label

    def render(self) -> str:
        return f"\n### {self.label}\n{self.text}"


class StageMetrics(BaseModel):
    """Timing for one stage of a run."""

    stage: str
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    duration_ms: float = 0.0


class GenerationRun(BaseModel):
    """All state produced by one run of the pipeline."""

    run_id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    references: list[DocumentReference]
    statuses: dict[str, FileStatus] = Field(default_factory=dict)
    summaries: list[SummaryEntry] = Field(default_factory=list)
    aggregate: str = ""
    blueprint: str = ""
    blueprint_error: Optional[str] = None
    current: Optional[DocumentReference] = None
    state: RunState = RunState.IDLE
    stages: list[StageMetrics] = Field(default_factory=list)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def for_urls(cls, urls: list[str]) -> GenerationRun:
        """Build a fresh run with every reference ``pending``."""
        references = [DocumentReference(url=u) for u in urls]
        return cls(
            references=references,
            statuses={r.url: FileStatus() for r in references},
        )

    def status_of(self, reference: DocumentReference) -> FileStatus:
        return self.statuses[reference.url]

    def start(self) -> None:
        if self.state is not RunState.IDLE:
            raise InvalidTransitionError(f"Run {self.run_id} already {self.state.value}")
        self.state = RunState.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        if self.state is not RunState.RUNNING:
            raise InvalidTransitionError(f"Run {self.run_id} is not running")
        self.state = RunState.COMPLETE
        self.current = None
        self.completed_at = datetime.now(timezone.utc)

    def mark_processing(self, reference: DocumentReference) -> None:
        self.current = reference
        status = self.status_of(reference)
        status.transition(ProcessingStatus.PROCESSING)
        status.summary = None
        status.error = None

    def mark_done(self, reference: DocumentReference, text: str) -> None:
        status = self.status_of(reference)
        status.transition(ProcessingStatus.DONE)
        status.summary = text
        self.summaries.append(SummaryEntry(reference=reference, text=text))

    def mark_error(self, reference: DocumentReference, message: str) -> None:
        status = self.status_of(reference)
        status.transition(ProcessingStatus.ERROR)
        status.error = message or "Error"

    def build_aggregate(self) -> str:
        self.aggregate = SUMMARY_SEPARATOR.join(e.render() for e in self.summaries)
        return self.aggregate

    def set_blueprint(self, text: Optional[str]) -> None:
        self.blueprint = text or NO_BLUEPRINT_PLACEHOLDER

    @property
    def has_blueprint(self) -> bool:
        return bool(self.blueprint) and self.blueprint != NO_BLUEPRINT_PLACEHOLDER

    def count(self, state: ProcessingStatus) -> int:
        return sum(1 for s in self.statuses.values() if s.state is state)

    @property
    def total_duration_ms(self) -> float:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds() * 1000
        return 0.0
