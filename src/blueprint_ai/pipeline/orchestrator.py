"""Orchestrator: the sequential summarize-then-synthesize pipeline.

Documents are summarized one at a time in list order, so the aggregate
summary block always follows the configured order. A failing document is
marked ``error`` and the run moves on; the blueprint call is made exactly
once after every document has been attempted.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from blueprint_ai.exceptions import SynthesisError
from blueprint_ai.hooks.run_tracker import end_run, start_run, track_stage
from blueprint_ai.interfaces.pipeline import IBlueprintSynthesizer, ISummarizer
from blueprint_ai.models import DocumentReference, GenerationRun, ProcessingStatus

log = logging.getLogger(__name__)

ProgressCallback = Callable[[GenerationRun], None]


class BlueprintOrchestrator:
    """Drives one run from a reference list to the final blueprint text."""

    def __init__(
        self,
        summarizer: ISummarizer,
        synthesizer: IBlueprintSynthesizer,
        *,
        on_update: Optional[ProgressCallback] = None,
    ) -> None:
        self._summarizer = summarizer
        self._synthesizer = synthesizer
        self._on_update = on_update

    def _notify(self, run: GenerationRun) -> None:
        if self._on_update is not None:
            self._on_update(run)

    async def run(self, urls: list[str], prompt_template: str) -> GenerationRun:
        """Execute a full run.

        Args:
            urls: Ordered document URLs.
            prompt_template: Blueprint instruction prefix.

        Returns:
            The completed ``GenerationRun``.

        Raises:
            Any error raised by an in-process synthesizer. A ``SynthesisError``
            (the synthesis handler's error shape) is recorded on the run and
            leaves the placeholder blueprint instead.
        """
        run = GenerationRun.for_urls(urls)
        start_run(run)
        try:
            run.start()
            log.info("Run started", extra={"documents": len(run.references)})
            self._notify(run)

            with track_stage("summarize"):
                for reference in run.references:
                    await self._process(run, reference)

            aggregate = run.build_aggregate()

            with track_stage("synthesize"):
                try:
                    blueprint = await self._synthesizer.synthesize(prompt_template, aggregate)
                except SynthesisError as e:
                    log.error("Blueprint synthesis failed: %s", e)
                    run.blueprint_error = str(e) or "Unknown error"
                    blueprint = ""
            run.set_blueprint(blueprint)

            run.complete()
            log.info(
                "Run complete",
                extra={
                    "done": run.count(ProcessingStatus.DONE),
                    "errors": run.count(ProcessingStatus.ERROR),
                    "has_blueprint": run.has_blueprint,
                    "duration_ms": run.total_duration_ms,
                },
            )
            self._notify(run)
            return run
        finally:
            end_run()

    async def _process(self, run: GenerationRun, reference: DocumentReference) -> None:
        run.mark_processing(reference)
        self._notify(run)
        try:
            summary = await self._summarizer.summarize(reference.url)
        except Exception as e:
            log.error("Summarization failed for %s: %s", reference.label, e)
            run.mark_error(reference, str(e))
        else:
            run.mark_done(reference, summary)
        self._notify(run)
