"""Deterministic summarizer / synthesizer doubles — no LLM or network calls.

Usage::

    summarizer = FakeSummarizer({"https://x/a.pdf": "A"}, failures={"https://x/b.pdf": "boom"})
    synthesizer = FakeSynthesizer(response='{"personalized_preventive_considerations": ["x"]}')
    run = await BlueprintOrchestrator(summarizer, synthesizer).run(urls, "TEMPLATE")

    assert synthesizer.calls == [("TEMPLATE", run.aggregate)]
"""

from __future__ import annotations

import asyncio


class FakeSummarizer:
    """Returns canned summaries per URL; raises for URLs listed in ``failures``.

    ``delays`` (seconds per URL) lets tests give earlier documents slower
    responses to check ordering.
    """

    def __init__(
        self,
        summaries: dict[str, str] | None = None,
        *,
        failures: dict[str, Exception | str] | None = None,
        delays: dict[str, float] | None = None,
        default: str = "summary",
    ) -> None:
        self._summaries = dict(summaries or {})
        self._failures = dict(failures or {})
        self._delays = dict(delays or {})
        self._default = default
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def summarize(self, file_url: str) -> str:
        self.calls.append(file_url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self._delays.get(file_url, 0.0)
            if delay:
                await asyncio.sleep(delay)
            if file_url in self._failures:
                failure = self._failures[file_url]
                if isinstance(failure, Exception):
                    raise failure
                raise RuntimeError(failure)
            return self._summaries.get(file_url, self._default)
        finally:
            self.in_flight -= 1


class FakeSynthesizer:
    """Returns a fixed blueprint text, or raises ``error`` when set."""

    def __init__(self, response: str = '{"status": "ok"}', *, error: Exception | None = None) -> None:
        self._response = response
        self._error = error
        self.calls: list[tuple[str, str]] = []

    async def synthesize(self, prompt: str, summaries: str) -> str:
        self.calls.append((prompt, summaries))
        if self._error is not None:
            raise self._error
        return self._response
