"""Rich console rendering of a blueprint and of a run's status list.

Layout: a banner, "Factors to monitor" and "This decade focus" lists, then
one titled panel per blueprint section. Sections without data show a
placeholder line instead of being dropped.
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Any, Callable, Optional

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from blueprint_ai.blueprint.models import BlueprintDocument
from blueprint_ai.models import GenerationRun, ProcessingStatus

ACCENT = "#C85A2E"

_STATUS_ICONS = {
    ProcessingStatus.PENDING: ("○", "grey50"),
    ProcessingStatus.PROCESSING: ("◌", "blue"),
    ProcessingStatus.DONE: ("✔", "green"),
    ProcessingStatus.ERROR: ("✖", "red"),
}

_STATUS_TEXT = {
    ProcessingStatus.PENDING: "Waiting",
    ProcessingStatus.PROCESSING: "Analyzing…",
    ProcessingStatus.DONE: "Analyzed",
}


def _muted(text: str) -> Text:
    return Text(text, style="dim")


def _bullets(items: list[str], empty: str = "No items.") -> RenderableType:
    items = [i for i in items if i]
    if not items:
        return _muted(empty)
    return Text("\n").join(Text(f"• {i}") for i in items)


def _key_value(label: str, value: Optional[str]) -> Text:
    line = Text(f"{label}: ", style="dim")
    line.append(value or "-", style="bold")
    return line


def _humanize(key: str) -> str:
    return key.replace("_", " ").capitalize()


def render_status_table(run: GenerationRun) -> Table:
    """Per-document status list: icon, label, state text or error message."""
    table = Table(show_header=False, box=None, pad_edge=False, expand=True)
    table.add_column(width=2)
    table.add_column(ratio=1)
    for reference in run.references:
        status = run.status_of(reference)
        icon, style = _STATUS_ICONS[status.state]
        detail = status.error if status.state is ProcessingStatus.ERROR else _STATUS_TEXT[status.state]
        cell = Text(reference.label, style="bold")
        cell.append(f"\n{detail}", style="red" if status.state is ProcessingStatus.ERROR else "dim")
        table.add_row(Text(icon, style=style), cell)
    return table


class BlueprintConsoleRenderer:
    """Renders a BlueprintDocument for the terminal.

    Also satisfies ``IOutputFormatter`` by exporting the rendering as plain text.
    """

    def __init__(self, *, decade: str = "Your 50's summary", rating: str = "Excellent", width: int = 100) -> None:
        self._decade = decade
        self._rating = rating
        self._width = width

    # ── Sections ────────────────────────────────────────────────────

    def _profile(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        profile = doc.personalized_health_profile
        if profile is None or not profile.has_data():
            return None
        rows: list[RenderableType] = [
            _key_value(label, value)
            for label, value in (
                ("Name", profile.name),
                ("Age", profile.age),
                ("Sex", profile.sex),
                ("Date of birth", profile.date_of_birth),
            )
            if value
        ]
        rows.append(_muted("Current medications"))
        rows.append(_bullets([m.display() for m in profile.current_medications], "None"))
        rows.append(_muted("Allergies"))
        rows.append(_bullets(profile.allergies, "No known allergies"))
        return Group(*rows)

    def _strengths(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        watchlist = doc.overall_health_summary_watchlist
        if watchlist is None or not watchlist.key_strengths:
            return None
        return Group(*(_key_value(_humanize(k), v) for k, v in watchlist.key_strengths.items()))

    def _reminders(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        watchlist = doc.overall_health_summary_watchlist
        if watchlist is None or not watchlist.watchlist_reminders:
            return None
        return _bullets(watchlist.watchlist_reminders)

    def _labs(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        watchlist = doc.overall_health_summary_watchlist
        if watchlist is None or not watchlist.vitals_lab_highlights:
            return None
        table = Table(show_header=False, expand=True)
        table.add_column(style="dim")
        table.add_column(style="bold", justify="right")
        for group, values in watchlist.vitals_lab_highlights.items():
            table.add_row(Text(_humanize(group), style=f"bold {ACCENT}"), "")
            for key, value in values.items():
                table.add_row(_humanize(key), value or "-")
        return table

    def _family_patterns(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        if not doc.inherited_risk_family_patterning:
            return None
        blocks: list[RenderableType] = []
        for item in doc.inherited_risk_family_patterning:
            blocks.append(Text(item.title or "-", style="bold"))
            if item.description:
                blocks.append(Text(item.description))
            if item.risk_to_you:
                blocks.append(_key_value("Risk to you", item.risk_to_you))
            if item.recommendations:
                blocks.append(_muted("What to do"))
                blocks.append(_bullets(item.recommendations))
        return Group(*blocks)

    def _family_risk_profile(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        if not doc.family_patterning_risk_profile:
            return None
        table = Table("Condition", "Baseline lifetime risk", "Your estimated risk", "Relative risk", "Percentile")
        for r in doc.family_patterning_risk_profile:
            table.add_row(
                r.condition or "-",
                r.baseline_lifetime_risk or "-",
                r.your_estimated_risk or "-",
                r.relative_risk or "-",
                r.percentile or "-",
            )
        return table

    def _risk_percentiles(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        if not doc.summary_risk_percentiles:
            return None
        table = Table("Condition", "Relative risk", "Percentile")
        for r in doc.summary_risk_percentiles:
            table.add_row(r.condition or "-", r.relative_risk or "-", r.percentile_estimate or "-")
        return table

    def _mitigation(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        if not doc.risk_mitigation:
            return None
        blocks: list[RenderableType] = []
        for r in doc.risk_mitigation:
            blocks.append(Text(r.condition or "-", style="bold"))
            blocks.append(_key_value("Lineage", r.lineage))
            blocks.append(_key_value("Risk level", r.risk_level))
            if r.action_steps:
                blocks.append(_muted("Action steps"))
                blocks.append(Text(r.action_steps))
        return Group(*blocks)

    def _screenings(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        if not doc.screening_preventive_testing_roadmap:
            return None
        table = Table("Test or screening", "Start age", "Frequency", "Notes", expand=True)
        for t in doc.screening_preventive_testing_roadmap:
            table.add_row(t.test_or_screening or "-", t.start_age or "-", t.frequency or "-", t.notes or "")
        return table

    def _nutrition(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        nutrition = doc.nutritional_strategy_supplementation
        if nutrition is None or not nutrition.has_data():
            return None
        blocks: list[RenderableType] = [
            _key_value("Diet focus", nutrition.diet_focus),
            _muted("Emphasize"),
            _bullets(nutrition.emphasize),
            _muted("Limit"),
            _bullets(nutrition.limit),
        ]
        if nutrition.targeted_supplements:
            table = Table("Supplement", "Purpose", "Dose", expand=True)
            for s in nutrition.targeted_supplements:
                table.add_row(s.supplement or "-", s.purpose or "", s.dose or "")
            blocks.append(table)
        return Group(*blocks)

    def _fitness(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        fitness = doc.fitness_recovery_lifestyle
        if fitness is None or not fitness.has_data():
            return None
        blocks: list[RenderableType] = []
        plan = fitness.exercise_plan
        if plan is not None:
            for label, value in (
                ("Strength", plan.strength_training),
                ("Cardio", plan.cardio),
                ("Mobility", plan.pilates_stretch_mobility),
            ):
                if value:
                    blocks.append(_key_value(label, value))
        if fitness.hormone_monitoring:
            blocks.append(_muted("Hormone monitoring"))
            blocks.append(_bullets(fitness.hormone_monitoring))
        return Group(*blocks)

    def _sleep_stress(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        cognitive = doc.cognitive_emotional_health
        if cognitive is None or not cognitive.mental_wellness:
            return None
        return _bullets(cognitive.mental_wellness)

    def _cognitive(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        cognitive = doc.cognitive_emotional_health
        if cognitive is None or not (cognitive.neuroprotection or cognitive.supplements):
            return None
        blocks: list[RenderableType] = []
        if cognitive.neuroprotection:
            blocks += [_muted("Neuroprotection"), _bullets(cognitive.neuroprotection)]
        if cognitive.supplements:
            blocks += [_muted("Supplements"), _bullets(cognitive.supplements)]
        return Group(*blocks)

    def _longevity(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        if not doc.personalized_preventive_considerations:
            return None
        return _bullets(doc.personalized_preventive_considerations)

    def _timeline(self, doc: BlueprintDocument) -> Optional[RenderableType]:
        if not doc.health_action_timeline:
            return None
        blocks: list[RenderableType] = []
        for i, phase in enumerate(doc.health_action_timeline, start=1):
            blocks.append(Text(phase.period or f"Phase {i}", style=f"bold {ACCENT}"))
            if phase.actions:
                blocks.append(_bullets(phase.actions))
        return Group(*blocks)

    def _sections(self) -> list[tuple[str, Callable[[BlueprintDocument], Optional[RenderableType]], str]]:
        return [
            ("Personal profile", self._profile, "No profile data."),
            ("Key strengths", self._strengths, "No strengths listed."),
            ("Watchlist reminders", self._reminders, "No reminders."),
            ("Vitals & labs", self._labs, "No vitals or labs."),
            ("Family patterns to watch", self._family_patterns, "No family patterns."),
            ("Family patterning risk profile", self._family_risk_profile, "No entries."),
            ("Summary risk percentiles", self._risk_percentiles, "No entries."),
            ("Risk mitigation", self._mitigation, "No mitigation items."),
            ("Preventative screenings & tests", self._screenings, "No screening items."),
            ("Nourish your decade", self._nutrition, "No nutrition data."),
            ("Fitness & hormones", self._fitness, "No fitness data."),
            ("Sleep & stress", self._sleep_stress, "No sleep/stress items."),
            ("Cognitive & emotional health", self._cognitive, "No items."),
            ("Longevity & healthspan", self._longevity, "No items."),
            ("Health action timeline", self._timeline, "No timeline."),
        ]

    # ── Assembly ────────────────────────────────────────────────────

    def renderables(self, doc: BlueprintDocument) -> list[RenderableType]:
        banner = Text(self._decade, style="bold white")
        banner.append(f"  {self._rating}", style="bold green")
        out: list[RenderableType] = [
            Panel(banner, style=f"on {ACCENT}"),
            Text("Factors to monitor", style=f"bold {ACCENT}"),
            _bullets(doc.factors_to_monitor),
            Text("This decade focus", style=f"bold {ACCENT}"),
            _bullets(doc.decade_focus),
        ]
        for title, build, placeholder in self._sections():
            body = build(doc)
            out.append(
                Panel(
                    body if body is not None else _muted(placeholder),
                    title=Text(title, style=f"bold {ACCENT}"),
                    title_align="left",
                )
            )
        return out

    def print(self, console: Console, doc: BlueprintDocument) -> None:
        for renderable in self.renderables(doc):
            console.print(renderable)

    def format(self, blueprint: BlueprintDocument, **kwargs: Any) -> bytes:
        """Plain-text export of the console rendering."""
        console = Console(file=StringIO(), record=True, width=self._width, color_system=None)
        self.print(console, blueprint)
        return console.export_text().encode()

    def format_to_file(self, blueprint: BlueprintDocument, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(blueprint, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/plain"


__all__ = ["BlueprintConsoleRenderer", "render_status_table"]
