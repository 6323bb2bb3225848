"""Health blueprint document models.

The blueprint is produced by the LLM with no enforced schema, so every
record here is optional-field: missing keys stay ``None``/empty, unknown
keys are kept, and loose scalar types (numbers, lone strings where a list
was expected) are coerced. Values of the wrong shape never fail the
document: a non-object section counts as absent and a bare value in a
record list becomes ``{"value": ...}``. Each record answers ``has_data()``
so renderers can show a placeholder instead of probing fields.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_text(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, list):
        return ", ".join(str(v) for v in value if v is not None)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def _as_text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    texts = (_as_text(v) for v in value)
    return [t for t in texts if t is not None and t.strip()]


def _as_text_map(value: Any) -> dict[str, Optional[str]]:
    if value is None:
        return {}
    if isinstance(value, list):
        return {str(i): _as_text(v) for i, v in enumerate(value, start=1)}
    if not isinstance(value, dict):
        return {"value": _as_text(value)}
    return {str(k): _as_text(v) for k, v in value.items()}


def _as_group_map(value: Any) -> dict[str, dict[str, Optional[str]]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        return {"value": _as_text_map(value)}
    return {
        str(k): (_as_text_map(v) if isinstance(v, (dict, list)) else {"value": _as_text(v)})
        for k, v in value.items()
    }


def _as_record(value: Any) -> Any:
    """A section object; anything but a JSON object counts as absent."""
    return value if isinstance(value, dict) else None


def _as_records(value: Any) -> list[dict[str, Any]]:
    """A list of records. A lone object is wrapped; bare values become ``{"value": ...}``."""
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    records: list[dict[str, Any]] = []
    for item in value:
        if isinstance(item, dict):
            records.append(item)
        elif item is not None:
            records.append({"value": _as_text(item)})
    return records


Text = Annotated[Optional[str], BeforeValidator(_as_text)]
TextList = Annotated[list[str], BeforeValidator(_as_text_list)]
TextMap = Annotated[dict[str, Optional[str]], BeforeValidator(_as_text_map)]


class _Record(BaseModel):
    """Base for blueprint records: tolerant of extra keys."""

    model_config = ConfigDict(extra="allow")

    def has_data(self) -> bool:
        """True when any declared field carries a non-empty value."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, _Record):
                if value.has_data():
                    return True
            elif isinstance(value, list):
                if any(not isinstance(v, _Record) or v.has_data() for v in value):
                    return True
            elif value not in (None, "", {}):
                return True
        return False


# ── Profile & watchlist ──────────────────────────────────────────────


class Medication(_Record):
    name: Text = None
    dosage: Text = None
    frequency: Text = None

    def display(self) -> str:
        return " • ".join(p for p in (self.name, self.dosage, self.frequency) if p)


class HealthProfile(_Record):
    name: Text = None
    age: Text = None
    sex: Text = None
    date_of_birth: Text = None
    current_medications: Annotated[list[Medication], BeforeValidator(_as_records)] = Field(default_factory=list)
    allergies: TextList = Field(default_factory=list)


class ActiveIssue(_Record):
    issue: Text = None
    status: Text = None
    next_steps: Text = None

    def display(self) -> Optional[str]:
        """``issue — status, next_steps``; None when there is no issue name."""
        if not self.issue:
            return None
        text = self.issue
        if self.status:
            text += f" — {self.status}"
        if self.next_steps:
            text += f", {self.next_steps}"
        return text


class HealthSummaryWatchlist(_Record):
    summary: Text = None
    active_issues_to_monitor: Annotated[list[ActiveIssue], BeforeValidator(_as_records)] = Field(default_factory=list)
    key_strengths: TextMap = Field(default_factory=dict)
    watchlist_reminders: TextList = Field(default_factory=list)
    vitals_lab_highlights: Annotated[dict[str, TextMap], BeforeValidator(_as_group_map)] = Field(
        default_factory=dict
    )


# ── Risk ─────────────────────────────────────────────────────────────


class FamilyPattern(_Record):
    title: Text = None
    description: Text = None
    risk_to_you: Text = None
    recommendations: TextList = Field(default_factory=list)


class FamilyRiskProfileEntry(_Record):
    condition: Text = None
    baseline_lifetime_risk: Text = None
    your_estimated_risk: Text = None
    relative_risk: Text = None
    percentile: Text = None


class RiskPercentile(_Record):
    condition: Text = None
    relative_risk: Text = None
    percentile_estimate: Text = None


class RiskMitigation(_Record):
    condition: Text = None
    lineage: Text = None
    risk_level: Text = None
    action_steps: Text = None


# ── Prevention & lifestyle ───────────────────────────────────────────


class ScreeningItem(_Record):
    test_or_screening: Text = None
    start_age: Text = None
    frequency: Text = None
    notes: Text = None


class Supplement(_Record):
    supplement: Text = None
    purpose: Text = None
    dose: Text = None


class NutritionStrategy(_Record):
    diet_focus: Text = None
    emphasize: TextList = Field(default_factory=list)
    limit: TextList = Field(default_factory=list)
    targeted_supplements: Annotated[list[Supplement], BeforeValidator(_as_records)] = Field(default_factory=list)


class ExercisePlan(_Record):
    strength_training: Text = None
    cardio: Text = None
    pilates_stretch_mobility: Text = None


class FitnessLifestyle(_Record):
    exercise_plan: Annotated[Optional[ExercisePlan], BeforeValidator(_as_record)] = None
    hormone_monitoring: TextList = Field(default_factory=list)


class CognitiveHealth(_Record):
    mental_wellness: TextList = Field(default_factory=list)
    neuroprotection: TextList = Field(default_factory=list)
    supplements: TextList = Field(default_factory=list)


class TimelinePhase(_Record):
    period: Text = None
    actions: TextList = Field(default_factory=list)


# ── Document ─────────────────────────────────────────────────────────


class BlueprintDocument(_Record):
    """The synthesized health blueprint."""

    personalized_health_profile: Annotated[
        Optional[HealthProfile], BeforeValidator(_as_record)
    ] = None
    overall_health_summary_watchlist: Annotated[
        Optional[HealthSummaryWatchlist], BeforeValidator(_as_record)
    ] = None
    inherited_risk_family_patterning: Annotated[list[FamilyPattern], BeforeValidator(_as_records)] = Field(
        default_factory=list
    )
    family_patterning_risk_profile: Annotated[list[FamilyRiskProfileEntry], BeforeValidator(_as_records)] = Field(
        default_factory=list
    )
    summary_risk_percentiles: Annotated[list[RiskPercentile], BeforeValidator(_as_records)] = Field(
        default_factory=list
    )
    risk_mitigation: Annotated[list[RiskMitigation], BeforeValidator(_as_records)] = Field(default_factory=list)
    screening_preventive_testing_roadmap: Annotated[list[ScreeningItem], BeforeValidator(_as_records)] = Field(
        default_factory=list
    )
    nutritional_strategy_supplementation: Annotated[
        Optional[NutritionStrategy], BeforeValidator(_as_record)
    ] = None
    fitness_recovery_lifestyle: Annotated[
        Optional[FitnessLifestyle], BeforeValidator(_as_record)
    ] = None
    cognitive_emotional_health: Annotated[
        Optional[CognitiveHealth], BeforeValidator(_as_record)
    ] = None
    personalized_preventive_considerations: TextList = Field(default_factory=list)
    health_action_timeline: Annotated[list[TimelinePhase], BeforeValidator(_as_records)] = Field(
        default_factory=list
    )

    @property
    def factors_to_monitor(self) -> list[str]:
        watchlist = self.overall_health_summary_watchlist
        if watchlist is None:
            return []
        return [t for t in (i.display() for i in watchlist.active_issues_to_monitor) if t]

    @property
    def decade_focus(self) -> list[str]:
        watchlist = self.overall_health_summary_watchlist
        if watchlist is None or not watchlist.summary:
            return []
        return [watchlist.summary]
