"""Shared fixtures for blueprint-ai tests."""

from __future__ import annotations

import json
import os

import pytest

from blueprint_ai.core.config import AppSettings, LLMConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer env vars from leaking into settings under test."""
    for key in list(os.environ):
        if key.startswith("BLUEPRINT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    """Default test settings (fake key, no real LLM)."""
    return AppSettings(
        llm=LLMConfig(provider="openai", model="openai/test-model", api_key="test-key"),
    )


@pytest.fixture
def two_urls() -> list[str]:
    return [
        "https://files.example.org/media/Jane%20Doe/labs%20March.pdf",
        "https://files.example.org/media/Jane%20Doe/mammogram.pdf",
    ]


@pytest.fixture
def sample_blueprint() -> dict:
    """Blueprint covering every section the renderer knows about."""
    return {
        "personalized_health_profile": {
            "name": "Jane Doe",
            "age": 54,
            "sex": "F",
            "current_medications": [{"name": "Levothyroxine", "dosage": "50mcg", "frequency": "daily"}],
            "allergies": ["Penicillin"],
        },
        "overall_health_summary_watchlist": {
            "summary": "Generally healthy with elevated LDL.",
            "active_issues_to_monitor": [
                {"issue": "LDL cholesterol", "status": "elevated", "next_steps": "recheck in 3 months"},
                {"status": "no issue name"},
            ],
            "key_strengths": {"blood_pressure": "118/76", "resting_hr": 58},
            "watchlist_reminders": ["Annual mammogram"],
            "vitals_lab_highlights": {"lipids": {"ldl": "162 mg/dL", "hdl": 61}},
        },
        "inherited_risk_family_patterning": [
            {"title": "Cardiovascular", "risk_to_you": "moderate", "recommendations": "Daily walks"}
        ],
        "family_patterning_risk_profile": [
            {"condition": "Breast cancer", "baseline_lifetime_risk": "12%", "your_estimated_risk": "18%"}
        ],
        "summary_risk_percentiles": [{"condition": "CAD", "relative_risk": 1.4, "percentile_estimate": 80}],
        "risk_mitigation": [{"condition": "CAD", "lineage": "paternal", "risk_level": "moderate"}],
        "screening_preventive_testing_roadmap": [
            {"test_or_screening": "Colonoscopy", "start_age": 45, "frequency": "10 years"}
        ],
        "nutritional_strategy_supplementation": {
            "diet_focus": "Mediterranean",
            "emphasize": ["olive oil"],
            "limit": ["processed meat"],
            "targeted_supplements": [{"supplement": "Omega-3", "dose": "1g"}],
        },
        "fitness_recovery_lifestyle": {
            "exercise_plan": {"strength_training": "2x/week", "cardio": "150 min/week"},
            "hormone_monitoring": ["TSH yearly"],
        },
        "cognitive_emotional_health": {"mental_wellness": ["7-8h sleep"], "neuroprotection": ["Learn a language"]},
        "personalized_preventive_considerations": ["Keep VO2max high"],
        "health_action_timeline": [{"period": "Next 3 months", "actions": ["Lipid panel"]}, {"actions": ["DEXA"]}],
        "unexpected_section": {"kept": True},
    }


@pytest.fixture
def sample_blueprint_text(sample_blueprint: dict) -> str:
    return json.dumps(sample_blueprint)
