"""Tests for the prompt registry and blueprint template loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from blueprint_ai.core.config import PromptConfig
from blueprint_ai.exceptions import PromptTemplateError
from blueprint_ai.prompts import get_prompt, load_blueprint_template


class TestGetPrompt:
    def test_known_prompt(self) -> None:
        assert get_prompt("SUMMARIZE_SYSTEM_PROMPT").startswith("You are a clinical data extraction assistant")

    def test_unknown_prompt(self) -> None:
        with pytest.raises(KeyError, match="Prompt not found: NOPE"):
            get_prompt("NOPE")

    def test_module_attribute_access(self) -> None:
        from blueprint_ai.prompts import templates

        assert templates.SUMMARIZE_USER_PROMPT == get_prompt("SUMMARIZE_USER_PROMPT")
        with pytest.raises(AttributeError):
            templates.NOT_A_PROMPT  # noqa: B018


class TestLoadBlueprintTemplate:
    def test_bundled_default(self) -> None:
        text = load_blueprint_template(PromptConfig())
        assert text == get_prompt("BLUEPRINT_DEFAULT_TEMPLATE")
        assert "personalized_health_profile" in text

    def test_file_is_used_verbatim(self, tmp_path: Path) -> None:
        path = tmp_path / "prompt.txt"
        path.write_text("  Custom template\n", encoding="utf-8")
        assert load_blueprint_template(PromptConfig(template_path=path)) == "  Custom template\n"

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prompt.txt"
        path.write_text("   \n", encoding="utf-8")
        with pytest.raises(PromptTemplateError, match="is empty"):
            load_blueprint_template(PromptConfig(template_path=path))

    def test_unreadable_file(self, tmp_path: Path) -> None:
        with pytest.raises(PromptTemplateError, match="Failed to read"):
            load_blueprint_template(PromptConfig(template_path=tmp_path / "missing.txt"))
