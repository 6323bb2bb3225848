"""Prompt templates and loading."""

from __future__ import annotations

from blueprint_ai.prompts.registry import get_prompt, load_blueprint_template

__all__ = ["get_prompt", "load_blueprint_template"]
