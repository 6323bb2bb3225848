"""Output formatters for rendering a BlueprintDocument.

Usage::

    from blueprint_ai.formatters import BlueprintConsoleRenderer, JSONFormatter

    BlueprintConsoleRenderer().print(console, blueprint)
    json_bytes = JSONFormatter().format(blueprint)
"""

from __future__ import annotations

from blueprint_ai.formatters.console_formatter import BlueprintConsoleRenderer, render_status_table
from blueprint_ai.formatters.json_formatter import JSONFormatter
from blueprint_ai.formatters.protocols import IOutputFormatter

__all__ = [
    "BlueprintConsoleRenderer",
    "IOutputFormatter",
    "JSONFormatter",
    "render_status_table",
]
