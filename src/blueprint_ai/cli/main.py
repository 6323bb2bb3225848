"""CLI for blueprint-ai: generate / render / documents / serve commands."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console, Group
from rich.live import Live
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from blueprint_ai.blueprint import parse_blueprint
from blueprint_ai.core.config import AppSettings
from blueprint_ai.core.startup_checks import validate_settings
from blueprint_ai.exceptions import BlueprintError
from blueprint_ai.formatters import BlueprintConsoleRenderer, IOutputFormatter, JSONFormatter, render_status_table
from blueprint_ai.hooks import setup_logging
from blueprint_ai.models import DocumentReference, GenerationRun, ProcessingStatus
from blueprint_ai.pipeline import BlueprintOrchestrator, HTTPPipelineBackend
from blueprint_ai.prompts import load_blueprint_template
from blueprint_ai.providers.llm_client import LLMClient
from blueprint_ai.services import BlueprintService, SummarizationService

app = typer.Typer(name="blueprint-ai", help="Summarize medical documents into a health blueprint")
console = Console()


def _build_settings(
    model: Optional[str],
    api_key: Optional[str],
    template: Optional[Path],
    verbose: bool,
) -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    settings = AppSettings()
    if model:
        settings.llm.model = model
    if api_key:
        settings.llm.api_key = api_key
    if template:
        settings.prompt.template_path = template
    if verbose:
        settings.observability.log_level = "DEBUG"
    return settings


def _progress_view(run: GenerationRun) -> Group:
    parts = [render_status_table(run)]
    if run.current is not None:
        parts.append(Text(f"Analyzing: {run.current.label}", style="dim"))
    return Group(*parts)


_EXPORTERS: dict[str, type[IOutputFormatter]] = {".json": JSONFormatter}


def _render_blueprint_text(text: str, export: Optional[Path] = None) -> None:
    """Render blueprint text, printing it raw when it holds no usable JSON.

    ``export`` writes the rendering too: normalized JSON for a ``.json`` path,
    plain text otherwise.
    """
    try:
        document = parse_blueprint(text)
    except BlueprintError as exc:
        console.print(f"[red]Could not render blueprint: {escape(str(exc))}[/red]")
        console.print(text, markup=False, highlight=False)
        raise typer.Exit(code=1) from exc

    BlueprintConsoleRenderer().print(console, document)
    if export:
        formatter = _EXPORTERS.get(export.suffix.lower(), BlueprintConsoleRenderer)()
        formatter.format_to_file(document, export)
        console.print(f"[green]Rendering exported to {escape(str(export))}[/green]")


@app.command()
def generate(
    server: Optional[str] = typer.Option(
        None, "--server", help="Run against a blueprint-ai server at this URL (default: BLUEPRINT_CLIENT_SERVER_URL)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the synthesized blueprint text here, exactly as returned"
    ),
    template: Optional[Path] = typer.Option(None, "--template", help="Blueprint prompt template file"),
    model: Optional[str] = typer.Option(None, "--model", help="LLM model name"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="LLM API key"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Summarize every configured document, then synthesize and render the blueprint."""
    settings = _build_settings(model, api_key, template, verbose)
    setup_logging(settings.observability)
    urls = settings.documents.urls
    server = server or settings.client.server_url

    async def _run(live: Live) -> GenerationRun:
        def _update(run: GenerationRun) -> None:
            live.update(_progress_view(run))

        if server:
            async with HTTPPipelineBackend(server, timeout=settings.client.timeout) as backend:
                prompt = await backend.fetch_prompt_template()
                orchestrator = BlueprintOrchestrator(backend, backend, on_update=_update)
                return await orchestrator.run(urls, prompt)

        validate_settings(settings)
        client = LLMClient(settings.llm)
        log_prompts = settings.observability.log_prompts
        orchestrator = BlueprintOrchestrator(
            SummarizationService(client, log_prompts=log_prompts),
            BlueprintService(client, log_prompts=log_prompts),
            on_update=_update,
        )
        return await orchestrator.run(urls, load_blueprint_template(settings.prompt))

    console.print(f"[bold]Generating blueprint from {len(urls)} documents[/bold]")
    try:
        with Live(console=console, refresh_per_second=8) as live:
            run = asyncio.run(_run(live))
    except (BlueprintError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(
        f"\nAnalyzed {run.count(ProcessingStatus.DONE)}/{len(run.references)} documents "
        f"({run.count(ProcessingStatus.ERROR)} failed) in {run.total_duration_ms / 1000:.1f}s"
    )
    if run.blueprint_error:
        console.print(f"[red]Blueprint synthesis failed: {escape(run.blueprint_error)}[/red]")

    if not run.has_blueprint:
        console.print(f"[yellow]{run.blueprint}[/yellow]")
        raise typer.Exit(code=1)

    if output:
        output.write_bytes(run.blueprint.encode("utf-8"))
        console.print(f"[green]Blueprint saved to {escape(str(output))}[/green]")

    _render_blueprint_text(run.blueprint)


@app.command()
def render(
    blueprint_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Blueprint JSON file"),
    export: Optional[Path] = typer.Option(
        None, "--export", help="Also write the rendering: .json for normalized JSON, anything else for plain text"
    ),
) -> None:
    """Render a saved blueprint."""
    _render_blueprint_text(blueprint_file.read_text(encoding="utf-8"), export)


@app.command()
def documents(
    as_json: bool = typer.Option(False, "--json", help="Print the URL list as JSON"),
) -> None:
    """List the configured document references."""
    urls = AppSettings().documents.urls
    if as_json:
        console.print_json(json.dumps(urls))
        return

    table = Table(title="Document references")
    table.add_column("#", justify="right")
    table.add_column("Label", style="green")
    table.add_column("URL", overflow="fold")
    for i, url in enumerate(urls, start=1):
        table.add_row(str(i), DocumentReference(url=url).label, url)
    console.print(table)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Port"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    api_config = AppSettings().api
    uvicorn.run(
        "blueprint_ai.api.app:app",
        host=host or api_config.host,
        port=port or api_config.port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
