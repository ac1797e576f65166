"""CLI commands for inspecting and validating ScamFinder settings."""

from __future__ import annotations

import json

import typer
from rich.console import Console

settings_app = typer.Typer(help="Inspect and validate ScamFinder configuration.")
console = Console()


@settings_app.command("show")
def show_settings() -> None:
    """Display the currently resolved settings (API key masked)."""
    from scamfinder.settings import get_settings

    settings = get_settings()
    data = settings.model_dump(mode="json")
    if data["llm"].get("api_key"):
        data["llm"]["api_key"] = "***"
    console.print_json(json.dumps(data, indent=2, default=str))


@settings_app.command("validate")
def validate_settings() -> None:
    """Validate settings and report any issues."""
    from scamfinder.settings import get_settings

    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"[red]✗[/red] Settings validation failed: {e}")
        raise typer.Exit(code=1)

    console.print("[green]✓[/green] Settings are valid.")
    console.print(f"  Environment: {settings.env}")
    console.print(f"  Provider: {settings.llm.provider} ({settings.llm.model})")
    console.print(f"  Limits: {settings.limits.max_file_bytes} bytes / {settings.limits.max_text_chars} chars")
    if not settings.llm.api_key:
        console.print("[yellow]⚠[/yellow] No API key configured; scans will fail.")
        raise typer.Exit(code=1)
