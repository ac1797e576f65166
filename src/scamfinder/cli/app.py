"""Unified CLI entry point for ScamFinder.

Config precedence: settings.default.toml -> settings.local.toml -> env vars (SCAMFINDER_* with double underscores) -> CLI flags.
"""

from __future__ import annotations

import os

import typer

from scamfinder.cli.scan_cmd import scan_app
from scamfinder.cli.settings_cmd import settings_app

try:
    from importlib.metadata import version

    VERSION = version("scamfinder")
except Exception:
    VERSION = "unknown"

APP_HELP = (
    "scamfinder: fraud-risk analysis of text, images, documents and emails. "
    "Config precedence: settings.default.toml -> settings.local.toml -> env vars (SCAMFINDER_* with __) -> CLI flags."
)

app = typer.Typer(add_completion=True, help=APP_HELP)

app.add_typer(scan_app, name="scan")
app.add_typer(settings_app, name="settings")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Show help when no subcommand is provided."""
    if version:
        typer.echo(f"scamfinder {VERSION}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    from scamfinder.logging_config import configure_logging

    # Reports go to stdout; keep stderr quiet unless asked
    configure_logging("DEBUG" if verbose else os.environ.get("SCAMFINDER_LOG_LEVEL", "WARNING"))


if __name__ == "__main__":
    app()
