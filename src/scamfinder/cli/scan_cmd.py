"""CLI commands for scanning text and files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from scamfinder.exceptions import AnalysisFailure, ScamFinderError, ValidationError
from scamfinder.models.request import AnalysisRequest, FilePayload

scan_app = typer.Typer(help="Scan text or files for scam indicators.")
console = Console()


def _run(request: AnalysisRequest, *, as_json: bool, file_name: str | None = None) -> None:
    from scamfinder.reports import render_report
    from scamfinder.session import ScanSession

    session = ScanSession()
    try:
        if as_json:
            result = session.submit(request)
        else:
            with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
                task = progress.add_task("Analyzing...", total=None)
                result = session.submit(request)
                progress.update(task, completed=True)
    except ValidationError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=2)
    except AnalysisFailure as e:
        console.print(f"[red]✗[/red] Analysis failed ({e.reason}): {e}")
        raise typer.Exit(code=1)
    except ScamFinderError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)
    finally:
        session.scanner.close()

    if as_json:
        typer.echo(result.to_json())
    else:
        render_report(result, console, file_name=file_name)


@scan_app.command("text")
def scan_text(
    text: str = typer.Argument(..., help="The message, post or email body to analyze."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON."),
) -> None:
    """Analyze a piece of text."""
    _run(AnalysisRequest(text=text), as_json=as_json)


@scan_app.command("file")
def scan_file(
    path: Path = typer.Argument(..., help="Image, document, email (.eml/.msg) or HTML file."),
    context: str = typer.Option("", "--context", "-c", help="Additional context sent with the file."),
    mime: Optional[str] = typer.Option(None, "--mime", help="Declared MIME type of the file."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON."),
) -> None:
    """Analyze a file, optionally with additional context text."""
    if not path.is_file():
        console.print(f"[red]File not found:[/red] {path}")
        raise typer.Exit(code=1)

    payload = FilePayload.from_path(path, declared_mime_type=mime or "")
    _run(AnalysisRequest(text=context, file=payload), as_json=as_json, file_name=payload.file_name)


@scan_app.command("classify")
def classify_file(
    path: Path = typer.Argument(..., help="File to classify (contents are not read)."),
    mime: Optional[str] = typer.Option(None, "--mime", help="Declared MIME type of the file."),
) -> None:
    """Show how a file would be framed in the prompt."""
    from scamfinder.classifier import classify

    classified = classify(path.name, mime or "")
    console.print(
        Panel(
            f"[bold]Category:[/bold] {classified.category.value}\n[bold]MIME type:[/bold] {classified.mime_type}",
            title=path.name,
            border_style="blue",
        )
    )
