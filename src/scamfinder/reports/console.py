"""Terminal rendering of a ``ScanResult`` with rich."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from scamfinder.models.results import ScanResult, UrlRiskLevel

BAND_STYLES = {"high": "red", "medium": "yellow", "low": "green"}

URL_RISK_STYLES = {
    UrlRiskLevel.HIGH: "red",
    UrlRiskLevel.MEDIUM: "dark_orange",
    UrlRiskLevel.LOW: "yellow",
    UrlRiskLevel.SAFE: "green",
}


def render_report(result: ScanResult, console: Console, file_name: str | None = None) -> None:
    """Print a full analysis report to *console*."""
    style = BAND_STYLES[result.risk_band]

    header = f"[bold {style}]{result.verdict.value}[/bold {style}]  score [bold]{result.scam_score}[/bold]/100"
    if file_name:
        header += f"\n[dim]{file_name}[/dim]"
    console.print(Panel(header, title="Analysis Report", border_style=style))

    console.print(Panel(result.summary or "[dim]No summary provided.[/dim]", title="Summary", border_style="blue"))

    if result.red_flags:
        console.print(f"\n[bold]Red flags ({len(result.red_flags)})[/bold]")
        for flag in result.red_flags:
            console.print(f"  [red]⚠[/red] {flag}")
    else:
        console.print("\n[green]✓[/green] No red flags detected.")

    if result.urls:
        table = Table(title="URLs", show_lines=False)
        table.add_column("URL", overflow="fold")
        table.add_column("Risk")
        table.add_column("Issues")
        for entry in result.urls:
            risk_style = URL_RISK_STYLES.get(entry.risk, "white")
            table.add_row(
                entry.url,
                f"[{risk_style}]{entry.risk.value}[/{risk_style}]",
                "\n".join(entry.issues) or "-",
            )
        console.print(table)

    if result.ai_image_probability is not None or result.image_analysis_details is not None:
        _render_image_forensics(result, console)

    if result.extracted_text_preview:
        console.print(Panel(result.extracted_text_preview, title="Extracted text", border_style="dim"))


def _render_image_forensics(result: ScanResult, console: Console) -> None:
    table = Table(title="Image forensics", show_header=False)
    table.add_column("Check", style="bold")
    table.add_column("Finding")
    if result.ai_image_probability is not None:
        table.add_row("AI generation probability", f"{result.ai_image_probability:.0%}")
    details = result.image_analysis_details
    if details is not None:
        table.add_row("Skin smoothness", details.skin_smoothness or "-")
        table.add_row("Background warping", details.background_warping or "-")
        table.add_row("Reflection symmetry", details.reflection_symmetry or "-")
        table.add_row("Edge consistency", details.edge_consistency or "-")
    console.print(table)
