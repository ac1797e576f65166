"""Report rendering for scan results."""

from scamfinder.reports.console import render_report

__all__ = ["render_report"]
