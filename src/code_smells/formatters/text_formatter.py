"""Plain text report, coloured with rich when stdout is a terminal."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..models import Report, ReportContext, SeverityFilter
from .base import BaseFormatter


def _count(value: int, color: str) -> str:
    return f"[{color}]{value}[/{color}]" if value > 0 else f"[green]{value}[/green]"


class TextFormatter(BaseFormatter):
    """Errors, then warnings, then a summary block."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def render(self, report: Report, context: ReportContext) -> None:
        for line in self._lines(report, context):
            self.console.print(line, soft_wrap=True)

    def format(self, report: Report, context: ReportContext) -> str:
        return "\n".join(Text.from_markup(line).plain for line in self._lines(report, context))

    def _lines(self, report: Report, context: ReportContext) -> list[str]:
        lines = [
            "[bold]=== Code Smells Report ===[/bold]",
            f"Project: {escape(str(context.project_dir))}",
            f"Languages: {', '.join(context.languages)}",
        ]

        errors = report.errors
        warnings = report.warnings

        if context.severity_filter is not SeverityFilter.WARNINGS_ONLY and errors:
            lines.append("")
            lines.append(f"[bold]--- ERRORS ({len(errors)}) ---[/bold]")
            for issue in errors:
                lines.append(f"[red]ERROR[/red]  {escape(issue.message)}")

        if context.severity_filter is not SeverityFilter.ERRORS_ONLY and warnings:
            lines.append("")
            lines.append(f"[bold]--- WARNINGS ({len(warnings)}) ---[/bold]")
            for issue in warnings:
                lines.append(f"[yellow]WARN[/yellow]   {escape(issue.message)}")

        lines.append("")
        lines.append("[bold]--- SUMMARY ---[/bold]")
        lines.append(f"Files scanned: {report.files_scanned}")
        if report.files_skipped:
            lines.append(f"Files skipped: [yellow]{report.files_skipped}[/yellow]")
        lines.append(f"Errors: {_count(report.error_count, 'red')}")
        lines.append(f"Warnings: {_count(report.warning_count, 'yellow')}")
        return lines
