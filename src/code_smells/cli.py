"""Command-line interface for code-smells"""

from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.console import Console

from . import __version__
from .config import load_config
from .core import SmellAnalyzer
from .detect import DetectedLanguage, detect_languages, parse_language_list
from .exceptions import CodeSmellsError, InvalidPathError
from .formatters import get_formatter
from .languages import LanguageType
from .logging_config import setup_logging
from .models import CheckType, ReportContext, SeverityFilter

app = typer.Typer(
    name="code-smells",
    help="Detect code smells across multiple programming languages",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]code-smells[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


def _resolve_project_dir(directory: Path) -> Path:
    try:
        project_dir = directory.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(directory, f"cannot access directory: {e}")
    if not project_dir.is_dir():
        raise InvalidPathError(directory, "not a directory")
    return project_dir


@app.command()
def main(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to analyze (default: current directory)",
    ),
    check: CheckType = typer.Option(
        CheckType.ALL,
        "--check",
        "-c",
        help="Check type: all, file-length, functions, nesting",
        case_sensitive=False,
    ),
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        "-l",
        help="Comma-separated languages (default: auto-detect)",
    ),
    fmt: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text, json",
        click_type=click.Choice(["text", "json"], case_sensitive=False),
    ),
    errors_only: bool = typer.Option(
        False,
        "--errors",
        "-e",
        help="Show only errors (no warnings)",
    ),
    warnings_only: bool = typer.Option(
        False,
        "--warnings",
        "-w",
        help="Show only warnings (no errors)",
    ),
    file_warn: Optional[int] = typer.Option(None, "--file-warn", min=0, help="File length warning threshold"),
    file_error: Optional[int] = typer.Option(None, "--file-error", min=0, help="File length error threshold"),
    func_warn: Optional[int] = typer.Option(None, "--func-warn", min=0, help="Function length warning threshold"),
    func_error: Optional[int] = typer.Option(None, "--func-error", min=0, help="Function length error threshold"),
    nest_warn: Optional[int] = typer.Option(None, "--nest-warn", min=0, help="Nesting depth warning threshold"),
    nest_error: Optional[int] = typer.Option(None, "--nest-error", min=0, help="Nesting depth error threshold"),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Glob pattern to exclude, relative to the source directory (repeatable)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Report files, functions and blocks over size and nesting thresholds.

    Exit status is 2 when errors are found, 1 for warnings only, 0 when clean.

    [bold cyan]Examples:[/bold cyan]

      code-smells /path/to/project

      code-smells . --lang python,rust --check functions

      code-smells . --format json --func-warn 25
    """
    if errors_only and warnings_only:
        console.print("[red]Error:[/red] --errors and --warnings are mutually exclusive")
        raise typer.Exit(1)

    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    logger = setup_logging(
        verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None
    )

    try:
        project_dir = _resolve_project_dir(directory)

        detected: list[DetectedLanguage]
        if lang is not None:
            detected = parse_language_list(lang)
        else:
            detected = detect_languages(project_dir)

        if not detected:
            console.print(f"No supported languages detected in {project_dir}")
            console.print(f"Supported: {', '.join(language.value for language in LanguageType)}")
            raise typer.Exit(1)

        settings = load_config(
            project_dir,
            config_file=config,
            exclude=exclude,
            file_warn=file_warn,
            file_error=file_error,
            func_warn=func_warn,
            func_error=func_error,
            nest_warn=nest_warn,
            nest_error=nest_error,
        )
        logger.debug(f"Config layers: {[layer.source for layer in settings.layers]}")

        report = SmellAnalyzer(project_dir, detected, settings, check).analyze()

        if errors_only:
            severity_filter = SeverityFilter.ERRORS_ONLY
        elif warnings_only:
            severity_filter = SeverityFilter.WARNINGS_ONLY
        else:
            severity_filter = SeverityFilter.ALL

        context = ReportContext(
            project_dir=project_dir,
            languages=tuple(d.language.value for d in detected),
            severity_filter=severity_filter,
        )
        get_formatter(fmt.lower()).render(report, context)

    except CodeSmellsError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Scan interrupted by user")
        console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception("Unexpected error during scan")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

    raise typer.Exit(report.exit_code)


if __name__ == "__main__":
    app()
