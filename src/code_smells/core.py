"""Scan driver: walks each language's sources and runs the selected checks."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .checks import check_file_length, check_function_length, check_nesting_depth
from .config import SmellsConfig, Thresholds
from .detect import DetectedLanguage
from .exceptions import FileAccessError
from .file_ops import iter_source_files, safe_read_file
from .languages import LanguageParser, get_parser, split_lines
from .logging_config import get_logger
from .models import CheckType, Issue, Report

logger = get_logger(__name__)


class SmellAnalyzer:
    """Runs file-length, function-length and nesting checks over a project.

    Each file is read once and scanned with a fresh parser state. Issues are
    collected per language in check order: file length, then function
    length, then nesting depth.
    """

    def __init__(
        self,
        project_dir: Path,
        languages: list[DetectedLanguage],
        config: Optional[SmellsConfig] = None,
        check_type: CheckType = CheckType.ALL,
    ):
        self.project_dir = project_dir
        self.languages = languages
        self.config = config or SmellsConfig()
        self.check_type = check_type

    def analyze(self) -> Report:
        report = Report()

        for detected in self.languages:
            source_path = self.project_dir / detected.source_dir
            if not source_path.is_dir():
                logger.info(
                    f"No {detected.language.display_name} sources at {source_path}, skipping"
                )
                continue
            self._scan_language(detected, source_path, report)

        logger.info(
            f"Scan complete: {report.files_scanned} scanned, {report.files_skipped} skipped, "
            f"{report.error_count} errors, {report.warning_count} warnings"
        )
        return report

    def _scan_language(self, detected: DetectedLanguage, source_path: Path, report: Report) -> None:
        language = detected.language
        parser = get_parser(language)
        thresholds = self.config.thresholds_for(language)
        logger.debug(f"{language.display_name} thresholds: {thresholds}")

        file_issues: list[Issue] = []
        function_issues: list[Issue] = []
        nesting_issues: list[Issue] = []

        files = iter_source_files(
            source_path,
            language.extensions,
            parser.should_skip,
            self.config.exclude_patterns,
        )
        for path in files:
            try:
                content = safe_read_file(path)
            except FileAccessError as e:
                report.files_skipped += 1
                logger.warning(f"Skipped {path}: {e.reason}")
                continue

            report.files_scanned += 1
            rel_path = path.relative_to(source_path)
            self._check_file(
                content,
                rel_path,
                parser,
                thresholds,
                file_issues,
                function_issues,
                nesting_issues,
            )

        report.extend(file_issues)
        report.extend(function_issues)
        report.extend(nesting_issues)

    def _check_file(
        self,
        content: str,
        rel_path: Path,
        parser: LanguageParser,
        thresholds: Thresholds,
        file_issues: list[Issue],
        function_issues: list[Issue],
        nesting_issues: list[Issue],
    ) -> None:
        if self.check_type.checks_file_length:
            issue = check_file_length(rel_path, len(split_lines(content)), thresholds)
            if issue is not None:
                file_issues.append(issue)

        if not (self.check_type.checks_functions or self.check_type.checks_nesting):
            return

        functions = parser.parse_functions(content)
        logger.debug(f"{rel_path}: {len(functions)} functions")

        for func in functions:
            if self.check_type.checks_functions:
                issue = check_function_length(func, rel_path, thresholds)
                if issue is not None:
                    function_issues.append(issue)
            if self.check_type.checks_nesting:
                issue = check_nesting_depth(func, rel_path, thresholds)
                if issue is not None:
                    nesting_issues.append(issue)


def analyze(
    project_dir: Path,
    languages: list[DetectedLanguage],
    config: Optional[SmellsConfig] = None,
    check_type: CheckType = CheckType.ALL,
) -> Report:
    """Scan ``project_dir`` and return the report."""
    return SmellAnalyzer(project_dir, languages, config, check_type).analyze()
