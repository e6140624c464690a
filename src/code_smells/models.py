"""Data models for scan results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


class CheckType(Enum):
    """Which checks a run performs."""

    ALL = "all"
    FILE_LENGTH = "file-length"
    FUNCTIONS = "functions"
    NESTING = "nesting"

    @property
    def checks_file_length(self) -> bool:
        return self in (CheckType.ALL, CheckType.FILE_LENGTH)

    @property
    def checks_functions(self) -> bool:
        return self in (CheckType.ALL, CheckType.FUNCTIONS)

    @property
    def checks_nesting(self) -> bool:
        return self in (CheckType.ALL, CheckType.NESTING)


class SeverityFilter(Enum):
    """Which issues a report lists."""

    ALL = "all"
    ERRORS_ONLY = "errors"
    WARNINGS_ONLY = "warnings"

    def allows(self, severity: Severity) -> bool:
        if self is SeverityFilter.ERRORS_ONLY:
            return severity is Severity.ERROR
        if self is SeverityFilter.WARNINGS_ONLY:
            return severity is Severity.WARNING
        return True


@dataclass(frozen=True)
class Issue:
    """A file or function over one of its thresholds.

    Attributes:
        severity: warning or error
        file: Path relative to the language's source directory
        line: Start line of the function (None for file-level issues)
        name: Function name (None for file-level issues)
        check_type: "file-length", "function-length" or "nesting-depth"
        value: Measured value
        limit: Threshold that was exceeded
        message: Human-readable one-liner
    """

    severity: Severity
    file: Path
    line: Optional[int]
    name: Optional[str]
    check_type: str
    value: int
    limit: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "severity": self.severity.value,
            "file": self.file.as_posix(),
        }
        if self.line is not None:
            data["line"] = self.line
        if self.name is not None:
            data["name"] = self.name
        data["type"] = self.check_type
        data["value"] = self.value
        data["limit"] = self.limit
        return data


@dataclass
class Report:
    """All issues found in one run, in discovery order."""

    issues: list[Issue] = field(default_factory=list)
    files_scanned: int = 0
    files_skipped: int = 0

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def exit_code(self) -> int:
        """2 when any error was found, 1 for warnings only, 0 when clean."""
        if self.error_count > 0:
            return 2
        if self.warning_count > 0:
            return 1
        return 0

    def extend(self, issues: list[Issue]) -> None:
        self.issues.extend(issues)


@dataclass(frozen=True)
class ReportContext:
    """What a formatter needs besides the issues."""

    project_dir: Path
    languages: tuple[str, ...]
    severity_filter: SeverityFilter = SeverityFilter.ALL
