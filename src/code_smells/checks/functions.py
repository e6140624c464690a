"""Function length and nesting depth checks over scanned function records."""

from pathlib import Path
from typing import Optional

from ..config import Thresholds
from ..languages import FunctionInfo
from ..models import Issue
from .base import classify


def check_function_length(
    func: FunctionInfo, rel_path: Path, thresholds: Thresholds
) -> Optional[Issue]:
    result = classify(func.line_count, thresholds.func_warn, thresholds.func_error)
    if result is None:
        return None

    severity, limit = result
    return Issue(
        severity=severity,
        file=rel_path,
        line=func.start_line,
        name=func.name,
        check_type="function-length",
        value=func.line_count,
        limit=limit,
        message=f"{rel_path.as_posix()}:{func.start_line} {func.name} ({func.line_count} lines)",
    )


def check_nesting_depth(
    func: FunctionInfo, rel_path: Path, thresholds: Thresholds
) -> Optional[Issue]:
    result = classify(func.max_nesting, thresholds.nest_warn, thresholds.nest_error)
    if result is None:
        return None

    severity, limit = result
    return Issue(
        severity=severity,
        file=rel_path,
        line=func.start_line,
        name=func.name,
        check_type="nesting-depth",
        value=func.max_nesting,
        limit=limit,
        message=f"{rel_path.as_posix()}:{func.start_line} {func.name} (depth: {func.max_nesting})",
    )
