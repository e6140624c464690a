"""File length check, computed from raw line counts."""

from pathlib import Path
from typing import Optional

from ..config import Thresholds
from ..models import Issue
from .base import classify


def check_file_length(rel_path: Path, line_count: int, thresholds: Thresholds) -> Optional[Issue]:
    result = classify(line_count, thresholds.file_warn, thresholds.file_error)
    if result is None:
        return None

    severity, limit = result
    return Issue(
        severity=severity,
        file=rel_path,
        line=None,
        name=None,
        check_type="file-length",
        value=line_count,
        limit=limit,
        message=f"{rel_path.as_posix()} ({line_count} lines, limit: {limit})",
    )
