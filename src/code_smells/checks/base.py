"""Severity classification shared by all checks."""

from typing import Optional

from ..models import Severity


def classify(value: int, warn: int, error: int) -> Optional[tuple[Severity, int]]:
    """Return (severity, exceeded limit), or None when within limits."""
    if value > error:
        return Severity.ERROR, error
    if value > warn:
        return Severity.WARNING, warn
    return None
