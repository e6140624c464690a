"""Rust: ``fn`` items closed by brace balance."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .base import FunctionInfo, path_contains
from .delimiters import count_braces
from .tracking import scan_brace_extents

FN_PATTERN = re.compile(
    r"^\s*(pub(\([^)]*\))?\s+)?(async\s+)?(unsafe\s+)?fn\s+([a-zA-Z_][a-zA-Z0-9_]*)"
)

SKIP_FRAGMENTS = ("/target/", "/.git/")


def extract_function_name(line: str) -> Optional[str]:
    """Name of the ``fn`` declared on ``line``, covering ``pub(crate)``, ``async`` and ``unsafe``."""
    match = FN_PATTERN.match(line)
    if match is None:
        return None
    return match.group(5) or ""


def count_rust_braces(line: str) -> tuple[int, int]:
    return count_braces(line, char_literals=True)


class RustParser:
    """Line scanner for ``.rs`` files."""

    name = "rust"

    def parse_functions(self, content: str) -> list[FunctionInfo]:
        return scan_brace_extents(content, extract_function_name, count_rust_braces)

    def should_skip(self, path: Path) -> bool:
        return path_contains(path, SKIP_FRAGMENTS)
