"""Dart: typed method and function declarations closed by brace balance."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .base import FunctionInfo, path_contains
from .delimiters import count_braces
from .tracking import scan_brace_extents

METHOD_PATTERN = re.compile(
    r"^\s*(static\s+)?"
    r"(void|bool|int|double|String|Future|Widget|State|List|Map|Set|dynamic"
    r"|[A-Z][a-zA-Z0-9_<>,?\s]*)"
    r"\s+([a-z_][a-zA-Z0-9_]*)\s*\("
)

SKIP_FRAGMENTS = ("/.dart_tool/", "/build/", "/.git/", "firebase_options.dart")
GENERATED_SUFFIXES = (".g.dart", ".freezed.dart", ".gen.dart")


def extract_method_name(line: str) -> Optional[str]:
    """Return the method name declared on ``line``, or None.

    Arrow bodies without a brace, abstract signatures ending in ``;`` and
    getters are not tracked.
    """
    match = METHOD_PATTERN.match(line)
    if match is None:
        return None

    if "=>" in line and "{" not in line:
        return None
    if line.strip().endswith(";"):
        return None
    if " get " in line:
        return None

    return match.group(3) or ""


def count_dart_braces(line: str) -> tuple[int, int]:
    return count_braces(line, shared_quotes=True)


class DartParser:
    """Line scanner for ``.dart`` files."""

    name = "dart"

    def parse_functions(self, content: str) -> list[FunctionInfo]:
        return scan_brace_extents(content, extract_method_name, count_dart_braces)

    def should_skip(self, path: Path) -> bool:
        if path_contains(path, SKIP_FRAGMENTS):
            return True
        return path.as_posix().endswith(GENERATED_SUFFIXES)
