"""TypeScript: function declarations and block-bodied arrow assignments."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .base import FunctionInfo, path_contains
from .delimiters import count_braces
from .tracking import scan_brace_extents

FUNC_PATTERN = re.compile(
    r"^\s*(export\s+)?(async\s+)?function\s+([a-zA-Z_][a-zA-Z0-9_]*)"
)
ARROW_PATTERN = re.compile(
    r"^\s*(export\s+)?(const|let|var)\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*[=:].*=>"
)

SKIP_FRAGMENTS = ("/node_modules/", "/dist/", "/build/", "/.git/")


def extract_function_name(line: str) -> Optional[str]:
    """Return the declared function name, or None.

    Type aliases and interfaces are never functions. An arrow without an
    opening brace on its line is a single expression and is ignored.
    """
    trimmed = line.strip()
    if trimmed.startswith("type ") or trimmed.startswith("interface "):
        return None

    if "=>" in line and "{" not in line:
        return None

    for pattern in (FUNC_PATTERN, ARROW_PATTERN):
        match = pattern.match(line)
        if match is not None:
            return match.group(3) or ""

    return None


def count_ts_braces(line: str) -> tuple[int, int]:
    return count_braces(line, char_literals=True, template_literals=True)


class TypeScriptParser:
    """Line scanner for ``.ts`` and ``.tsx`` files."""

    name = "typescript"

    def parse_functions(self, content: str) -> list[FunctionInfo]:
        return scan_brace_extents(content, extract_function_name, count_ts_braces)

    def should_skip(self, path: Path) -> bool:
        if path_contains(path, SKIP_FRAGMENTS):
            return True
        # Declaration files carry no bodies.
        return path.name.endswith(".d.ts")
