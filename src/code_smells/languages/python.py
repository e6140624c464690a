"""Python: ``def`` and ``async def`` closed by indentation."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .base import ExtentState, FunctionInfo, path_contains, split_lines

DEF_PATTERN = re.compile(r"^(\s*)(async\s+)?def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(")

# Nesting is estimated in steps of this many columns.
INDENT_WIDTH = 4

SKIP_FRAGMENTS = (
    "/__pycache__/",
    "/.venv/",
    "/venv/",
    "/env/",
    "/.git/",
    "/site-packages/",
)


def match_signature(line: str) -> Optional[tuple[str, int]]:
    """Return (name, indent width) for a ``def`` line, or None."""
    match = DEF_PATTERN.match(line)
    if match is None:
        return None
    return match.group(3) or "", len(match.group(1))


def measure_indent(line: str) -> int:
    """Number of leading whitespace characters; a tab counts as one."""
    return len(line) - len(line.lstrip())


class PythonParser:
    """Line scanner for ``.py`` files.

    Unlike the brace languages, the line that de-indents out of a function
    is not part of it. Blank and comment-only lines never close a function.
    """

    name = "python"

    def parse_functions(self, content: str) -> list[FunctionInfo]:
        state = ExtentState()
        func_indent = 0
        lines = split_lines(content)

        for line_num, line in enumerate(lines, start=1):
            signature = match_signature(line)
            if signature is not None:
                state.interrupt(line_num)
                name, func_indent = signature
                state.open(name, line_num)
                continue

            if not state.in_function:
                continue

            trimmed = line.strip()
            if not trimmed or trimmed.startswith("#"):
                continue

            indent = measure_indent(line)
            if indent <= func_indent and line_num > state.start_line:
                state.close(line_num - state.start_line)
                continue

            if indent > func_indent:
                state.note_depth((indent - func_indent) // INDENT_WIDTH)

        return state.finish(len(lines))

    def should_skip(self, path: Path) -> bool:
        return path_contains(path, SKIP_FRAGMENTS)
