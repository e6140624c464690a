"""Elixir: ``def``-family clauses closed by ``do``/``end`` balance.

The keyword depth restarts at zero on every ``def`` line. On top of the
keyword depth, a line-local heuristic credits control constructs and
anonymous functions with nesting, since ``case ... do`` blocks and
``fn ... ->`` clauses often open a scope without a matching ``do`` word
on the same line.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .base import ExtentState, FunctionInfo, path_contains, split_lines
from .delimiters import count_do_end, strip_hash_comment

DEF_PATTERN = re.compile(r"^\s*(def|defp|defmacro|defmacrop)\s+([a-z_][a-zA-Z0-9_?!]*)")

NESTING_KEYWORDS = ("case", "cond", "if", "unless", "with", "try", "receive", "for")

SKIP_FRAGMENTS = ("/deps/", "/_build/", "/.git/")


def extract_function_name(line: str) -> Optional[str]:
    """Return the clause name, or None for non-definitions and ``, do:`` one-liners."""
    match = DEF_PATTERN.match(line)
    if match is None:
        return None
    if ", do:" in line:
        return None
    return match.group(2) or ""


def count_nesting_keywords(line: str) -> int:
    """Nesting credited to a single line.

    Substring matches, so ``if`` also fires inside ``diff`` when ``do`` is
    present. Each keyword counts at most once per line.
    """
    line = strip_hash_comment(line)
    depth = 0
    for keyword in NESTING_KEYWORDS:
        if keyword in line and "do" in line:
            depth += 1
    if "fn" in line and "->" in line:
        depth += 1
    return depth


class ElixirParser:
    """Line scanner for ``.ex`` and ``.exs`` files."""

    name = "elixir"

    def parse_functions(self, content: str) -> list[FunctionInfo]:
        state = ExtentState()
        depth = 0
        lines = split_lines(content)

        for line_num, line in enumerate(lines, start=1):
            name = extract_function_name(line)
            if name is not None:
                state.interrupt(line_num)
                state.open(name, line_num)
                depth = 0
                dos, ends = count_do_end(line)
                depth += dos - ends
                continue

            dos, ends = count_do_end(line)
            depth += dos - ends

            if not state.in_function:
                continue

            if depth > 0:
                state.note_depth(depth)
            state.note_depth(count_nesting_keywords(line))

            if depth <= 0 and line_num > state.start_line:
                state.close(line_num - state.start_line + 1)

        return state.finish(len(lines))

    def should_skip(self, path: Path) -> bool:
        return path_contains(path, SKIP_FRAGMENTS)
