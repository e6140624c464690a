"""Brace-balance extent tracking shared by Dart, TypeScript and Rust."""

from __future__ import annotations

from typing import Callable, Optional

from .base import ExtentState, FunctionInfo, split_lines

SignatureMatcher = Callable[[str], Optional[str]]
DelimiterCounter = Callable[[str], tuple[int, int]]


def scan_brace_extents(
    content: str,
    match_signature: SignatureMatcher,
    count_delimiters: DelimiterCounter,
) -> list[FunctionInfo]:
    """Attribute lines to functions by brace depth.

    A function opens on a signature line with ``base_depth`` set to the
    running depth before that line's braces, and closes on the first later
    line where the depth falls back to ``base_depth`` or below. The running
    depth is never reset between functions.

    Args:
        content: File text
        match_signature: Returns the function name for a signature line,
            None otherwise
        count_delimiters: Returns (opens, closes) for a line

    Returns:
        Functions ordered by start line
    """
    state = ExtentState()
    depth = 0
    base_depth = 0
    lines = split_lines(content)

    for line_num, line in enumerate(lines, start=1):
        name = match_signature(line)
        if name is not None:
            state.interrupt(line_num)
            state.open(name, line_num)
            base_depth = depth
            opens, closes = count_delimiters(line)
            depth += opens - closes
            continue

        opens, closes = count_delimiters(line)
        depth += opens - closes

        if not state.in_function:
            continue

        state.note_depth(max(0, depth - base_depth))
        if depth <= base_depth and line_num > state.start_line:
            state.close(line_num - state.start_line + 1)

    return state.finish(len(lines))
