"""Shared record model and scan state for the language parsers.

Every parser makes one forward pass over a file's lines and keeps at most
one function open at a time. A new signature always finalizes the open
function, even when it is lexically nested inside it, so local functions
and closures are reported as siblings of the function that contains them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class FunctionInfo:
    """A function or method found by a line scanner.

    Attributes:
        name: Extracted identifier (may be empty)
        start_line: 1-based line of the signature
        line_count: Lines in the function's extent
        max_nesting: Deepest structural nesting relative to the signature
    """

    name: str
    start_line: int
    line_count: int
    max_nesting: int


class LanguageParser(Protocol):
    """What the scan driver needs from a language."""

    name: str

    def parse_functions(self, content: str) -> list[FunctionInfo]:
        """Return the functions in ``content`` ordered by start line."""
        ...

    def should_skip(self, path: Path) -> bool:
        """True for build output, vendored code and generated files."""
        ...


@dataclass
class ExtentState:
    """The open function of a single file scan, plus finished records."""

    functions: list[FunctionInfo] = field(default_factory=list)
    in_function: bool = False
    name: str = ""
    start_line: int = 0
    max_nesting: int = 0

    def open(self, name: str, line_num: int) -> None:
        self.name = name
        self.start_line = line_num
        self.in_function = True
        self.max_nesting = 0

    def note_depth(self, depth: int) -> None:
        if depth > self.max_nesting:
            self.max_nesting = depth

    def close(self, line_count: int) -> None:
        self.functions.append(
            FunctionInfo(
                name=self.name,
                start_line=self.start_line,
                line_count=line_count,
                max_nesting=self.max_nesting,
            )
        )
        self.in_function = False
        self.name = ""
        self.start_line = 0
        self.max_nesting = 0

    def interrupt(self, line_num: int) -> None:
        """Finalize the open function because a new signature starts at ``line_num``.

        The new signature line is not counted into the old function.
        """
        if self.in_function:
            self.close(line_num - self.start_line)

    def finish(self, total_lines: int) -> list[FunctionInfo]:
        """Finalize a function left open at end of file (inclusive)."""
        if self.in_function:
            self.close(total_lines - self.start_line + 1)
        return self.functions


def split_lines(content: str) -> list[str]:
    """Split text into lines on ``\\n``, dropping a trailing ``\\r``.

    A final newline does not produce an extra empty line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def path_contains(path: Path, fragments: tuple[str, ...]) -> bool:
    """True if the POSIX form of ``path`` contains any of ``fragments``."""
    path_str = path.as_posix()
    return any(fragment in path_str for fragment in fragments)
