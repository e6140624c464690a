"""Per-line counters for structural delimiters.

Both counters look at one line at a time and know nothing about the lines
around it: block comments and multi-line strings are not recognized.
"""

from __future__ import annotations


def count_braces(
    line: str,
    char_literals: bool = True,
    template_literals: bool = False,
    shared_quotes: bool = False,
) -> tuple[int, int]:
    """Count ``{`` and ``}`` outside string literals and ``//`` comments.

    Args:
        line: One source line
        char_literals: Track ``'`` separately from ``"`` (Rust, TypeScript)
        template_literals: A backtick opens a double-quote string (TypeScript).
            Only a ``"`` can close it again, so a template literal stays open
            to the end of the line unless it contains a double quote.
        shared_quotes: One string flag toggled by either quote (Dart)

    Returns:
        (opens, closes)
    """
    opens = 0
    closes = 0
    in_string = False
    in_char = False
    escape_next = False

    i = 0
    length = len(line)
    while i < length:
        if escape_next:
            escape_next = False
            i += 1
            continue

        c = line[i]
        in_literal = in_string or in_char

        if in_literal and c == "\\":
            escape_next = True
            i += 1
            continue

        if not in_literal and c == "/" and line[i + 1 : i + 2] == "/":
            break

        if shared_quotes:
            if c == '"' or c == "'":
                in_string = not in_string
        elif c == '"' and not in_char:
            in_string = not in_string
        elif c == "'" and char_literals and not in_string:
            in_char = not in_char
        elif c == "`" and template_literals and not in_string and not in_char:
            in_string = not in_string

        if not (in_string or in_char):
            if c == "{":
                opens += 1
            elif c == "}":
                closes += 1

        i += 1

    return opens, closes


def strip_hash_comment(line: str) -> str:
    """Drop everything from the first ``#``."""
    idx = line.find("#")
    return line if idx < 0 else line[:idx]


def count_do_end(line: str) -> tuple[int, int]:
    """Count whitespace-separated ``do`` and ``end`` words.

    ``do:`` keyword syntax is not a ``do`` word, so single-line clauses add
    nothing here.

    Returns:
        (dos, ends)
    """
    dos = 0
    ends = 0
    for word in strip_hash_comment(line).split():
        if word == "do":
            dos += 1
        elif word == "end":
            ends += 1
    return dos, ends
