"""Language registry: one line scanner per supported language.

Adding a new language:
  1. Write a module with a parser exposing ``parse_functions`` and ``should_skip``.
  2. Add a member to ``LanguageType`` and an entry to ``_PARSERS``.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from ..exceptions import UnsupportedLanguageError
from .base import ExtentState, FunctionInfo, LanguageParser, split_lines
from .dart import DartParser
from .elixir import ElixirParser
from .python import PythonParser
from .rust import RustParser
from .typescript import TypeScriptParser


class LanguageType(Enum):
    """Supported languages, valued by their CLI/config name."""

    ELIXIR = "elixir"
    DART = "dart"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    RUST = "rust"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def extensions(self) -> tuple[str, ...]:
        """File extensions without the leading dot."""
        return _EXTENSIONS[self]

    @classmethod
    def from_name(cls, name: str) -> "LanguageType":
        """Look up a language by name, case-insensitively.

        Raises:
            UnsupportedLanguageError: If no language has that name
        """
        key = name.strip().lower()
        for language in cls:
            if language.value == key:
                return language
        raise UnsupportedLanguageError(name, [lang.value for lang in cls])


_DISPLAY_NAMES = {
    LanguageType.ELIXIR: "Elixir",
    LanguageType.DART: "Dart",
    LanguageType.TYPESCRIPT: "TypeScript",
    LanguageType.PYTHON: "Python",
    LanguageType.RUST: "Rust",
}

_EXTENSIONS = {
    LanguageType.ELIXIR: ("ex", "exs"),
    LanguageType.DART: ("dart",),
    LanguageType.TYPESCRIPT: ("ts", "tsx"),
    LanguageType.PYTHON: ("py",),
    LanguageType.RUST: ("rs",),
}

_PARSERS = {
    LanguageType.ELIXIR: ElixirParser,
    LanguageType.DART: DartParser,
    LanguageType.TYPESCRIPT: TypeScriptParser,
    LanguageType.PYTHON: PythonParser,
    LanguageType.RUST: RustParser,
}


def get_parser(language: Union[LanguageType, str]) -> LanguageParser:
    """Get a parser instance for a language or language name.

    Raises:
        UnsupportedLanguageError: If the name is not recognized
    """
    if not isinstance(language, LanguageType):
        language = LanguageType.from_name(language)
    return _PARSERS[language]()


def parse_functions(content: str, language: Union[LanguageType, str]) -> list[FunctionInfo]:
    """Scan one file's text with the parser for ``language``."""
    return get_parser(language).parse_functions(content)


__all__ = [
    "LanguageType",
    "LanguageParser",
    "FunctionInfo",
    "ExtentState",
    "DartParser",
    "ElixirParser",
    "PythonParser",
    "RustParser",
    "TypeScriptParser",
    "get_parser",
    "parse_functions",
    "split_lines",
]
