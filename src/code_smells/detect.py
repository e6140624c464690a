"""Language detection from project marker files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exceptions import UnsupportedLanguageError
from .languages import LanguageType
from .logging_config import get_logger

logger = get_logger(__name__)

# Source directory used when a language is named explicitly.
EXPLICIT_SOURCE_DIRS = {
    LanguageType.ELIXIR: "lib",
    LanguageType.DART: "lib",
    LanguageType.TYPESCRIPT: "src",
    LanguageType.PYTHON: ".",
    LanguageType.RUST: "src",
}

PYTHON_MARKERS = ("setup.py", "pyproject.toml", "requirements.txt")


@dataclass(frozen=True)
class DetectedLanguage:
    """A language to scan and the directory (relative to the project) holding its sources."""

    language: LanguageType
    source_dir: str


def _src_or_root(project_dir: Path) -> str:
    return "src" if (project_dir / "src").is_dir() else "."


def has_typescript_files(project_dir: Path) -> bool:
    """True if a package.json project has .ts/.tsx files directly in src, lib or the root."""
    if not (project_dir / "package.json").exists():
        return False

    for name in ("src", "lib", "."):
        dir_path = project_dir / name
        if not dir_path.is_dir():
            continue
        try:
            entries = list(dir_path.iterdir())
        except OSError as e:
            logger.debug(f"Cannot list {dir_path}: {e}")
            continue
        if any(entry.suffix in (".ts", ".tsx") for entry in entries):
            return True
    return False


def detect_languages(project_dir: Path) -> list[DetectedLanguage]:
    """Detect languages in a project directory by looking for marker files."""
    detected: list[DetectedLanguage] = []

    if (project_dir / "mix.exs").exists():
        detected.append(DetectedLanguage(LanguageType.ELIXIR, "lib"))

    if (project_dir / "pubspec.yaml").exists():
        detected.append(DetectedLanguage(LanguageType.DART, "lib"))

    if (project_dir / "tsconfig.json").exists() or has_typescript_files(project_dir):
        detected.append(DetectedLanguage(LanguageType.TYPESCRIPT, _src_or_root(project_dir)))

    if any((project_dir / marker).exists() for marker in PYTHON_MARKERS):
        detected.append(DetectedLanguage(LanguageType.PYTHON, _src_or_root(project_dir)))

    if (project_dir / "Cargo.toml").exists():
        detected.append(DetectedLanguage(LanguageType.RUST, "src"))

    logger.debug(f"Detected languages: {[d.language.value for d in detected]}")
    return detected


def parse_language_list(value: str) -> list[DetectedLanguage]:
    """Parse a comma-separated language list; unknown names are dropped with a warning."""
    detected: list[DetectedLanguage] = []
    for item in value.split(","):
        if not item.strip():
            continue
        try:
            language = LanguageType.from_name(item)
        except UnsupportedLanguageError as e:
            logger.warning(str(e))
            continue
        detected.append(DetectedLanguage(language, EXPLICIT_SOURCE_DIRS[language]))
    return detected
