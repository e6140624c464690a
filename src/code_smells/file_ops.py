"""
File operations for code-smells.

Directory walking with per-language filtering, and text reads that turn
OS and decoding failures into FileAccessError.
"""

from collections.abc import Callable, Generator, Iterable
from pathlib import Path

from .exceptions import FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)


def safe_read_file(filepath: Path, encoding: str = "utf-8", errors: str = "strict") -> str:
    """
    Read a source file as text.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read or decoded
    """
    try:
        with open(filepath, encoding=encoding, errors=errors, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def should_skip_file(filepath: Path, exclude_patterns: Iterable[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        filepath: File to check
        exclude_patterns: Glob patterns matched against the path from the right

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False


def iter_source_files(
    root_dir: Path,
    extensions: Iterable[str],
    skip: Callable[[Path], bool],
    exclude_patterns: Iterable[str] = (),
) -> Generator[Path, None, None]:
    """
    Walk ``root_dir`` recursively in sorted order and yield matching files.

    Args:
        root_dir: Directory to walk
        extensions: Extensions without the leading dot
        skip: Language skip predicate, called with the absolute path
        exclude_patterns: Extra glob patterns to exclude

    Yields:
        Absolute file paths
    """
    ext_set = {f".{ext}" for ext in extensions}
    patterns = tuple(exclude_patterns)

    try:
        candidates = sorted(root_dir.rglob("*"))
    except OSError as e:
        raise FileAccessError(root_dir, f"Directory scan failed: {e}")

    for path in candidates:
        if path.suffix not in ext_set or not path.is_file():
            continue

        if skip(path):
            logger.debug(f"Skipped (language): {path}")
            continue

        if should_skip_file(path.relative_to(root_dir), patterns):
            logger.debug(f"Skipped (pattern): {path}")
            continue

        yield path
