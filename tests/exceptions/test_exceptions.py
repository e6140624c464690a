"""Tests for the code-smells exception hierarchy."""

from pathlib import Path

import pytest

from code_smells.exceptions import (
    AnalysisError,
    CodeSmellsError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
    UnsupportedLanguageError,
)


class TestHierarchy:
    """Every error is a CodeSmellsError."""

    @pytest.mark.parametrize(
        "error",
        [
            FileAccessError(Path("a.py"), "denied"),
            UnsupportedLanguageError("cobol", ["python"]),
            InvalidPathError(Path("/nope"), "missing"),
            InvalidConfigError("func_warn", -1, "negative"),
        ],
    )
    def test_base_class(self, error):
        assert isinstance(error, CodeSmellsError)

    def test_analysis_errors(self):
        assert issubclass(FileAccessError, AnalysisError)
        assert issubclass(UnsupportedLanguageError, AnalysisError)

    def test_configuration_errors(self):
        assert issubclass(InvalidPathError, ConfigurationError)
        assert issubclass(InvalidConfigError, ConfigurationError)


class TestMessages:
    """String forms carry their details."""

    def test_plain_message(self):
        assert str(CodeSmellsError("boom")) == "boom"

    def test_details_appended(self):
        error = FileAccessError(Path("a.py"), "denied")
        assert str(error) == "Cannot access file: a.py (filepath=a.py, reason=denied)"
        assert error.reason == "denied"

    def test_unsupported_language(self):
        error = UnsupportedLanguageError("cobol", ["python", "rust"])
        assert error.details["supported"] == "python, rust"
        assert "cobol" in str(error)

    def test_invalid_config(self):
        error = InvalidConfigError("func_warn", -1, "must be non-negative")
        assert error.key == "func_warn"
        assert error.value == -1
        assert "func_warn" in str(error)
