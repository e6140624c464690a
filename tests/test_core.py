"""Tests for the scan driver."""

from pathlib import Path

from code_smells.config import SmellsConfig, ThresholdLayer, load_config
from code_smells.core import SmellAnalyzer, analyze
from code_smells.detect import DetectedLanguage
from code_smells.languages import LanguageType
from code_smells.models import CheckType, Severity

from conftest import python_function

PYTHON_SRC = [DetectedLanguage(LanguageType.PYTHON, "src")]

DEEP_FUNCTION = (
    "def deep():\n"
    "    if a:\n"
    "        if b:\n"
    "            if c:\n"
    "                if d:\n"
    "                    return 1\n"
)


class TestSmellAnalyzer:
    """End-to-end scans over a temporary project."""

    def test_clean_project(self, project):
        project("src/pkg/mod.py", python_function("small", 3))
        report = analyze(project.root, PYTHON_SRC)
        assert report.issues == []
        assert report.files_scanned == 1
        assert report.exit_code == 0

    def test_long_function_warning(self, project):
        project("src/pkg/mod.py", python_function("short", 5) + python_function("long", 34))
        report = analyze(project.root, PYTHON_SRC)

        assert report.warning_count == 1
        issue = report.issues[0]
        assert issue.check_type == "function-length"
        assert issue.file == Path("pkg/mod.py")
        assert issue.name == "long"
        assert issue.line == 7
        assert issue.value == 35
        assert report.exit_code == 1

    def test_long_function_error(self, project):
        project("src/mod.py", python_function("huge", 60))
        report = analyze(project.root, PYTHON_SRC)
        assert report.error_count == 1
        assert report.errors[0].limit == 50
        assert report.exit_code == 2

    def test_nesting_warning(self, project):
        project("src/mod.py", DEEP_FUNCTION)
        report = analyze(project.root, PYTHON_SRC)
        assert [(i.check_type, i.value, i.severity) for i in report.issues] == [
            ("nesting-depth", 5, Severity.WARNING)
        ]

    def test_check_type_selection(self, project):
        project("src/mod.py", python_function("huge", 60) + DEEP_FUNCTION)
        config = load_config(project.root, file_warn=10)

        file_only = SmellAnalyzer(project.root, PYTHON_SRC, config, CheckType.FILE_LENGTH).analyze()
        assert {i.check_type for i in file_only.issues} == {"file-length"}

        functions = SmellAnalyzer(project.root, PYTHON_SRC, config, CheckType.FUNCTIONS).analyze()
        assert {i.check_type for i in functions.issues} == {"function-length"}

        nesting = SmellAnalyzer(project.root, PYTHON_SRC, config, CheckType.NESTING).analyze()
        assert {i.check_type for i in nesting.issues} == {"nesting-depth"}

    def test_issue_order(self, project):
        """File issues come before function issues, which come before nesting issues."""
        project("src/a.py", DEEP_FUNCTION)
        project("src/b.py", python_function("long", 40))
        config = load_config(project.root, file_warn=3)
        report = analyze(project.root, PYTHON_SRC, config)
        assert [(i.check_type, i.file.name) for i in report.issues] == [
            ("file-length", "a.py"),
            ("file-length", "b.py"),
            ("function-length", "b.py"),
            ("nesting-depth", "a.py"),
        ]

    def test_language_skip_paths(self, project):
        project("src/.venv/lib/big.py", python_function("huge", 60))
        project("src/mod.py", python_function("small", 2))
        report = analyze(project.root, PYTHON_SRC)
        assert report.issues == []
        assert report.files_scanned == 1

    def test_exclude_patterns(self, project):
        project("src/generated/big.py", python_function("huge", 60))
        config = SmellsConfig(layers=(ThresholdLayer("test", exclude=("generated/*",)),))
        report = analyze(project.root, PYTHON_SRC, config)
        assert report.issues == []
        assert report.files_scanned == 0

    def test_other_extensions_ignored(self, project):
        project("src/notes.txt", "def f():\n" * 100)
        report = analyze(project.root, PYTHON_SRC)
        assert report.files_scanned == 0

    def test_unreadable_file_skipped(self, project):
        bad = project.root / "src" / "bad.py"
        bad.parent.mkdir(parents=True)
        bad.write_bytes(b"\xff\xfe\xfa def f():\n")
        report = analyze(project.root, PYTHON_SRC)
        assert report.files_skipped == 1
        assert report.files_scanned == 0

    def test_missing_source_dir(self, project):
        report = analyze(project.root, [DetectedLanguage(LanguageType.RUST, "src")])
        assert report.files_scanned == 0
        assert report.issues == []

    def test_thresholds_per_language(self, project):
        """A 35-line function warns in Python but not in Rust."""
        project("lib.rs", "fn big() {\n" + "    x();\n" * 33 + "}\n")
        project("mod.py", python_function("big", 34))
        languages = [
            DetectedLanguage(LanguageType.PYTHON, "."),
            DetectedLanguage(LanguageType.RUST, "."),
        ]
        report = analyze(project.root, languages)
        assert [(i.file.name, i.value) for i in report.issues] == [("mod.py", 35)]
