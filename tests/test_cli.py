"""Tests for the code-smells command line."""

import json

from typer.testing import CliRunner

from code_smells import __version__
from code_smells.cli import app

from conftest import python_function

runner = CliRunner()


def python_project(project, body_lines=3):
    project("pyproject.toml")
    project("src/pkg/mod.py", python_function("work", body_lines))
    return project.root


class TestExitCodes:
    """Exit status follows the worst severity."""

    def test_clean(self, project):
        root = python_project(project)
        result = runner.invoke(app, [str(root)])
        assert result.exit_code == 0
        assert "=== Code Smells Report ===" in result.output
        assert "Languages: python" in result.output

    def test_warnings(self, project):
        root = python_project(project, body_lines=35)
        result = runner.invoke(app, [str(root)])
        assert result.exit_code == 1
        assert "pkg/mod.py:1 work (36 lines)" in result.output

    def test_errors(self, project):
        root = python_project(project, body_lines=60)
        result = runner.invoke(app, [str(root)])
        assert result.exit_code == 2

    def test_threshold_flag(self, project):
        root = python_project(project)
        result = runner.invoke(app, [str(root), "--func-warn", "1", "--func-error", "2"])
        assert result.exit_code == 2


class TestOptions:
    """Option handling."""

    def test_json_output(self, project):
        root = python_project(project, body_lines=35)
        result = runner.invoke(app, [str(root), "--format", "json"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["languages"] == ["python"]
        assert data["summary"]["warnings"] == 1
        assert data["issues"][0]["name"] == "work"

    def test_check_selection(self, project):
        root = python_project(project, body_lines=35)
        result = runner.invoke(
            app, [str(root), "--check", "file-length", "--file-warn", "1", "--format", "json"]
        )
        data = json.loads(result.stdout)
        assert {issue["type"] for issue in data["issues"]} == {"file-length"}

    def test_errors_filter(self, project):
        root = python_project(project, body_lines=35)
        result = runner.invoke(app, [str(root), "--errors"])
        assert result.exit_code == 1
        assert "--- WARNINGS" not in result.output
        assert "Warnings: 1" in result.output

    def test_explicit_language(self, project):
        project("main.py", python_function("work", 35))
        result = runner.invoke(app, [str(project.root), "--lang", "python"])
        assert result.exit_code == 1

    def test_exclude(self, project):
        root = python_project(project, body_lines=35)
        result = runner.invoke(app, [str(root), "-x", "pkg/*"])
        assert result.exit_code == 0
        assert "Files scanned: 0" in result.output

    def test_config_file(self, project):
        root = python_project(project, body_lines=35)
        config = project("strict.toml", "[thresholds.python]\nfunc_error = 10\n")
        result = runner.invoke(app, [str(root), "--config", str(config)])
        assert result.exit_code == 2

    def test_log_file(self, project):
        root = python_project(project)
        log_path = project.root.parent / "scan.log"
        result = runner.invoke(
            app, [str(root), "--lang", "python,cobol", "--log-file", str(log_path)]
        )
        assert result.exit_code == 0
        assert "Unsupported language: cobol" in log_path.read_text()

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestUsageErrors:
    """Failures exit with status 1."""

    def test_no_languages(self, project):
        result = runner.invoke(app, [str(project.root)])
        assert result.exit_code == 1
        assert "No supported languages detected" in result.output

    def test_unknown_language(self, project):
        result = runner.invoke(app, [str(project.root), "--lang", "cobol"])
        assert result.exit_code == 1

    def test_missing_directory(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing")])
        assert result.exit_code == 1

    def test_conflicting_filters(self, project):
        root = python_project(project)
        result = runner.invoke(app, [str(root), "--errors", "--warnings"])
        assert result.exit_code == 1

    def test_invalid_config(self, project):
        root = python_project(project)
        project("code-smells.toml", "[thresholds]\nfunc_warn = -3\n")
        result = runner.invoke(app, [str(root)])
        assert result.exit_code == 1
