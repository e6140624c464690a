"""Shared test fixtures for code-smells tests."""

import textwrap
from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's ~/.code-smells.toml and CODE_SMELLS_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in (
        "FILE_WARN",
        "FILE_ERROR",
        "FUNC_WARN",
        "FUNC_ERROR",
        "NEST_WARN",
        "NEST_ERROR",
        "EXCLUDE",
    ):
        monkeypatch.delenv(f"CODE_SMELLS_{name}", raising=False)


@pytest.fixture
def project(tmp_path):
    """Project directory with a helper to write dedented files into it."""
    root = tmp_path / "project"
    root.mkdir()

    def write(relative: str, content: str = "") -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content))
        return path

    write.root = root
    return write


def python_function(name: str, body_lines: int) -> str:
    """A top-level Python function with ``body_lines`` flat statements."""
    return f"def {name}():\n" + "    x = 1\n" * body_lines
