"""Tests for the Elixir clause scanner."""

from pathlib import Path

from code_smells.languages import FunctionInfo
from code_smells.languages.elixir import (
    ElixirParser,
    count_nesting_keywords,
    extract_function_name,
)


def parse(content: str) -> list[FunctionInfo]:
    return ElixirParser().parse_functions(content)


class TestSignatures:
    """def-family lines."""

    def test_def_family(self):
        assert extract_function_name("  def hello(name) do") == "hello"
        assert extract_function_name("  defp valid?(x) do") == "valid?"
        assert extract_function_name("  defmacro using(opts) do") == "using"

    def test_keyword_one_liner_ignored(self):
        assert extract_function_name("  def add(a, b), do: a + b") is None

    def test_defmodule_is_not_a_function(self):
        assert extract_function_name("defmodule Greeter do") is None

    def test_commented_def(self):
        assert extract_function_name("  # def fake do") is None


class TestNestingKeywords:
    """Line-local nesting heuristic."""

    def test_control_keyword_with_do(self):
        assert count_nesting_keywords("    case x do") == 1

    def test_keyword_without_do(self):
        assert count_nesting_keywords("    diff = a - b") == 0

    def test_anonymous_function(self):
        assert count_nesting_keywords("    Enum.map(xs, fn x -> x end)") == 1

    def test_comment_ignored(self):
        assert count_nesting_keywords("    x  # case y do") == 0


class TestExtents:
    """do/end balanced extents."""

    def test_function_in_module(self):
        content = (
            "defmodule Greeter do\n"
            "  def hello(name) do\n"
            '    "Hello " <> name\n'
            "  end\n"
            "end\n"
        )
        assert parse(content) == [FunctionInfo("hello", 2, 3, 1)]

    def test_case_block_nesting(self):
        content = (
            "  defp check(x) do\n"
            "    case x do\n"
            "      :ok -> :ok\n"
            "      _ -> :error\n"
            "    end\n"
            "  end\n"
        )
        assert parse(content) == [FunctionInfo("check", 1, 6, 2)]

    def test_heuristic_can_exceed_depth(self):
        content = (
            "def notify(items) do\n"
            "  Enum.each(items, fn item -> if item, do: send(item) end)\n"
            "end\n"
        )
        assert parse(content) == [FunctionInfo("notify", 1, 3, 2)]

    def test_consecutive_functions(self):
        content = (
            "defmodule M do\n"
            "  def a do\n"
            "    :a\n"
            "  end\n"
            "\n"
            "  def b do\n"
            "    :b\n"
            "  end\n"
            "end\n"
        )
        assert parse(content) == [
            FunctionInfo("a", 2, 3, 1),
            FunctionInfo("b", 6, 3, 1),
        ]

    def test_one_liners_not_reported(self):
        content = "defmodule M do\n  def add(a, b), do: a + b\nend\n"
        assert parse(content) == []


class TestShouldSkip:
    """Path filtering."""

    def test_skips_dependencies(self):
        assert ElixirParser().should_skip(Path("/proj/deps/phoenix/lib/x.ex"))
        assert ElixirParser().should_skip(Path("/proj/_build/dev/x.ex"))

    def test_keeps_sources(self):
        assert not ElixirParser().should_skip(Path("/proj/lib/app.ex"))
