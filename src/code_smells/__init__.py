"""
code-smells - heuristic size and nesting checks for multi-language projects

Reports files, functions and blocks over configurable thresholds for
Elixir, Dart, TypeScript, Python and Rust, using line scanners instead of
full parsers.
"""

__version__ = "0.1.0"

from .core import SmellAnalyzer, analyze
from .languages import FunctionInfo, LanguageType, get_parser, parse_functions
from .models import Issue, Report, Severity

__all__ = [
    "analyze",
    "SmellAnalyzer",
    "FunctionInfo",
    "LanguageType",
    "get_parser",
    "parse_functions",
    "Issue",
    "Report",
    "Severity",
]
