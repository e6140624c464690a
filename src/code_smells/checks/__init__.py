"""Threshold checks turning measurements into issues."""

from .base import classify
from .file_length import check_file_length
from .functions import check_function_length, check_nesting_depth

__all__ = [
    "classify",
    "check_file_length",
    "check_function_length",
    "check_nesting_depth",
]
