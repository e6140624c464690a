"""Base formatter interface for code-smells output rendering."""

from abc import ABC, abstractmethod

from ..models import Report, ReportContext


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: Report, context: ReportContext) -> None:
        """Print the report to stdout."""

    @abstractmethod
    def format(self, report: Report, context: ReportContext) -> str:
        """Return formatted string representation of the report."""
