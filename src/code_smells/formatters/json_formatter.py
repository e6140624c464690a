"""JSON formatter for code-smells."""

import json

from ..models import Report, ReportContext
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: Report, context: ReportContext) -> None:
        print(self.format(report, context))

    def format(self, report: Report, context: ReportContext) -> str:
        allows = context.severity_filter.allows
        data = {
            "project": str(context.project_dir),
            "languages": list(context.languages),
            "issues": [issue.to_dict() for issue in report.issues if allows(issue.severity)],
            "summary": {
                "files": report.files_scanned,
                "skipped": report.files_skipped,
                "errors": report.error_count,
                "warnings": report.warning_count,
            },
        }
        return json.dumps(data, indent=2)
