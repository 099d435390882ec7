# Path: deep_match/output/formatters/json_formatter.py
"""
JSON Formatter

Renders a ReportSummary as structured JSON for downstream tools.
"""

import json

from ..report_models import ReportSummary
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders summary as JSON."""

    @property
    def format_name(self) -> str:
        return 'json'

    @property
    def file_extension(self) -> str:
        return '.json'

    def format_summary(self, summary: ReportSummary) -> str:
        """Serialize summary to JSON string."""
        return json.dumps(summary.to_dict(), indent=2, default=str)


__all__ = ['JsonFormatter']
