# Path: deep_match/output/__init__.py
"""
deep_match Output

OUTPUT layer: summaries and rendering of match reports.
"""

from .report_models import ReportSummary, SubjectEntry, build_summary, describe_subject
from .report_formatter import ReportFormatter
from .formatters import BaseFormatter, FormatterRegistry, JsonFormatter, TextFormatter

__all__ = [
    'ReportFormatter',
    'ReportSummary',
    'SubjectEntry',
    'build_summary',
    'describe_subject',
    'BaseFormatter',
    'FormatterRegistry',
    'TextFormatter',
    'JsonFormatter',
]
