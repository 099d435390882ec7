# Path: deep_match/output/formatters/__init__.py
"""
Summary Formatters

Each formatter renders a ReportSummary into one output format.
Formatters know nothing about the matcher.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .text_formatter import TextFormatter
from .json_formatter import JsonFormatter

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'TextFormatter',
    'JsonFormatter',
]
