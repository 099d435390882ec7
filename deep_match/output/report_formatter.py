# Path: deep_match/output/report_formatter.py
"""
Report Formatter

Main entry point of the OUTPUT layer. Summarizes a MatchReport and
renders the summary through a registered formatter.

Architecture:
    MatchReport  ->  build_summary()  ->  ReportSummary  ->  [Formatters]  ->  text / JSON

Usage:
    from deep_match.output import ReportFormatter

    formatter = ReportFormatter()
    print(formatter.render(report, equal, fmt='text'))
"""

from pathlib import Path
from typing import Optional

from ..core.logger import get_output_logger
from ..matcher.report import MatchReport
from .report_models import ReportSummary, build_summary
from .formatters import FormatterRegistry, JsonFormatter, TextFormatter


def _register_defaults() -> None:
    """Register built-in formatters."""
    FormatterRegistry.register(TextFormatter)
    FormatterRegistry.register(JsonFormatter)


# Auto-register on module import
_register_defaults()


class ReportFormatter:
    """
    Renders comparison results.

    Example:
        formatter = ReportFormatter()
        summary = formatter.summarize(report, equal, 'a.yaml', 'b.yaml')
        print(formatter.to_console(summary))
    """

    def __init__(self):
        """Initialize report formatter."""
        self.logger = get_output_logger('report_formatter')

    def summarize(
        self,
        report: MatchReport,
        equal: bool,
        label_a: str = 'A',
        label_b: str = 'B'
    ) -> ReportSummary:
        """Build the format-agnostic summary of a report."""
        summary = build_summary(report, equal, label_a, label_b)
        self.logger.debug(
            f"Summarized report: {summary.good_count} matched, "
            f"{summary.bad_count} unmatched"
        )
        return summary

    def render(
        self,
        report: MatchReport,
        equal: bool,
        fmt: str = 'text',
        label_a: str = 'A',
        label_b: str = 'B'
    ) -> str:
        """
        Summarize and render a report in one step.

        Args:
            report: Report filled by a comparison
            equal: Verdict of the comparison
            fmt: Registered format name ('text' or 'json')
            label_a: Name of the first input
            label_b: Name of the second input

        Returns:
            Rendered string

        Raises:
            ValueError: If no formatter is registered for fmt
        """
        formatter = FormatterRegistry.get(fmt)
        if formatter is None:
            available = ', '.join(FormatterRegistry.get_available())
            raise ValueError(f"No formatter for '{fmt}' (available: {available})")
        return formatter.format_summary(self.summarize(report, equal, label_a, label_b))

    def to_console(self, summary: ReportSummary) -> str:
        """Render a summary as console text."""
        formatter = FormatterRegistry.get('text')
        if formatter is None:
            return f"[No text formatter available for {summary.label_a}]"
        return formatter.format_summary(summary)

    def to_json(self, summary: ReportSummary) -> str:
        """Render a summary as a JSON string."""
        formatter = FormatterRegistry.get('json')
        if formatter is None:
            return '{}'
        return formatter.format_summary(summary)

    def write(self, summary: ReportSummary, output_dir: Path, fmt: str = 'json') -> Optional[Path]:
        """
        Write a summary file into a directory.

        Returns:
            Path to the written file, or None when the format is unknown
        """
        formatter = FormatterRegistry.get(fmt)
        if formatter is None:
            self.logger.warning(f"No formatter for: {fmt}")
            return None
        filepath = formatter.write_summary(summary, output_dir)
        self.logger.info(f"Wrote {fmt}: {filepath}")
        return filepath


__all__ = ['ReportFormatter']
