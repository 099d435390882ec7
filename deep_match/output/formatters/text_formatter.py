# Path: deep_match/output/formatters/text_formatter.py
"""
Text Formatter

Renders a ReportSummary as ASCII text for console display.
"""

from ...constants import MENU_HEADER, MENU_SEPARATOR, STATUS_FAIL, STATUS_OK, STATUS_WARN
from ..report_models import ReportSummary, SubjectEntry
from .base_formatter import BaseFormatter

STATUS_MARKERS = {
    'ok': STATUS_OK,
    'lenient': STATUS_WARN,
    'bad': STATUS_FAIL,
}


class TextFormatter(BaseFormatter):
    """Renders summary as ASCII text."""

    def __init__(self, show_matches: bool = True):
        """
        Initialize text formatter.

        Args:
            show_matches: Include structural pairings, not only problems
        """
        self.show_matches = show_matches

    @property
    def format_name(self) -> str:
        return 'text'

    @property
    def file_extension(self) -> str:
        return '.txt'

    def format_summary(self, summary: ReportSummary) -> str:
        """Render full summary as text."""
        verdict = 'EQUAL' if summary.equal else 'DIFFERENT'
        lines = [
            '',
            MENU_HEADER,
            f"  STRUCTURAL COMPARISON: {summary.label_a} vs {summary.label_b}",
            f"  Verdict: {verdict}",
            MENU_HEADER,
            f"  Matched subjects:   {summary.good_count}",
            f"  Unmatched subjects: {summary.bad_count}",
            f"  Recorded matches:   {summary.add_count}",
        ]

        pairs = summary.pairs
        if not self.show_matches:
            pairs = [e for e in pairs if e.status != 'ok']
        if pairs:
            lines.append(MENU_SEPARATOR)
            lines.append('  PAIRINGS')
            for entry in pairs:
                lines.extend(self._render_pair(entry))

        if summary.non_matches:
            lines.append(MENU_SEPARATOR)
            lines.append('  NON-MATCHES')
            for entry in summary.non_matches:
                lines.append(f"  {STATUS_MARKERS['bad']} {entry.subject}")

        lines.append(MENU_HEADER)
        lines.append('')
        return '\n'.join(lines)

    def _render_pair(self, entry: SubjectEntry) -> list[str]:
        marker = STATUS_MARKERS.get(entry.status, STATUS_OK)
        lines = [f"  {marker} {entry.subject} <-> {entry.match} ({entry.tier})"]
        for note in entry.notes:
            lines.append(f"        {note}")
        return lines


__all__ = ['TextFormatter']
