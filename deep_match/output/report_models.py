# Path: deep_match/output/report_models.py
"""
Report Data Models

Format-agnostic summary of a MatchReport. The summary is built once;
formatters consume it without knowing the matcher.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..matcher.models.match_types import MatchTier
from ..matcher.report import MatchReport
from ..scene.components import Component, describe_subject
from ..scene.node import SceneNode


@dataclass
class SubjectEntry:
    """
    One row of the summary.

    Attributes:
        subject: Described subject
        kind: 'node', 'component' or 'value'
        tier: Tier name of the subject's record
        match: Described counterpart, if any
        status: 'ok' (structural), 'lenient' (name-only) or 'bad' (unmatched)
        notes: Mismatch notes explaining a lenient pairing
    """
    subject: str
    kind: str
    tier: str
    match: Optional[str] = None
    status: str = 'ok'
    notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'subject': self.subject,
            'kind': self.kind,
            'tier': self.tier,
            'match': self.match,
            'status': self.status,
            'notes': list(self.notes),
        }


@dataclass
class ReportSummary:
    """
    Summary of one comparison.

    Attributes:
        equal: Verdict returned by value_equals
        report_equal: MatchReport.is_equal at the end of the comparison
        label_a: Name of the first input (e.g. its file)
        label_b: Name of the second input
        good_count: Subjects holding a match
        bad_count: Subjects filed as non-matches
        add_count: Accepted add_match calls
        entries: Pairings first, then non-matches
    """
    equal: bool
    report_equal: bool
    label_a: str = 'A'
    label_b: str = 'B'
    good_count: int = 0
    bad_count: int = 0
    add_count: int = 0
    entries: list[SubjectEntry] = field(default_factory=list)

    @property
    def pairs(self) -> list[SubjectEntry]:
        return [e for e in self.entries if e.status != 'bad']

    @property
    def non_matches(self) -> list[SubjectEntry]:
        return [e for e in self.entries if e.status == 'bad']

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'equal': self.equal,
            'report_equal': self.report_equal,
            'label_a': self.label_a,
            'label_b': self.label_b,
            'good_count': self.good_count,
            'bad_count': self.bad_count,
            'add_count': self.add_count,
            'entries': [e.to_dict() for e in self.entries],
        }


def _kind(subject: Any) -> str:
    if isinstance(subject, SceneNode):
        return 'node'
    if isinstance(subject, Component):
        return 'component'
    return 'value'


def build_summary(
    report: MatchReport,
    equal: bool,
    label_a: str = 'A',
    label_b: str = 'B'
) -> ReportSummary:
    """
    Summarize a MatchReport.

    Symmetric records appear once, from the side recorded first.

    Args:
        report: Report filled by a comparison
        equal: Verdict of the comparison
        label_a: Name of the first input
        label_b: Name of the second input

    Returns:
        ReportSummary ready for a formatter
    """
    summary = ReportSummary(
        equal=equal,
        report_equal=report.is_equal,
        label_a=label_a,
        label_b=label_b,
        good_count=len(report.good_matches),
        bad_count=len(report.bad_matches),
        add_count=report.add_count,
    )

    listed: set[int] = set()
    for subject in report.good_matches:
        record = report.get_match_details(subject)
        if id(subject) in listed:
            continue
        listed.add(id(subject))
        listed.add(id(record.match))

        notes = report.get_notes(subject)
        if record.match is not subject:
            notes += report.get_notes(record.match)
        summary.entries.append(SubjectEntry(
            subject=describe_subject(subject),
            kind=_kind(subject),
            tier=record.tier.name,
            match=describe_subject(record.match),
            status='ok' if record.tier >= MatchTier.VALUE_EQUAL else 'lenient',
            notes=notes,
        ))

    for subject in report.bad_matches:
        summary.entries.append(SubjectEntry(
            subject=describe_subject(subject),
            kind=_kind(subject),
            tier=MatchTier.NONE.name,
            status='bad',
        ))

    return summary


__all__ = [
    'describe_subject',
    'SubjectEntry',
    'ReportSummary',
    'build_summary',
]
