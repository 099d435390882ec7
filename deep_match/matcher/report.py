# Path: deep_match/matcher/report.py
"""
Match Report

Accumulates the outcome of one top-level comparison: which subject was
paired with which and at what tier, which subjects found no partner,
and the per-field mismatch notes explaining lenient pairings.

Subjects are keyed by identity. Records are symmetric: recording a->b
also records b->a. A record is only ever replaced by a strictly better
tier, and replacing a record unwinds the subject's previous partner.

Example:
    report = MatchReport()
    equal = value_equals(scene_a, scene_b, report=report)

    for subject in report.bad_matches:
        print(subject, report.get_notes(subject))
"""

from typing import Any, Iterable, Optional

from ..core.logger import get_process_logger
from ..scene.node import SceneNode
from .models.match_types import MatchRecord, MatchTier


class MatchReport:
    """
    Identity-keyed record of correspondences found during a comparison.

    A report is created by the caller, threaded through exactly one
    top-level comparison and read afterwards.

    Attributes:
        add_limit: Maximum accepted add_match calls (0 = unlimited)
        ignore_components: Component types never recorded
    """

    def __init__(
        self,
        add_limit: int = 0,
        ignore_components: Iterable[type] = (),
        logger=None
    ):
        """
        Initialize an empty report.

        Args:
            add_limit: Maximum accepted add_match calls (0 = unlimited)
            ignore_components: Component types skipped by the report
            logger: Logger for missing-comparison diagnostics
        """
        self.add_limit = add_limit
        self.ignore_components = tuple(ignore_components)
        self.logger = logger or get_process_logger('matcher.report')

        self._equal = True
        self._add_count = 0
        # id(subject) -> (subject, record); holding the subject keeps its id stable
        self._records: dict[int, tuple[Any, MatchRecord]] = {}
        self._bad: dict[int, Any] = {}
        self._good: dict[int, Any] = {}
        self._notes: dict[int, tuple[Any, list[str]]] = {}
        self._pending: list[str] = []

    # ==========================================================================
    # CONFIGURATION
    # ==========================================================================
    def should_ignore(self, subject: Any) -> bool:
        """Check whether a subject's type is configured to be ignored."""
        if not self.ignore_components or subject is None:
            return False
        return isinstance(subject, self.ignore_components)

    @property
    def add_count(self) -> int:
        """Number of add_match calls accepted so far."""
        return self._add_count

    # ==========================================================================
    # RECORDING
    # ==========================================================================
    def add_match(self, subject_a: Any, subject_b: Any, tier: MatchTier) -> None:
        """
        Record that two subjects correspond at a tier.

        Ignored when either subject is None or the add limit is reached.
        Rejected when a or b already holds a record of equal or higher
        tier. Otherwise a's previous pairing is replaced.

        Args:
            subject_a: Subject from the first graph
            subject_b: Subject from the second graph
            tier: Strength of the correspondence
        """
        if subject_a is None or subject_b is None:
            return

        if self.add_limit > 0 and self._add_count >= self.add_limit:
            return
        self._add_count += 1

        record_a = self.get_match_details(subject_a)
        record_b = self.get_match_details(subject_b)
        if self._has_record(subject_a) and record_a.tier >= tier:
            return
        if self._has_record(subject_b) and record_b.tier >= tier:
            return

        self.replace_match(
            subject_a,
            MatchRecord(subject_b, MatchTier(tier)),
            recursive=record_a.tier != MatchTier.NONE and record_a.match is not subject_b,
        )

    def replace_match(
        self,
        subject: Any,
        new_record: Optional[MatchRecord] = None,
        recursive: bool = False
    ) -> None:
        """
        Replace a subject's record.

        With recursive set, the subject's previous partner is unwound:
        filed as a non-match together with its children and components.
        Without a new record the subject itself is filed as a non-match.

        Args:
            subject: Subject whose record changes
            new_record: Record to install, None to file a non-match
            recursive: Unwind the previous partner's subtree
        """
        if self.should_ignore(subject):
            return

        old_record = self._remove(subject)

        if old_record is not None and old_record.is_match:
            partner = old_record.match
            if partner is not subject and self.get_match(partner) is subject:
                if recursive:
                    self.replace_match(partner, recursive=True)
                elif new_record is None or new_record.match is not partner:
                    self._remove(partner)
                    self.add_non_match(partner)

        if new_record is None or not new_record.is_match:
            self.add_non_match(subject)
            if recursive and isinstance(subject, SceneNode):
                for child in subject.children:
                    self.replace_match(child, recursive=True)
                for component in subject.components:
                    self.replace_match(component, recursive=True)
            return

        self._install(subject, new_record)

        if new_record.tier >= MatchTier.VALUE_EQUAL:
            self.clear_notes(subject)

    def add_non_match(self, subject: Any) -> None:
        """
        File a subject that found no partner.

        None marks the whole report unequal. A subject that already has
        a record is left alone. A node cascades to its children and its
        non-ignored components.

        Args:
            subject: Unmatched subject, or None for a global failure
        """
        if subject is None:
            self._equal = False
            return

        if not self._has_record(subject):
            key = id(subject)
            self._records[key] = (subject, MatchRecord())
            self._bad[key] = subject

        if isinstance(subject, SceneNode):
            for child in subject.children:
                self.add_non_match(child)
            for component in subject.components:
                if not self.should_ignore(component):
                    self.add_non_match(component)

    def _install(self, subject: Any, record: MatchRecord) -> None:
        """Install a record and its reciprocal, displacing the partner's old pairing."""
        partner = record.match
        key = id(subject)
        self._records[key] = (subject, record)
        self._good[key] = subject

        if partner is subject:
            return

        displaced = self._remove(partner)
        if displaced is not None and displaced.is_match and displaced.match is not subject:
            # The partner's previous counterpart would otherwise point at it one-sidedly
            orphan = displaced.match
            if self.get_match(orphan) is partner:
                self._remove(orphan)
                self.add_non_match(orphan)

        partner_key = id(partner)
        self._records[partner_key] = (partner, MatchRecord(subject, record.tier))
        self._good[partner_key] = partner

    def _remove(self, subject: Any) -> Optional[MatchRecord]:
        key = id(subject)
        entry = self._records.pop(key, None)
        self._bad.pop(key, None)
        self._good.pop(key, None)
        return entry[1] if entry is not None else None

    def _has_record(self, subject: Any) -> bool:
        return id(subject) in self._records

    # ==========================================================================
    # NOTES
    # ==========================================================================
    def add_note(self, note: str) -> None:
        """Buffer a mismatch note until it is pushed to a subject."""
        self._pending.append(note)

    def push_notes(self, subject: Any = None) -> None:
        """
        Attach buffered notes to a subject, merging with existing ones.

        Args:
            subject: Receiving subject, None to discard the buffer
        """
        if subject is not None and self._pending:
            key = id(subject)
            _, notes = self._notes.get(key, (subject, []))
            notes.extend(self._pending)
            self._notes[key] = (subject, notes)
        self._pending = []

    def clear_notes(self, subject: Any) -> None:
        """Drop every note stored for a subject."""
        self._notes.pop(id(subject), None)

    @property
    def pending_notes(self) -> list[str]:
        """Notes buffered but not yet pushed."""
        return list(self._pending)

    # ==========================================================================
    # QUERIES
    # ==========================================================================
    @property
    def is_equal(self) -> bool:
        """True when no global failure was filed and no subject is currently bad."""
        return self._equal and not self._bad

    def matched(self, subject: Any) -> bool:
        """
        Check whether a subject holds a match of any tier above NONE.

        Logs at debug level when the subject was never compared.
        """
        if not self._has_record(subject):
            self.logger.debug(f"No comparison recorded for {subject!r}")
            return False
        return self.get_match_details(subject).is_match

    def get_match(self, subject: Any) -> Any:
        """Get a subject's counterpart, or None."""
        return self.get_match_details(subject).match

    def get_match_tier(self, subject: Any) -> MatchTier:
        """Get a subject's match tier (NONE when unrecorded)."""
        return self.get_match_details(subject).tier

    def get_match_details(self, subject: Any) -> MatchRecord:
        """Get a subject's full record (an empty record when unrecorded)."""
        entry = self._records.get(id(subject))
        if entry is None:
            return MatchRecord()
        return entry[1]

    def get_notes(self, subject: Any) -> list[str]:
        """
        Get the mismatch notes stored for a subject.

        Logs at debug level when the subject was never compared.
        """
        if not self._has_record(subject):
            self.logger.debug(f"No comparison recorded for {subject!r}, no notes available")
            return []
        entry = self._notes.get(id(subject))
        return list(entry[1]) if entry is not None else []

    @property
    def all_matches(self) -> list[tuple[Any, MatchRecord]]:
        """Every recorded (subject, record) pair, in recording order."""
        return list(self._records.values())

    @property
    def bad_matches(self) -> list[Any]:
        """Subjects currently filed as non-matches."""
        return list(self._bad.values())

    @property
    def good_matches(self) -> list[Any]:
        """Subjects currently holding a match."""
        return list(self._good.values())

    @property
    def length(self) -> int:
        return len(self._bad) + len(self._good)

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return (
            f"MatchReport(equal={self.is_equal}, good={len(self._good)}, "
            f"bad={len(self._bad)}, adds={self._add_count})"
        )


__all__ = ['MatchReport']
