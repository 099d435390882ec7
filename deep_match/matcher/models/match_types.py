# Path: deep_match/matcher/models/match_types.py
"""
Match Type Models

Tiers, records and results produced by structural comparison.
"""

from enum import Enum, IntEnum
from typing import Any, Optional
from dataclasses import dataclass


class MatchTier(IntEnum):
    """
    Strength of evidence that two subjects correspond.

    Tiers are totally ordered; a higher tier is never replaced by a
    lower one in a MatchReport.
    """
    NONE = 0
    NAMES_EQUAL = 1
    TARGET_EQUAL = 2
    VALUE_EQUAL = 3
    EQUAL = 4
    REFERENCE_EQUAL = 5

    @property
    def is_structural(self) -> bool:
        """True for tiers backed by full value equality."""
        return self >= MatchTier.VALUE_EQUAL

    @classmethod
    def from_name(cls, name: str) -> 'MatchTier':
        """
        Parse a tier from its name, case-insensitively.

        Args:
            name: e.g. "value_equal" or "NAMES_EQUAL"

        Raises:
            ValueError: If the name is not a tier
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ', '.join(t.name.lower() for t in cls)
            raise ValueError(f"Unknown match tier '{name}' (expected one of: {valid})") from None


class MatchStrategy(str, Enum):
    """How unordered collections are paired."""
    GREEDY = "greedy"
    OPTIMAL = "optimal"


@dataclass(frozen=True)
class MatchRecord:
    """
    One side of a recorded correspondence.

    Attributes:
        match: The counterpart subject (None for a non-match)
        tier: Strength of the correspondence
    """
    match: Any = None
    tier: MatchTier = MatchTier.NONE

    @property
    def is_match(self) -> bool:
        """Check if this record is an actual match."""
        return self.tier != MatchTier.NONE


@dataclass(frozen=True)
class ComparisonResult:
    """
    Tiered outcome of comparing two subjects.

    The lenient boolean (any tier above NONE) is what set matching
    pairs on. Callers choose their own strictness with meets().

    Attributes:
        tier: Best tier established for the pair
        paired: Lenient result, True when the pair counts as corresponding
    """
    tier: MatchTier
    paired: bool

    @property
    def structural(self) -> bool:
        """True when the pair is equal by value or stronger."""
        return self.tier.is_structural

    def meets(self, minimum: MatchTier) -> bool:
        """Check the result against a minimum tier."""
        if minimum == MatchTier.NONE:
            return True
        return self.tier >= minimum

    @classmethod
    def unmatched(cls) -> 'ComparisonResult':
        return cls(tier=MatchTier.NONE, paired=False)

    @classmethod
    def of(cls, tier: MatchTier, paired: Optional[bool] = None) -> 'ComparisonResult':
        return cls(tier=tier, paired=tier != MatchTier.NONE if paired is None else paired)


__all__ = [
    'MatchTier',
    'MatchStrategy',
    'MatchRecord',
    'ComparisonResult',
]
