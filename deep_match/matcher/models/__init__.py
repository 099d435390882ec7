# Path: deep_match/matcher/models/__init__.py
"""
Matcher Models

Data structures shared by the matchers, the equality engine and the
match report.
"""

from .match_types import (
    MatchTier,
    MatchStrategy,
    MatchRecord,
    ComparisonResult,
)
from .compare_options import CompareOptions
from .comparison_policy import ComparisonPolicy

__all__ = [
    'MatchTier',
    'MatchStrategy',
    'MatchRecord',
    'ComparisonResult',
    'CompareOptions',
    'ComparisonPolicy',
]
