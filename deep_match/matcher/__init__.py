# Path: deep_match/matcher/__init__.py
"""
Matching Engine - Deep Structural Equality

Decides whether two scene graphs are structurally equivalent, pairing
children and components regardless of order, and explains the result
in a MatchReport.

Core Components:
    - EqualityEngine / value_equals: Recursive comparison
    - compare_ordered / compare_scrambled: Collection matchers
    - MatchReport: Pairings, non-matches and mismatch notes
    - ComparisonPolicy / PolicyLoader: Declarative settings from YAML

Key Principle:
    Children and components are unordered. Pairs are ranked by tier,
    so a name-only correspondence never hides a structural difference.

Example:
    from deep_match.matcher import MatchReport, value_equals

    report = MatchReport()
    equal = value_equals(scene_a, scene_b, report=report)
"""

from .engine import (
    EqualityEngine,
    value_equals,
    compare_ordered,
    compare_scrambled,
    match_scrambled,
    SetMatch,
)
from .models import (
    MatchTier,
    MatchStrategy,
    MatchRecord,
    ComparisonResult,
    CompareOptions,
    ComparisonPolicy,
)
from .report import MatchReport
from .policy_loader import PolicyLoader, PolicyLoadError

__all__ = [
    'EqualityEngine',
    'value_equals',
    'compare_ordered',
    'compare_scrambled',
    'match_scrambled',
    'SetMatch',
    'MatchTier',
    'MatchStrategy',
    'MatchRecord',
    'ComparisonResult',
    'CompareOptions',
    'ComparisonPolicy',
    'MatchReport',
    'PolicyLoader',
    'PolicyLoadError',
]
