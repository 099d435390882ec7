# Path: deep_match/matcher/engine/__init__.py
"""
Matcher Engine

Ordered and scrambled collection matchers plus the recursive equality
engine built on them.
"""

from .ordered import compare_ordered, format_note, render_value
from .scrambled import SetMatch, match_scrambled, compare_scrambled
from .equality import EqualityEngine, value_equals

__all__ = [
    'compare_ordered',
    'format_note',
    'render_value',
    'SetMatch',
    'match_scrambled',
    'compare_scrambled',
    'EqualityEngine',
    'value_equals',
]
