# Path: deep_match/matcher/engine/ordered.py
"""
Ordered Matcher

Index-for-index comparison of two sequences. Used for the field and
property values of a component and for sequence-valued leaves.
"""

from typing import Any, Callable, Optional, Sequence

from ...constants import MISSING_VALUE_TEXT, NOTE_SEPARATOR, UNAVAILABLE_VALUE_TEXT
from ...scene.schema import UNAVAILABLE
from ..models.compare_options import CompareOptions
from ..models.match_types import ComparisonResult


class _Missing:
    """Placeholder for the shorter side of a length mismatch."""

    def __repr__(self) -> str:
        return MISSING_VALUE_TEXT


MISSING = _Missing()


def render_value(value: Any) -> str:
    """Render a leaf value for notes and logs."""
    if value is MISSING:
        return MISSING_VALUE_TEXT
    if value is UNAVAILABLE:
        return UNAVAILABLE_VALUE_TEXT
    if value is None:
        return 'None'
    if isinstance(value, str):
        return repr(value)
    return str(value)


def format_note(name: str, value_a: Any, value_b: Any) -> str:
    """Format a mismatch note, e.g. "mass: 1.0 != 2.0"."""
    return f"{name}: {render_value(value_a)}{NOTE_SEPARATOR}{render_value(value_b)}"


def _as_bool(result: Any) -> bool:
    if isinstance(result, ComparisonResult):
        return result.structural
    return bool(result)


def compare_ordered(
    seq_a: Sequence[Any],
    seq_b: Sequence[Any],
    item_equals: Callable[[Any, Any], Any],
    names: Optional[Sequence[str]] = None,
    report=None,
    options: Optional[CompareOptions] = None
) -> bool:
    """
    Compare two sequences position by position.

    Stops at the first mismatch unless the comparison is thorough
    (verbose, or a report is attached). A thorough scan covers the
    longer sequence, rendering the absent side as <missing>, and
    buffers one note per named mismatch in the report.

    Args:
        seq_a: First sequence
        seq_b: Second sequence
        item_equals: Element predicate (bool or ComparisonResult)
        names: Optional element names used in notes and logs
        report: MatchReport receiving pending notes
        options: Comparison options (verbosity, logger)

    Returns:
        True if both sequences have the same length and every
        position compares equal
    """
    options = options or CompareOptions()
    thorough = options.is_thorough(report)
    items_a = list(seq_a)
    items_b = list(seq_b)

    if len(items_a) != len(items_b) and not thorough:
        return False

    equal = len(items_a) == len(items_b)

    for index in range(max(len(items_a), len(items_b))):
        item_a = items_a[index] if index < len(items_a) else MISSING
        item_b = items_b[index] if index < len(items_b) else MISSING

        if item_a is not MISSING and item_b is not MISSING:
            if _as_bool(item_equals(item_a, item_b)):
                continue

        equal = False
        if not thorough:
            return False

        name = names[index] if names is not None and index < len(names) else None

        if options.verbose:
            label = name if name is not None else f'[{index}]'
            options.logger.info(
                f"Non-Match: ({label}) {render_value(item_a)}{NOTE_SEPARATOR}{render_value(item_b)}"
            )

        if report is not None and name is not None:
            report.add_note(format_note(name, item_a, item_b))

    return equal


__all__ = [
    'MISSING',
    'compare_ordered',
    'format_note',
    'render_value',
]
