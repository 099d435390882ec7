# Path: deep_match/matcher/engine/equality.py
"""
Equality Engine

Recursive structural comparison of scene graphs.

Nodes are compared by pairing their children and their components
with the scrambled matcher. Components are compared value by value
with the ordered matcher over their comparable schema. Leaf values use
native equality with float tolerance, element-wise sequence
comparison, cross-reference correspondence, or schema recursion for
registered value objects.

Every pair receives a tier:
- EQUAL: the same object
- VALUE_EQUAL: every child, component and value corresponds structurally
- NAMES_EQUAL: only the names correspond (lenient fallback)
- NONE: no correspondence

Example:
    engine = EqualityEngine()
    result = engine.compare(scene_a, scene_b, report=report)
    if result.tier >= MatchTier.VALUE_EQUAL:
        print("Scenes match")
"""

import math
from typing import Any, Callable, Optional

from ...scene.node import SceneNode
from ...scene.components import Component, describe_subject
from ...scene.schema import UNAVAILABLE
from ..models.compare_options import CompareOptions
from ..models.match_types import ComparisonResult, MatchTier
from .ordered import compare_ordered
from .scrambled import SetMatch, match_scrambled, tier_of


class EqualityEngine:
    """
    Structural comparison of nodes, components and leaf values.

    The engine guards against cycles: a pair that is re-entered while
    its own comparison is still running is treated as equal. Nesting
    deeper than options.max_depth is treated as unequal.

    Example:
        engine = EqualityEngine(CompareOptions(verbose=True))
        engine.nodes_equal(node_a, node_b, report)
    """

    def __init__(self, options: Optional[CompareOptions] = None):
        """
        Initialize equality engine.

        Args:
            options: Comparison options (defaults to CompareOptions())
        """
        self.options = options or CompareOptions()
        self.logger = self.options.logger
        self._in_progress: set[tuple[int, int]] = set()
        self._depth = 0

    # ==========================================================================
    # TOP LEVEL
    # ==========================================================================
    def compare(self, subject_a: Any, subject_b: Any, report=None) -> ComparisonResult:
        """
        Compare two subjects and return the tier they reached.

        Nodes and components are compared structurally and recorded in
        the report. Anything else is compared as a leaf value.

        Args:
            subject_a: Node, component or leaf value
            subject_b: Node, component or leaf value
            report: Optional MatchReport collecting the outcome

        Returns:
            ComparisonResult (REFERENCE_EQUAL when both are the same object)
        """
        if isinstance(subject_a, SceneNode) and isinstance(subject_b, SceneNode):
            result = self._guarded(subject_a, subject_b, report, self._node_result)
        elif isinstance(subject_a, Component) and isinstance(subject_b, Component):
            result = self._guarded(subject_a, subject_b, report, self._component_result)
        elif self.leaf_equal(subject_a, subject_b, report):
            result = ComparisonResult.of(MatchTier.VALUE_EQUAL)
        else:
            result = ComparisonResult.unmatched()

        if subject_a is subject_b:
            if report is not None and isinstance(subject_a, (SceneNode, Component)):
                report.add_match(subject_a, subject_b, MatchTier.REFERENCE_EQUAL)
            return ComparisonResult.of(MatchTier.REFERENCE_EQUAL)

        self.logger.debug(
            f"Compared {describe_subject(subject_a)} with {describe_subject(subject_b)}: "
            f"{result.tier.name}"
        )
        return result

    # ==========================================================================
    # NODES
    # ==========================================================================
    def nodes_equal(self, node_a: SceneNode, node_b: SceneNode, report=None) -> bool:
        """
        Lenient node comparison.

        Returns:
            True if the nodes are identical, deep-equal, or share a name
        """
        return self._guarded(node_a, node_b, report, self._node_result).paired

    def _node_result(self, node_a: SceneNode, node_b: SceneNode, report) -> ComparisonResult:
        thorough = self.options.is_thorough(report)
        identity = node_a is node_b

        children = self._match_recorded(node_a.children, node_b.children, report, self._node_result)

        deep_equals = children.complete and children.all_structural
        if deep_equals or thorough:
            components = self._match_recorded(
                self._components_of(node_a, report),
                self._components_of(node_b, report),
                report,
                self._component_result,
            )
            deep_equals = deep_equals and components.complete and components.all_structural

        names_match = node_a.name == node_b.name

        if identity:
            tier = MatchTier.EQUAL
        elif deep_equals:
            tier = MatchTier.VALUE_EQUAL
        elif names_match:
            tier = MatchTier.NAMES_EQUAL
        else:
            tier = MatchTier.NONE

        if report is not None and tier != MatchTier.NONE:
            report.add_match(node_a, node_b, tier)

        return ComparisonResult(tier=tier, paired=identity or deep_equals or names_match)

    def _components_of(self, node: SceneNode, report) -> list[Component]:
        ignored = self.options.ignore_components
        return [
            component for component in node.components
            if not (ignored and isinstance(component, ignored))
            and not (report is not None and report.should_ignore(component))
        ]

    # ==========================================================================
    # COMPONENTS
    # ==========================================================================
    def components_equal(self, component_a: Component, component_b: Component, report=None) -> bool:
        """
        Lenient component comparison.

        Returns:
            True if the components are identical, equal value by value,
            or of the same type on same-named nodes
        """
        return self._guarded(component_a, component_b, report, self._component_result).paired

    def _component_result(self, component_a: Component, component_b: Component, report) -> ComparisonResult:
        if component_a is component_b:
            if report is not None:
                report.add_match(component_a, component_b, MatchTier.EQUAL)
                report.push_notes(None)
            return ComparisonResult.of(MatchTier.EQUAL)

        if type(component_a) is not type(component_b):
            return ComparisonResult.unmatched()

        deep_equals = self._schema_equal(component_a, component_b, report)
        names_match = component_a.name == component_b.name

        if deep_equals:
            tier = MatchTier.VALUE_EQUAL
        elif names_match:
            tier = MatchTier.NAMES_EQUAL
        else:
            tier = MatchTier.NONE

        if report is not None:
            if tier != MatchTier.NONE:
                report.add_match(component_a, component_b, tier)
            # Notes only explain lenient pairings
            report.push_notes(component_a if tier == MatchTier.NAMES_EQUAL else None)

        return ComparisonResult(tier=tier, paired=deep_equals or names_match)

    def _schema_equal(self, value_a: Any, value_b: Any, report) -> bool:
        """Compare the comparable fields, then properties, of two same-typed objects."""
        registry = self.options.registry
        value_type = type(value_a)
        thorough = self.options.is_thorough(report)

        def leaf(a: Any, b: Any) -> bool:
            return self.leaf_equal(a, b, report)

        fields = registry.comparable_fields(value_type, self.options.exclusions)
        fields_equal = compare_ordered(
            [d.get_value(value_a, self.logger) for d in fields],
            [d.get_value(value_b, self.logger) for d in fields],
            leaf,
            names=[d.name for d in fields],
            report=report,
            options=self.options,
        )
        if not fields_equal and not thorough:
            return False

        properties = registry.comparable_properties(value_type, self.options.exclusions)
        properties_equal = compare_ordered(
            [d.get_value(value_a, self.logger) for d in properties],
            [d.get_value(value_b, self.logger) for d in properties],
            leaf,
            names=[d.name for d in properties],
            report=report,
            options=self.options,
        )

        return fields_equal and properties_equal

    # ==========================================================================
    # LEAF VALUES
    # ==========================================================================
    def leaf_equal(self, value_a: Any, value_b: Any, report=None) -> bool:
        """
        Compare two leaf values.

        Order of checks: None, type, availability, identity, native
        equality (floats within tolerance, NaN equal to NaN), sequences
        element-wise, dictionaries key by key, cross-references, then
        registered value objects through their schema.

        Args:
            value_a: First value
            value_b: Second value
            report: MatchReport consulted for cross-reference correspondence

        Returns:
            True if the values are equal
        """
        if value_a is None and value_b is None:
            return True
        if type(value_a) is not type(value_b):
            return False
        if value_a is UNAVAILABLE or value_b is UNAVAILABLE:
            return False
        if value_a is value_b:
            return True

        if isinstance(value_a, float):
            if math.isnan(value_a) and math.isnan(value_b):
                return True
            tolerance = self.options.float_tolerance
            if tolerance:
                return math.isclose(value_a, value_b, rel_tol=0.0, abs_tol=tolerance)
            return value_a == value_b

        if isinstance(value_a, (SceneNode, Component)):
            return self._reference_equal(value_a, value_b, report)

        if value_a == value_b:
            return True

        if isinstance(value_a, (list, tuple)):
            # Sequence notes belong to the owning value, so no report here
            return compare_ordered(
                value_a,
                value_b,
                lambda a, b: self.leaf_equal(a, b, report),
                options=self.options,
            )

        if isinstance(value_a, dict):
            if value_a.keys() != value_b.keys():
                return False
            return all(self.leaf_equal(value_a[key], value_b[key], report) for key in value_a)

        if self.options.registry.is_comparable(value_a):
            return self._guarded(
                value_a, value_b, None,
                lambda a, b, _: ComparisonResult.of(
                    MatchTier.VALUE_EQUAL if self._schema_equal(a, b, None) else MatchTier.NONE
                ),
            ).structural

        return False

    def _reference_equal(self, target_a: Any, target_b: Any, report) -> bool:
        """
        Compare two cross-referenced nodes or components.

        Targets already paired in the report correspond. Otherwise they
        are compared structurally without recording, and a structural
        match is recorded as TARGET_EQUAL.
        """
        if report is not None and report.get_match(target_a) is target_b:
            return True

        compare = self._node_result if isinstance(target_a, SceneNode) else self._component_result
        structural = self._guarded(target_a, target_b, None, compare).structural

        if structural and report is not None:
            report.add_match(target_a, target_b, MatchTier.TARGET_EQUAL)
        return structural

    # ==========================================================================
    # RECURSION CONTROL
    # ==========================================================================
    def _match_recorded(self, items_a: list, items_b: list, report, compare: Callable) -> SetMatch:
        """
        Pair two collections, then record only the pairs that were chosen.

        Candidates are evaluated without the report, so rejected trial
        pairings leave no records or notes behind. Each chosen pair is
        then compared again with the report attached.
        """
        matching = match_scrambled(
            items_a,
            items_b,
            self._pair_predicate(None, compare),
            report=report,
            options=self.options,
        )
        if report is not None:
            matching.pairs = [
                (item_a, item_b, tier_of(self._guarded(item_a, item_b, report, compare)))
                for item_a, item_b, _ in matching.pairs
            ]
        return matching

    def _pair_predicate(self, report, compare: Callable) -> Callable[[Any, Any], ComparisonResult]:
        def predicate(item_a: Any, item_b: Any) -> ComparisonResult:
            return self._guarded(item_a, item_b, report, compare)
        return predicate

    def _guarded(self, subject_a: Any, subject_b: Any, report, compare: Callable) -> ComparisonResult:
        """Run a comparison under the cycle guard and depth limit."""
        key = (id(subject_a), id(subject_b))
        if key in self._in_progress:
            self.logger.debug(
                f"Cycle while comparing {describe_subject(subject_a)} with "
                f"{describe_subject(subject_b)}, assuming equal"
            )
            return ComparisonResult.of(MatchTier.VALUE_EQUAL)

        if self._depth >= self.options.max_depth:
            self.logger.warning(
                f"Maximum comparison depth {self.options.max_depth} reached at "
                f"{describe_subject(subject_a)}, treating as unequal"
            )
            return ComparisonResult.unmatched()

        self._in_progress.add(key)
        self._depth += 1
        try:
            return compare(subject_a, subject_b, report)
        finally:
            self._depth -= 1
            self._in_progress.discard(key)


# ==============================================================================
# PUBLIC API
# ==============================================================================
def value_equals(
    subject_a: Any,
    subject_b: Any,
    report=None,
    options: Optional[CompareOptions] = None
) -> bool:
    """
    Decide whether two subjects are structurally equal.

    The verdict is strict by default: the pair must reach
    options.min_tier (VALUE_EQUAL unless configured otherwise). When
    the verdict is negative and a report is attached, the report is
    marked unequal and both roots are filed as non-matches.

    Args:
        subject_a: Node, component or leaf value
        subject_b: Node, component or leaf value
        report: Optional MatchReport collecting pairings and notes
        options: Comparison options

    Returns:
        True if the pair meets the minimum tier

    Example:
        report = MatchReport()
        if not value_equals(scene_a, scene_b, report=report):
            for subject in report.bad_matches:
                print(subject)
    """
    options = options or CompareOptions()
    result = EqualityEngine(options).compare(subject_a, subject_b, report)
    equal = result.meets(options.min_tier)

    if not equal and report is not None:
        report.add_non_match(None)
        for subject in (subject_a, subject_b):
            if isinstance(subject, (SceneNode, Component)):
                report.add_non_match(subject)

    return equal


__all__ = [
    'EqualityEngine',
    'value_equals',
]
