# Path: deep_match/matcher/engine/scrambled.py
"""
Scrambled Matcher

Order-independent pairing of two collections. Used for the children
and the components of a node.

Greedy strategy (default):
    Each element of A, in order, takes the first unused element of B
    that it structurally equals. When no structural partner exists the
    first lenient (name-only) candidate seen is taken instead. The
    result depends on input order and is not globally optimal.

Optimal strategy:
    Builds the full compatibility matrix, finds a maximum-cardinality
    matching over structural edges with augmenting paths, then pairs
    the leftovers greedily over lenient edges.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from ..models.compare_options import CompareOptions
from ..models.match_types import ComparisonResult, MatchStrategy, MatchTier


@dataclass
class SetMatch:
    """
    Outcome of pairing two collections.

    Attributes:
        pairs: (item_a, item_b, tier) for every paired element
        unmatched_a: Elements of A left without a partner
        unmatched_b: Elements of B left without a partner
        aborted: True when matching stopped at the first failure
    """
    pairs: list[tuple[Any, Any, MatchTier]] = field(default_factory=list)
    unmatched_a: list[Any] = field(default_factory=list)
    unmatched_b: list[Any] = field(default_factory=list)
    aborted: bool = False

    @property
    def complete(self) -> bool:
        """Every element of both collections was paired."""
        return not self.aborted and not self.unmatched_a and not self.unmatched_b

    @property
    def weakest_tier(self) -> Optional[MatchTier]:
        """Lowest tier among the pairs, None when nothing was paired."""
        if not self.pairs:
            return None
        return min(tier for _, _, tier in self.pairs)

    @property
    def all_structural(self) -> bool:
        """True when every pair reached VALUE_EQUAL or better."""
        return all(tier >= MatchTier.VALUE_EQUAL for _, _, tier in self.pairs)


def tier_of(result: Any) -> MatchTier:
    """
    Normalize an item predicate result to a tier.

    A plain True counts as structural (VALUE_EQUAL), False as NONE.
    """
    if isinstance(result, ComparisonResult):
        return result.tier if result.paired else MatchTier.NONE
    if isinstance(result, MatchTier):
        return result
    return MatchTier.VALUE_EQUAL if result else MatchTier.NONE


# ==============================================================================
# STRATEGIES
# ==============================================================================
def _greedy(items_a, items_b, item_equals, thorough: bool) -> SetMatch:
    result = SetMatch()
    used = [False] * len(items_b)

    for item_a in items_a:
        chosen: Optional[tuple[int, MatchTier]] = None
        fallback: Optional[tuple[int, MatchTier]] = None

        for index_b, item_b in enumerate(items_b):
            if used[index_b]:
                continue
            tier = tier_of(item_equals(item_a, item_b))
            if tier >= MatchTier.VALUE_EQUAL:
                chosen = (index_b, tier)
                break
            if tier != MatchTier.NONE and fallback is None:
                fallback = (index_b, tier)

        pick = chosen or fallback
        if pick is None:
            result.unmatched_a.append(item_a)
            if not thorough:
                result.aborted = True
                return result
            continue

        index_b, tier = pick
        used[index_b] = True
        result.pairs.append((item_a, items_b[index_b], tier))

    result.unmatched_b = [item for index, item in enumerate(items_b) if not used[index]]
    return result


def _optimal(items_a, items_b, item_equals, thorough: bool) -> SetMatch:
    tiers = [[tier_of(item_equals(a, b)) for b in items_b] for a in items_a]
    owner_of_b = [-1] * len(items_b)

    def augment(index_a: int, seen: list[bool]) -> bool:
        for index_b, tier in enumerate(tiers[index_a]):
            if tier < MatchTier.VALUE_EQUAL or seen[index_b]:
                continue
            seen[index_b] = True
            if owner_of_b[index_b] == -1 or augment(owner_of_b[index_b], seen):
                owner_of_b[index_b] = index_a
                return True
        return False

    for index_a in range(len(items_a)):
        augment(index_a, [False] * len(items_b))

    partner_of_a = [-1] * len(items_a)
    for index_b, index_a in enumerate(owner_of_b):
        if index_a != -1:
            partner_of_a[index_a] = index_b

    # Leftovers fall back to lenient edges in input order
    for index_a, row in enumerate(tiers):
        if partner_of_a[index_a] != -1:
            continue
        for index_b, tier in enumerate(row):
            if tier != MatchTier.NONE and owner_of_b[index_b] == -1:
                owner_of_b[index_b] = index_a
                partner_of_a[index_a] = index_b
                break

    result = SetMatch()
    for index_a, item_a in enumerate(items_a):
        index_b = partner_of_a[index_a]
        if index_b == -1:
            result.unmatched_a.append(item_a)
        else:
            result.pairs.append((item_a, items_b[index_b], tiers[index_a][index_b]))
    result.unmatched_b = [item for index, item in enumerate(items_b) if owner_of_b[index] == -1]
    result.aborted = not thorough and bool(result.unmatched_a)
    return result


# ==============================================================================
# PUBLIC API
# ==============================================================================
def match_scrambled(
    set_a: Sequence[Any],
    set_b: Sequence[Any],
    item_equals: Callable[[Any, Any], Any],
    report=None,
    options: Optional[CompareOptions] = None
) -> SetMatch:
    """
    Pair the elements of two collections regardless of order.

    In thorough mode (verbose, or a report is attached) every element
    of A is tried even after a failure, and the elements of both sides
    left unpaired are filed in the report as non-matches.

    Args:
        set_a: First collection
        set_b: Second collection
        item_equals: Pair predicate (bool, MatchTier or ComparisonResult)
        report: MatchReport receiving unmatched elements
        options: Comparison options (verbosity, strategy)

    Returns:
        SetMatch describing the pairing
    """
    options = options or CompareOptions()
    thorough = options.is_thorough(report)
    items_a = list(set_a)
    items_b = list(set_b)

    if len(items_a) != len(items_b) and not thorough:
        return SetMatch(unmatched_a=items_a, unmatched_b=items_b, aborted=True)

    if options.strategy == MatchStrategy.OPTIMAL:
        result = _optimal(items_a, items_b, item_equals, thorough)
    else:
        result = _greedy(items_a, items_b, item_equals, thorough)

    if thorough:
        if options.verbose and (result.unmatched_a or result.unmatched_b):
            options.logger.info(
                f"Unpaired elements: {len(result.unmatched_a)} in A, "
                f"{len(result.unmatched_b)} in B"
            )
        if report is not None:
            for item in result.unmatched_a:
                report.add_non_match(item)
            for item in result.unmatched_b:
                report.add_non_match(item)

    return result


def compare_scrambled(
    set_a: Sequence[Any],
    set_b: Sequence[Any],
    item_equals: Callable[[Any, Any], Any],
    report=None,
    options: Optional[CompareOptions] = None
) -> bool:
    """
    Check whether two collections pair up completely, in any order.

    Returns:
        True if every element of A found a partner in B and none of B
        was left over
    """
    return match_scrambled(set_a, set_b, item_equals, report=report, options=options).complete


__all__ = [
    'SetMatch',
    'tier_of',
    'match_scrambled',
    'compare_scrambled',
]
