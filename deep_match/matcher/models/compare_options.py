# Path: deep_match/matcher/models/compare_options.py
"""
Comparison Options

Knobs threaded through one comparison: verbosity, float tolerance,
recursion limit, pairing strategy, strictness and exclusions.
"""

import logging
from typing import Optional
from dataclasses import dataclass, field

from ...core.logger import get_process_logger
from ...scene.schema import DEFAULT_REGISTRY, ExclusionPolicy, SchemaRegistry
from ...constants import (
    DEFAULT_FLOAT_TOLERANCE,
    DEFAULT_MAX_DEPTH,
)
from .match_types import MatchStrategy, MatchTier


def _default_logger() -> logging.Logger:
    return get_process_logger('matcher.equality')


@dataclass
class CompareOptions:
    """
    Options for a single top-level comparison.

    Attributes:
        verbose: Log every mismatch and keep scanning after failures
        float_tolerance: Absolute tolerance for float leaves (None = exact)
        max_depth: Deepest nested comparison before giving up
        strategy: Pairing strategy for unordered collections
        min_tier: Weakest tier value_equals accepts as equal
        ignore_components: Component types skipped during comparison
        exclusions: Extra value exclusions on top of the registry's
        registry: Schema registry resolving comparable values
        logger: Destination for mismatch and diagnostic logs

    Example:
        options = CompareOptions(verbose=True, min_tier=MatchTier.NAMES_EQUAL)
        equal = value_equals(scene_a, scene_b, options=options)
    """
    verbose: bool = False
    float_tolerance: Optional[float] = DEFAULT_FLOAT_TOLERANCE
    max_depth: int = DEFAULT_MAX_DEPTH
    strategy: MatchStrategy = MatchStrategy.GREEDY
    min_tier: MatchTier = MatchTier.VALUE_EQUAL
    ignore_components: tuple[type, ...] = ()
    exclusions: Optional[ExclusionPolicy] = None
    registry: SchemaRegistry = field(default=DEFAULT_REGISTRY, repr=False)
    logger: logging.Logger = field(default_factory=_default_logger, repr=False)

    def is_thorough(self, report=None) -> bool:
        """
        Check whether matchers keep scanning after a mismatch.

        Scanning continues when verbose or when a report collects results.
        """
        return self.verbose or report is not None


__all__ = ['CompareOptions']
