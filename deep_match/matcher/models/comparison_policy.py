# Path: deep_match/matcher/models/comparison_policy.py
"""
Comparison Policy Model

Pydantic model of a comparison policy document. A policy names types
by class name; they are resolved against a schema registry when the
policy is turned into CompareOptions or applied to a MatchReport.

Example policy (YAML):
    add_limit: 500
    strategy: greedy
    min_tier: value_equal
    float_tolerance: 0.0001
    ignore_components: [Light]
    exclusions:
      Rigidbody: [drag, angular_drag]
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ...constants import DEFAULT_FLOAT_TOLERANCE, DEFAULT_MAX_DEPTH
from ...scene.schema import DEFAULT_REGISTRY, ExclusionPolicy, SchemaRegistry
from .match_types import MatchStrategy, MatchTier
from .compare_options import CompareOptions


class ComparisonPolicy(BaseModel):
    """
    Declarative comparison settings.

    Attributes:
        add_limit: Maximum matches a report records (0 = unlimited)
        ignore_components: Component type names skipped entirely
        exclusions: Extra excluded value names per component type name
        strategy: Pairing strategy for unordered collections
        min_tier: Weakest tier accepted as equal
        verbose: Log every mismatch
        float_tolerance: Absolute float tolerance (None = exact)
        max_depth: Deepest nested comparison
    """
    add_limit: int = Field(default=0, ge=0)
    ignore_components: list[str] = Field(default_factory=list)
    exclusions: dict[str, list[str]] = Field(default_factory=dict)
    strategy: MatchStrategy = MatchStrategy.GREEDY
    min_tier: MatchTier = MatchTier.VALUE_EQUAL
    verbose: bool = False
    float_tolerance: Optional[float] = Field(default=DEFAULT_FLOAT_TOLERANCE, ge=0)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0)

    model_config = {'extra': 'forbid'}

    @field_validator('min_tier', mode='before')
    @classmethod
    def _parse_tier(cls, value):
        if isinstance(value, str):
            return MatchTier.from_name(value)
        return value

    @field_validator('strategy', mode='before')
    @classmethod
    def _parse_strategy(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_config(cls, config=None) -> 'ComparisonPolicy':
        """
        Build a policy from the .env configuration.

        Args:
            config: ConfigLoader instance (defaults to the singleton)

        Returns:
            ComparisonPolicy populated from DEEP_MATCH_* settings

        Raises:
            ValueError: If the strategy or tier name is unknown
        """
        if config is None:
            from ...config_loader import ConfigLoader
            config = ConfigLoader()

        return cls(
            add_limit=config.get('add_limit', 0),
            strategy=config.get('match_strategy', 'greedy'),
            min_tier=config.get('min_tier', 'value_equal'),
            verbose=config.get('verbose', False),
            float_tolerance=config.get('float_tolerance', DEFAULT_FLOAT_TOLERANCE),
            max_depth=config.get('max_depth', DEFAULT_MAX_DEPTH),
        )

    # ==========================================================================
    # RESOLUTION
    # ==========================================================================
    def resolve_types(
        self,
        names: list[str],
        registry: Optional[SchemaRegistry] = None
    ) -> tuple[type, ...]:
        """
        Resolve type names against a schema registry.

        Raises:
            ValueError: If a name is not a registered type
        """
        registry = registry or DEFAULT_REGISTRY
        resolved = []
        for name in names:
            cls = registry.get_type(name)
            if cls is None:
                raise ValueError(f"Unknown component type in policy: {name}")
            resolved.append(cls)
        return tuple(resolved)

    def exclusion_policy(self, registry: Optional[SchemaRegistry] = None) -> ExclusionPolicy:
        """Build the typed exclusion policy declared by this document."""
        policy = ExclusionPolicy()
        for type_name, value_names in self.exclusions.items():
            (cls,) = self.resolve_types([type_name], registry)
            policy.exclude(cls, value_names)
        return policy

    def to_options(self, registry: Optional[SchemaRegistry] = None) -> CompareOptions:
        """
        Convert the policy to CompareOptions.

        Args:
            registry: Registry resolving type names (defaults to DEFAULT_REGISTRY)

        Returns:
            CompareOptions carrying every policy setting
        """
        registry = registry or DEFAULT_REGISTRY
        return CompareOptions(
            verbose=self.verbose,
            float_tolerance=self.float_tolerance or None,
            max_depth=self.max_depth,
            strategy=self.strategy,
            min_tier=self.min_tier,
            ignore_components=self.resolve_types(self.ignore_components, registry),
            exclusions=self.exclusion_policy(registry),
            registry=registry,
        )

    def apply_to(self, report, registry: Optional[SchemaRegistry] = None):
        """
        Configure a MatchReport with the policy's limit and ignored types.

        Returns:
            The same report, for chaining
        """
        report.add_limit = self.add_limit
        report.ignore_components = self.resolve_types(self.ignore_components, registry)
        return report


__all__ = ['ComparisonPolicy']
