# Path: deep_match/scene/schema.py
"""
Comparable Value Schemas

Declares which named leaf values of a type take part in structural
comparison. Each comparable type owns an ordered schema of field and
property descriptors. Exclusions are kept per class and inherited along
the MRO, so a rule declared for a base component applies to every
subclass.

Schemas are registered explicitly with the @comparable decorator.
Undecorated dataclasses fall back to their declared fields and public
properties.

Example:
    @comparable(fields=('mass', 'drag'))
    @dataclass(eq=False)
    class Rigidbody(Component):
        mass: float = 1.0
        drag: float = 0.0

    names = [d.name for d in comparable_fields(Rigidbody)]
"""

from __future__ import annotations

import dataclasses
import logging
import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union


logger = logging.getLogger('process.scene.schema')


# ==============================================================================
# SENTINELS AND DESCRIPTORS
# ==============================================================================
class _Unavailable:
    """Marker returned when a leaf value cannot be read."""

    _instance: Optional['_Unavailable'] = None

    def __new__(cls) -> '_Unavailable':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<unavailable>'

    def __bool__(self) -> bool:
        return False


UNAVAILABLE = _Unavailable()


class ValueKind(str, Enum):
    """Where a leaf value comes from."""
    FIELD = "field"
    PROPERTY = "property"


@dataclass(frozen=True)
class ValueDescriptor:
    """
    A named accessor for one leaf value of a comparable type.

    Attributes:
        name: Value name, used in mismatch notes
        kind: FIELD or PROPERTY
        getter: Callable reading the value from an instance
    """
    name: str
    kind: ValueKind
    getter: Callable[[Any], Any] = field(repr=False, compare=False)

    def get_value(self, instance: Any, log: Optional[logging.Logger] = None) -> Any:
        """
        Read the value from an instance without raising.

        Any failure inside the getter yields UNAVAILABLE.

        Args:
            instance: Object to read from
            log: Logger for access failures (defaults to module logger)

        Returns:
            The value, or UNAVAILABLE when the read failed
        """
        try:
            return self.getter(instance)
        except Exception as e:
            (log or logger).debug(
                f"Couldn't access {self.kind.value} "
                f"{type(instance).__name__}.{self.name}: {e}"
            )
            return UNAVAILABLE


@dataclass(frozen=True)
class ComparableSchema:
    """
    Ordered comparable values of one type, before exclusions.

    Attributes:
        owner: The described type
        fields: Field descriptors in declaration order
        properties: Property descriptors in declaration order
    """
    owner: type
    fields: tuple[ValueDescriptor, ...] = ()
    properties: tuple[ValueDescriptor, ...] = ()


AccessorSpec = Union[str, tuple[str, Callable[[Any], Any]]]


# ==============================================================================
# EXCLUSIONS
# ==============================================================================
class ExclusionPolicy:
    """
    Value names excluded from comparison, keyed by class.

    Lookups walk the MRO, so exclusions of a base class also hold for
    its subclasses.

    Example:
        policy = ExclusionPolicy()
        policy.exclude(Renderer, {'bounds', 'is_visible'})
        'bounds' in policy.excluded_for(MeshRenderer)  # True
    """

    def __init__(self, rules: Optional[dict[type, Iterable[str]]] = None):
        """
        Initialize exclusion policy.

        Args:
            rules: Optional initial mapping of class to excluded names
        """
        self._rules: dict[type, frozenset[str]] = {}
        for cls, names in (rules or {}).items():
            self.exclude(cls, names)

    def exclude(self, cls: type, names: Iterable[str]) -> None:
        """Add excluded value names for a class."""
        self._rules[cls] = self._rules.get(cls, frozenset()) | frozenset(names)

    def excluded_for(self, cls: type) -> frozenset[str]:
        """Get every excluded name that applies to a class."""
        excluded: frozenset[str] = frozenset()
        for base in cls.__mro__:
            excluded |= self._rules.get(base, frozenset())
        return excluded

    def merged(self, other: Optional['ExclusionPolicy']) -> 'ExclusionPolicy':
        """Return a new policy holding the rules of both policies."""
        result = ExclusionPolicy(self._rules)
        if other is not None:
            for cls, names in other._rules.items():
                result.exclude(cls, names)
        return result

    @property
    def rules(self) -> dict[type, frozenset[str]]:
        """Copy of the per-class rules."""
        return dict(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


# ==============================================================================
# REGISTRY
# ==============================================================================
class SchemaRegistry:
    """
    Registry of comparable schemas.

    Resolves the schema of a type in this order:
    1. Explicitly registered schema
    2. Schema derived from a dataclass declaration
    3. Schema of the nearest registered base class
    """

    def __init__(self, exclusions: Optional[ExclusionPolicy] = None):
        """
        Initialize schema registry.

        Args:
            exclusions: Exclusion policy applied by comparable_fields/properties
        """
        self.exclusions = exclusions or ExclusionPolicy()
        self._schemas: dict[type, ComparableSchema] = {}
        self._derived: dict[type, Optional[ComparableSchema]] = {}
        self._by_name: dict[str, type] = {}

    def register(
        self,
        cls: type,
        fields: Optional[Iterable[AccessorSpec]] = None,
        properties: Optional[Iterable[AccessorSpec]] = None
    ) -> ComparableSchema:
        """
        Register the comparable schema of a type.

        Args:
            cls: Type to register
            fields: Field names or (name, getter) pairs. None derives them
                    from the dataclass declaration.
            properties: Property names or (name, getter) pairs. None derives
                        every public property of the class.

        Returns:
            The registered schema
        """
        field_specs = _declared_fields(cls) if fields is None else list(fields)
        property_specs = _declared_properties(cls) if properties is None else list(properties)

        schema = ComparableSchema(
            owner=cls,
            fields=tuple(_descriptor(spec, ValueKind.FIELD) for spec in field_specs),
            properties=tuple(_descriptor(spec, ValueKind.PROPERTY) for spec in property_specs),
        )

        if cls.__name__ in self._by_name and self._by_name[cls.__name__] is not cls:
            logger.warning(f"Schema name {cls.__name__} registered twice, keeping latest")

        self._schemas[cls] = schema
        self._by_name[cls.__name__] = cls
        self._derived.clear()
        return schema

    def schema_for(self, cls: type) -> Optional[ComparableSchema]:
        """
        Resolve the schema of a type.

        Args:
            cls: Type to look up

        Returns:
            ComparableSchema, or None if the type is not comparable
        """
        if cls in self._schemas:
            return self._schemas[cls]

        if cls not in self._derived:
            self._derived[cls] = self._derive(cls)
        return self._derived[cls]

    def _derive(self, cls: type) -> Optional[ComparableSchema]:
        """Derive a schema for an unregistered type."""
        if dataclasses.is_dataclass(cls):
            return ComparableSchema(
                owner=cls,
                fields=tuple(
                    _descriptor(name, ValueKind.FIELD) for name in _declared_fields(cls)
                ),
                properties=tuple(
                    _descriptor(name, ValueKind.PROPERTY) for name in _declared_properties(cls)
                ),
            )

        for base in cls.__mro__[1:]:
            if base in self._schemas:
                return self._schemas[base]
        return None

    def is_comparable(self, value: Any) -> bool:
        """Check whether a value has a comparable schema."""
        return self.schema_for(type(value)) is not None

    def comparable_fields(
        self,
        cls: type,
        exclusions: Optional[ExclusionPolicy] = None
    ) -> list[ValueDescriptor]:
        """
        Get ordered comparable field descriptors of a type.

        Args:
            cls: Type to describe
            exclusions: Extra exclusions on top of the registry policy

        Returns:
            Field descriptors with excluded names removed
        """
        schema = self.schema_for(cls)
        if schema is None:
            return []
        excluded = self._excluded(cls, exclusions)
        return [d for d in schema.fields if d.name not in excluded]

    def comparable_properties(
        self,
        cls: type,
        exclusions: Optional[ExclusionPolicy] = None
    ) -> list[ValueDescriptor]:
        """
        Get ordered comparable property descriptors of a type.

        Args:
            cls: Type to describe
            exclusions: Extra exclusions on top of the registry policy

        Returns:
            Property descriptors with excluded names removed
        """
        schema = self.schema_for(cls)
        if schema is None:
            return []
        excluded = self._excluded(cls, exclusions)
        return [d for d in schema.properties if d.name not in excluded]

    def _excluded(self, cls: type, extra: Optional[ExclusionPolicy]) -> frozenset[str]:
        excluded = self.exclusions.excluded_for(cls)
        if extra is not None:
            excluded |= extra.excluded_for(cls)
        return excluded

    def get_type(self, name: str) -> Optional[type]:
        """Look up a registered type by class name."""
        return self._by_name.get(name)

    def registered_types(self) -> list[type]:
        """Get all explicitly registered types."""
        return list(self._schemas.keys())


def _declared_fields(cls: type) -> list[str]:
    """Public dataclass fields that take part in equality."""
    if not dataclasses.is_dataclass(cls):
        return []
    return [
        f.name for f in dataclasses.fields(cls)
        if f.compare and not f.name.startswith('_')
    ]


def _declared_properties(cls: type) -> list[str]:
    """Public properties in base-to-derived declaration order."""
    names: list[str] = []
    for base in reversed(cls.__mro__):
        for attr_name, attr in vars(base).items():
            if isinstance(attr, property) and not attr_name.startswith('_'):
                if attr_name not in names:
                    names.append(attr_name)
    return names


def _descriptor(spec: AccessorSpec, kind: ValueKind) -> ValueDescriptor:
    if isinstance(spec, str):
        return ValueDescriptor(name=spec, kind=kind, getter=operator.attrgetter(spec))
    name, getter = spec
    return ValueDescriptor(name=name, kind=kind, getter=getter)


# ==============================================================================
# DEFAULT REGISTRY
# ==============================================================================
DEFAULT_EXCLUSIONS = ExclusionPolicy()
DEFAULT_REGISTRY = SchemaRegistry(DEFAULT_EXCLUSIONS)


def comparable(
    fields: Optional[Iterable[AccessorSpec]] = None,
    properties: Optional[Iterable[AccessorSpec]] = None,
    registry: Optional[SchemaRegistry] = None
) -> Callable[[type], type]:
    """
    Class decorator registering a comparable schema.

    Apply it above @dataclass so the dataclass fields exist at
    registration time.

    Args:
        fields: Field names or (name, getter) pairs, None to derive
        properties: Property names or (name, getter) pairs, None to derive
        registry: Target registry (defaults to DEFAULT_REGISTRY)

    Returns:
        Decorator returning the class unchanged
    """
    def decorator(cls: type) -> type:
        (registry or DEFAULT_REGISTRY).register(cls, fields=fields, properties=properties)
        return cls

    return decorator


def comparable_fields(cls: type, exclusions: Optional[ExclusionPolicy] = None) -> list[ValueDescriptor]:
    """Comparable field descriptors from the default registry."""
    return DEFAULT_REGISTRY.comparable_fields(cls, exclusions)


def comparable_properties(cls: type, exclusions: Optional[ExclusionPolicy] = None) -> list[ValueDescriptor]:
    """Comparable property descriptors from the default registry."""
    return DEFAULT_REGISTRY.comparable_properties(cls, exclusions)


__all__ = [
    'UNAVAILABLE',
    'ValueKind',
    'ValueDescriptor',
    'ComparableSchema',
    'ExclusionPolicy',
    'SchemaRegistry',
    'DEFAULT_EXCLUSIONS',
    'DEFAULT_REGISTRY',
    'comparable',
    'comparable_fields',
    'comparable_properties',
]
