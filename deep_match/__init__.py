# Path: deep_match/__init__.py
"""
deep_match - Deep Structural Equality for Scene Graphs

Recursively compares two hierarchies of nodes, pairing children and
components regardless of order, and explains the outcome in a report
that ranks every correspondence by tier.

Example:
    from deep_match import MatchReport, SceneNode, Transform, value_equals

    a = SceneNode("Root")
    a.add_component(Transform(local_position=(0.0, 1.0, 0.0)))
    b = SceneNode("Root")
    b.add_component(Transform(local_position=(0.0, 2.0, 0.0)))

    report = MatchReport()
    value_equals(a, b, report=report)        # False
    report.get_notes(a.components[0])        # ['local_position: ... != ...']
"""

from .matcher import (
    EqualityEngine,
    value_equals,
    compare_ordered,
    compare_scrambled,
    match_scrambled,
    SetMatch,
    MatchTier,
    MatchStrategy,
    MatchRecord,
    ComparisonResult,
    CompareOptions,
    ComparisonPolicy,
    MatchReport,
    PolicyLoader,
    PolicyLoadError,
)
from .scene import (
    UNAVAILABLE,
    ExclusionPolicy,
    SchemaRegistry,
    comparable,
    comparable_fields,
    comparable_properties,
    SceneNode,
    Component,
    Transform,
    MeshFilter,
    Renderer,
    MeshRenderer,
    Rigidbody,
    Collider,
    BoxCollider,
    SphereCollider,
    FixedJoint,
    Light,
)

__version__ = '1.0.0'

__all__ = [
    # Engine
    'EqualityEngine',
    'value_equals',
    'compare_ordered',
    'compare_scrambled',
    'match_scrambled',
    'SetMatch',
    # Models
    'MatchTier',
    'MatchStrategy',
    'MatchRecord',
    'ComparisonResult',
    'CompareOptions',
    'ComparisonPolicy',
    'MatchReport',
    'PolicyLoader',
    'PolicyLoadError',
    # Scene
    'UNAVAILABLE',
    'ExclusionPolicy',
    'SchemaRegistry',
    'comparable',
    'comparable_fields',
    'comparable_properties',
    'SceneNode',
    'Component',
    'Transform',
    'MeshFilter',
    'Renderer',
    'MeshRenderer',
    'Rigidbody',
    'Collider',
    'BoxCollider',
    'SphereCollider',
    'FixedJoint',
    'Light',
]
