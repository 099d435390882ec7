# Path: deep_match/scene/__init__.py
"""
Scene Graph Package for deep_match

The compared object model: a tree of nodes, each carrying an
unordered set of components, each component carrying named leaf
values described by a comparable schema.

Components:
- SceneNode: Node in the hierarchy tree
- Component and built-in component types
- SchemaRegistry / ExclusionPolicy: which leaf values are compared

Example:
    from deep_match.scene import SceneNode, Transform

    root = SceneNode("Root")
    root.add_component(Transform(local_position=(0.0, 1.0, 0.0)))
"""

from .schema import (
    UNAVAILABLE,
    ValueKind,
    ValueDescriptor,
    ComparableSchema,
    ExclusionPolicy,
    SchemaRegistry,
    DEFAULT_EXCLUSIONS,
    DEFAULT_REGISTRY,
    comparable,
    comparable_fields,
    comparable_properties,
)
from .node import SceneNode
from .components import (
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
    describe_subject,
)

__all__ = [
    # Schema
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
    # Graph
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
    'describe_subject',
]
