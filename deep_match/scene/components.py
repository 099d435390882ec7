# Path: deep_match/scene/components.py
"""
Scene Components

Typed attribute bags attached to scene nodes. Every component type
registers a comparable schema, and the base exclusions below remove
values that are engine-computed, redundant with other compared state,
or shared-resource handles:

- Component: name, owner, hide flags, mesh/material handles,
  active-and-enabled state, world-space and physics-derived values
- Renderer: visibility, bounds and cached matrices
- Collider: bounds
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..constants import COMPONENT_SEPARATOR
from .node import SceneNode
from .schema import DEFAULT_EXCLUSIONS, comparable


Vector3 = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]
Color = tuple[float, float, float, float]

ZERO: Vector3 = (0.0, 0.0, 0.0)
ONE: Vector3 = (1.0, 1.0, 1.0)
IDENTITY: Quaternion = (0.0, 0.0, 0.0, 1.0)


# ==============================================================================
# BASE COMPONENT
# ==============================================================================
@comparable()
@dataclass(eq=False)
class Component:
    """
    Base class for everything attached to a SceneNode.

    Components compare and hash by identity. The name of a component
    is the name of its owning node.

    Attributes:
        owner: Node the component is attached to
        hide_flags: Editor visibility flags
    """
    owner: Optional[SceneNode] = field(default=None, repr=False, compare=False)
    hide_flags: int = 0

    @property
    def name(self) -> str:
        """Name of the owning node, empty when detached."""
        return self.owner.name if self.owner is not None else ''

    @property
    def is_active_and_enabled(self) -> bool:
        """Whether the owner is active and the component enabled."""
        if self.owner is None or not self.owner.active:
            return False
        return getattr(self, 'enabled', True)

    @property
    def type_name(self) -> str:
        return type(self).__name__


@comparable()
@dataclass(eq=False)
class Transform(Component):
    """Local position, rotation and scale of a node."""
    local_position: Vector3 = ZERO
    local_rotation: Quaternion = IDENTITY
    local_scale: Vector3 = ONE

    @property
    def position(self) -> Vector3:
        """World position, composing parent translations and scales."""
        x, y, z = self.local_position
        node = self.owner.parent if self.owner is not None else None
        while node is not None:
            parent_transform = node.get_component(Transform)
            if parent_transform is not None:
                sx, sy, sz = parent_transform.local_scale
                px, py, pz = parent_transform.local_position
                x, y, z = px + x * sx, py + y * sy, pz + z * sz
            node = node.parent
        return (x, y, z)


# ==============================================================================
# RENDERING
# ==============================================================================
@comparable()
@dataclass(eq=False)
class MeshFilter(Component):
    """Holds a handle to the mesh asset drawn by a renderer."""
    shared_mesh: Optional[str] = None

    @property
    def mesh(self) -> Optional[str]:
        return self.shared_mesh


@comparable()
@dataclass(eq=False)
class Renderer(Component):
    """Base renderer settings."""
    enabled: bool = True
    cast_shadows: bool = True
    receive_shadows: bool = True
    shared_materials: list[str] = field(default_factory=list)

    @property
    def shared_material(self) -> Optional[str]:
        return self.shared_materials[0] if self.shared_materials else None

    @property
    def material_count(self) -> int:
        return len(self.shared_materials)

    @property
    def is_visible(self) -> bool:
        return self.is_active_and_enabled

    @property
    def bounds(self) -> tuple[Vector3, Vector3]:
        # Centre and extents, computed by the engine at render time.
        transform = self.owner.get_component(Transform) if self.owner is not None else None
        centre = transform.position if transform is not None else ZERO
        return (centre, ZERO)


@comparable()
@dataclass(eq=False)
class MeshRenderer(Renderer):
    """Renders the mesh of a sibling MeshFilter."""
    lightmap_index: int = -1


# ==============================================================================
# PHYSICS
# ==============================================================================
@comparable()
@dataclass(eq=False)
class Rigidbody(Component):
    """Physics body settings."""
    mass: float = 1.0
    drag: float = 0.0
    angular_drag: float = 0.05
    use_gravity: bool = True
    is_kinematic: bool = False
    center_of_mass: Vector3 = ZERO
    inertia_tensor: Vector3 = ONE

    @property
    def world_center_of_mass(self) -> Vector3:
        transform = self.owner.get_component(Transform) if self.owner is not None else None
        if transform is None:
            return self.center_of_mass
        px, py, pz = transform.position
        cx, cy, cz = self.center_of_mass
        return (px + cx, py + cy, pz + cz)


@comparable()
@dataclass(eq=False)
class Collider(Component):
    """Base collider settings."""
    enabled: bool = True
    is_trigger: bool = False

    @property
    def bounds(self) -> tuple[Vector3, Vector3]:
        transform = self.owner.get_component(Transform) if self.owner is not None else None
        return (transform.position if transform is not None else ZERO, ZERO)


@comparable()
@dataclass(eq=False)
class BoxCollider(Collider):
    center: Vector3 = ZERO
    size: Vector3 = ONE


@comparable()
@dataclass(eq=False)
class SphereCollider(Collider):
    center: Vector3 = ZERO
    radius: float = 0.5


@comparable()
@dataclass(eq=False)
class FixedJoint(Component):
    """Joint pinning this body to another; connected_body is a cross-reference."""
    connected_body: Optional[Rigidbody] = None
    break_force: float = float('inf')


# ==============================================================================
# LIGHTING
# ==============================================================================
@comparable()
@dataclass(eq=False)
class Light(Component):
    enabled: bool = True
    light_type: str = 'point'
    color: Color = (1.0, 1.0, 1.0, 1.0)
    intensity: float = 1.0
    range: float = 10.0


# ==============================================================================
# DEFAULT EXCLUSIONS
# ==============================================================================
DEFAULT_EXCLUSIONS.exclude(Component, {
    'name',
    'owner',
    'hide_flags',
    'type_name',
    'mesh',
    'material',
    'materials',
    'shared_mesh',
    'shared_material',
    'shared_materials',
    'is_active_and_enabled',
    'world_center_of_mass',
    'position',
    'center_of_mass',
    'inertia_tensor',
})
DEFAULT_EXCLUSIONS.exclude(Renderer, {
    'is_visible',
    'bounds',
    'world_to_local_matrix',
    'local_to_world_matrix',
})
DEFAULT_EXCLUSIONS.exclude(Collider, {'bounds'})


# ==============================================================================
# NAMING
# ==============================================================================
def describe_subject(subject: Any) -> str:
    """
    Human-readable name of a node, component or leaf value.

    Nodes render as their path ("Robot/Arm"), components as
    "<node path>:<TypeName>".
    """
    if isinstance(subject, SceneNode):
        return subject.path
    if isinstance(subject, Component):
        owner = subject.owner.path if subject.owner is not None else '<detached>'
        return f"{owner}{COMPONENT_SEPARATOR}{subject.type_name}"
    return repr(subject)


__all__ = [
    'Vector3',
    'Quaternion',
    'Color',
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
