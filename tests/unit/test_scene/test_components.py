# Path: tests/unit/test_scene/test_components.py
"""
Tests for built-in scene components.
"""

from deep_match.scene import (
    BoxCollider,
    FixedJoint,
    Light,
    MeshFilter,
    MeshRenderer,
    Rigidbody,
    SceneNode,
    Transform,
)


class TestComponentBasics:
    """Test behaviour shared by every component."""

    def test_name_is_owner_name(self):
        """A component's name is its node's name."""
        node = SceneNode('Crate')
        body = node.add_component(Rigidbody())
        assert body.name == 'Crate'
        assert body.type_name == 'Rigidbody'

    def test_active_and_enabled(self):
        """Inactive owners or disabled components are not active-and-enabled."""
        node = SceneNode('Lamp')
        light = node.add_component(Light())
        assert light.is_active_and_enabled

        light.enabled = False
        assert not light.is_active_and_enabled

        light.enabled = True
        node.active = False
        assert not light.is_active_and_enabled

    def test_components_compare_by_identity(self):
        """Equal values do not make two components ==."""
        assert Rigidbody(mass=1.0) != Rigidbody(mass=1.0)


class TestTransform:
    """Test Transform world position."""

    def test_position_composes_parents(self):
        """World position applies parent translation and scale."""
        root = SceneNode('Root')
        root.add_component(Transform(local_position=(1.0, 0.0, 0.0), local_scale=(2.0, 2.0, 2.0)))
        child = root.add_child(SceneNode('Child'))
        transform = child.add_component(Transform(local_position=(1.0, 1.0, 0.0)))

        assert transform.position == (3.0, 2.0, 0.0)

    def test_detached_position_is_local(self):
        """Without an owner the position is the local position."""
        assert Transform(local_position=(1.0, 2.0, 3.0)).position == (1.0, 2.0, 3.0)


class TestDerivedValues:
    """Test renderer and physics derived values."""

    def test_renderer_materials(self):
        """Material helpers read the shared material list."""
        renderer = MeshRenderer(shared_materials=['steel', 'glass'])
        assert renderer.shared_material == 'steel'
        assert renderer.material_count == 2
        assert MeshRenderer().shared_material is None

    def test_mesh_filter_mesh(self):
        """mesh mirrors the shared mesh handle."""
        assert MeshFilter(shared_mesh='crate.mesh').mesh == 'crate.mesh'

    def test_world_center_of_mass(self):
        """World centre of mass offsets the centre of mass by position."""
        node = SceneNode('Body')
        node.add_component(Transform(local_position=(0.0, 2.0, 0.0)))
        body = node.add_component(Rigidbody(center_of_mass=(0.0, 0.5, 0.0)))
        assert body.world_center_of_mass == (0.0, 2.5, 0.0)

    def test_collider_bounds_follow_transform(self):
        """Collider bounds centre on the world position."""
        node = SceneNode('Box')
        node.add_component(Transform(local_position=(4.0, 0.0, 0.0)))
        collider = node.add_component(BoxCollider())
        assert collider.bounds[0] == (4.0, 0.0, 0.0)

    def test_fixed_joint_defaults(self):
        """A joint is unconnected and unbreakable by default."""
        joint = FixedJoint()
        assert joint.connected_body is None
        assert joint.break_force == float('inf')
