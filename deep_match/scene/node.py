# Path: deep_match/scene/node.py
"""
Scene Node - Individual node in a scene hierarchy.

Each node owns an ordered list of child nodes and an unordered set of
attached components. Nodes compare and hash by identity; structural
equality is the job of the matcher engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional, TypeVar

from ..constants import PATH_SEPARATOR

if TYPE_CHECKING:
    from .components import Component

ComponentT = TypeVar('ComponentT', bound='Component')


@dataclass(eq=False)
class SceneNode:
    """
    A single node in the scene hierarchy tree.

    Attributes:
        name: Display name (used for name-only fallback matching)
        active: Whether the node is active in the scene
        parent: Reference to parent node
        children: Ordered list of child nodes
        components: Attached components

    Example:
        root = SceneNode("Root")
        child = root.add_child(SceneNode("Child"))
        child.add_component(Transform(local_position=(0.0, 1.0, 0.0)))
    """
    name: str
    active: bool = True

    # Relationships
    parent: Optional[SceneNode] = field(default=None, repr=False)
    children: list[SceneNode] = field(default_factory=list, repr=False)
    components: list[Component] = field(default_factory=list, repr=False)

    # ===========================================================================
    # TREE NAVIGATION
    # ===========================================================================
    def add_child(self, child: SceneNode) -> SceneNode:
        """
        Add a child node to this node.

        A child that already has a parent is moved here.

        Args:
            child: Node to add as child

        Returns:
            The added child

        Raises:
            ValueError: If adding would create a cycle
        """
        if child is self:
            raise ValueError("Cannot add node as its own child")
        if self._would_create_cycle(child):
            raise ValueError("Adding this child would create a cycle")

        if child.parent is not None:
            child.parent.remove_child(child)

        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: SceneNode) -> bool:
        """
        Remove a child node.

        Args:
            child: Node to remove

        Returns:
            True if child was removed, False if not found
        """
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent = None
                return True
        return False

    def _would_create_cycle(self, potential_child: SceneNode) -> bool:
        """Check if adding a child would create a cycle."""
        current: Optional[SceneNode] = self
        while current is not None:
            if current is potential_child:
                return True
            current = current.parent
        return False

    # ===========================================================================
    # COMPONENTS
    # ===========================================================================
    def add_component(self, component: ComponentT) -> ComponentT:
        """
        Attach a component to this node.

        Args:
            component: Component to attach (detached from any previous owner)

        Returns:
            The attached component
        """
        if component.owner is not None and component.owner is not self:
            component.owner.remove_component(component)
        component.owner = self
        if not any(existing is component for existing in self.components):
            self.components.append(component)
        return component

    def remove_component(self, component: Component) -> bool:
        """Detach a component. Returns False if it was not attached."""
        for index, existing in enumerate(self.components):
            if existing is component:
                del self.components[index]
                component.owner = None
                return True
        return False

    def get_component(self, component_type: type[ComponentT]) -> Optional[ComponentT]:
        """Get the first attached component of a type."""
        for component in self.components:
            if isinstance(component, component_type):
                return component
        return None

    def get_components(self, component_type: Optional[type] = None) -> list[Component]:
        """Get attached components, optionally filtered by type."""
        if component_type is None:
            return list(self.components)
        return [c for c in self.components if isinstance(c, component_type)]

    # ===========================================================================
    # RELATIONSHIP QUERIES
    # ===========================================================================
    @property
    def is_root(self) -> bool:
        """Check if this is the root node."""
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        """Check if this is a leaf node (no children)."""
        return len(self.children) == 0

    @property
    def depth(self) -> int:
        """Depth in the hierarchy (0 = root)."""
        return len(self.ancestors)

    @property
    def ancestors(self) -> list[SceneNode]:
        """Get all ancestor nodes from parent to root."""
        result = []
        current = self.parent
        while current is not None:
            result.append(current)
            current = current.parent
        return result

    @property
    def descendants(self) -> list[SceneNode]:
        """Get all descendant nodes (children, grandchildren, etc.)."""
        result = []
        for child in self.children:
            result.append(child)
            result.extend(child.descendants)
        return result

    @property
    def root(self) -> SceneNode:
        """Get the root node of this tree."""
        current = self
        while current.parent is not None:
            current = current.parent
        return current

    @property
    def path(self) -> str:
        """Slash-separated names from the root to this node."""
        names = [node.name for node in reversed(self.ancestors)] + [self.name]
        return PATH_SEPARATOR.join(names)

    # ===========================================================================
    # TREE ITERATION
    # ===========================================================================
    def iter_preorder(self) -> Iterator[SceneNode]:
        """
        Iterate nodes in pre-order (parent before children).

        Yields:
            Nodes in pre-order traversal
        """
        yield self
        for child in self.children:
            yield from child.iter_preorder()

    def iter_components(self) -> Iterator[Component]:
        """Iterate every component in this subtree, in pre-order."""
        for node in self.iter_preorder():
            yield from node.components

    # ===========================================================================
    # SEARCH
    # ===========================================================================
    def find(self, name: str) -> Optional[SceneNode]:
        """
        Find the first node in this subtree with a given name.

        Args:
            name: Node name to search for

        Returns:
            Found node or None
        """
        for node in self.iter_preorder():
            if node.name == name:
                return node
        return None

    def find_by_path(self, path: str) -> Optional[SceneNode]:
        """
        Find a descendant by a slash-separated path relative to this node.

        Args:
            path: e.g. "Body/Arm/Hand"

        Returns:
            Found node or None
        """
        current: Optional[SceneNode] = self
        for part in path.split(PATH_SEPARATOR):
            if not part:
                continue
            current = next((c for c in current.children if c.name == part), None)
            if current is None:
                return None
        return current

    def __str__(self) -> str:
        return self.name


__all__ = ['SceneNode']
