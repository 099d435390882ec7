# Path: deep_match/loaders/scene_loader.py
"""
Scene Loader

Builds scene graphs from YAML or JSON documents. Documents are validated
with Pydantic, then components are instantiated through the schema
registry by class name.

Document format:
    name: Robot
    components:
      - type: Transform
        local_position: [0.0, 1.0, 0.0]
      - type: Rigidbody
        mass: 12.5
    children:
      - name: Arm
        components:
          - type: FixedJoint
            connected_body: {ref: "Robot:Rigidbody"}

A value of the form {ref: "<node path>[:<ComponentType>]"} is a
cross-reference, resolved once the whole tree exists. Node paths start
at the root's name.
"""

import dataclasses
import json
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import COMPONENT_SEPARATOR, PATH_SEPARATOR
from ..core.logger import get_input_logger
from ..scene.components import Component
from ..scene.node import SceneNode
from ..scene.schema import DEFAULT_REGISTRY, SchemaRegistry


class SceneLoadError(Exception):
    """Raised when a scene document cannot be read, validated or built."""


# ==============================================================================
# DOCUMENT MODELS
# ==============================================================================
class ComponentSpec(BaseModel):
    """One component entry; every key besides 'type' is a value."""
    model_config = ConfigDict(extra='allow')

    type: str

    @property
    def values(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class NodeSpec(BaseModel):
    """One node entry with its components and children."""
    model_config = ConfigDict(extra='forbid')

    name: str
    active: bool = True
    components: list[ComponentSpec] = Field(default_factory=list)
    children: list['NodeSpec'] = Field(default_factory=list)


NodeSpec.model_rebuild()


# ==============================================================================
# LOADER
# ==============================================================================
class SceneLoader:
    """
    Loads scene graphs from YAML/JSON files.

    Example:
        loader = SceneLoader()
        scene = loader.load_file(Path('scenes/robot.yaml'))
        print(scene.path, len(scene.descendants))
    """

    def __init__(self, registry: Optional[SchemaRegistry] = None):
        """
        Initialize scene loader.

        Args:
            registry: Registry resolving component type names.
                      Defaults to DEFAULT_REGISTRY.
        """
        self.logger = get_input_logger('scene_loader')
        self.registry = registry or DEFAULT_REGISTRY

    def load_file(self, file_path: Path) -> SceneNode:
        """
        Load a scene from a YAML or JSON file.

        Files ending in .json are parsed as JSON, anything else as YAML.

        Args:
            file_path: Path to the scene document

        Returns:
            Root SceneNode

        Raises:
            SceneLoadError: If the file is missing, malformed or invalid
        """
        file_path = Path(file_path)
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                if file_path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except OSError as e:
            raise SceneLoadError(f"Cannot read scene {file_path}: {e}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise SceneLoadError(f"Parse error in {file_path}: {e}") from e

        if data is None:
            raise SceneLoadError(f"Empty scene file: {file_path}")

        root = self.parse(data, source=str(file_path))
        self.logger.info(
            f"Loaded scene '{root.name}' from {file_path} "
            f"({len(root.descendants) + 1} nodes)"
        )
        return root

    def parse(self, data: Any, source: str = '<memory>') -> SceneNode:
        """
        Build a scene from already-parsed document data.

        Args:
            data: Mapping in the scene document format
            source: Origin used in error messages

        Returns:
            Root SceneNode

        Raises:
            SceneLoadError: If validation or construction fails
        """
        try:
            spec = NodeSpec.model_validate(data)
        except ValidationError as e:
            raise SceneLoadError(f"Invalid scene {source}: {e}") from e

        pending_refs: list[tuple[Component, str, str]] = []
        root = self._build_node(spec, pending_refs, source)

        for component, attribute, ref in pending_refs:
            setattr(component, attribute, self._resolve_ref(root, ref, source))

        return root

    def _build_node(
        self,
        spec: NodeSpec,
        pending_refs: list[tuple[Component, str, str]],
        source: str
    ) -> SceneNode:
        node = SceneNode(name=spec.name, active=spec.active)

        for component_spec in spec.components:
            node.add_component(self._build_component(component_spec, pending_refs, source))

        for child_spec in spec.children:
            node.add_child(self._build_node(child_spec, pending_refs, source))

        return node

    def _build_component(
        self,
        spec: ComponentSpec,
        pending_refs: list[tuple[Component, str, str]],
        source: str
    ) -> Component:
        component_type = self.registry.get_type(spec.type)
        if component_type is None or not issubclass(component_type, Component):
            raise SceneLoadError(f"Unknown component type '{spec.type}' in {source}")

        declared = {f.name: f for f in dataclasses.fields(component_type) if f.init}
        values: dict[str, Any] = {}
        refs: dict[str, str] = {}

        for key, value in spec.values.items():
            if key not in declared or key == 'owner':
                raise SceneLoadError(f"{spec.type} has no value '{key}' ({source})")
            if isinstance(value, dict) and set(value) == {'ref'}:
                refs[key] = str(value['ref'])
            else:
                values[key] = _coerce(declared[key], value)

        try:
            component = component_type(**values)
        except (TypeError, ValueError) as e:
            raise SceneLoadError(f"Cannot build {spec.type} in {source}: {e}") from e

        for key, ref in refs.items():
            pending_refs.append((component, key, ref))
        return component

    def _resolve_ref(self, root: SceneNode, ref: str, source: str) -> Any:
        """Resolve "<path>" to a node or "<path>:<Type>" to a component."""
        path, _, type_name = ref.partition(COMPONENT_SEPARATOR)
        parts = [part for part in path.split(PATH_SEPARATOR) if part]

        if not parts or parts[0] != root.name:
            raise SceneLoadError(f"Reference '{ref}' does not start at root '{root.name}' ({source})")

        node = root.find_by_path(PATH_SEPARATOR.join(parts[1:]))
        if node is None:
            raise SceneLoadError(f"Unresolved reference '{ref}' in {source}")
        if not type_name:
            return node

        component_type = self.registry.get_type(type_name)
        component = node.get_component(component_type) if component_type is not None else None
        if component is None:
            raise SceneLoadError(f"Node '{node.path}' has no {type_name} for reference '{ref}' ({source})")
        return component


def _coerce(declared: dataclasses.Field, value: Any) -> Any:
    """Convert document values to the shape of the field default (lists to vectors, ints to floats)."""
    default = declared.default
    if isinstance(default, tuple) and isinstance(value, list):
        return tuple(_coerce_scalar(item) for item in value)
    if isinstance(default, float):
        return _coerce_scalar(value)
    return value


def _coerce_scalar(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


__all__ = [
    'SceneLoader',
    'SceneLoadError',
    'NodeSpec',
    'ComponentSpec',
]
