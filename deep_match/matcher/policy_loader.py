# Path: deep_match/matcher/policy_loader.py
"""
Policy Loader

Loads comparison policies from YAML files and validates them against
the ComparisonPolicy model.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..core.logger import get_input_logger
from ..scene.schema import DEFAULT_REGISTRY, SchemaRegistry
from .models.comparison_policy import ComparisonPolicy


class PolicyLoadError(Exception):
    """Raised when a policy file cannot be read or is invalid."""


class PolicyLoader:
    """
    Loads comparison policies from YAML files.

    Example:
        loader = PolicyLoader()
        policy = loader.load_file(Path('policies/physics_only.yaml'))
        options = policy.to_options()

        # Fall back to DEEP_MATCH_POLICY_PATH, or defaults
        policy = loader.load_configured()
    """

    def __init__(self, registry: Optional[SchemaRegistry] = None):
        """
        Initialize policy loader.

        Args:
            registry: Registry resolving component type names.
                      Defaults to DEFAULT_REGISTRY.
        """
        self.logger = get_input_logger('policy_loader')
        self.registry = registry or DEFAULT_REGISTRY

    def load_file(self, file_path: Path) -> ComparisonPolicy:
        """
        Load a single policy from a YAML file.

        An empty file yields the default policy.

        Args:
            file_path: Path to YAML file

        Returns:
            Validated ComparisonPolicy

        Raises:
            PolicyLoadError: If the file is missing, malformed or invalid
        """
        file_path = Path(file_path)
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise PolicyLoadError(f"Cannot read policy {file_path}: {e}") from e
        except yaml.YAMLError as e:
            raise PolicyLoadError(f"YAML parse error in {file_path}: {e}") from e

        if data is None:
            self.logger.warning(f"Empty policy file: {file_path}, using defaults")
            return ComparisonPolicy()

        policy = self.parse(data, source=str(file_path))
        self.logger.info(f"Loaded comparison policy from {file_path}")
        return policy

    def parse(self, data: dict, source: str = '<memory>') -> ComparisonPolicy:
        """
        Validate raw policy data.

        Args:
            data: Parsed YAML mapping
            source: Origin used in error messages

        Returns:
            Validated ComparisonPolicy

        Raises:
            PolicyLoadError: If validation fails
        """
        if not isinstance(data, dict):
            raise PolicyLoadError(f"Policy {source} must be a mapping, got {type(data).__name__}")
        try:
            policy = ComparisonPolicy.model_validate(data)
        except ValidationError as e:
            raise PolicyLoadError(f"Invalid policy {source}: {e}") from e

        # Type names must resolve before the policy reaches a comparison
        try:
            policy.resolve_types(policy.ignore_components, self.registry)
            policy.exclusion_policy(self.registry)
        except ValueError as e:
            raise PolicyLoadError(f"Invalid policy {source}: {e}") from e
        return policy

    def load_configured(self, config=None) -> ComparisonPolicy:
        """
        Load the policy named by DEEP_MATCH_POLICY_PATH.

        Args:
            config: ConfigLoader instance (defaults to the singleton)

        Returns:
            The configured policy, or the default policy when unset
        """
        if config is None:
            from ..config_loader import ConfigLoader
            config = ConfigLoader()

        policy_path: Optional[Path] = config.get('policy_path')
        if policy_path is None:
            return ComparisonPolicy()
        return self.load_file(policy_path)


__all__ = ['PolicyLoader', 'PolicyLoadError']
