# Path: deep_match/config_loader.py
"""
Configuration Loader for deep_match

Loads configuration from a .env file for the structural comparison engine.
Singleton pattern ensures consistent configuration across all components.

Every key is optional. Unset keys fall back to the defaults in constants.py.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_ADD_LIMIT,
    DEFAULT_FLOAT_TOLERANCE,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MATCH_STRATEGY,
    DEFAULT_MIN_TIER,
    ENV_PREFIX,
)


class ConfigLoader:
    """
    Singleton configuration loader for deep_match.

    Loads configuration from environment variables with type
    conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        limit = config.get('add_limit')  # Returns int
        policy = config.get('policy_path')  # Returns Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        from the current working directory on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT
            # ================================================================
            'environment': self._get_env(f'{ENV_PREFIX}ENVIRONMENT', 'development'),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_level': self._get_env(f'{ENV_PREFIX}LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_dir': self._get_path(f'{ENV_PREFIX}LOG_DIR'),
            'log_console': self._get_bool(f'{ENV_PREFIX}LOG_CONSOLE', True),

            # ================================================================
            # COMPARISON CONFIGURATION
            # ================================================================
            'verbose': self._get_bool(f'{ENV_PREFIX}VERBOSE', False),
            'add_limit': self._get_int(f'{ENV_PREFIX}ADD_LIMIT', DEFAULT_ADD_LIMIT),
            'float_tolerance': self._get_float(
                f'{ENV_PREFIX}FLOAT_TOLERANCE', DEFAULT_FLOAT_TOLERANCE
            ),
            'max_depth': self._get_int(f'{ENV_PREFIX}MAX_DEPTH', DEFAULT_MAX_DEPTH),
            'match_strategy': self._get_env(
                f'{ENV_PREFIX}MATCH_STRATEGY', DEFAULT_MATCH_STRATEGY
            ),
            'min_tier': self._get_env(f'{ENV_PREFIX}MIN_TIER', DEFAULT_MIN_TIER),
            'policy_path': self._get_path(f'{ENV_PREFIX}POLICY_PATH'),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if value is None:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"match_strategy={self._config.get('match_strategy')})"
        )


__all__ = ['ConfigLoader']
