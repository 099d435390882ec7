# Path: tests/unit/test_config_loader.py
"""
Unit Tests for ConfigLoader

Tests the configuration loading functionality including:
- Environment variable parsing
- Type conversion methods
- Singleton pattern
- Default value handling
- Comparison policies built from configuration
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from deep_match.config_loader import ConfigLoader
from deep_match.constants import DEFAULT_FLOAT_TOLERANCE, DEFAULT_MAX_DEPTH
from deep_match.matcher import ComparisonPolicy, MatchStrategy, MatchTier


class TestConfigLoaderBasics:
    """Test basic ConfigLoader functionality."""

    def test_singleton_pattern(self, mock_env_vars, reset_singletons):
        """ConfigLoader should return same instance."""
        config1 = ConfigLoader()
        config2 = ConfigLoader()

        assert config1 is config2

    def test_get_returns_value(self, mock_env_vars, reset_singletons):
        """get() should return configured value."""
        config = ConfigLoader()
        assert config.get('environment') == 'test'

    def test_get_returns_default_for_missing(self, mock_env_vars, reset_singletons):
        """get() should return default for missing keys."""
        config = ConfigLoader()
        assert config.get('nonexistent_key', 'default_value') == 'default_value'
        assert config.get('nonexistent_key') is None

    def test_repr_shows_strategy(self, mock_env_vars, reset_singletons):
        """repr includes environment and strategy."""
        assert 'optimal' in repr(ConfigLoader())


class TestConfigLoaderTypeConversion:
    """Test type conversion methods."""

    def test_get_int_converts_string(self, mock_env_vars, reset_singletons):
        """Integer values should be converted from string."""
        config = ConfigLoader()
        assert config.get('add_limit') == 250
        assert config.get('max_depth') == 64

    def test_get_float_converts_string(self, mock_env_vars, reset_singletons):
        """Float values should be converted from string."""
        tolerance = ConfigLoader().get('float_tolerance')

        assert isinstance(tolerance, float)
        assert tolerance == 0.001

    def test_get_bool_converts_false(self, mock_env_vars, reset_singletons):
        """Boolean 'false' should be converted."""
        config = ConfigLoader()
        assert config.get('verbose') is False
        assert config.get('log_console') is False

    def test_get_bool_converts_true(self, reset_singletons):
        """Boolean 'yes' and '1' count as true."""
        env_vars = {'DEEP_MATCH_VERBOSE': 'yes', 'DEEP_MATCH_LOG_CONSOLE': '1'}

        with patch.dict(os.environ, env_vars, clear=False):
            config = ConfigLoader()
            assert config.get('verbose') is True
            assert config.get('log_console') is True

    def test_invalid_int_falls_back(self, reset_singletons):
        """Unparseable integers use the default."""
        with patch.dict(os.environ, {'DEEP_MATCH_MAX_DEPTH': 'deep'}, clear=False):
            assert ConfigLoader().get('max_depth') == DEFAULT_MAX_DEPTH

    def test_get_path_returns_path_object(self, reset_singletons):
        """Path values should be converted to Path objects."""
        with patch.dict(os.environ, {'DEEP_MATCH_POLICY_PATH': 'policies/strict.yaml'}, clear=False):
            path = ConfigLoader().get('policy_path')

        assert isinstance(path, Path)
        assert path.name == 'strict.yaml'

    def test_get_path_expands_variables(self, reset_singletons):
        """${VAR} references in paths are expanded."""
        env_vars = {'DM_BASE': '/data', 'DEEP_MATCH_LOG_DIR': '${DM_BASE}/logs'}
        with patch.dict(os.environ, env_vars, clear=False):
            assert ConfigLoader().get('log_dir') == Path('/data/logs')

    def test_required_path_missing_raises(self, clean_env, reset_singletons):
        """A required path that is unset raises ValueError."""
        config = ConfigLoader()
        with pytest.raises(ValueError, match='Required path'):
            config._get_path('DEEP_MATCH_NOT_SET', required=True)


class TestConfigLoaderDefaults:
    """Test defaults when nothing is configured."""

    def test_defaults(self, clean_env, reset_singletons, temp_dir, monkeypatch):
        """Every key has a usable default."""
        monkeypatch.chdir(temp_dir)
        config = ConfigLoader()

        assert config.get('environment') == 'development'
        assert config.get('add_limit') == 0
        assert config.get('float_tolerance') == DEFAULT_FLOAT_TOLERANCE
        assert config.get('match_strategy') == 'greedy'
        assert config.get('min_tier') == 'value_equal'
        assert config.get('policy_path') is None
        assert config.get('log_console') is True

    def test_dotenv_file_is_loaded(self, clean_env, reset_singletons, temp_dir, monkeypatch):
        """A .env file in the working directory is read on first use."""
        (temp_dir / '.env').write_text('DEEP_MATCH_ADD_LIMIT=42\n', encoding='utf-8')
        monkeypatch.chdir(temp_dir)

        assert ConfigLoader().get('add_limit') == 42


class TestPolicyFromConfig:
    """Test ComparisonPolicy.from_config."""

    def test_policy_follows_configuration(self, mock_env_vars, reset_singletons):
        """Limit, strategy, tier, tolerance and depth come from the environment."""
        policy = ComparisonPolicy.from_config(ConfigLoader())
        options = policy.to_options()

        assert policy.add_limit == 250
        assert options.strategy == MatchStrategy.OPTIMAL
        assert options.min_tier == MatchTier.NAMES_EQUAL
        assert options.float_tolerance == 0.001
        assert options.max_depth == 64
        assert options.verbose is False

    def test_zero_tolerance_means_exact(self, clean_env, reset_singletons):
        """A zero tolerance disables float tolerance."""
        with patch.dict(os.environ, {'DEEP_MATCH_FLOAT_TOLERANCE': '0'}, clear=False):
            options = ComparisonPolicy.from_config().to_options()

        assert options.float_tolerance is None

    def test_unknown_tier_raises(self, clean_env, reset_singletons):
        """An unknown tier name is a configuration error."""
        with patch.dict(os.environ, {'DEEP_MATCH_MIN_TIER': 'similar'}, clear=False):
            with pytest.raises(ValueError, match='Unknown match tier'):
                ComparisonPolicy.from_config()
