# Path: tests/unit/test_matcher/test_policy_loader.py
"""
Unit Tests for ComparisonPolicy and PolicyLoader

Tests policy documents including:
- Validation of fields and type names
- Conversion to CompareOptions
- Application to a MatchReport
- YAML file loading and error wrapping
"""

from unittest.mock import MagicMock

import pytest

from deep_match.matcher import (
    ComparisonPolicy,
    MatchReport,
    MatchStrategy,
    MatchTier,
    PolicyLoader,
    PolicyLoadError,
)
from deep_match.scene import Light, Rigidbody


class TestComparisonPolicy:
    """Test the policy model."""

    def test_defaults(self):
        """An empty policy is strict, greedy and unlimited."""
        policy = ComparisonPolicy()

        assert policy.add_limit == 0
        assert policy.strategy == MatchStrategy.GREEDY
        assert policy.min_tier == MatchTier.VALUE_EQUAL
        assert policy.ignore_components == []

    def test_tier_and_strategy_names(self):
        """Tier and strategy accept case-insensitive names."""
        policy = ComparisonPolicy(min_tier='Names_Equal', strategy='OPTIMAL')

        assert policy.min_tier == MatchTier.NAMES_EQUAL
        assert policy.strategy == MatchStrategy.OPTIMAL

    def test_rejects_unknown_keys(self):
        """Unknown policy keys are rejected."""
        with pytest.raises(ValueError):
            ComparisonPolicy.model_validate({'tolerance': 0.1})

    def test_rejects_negative_limit(self):
        """add_limit cannot be negative."""
        with pytest.raises(ValueError):
            ComparisonPolicy(add_limit=-1)

    def test_rejects_unknown_tier(self):
        """Unknown tier names fail validation."""
        with pytest.raises(ValueError):
            ComparisonPolicy(min_tier='roughly_equal')

    def test_to_options(self):
        """Type names resolve into CompareOptions."""
        policy = ComparisonPolicy(
            ignore_components=['Light'],
            exclusions={'Rigidbody': ['drag']},
            float_tolerance=0.0,
            verbose=True,
        )

        options = policy.to_options()

        assert options.ignore_components == (Light,)
        assert 'drag' in options.exclusions.excluded_for(Rigidbody)
        assert options.float_tolerance is None
        assert options.verbose is True

    def test_unknown_type_name(self):
        """Unknown component names raise ValueError on resolution."""
        policy = ComparisonPolicy(ignore_components=['Hologram'])
        with pytest.raises(ValueError, match='Hologram'):
            policy.to_options()

    def test_apply_to_report(self):
        """The policy configures a report's limit and ignored types."""
        report = ComparisonPolicy(add_limit=10, ignore_components=['Light']).apply_to(MatchReport())

        assert report.add_limit == 10
        assert report.should_ignore(Light())
        assert not report.should_ignore(Rigidbody())


class TestPolicyLoader:
    """Test loading policies from YAML."""

    def test_load_file(self, temp_dir):
        """A valid YAML document loads into a policy."""
        path = temp_dir / 'policy.yaml'
        path.write_text(
            "add_limit: 500\n"
            "strategy: optimal\n"
            "min_tier: names_equal\n"
            "ignore_components: [Light]\n"
            "exclusions:\n"
            "  Rigidbody: [drag, angular_drag]\n",
            encoding='utf-8',
        )

        policy = PolicyLoader().load_file(path)

        assert policy.add_limit == 500
        assert policy.strategy == MatchStrategy.OPTIMAL
        assert policy.exclusions == {'Rigidbody': ['drag', 'angular_drag']}

    def test_fixture_policy(self, fixtures_dir):
        """The bundled sample policy is valid."""
        policy = PolicyLoader().load_file(fixtures_dir / 'policy.yaml')
        assert 'Light' in policy.ignore_components

    def test_empty_file_gives_defaults(self, temp_dir):
        """An empty document yields the default policy."""
        path = temp_dir / 'empty.yaml'
        path.write_text('', encoding='utf-8')

        assert PolicyLoader().load_file(path) == ComparisonPolicy()

    def test_missing_file(self, temp_dir):
        """A missing file raises PolicyLoadError."""
        with pytest.raises(PolicyLoadError, match='Cannot read policy'):
            PolicyLoader().load_file(temp_dir / 'absent.yaml')

    def test_malformed_yaml(self, temp_dir):
        """YAML syntax errors raise PolicyLoadError."""
        path = temp_dir / 'bad.yaml'
        path.write_text('add_limit: [1, 2\n', encoding='utf-8')

        with pytest.raises(PolicyLoadError, match='YAML parse error'):
            PolicyLoader().load_file(path)

    def test_non_mapping(self):
        """A document that is not a mapping is rejected."""
        with pytest.raises(PolicyLoadError, match='must be a mapping'):
            PolicyLoader().parse(['Light'])

    def test_invalid_values(self):
        """Validation errors are wrapped."""
        with pytest.raises(PolicyLoadError, match='Invalid policy'):
            PolicyLoader().parse({'max_depth': 0})

    def test_unknown_types_are_caught_at_load(self):
        """Unknown type names fail when the policy is loaded."""
        with pytest.raises(PolicyLoadError, match='Hologram'):
            PolicyLoader().parse({'exclusions': {'Hologram': ['glow']}})


class TestLoadConfigured:
    """Test loading the configured policy."""

    def test_unset_path_gives_defaults(self):
        """No configured path means the default policy."""
        config = MagicMock()
        config.get.return_value = None

        assert PolicyLoader().load_configured(config) == ComparisonPolicy()

    def test_configured_path(self, fixtures_dir):
        """A configured path is loaded."""
        config = MagicMock()
        config.get.return_value = fixtures_dir / 'policy.yaml'

        policy = PolicyLoader().load_configured(config)

        config.get.assert_called_with('policy_path')
        assert 'Light' in policy.ignore_components
