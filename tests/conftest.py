# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for deep_match

Provides scene builders, environment and singleton fixtures used
across all test modules.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

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

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'DEEP_MATCH_ENVIRONMENT': 'test',
        'DEEP_MATCH_LOG_LEVEL': 'DEBUG',
        'DEEP_MATCH_LOG_CONSOLE': 'false',
        'DEEP_MATCH_VERBOSE': 'false',
        'DEEP_MATCH_ADD_LIMIT': '250',
        'DEEP_MATCH_FLOAT_TOLERANCE': '0.001',
        'DEEP_MATCH_MAX_DEPTH': '64',
        'DEEP_MATCH_MATCH_STRATEGY': 'optimal',
        'DEEP_MATCH_MIN_TIER': 'names_equal',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def clean_env():
    """Remove every DEEP_MATCH_ variable for the duration of a test."""
    stripped = {k: v for k, v in os.environ.items() if not k.startswith('DEEP_MATCH_')}
    with patch.dict(os.environ, stripped, clear=True):
        yield


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from deep_match.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# SCENE FIXTURES
# ==============================================================================

def build_robot(arm_mass: float = 2.0, light_first: bool = False) -> SceneNode:
    """
    Build a small robot scene.

    Robot (Transform, Rigidbody)
    +-- Body (Transform, MeshFilter, MeshRenderer, BoxCollider)
    +-- Arm (Transform, Rigidbody, FixedJoint -> Robot:Rigidbody)
    +-- Lamp (Transform, Light)

    Args:
        arm_mass: Mass of the arm's rigidbody
        light_first: Put Lamp before Body and Arm in child order
    """
    robot = SceneNode('Robot')
    robot.add_component(Transform(local_position=(0.0, 1.0, 0.0)))
    base_body = robot.add_component(Rigidbody(mass=10.0))

    body = SceneNode('Body')
    body.add_component(Transform())
    body.add_component(MeshFilter(shared_mesh='body.mesh'))
    body.add_component(MeshRenderer(shared_materials=['steel']))
    body.add_component(BoxCollider(size=(1.0, 2.0, 1.0)))

    arm = SceneNode('Arm')
    arm.add_component(Transform(local_position=(0.5, 1.5, 0.0)))
    arm.add_component(Rigidbody(mass=arm_mass))
    arm.add_component(FixedJoint(connected_body=base_body))

    lamp = SceneNode('Lamp')
    lamp.add_component(Transform(local_position=(0.0, 3.0, 0.0)))
    lamp.add_component(Light(intensity=2.0))

    children = [lamp, body, arm] if light_first else [body, arm, lamp]
    for child in children:
        robot.add_child(child)
    return robot


@pytest.fixture
def scene_factory():
    """Provide the robot scene builder."""
    return build_robot


@pytest.fixture
def robot_scene():
    """A robot scene."""
    return build_robot()


@pytest.fixture
def robot_scene_copy():
    """An independently built copy of the robot scene."""
    return build_robot()


@pytest.fixture
def fixtures_dir():
    """Directory holding sample scene and policy documents."""
    return FIXTURES_DIR
