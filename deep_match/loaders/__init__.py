# Path: deep_match/loaders/__init__.py
"""
deep_match Loaders

INPUT layer: builds scene graphs from documents on disk.
"""

from .scene_loader import SceneLoader, SceneLoadError, NodeSpec, ComponentSpec

__all__ = [
    'SceneLoader',
    'SceneLoadError',
    'NodeSpec',
    'ComponentSpec',
]
