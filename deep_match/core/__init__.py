# Path: deep_match/core/__init__.py
"""
deep_match Core Package

Core utilities shared by every layer.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging, get_process_logger

__all__ = [
    'setup_ipo_logging',
    'get_process_logger',
]
