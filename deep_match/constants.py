# Path: deep_match/constants.py
"""
System-Wide Constants for deep_match

Central repository for default values and display strings used
across the comparison engine, loaders and CLI.
"""

from typing import Final


# ==============================================================================
# CONFIGURATION
# ==============================================================================
ENV_PREFIX: Final[str] = 'DEEP_MATCH_'

DEFAULT_LOG_LEVEL: Final[str] = 'WARNING'
DEFAULT_ADD_LIMIT: Final[int] = 0
"""Maximum number of matches a report records (0 = unlimited)."""

DEFAULT_FLOAT_TOLERANCE: Final[float] = 1e-5
"""Absolute tolerance for float leaf values, mirroring engine vector equality."""

DEFAULT_MAX_DEPTH: Final[int] = 256
"""Maximum recursion depth of a single comparison."""

DEFAULT_MATCH_STRATEGY: Final[str] = 'greedy'
DEFAULT_MIN_TIER: Final[str] = 'value_equal'


# ==============================================================================
# NOTE RENDERING
# ==============================================================================
NOTE_SEPARATOR: Final[str] = ' != '
MISSING_VALUE_TEXT: Final[str] = '<missing>'
UNAVAILABLE_VALUE_TEXT: Final[str] = '<unavailable>'
PATH_SEPARATOR: Final[str] = '/'
COMPONENT_SEPARATOR: Final[str] = ':'


# ==============================================================================
# CLI STATUS CODES
# ==============================================================================
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_INFO: Final[str] = '[INFO]'
STATUS_WARN: Final[str] = '[WARN]'

EXIT_EQUAL: Final[int] = 0
EXIT_DIFFERENT: Final[int] = 1
EXIT_LOAD_ERROR: Final[int] = 2

MENU_HEADER: Final[str] = '=' * 70
MENU_SEPARATOR: Final[str] = '-' * 70


__all__ = [
    'ENV_PREFIX',
    'DEFAULT_LOG_LEVEL',
    'DEFAULT_ADD_LIMIT',
    'DEFAULT_FLOAT_TOLERANCE',
    'DEFAULT_MAX_DEPTH',
    'DEFAULT_MATCH_STRATEGY',
    'DEFAULT_MIN_TIER',
    'NOTE_SEPARATOR',
    'MISSING_VALUE_TEXT',
    'UNAVAILABLE_VALUE_TEXT',
    'PATH_SEPARATOR',
    'COMPONENT_SEPARATOR',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_INFO',
    'STATUS_WARN',
    'EXIT_EQUAL',
    'EXIT_DIFFERENT',
    'EXIT_LOAD_ERROR',
    'MENU_HEADER',
    'MENU_SEPARATOR',
]
