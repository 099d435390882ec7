# Path: deep_match/core/logger/__init__.py
"""
deep_match Logger Package

IPO-aware logging for the structural comparison engine.

Provides separate log streams for:
- INPUT layer (scene and policy loading)
- PROCESS layer (matching and reporting)
- OUTPUT layer (report rendering)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
