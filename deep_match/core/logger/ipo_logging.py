# Path: deep_match/core/logger/ipo_logging.py
"""
IPO-Aware Logging for deep_match

Loggers are named after the layer they belong to:
- input.*    scene and policy loaders, CLI
- process.*  scrambled and ordered matchers, equality engine, match report
- output.*   report formatters

With a log directory configured, each layer also gets its own file
next to a combined full_activity.log.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LAYERS = ('input', 'process', 'output')


class IPOFilter(logging.Filter):
    """Pass only records whose logger name starts with a layer prefix."""

    def __init__(self, layer: str):
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Configure the root logger for a comparison run.

    Existing root handlers are replaced. File handlers record
    everything down to DEBUG; the console handler (stderr, so stdout
    stays reserved for the report) follows log_level.

    Args:
        log_dir: Directory for <layer>_activity.log files, None for console only
        log_level: Root and console level name, e.g. 'WARNING'
        console_output: Attach the stderr handler
    """
    level = getattr(logging, log_level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer in LAYERS:
            layer_handler = logging.FileHandler(log_dir / f'{layer}_activity.log')
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(layer_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s - %(message)s'))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """Logger for loaders and the CLI, e.g. get_input_logger('scene_loader')."""
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Logger for the comparison engine.

    Mismatch logging in verbose mode goes through
    get_process_logger('matcher.equality') unless CompareOptions
    carries its own logger.
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Logger for report formatters."""
    return logging.getLogger(f'output.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
