#!/usr/bin/env python3
# Path: deep_match/main.py
"""
deep_match - Main Entry Point

Compares two scene documents structurally and reports the differences.

Data Flow:
    INPUT:   scene documents (YAML/JSON), optional comparison policy
    PROCESS: value_equals with a MatchReport attached
    OUTPUT:  text or JSON summary on stdout

Usage:
    deep-match compare a.yaml b.yaml                 # Text summary
    deep-match compare a.yaml b.yaml --format json   # JSON summary
    deep-match compare a.yaml b.yaml --policy p.yaml # Custom policy
    deep-match types                                 # List component types

Exit codes:
    0  scenes are equal
    1  scenes differ
    2  a document or policy could not be loaded
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config_loader import ConfigLoader
from .core.logger import setup_ipo_logging, get_input_logger
from .loaders import SceneLoader, SceneLoadError
from .matcher import (
    ComparisonPolicy,
    MatchReport,
    MatchTier,
    PolicyLoader,
    PolicyLoadError,
    value_equals,
)
from .output import ReportFormatter
from .scene.schema import DEFAULT_REGISTRY
from .constants import (
    EXIT_DIFFERENT,
    EXIT_EQUAL,
    EXIT_LOAD_ERROR,
    MENU_HEADER,
    MENU_SEPARATOR,
    STATUS_FAIL,
    STATUS_INFO,
    STATUS_OK,
)


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  DEEP_MATCH - Structural Scene Comparison")
    print(MENU_HEADER)
    print()


def initialize_system(quiet: bool = False) -> ConfigLoader:
    """
    Load configuration and set up logging.

    Args:
        quiet: Suppress console logging below ERROR

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level='ERROR' if quiet else config.get('log_level', 'WARNING'),
        console_output=config.get('log_console', True),
    )

    return config


def load_policy(policy_path: Optional[Path], config: ConfigLoader) -> ComparisonPolicy:
    """
    Load the policy given on the command line, else the configured one.

    Raises:
        PolicyLoadError: If the policy file is invalid
    """
    loader = PolicyLoader()
    if policy_path is not None:
        return loader.load_file(policy_path)
    if config.get('policy_path') is not None:
        return loader.load_configured(config)

    # No policy file: take the comparison settings from .env
    return ComparisonPolicy.from_config(config)


def run_compare(args: argparse.Namespace, config: ConfigLoader) -> int:
    """
    Compare two scene documents.

    Returns:
        EXIT_EQUAL, EXIT_DIFFERENT or EXIT_LOAD_ERROR
    """
    logger = get_input_logger('main')

    try:
        policy = load_policy(args.policy, config)
        loader = SceneLoader()
        scene_a = loader.load_file(args.scene_a)
        scene_b = loader.load_file(args.scene_b)
    except (PolicyLoadError, SceneLoadError) as e:
        logger.error(str(e))
        print(f"{STATUS_FAIL} {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    options = policy.to_options()
    if args.lenient:
        options.min_tier = MatchTier.NAMES_EQUAL
    if args.verbose:
        options.verbose = True

    report = policy.apply_to(MatchReport())
    equal = value_equals(scene_a, scene_b, report=report, options=options)
    logger.info(f"Compared {args.scene_a} with {args.scene_b}: equal={equal}")

    formatter = ReportFormatter()
    if args.format == 'json':
        print(formatter.render(report, equal, 'json', str(args.scene_a), str(args.scene_b)))
    elif not args.quiet:
        summary = formatter.summarize(report, equal, str(args.scene_a), str(args.scene_b))
        print(formatter.to_console(summary))
    else:
        status = STATUS_OK if equal else STATUS_FAIL
        print(f"{status} {args.scene_a} vs {args.scene_b}")

    return EXIT_EQUAL if equal else EXIT_DIFFERENT


def list_types() -> int:
    """Print every registered component type and its compared values."""
    print(f"{STATUS_INFO} Registered comparable types:")
    print(MENU_SEPARATOR)
    for cls in sorted(DEFAULT_REGISTRY.registered_types(), key=lambda c: c.__name__):
        fields = [d.name for d in DEFAULT_REGISTRY.comparable_fields(cls)]
        properties = [d.name for d in DEFAULT_REGISTRY.comparable_properties(cls)]
        print(f"  {cls.__name__}")
        print(f"      fields:     {', '.join(fields) or '-'}")
        print(f"      properties: {', '.join(properties) or '-'}")
    return EXIT_EQUAL


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='deep-match',
        description='deep_match - Structural scene comparison',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  deep-match compare a.yaml b.yaml
  deep-match compare a.yaml b.yaml --format json --policy physics.yaml
  deep-match types
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    compare = subparsers.add_parser('compare', help='Compare two scene documents')
    compare.add_argument('scene_a', type=Path, help='First scene document')
    compare.add_argument('scene_b', type=Path, help='Second scene document')
    compare.add_argument(
        '--policy', '-p',
        type=Path,
        default=None,
        help='Comparison policy YAML (defaults to DEEP_MATCH_POLICY_PATH)'
    )
    compare.add_argument(
        '--format', '-f',
        choices=['text', 'json'],
        default='text',
        help='Output format'
    )
    compare.add_argument(
        '--lenient',
        action='store_true',
        help='Accept name-only correspondences as equal'
    )
    compare.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log every mismatch'
    )
    compare.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Print only the verdict'
    )

    subparsers.add_parser('types', help='List registered component types')

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for deep_match.

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    quiet = getattr(args, 'quiet', False) or getattr(args, 'format', 'text') == 'json'

    try:
        config = initialize_system(quiet=quiet)

        if args.command == 'types':
            return list_types()

        if not quiet:
            print_banner()
        return run_compare(args, config)

    except ValueError as e:
        print(f"\n{STATUS_FAIL} Error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
