"""Command line interface for running the examples."""
import argparse
import logging
import sys
from typing import List, Optional

from solid_principles import create_runner
from solid_principles.config.settings import get_config
from solid_principles.domain.entities.example import CORRECTED, VIOLATION
from solid_principles.infrastructure.monitoring import render_metrics


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="solid-examples",
        description="Run the SOLID principle examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Run every example
  %(prog)s ocp lsp              # Run two examples
  %(prog)s isp --violation      # Run the version that breaks the principle
  %(prog)s --list               # List available examples
        """
    )
    parser.add_argument('examples', nargs='*', metavar='EXAMPLE',
                        help='Example names or aliases (default: all)')
    variant = parser.add_mutually_exclusive_group()
    variant.add_argument('--violation', dest='variant', action='store_const', const=VIOLATION,
                         help='Run the design that violates the principle')
    variant.add_argument('--corrected', dest='variant', action='store_const', const=CORRECTED,
                         help='Run the design that follows the principle')
    parser.add_argument('--list', action='store_true', help='List available examples and exit')
    parser.add_argument('--metrics', action='store_true',
                        help='Write run metrics to stderr in Prometheus text format')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_config()
    runner = create_runner(config)

    if args.list:
        for example in runner.registry.list_examples():
            print(f"{example.name}: {example.summary}")
        return 0

    variant = args.variant or (VIOLATION if config.SHOW_VIOLATIONS else CORRECTED)

    try:
        if len(args.examples) == 1:
            runner.run(args.examples[0], variant)
        else:
            runner.run_all(variant, names=args.examples or None)
    except ValueError as e:
        logger.error(f"Failed to run examples: {e}")
        parser.error(str(e))

    if args.metrics:
        sys.stderr.write(render_metrics())

    return 0


if __name__ == "__main__":
    sys.exit(main())
