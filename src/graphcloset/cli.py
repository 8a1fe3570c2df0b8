#!/usr/bin/env python3
"""Point plotting CLI."""

import argparse
import sys
from pathlib import Path

import yaml

from .config import DEFAULT_INPUT, PlotConfig
from .formatting import FORMATTERS
from .plotting import plot


def main() -> int:
    """Parse a point list and print its plot."""
    parser = argparse.ArgumentParser(
        description="Plot a list of (x,y) points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Plot the default points
  %(prog)s -i "(1,2) (3,4)"                 # Plot given points
  %(prog)s -i "(1,2)x" --strict             # Reject text around a point
  %(prog)s -i "(1,2)" --format json         # Machine-readable output
  %(prog)s -c plot.yml                      # Read settings from YAML
  %(prog)s -c plot.yml --no-strict          # Turn off strict set in YAML
        """,
    )

    parser.add_argument(
        "-i",
        "--input",
        metavar="POINTS",
        help=f'A space-delineated list of (x,y) pairs to plot (default: "{DEFAULT_INPUT}")',
    )
    parser.add_argument(
        "-c", "--config", type=Path, metavar="PATH", help="Path to YAML config with defaults"
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        help="Require each token to be exactly one point (default: off)",
    )
    parser.add_argument(
        "--format",
        choices=sorted(FORMATTERS),
        help="Output format (default: debug)",
    )

    args = parser.parse_args()

    # Load config
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            config = PlotConfig.from_yaml(args.config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Error: Invalid config file {args.config}: {e}", file=sys.stderr)
            return 1
    else:
        config = PlotConfig()

    # Command line flags win over config values
    config.override(input=args.input, strict=args.strict, format=args.format)

    # Parse failures are part of the printed output, never an exit code
    print(f"Plotting: {config.input}")
    print(plot(config.input, strict=config.strict, output_format=config.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
