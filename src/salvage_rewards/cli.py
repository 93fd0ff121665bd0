"""Command-line interface for the salvage reward report.

This module provides the CLI entry point that prints one summary line per
SALV_*.asset file in a folder.
"""

import argparse
import sys
from pathlib import Path

from .core.errors import SalvageDataError
from .log import configure_logging
from .pipeline import SalvageReportPipeline


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the salvage-rewards command."""
    # Import here to avoid circular dependency
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="salvage-rewards",
        description="Print salvage reward values from Unity SALV_*.asset files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the report
  salvage-rewards /path/to/Assets/Data/Salvage

  # Show which files are parsed
  salvage-rewards -vv /path/to/Assets/Data/Salvage
        """,
    )

    parser.add_argument("salvage_data_path", help="Folder which contains salvage data assets")

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="A level of verbosity, and can be used multiple times",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the salvage-rewards command."""
    args = build_parser().parse_args(argv)

    configure_logging(args.verbose)

    try:
        SalvageReportPipeline(Path(args.salvage_data_path)).run()
    except SalvageDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
