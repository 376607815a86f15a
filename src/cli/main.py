"""Main CLI entry point for pod-splitter."""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.commands.check import check_command
from src.cli.commands.pieces import pieces_command
from src.cli.commands.strip import strip_command
from src.cli.config import Config
from src.utils.logging_config import setup_logging


def _add_common_arguments(subparser: argparse.ArgumentParser):
    subparser.add_argument("--config", help="Path to .env configuration file", default=None)
    subparser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="pod-splitter",
        description="Pod Splitter - separate embedded POD from source text",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Verify that stripping and reinserting POD reproduces each file"
    )
    check_parser.add_argument("paths", nargs="+", help="Files or directories to check")
    _add_common_arguments(check_parser)

    # Strip command
    strip_parser = subparsers.add_parser("strip", help="Print a file with all POD removed")
    strip_parser.add_argument("file", help="Source file")
    _add_common_arguments(strip_parser)

    # Pieces command
    pieces_parser = subparsers.add_parser("pieces", help="Print the pieces of a file as JSON")
    pieces_parser.add_argument("file", help="Source file")
    pieces_parser.add_argument(
        "--pod-only",
        action="store_true",
        help="Only print command and paragraph pieces",
    )
    _add_common_arguments(pieces_parser)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(verbose=getattr(args, "verbose", False))

    # Load configuration
    config = Config(args.config)

    # Execute command
    if args.command == "check":
        return check_command(config=config, paths=args.paths)
    elif args.command == "strip":
        return strip_command(config=config, file_path=args.file)
    elif args.command == "pieces":
        return pieces_command(config=config, file_path=args.file, pod_only=args.pod_only)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
