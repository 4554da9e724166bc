"""CLI entry point for NeuroNotes."""

import argparse
import sys
from typing import NoReturn, Sequence

from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="neuronotes",
        description="NeuroNotes - local note store bootstrap and schema migrations",
    )
    parser.add_argument("-v", "--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument(
        "--dev",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the development (or, with --no-dev, production) database; "
        "overrides NEURONOTES_DEV",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("migrate", help="Apply pending schema migrations")
    subparsers.add_parser("status", help="Show database status")
    subparsers.add_parser("migrations", help="List registered migrations")

    return parser


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    config = Config.from_env()
    if args.dev is not None:
        config.dev = args.dev

    try:
        if args.command == "migrate":
            commands.handle_migrate(args, config)
        elif args.command == "status":
            commands.handle_status(args, config)
        elif args.command == "migrations":
            commands.handle_migrations(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
