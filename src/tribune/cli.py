"""
Command-line interface for the application.

With no command, fetches today's edition and prints it.
"""

from __future__ import annotations

import argparse
import sys

from tribune import __version__
from tribune.config import get_settings
from tribune.errors import EditionError
from tribune.flows.build import publish_edition


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tribune",
        description="Fetch weather, markets, headlines and reddit and print a morning paper",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("print", help="Fetch today's edition and print it (default)")
    subparsers.add_parser("preview", help="Fetch today's edition and write it to stdout")
    subparsers.add_parser("info", help="Show configuration")

    return parser


def _key_state(value: str | None) -> str:
    return "set" if value else "unset"


def cmd_print(args: argparse.Namespace) -> int:
    """Handle the 'print' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings!r}")

    try:
        publish_edition(settings)
    except EditionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    """Handle the 'preview' command: build the report without printing."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings!r}")

    try:
        report = publish_edition(settings, dry_run=True)
    except EditionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Title: {settings.title}")
    print(f"Version: {__version__}")
    print(f"Location: ({settings.latitude}, {settings.longitude}) {settings.timezone}")
    print(f"Stocks: {', '.join(settings.stocks)} (API key {_key_state(settings.stocks_api_key)})")
    print(f"News: API key {_key_state(settings.news_api_key)}")
    print(f"Subreddits: {', '.join(settings.subreddits)}")
    print(f"Printer: {settings.print_command} -d {settings.printer_name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    commands = {
        None: cmd_print,
        "print": cmd_print,
        "preview": cmd_preview,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
