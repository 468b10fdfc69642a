"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pydantic

from weather_archive import __version__
from weather_archive.config import get_settings
from weather_archive.errors import WeatherArchiveError
from weather_archive.flows.archive import archive_weather
from weather_archive.store import read_snapshot, read_snapshot_meta

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_MISSING_OUTPUTS = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-archive",
        description="Download, plot and snapshot historical hourly weather from Open-Meteo",
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
        help="Enable debug mode (prints a preview of the API payload)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command - fetch, plot and snapshot
    run_parser = subparsers.add_parser("run", help="Fetch data, render plots, save snapshot")
    run_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for output files (default: output_dir from settings)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    # 'inspect' command - reload a saved snapshot
    inspect_parser = subparsers.add_parser("inspect", help="Summarize a saved snapshot")
    inspect_parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Snapshot file (default: snapshot_path from settings)",
    )

    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the 'run' command."""
    try:
        result = archive_weather(output_dir=args.output_dir, verbose=args.debug or None)
    except WeatherArchiveError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL
    except pydantic.ValidationError as exc:
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        return EXIT_FATAL

    if result["missing"]:
        return EXIT_MISSING_OUTPUTS
    return EXIT_OK


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: ({settings.lat}, {settings.lon}) {settings.timezone}")
    print(f"Date range: {settings.start_date} to {settings.end_date}")
    return EXIT_OK


def cmd_inspect(args: argparse.Namespace) -> int:
    """Handle the 'inspect' command: reload a snapshot and summarize it."""
    path = args.path if args.path is not None else get_settings().snapshot_path
    if not path.exists():
        print(f"No snapshot found at {path}. Run 'weather-archive run' first.", file=sys.stderr)
        return EXIT_FATAL

    table = read_snapshot(path)
    meta = read_snapshot_meta(path)

    print(f"Snapshot: {path}")
    if meta:
        print(f"Source: {meta.get('source', 'unknown')} (fetched {meta.get('fetched_at', '?')})")
    print(f"Rows: {len(table)}")
    print(f"Columns: {', '.join(table.columns)}")
    if len(table) and "time" in table.columns:
        print(f"Time span: {table['time'].iloc[0]} to {table['time'].iloc[-1]}")
    print(table.head().to_string(index=False))
    return EXIT_OK


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    commands = {
        "run": cmd_run,
        "info": cmd_info,
        "inspect": cmd_inspect,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
