"""Command-line interface for Tabster Data (tabster).

This package provides the 'tabster' command-line tool with subcommands:
    inspect: Show the header and fields of a tablature file
    import: Import a plain text tab into a tablature file
    library: Load a library index and list its entries
    add: Add tablature files to a library index
    validate: Check a library index and the files it references
    config: Show or change stored settings

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from .utils import setup_logging
from .commands import (
    cmd_add,
    cmd_config,
    cmd_import,
    cmd_inspect,
    cmd_library,
    cmd_validate,
)

__all__ = [
    "main",
    "cmd_add",
    "cmd_config",
    "cmd_import",
    "cmd_inspect",
    "cmd_library",
    "cmd_validate",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )

    # Options shared by commands with machine-readable output
    json_parser = argparse.ArgumentParser(add_help=False)
    json_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    json_parser.add_argument("-c", "--config", help="Path to configuration file")

    parser = argparse.ArgumentParser(
        prog="tabster",
        usage="tabster <command> [options]",
        description="Tabster Data - Read and write Tabster tablature files and libraries",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # inspect
    # ──────────────────────────────
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Inspect a tablature file",
        usage="tabster inspect <file> [options]",
        description="Display the header and fields of a binary tablature file",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    inspect_parser.add_argument("file", help="Path to .tabster file")
    inspect_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Show only header information, not fields",
    )
    inspect_parser.set_defaults(func=cmd_inspect)

    # ──────────────────────────────
    # import
    # ──────────────────────────────
    import_parser = subparsers.add_parser(
        "import",
        help="Import a plain text tab",
        usage="tabster import <text_file> [options]",
        description="Convert a plain text tab into a binary tablature file",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    import_parser.add_argument("text_file", help="Path to text file to import")
    import_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: text_file with .tabster extension)",
    )
    import_parser.add_argument("-t", "--type", help="Tablature type (default from config)")
    import_parser.add_argument("--artist", help="Override the detected artist")
    import_parser.add_argument("--title", help="Override the detected title")
    import_parser.add_argument("--encoding", help="Text file encoding (default from config)")
    import_parser.add_argument(
        "--compress",
        action="store_true",
        help="Store the tab contents gzip-compressed",
    )
    import_parser.set_defaults(func=cmd_import)

    # ──────────────────────────────
    # library
    # ──────────────────────────────
    library_parser = subparsers.add_parser(
        "library",
        help="List library entries",
        usage="tabster library [library_path] [options]",
        description="Load a library index and list its tabs, playlists and skipped entries",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    library_parser.add_argument(
        "library_path", nargs="?", help="Path to library index (default from config)"
    )
    library_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if a referenced file exists but cannot be read",
    )
    library_parser.set_defaults(func=cmd_library)

    # ──────────────────────────────
    # add
    # ──────────────────────────────
    add_parser = subparsers.add_parser(
        "add",
        help="Add tablature files to a library",
        usage="tabster add <library_path> <tab_file> [tab_file ...] [options]",
        description="Add tablature files to a library index, creating it if needed",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    add_parser.add_argument("library_path", help="Path to library index")
    add_parser.add_argument("tab_files", nargs="+", help="Tablature files to add")
    add_parser.add_argument(
        "--favorite",
        action="store_true",
        help="Mark the added tabs as favorites",
    )
    add_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of dropping entries whose files are missing or unreadable",
    )
    add_parser.set_defaults(func=cmd_add)

    # ──────────────────────────────
    # validate
    # ──────────────────────────────
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a library",
        usage="tabster validate [library_path] [options]",
        description="Check a library index, its references and their format versions",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    validate_parser.add_argument(
        "library_path", nargs="?", help="Path to library index (default from config)"
    )
    validate_parser.set_defaults(func=cmd_validate)

    # ──────────────────────────────
    # config
    # ──────────────────────────────
    config_parser = subparsers.add_parser(
        "config",
        help="Show or change settings",
        usage="tabster config [--set KEY VALUE] [options]",
        description="Show the stored settings, or update one with --set (e.g. --set encoding.index utf-8)",
        parents=[parent_parser, json_parser],
        formatter_class=RichHelpFormatter,
    )
    config_parser.add_argument(
        "--set",
        nargs=2,
        metavar=("KEY", "VALUE"),
        help="Set a value and save the configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging("critical")

    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()
