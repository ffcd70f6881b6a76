"""Config command - Show or change stored settings."""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from ...config import Config
from ..schemas import ConfigResponse, ErrorResponse
from ..utils import print_json

TRUE_VALUES = ("true", "yes", "on", "1")
FALSE_VALUES = ("false", "no", "off", "0")


def parse_flag(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean (true/false), got {value!r}")


def settings(config: Config) -> dict:
    """Flatten the configuration into ``section.key`` names."""
    return {
        "library.path": config.get_library_path(),
        "encoding.text": config.get_text_encoding(),
        "encoding.index": config.get_index_encoding(),
        "tablature.compress_contents": config.get_compress_contents(),
        "tablature.default_type": config.get_default_type(),
    }


def apply_setting(config: Config, key: str, value: str) -> None:
    """Set one ``section.key`` value through the matching setter.

    Raises:
        KeyError: If the key is unknown
        ValueError: If the value is invalid for the key
        LookupError: If an encoding name is unknown
    """
    setters = {
        "library.path": config.set_library_path,
        "encoding.text": config.set_text_encoding,
        "encoding.index": config.set_index_encoding,
        "tablature.compress_contents": lambda v: config.set_compress_contents(parse_flag(v)),
        "tablature.default_type": config.set_default_type,
    }
    if key not in setters:
        raise KeyError(f"Unknown setting {key!r}; expected one of: {', '.join(setters)}")
    setters[key](value)


def cmd_config(args: argparse.Namespace) -> None:
    """Show the configuration, or update one setting with ``--set``.

    Args:
        args: Parsed command-line arguments
    """
    config = Config(args.config) if args.config else Config()
    updated = None

    if args.set:
        key, value = args.set
        try:
            apply_setting(config, key, value)
        except (KeyError, ValueError, LookupError) as e:
            message = e.args[0] if isinstance(e, KeyError) else str(e)
            if args.json:
                print_json(ErrorResponse(error="invalid_input", message=message))
            else:
                print(f"Error: {message}", file=sys.stderr)
            sys.exit(1)

        if not config.save():
            message = f"Could not write {config.config_path}"
            if args.json:
                print_json(ErrorResponse(error="io_error", message=message))
            else:
                print(f"Error: {message}", file=sys.stderr)
            sys.exit(1)
        logging.info("Saved %s to %s", key, config.config_path)
        updated = key

    if args.json:
        print_json(ConfigResponse(path=str(config.config_path), settings=settings(config), updated=updated))
        return

    console = Console()
    if updated:
        console.print(f"\n[green]✓[/green] Set [cyan]{updated}[/cyan]")
        console.print(f"[dim]  Saved to config: {config.config_path}[/dim]")

    table = Table(title=str(config.config_path))
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in settings(config).items():
        table.add_row(key, str(value))
    console.print()
    console.print(table)
