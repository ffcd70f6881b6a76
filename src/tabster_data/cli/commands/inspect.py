"""Inspect command - Display the header and fields of a tablature file."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ...binary.tablature import TablatureFile
from ...errors import TabsterDataError
from ..schemas import HeaderModel, InspectResponse, TablatureModel
from ..utils import error_response, print_json


def cmd_inspect(args: argparse.Namespace) -> None:
    """Inspect a binary tablature file.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()
    file_path = Path(args.file)

    try:
        if args.quiet:
            header = TablatureFile().get_header(file_path)
            tab = None
        else:
            tab = TablatureFile()
            header = tab.load(file_path)
    except (OSError, TabsterDataError) as e:
        if args.json:
            print_json(error_response(e))
        else:
            console.print(f"[red]Error reading {file_path}: {e}[/red]")
        logging.debug("Inspect failed", exc_info=True)
        sys.exit(1)

    size = file_path.stat().st_size

    if args.json:
        print_json(InspectResponse(
            path=str(file_path),
            size=size,
            header=HeaderModel(magic=header.magic, version=str(header.version), compressed=header.compressed),
            tablature=None if tab is None else TablatureModel(
                created=tab.created.isoformat(),
                artist=tab.artist,
                title=tab.title,
                type=tab.type.name,
                source_type=tab.source_type.name,
                source=tab.source,
                comment=tab.comment,
                contents_length=len(tab.contents),
            ),
        ))
        return

    console.print(f"[cyan]Reading tablature file: {file_path}[/cyan]")
    console.print(f"[cyan]File size: {size:,} bytes[/cyan]\n")

    table = Table(title="File Header", show_header=False)
    table.add_column("Field", style="cyan", width=15)
    table.add_column("Value", style="magenta")
    table.add_row("Magic", header.magic)
    table.add_row("Version", str(header.version))
    table.add_row("Compressed", "Yes" if header.compressed else "No")
    console.print(table)
    console.print()

    if tab is None:
        return

    table = Table(title="Tablature", show_header=False)
    table.add_column("Field", style="cyan", width=15)
    table.add_column("Value", style="magenta")
    table.add_row("Created", tab.created.isoformat())
    table.add_row("Artist", tab.artist)
    table.add_row("Title", tab.title)
    table.add_row("Type", tab.type.name)
    table.add_row("Source Type", tab.source_type.name)
    table.add_row("Source", tab.source)
    table.add_row("Comment", tab.comment)
    table.add_row("Contents", f"{len(tab.contents):,} characters")
    console.print(table)

    if tab.contents:
        # Show the first lines of the tab body
        lines = tab.contents.splitlines()
        console.print(f"\n[cyan]First {min(10, len(lines))} lines:[/cyan]\n")
        for line in lines[:10]:
            console.print(line, markup=False, highlight=False)
        if len(lines) > 10:
            console.print(f"[dim]... and {len(lines) - 10} more lines[/dim]")
