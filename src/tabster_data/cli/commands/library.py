"""Library command - Load a library index and list its entries."""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from ...errors import TabsterDataError
from ...xml.library import LibraryDocument
from ..schemas import LibraryPlaylistModel, LibraryResponse, LibraryTabModel, SkippedModel
from ..utils import error_response, print_json
from .common import resolve_library_path


def cmd_library(args: argparse.Namespace) -> None:
    """Load and display a library index.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()
    index_path = resolve_library_path(args)

    try:
        library = LibraryDocument.read(index_path, strict=args.strict)
    except (OSError, TabsterDataError) as e:
        if args.json:
            print_json(error_response(e))
        else:
            console.print(f"[red]Error loading library {index_path}: {e}[/red]")
        logging.debug("Library load failed", exc_info=True)
        sys.exit(1)

    if args.json:
        print_json(LibraryResponse(
            path=str(index_path),
            version=str(library.file_header.version),
            encoding=library.file_attributes.encoding,
            tabs=[
                LibraryTabModel(
                    path=item.path,
                    artist=item.document.artist,
                    title=item.document.title,
                    type=item.document.type.name,
                    favorited=item.favorited,
                    views=item.views,
                )
                for item in library.tablature_items
            ],
            playlists=[
                LibraryPlaylistModel(path=item.path, name=item.document.name, files=len(item.document))
                for item in library.playlist_items
            ],
            skipped=[
                SkippedModel(path=ref.path, kind=ref.kind, reason=ref.reason)
                for ref in library.skipped
            ],
        ))
        return

    console.print(f"\n[cyan]Library:[/cyan] {index_path}")
    console.print(
        f"[cyan]Version:[/cyan] {library.file_header.version}  "
        f"[cyan]Encoding:[/cyan] {library.file_attributes.encoding}\n"
    )

    table = Table(title=f"Tabs ({len(library.tablature_items)})")
    table.add_column("Artist", style="cyan")
    table.add_column("Title", style="magenta")
    table.add_column("Type")
    table.add_column("Fav", justify="center")
    table.add_column("Views", justify="right", style="green")
    table.add_column("Path", style="dim")
    for item in library.tablature_items:
        tab = item.document
        table.add_row(
            tab.artist, tab.title, tab.type.name,
            "★" if item.favorited else "", str(item.views), item.path,
        )
    console.print(table)

    if library.playlist_items:
        table = Table(title=f"Playlists ({len(library.playlist_items)})")
        table.add_column("Name", style="cyan")
        table.add_column("Files", justify="right", style="green")
        table.add_column("Path", style="dim")
        for item in library.playlist_items:
            table.add_row(item.document.name, str(len(item.document)), item.path)
        console.print(table)

    if library.skipped:
        console.print(f"\n[yellow]Skipped {len(library.skipped)} entries:[/yellow]")
        for ref in library.skipped:
            console.print(f"  [yellow]•[/yellow] {ref.kind} {ref.path} ({ref.reason})")
    console.print()
