"""Validate command - Check a library index and the files it references."""

import argparse
import logging
import sys
from typing import List

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from ...binary.header import check_version, is_version_supported
from ...binary.tablature import TablatureFile
from ...errors import TabsterDataError, UnsupportedVersionError
from ...xml.library import LibraryDocument
from ..schemas import ValidationFailedResponse, ValidationSuccessResponse
from ..utils import error_response, print_json
from .common import resolve_library_path


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate a library index.

    Args:
        args: Parsed command-line arguments
    """
    console = Console(quiet=args.json)
    index_path = resolve_library_path(args)

    issues: List[str] = []
    warnings: List[str] = []

    console.print(f"\n[cyan]Validating library:[/cyan] {index_path}\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[cyan]{task.description}"),
        console=console,
    ) as progress:
        read_task = progress.add_task("Loading library...", total=None)
        try:
            library = LibraryDocument.read(index_path)
        except (OSError, TabsterDataError) as e:
            progress.update(read_task, description="[red]✗ Failed to load library")
            logging.debug("Validate failed", exc_info=True)
            if args.json:
                print_json(error_response(e))
            else:
                console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)
        progress.update(read_task, description="[green]✓ Library loaded")

        if not is_version_supported(library.file_header.version, LibraryDocument.version):
            issues.append(
                f"Library version {library.file_header.version} is not supported "
                f"(current {LibraryDocument.version})"
            )

        for ref in library.skipped:
            issues.append(f"Unresolved {ref.kind}: {ref.path} ({ref.reason})")

        version_task = progress.add_task("Checking tab versions...", total=None)
        for item in library.tablature_items:
            try:
                check_version(TablatureFile().get_header(item.path), TablatureFile.version)
            except UnsupportedVersionError as e:
                issues.append(f"{item.path}: {e}")
            except (OSError, TabsterDataError) as e:
                issues.append(f"{item.path}: cannot re-read header ({e})")
        for item in library.playlist_items:
            header = item.document.file_header
            if header is not None and not is_version_supported(header.version, item.document.version):
                issues.append(f"{item.path}: unsupported playlist version {header.version}")
        progress.update(version_task, description="[green]✓ Versions checked")

    if not library.tablature_items and not library.playlist_items:
        warnings.append("Library has no entries (empty library)")

    paths = [item.path for item in library.tablature_items]
    duplicates = len(paths) - len(set(paths))
    if duplicates > 0:
        warnings.append(f"Found {duplicates} duplicate tab paths in library")

    if args.json:
        if issues:
            print_json(ValidationFailedResponse(
                path=str(index_path), errors=issues, warnings=warnings or None,
            ))
        else:
            print_json(ValidationSuccessResponse(
                path=str(index_path),
                tabs=len(library.tablature_items),
                playlists=len(library.playlist_items),
                warnings=warnings or None,
            ))
    else:
        console.print()
        if issues:
            console.print("[red bold]✗ Validation Failed[/red bold]\n")
            console.print("[red]Issues found:[/red]")
            for issue in issues:
                console.print(f"  [red]•[/red] {issue}")
        else:
            console.print("[green bold]✓ Validation Passed[/green bold]\n")

        if warnings:
            console.print("\n[yellow]Warnings:[/yellow]")
            for warning in warnings:
                console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    if issues:
        sys.exit(1)
