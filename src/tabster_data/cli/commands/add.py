"""Add command - Add tablature files to a library index."""

import argparse
import logging
import sys

from ...binary.tablature import TablatureFile
from ...config import Config
from ...errors import TabsterDataError
from ...xml.library import LibraryDocument
from ..schemas import AddSuccessResponse, ErrorResponse, SkippedModel
from ..utils import error_response, print_json
from .common import resolve_library_path


def cmd_add(args: argparse.Namespace) -> None:
    """Add tablature files to a library, creating the index if needed.

    Entries the index could not load are not written back. They are listed
    in the output, or with ``--strict`` the index is left untouched.

    Args:
        args: Parsed command-line arguments
    """
    config = Config(args.config) if args.config else Config()
    index_path = resolve_library_path(args)
    library = LibraryDocument(strict=args.strict, default_encoding=config.get_index_encoding())

    added = 0
    present = 0
    try:
        if index_path.exists():
            library.load(index_path)

        if args.strict and library.skipped:
            message = f"{len(library.skipped)} library entries could not be loaded; index not modified"
            if args.json:
                print_json(ErrorResponse(error="skipped_entries", message=message))
            else:
                print(f"Error: {message}", file=sys.stderr)
                for ref in library.skipped:
                    print(f"  {ref.kind} {ref.path} ({ref.reason})", file=sys.stderr)
            sys.exit(1)

        for tab_file in args.tab_files:
            if library.find_tablature(tab_file) is not None:
                logging.info("Already in library: %s", tab_file)
                present += 1
                continue
            document = TablatureFile.read(tab_file)
            library.add_tablature(document, tab_file, favorited=args.favorite)
            added += 1
            logging.info("Added %s", tab_file)

        library.save(index_path)
    except (OSError, TabsterDataError) as e:
        if args.json:
            print_json(error_response(e))
        else:
            print(f"Error: {e}", file=sys.stderr)
        logging.debug("Add failed", exc_info=True)
        sys.exit(1)

    if args.json:
        print_json(AddSuccessResponse(
            path=str(index_path),
            added=added,
            already_present=present,
            total=len(library.tablature_items),
            dropped=[
                SkippedModel(path=ref.path, kind=ref.kind, reason=ref.reason)
                for ref in library.skipped
            ],
        ))
        return

    print(f"\nLibrary updated: {index_path}")
    print(f"  Added:   {added}")
    print(f"  Present: {present}")
    print(f"  Total:   {len(library.tablature_items)}")
    if library.skipped:
        print(f"  Dropped: {len(library.skipped)}")
        for ref in library.skipped:
            print(f"    {ref.kind} {ref.path} ({ref.reason})")
