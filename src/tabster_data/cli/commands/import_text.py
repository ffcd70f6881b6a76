"""Import command - Convert a plain text tab into a tablature file."""

import argparse
import logging
import sys
from pathlib import Path

from ...binary.tablature import TablatureType
from ...config import Config
from ...constants import TABLATURE_EXTENSION
from ...processing import PlainTextImporter
from ..schemas import ImportSuccessResponse
from ..utils import error_response, print_json


def cmd_import(args: argparse.Namespace) -> None:
    """Import a text file.

    Args:
        args: Parsed command-line arguments
    """
    config = Config(args.config) if args.config else Config()
    text_path = Path(args.text_file)
    output_path = Path(args.output) if args.output else text_path.with_suffix(TABLATURE_EXTENSION)
    encoding = args.encoding or config.get_text_encoding()
    type_name = args.type or config.get_default_type()
    compressed = args.compress or config.get_compress_contents()

    try:
        text = text_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        if args.json:
            print_json(error_response(e))
        else:
            print(f"Error: cannot read {text_path}: {e}", file=sys.stderr)
        sys.exit(1)

    importer = PlainTextImporter(source=str(text_path.resolve()))
    tab = importer.parse(text, TablatureType(type_name))
    if args.artist:
        tab.artist = args.artist
    if args.title:
        tab.title = args.title

    logging.info("Writing %s (compressed=%s)", output_path, compressed)
    tab.save(output_path, compressed=compressed)

    if args.json:
        print_json(ImportSuccessResponse(
            source=str(text_path),
            output=str(output_path),
            artist=tab.artist,
            title=tab.title,
            type=tab.type.name,
            compressed=compressed,
        ))
        return

    print("\nTablature imported:")
    print(f"  From:   {text_path}")
    print(f"  To:     {output_path}")
    print(f"  Artist: {tab.artist or '<unknown>'}")
    print(f"  Title:  {tab.title or '<unknown>'}")
    print(f"  Type:   {tab.type.name}")
