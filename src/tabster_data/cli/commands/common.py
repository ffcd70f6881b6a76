"""Helpers shared by several commands."""

import argparse
import sys
from pathlib import Path

from ...config import Config


def resolve_library_path(args: argparse.Namespace) -> Path:
    """Return the library given on the command line or the configured one.

    Exits with status 1 if neither is set.
    """
    if args.library_path:
        return Path(args.library_path)
    config = Config(args.config) if getattr(args, "config", None) else Config()
    configured = config.get_library_path()
    if not configured:
        print("Error: no library path given and none configured", file=sys.stderr)
        sys.exit(1)
    return Path(configured)
