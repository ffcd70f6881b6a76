"""Text importers that turn plain text into tablature documents."""

import re
from typing import Optional, Protocol, runtime_checkable

from .binary.tablature import TablatureFile, TablatureSourceType, TablatureType

# "Artist - Title" on the first non-empty line
_HEADING = re.compile(r'^\s*(?P<artist>[^\n]+?)\s+[-–]\s+(?P<title>[^\n]+?)\s*$')


@runtime_checkable
class TablatureTextImporter(Protocol):
    def parse(self, text: str, type: TablatureType) -> TablatureFile:
        """Parse a tab from a text source with an explicitly given type."""
        ...


class PlainTextImporter:
    """Import text as-is.

    If the first non-empty line looks like ``Artist - Title`` it provides the
    artist and title; the full text always becomes the contents.
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source

    def parse(self, text: str, type: TablatureType) -> TablatureFile:
        artist = title = ''
        for line in text.splitlines():
            if line.strip():
                match = _HEADING.match(line)
                if match:
                    artist, title = match.group('artist'), match.group('title')
                break

        tab = TablatureFile(artist=artist, title=title, type=type, contents=text)
        if self.source:
            tab.source_type = TablatureSourceType.FILE_IMPORT
            tab.source = self.source
        return tab
