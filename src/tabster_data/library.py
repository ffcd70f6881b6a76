"""Library entries.

An entry pairs a loaded document with the path it was loaded from. Catalog
metadata (favorited, views) belongs to the entry and is stored only in the
library index, never in the document itself.
"""

import os
from dataclasses import dataclass
from typing import Any

TABLATURE = 'tablature'
PLAYLIST = 'playlist'


@dataclass
class PlaylistLibraryItem:
    document: Any
    path: str

    def __post_init__(self):
        self.path = os.path.abspath(os.fspath(self.path))


@dataclass
class TablatureLibraryItem:
    document: Any
    path: str
    favorited: bool = False
    views: int = 0

    def __post_init__(self):
        self.path = os.path.abspath(os.fspath(self.path))
        if self.views < 0:
            raise ValueError(f"View count must not be negative: {self.views}")

    def add_view(self) -> int:
        self.views += 1
        return self.views


@dataclass(frozen=True)
class SkippedReference:
    """A library entry that could not be resolved while loading."""

    path: str
    kind: str
    reason: str
