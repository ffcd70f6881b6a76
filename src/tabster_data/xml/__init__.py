"""Tabster XML formats: the library index and playlists."""

from .common import FileAttributes
from .library import LibraryDocument
from .playlist import PlaylistFile

__all__ = ["FileAttributes", "LibraryDocument", "PlaylistFile"]
