"""The Tabster library index (``.tablib`` files).

The index is an XML manifest of tablature and playlist files plus catalog
metadata that is not stored in the documents themselves::

    <?xml version='1.0' encoding='ISO-8859-1'?>
    <library version="1.0">
      <tabs>
        <tab favorite="True" views="12">/home/me/tabs/paradise_city.tabster</tab>
      </tabs>
      <playlists>
        <playlist>/home/me/tabs/warmups.tablist</playlist>
      </playlists>
    </library>

Loading resolves every path to a document. Entries whose file no longer
exists are dropped from memory and reported in :attr:`LibraryDocument.skipped`
so that a library with one missing file still opens. Saving always rewrites
the manifest from the in-memory entries.
"""

import logging
import os
import xml.etree.ElementTree as ET
from typing import Callable, List, Optional

from ..binary.header import FileHeader, FormatVersion
from ..binary.tablature import TablatureFile
from ..constants import DEFAULT_INDEX_ENCODING, LIBRARY_ROOT, LIBRARY_VERSION
from ..errors import TabsterDataError
from ..library import PLAYLIST, TABLATURE, PlaylistLibraryItem, SkippedReference, TablatureLibraryItem
from ..utils import utcnow
from .common import (
    FileAttributes,
    child_elements,
    creation_time,
    declared_encoding,
    element_text,
    format_bool,
    parse_bool,
    parse_count,
    parse_document,
    write_document,
)
from .playlist import PlaylistFile

logger = logging.getLogger(__name__)


class LibraryDocument:
    version = FormatVersion(*LIBRARY_VERSION)

    def __init__(self, strict: bool = False, default_encoding: str = DEFAULT_INDEX_ENCODING,
                 tablature_loader: Callable = TablatureFile.read,
                 playlist_loader: Callable = PlaylistFile.read):
        """
        Args:
            strict: If True, a referenced file that exists but cannot be
                parsed fails the whole load. Otherwise it is skipped like a
                missing file.
            default_encoding: Encoding used by save() when no encoding was
                recorded by a previous load or save
            tablature_loader: Callable returning a document for a tab path
            playlist_loader: Callable returning a document for a playlist path
        """
        self.strict = strict
        self.default_encoding = default_encoding
        self.tablature_loader = tablature_loader
        self.playlist_loader = playlist_loader
        self.file_header: Optional[FileHeader] = None
        self.file_attributes: Optional[FileAttributes] = None
        self.skipped: List[SkippedReference] = []
        self._tablature_items: List[TablatureLibraryItem] = []
        self._playlist_items: List[PlaylistLibraryItem] = []

    @property
    def tablature_items(self):
        return tuple(self._tablature_items)

    @property
    def playlist_items(self):
        return tuple(self._playlist_items)

    # Mutation

    def add_tablature(self, document, path, favorited=False, views=0) -> TablatureLibraryItem:
        item = TablatureLibraryItem(document, path, favorited, views)
        self._tablature_items.append(item)
        return item

    def remove_tablature(self, path) -> bool:
        item = self.find_tablature(path)
        if item is None:
            return False
        self._tablature_items.remove(item)
        return True

    def find_tablature(self, path) -> Optional[TablatureLibraryItem]:
        path = os.path.abspath(path)
        for item in self._tablature_items:
            if item.path == path:
                return item
        return None

    def add_playlist(self, document, path) -> PlaylistLibraryItem:
        item = PlaylistLibraryItem(document, path)
        self._playlist_items.append(item)
        return item

    def remove_playlist(self, path) -> bool:
        path = os.path.abspath(path)
        for item in self._playlist_items:
            if item.path == path:
                self._playlist_items.remove(item)
                return True
        return False

    # Loading

    def _resolve(self, path, kind, loader, skipped):
        """Load the document at ``path``, or record why it was skipped."""
        if not os.path.isfile(path):
            logger.warning("Skipping missing %s file: %s", kind, path)
            skipped.append(SkippedReference(path, kind, 'file not found'))
            return None
        try:
            return loader(path)
        except (TabsterDataError, ValueError) as e:
            if self.strict:
                raise
            logger.warning("Skipping unreadable %s file %s: %s", kind, path, e)
            skipped.append(SkippedReference(path, kind, str(e)))
            return None

    def load(self, filename) -> FileHeader:
        """Load the index and resolve every entry.

        Prior contents are replaced only if the load succeeds. Relative entry
        paths are taken relative to the directory of the index file.

        Raises:
            FileNotFoundError: If the index file does not exist
            FormatError: If the index is not a valid library document
            OSError: If a referenced file exists but cannot be opened
        """
        root = parse_document(filename, LIBRARY_ROOT)
        header = FileHeader(LIBRARY_ROOT, FormatVersion.parse(root.get('version', '1.0')), False)
        attributes = FileAttributes(creation_time(filename), declared_encoding(filename))
        base_dir = os.path.dirname(os.path.abspath(filename))

        tablature_items = []
        playlist_items = []
        skipped = []

        for node in child_elements(root, 'tabs', 'tab'):
            path = os.path.join(base_dir, element_text(node))
            favorited = parse_bool(node.get('favorite'), False)
            views = parse_count(node.get('views'), 0)
            document = self._resolve(path, TABLATURE, self.tablature_loader, skipped)
            if document is not None:
                tablature_items.append(TablatureLibraryItem(document, path, favorited, views))

        for node in child_elements(root, 'playlists', 'playlist'):
            path = os.path.join(base_dir, element_text(node))
            document = self._resolve(path, PLAYLIST, self.playlist_loader, skipped)
            if document is not None:
                playlist_items.append(PlaylistLibraryItem(document, path))

        self.file_header = header
        self.file_attributes = attributes
        self._tablature_items = tablature_items
        self._playlist_items = playlist_items
        self.skipped = skipped

        logger.info(
            "Loaded library %s: %d tabs, %d playlists, %d skipped",
            filename, len(tablature_items), len(playlist_items), len(skipped),
        )
        return header

    # Saving

    def to_element(self) -> ET.Element:
        root = ET.Element(LIBRARY_ROOT, version=str(self.version))
        tabs = ET.SubElement(root, 'tabs')
        for item in self._tablature_items:
            node = ET.SubElement(tabs, 'tab', favorite=format_bool(item.favorited), views=str(item.views))
            node.text = item.path
        playlists = ET.SubElement(root, 'playlists')
        for item in self._playlist_items:
            ET.SubElement(playlists, 'playlist').text = item.path
        return root

    def save(self, filename) -> None:
        """Write the index from the in-memory entries.

        No existence check is made on the entries.
        """
        encoding = self.file_attributes.encoding if self.file_attributes else self.default_encoding
        write_document(self.to_element(), filename, encoding)

        self.file_header = FileHeader(LIBRARY_ROOT, self.version, False)
        self.file_attributes = FileAttributes(utcnow(), encoding)
        logger.info(
            "Saved library %s: %d tabs, %d playlists",
            filename, len(self._tablature_items), len(self._playlist_items),
        )

    @classmethod
    def read(cls, filename, strict: bool = False) -> "LibraryDocument":
        library = cls(strict=strict)
        library.load(filename)
        return library
