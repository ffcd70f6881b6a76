"""Tablature playlists (``.tablist`` files).

A playlist is a named, ordered list of tablature file paths::

    <tablatureplaylist version="1.0">
      <name>Warmups</name>
      <files>
        <file>/home/me/tabs/paradise_city.tabster</file>
      </files>
    </tablatureplaylist>
"""

import logging
import os
import xml.etree.ElementTree as ET
from typing import List, Optional

from ..binary.header import FileHeader, FormatVersion
from ..constants import PLAYLIST_ROOT, PLAYLIST_VERSION
from ..utils import utcnow
from .common import (
    FileAttributes,
    child_elements,
    creation_time,
    declared_encoding,
    element_text,
    parse_document,
    write_document,
)

logger = logging.getLogger(__name__)

PLAYLIST_ENCODING = 'utf-8'


class PlaylistFile:
    version = FormatVersion(*PLAYLIST_VERSION)

    def __init__(self, name: str = '', files: Optional[List[str]] = None):
        self.name = name
        self.files: List[str] = [os.path.abspath(f) for f in files] if files is not None else []
        self.file_header: Optional[FileHeader] = None
        self.file_attributes: Optional[FileAttributes] = None
        self.path: Optional[str] = None

    def __len__(self):
        return len(self.files)

    def __iter__(self):
        return iter(self.files)

    def __contains__(self, path):
        return os.path.abspath(path) in self.files

    def append(self, path) -> None:
        self.files.append(os.path.abspath(path))

    def remove(self, path) -> None:
        self.files.remove(os.path.abspath(path))

    def load(self, filename) -> FileHeader:
        root = parse_document(filename, PLAYLIST_ROOT)
        header = FileHeader(PLAYLIST_ROOT, FormatVersion.parse(root.get('version', '1.0')), False)

        name_node = root.find('name')
        attributes = FileAttributes(creation_time(filename), declared_encoding(filename))

        base = os.path.dirname(os.path.abspath(filename))
        files = [
            os.path.abspath(os.path.join(base, element_text(node)))
            for node in child_elements(root, 'files', 'file')
        ]

        self.name = element_text(name_node) if name_node is not None else ''
        self.files = files
        self.file_header = header
        self.file_attributes = attributes
        self.path = os.path.abspath(filename)
        logger.debug("Loaded playlist %r with %d files from %s", self.name, len(self.files), filename)
        return header

    def save(self, filename) -> None:
        root = ET.Element(PLAYLIST_ROOT, version=str(self.version))
        ET.SubElement(root, 'name').text = self.name
        files = ET.SubElement(root, 'files')
        for path in self.files:
            ET.SubElement(files, 'file').text = path

        encoding = self.file_attributes.encoding if self.file_attributes else PLAYLIST_ENCODING
        write_document(root, filename, encoding)

        self.file_header = FileHeader(PLAYLIST_ROOT, self.version, False)
        self.file_attributes = FileAttributes(utcnow(), encoding)
        self.path = os.path.abspath(filename)

    @classmethod
    def read(cls, filename) -> "PlaylistFile":
        playlist = cls()
        playlist.load(filename)
        return playlist
