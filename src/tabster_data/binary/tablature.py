"""Binary tablature documents (``.tabster`` files)."""

import logging
import os
from datetime import datetime
from enum import IntEnum
from typing import Optional, Tuple

from ..constants import ENCODING, TABLATURE_MAGIC, TABLATURE_VERSION
from ..errors import FormatError
from ..utils import datetime_to_ticks, ticks_to_datetime, utcnow
from .header import FileHeader, FormatVersion, read_header, write_header
from .schema import COMPRESSED_STRING, INT32, INT64, STRING, FieldSpec, read_fields, write_fields

logger = logging.getLogger(__name__)


class TablatureSourceType(IntEnum):
    USER_CREATED = 0
    FILE_IMPORT = 1
    URL_IMPORT = 2


class TablatureType:
    """A tablature type tag such as "Guitar Tab".

    Compares equal to other types and to plain strings with the same name.
    """

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other):
        if isinstance(other, TablatureType):
            return self.name == other.name
        if isinstance(other, str):
            return self.name == other
        return NotImplemented

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'TablatureType({self.name!r})'


GUITAR_TAB = TablatureType('Guitar Tab')
GUITAR_CHORDS = TablatureType('Guitar Chords')
BASS_TAB = TablatureType('Bass Tab')
DRUM_TAB = TablatureType('Drum Tab')
UKULELE_TAB = TablatureType('Ukulele Tab')


# Field layout after the header. contents is a plain string in the default
# layout; the compressed layout is selected by the header's compression flag.
TABLATURE_SCHEMA = (
    FieldSpec('created', INT64),
    FieldSpec('artist', STRING),
    FieldSpec('title', STRING),
    FieldSpec('type', STRING),
    FieldSpec('source_type', INT32),
    FieldSpec('source', STRING),
    FieldSpec('comment', STRING),
    FieldSpec('contents', STRING),
)

TABLATURE_COMPRESSED_SCHEMA = TABLATURE_SCHEMA[:-1] + (FieldSpec('contents', COMPRESSED_STRING),)


def schema_for(header: FileHeader):
    return TABLATURE_COMPRESSED_SCHEMA if header.compressed else TABLATURE_SCHEMA


class TablatureFile:
    magic = TABLATURE_MAGIC
    version = FormatVersion(*TABLATURE_VERSION)

    def __init__(self, artist='', title='', type=GUITAR_TAB, contents='',
                 source_type=TablatureSourceType.USER_CREATED, source='',
                 comment='', created: Optional[datetime] = None):
        self.artist = artist
        self.title = title
        self.type = type if isinstance(type, TablatureType) else TablatureType(type)
        self.contents = contents
        self.source_type = TablatureSourceType(source_type)
        self.source = source
        self.comment = comment
        self.created = created if created is not None else utcnow()
        # Set by load() and save()
        self.path: Optional[str] = None

    def __repr__(self):
        return f'TablatureFile({self.artist!r}, {self.title!r}, {self.type.name!r})'

    def _values(self):
        return {
            'created': datetime_to_ticks(self.created),
            'artist': self.artist,
            'title': self.title,
            'type': self.type.name,
            'source_type': int(self.source_type),
            'source': str(self.source),
            'comment': self.comment,
            'contents': self.contents,
        }

    def _assign(self, values):
        """Convert raw field values and assign them all at once."""
        try:
            source_type = TablatureSourceType(values['source_type'])
        except ValueError:
            raise FormatError(f"Unknown source type: {values['source_type']}") from None
        try:
            created = ticks_to_datetime(values['created'])
        except (ValueError, OverflowError):
            raise FormatError(f"Invalid creation timestamp: {values['created']}") from None

        self.created = created
        self.artist = values['artist']
        self.title = values['title']
        self.type = TablatureType(values['type'])
        self.source_type = source_type
        self.source = values['source']
        self.comment = values['comment']
        self.contents = values['contents']

    def to_file(self, f, compressed: bool = False) -> FileHeader:
        header = FileHeader(self.magic, self.version, compressed)
        write_header(f, header)
        write_fields(f, schema_for(header), self._values(), ENCODING)
        return header

    @classmethod
    def from_file(cls, f) -> Tuple["TablatureFile", FileHeader]:
        """Return a new TablatureFile and its header given a file object.

        Raises:
            FormatMismatchError: If the stream is not a tablature file
            TruncatedInputError: If the stream ends inside a field
            DecompressionError: If compressed contents are corrupt
        """
        header = read_header(f, cls.magic)
        values = read_fields(f, schema_for(header), ENCODING)
        tab = cls()
        tab._assign(values)
        return tab, header

    def save(self, filename, compressed: bool = False) -> FileHeader:
        with open(filename, 'wb') as f:
            header = self.to_file(f, compressed)
        self.path = os.path.abspath(filename)
        logger.debug("Saved tablature %r to %s", self.title, filename)
        return header

    def load(self, filename) -> FileHeader:
        """Replace this document's fields with the contents of ``filename``.

        The instance is left untouched if reading fails.
        """
        with open(filename, 'rb') as f:
            loaded, header = self.from_file(f)
        self.__dict__.update(
            (k, v) for k, v in loaded.__dict__.items() if k != 'path'
        )
        self.path = os.path.abspath(filename)
        logger.debug("Loaded tablature %r from %s", self.title, filename)
        return header

    def get_header(self, filename=None) -> FileHeader:
        """Read only the header of ``filename`` (default: the last loaded or saved path)."""
        filename = filename if filename is not None else self.path
        if filename is None:
            raise ValueError("No file name given and this document has no path")
        with open(filename, 'rb') as f:
            return read_header(f, self.magic)

    @classmethod
    def read(cls, filename) -> "TablatureFile":
        """Return a TablatureFile given a file name.

        Raises:
            FileNotFoundError: If file doesn't exist
            PermissionError: If file cannot be read
            FormatError: If the file is not a valid tablature file
            TruncatedInputError: If the file ends unexpectedly
        """
        tab = cls()
        tab.load(filename)
        return tab
