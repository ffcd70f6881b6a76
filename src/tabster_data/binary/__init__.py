"""Tabster binary formats.

Modules:
    stream: varint, string and compressed string codecs
    header: file header, format version and version policy
    schema: declarative field layouts
    tablature: binary tablature documents
"""

from .header import FileHeader, FormatVersion, check_version, is_version_supported, read_header, write_header
from .tablature import TablatureFile, TablatureSourceType, TablatureType

__all__ = [
    "FileHeader",
    "FormatVersion",
    "TablatureFile",
    "TablatureSourceType",
    "TablatureType",
    "check_version",
    "is_version_supported",
    "read_header",
    "write_header",
]
