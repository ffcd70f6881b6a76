"""File header shared by all Tabster binary formats.

A header is a plain record. Reading one only checks the magic identifier;
whether the version is acceptable is decided by the caller through
:func:`is_version_supported` or :func:`check_version`.
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union

from ..constants import ENCODING
from ..errors import FormatError, FormatMismatchError, TruncatedInputError, UnsupportedVersionError
from .stream import read_bool, read_int32, read_varint, write_bool, write_int32, write_string

logger = logging.getLogger(__name__)

# Longest magic worth reading when reporting a mismatch
MAX_MAGIC_BYTES = 64


class FormatVersion(NamedTuple):
    major: int
    minor: int

    def __str__(self):
        return f'{self.major}.{self.minor}'

    @classmethod
    def parse(cls, text: Union[str, Tuple[int, int], "FormatVersion"]) -> "FormatVersion":
        """Build a version from ``"1.0"``-style text or a (major, minor) pair.

        Missing components default to 0, so ``"2"`` parses as 2.0. Extra
        components (``"1.0.0.0"``) are ignored.
        """
        if isinstance(text, tuple):
            return cls(int(text[0]), int(text[1]))
        parts = str(text).strip().split('.')
        try:
            major = int(parts[0])
            minor = int(parts[1]) if len(parts) > 1 else 0
        except ValueError:
            raise ValueError(f"Invalid version string: {text!r}") from None
        if major < 0 or minor < 0:
            raise ValueError(f"Invalid version string: {text!r}")
        return cls(major, minor)


@dataclass(frozen=True)
class FileHeader:
    magic: str
    version: FormatVersion
    compressed: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'version', FormatVersion.parse(self.version))


def write_header(f, header: FileHeader) -> None:
    write_string(f, header.magic, ENCODING)
    write_int32(f, header.version.major)
    write_int32(f, header.version.minor)
    write_bool(f, header.compressed)


def _read_magic(f, expected_magic: str) -> str:
    """Read the magic string, treating undecodable bytes as a foreign file.

    A stream cut off inside the expected magic is truncated, not foreign.
    """
    expected = expected_magic.encode(ENCODING)
    try:
        length = read_varint(f)
    except (FormatError, TruncatedInputError):
        raise FormatMismatchError(expected_magic, '<unreadable>') from None
    if length > max(len(expected), MAX_MAGIC_BYTES):
        raise FormatMismatchError(expected_magic, '<unreadable>')
    data = f.read(length) if length else b''
    if len(data) < length:
        if length == len(expected) and expected.startswith(data):
            raise TruncatedInputError(
                f"Unexpected end of stream inside magic identifier: expected {length} bytes, got {len(data)}"
            )
        raise FormatMismatchError(expected_magic, '<unreadable>')
    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError:
        raise FormatMismatchError(expected_magic, '<unreadable>') from None


def read_header(f, expected_magic: str) -> FileHeader:
    """Read a header and check its magic identifier.

    Raises:
        FormatMismatchError: If the magic identifier is not ``expected_magic``.
            No field after the magic is read in that case.
        TruncatedInputError: If the stream ends inside the header
    """
    magic = _read_magic(f, expected_magic)
    if magic != expected_magic:
        raise FormatMismatchError(expected_magic, magic)
    major = read_int32(f)
    minor = read_int32(f)
    compressed = read_bool(f)
    header = FileHeader(magic, FormatVersion(major, minor), compressed)
    logger.debug("Read header %s v%s (compressed=%s)", magic, header.version, compressed)
    return header


# Version policy

def is_version_supported(version, current) -> bool:
    """Return True if a file written as ``version`` can be read by ``current``.

    Same major version and a minor version no newer than the current one.
    """
    version = FormatVersion.parse(version)
    current = FormatVersion.parse(current)
    return version.major == current.major and version.minor <= current.minor


def check_version(header: FileHeader, current) -> FileHeader:
    """Return the header unchanged, or raise UnsupportedVersionError."""
    if not is_version_supported(header.version, current):
        raise UnsupportedVersionError(header.version, FormatVersion.parse(current))
    return header
