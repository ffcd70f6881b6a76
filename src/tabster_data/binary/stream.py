"""Primitive readers and writers for Tabster binary files.

All functions operate on binary file objects (anything with ``read`` and
``write``), so they work the same on open files and on ``io.BytesIO``.

Integers are little-endian. Strings are prefixed with their encoded byte
length as a 7-bit varint: each byte carries seven bits of the value, least
significant group first, and the high bit is set on every byte except the
last one.
"""

import gzip
import struct
import zlib

from ..constants import ENCODING, MAX_VARINT, MAX_VARINT_BYTES
from ..errors import DecompressionError, FormatError, TruncatedInputError


def read_exact(f, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise TruncatedInputError."""
    data = f.read(size)
    if len(data) < size:
        raise TruncatedInputError(
            f"Unexpected end of stream: expected {size} bytes, got {len(data)}"
        )
    return data


# Varints

def encode_varint(value: int) -> bytes:
    if value < 0 or value > MAX_VARINT:
        raise ValueError(f"Varint out of range: {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def write_varint(f, value: int) -> None:
    f.write(encode_varint(value))


def read_varint(f) -> int:
    """Read a varint from a stream.

    Raises:
        TruncatedInputError: If the stream ends before the terminating byte
        FormatError: If the varint is longer than MAX_VARINT_BYTES
    """
    result = 0
    shift = 0
    for _ in range(MAX_VARINT_BYTES):
        b = f.read(1)
        if not b:
            raise TruncatedInputError("Unexpected end of stream inside a varint")
        byte = b[0]
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            if result > MAX_VARINT:
                raise FormatError(f"Varint out of range: {result}")
            return result
        shift += 7
    raise FormatError(f"Varint too long: more than {MAX_VARINT_BYTES} bytes")


# Fixed width

def write_int32(f, value: int) -> None:
    f.write(struct.pack('<i', value))


def read_int32(f) -> int:
    return struct.unpack('<i', read_exact(f, 4))[0]


def write_int64(f, value: int) -> None:
    f.write(struct.pack('<q', value))


def read_int64(f) -> int:
    return struct.unpack('<q', read_exact(f, 8))[0]


def write_bool(f, value: bool) -> None:
    f.write(b'\x01' if value else b'\x00')


def read_bool(f) -> bool:
    return read_exact(f, 1) != b'\x00'


# Strings

def write_string(f, text: str, encoding: str = ENCODING) -> None:
    data = text.encode(encoding)
    write_varint(f, len(data))
    f.write(data)


def read_string(f, encoding: str = ENCODING) -> str:
    length = read_varint(f)
    if length == 0:
        return ''
    data = read_exact(f, length)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise FormatError(f"Invalid {encoding} string data: {e}") from e


def compress_text(text: str, encoding: str = ENCODING) -> bytes:
    return gzip.compress(text.encode(encoding))


def decompress_text(data: bytes, encoding: str = ENCODING) -> str:
    try:
        raw = gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise DecompressionError(f"Invalid compressed string payload: {e}") from e
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise DecompressionError(f"Decompressed payload is not valid {encoding}: {e}") from e


def write_compressed_string(f, text: str, encoding: str = ENCODING) -> None:
    """Write a length-prefixed gzip payload.

    The empty string is written as a bare zero length so that it reads back
    the same way as with write_string.
    """
    if not text:
        write_varint(f, 0)
        return
    data = compress_text(text, encoding)
    write_varint(f, len(data))
    f.write(data)


def read_compressed_string(f, encoding: str = ENCODING) -> str:
    length = read_varint(f)
    if length == 0:
        return ''
    return decompress_text(read_exact(f, length), encoding)
