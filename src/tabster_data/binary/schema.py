"""Declarative field layouts for binary documents.

A format is described as an ordered tuple of :class:`FieldSpec`; the same
schema drives both writing and reading, so the two can never disagree on
field order or codec.
"""

from typing import Any, Callable, Dict, Iterable, NamedTuple

from ..constants import ENCODING
from . import stream

INT32 = 'int32'
INT64 = 'int64'
BOOL = 'bool'
STRING = 'string'
COMPRESSED_STRING = 'compressed_string'

# kind -> (writer, reader)
_STRING_CODECS = {
    STRING: (stream.write_string, stream.read_string),
    COMPRESSED_STRING: (stream.write_compressed_string, stream.read_compressed_string),
}
_FIXED_CODECS = {
    INT32: (stream.write_int32, stream.read_int32),
    INT64: (stream.write_int64, stream.read_int64),
    BOOL: (stream.write_bool, stream.read_bool),
}


class FieldSpec(NamedTuple):
    name: str
    kind: str

    def writer(self, encoding: str = ENCODING) -> Callable[[Any, Any], None]:
        if self.kind in _STRING_CODECS:
            write = _STRING_CODECS[self.kind][0]
            return lambda f, value: write(f, value, encoding)
        if self.kind in _FIXED_CODECS:
            return _FIXED_CODECS[self.kind][0]
        raise ValueError(f"Unknown field kind {self.kind!r} for field {self.name!r}")

    def reader(self, encoding: str = ENCODING) -> Callable[[Any], Any]:
        if self.kind in _STRING_CODECS:
            read = _STRING_CODECS[self.kind][1]
            return lambda f: read(f, encoding)
        if self.kind in _FIXED_CODECS:
            return _FIXED_CODECS[self.kind][1]
        raise ValueError(f"Unknown field kind {self.kind!r} for field {self.name!r}")


def write_fields(f, schema: Iterable[FieldSpec], values: Dict[str, Any],
                 encoding: str = ENCODING) -> None:
    """Write ``values`` in schema order. Every field is required."""
    for spec in schema:
        if spec.name not in values:
            raise KeyError(f"Missing value for field {spec.name!r}")
        spec.writer(encoding)(f, values[spec.name])


def read_fields(f, schema: Iterable[FieldSpec], encoding: str = ENCODING) -> Dict[str, Any]:
    """Read every field of ``schema`` and return them by name.

    Nothing is returned unless all fields were read; errors from the
    individual readers propagate unchanged.
    """
    values = {}
    for spec in schema:
        values[spec.name] = spec.reader(encoding)(f)
    return values
