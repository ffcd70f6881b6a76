"""Exceptions raised while reading and writing Tabster files.

The classes derive from the built-in exceptions callers already expect
from file parsing (``ValueError`` for bad data, ``EOFError`` for short
reads), so ``except ValueError`` keeps working for code that does not
care about the finer distinctions.
"""


class TabsterDataError(Exception):
    """Base class for all Tabster data errors."""


class FormatError(TabsterDataError, ValueError):
    """The file content does not follow the expected format."""


class FormatMismatchError(FormatError):
    """The magic identifier does not match the format being read."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Not a {expected} file: magic identifier is {actual!r}, expected {expected!r}"
        )


class TruncatedInputError(TabsterDataError, EOFError):
    """The stream ended before a declared field or length was satisfied."""


class DecompressionError(FormatError):
    """A compressed payload is not a complete gzip stream."""


class UnsupportedVersionError(FormatError):
    """Raised by the version policy, never by the codecs themselves."""

    def __init__(self, version, current):
        self.version = version
        self.current = current
        super().__init__(
            f"Unsupported format version {version}; this build reads up to {current}"
        )
