# Binary tablature format
# The magic string is written as a length-prefixed UTF-8 string, followed by
# the version (two int32, major then minor) and a single compression byte.
TABLATURE_MAGIC = "TABSTER"
TABLATURE_VERSION = (1, 0)

# XML formats
LIBRARY_ROOT = "library"
LIBRARY_VERSION = (1, 0)
PLAYLIST_ROOT = "tablatureplaylist"
PLAYLIST_VERSION = (1, 0)

# Extension given to imported files when no output name is given
TABLATURE_EXTENSION = ".tabster"

# Strings inside binary files are always UTF-8
ENCODING = "utf-8"

# Encoding written to library files that have no previously recorded encoding
DEFAULT_INDEX_ENCODING = "ISO-8859-1"

# Varints are limited to unsigned 64-bit values (10 groups of 7 bits)
MAX_VARINT = 2**64 - 1
MAX_VARINT_BYTES = 10
