"""Helpers shared by the XML document formats."""

import logging
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from ..errors import FormatError, FormatMismatchError

logger = logging.getLogger(__name__)

_DECLARATION_ENCODING = re.compile(rb'^\s*<\?xml[^>]*?encoding\s*=\s*["\']([A-Za-z0-9._-]+)["\']')

# Encoding assumed by XML parsers when the declaration names none
XML_DEFAULT_ENCODING = 'utf-8'


@dataclass(frozen=True)
class FileAttributes:
    created: datetime
    encoding: str


def parse_document(path: Union[str, Path], root_tag: str) -> ET.Element:
    """Parse an XML file and return its root element.

    Raises:
        FileNotFoundError: If the file does not exist
        FormatError: If the XML is malformed
        FormatMismatchError: If the root element is not ``root_tag``
    """
    path = Path(path)
    try:
        logger.debug("Parsing XML file: %s", path)
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise FormatError(f"Malformed XML in {path}: {e}") from e
    if root.tag != root_tag:
        raise FormatMismatchError(root_tag, root.tag)
    return root


def declared_encoding(path: Union[str, Path]) -> str:
    """Return the encoding named in the XML declaration, or UTF-8."""
    with open(path, 'rb') as f:
        head = f.read(256)
    if head.startswith(b'\xef\xbb\xbf'):
        head = head[3:]
    match = _DECLARATION_ENCODING.match(head)
    return match.group(1).decode('ascii') if match else XML_DEFAULT_ENCODING


def creation_time(path: Union[str, Path]) -> datetime:
    """Creation time of a file as an aware UTC datetime.

    Uses the birth time where the platform records one, otherwise ctime.
    """
    st = os.stat(path)
    timestamp = getattr(st, 'st_birthtime', None) or st.st_ctime
    return datetime.fromtimestamp(timestamp, timezone.utc)


def child_elements(root: ET.Element, collection: str, tag: str):
    """Yield ``tag`` elements of the ``collection`` child of ``root``."""
    container = root.find(collection)
    if container is None:
        return
    yield from container.findall(tag)


def element_text(element: ET.Element) -> str:
    return (element.text or '').strip()


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse "True"/"False" in any letter case."""
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    raise FormatError(f"Invalid boolean value: {value!r}")


def parse_count(value: Optional[str], default: int = 0) -> int:
    if value is None:
        return default
    try:
        count = int(value.strip())
    except ValueError:
        raise FormatError(f"Invalid count value: {value!r}") from None
    if count < 0:
        raise FormatError(f"Count must not be negative: {value!r}")
    return count


def format_bool(value: bool) -> str:
    return 'True' if value else 'False'


def write_document(root: ET.Element, path: Union[str, Path], encoding: str) -> None:
    tree = ET.ElementTree(root)
    ET.indent(tree)
    with open(path, 'wb') as f:
        tree.write(f, encoding=encoding, xml_declaration=True)
