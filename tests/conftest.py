"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from tabster_data.binary.tablature import TablatureFile, TablatureSourceType


def write_manifest(path, tabs=(), playlists=(), version="1.0", encoding="ISO-8859-1"):
    """Write a library manifest by hand.

    ``tabs`` holds either plain paths or (path, {attribute: value}) pairs.
    """
    lines = [f'<?xml version="1.0" encoding="{encoding}"?>', f'<library version="{version}">', "  <tabs>"]
    for tab in tabs:
        if isinstance(tab, tuple):
            tab_path, attrs = tab
            attr_text = "".join(f' {k}="{v}"' for k, v in attrs.items())
        else:
            tab_path, attr_text = tab, ""
        lines.append(f"    <tab{attr_text}>{tab_path}</tab>")
    lines.append("  </tabs>")
    lines.append("  <playlists>")
    for playlist in playlists:
        lines.append(f"    <playlist>{playlist}</playlist>")
    lines.append("  </playlists>")
    lines.append("</library>")
    path.write_bytes("\n".join(lines).encode(encoding))
    return path


@pytest.fixture
def sample_tab():
    """Create a sample TablatureFile for testing."""
    return TablatureFile(
        artist="Slash",
        title="Paradise City",
        type="Guitar Tab",
        source_type=TablatureSourceType.FILE_IMPORT,
        source="http://example.com/tab",
        comment="",
        contents="e|---|",
        created=datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc),
    )


@pytest.fixture
def tab_dir(tmp_path):
    """Create a directory holding two saved tablature files."""
    directory = tmp_path / "tabs"
    directory.mkdir()
    TablatureFile(artist="Slash", title="Paradise City", contents="e|---|").save(
        directory / "paradise_city.tabster"
    )
    TablatureFile(artist="Metallica", title="One", contents="E|-0-|").save(
        directory / "one.tabster"
    )
    return directory
