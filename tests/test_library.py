"""Tests for the library index document."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from conftest import write_manifest
from tabster_data.binary.header import FormatVersion
from tabster_data.binary.tablature import TablatureFile
from tabster_data.errors import FormatError, FormatMismatchError
from tabster_data.library import PlaylistLibraryItem, SkippedReference, TablatureLibraryItem
from tabster_data.xml.library import LibraryDocument
from tabster_data.xml.playlist import PlaylistFile


def saved_paths(path, collection, tag):
    root = ET.parse(path).getroot()
    return [node.text for node in root.find(collection).findall(tag)]


class TestLibraryItems:
    """Test library entry classes."""

    def test_tablature_defaults(self, tmp_path):
        item = TablatureLibraryItem(None, tmp_path / "a.tabster")
        assert item.favorited is False
        assert item.views == 0
        assert item.path == str(tmp_path / "a.tabster")

    def test_negative_views_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            TablatureLibraryItem(None, tmp_path / "a.tabster", views=-1)

    def test_add_view(self, tmp_path):
        item = TablatureLibraryItem(None, tmp_path / "a.tabster", views=2)
        assert item.add_view() == 3

    def test_playlist_path_made_absolute(self):
        item = PlaylistLibraryItem(None, "relative.tablist")
        assert item.path.endswith("relative.tablist")
        assert item.path != "relative.tablist"


class TestLibraryLoad:
    """Test loading library indices."""

    def test_missing_reference_dropped(self, tab_dir, tmp_path):
        """Test one existing and one missing tab yields exactly one entry."""
        existing = tab_dir / "paradise_city.tabster"
        missing = tab_dir / "gone.tabster"
        index = write_manifest(tmp_path / "library.tablib", tabs=[existing, (missing, {"favorite": "True"})])

        library = LibraryDocument()
        library.load(index)

        assert len(library.tablature_items) == 1
        item = library.tablature_items[0]
        assert item.path == str(existing)
        assert item.document.title == "Paradise City"
        assert item.favorited is False
        assert item.views == 0
        assert library.skipped == [SkippedReference(str(missing), "tablature", "file not found")]

    def test_metadata_attributes(self, tab_dir, tmp_path):
        index = write_manifest(
            tmp_path / "library.tablib",
            tabs=[(tab_dir / "one.tabster", {"favorite": "True", "views": "12"})],
        )
        item = LibraryDocument.read(index).tablature_items[0]
        assert item.favorited is True
        assert item.views == 12

    def test_lowercase_bool(self, tab_dir, tmp_path):
        index = write_manifest(
            tmp_path / "library.tablib", tabs=[(tab_dir / "one.tabster", {"favorite": "true"})]
        )
        assert LibraryDocument.read(index).tablature_items[0].favorited is True

    def test_order_preserved(self, tab_dir, tmp_path):
        paths = [tab_dir / "one.tabster", tab_dir / "paradise_city.tabster"]
        index = write_manifest(tmp_path / "library.tablib", tabs=paths)
        library = LibraryDocument.read(index)
        assert [item.path for item in library.tablature_items] == [str(p) for p in paths]

    def test_header_and_attributes(self, tab_dir, tmp_path):
        index = write_manifest(tmp_path / "library.tablib", tabs=[tab_dir / "one.tabster"])
        library = LibraryDocument()
        header = library.load(index)
        assert header.version == FormatVersion(1, 0)
        assert header.compressed is False
        assert library.file_header == header
        assert library.file_attributes.encoding == "ISO-8859-1"
        assert library.file_attributes.created.tzinfo == timezone.utc

    def test_version_read_from_root(self, tmp_path):
        index = write_manifest(tmp_path / "library.tablib", version="1.3")
        assert LibraryDocument.read(index).file_header.version == FormatVersion(1, 3)

    def test_utf8_declaration(self, tmp_path):
        index = write_manifest(tmp_path / "library.tablib", encoding="UTF-8")
        assert LibraryDocument.read(index).file_attributes.encoding == "UTF-8"

    def test_relative_paths_resolved_against_index(self, tab_dir, tmp_path):
        index = write_manifest(tmp_path / "library.tablib", tabs=["tabs/one.tabster"])
        library = LibraryDocument.read(index)
        assert library.tablature_items[0].path == str(tab_dir / "one.tabster")

    def test_playlists(self, tab_dir, tmp_path):
        playlist_path = tmp_path / "warmups.tablist"
        PlaylistFile("Warmups", [tab_dir / "one.tabster"]).save(playlist_path)
        index = write_manifest(
            tmp_path / "library.tablib",
            playlists=[playlist_path, tmp_path / "missing.tablist"],
        )
        library = LibraryDocument.read(index)
        assert len(library.playlist_items) == 1
        assert library.playlist_items[0].document.name == "Warmups"
        assert library.skipped[0].kind == "playlist"

    def test_load_replaces_previous_contents(self, tab_dir, tmp_path):
        library = LibraryDocument()
        library.add_tablature(TablatureFile(), tab_dir / "one.tabster")
        index = write_manifest(tmp_path / "library.tablib", tabs=[tab_dir / "paradise_city.tabster"])
        library.load(index)
        assert [item.document.title for item in library.tablature_items] == ["Paradise City"]

    def test_unreadable_reference_skipped(self, tab_dir, tmp_path):
        broken = tab_dir / "broken.tabster"
        broken.write_bytes(b"garbage")
        index = write_manifest(tmp_path / "library.tablib", tabs=[broken, tab_dir / "one.tabster"])
        library = LibraryDocument.read(index)
        assert len(library.tablature_items) == 1
        assert library.skipped[0].path == str(broken)
        assert "TABSTER" in library.skipped[0].reason

    def test_unreadable_reference_strict(self, tab_dir, tmp_path):
        broken = tab_dir / "broken.tabster"
        broken.write_bytes(b"garbage")
        index = write_manifest(tmp_path / "library.tablib", tabs=[broken])
        with pytest.raises(FormatMismatchError):
            LibraryDocument.read(index, strict=True)

    def test_failed_load_keeps_previous_contents(self, tab_dir, tmp_path):
        library = LibraryDocument.read(
            write_manifest(tmp_path / "good.tablib", tabs=[tab_dir / "one.tabster"])
        )
        bad = write_manifest(
            tmp_path / "bad.tablib", tabs=[(tab_dir / "one.tabster", {"views": "lots"})]
        )
        with pytest.raises(FormatError):
            library.load(bad)
        assert len(library.tablature_items) == 1

    def test_invalid_favorite(self, tab_dir, tmp_path):
        index = write_manifest(
            tmp_path / "library.tablib", tabs=[(tab_dir / "one.tabster", {"favorite": "maybe"})]
        )
        with pytest.raises(FormatError):
            LibraryDocument.read(index)

    def test_wrong_root(self, tmp_path):
        path = tmp_path / "other.xml"
        path.write_text("<?xml version='1.0'?><catalog version='1.0'/>")
        with pytest.raises(FormatMismatchError):
            LibraryDocument.read(path)

    def test_malformed_xml(self, tmp_path):
        path = tmp_path / "broken.tablib"
        path.write_text("<library version='1.0'><tabs>")
        with pytest.raises(FormatError):
            LibraryDocument.read(path)

    def test_missing_index(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LibraryDocument.read(tmp_path / "nope.tablib")

    def test_missing_collections(self, tmp_path):
        path = tmp_path / "empty.tablib"
        path.write_text("<?xml version='1.0' encoding='utf-8'?><library version='1.0'/>")
        library = LibraryDocument.read(path)
        assert library.tablature_items == ()
        assert library.playlist_items == ()

    def test_custom_loader(self, tab_dir, tmp_path):
        seen = []

        def loader(path):
            seen.append(path)
            return "stub"

        index = write_manifest(tmp_path / "library.tablib", tabs=[tab_dir / "one.tabster"])
        library = LibraryDocument(tablature_loader=loader)
        library.load(index)
        assert seen == [str(tab_dir / "one.tabster")]
        assert library.tablature_items[0].document == "stub"


class TestLibrarySave:
    """Test saving library indices."""

    def test_roundtrip_stability(self, tab_dir, tmp_path):
        """Test save after load keeps node count and paths."""
        playlist_path = tmp_path / "warmups.tablist"
        PlaylistFile("Warmups").save(playlist_path)
        tabs = [tab_dir / "paradise_city.tabster", tab_dir / "one.tabster"]
        index = write_manifest(tmp_path / "library.tablib", tabs=tabs, playlists=[playlist_path])

        library = LibraryDocument.read(index)
        out = tmp_path / "saved.tablib"
        library.save(out)

        assert saved_paths(out, "tabs", "tab") == [str(p) for p in tabs]
        assert saved_paths(out, "playlists", "playlist") == [str(playlist_path)]

    def test_metadata_written(self, tab_dir, tmp_path):
        library = LibraryDocument()
        library.add_tablature(TablatureFile(), tab_dir / "one.tabster", favorited=True, views=4)
        out = tmp_path / "library.tablib"
        library.save(out)

        node = ET.parse(out).getroot().find("tabs").find("tab")
        assert node.get("favorite") == "True"
        assert node.get("views") == "4"

        reloaded = LibraryDocument.read(out).tablature_items[0]
        assert reloaded.favorited is True
        assert reloaded.views == 4

    def test_version_attribute(self, tmp_path):
        out = tmp_path / "library.tablib"
        LibraryDocument().save(out)
        assert ET.parse(out).getroot().get("version") == "1.0"

    def test_header_refreshed(self, tmp_path):
        index = write_manifest(tmp_path / "library.tablib", version="1.0")
        library = LibraryDocument.read(index)
        before = datetime.now(timezone.utc)
        library.save(tmp_path / "saved.tablib")
        assert library.file_header.version == FormatVersion(1, 0)
        assert library.file_attributes.created >= before

    def test_default_encoding_for_new_library(self, tmp_path):
        out = tmp_path / "library.tablib"
        library = LibraryDocument()
        library.save(out)
        assert library.file_attributes.encoding == "ISO-8859-1"
        assert out.read_bytes().startswith(b"<?xml version='1.0' encoding='ISO-8859-1'?>")

    def test_encoding_preserved(self, tmp_path):
        index = write_manifest(tmp_path / "library.tablib", encoding="UTF-8")
        library = LibraryDocument.read(index)
        out = tmp_path / "saved.tablib"
        library.save(out)
        assert library.file_attributes.encoding == "UTF-8"
        assert b"encoding='UTF-8'" in out.read_bytes()[:60]

    def test_no_existence_check(self, tmp_path):
        """Test that entries added in memory are saved even if their file is gone."""
        library = LibraryDocument()
        library.add_tablature(TablatureFile(), tmp_path / "never_written.tabster")
        out = tmp_path / "library.tablib"
        library.save(out)
        assert saved_paths(out, "tabs", "tab") == [str(tmp_path / "never_written.tabster")]

    def test_non_latin_path(self, tmp_path):
        library = LibraryDocument()
        library.add_tablature(TablatureFile(), tmp_path / "日本.tabster")
        out = tmp_path / "library.tablib"
        library.save(out)
        assert saved_paths(out, "tabs", "tab") == [str(tmp_path / "日本.tabster")]


class TestLibraryMutation:
    """Test in-memory changes to the library."""

    def test_add_find_remove(self, tmp_path):
        library = LibraryDocument()
        tab = TablatureFile(title="One")
        library.add_tablature(tab, tmp_path / "one.tabster")
        assert library.find_tablature(tmp_path / "one.tabster").document is tab
        assert library.remove_tablature(tmp_path / "one.tabster") is True
        assert library.remove_tablature(tmp_path / "one.tabster") is False
        assert library.tablature_items == ()

    def test_playlists(self, tmp_path):
        library = LibraryDocument()
        library.add_playlist(PlaylistFile("Set"), tmp_path / "set.tablist")
        assert len(library.playlist_items) == 1
        assert library.remove_playlist(tmp_path / "set.tablist") is True
        assert library.remove_playlist(tmp_path / "set.tablist") is False

    def test_items_are_read_only(self):
        library = LibraryDocument()
        with pytest.raises(AttributeError):
            library.tablature_items.append(None)  # type: ignore[attr-defined]
