"""Tabster Data.

Readers and writers for Tabster tablature files, playlists and library
indices, with a command-line interface for inspecting and maintaining them.

Sub-packages:
    binary: Binary tablature format (header, string codecs, field schemas)
    xml: XML library index and playlists
    cli: Command-line interface (tabster command)

Core modules:
    config: Configuration management
    constants: Format identifiers and defaults
    errors: Exception hierarchy
    library: Library entries
    processing: Text importers
    utils: Time conversions
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("tabster-data")
except PackageNotFoundError:
    # Package not installed; read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, ValueError):
        __version__ = "unknown"

__all__ = [
    # Sub-packages
    "binary",
    "cli",
    "xml",
    # Core modules
    "config",
    "constants",
    "errors",
    "library",
    "processing",
    "utils",
]
