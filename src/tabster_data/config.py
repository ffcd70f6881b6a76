"""Configuration management for Tabster Data.

Handles saving and loading user preferences such as the default library
location, the text encodings used for new files and whether tablature
contents are stored compressed.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.tabster on all platforms)
    """
    config_dir = Path.home() / ".tabster"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / ".tabster_config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "library": {
            # Library index opened when no path is given on the command line
            "path": "",
        },
        "encoding": {
            # Encoding for imported text files
            "text": "utf-8",
            # Encoding written to new library files
            "index": "ISO-8859-1",
        },
        "tablature": {
            # Store tab contents gzip-compressed (sets the header flag)
            "compress_contents": False,
            "default_type": "Guitar Tab",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: TOML file to use. Defaults to ~/.tabster/.tabster_config.toml
        """
        self.config_path = Path(config_path) if config_path is not None else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Error loading config %s: %s", self.config_path, e)
            return False

        # Merge with defaults (in case new keys were added)
        self._merge_config(self.data, loaded_data)
        self._dirty = False
        return True

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_path, e)
            return False
        self._dirty = False
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        return self._dirty

    # Library settings
    def get_library_path(self) -> str:
        """Get the default library index path ("" if unset)."""
        return self.data["library"]["path"]

    def set_library_path(self, path: str) -> None:
        self.data["library"]["path"] = str(path)
        self._dirty = True

    # Encoding settings
    def get_text_encoding(self) -> str:
        return self.data["encoding"]["text"]

    def set_text_encoding(self, encoding: str) -> None:
        """Set the encoding used to read imported text files.

        Raises:
            LookupError: If Python does not know the encoding
        """
        "".encode(encoding)
        self.data["encoding"]["text"] = encoding
        self._dirty = True

    def get_index_encoding(self) -> str:
        return self.data["encoding"]["index"]

    def set_index_encoding(self, encoding: str) -> None:
        "".encode(encoding)
        self.data["encoding"]["index"] = encoding
        self._dirty = True

    # Tablature settings
    def get_compress_contents(self) -> bool:
        return bool(self.data["tablature"]["compress_contents"])

    def set_compress_contents(self, compress: bool) -> None:
        self.data["tablature"]["compress_contents"] = bool(compress)
        self._dirty = True

    def get_default_type(self) -> str:
        return self.data["tablature"]["default_type"]

    def set_default_type(self, type_name: str) -> None:
        if not type_name:
            raise ValueError("Tablature type must not be empty")
        self.data["tablature"]["default_type"] = type_name
        self._dirty = True
