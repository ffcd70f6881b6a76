"""CLI command implementations.

Each module in this package implements a specific tabster subcommand:
    inspect.py: Show the header and fields of a tablature file
    import_text.py: Import a plain text tab
    library.py: List the entries of a library index
    add.py: Add tablature files to a library index
    validate.py: Check a library index and its references
    config.py: Show or change stored settings
"""

from .add import cmd_add
from .config import cmd_config
from .import_text import cmd_import
from .inspect import cmd_inspect
from .library import cmd_library
from .validate import cmd_validate

__all__ = [
    "cmd_add",
    "cmd_config",
    "cmd_import",
    "cmd_inspect",
    "cmd_library",
    "cmd_validate",
]
