"""
Path helpers for config files.
"""

from __future__ import annotations

import os
from pathlib import Path


def path_exists(path: Path | str) -> bool:
    """Return whether *path* exists.

    Only "not found" counts as absence. Any other stat failure
    (permission denied, I/O error, ...) is raised to the caller.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def file_extension(path: Path | str) -> str:
    """Return the text after the final ``.`` of the file name, as given.

    ``config.JSON`` gives ``"JSON"``, ``config`` gives ``""`` and a bare
    dotfile such as ``.json`` gives ``"json"``.
    """
    base = os.path.basename(os.fspath(path))
    _, dot, ext = base.rpartition(".")
    return ext if dot else ""
