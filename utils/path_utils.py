# utils/path_utils.py
"""
Path utilities: list the files of one upload directory.

Goals:
- Single responsibility: file discovery only (no parsing, no UI).
- Flat listing: the intake layer puts every upload directly inside the
  scratch directory, so subdirectories are not walked.
- Keep the filesystem's own order; the orchestrator processes files in it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from core.errors import DirectoryAccessError


def list_directory(root: Path | str) -> List[Path]:
    """
    Return the regular files directly inside 'root', in listing order.

    Raises DirectoryAccessError if the directory cannot be read. A file that
    disappears or cannot be stat'ed mid-listing is skipped.
    """
    root_path = Path(root)
    try:
        with os.scandir(root_path) as it:
            entries = list(it)
    except OSError as exc:
        raise DirectoryAccessError(str(root_path), exc.strerror or str(exc)) from exc

    files: List[Path] = []
    for entry in entries:
        try:
            if entry.is_file():
                files.append(root_path / entry.name)
        except OSError:
            continue
    return files


def suffix_lower(filename: str) -> str:
    """
    Lowercase extension including the dot, or "" when there is none.
    Dotfiles such as ".env" have no extension.
    """
    idx = filename.rfind(".")
    if idx <= 0:
        return ""
    return filename[idx:].lower()
