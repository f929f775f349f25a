# services/intake.py
"""
Boundary helpers between the UI and the search core.

The core only ever sees a directory of regular files, a list of terms and
a valid context width. Everything that turns raw user input into those
lives here: term parsing, context clamping, writing uploads to a
per-request scratch directory, and removing that directory afterwards.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Protocol

from core.errors import UploadRejectedError

log = logging.getLogger(__name__)


class UploadedFile(Protocol):
    """Structural type matching Streamlit's UploadedFile."""

    name: str

    def getvalue(self) -> bytes: ...


def clamp_context_chars(raw: Any, default: int = 240, maximum: int = 1000) -> int:
    """
    Parse the requested context width. Anything that is not an integer in
    [0, maximum] falls back to 'default'.
    """
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    if value < 0 or value > maximum:
        return default
    return value


def parse_search_terms(raw: Optional[str], separator: str = ";") -> List[str]:
    """Split on 'separator', trim, drop empties. Order and duplicates are kept."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(separator) if part.strip()]


@contextmanager
def scratch_directory(base_dir: Optional[Path | str] = None) -> Iterator[Path]:
    """
    Create a unique directory for one request and remove it on exit,
    whether the body succeeds or raises.
    """
    if base_dir is not None:
        Path(base_dir).mkdir(parents=True, exist_ok=True)
    path = Path(tempfile.mkdtemp(prefix="lookout-", dir=base_dir))
    log.debug("Created scratch directory %s", path)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        log.debug("Removed scratch directory %s", path)


def save_uploads(
    files: Iterable[UploadedFile],
    dest: Path,
    max_files: int = 200,
    max_file_bytes: int = 128 * 1024 * 1024,
) -> List[Path]:
    """
    Write uploaded files into 'dest' as regular files, keeping only their base
    name. Raises UploadRejectedError when the batch breaks a limit; nothing is
    written in that case.
    """
    batch = list(files)
    if not batch:
        raise UploadRejectedError("No files were selected.")
    if len(batch) > max_files:
        raise UploadRejectedError(f"Too many files: {len(batch)} (limit {max_files}).")

    payloads = []
    for f in batch:
        data = f.getvalue()
        if len(data) > max_file_bytes:
            raise UploadRejectedError(
                f"File '{f.name}' is larger than {max_file_bytes // (1024 * 1024)} MB."
            )
        name = Path(f.name).name
        if not name or name in {".", ".."}:
            raise UploadRejectedError(f"Invalid file name: {f.name!r}")
        payloads.append((name, data))

    written: List[Path] = []
    for name, data in payloads:
        target = dest / name
        target.write_bytes(data)
        written.append(target)
    log.info("Saved %d upload(s) to %s", len(written), dest)
    return written
