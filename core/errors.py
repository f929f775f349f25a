# core/errors.py
"""
Error vocabulary shared by extractors, processors and the orchestrator.

Taxonomy:
- DirectoryAccessError: fatal, aborts the whole run.
- ExtractionWarning (EmptyDocumentError, NoSheetsError): the file was read
  but holds nothing to search; the run records a warning.
- ExtractionError: the file could not be decoded; the run records an error.
- UploadRejectedError: raised by the intake boundary only.
"""

from __future__ import annotations


class LookoutError(Exception):
    """Base class for every error raised on purpose by this app."""


class DirectoryAccessError(LookoutError):
    """The input directory could not be listed."""

    def __init__(self, folder: str, reason: str) -> None:
        super().__init__(
            f"Could not access the upload directory '{folder}'. "
            f"Check permissions or whether the path is correct. {reason}"
        )
        self.folder = folder
        self.reason = reason


class ExtractionError(LookoutError):
    """A file could not be decoded by its format library."""

    def __init__(self, file_type: str, reason: str) -> None:
        super().__init__(f"Could not read {file_type} file: {reason}")
        self.file_type = file_type
        self.reason = reason


class ExtractionWarning(LookoutError):
    """A file was decoded but holds no searchable text. str(exc) is the reason."""


class EmptyDocumentError(ExtractionWarning):
    pass


class NoSheetsError(ExtractionWarning):
    pass


class UploadRejectedError(LookoutError):
    """Uploaded batch violates the intake limits."""
