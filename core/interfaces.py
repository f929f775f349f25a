# core/interfaces.py
"""
Stable abstractions the rest of the app depends on.
The orchestrator and file processor import only these interfaces,
not any concrete PDF/DOCX/spreadsheet libraries.

Design notes:
- Each interface has one clear purpose.
- New formats plug in by implementing TextExtractor and registering it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Protocol

from .models import GeneratedReport, TextUnit

__all__ = ["TextExtractor", "ReportWriter"]


class TextExtractor(ABC):
    """
    Turns a file into a sequence of located TextUnits. Read-only: never
    mutates the file.
    """

    @abstractmethod
    def file_type(self) -> str:
        """Label used in reports, e.g. "PDF" or "Excel"."""
        raise NotImplementedError

    @abstractmethod
    def supports(self) -> Iterable[str]:
        """
        Return the file extensions this extractor can handle.
        Example: [".pdf"] or [".xlsx", ".xls"]

        The orchestrator builds a lookup from extension -> extractor.
        """
        raise NotImplementedError

    @abstractmethod
    def extract(self, path: Path) -> List[TextUnit]:
        """
        Produce the file's TextUnits in document order.

        Raise ExtractionWarning (EmptyDocumentError / NoSheetsError) when the
        file holds nothing to search, and ExtractionError when it cannot be
        decoded. Library resources must be released on every path.
        """
        raise NotImplementedError


class ReportWriter(Protocol):
    """
    Sink for a finished run (text, JSON or CSV exporters).
    Any object with a compatible 'write' method qualifies.
    """

    def write(self, report: GeneratedReport) -> None: ...
