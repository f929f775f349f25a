# services/file_processor.py
"""
Runs one file through its extractor and the snippet finder for every
search term, and returns the structured FileResult together with the
lines the text report needs.

Failure handling:
- ExtractionWarning (empty document, no sheets): status WARNING, no search.
- ExtractionError (decode failure): status ERROR; nothing found before the
  failure is kept.
Anything else propagates to the orchestrator's safety net.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from core.errors import ExtractionError, ExtractionWarning
from core.interfaces import TextExtractor
from core.models import FileResult, FileStatus, ProcessOutcome, TextUnit
from core.snippets import find_snippets

log = logging.getLogger(__name__)

BRANCH = "  └─ "


class FileProcessor:
    """
    Binds an extractor to the search step.

    Usage:
        outcome = FileProcessor(PdfExtractor()).process(path, ["foo"], 240)
    """

    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    @property
    def file_type(self) -> str:
        return self._extractor.file_type()

    def process(self, path: Path, terms: Sequence[str], context_chars: int) -> ProcessOutcome:
        name = path.name
        file_type = self.file_type

        try:
            units = self._extractor.extract(path)
        except ExtractionWarning as warn:
            detail = str(warn)
            log.warning("%s (%s): %s", name, file_type, detail)
            return ProcessOutcome(
                result=FileResult.failed(name, file_type, FileStatus.WARNING, detail),
                problem_lines=[f"File: '{name}' ({file_type}) -> Warning: {detail}"],
            )
        except ExtractionError as exc:
            detail = str(exc)
            log.warning("%s (%s) could not be read: %s", name, file_type, detail)
            return ProcessOutcome(
                result=FileResult.failed(name, file_type, FileStatus.ERROR, detail),
                problem_lines=[
                    f"File: '{name}' -> ERROR: Could not process as {file_type}. Reason: {detail}"
                ],
            )

        result = FileResult(file_name=name, file_type=file_type)
        lines: List[str] = []
        for unit in units:
            for term in terms:
                self._search_unit(unit, term, context_chars, result, lines)

        log.debug("%s (%s): %d unit(s), %d match(es)", name, file_type, len(units), result.total_matches)
        return ProcessOutcome(result=result, occurrence_lines=lines)

    def _search_unit(
        self,
        unit: TextUnit,
        term: str,
        context_chars: int,
        result: FileResult,
        lines: List[str],
    ) -> None:
        occurrences = find_snippets(unit.content, term, context_chars)
        if not occurrences:
            return

        snippets = [o.snippet for o in occurrences]
        if unit.location:
            header = f"File: '{result.file_name}' ({result.file_type}), {unit.location} -> Found: '{term}'"
            stored = [f"[{unit.location}] {s}" for s in snippets]
        else:
            header = f"File: '{result.file_name}' ({result.file_type}) -> Found: '{term}'"
            stored = snippets

        lines.append(header)
        lines.extend(BRANCH + s for s in snippets)
        lines.append("")
        result.add_matches(term, stored)
