# services/orchestrator.py
"""
High-level coordinator: lists the upload directory, routes each file to
the file processor for its extension, merges every outcome into one
RunContext and renders both report artifacts.

This module depends only on:
- core.interfaces + core.models (abstractions)
- core.registry (to discover extractors)
- utils.path_utils (directory listing)
- services.file_processor / services.report_text

It does not reference concrete extractor classes; importing the
`processors` package is what registers the built-in ones.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import processors  # noqa: F401  (self-registers the built-in extractors)
from core.interfaces import TextExtractor
from core.models import FileResult, FileStatus, GeneratedReport, ProcessOutcome, RunContext
from core.registry import extractors as registered_extractors
from services.file_processor import FileProcessor
from services.report_text import render_text_report
from utils.path_utils import list_directory, suffix_lower

log = logging.getLogger(__name__)

DEFAULT_CONTEXT_CHARS = 240

# A tiny type alias for a UI-friendly progress callback:
# on_progress(current_index, total_files, current_path)
ProgressFn = Callable[[int, int, Path], None]


class Orchestrator:
    """
    Coordinates one search run. Holds no state between runs; everything a
    run accumulates lives in the RunContext it creates.

    Usage:
        orchestrator = Orchestrator(on_progress=my_progress_fn)
        report = orchestrator.generate_report("/tmp/uploads/123", ["invoice"])
    """

    def __init__(
        self,
        on_progress: Optional[ProgressFn] = None,
        extractors: Optional[Iterable[TextExtractor]] = None,
    ) -> None:
        self._on_progress = on_progress
        self._index = self._index_extractors(
            registered_extractors() if extractors is None else extractors
        )

    @property
    def supported_extensions(self) -> List[str]:
        return list(self._index)

    def generate_report(
        self,
        folder: str | Path,
        terms: Sequence[str],
        context_chars: int = DEFAULT_CONTEXT_CHARS,
    ) -> GeneratedReport:
        """
        Search every supported file in 'folder' for 'terms'.

        Raises DirectoryAccessError if the folder cannot be listed; every
        per-file failure is recorded in the report instead.
        """
        file_list = list_directory(folder)
        total = len(file_list)
        ctx = RunContext(
            search_terms=list(terms),
            context_chars=context_chars,
            supported_extensions=self.supported_extensions,
        )
        log.info("Searching %d file(s) in %s for %d term(s)", total, folder, len(ctx.search_terms))

        for i, fpath in enumerate(file_list, start=1):
            # Inform the UI about progress if a callback was provided
            if self._on_progress:
                self._on_progress(i, total, fpath)

            ext = suffix_lower(fpath.name)
            processor = self._index.get(ext)
            if processor is None:
                ctx.ignore(fpath.name)
                continue

            ctx.merge(self._safe_process(processor, fpath, ext, ctx))

        summary = ctx.to_summary()
        log.info(
            "Search finished: %d file(s), %d match(es), %d problem(s), %d ignored",
            summary.total_files,
            summary.total_matches,
            summary.with_problems,
            summary.ignored,
        )
        return GeneratedReport(text_report=render_text_report(ctx), summary=summary)

    # ---------- helpers ----------

    def _index_extractors(self, items: Iterable[TextExtractor]) -> Dict[str, FileProcessor]:
        """
        Build a mapping of extension -> file processor for O(1) routing.
        If multiple extractors claim the same extension, the last one wins.
        """
        index: Dict[str, FileProcessor] = {}
        for extractor in items:
            processor = FileProcessor(extractor)
            for ext in extractor.supports():
                index[ext.lower()] = processor
        return index

    def _safe_process(
        self, processor: FileProcessor, fpath: Path, ext: str, ctx: RunContext
    ) -> ProcessOutcome:
        """
        Run the file processor and turn anything it failed to handle into a
        synthetic ERROR result, so one bad file never aborts the run.
        """
        try:
            return processor.process(fpath, ctx.search_terms, ctx.context_chars)
        except Exception as exc:
            detail = str(exc) or exc.__class__.__name__
            log.exception("Unexpected failure while processing %s", fpath.name)
            return ProcessOutcome(
                result=FileResult.failed(fpath.name, ext, FileStatus.ERROR, detail),
                problem_lines=[
                    f"File: '{fpath.name}' -> CRITICAL ERROR: Processing failed. Reason: {detail}"
                ],
            )


def generate_report(
    folder: str | Path,
    terms: Sequence[str],
    context_chars: int = DEFAULT_CONTEXT_CHARS,
) -> GeneratedReport:
    """Run a search with the built-in extractors and no progress reporting."""
    return Orchestrator().generate_report(folder, terms, context_chars)
