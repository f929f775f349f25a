# core/models.py
"""
Plain data shapes for the app (no UI, no parsing, no I/O).
These are the “contracts” that extractors, the file processor and the
orchestrator speak.

Design goals:
- Minimal and framework-agnostic (easy to test and reason about).
- Immutable where it matters (units, occurrences and the final summary).
- One mutable accumulator per run (RunContext), passed explicitly instead of
  living in module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class FileStatus(Enum):
    """
    Outcome of processing one file. WARNING means the file was read but
    had nothing to search; ERROR means it could not be read at all.
    """
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class FileType:
    """Report labels for the supported formats."""
    PDF = "PDF"
    DOCX = "DOCX"
    EXCEL = "Excel"
    TXT = "TXT"


@dataclass(frozen=True)
class TextUnit:
    """
    Smallest addressable chunk of extracted text.

    Fields:
    - content: raw extracted text, possibly empty.
    - location: human-readable position such as "page 3",
      "sheet 'Sheet1', cell B7" or "line 42". None for whole-document units.
    """
    content: str
    location: Optional[str] = None


@dataclass(frozen=True)
class Occurrence:
    """One case-insensitive match of a term inside a TextUnit."""
    term: str
    position: int
    snippet: str


@dataclass
class TermMatches:
    count: int = 0
    snippets: List[str] = field(default_factory=list)


@dataclass
class FileResult:
    """
    Outcome of processing one input file.

    Invariant: total_matches == sum(m.count for m in matches_by_term.values()).
    Use add_matches() rather than touching the counters directly.
    """
    file_name: str
    file_type: str
    status: FileStatus = FileStatus.SUCCESS
    error_detail: Optional[str] = None
    total_matches: int = 0
    matches_by_term: Dict[str, TermMatches] = field(default_factory=dict)

    def add_matches(self, term: str, snippets: List[str]) -> None:
        if not snippets:
            return
        entry = self.matches_by_term.setdefault(term, TermMatches())
        entry.count += len(snippets)
        entry.snippets.extend(snippets)
        self.total_matches += len(snippets)

    @classmethod
    def failed(cls, file_name: str, file_type: str, status: FileStatus, detail: str) -> "FileResult":
        """A result with no matches and an explanation (warnings and errors)."""
        return cls(file_name=file_name, file_type=file_type, status=status, error_detail=detail)


@dataclass(frozen=True)
class ProcessOutcome:
    """
    What the file processor hands back to the orchestrator:
    the structured result plus the text-report lines it produced.
    """
    result: FileResult
    occurrence_lines: List[str] = field(default_factory=list)
    problem_lines: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ReportSummary:
    """
    Whole-run result. file_results holds only files with matches or with a
    warning/error; files with nothing to report are still counted in the totals.
    """
    total_files: int
    processed: int
    ignored: int
    with_problems: int
    total_matches: int
    matches_by_term: Dict[str, int]
    context_chars: int
    supported_extensions: List[str]
    search_terms: List[str]
    file_results: List[FileResult] = field(default_factory=list)


@dataclass
class RunContext:
    """
    Mutable accumulator for a single run. The orchestrator creates one per
    call and merges every file into it, in processing order.
    """
    search_terms: List[str]
    context_chars: int
    supported_extensions: List[str]
    total_files: int = 0
    processed: int = 0
    with_problems: int = 0
    total_matches: int = 0
    matches_by_term: Dict[str, int] = field(default_factory=dict)
    occurrence_lines: List[str] = field(default_factory=list)
    problem_lines: List[str] = field(default_factory=list)
    ignored_files: List[str] = field(default_factory=list)
    file_results: List[FileResult] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Every requested term is reported, even when never found.
        for term in self.search_terms:
            self.matches_by_term.setdefault(term, 0)

    def ignore(self, file_name: str) -> None:
        self.total_files += 1
        self.ignored_files.append(file_name)

    def merge(self, outcome: ProcessOutcome) -> None:
        result = outcome.result
        self.total_files += 1
        self.occurrence_lines.extend(outcome.occurrence_lines)
        self.problem_lines.extend(outcome.problem_lines)
        self.file_results.append(result)

        if result.status is FileStatus.ERROR:
            self.with_problems += 1
            return

        self.processed += 1
        self.total_matches += result.total_matches
        for term, matches in result.matches_by_term.items():
            self.matches_by_term[term] = self.matches_by_term.get(term, 0) + matches.count

    def to_summary(self) -> ReportSummary:
        reported = [
            r for r in self.file_results
            if r.total_matches > 0 or r.status is not FileStatus.SUCCESS
        ]
        return ReportSummary(
            total_files=self.total_files,
            processed=self.processed,
            ignored=len(self.ignored_files),
            with_problems=self.with_problems,
            total_matches=self.total_matches,
            matches_by_term=dict(self.matches_by_term),
            context_chars=self.context_chars,
            supported_extensions=list(self.supported_extensions),
            search_terms=list(self.search_terms),
            file_results=reported,
        )


@dataclass(frozen=True)
class GeneratedReport:
    """Both artifacts of one run, built together."""
    text_report: str
    summary: ReportSummary
