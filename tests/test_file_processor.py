"""Tests for single-file processing (extraction + search + result record)."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from core.errors import ExtractionError, NoSheetsError
from core.interfaces import TextExtractor
from core.models import FileStatus, TextUnit
from processors.txt_processor import TextFileExtractor
from services.file_processor import FileProcessor


class StubExtractor(TextExtractor):
    def __init__(self, units=None, error: Exception | None = None) -> None:
        self._units = units or []
        self._error = error

    def file_type(self) -> str:
        return "Stub"

    def supports(self):
        return [".stub"]

    def extract(self, path: Path) -> List[TextUnit]:
        if self._error is not None:
            raise self._error
        return list(self._units)


def test_text_file_scenario(write_text) -> None:
    path = write_text("scenario.txt", "foo bar\n\nbar foo bar")
    outcome = FileProcessor(TextFileExtractor()).process(path, ["bar"], 0)
    result = outcome.result

    assert result.status is FileStatus.SUCCESS
    assert result.total_matches == 3
    snippets = result.matches_by_term["bar"].snippets
    assert snippets == ["[line 1] >>>bar<<<", "[line 3] >>>bar<<<", "[line 3] >>>bar<<<"]
    assert not any("line 2" in s for s in snippets)
    assert outcome.problem_lines == []


def test_total_equals_sum_of_term_counts(write_text) -> None:
    path = write_text("mix.txt", "alpha beta\nBETA gamma alpha\n")
    result = FileProcessor(TextFileExtractor()).process(path, ["alpha", "beta", "delta"], 5).result
    assert result.total_matches == sum(m.count for m in result.matches_by_term.values())
    assert result.matches_by_term["alpha"].count == 2
    assert result.matches_by_term["beta"].count == 2
    assert "delta" not in result.matches_by_term


def test_units_outer_loop_terms_inner_loop() -> None:
    units = [TextUnit("b then a", "row 1"), TextUnit("a only", "row 2")]
    outcome = FileProcessor(StubExtractor(units)).process(Path("doc.stub"), ["a", "b"], 0)
    headers = [line for line in outcome.occurrence_lines if "-> Found:" in line]
    assert headers == [
        "File: 'doc.stub' (Stub), row 1 -> Found: 'a'",
        "File: 'doc.stub' (Stub), row 1 -> Found: 'b'",
        "File: 'doc.stub' (Stub), row 2 -> Found: 'a'",
    ]


def test_unlabelled_units_store_bare_snippets() -> None:
    outcome = FileProcessor(StubExtractor([TextUnit("Contract signed")])).process(
        Path("c.stub"), ["signed"], 0
    )
    assert outcome.result.matches_by_term["signed"].snippets == [">>>signed<<<"]
    assert outcome.occurrence_lines == [
        "File: 'c.stub' (Stub) -> Found: 'signed'",
        "  └─ >>>signed<<<",
        "",
    ]


def test_warning_returns_without_searching(write_text) -> None:
    outcome = FileProcessor(TextFileExtractor()).process(write_text("e.txt", "\n\n"), ["x"], 0)
    result = outcome.result
    assert result.status is FileStatus.WARNING
    assert result.error_detail == "Empty text file."
    assert result.total_matches == 0
    assert result.matches_by_term == {}
    assert outcome.problem_lines == ["File: 'e.txt' (TXT) -> Warning: Empty text file."]


def test_no_sheets_is_a_warning() -> None:
    stub = StubExtractor(error=NoSheetsError("Excel file has no sheets."))
    result = FileProcessor(stub).process(Path("w.stub"), ["x"], 0).result
    assert result.status is FileStatus.WARNING
    assert result.error_detail == "Excel file has no sheets."


def test_extraction_error_becomes_error_result() -> None:
    stub = StubExtractor(error=ExtractionError("Stub", "bad header"))
    outcome = FileProcessor(stub).process(Path("bad.stub"), ["x"], 0)
    assert outcome.result.status is FileStatus.ERROR
    assert "bad header" in outcome.result.error_detail
    assert outcome.result.total_matches == 0
    assert outcome.result.matches_by_term == {}
    assert outcome.problem_lines == [
        "File: 'bad.stub' -> ERROR: Could not process as Stub. Reason: Could not read Stub file: bad header"
    ]


def test_unexpected_errors_propagate() -> None:
    stub = StubExtractor(error=RuntimeError("boom"))
    with pytest.raises(RuntimeError):
        FileProcessor(stub).process(Path("x.stub"), ["x"], 0)
