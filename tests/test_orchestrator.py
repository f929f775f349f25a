"""End-to-end tests for report generation over an upload directory."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from core.errors import DirectoryAccessError
from core.interfaces import TextExtractor
from core.models import FileStatus, TextUnit
from infra.exporters import summary_to_dict
from services.orchestrator import Orchestrator, generate_report


def _by_name(summary, name: str):
    return next(r for r in summary.file_results if r.file_name == name)


def test_supported_extensions_in_registration_order() -> None:
    assert Orchestrator().supported_extensions == [".pdf", ".docx", ".xlsx", ".xls", ".txt"]


def test_docx_match_and_ignored_jpg(upload_dir: Path, write_docx) -> None:
    write_docx("contract.docx", ["The supplier is ACME Corp.", "ACME pays on delivery."])
    (upload_dir / "photo.jpg").write_bytes(b"\xff\xd8\xff")

    report = generate_report(upload_dir, ["acme"], 0)
    summary = report.summary

    assert summary.total_files == 2
    assert summary.ignored == 1
    assert summary.processed == 1
    assert summary.with_problems == 0
    assert summary.total_matches == 2
    assert summary.matches_by_term == {"acme": 2}
    assert [r.file_name for r in summary.file_results] == ["contract.docx"]
    assert "- photo.jpg" in report.text_report
    assert "Total ignored files: 1" in report.text_report


def test_corrupt_docx_does_not_abort_the_run(upload_dir: Path, write_text) -> None:
    write_text("broken.docx", "not a zip archive")
    write_text("notes.txt", "remember the invoice")

    summary = generate_report(upload_dir, ["invoice"], 10).summary

    broken = _by_name(summary, "broken.docx")
    assert broken.status is FileStatus.ERROR
    assert broken.error_detail.startswith("Could not read DOCX file:")
    assert broken.total_matches == 0 and broken.matches_by_term == {}
    assert _by_name(summary, "notes.txt").total_matches == 1
    assert summary.with_problems == 1
    assert summary.processed == 1


def test_empty_pdf_is_a_warning(upload_dir: Path, write_blank_pdf) -> None:
    write_blank_pdf("scan.pdf")
    summary = generate_report(upload_dir, ["anything"], 240).summary

    scan = _by_name(summary, "scan.pdf")
    assert scan.status is FileStatus.WARNING
    assert scan.total_matches == 0
    assert scan.matches_by_term == {}
    assert summary.processed == 1
    assert summary.with_problems == 0


def test_blank_workbook_is_a_warning(upload_dir: Path, write_xlsx) -> None:
    write_xlsx("empty.xlsx", {"Sheet1": {}})
    summary = generate_report(upload_dir, ["x"], 0).summary
    result = _by_name(summary, "empty.xlsx")
    assert result.status is FileStatus.WARNING
    assert "no data in any sheet" in result.error_detail.lower()


def test_pdf_snippets_carry_page_labels(upload_dir: Path, write_pdf) -> None:
    write_pdf("deck.pdf", ["Intro slide", "Budget review for 2024"])
    summary = generate_report(upload_dir, ["budget"], 0).summary
    snippets = _by_name(summary, "deck.pdf").matches_by_term["budget"].snippets
    assert snippets == ["[page 2] >>>Budget<<<"]


def test_files_without_matches_are_counted_but_not_listed(upload_dir: Path, write_text) -> None:
    write_text("a.txt", "nothing to see")
    write_text("b.txt", "the needle is here")
    summary = generate_report(upload_dir, ["needle", "haystack"], 0).summary

    assert summary.total_files == 2
    assert summary.processed == 2
    assert [r.file_name for r in summary.file_results] == ["b.txt"]
    assert summary.matches_by_term == {"needle": 1, "haystack": 0}


def test_per_term_totals_equal_sum_over_files(upload_dir: Path, write_text, write_xlsx) -> None:
    write_text("one.txt", "red green\nRED blue")
    write_text("two.txt", "green green")
    write_xlsx("three.xlsx", {"S": {"A1": "blue red", "B2": "Green"}})
    terms = ["red", "green", "blue", "Red"]
    summary = generate_report(upload_dir, terms, 3).summary

    for term in set(terms):
        per_file = sum(
            r.matches_by_term[term].count for r in summary.file_results if term in r.matches_by_term
        )
        assert summary.matches_by_term[term] == per_file
    for r in summary.file_results:
        assert r.total_matches == sum(m.count for m in r.matches_by_term.values())
    assert summary.total_matches == sum(r.total_matches for r in summary.file_results)
    # differently-cased terms keep separate counters
    assert summary.matches_by_term["red"] == summary.matches_by_term["Red"] == 3


def test_repeated_runs_give_identical_results(upload_dir: Path, write_text, write_docx) -> None:
    write_text("a.txt", "alpha beta alpha")
    write_docx("b.docx", ["Beta release"])
    (upload_dir / "c.png").write_bytes(b"\x89PNG")

    first = generate_report(upload_dir, ["alpha", "beta"], 4)
    second = generate_report(upload_dir, ["alpha", "beta"], 4)
    assert summary_to_dict(first.summary) == summary_to_dict(second.summary)
    assert first.text_report == second.text_report


def test_unreadable_directory_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(DirectoryAccessError):
        generate_report(tmp_path / "does-not-exist", ["x"])


def test_subdirectories_are_not_counted(upload_dir: Path, write_text) -> None:
    (upload_dir / "nested").mkdir()
    write_text("a.txt", "x")
    assert generate_report(upload_dir, ["x"], 0).summary.total_files == 1


class ExplodingExtractor(TextExtractor):
    def file_type(self) -> str:
        return "TXT"

    def supports(self):
        return [".txt"]

    def extract(self, path: Path) -> List[TextUnit]:
        raise RuntimeError("parser crashed")


def test_unexpected_failure_becomes_synthetic_error(upload_dir: Path, write_text) -> None:
    write_text("bad.txt", "content")
    report = Orchestrator(extractors=[ExplodingExtractor()]).generate_report(upload_dir, ["content"], 0)

    result = _by_name(report.summary, "bad.txt")
    assert result.status is FileStatus.ERROR
    assert result.file_type == ".txt"
    assert result.error_detail == "parser crashed"
    assert report.summary.with_problems == 1
    assert "CRITICAL ERROR: Processing failed. Reason: parser crashed" in report.text_report


def test_progress_callback_sees_every_file(upload_dir: Path, write_text) -> None:
    write_text("a.txt", "x")
    (upload_dir / "b.bin").write_bytes(b"\x00")
    calls = []
    Orchestrator(on_progress=lambda i, n, p: calls.append((i, n, p.name))).generate_report(
        upload_dir, ["x"], 0
    )
    assert sorted(name for _, _, name in calls) == ["a.txt", "b.bin"]
    assert [(i, n) for i, n, _ in calls] == [(1, 2), (2, 2)]


def test_xls_match_is_labelled_with_sheet_and_cell(upload_dir: Path, write_xls) -> None:
    write_xls("ledger.xls", {"Data": {(1, 1): "Invoice 42"}, "Blank": {}})

    summary = generate_report(upload_dir, ["invoice"], 3).summary

    ledger = _by_name(summary, "ledger.xls")
    assert ledger.status is FileStatus.SUCCESS
    assert ledger.file_type == "Excel"
    assert ledger.matches_by_term["invoice"].snippets == ["[sheet 'Data', cell B2] >>>Invoice<<< 42"]
