# infra/exporters.py
"""
Writers for a finished run (GeneratedReport).

Exports:
- JSON: {"summary": {...}, "results": [...]} (see summary_to_dict)
- TXT: the plain-text report, as rendered
- CSV: one row per stored snippet (File, Type, Status, Term, Snippet)

Usage:
    from infra.exporters import JsonReportWriter, TextReportWriter, MatchesCsvWriter
    JsonReportWriter("report.json").write(report)
    TextReportWriter("report.txt").write(report)
    MatchesCsvWriter("matches.csv").write(report)

The *_bytes helpers return the same payloads in memory for download buttons.
"""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict

from core.interfaces import ReportWriter
from core.models import FileResult, FileStatus, GeneratedReport, ReportSummary

CSV_HEADER = ["File", "Type", "Status", "Term", "Snippet"]


def _result_to_plain(r: FileResult) -> Dict[str, Any]:
    plain: Dict[str, Any] = {
        "file": r.file_name,
        "type": r.file_type,
        "status": r.status.value,
    }
    if r.status is not FileStatus.SUCCESS:
        plain["error_detail"] = r.error_detail
    plain["total_matches"] = r.total_matches
    plain["matches"] = {
        term: {"count": m.count, "snippets": list(m.snippets)}
        for term, m in r.matches_by_term.items()
    }
    return plain


def summary_to_dict(summary: ReportSummary) -> Dict[str, Any]:
    """JSON-compatible nested mapping of the structured report."""
    return {
        "summary": {
            "total_files": summary.total_files,
            "processed": summary.processed,
            "ignored": summary.ignored,
            "with_problems": summary.with_problems,
            "total_matches": summary.total_matches,
            "matches_by_term": dict(summary.matches_by_term),
            "context_chars": summary.context_chars,
            "supported_extensions": list(summary.supported_extensions),
            "search_terms": list(summary.search_terms),
        },
        "results": [_result_to_plain(r) for r in summary.file_results],
    }


def json_bytes(report: GeneratedReport) -> bytes:
    return json.dumps(summary_to_dict(report.summary), ensure_ascii=False, indent=2).encode("utf-8")


def text_bytes(report: GeneratedReport) -> bytes:
    return report.text_report.encode("utf-8")


def csv_bytes(report: GeneratedReport) -> bytes:
    buf = io.StringIO(newline="")
    _write_csv_rows(buf, report.summary)
    return buf.getvalue().encode("utf-8")


def _write_csv_rows(fp, summary: ReportSummary) -> None:
    w = csv.writer(fp)
    w.writerow(CSV_HEADER)
    for r in summary.file_results:
        for term, matches in r.matches_by_term.items():
            for snippet in matches.snippets:
                w.writerow([r.file_name, r.file_type, r.status.value, term, snippet])


class JsonReportWriter(ReportWriter):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, report: GeneratedReport) -> None:
        self.path.write_bytes(json_bytes(report))


class TextReportWriter(ReportWriter):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, report: GeneratedReport) -> None:
        self.path.write_bytes(text_bytes(report))


class MatchesCsvWriter(ReportWriter):
    """
    Writes a snippet-level table:
    File,Type,Status,Term,Snippet
    """
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, report: GeneratedReport) -> None:
        with self.path.open("w", newline="", encoding="utf-8") as fp:
            _write_csv_rows(fp, report.summary)
