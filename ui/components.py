# ui/components.py
"""
Streamlit UI helpers (pure rendering/inputs; no business logic).

Functions:
- upload_picker(extensions) -> list of uploaded files
- terms_input(separator) -> str
- context_input(default, maximum) -> int
- run_controls() -> bool (returns True if user pressed "Search")
- progress_widgets() -> (set_total, update) closures for orchestrator callback
- summary_panel(summary)
- matches_table(summary) -> pandas.DataFrame
- problems_panel(summary)
- report_text_panel(report)
- downloads(report)
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import pandas as pd
import streamlit as st

from core.models import FileStatus, GeneratedReport, ReportSummary
from infra.exporters import csv_bytes, json_bytes, text_bytes

# -------- Inputs --------

def upload_picker(extensions: Sequence[str]) -> List:
    """
    Multi-file uploader. Any type is accepted: unsupported files are listed
    as ignored in the report rather than rejected here.
    """
    return st.file_uploader(
        "Documents to search",
        accept_multiple_files=True,
        help=f"Searchable formats: {', '.join(extensions)}",
    ) or []


def terms_input(separator: str = ";") -> str:
    return st.text_area(
        "Text to search for",
        placeholder=f"invoice{separator} ACME Corp{separator} 2023-Q4",
        help=f"Separate terms with '{separator}'. Matching ignores case.",
    )


def context_input(default: int = 240, maximum: int = 1000) -> int:
    return int(
        st.number_input(
            "Context characters",
            min_value=0,
            max_value=maximum,
            value=default,
            step=10,
            help="Characters shown before and after each match (0 shows only the match).",
        )
    )


def run_controls() -> bool:
    """
    Render a primary action button and return True if clicked.
    """
    return st.button("Search", type="primary")


# -------- Progress wiring --------

def progress_widgets() -> Tuple[Callable[[int], None], Callable[[int, int, Path], None]]:
    """
    Create progress placeholders and return two closures:
    - set_total(total_files)
    - on_progress(i, total, path)
    """
    bar = st.progress(0)
    status = st.empty()

    def set_total(n: int) -> None:
        if n <= 0:
            bar.progress(0)
            status.info("No files to search.")
        else:
            status.info(f"Received {n} file(s). Starting search…")

    def on_progress(i: int, n: int, path: Path) -> None:
        if n > 0:
            bar.progress(min(int(i / n * 100), 100))
        status.write(f"[{i}/{n}] {path.name}")

    return set_total, on_progress


# -------- Results rendering --------

def summary_panel(summary: ReportSummary) -> None:
    st.subheader("Summary")
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric("Files", summary.total_files)
    c2.metric("Processed", summary.processed)
    c3.metric("Ignored", summary.ignored)
    c4.metric("Problems", summary.with_problems)
    c5.metric("Matches", summary.total_matches)

    per_term = pd.DataFrame(
        [{"Term": t, "Matches": summary.matches_by_term.get(t, 0)} for t in summary.search_terms]
    )
    if not per_term.empty:
        st.dataframe(per_term, use_container_width=True, hide_index=True)


def matches_table(summary: ReportSummary) -> pd.DataFrame:
    """
    Render one row per snippet with a text filter. Returns the filtered frame.
    """
    rows = [
        {"File": r.file_name, "Type": r.file_type, "Term": term, "Snippet": snippet}
        for r in summary.file_results
        for term, m in r.matches_by_term.items()
        for snippet in m.snippets
    ]
    df = pd.DataFrame(rows, columns=["File", "Type", "Term", "Snippet"])
    if df.empty:
        st.info("No occurrences found.")
        return df

    with st.expander("Occurrences (filters)", expanded=True):
        cols = st.columns(2)
        terms = cols[0].multiselect("Term", options=sorted(df["Term"].unique()), default=sorted(df["Term"].unique()))
        substr = cols[1].text_input("Text filter", value="")

    mask = df["Term"].isin(terms)
    if substr:
        s = substr.lower()
        mask &= (
            df["File"].str.lower().str.contains(s, na=False, regex=False)
            | df["Snippet"].str.lower().str.contains(s, na=False, regex=False)
        )
    fdf = df[mask]
    st.dataframe(fdf, use_container_width=True, hide_index=True)
    return fdf


def problems_panel(summary: ReportSummary) -> None:
    rows = [
        {"File": r.file_name, "Type": r.file_type, "Status": r.status.value, "Reason": r.error_detail}
        for r in summary.file_results
        if r.status is not FileStatus.SUCCESS
    ]
    if not rows:
        return
    st.subheader("Files with problems or warnings")
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


def report_text_panel(report: GeneratedReport) -> None:
    with st.expander("Full text report", expanded=False):
        st.code(report.text_report, language=None)


def downloads(report: GeneratedReport) -> None:
    c1, c2, c3 = st.columns(3)
    c1.download_button("Download TXT", data=text_bytes(report), file_name="context_search_report.txt", mime="text/plain")
    c2.download_button("Download JSON", data=json_bytes(report), file_name="context_search_report.json", mime="application/json")
    c3.download_button("Download CSV", data=csv_bytes(report), file_name="context_search_matches.csv", mime="text/csv")
