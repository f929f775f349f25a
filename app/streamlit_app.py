# app/streamlit_app.py
"""
Lookout: Streamlit UI entry point.

Flow:
1) Configure logging + load config.
2) Let the user upload documents, enter search terms and a context width.
3) Save the uploads into a scratch directory that is removed afterwards.
4) Run the orchestrator with a progress callback.
5) Show summary + occurrences; allow TXT/JSON/CSV export. The last report
   stays in the session until the next search.

Run:
    streamlit run app/streamlit_app.py
"""
from __future__ import annotations
# --- ensure project root is on sys.path ---
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]  # one level up from /app
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# ------------------------------------------

import logging

import streamlit as st

from core.errors import DirectoryAccessError, UploadRejectedError
from infra.config_loader import load_config
from infra.logging_config import configure_logging
from services.intake import clamp_context_chars, parse_search_terms, save_uploads, scratch_directory
from services.orchestrator import Orchestrator
from ui.components import (
    context_input,
    downloads,
    matches_table,
    problems_panel,
    progress_widgets,
    report_text_panel,
    run_controls,
    summary_panel,
    terms_input,
    upload_picker,
)

REPORT_KEY = "last_report"


def main():
    st.set_page_config(page_title="Lookout — Contextual Document Search", layout="wide")
    cfg = load_config()
    configure_logging(cfg.get("log_level", "INFO"), cfg.get("log_dir"))
    log = logging.getLogger("app")

    st.title("Lookout — Contextual Document Search")
    st.caption("Find literal text in PDF, DOCX, XLSX/XLS and TXT files, with context")

    orchestrator_exts = Orchestrator().supported_extensions
    separator = cfg.get("term_separator", ";")
    max_context = int(cfg.get("max_context_chars", 1000))
    default_context = clamp_context_chars(cfg.get("default_context_chars", 240), 240, max_context)

    uploaded = upload_picker(orchestrator_exts)
    raw_terms = terms_input(separator)
    raw_context = context_input(default_context, max_context)

    if run_controls():
        terms = parse_search_terms(raw_terms, separator)
        if not uploaded:
            st.error("No file was selected.")
            return
        if not terms:
            st.error("Enter at least one text to search for.")
            return
        context_chars = clamp_context_chars(raw_context, default_context, max_context)

        set_total, on_progress = progress_widgets()
        try:
            with scratch_directory(cfg.get("upload_dir")) as tmp:
                save_uploads(
                    uploaded,
                    tmp,
                    max_files=int(cfg.get("max_upload_files", 200)),
                    max_file_bytes=int(cfg.get("max_upload_mb", 128)) * 1024 * 1024,
                )
                set_total(len(uploaded))
                report = Orchestrator(on_progress=on_progress).generate_report(tmp, terms, context_chars)
        except UploadRejectedError as exc:
            st.error(str(exc))
            return
        except DirectoryAccessError as exc:
            log.error("Search failed: %s", exc)
            st.error("An error occurred while processing the files.")
            return

        st.session_state[REPORT_KEY] = report
        log.info(
            "Search completed: %d file(s), %d match(es).",
            report.summary.total_files,
            report.summary.total_matches,
        )

    report = st.session_state.get(REPORT_KEY)
    if report is not None:
        st.divider()
        summary_panel(report.summary)
        matches_table(report.summary)
        problems_panel(report.summary)
        report_text_panel(report)
        downloads(report)

    st.sidebar.header("Config")
    st.sidebar.write("**Supported extensions:**", ", ".join(orchestrator_exts))
    st.sidebar.write("**Term separator:**", f"`{separator}`")
    st.sidebar.write("**Max upload size (MB):**", cfg.get("max_upload_mb", 128))


if __name__ == "__main__":
    main()
