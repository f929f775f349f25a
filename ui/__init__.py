# ui/__init__.py
"""
UI package convenience exports.

This keeps import sites clean:
    from ui import upload_picker, summary_panel, matches_table
instead of:
    from ui.components import upload_picker, summary_panel, matches_table
"""

from __future__ import annotations

from .components import (
    upload_picker,
    terms_input,
    context_input,
    run_controls,
    progress_widgets,
    summary_panel,
    matches_table,
    problems_panel,
    report_text_panel,
    downloads,
)

__all__ = [
    "upload_picker",
    "terms_input",
    "context_input",
    "run_controls",
    "progress_widgets",
    "summary_panel",
    "matches_table",
    "problems_panel",
    "report_text_panel",
    "downloads",
]

__version__ = "0.1.0"
