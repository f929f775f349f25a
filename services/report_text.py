# services/report_text.py
"""
Plain-text rendering of a finished run.

Section order is fixed: banner, run metadata, occurrences, problems,
ignored files, final summary. No timestamp is printed, so the same inputs
always render the same bytes.
"""

from __future__ import annotations

from typing import List

from core.models import RunContext

RULE = "=" * 85
TITLE_BANNER = "=" * 30 + " CONTEXTUAL SEARCH REPORT " + "=" * 30
SUMMARY_BANNER = "=" * 36 + " FINAL SUMMARY " + "=" * 36

NO_OCCURRENCES = "No occurrences of the search terms were found in the processed files."
NO_PROBLEMS = "All supported files were analyzed without errors or significant warnings."
NO_IGNORED = "No files with unsupported formats were found."


def render_text_report(ctx: RunContext) -> str:
    out: List[str] = []
    out.append(TITLE_BANNER)
    out.append(f"Search terms: [{', '.join(ctx.search_terms)}]")
    out.append(f"Context characters: {ctx.context_chars} (before and after each match)")
    out.append(f"Supported file extensions: {', '.join(ctx.supported_extensions)}")
    out.append(RULE)

    out.append("\n--- OCCURRENCES FOUND ---")
    out.extend(ctx.occurrence_lines or [NO_OCCURRENCES])

    out.append("\n\n--- FILES WITH PROBLEMS OR WARNINGS ---")
    out.extend(ctx.problem_lines or [NO_PROBLEMS])

    ignored = sorted(ctx.ignored_files)
    out.append("\n\n--- UNSUPPORTED / IGNORED FILES ---")
    out.append(f"Total ignored files: {len(ignored)}\n")
    if ignored:
        out.extend(f"- {name}" for name in ignored)
    else:
        out.append(NO_IGNORED)

    out.append("\n\n" + SUMMARY_BANNER)
    out.append(f"Total files in upload directory: {ctx.total_files}")
    out.append(f"Files processed successfully (including warnings): {ctx.processed}")
    out.append(f"Files ignored due to unsupported format: {len(ignored)}")
    out.append(f"Files with problems or errors (could not be processed): {ctx.with_problems}")
    out.append(f"Total matches found: {ctx.total_matches}")
    out.append(f"Context returned (characters): {ctx.context_chars}")
    out.append("\nMatches per search term:")
    for term in ctx.search_terms:
        out.append(f"  - '{term}': {ctx.matches_by_term.get(term, 0)}")
    out.append(RULE)

    return "\n".join(out)
