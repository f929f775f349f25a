# core/snippets.py
"""
Context-snippet finder: locate every case-insensitive occurrence of a term
inside one piece of text and cut a bounded, annotated context window
around it.

Scanning policy: after a match at offset p the search resumes at p + 1,
so overlapping occurrences are all reported ("aa" in "aaaa" -> 0, 1, 2).
"""

from __future__ import annotations

import re
from typing import List

from .models import Occurrence

MATCH_OPEN = ">>>"
MATCH_CLOSE = "<<<"
ELLIPSIS = "..."

_LINE_BREAKS_RE = re.compile(r"[\r\n]+")


def mark(text: str) -> str:
    return f"{MATCH_OPEN}{text}{MATCH_CLOSE}"


def find_snippets(text: str, term: str, context_chars: int) -> List[Occurrence]:
    """
    Return one Occurrence per match of 'term' in 'text', in offset order.

    - context_chars > 0: up to context_chars characters on each side,
      line breaks collapsed to spaces, "..." where the window was clamped,
      the term re-marked inside the window (case-insensitively).
    - context_chars == 0: the marked matched substring only.
    """
    if not text or not term:
        return []

    # A zero-width lookahead matches at every start offset, which gives the
    # one-character advance without slicing the text ourselves.
    scanner = re.compile(f"(?=({re.escape(term)}))", re.IGNORECASE)
    remark = re.compile(re.escape(term), re.IGNORECASE)

    found: List[Occurrence] = []
    for m in scanner.finditer(text):
        pos = m.start()
        matched = m.group(1)
        if context_chars > 0:
            snippet = _context_window(text, pos, len(matched), context_chars, remark)
        else:
            snippet = mark(matched)
        found.append(Occurrence(term=term, position=pos, snippet=snippet))
    return found


def _context_window(text: str, pos: int, length: int, context_chars: int, remark: re.Pattern) -> str:
    start = max(0, pos - context_chars)
    end = min(len(text), pos + length + context_chars)

    snippet = _LINE_BREAKS_RE.sub(" ", text[start:end]).strip()
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(text):
        snippet = snippet + ELLIPSIS

    return remark.sub(lambda hit: mark(hit.group(0)), snippet)
