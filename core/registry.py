# core/registry.py
"""
Lightweight plugin registry for text extractors.

Usage pattern:
- Each concrete extractor module creates an instance and calls
  register_extractor(...) at import time.
- The orchestrator asks this registry for all extractors and builds its
  extension -> extractor lookup table from them.
"""

from __future__ import annotations

from typing import List

from .interfaces import TextExtractor

# Registration order is preserved: it is also the order in which supported
# extensions are listed in reports.
_EXTRACTORS: List[TextExtractor] = []


def register_extractor(e: TextExtractor) -> None:
    """
    Register an extractor instance if not already present.
    Extractors are unique by concrete class, so re-imports are harmless.
    """
    if not any(isinstance(existing, type(e)) for existing in _EXTRACTORS):
        _EXTRACTORS.append(e)


def extractors() -> List[TextExtractor]:
    """
    Return a shallow copy of registered extractors to prevent accidental
    mutation of the internal list by callers.
    """
    return list(_EXTRACTORS)
