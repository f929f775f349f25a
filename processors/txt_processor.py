# processors/txt_processor.py
"""
Plain-text extractor: one TextUnit per non-blank line, labelled "line N"
(1-based, blank lines still count). Lines end at "\n" with an optional
preceding "\r".
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from core.errors import EmptyDocumentError, ExtractionError
from core.interfaces import TextExtractor
from core.models import FileType, TextUnit
from core.registry import register_extractor
from utils.text_extract import read_text

EMPTY_TEXT = "Empty text file."

_LINE_SPLIT_RE = re.compile(r"\r?\n")


class TextFileExtractor(TextExtractor):
    def file_type(self) -> str:
        return FileType.TXT

    def supports(self):
        return [".txt"]

    def extract(self, path: Path) -> List[TextUnit]:
        try:
            content = read_text(path)
        except OSError as exc:
            raise ExtractionError(self.file_type(), exc.strerror or str(exc)) from exc

        if not content.strip():
            raise EmptyDocumentError(EMPTY_TEXT)

        return [
            TextUnit(content=line, location=f"line {number}")
            for number, line in enumerate(_LINE_SPLIT_RE.split(content), start=1)
            if line.strip()
        ]


# Register on import
register_extractor(TextFileExtractor())
