# processors/docx_processor.py
"""
DOCX extractor: the document's visible text as a single TextUnit with no
location label (python-docx does not expose page boundaries).
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from core.errors import EmptyDocumentError, ExtractionError
from core.interfaces import TextExtractor
from core.models import FileType, TextUnit
from core.registry import register_extractor
from utils.text_extract import extract_docx_text

EMPTY_DOCX = "Empty file or no extractable text."


class DocxExtractor(TextExtractor):
    def file_type(self) -> str:
        return FileType.DOCX

    def supports(self):
        return [".docx"]

    def extract(self, path: Path) -> List[TextUnit]:
        try:
            text = extract_docx_text(path)
        except Exception as exc:
            # python-docx reports corrupt archives as PackageNotFoundError / BadZipFile
            raise ExtractionError(self.file_type(), str(exc) or exc.__class__.__name__) from exc

        if not text.strip():
            raise EmptyDocumentError(EMPTY_DOCX)
        return [TextUnit(content=text)]


# Register on import
register_extractor(DocxExtractor())
