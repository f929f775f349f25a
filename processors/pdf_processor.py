# processors/pdf_processor.py
"""
PDF extractor: one TextUnit per page that carries text, labelled "page N".

Pages are numbered from 1 in document order; blank pages produce no unit
but still count for numbering. A PDF where no page has extractable text
(scanned images, blank pages) is reported as an empty document.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from core.errors import EmptyDocumentError, ExtractionError
from core.interfaces import TextExtractor
from core.models import FileType, TextUnit
from core.registry import register_extractor
from utils.text_extract import extract_pdf_pages

EMPTY_PDF = "Empty file or no extractable text."


class PdfExtractor(TextExtractor):
    def file_type(self) -> str:
        return FileType.PDF

    def supports(self):
        return [".pdf"]

    def extract(self, path: Path) -> List[TextUnit]:
        try:
            pages = extract_pdf_pages(path)
        except Exception as exc:
            raise ExtractionError(self.file_type(), str(exc) or exc.__class__.__name__) from exc

        units = [
            TextUnit(content=text, location=f"page {number}")
            for number, text in enumerate(pages, start=1)
            if text.strip()
        ]
        if not units:
            raise EmptyDocumentError(EMPTY_PDF)
        return units


# Register on import
register_extractor(PdfExtractor())
