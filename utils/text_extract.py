# utils/text_extract.py
"""
Lightweight, read-only text extraction helpers for supported file types.

This module only talks to the format libraries and returns plain Python
values. It does not decide what counts as "empty" or build TextUnits; the
extractors in processors/ do that. Library exceptions propagate unchanged
so the extractors can wrap them with the format name.

Public API:
- extract_pdf_pages(path) -> list[str]
- extract_docx_text(path) -> str
- read_xlsx_sheets(path) -> list[(sheet_name, cells)]
- read_xls_sheets(path)  -> list[(sheet_name, cells)]
- read_text(path) -> str
- cell_reference(row, col) -> str

Every helper opens the file itself inside a `with` block, so the handle is
released whether parsing succeeds or not.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple, Union

from docx import Document
from openpyxl import load_workbook
from openpyxl.utils import get_column_letter
from pypdf import PdfReader
from pypdf.errors import PdfReadError
import xlrd

PathLike = Union[str, Path]

# (row, col, text): 1-based coordinates of a non-blank cell
Cell = Tuple[int, int, str]
Sheet = Tuple[str, List[Cell]]


# ---------------- Internal helpers ----------------


def _safe_str(x) -> str:
    return "" if x is None else str(x)


def _cell_text(value: Any) -> str:
    """Render a cell value the way a user reads it in the sheet."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def cell_reference(row: int, col: int) -> str:
    """Spreadsheet-style reference for 1-based coordinates: (7, 2) -> "B7"."""
    return f"{get_column_letter(col)}{row}"


# ---------------- File type extractors ----------------


def extract_pdf_pages(path: PathLike) -> List[str]:
    """
    Extract one string per page from a .pdf file using pypdf.

    Each page string is the concatenation of the text runs pypdf reports for
    that page, joined with single spaces and trimmed. Encrypted PDFs that do
    not open with an empty password raise PdfReadError.
    """
    pages: List[str] = []
    with open(Path(path), "rb") as fh:
        reader = PdfReader(fh)
        if getattr(reader, "is_encrypted", False):
            # Many "protected" PDFs only carry an owner password.
            if not reader.decrypt(""):
                raise PdfReadError("Encrypted PDF: cannot extract text")

        for page in reader.pages:
            runs: List[str] = []

            def collect(text, _cm, _tm, _font_dict, _font_size, runs=runs):
                if text and text.strip():
                    runs.append(text.strip())

            page.extract_text(visitor_text=collect)
            pages.append(" ".join(runs).strip())
    return pages


def extract_docx_text(path: PathLike) -> str:
    """
    Extract the visible text of a .docx file:
    - paragraph text, one paragraph per line;
    - then table cell text, one cell per line.
    """
    chunks: List[str] = []
    with open(Path(path), "rb") as fh:
        doc = Document(fh)

        for para in doc.paragraphs:
            chunks.append(_safe_str(para.text))

        for table in doc.tables:
            for row in table.rows:
                for cell in row.cells:
                    chunks.append(_safe_str(cell.text))

    return "\n".join(chunks)


def read_xlsx_sheets(path: PathLike) -> List[Sheet]:
    """
    Read every sheet of a .xlsx workbook with openpyxl (data_only=True, so
    formulas contribute their cached values). Returns the sheets in workbook
    order, each with its non-blank cells in row-major order.
    """
    sheets: List[Sheet] = []
    with open(Path(path), "rb") as fh:
        wb = load_workbook(filename=fh, data_only=True)
        try:
            for ws in wb.worksheets:
                cells: List[Cell] = []
                for r, row in enumerate(ws.iter_rows(values_only=True), start=1):
                    for c, value in enumerate(row, start=1):
                        text = _cell_text(value)
                        if text.strip():
                            cells.append((r, c, text))
                sheets.append((ws.title, cells))
        finally:
            wb.close()
    return sheets


def read_xls_sheets(path: PathLike) -> List[Sheet]:
    """Same as read_xlsx_sheets, for legacy .xls workbooks (xlrd)."""
    sheets: List[Sheet] = []
    with open(Path(path), "rb") as fh:
        book = xlrd.open_workbook(file_contents=fh.read(), on_demand=True)
    try:
        for idx, name in enumerate(book.sheet_names()):
            sheet = book.sheet_by_index(idx)
            cells: List[Cell] = []
            for r in range(sheet.nrows):
                for c in range(sheet.ncols):
                    text = _xls_cell_text(sheet.cell(r, c), book.datemode)
                    if text.strip():
                        cells.append((r + 1, c + 1, text))
            sheets.append((name, cells))
            book.unload_sheet(idx)
    finally:
        book.release_resources()
    return sheets


def _xls_cell_text(cell, datemode: int) -> str:
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return ""
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return _cell_text(bool(cell.value))
    if cell.ctype == xlrd.XL_CELL_DATE:
        try:
            return _cell_text(xlrd.xldate_as_datetime(cell.value, datemode))
        except (ValueError, OverflowError):
            return _cell_text(cell.value)
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.error_text_from_code.get(cell.value, "")
    return _cell_text(cell.value)


def read_text(path: PathLike) -> str:
    """
    Read a plain-text file as UTF-8. A BOM is dropped and undecodable bytes
    become U+FFFD instead of failing the whole file.
    """
    with open(Path(path), "r", encoding="utf-8-sig", errors="replace", newline="") as fh:
        return fh.read()


__all__ = [
    "cell_reference",
    "extract_docx_text",
    "extract_pdf_pages",
    "read_text",
    "read_xls_sheets",
    "read_xlsx_sheets",
]
