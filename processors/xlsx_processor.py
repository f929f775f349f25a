# processors/xlsx_processor.py
"""
Spreadsheet extractor for .xlsx (openpyxl) and legacy .xls (xlrd).

Every non-blank cell becomes one TextUnit, sheet by sheet in workbook
order and row-major within a sheet, labelled like
"sheet 'Sheet1', cell B7".

Warnings:
- a workbook without sheets -> NoSheetsError
- a workbook whose sheets are all blank -> EmptyDocumentError
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from core.errors import EmptyDocumentError, ExtractionError, NoSheetsError
from core.interfaces import TextExtractor
from core.models import FileType, TextUnit
from core.registry import register_extractor
from utils.text_extract import cell_reference, read_xls_sheets, read_xlsx_sheets

NO_SHEETS = "Excel file has no sheets."
NO_DATA = "No data in any sheet."


class SpreadsheetExtractor(TextExtractor):
    def file_type(self) -> str:
        return FileType.EXCEL

    def supports(self):
        return [".xlsx", ".xls"]

    def extract(self, path: Path) -> List[TextUnit]:
        reader = read_xls_sheets if path.suffix.lower() == ".xls" else read_xlsx_sheets
        try:
            sheets = reader(path)
        except Exception as exc:
            raise ExtractionError(self.file_type(), str(exc) or exc.__class__.__name__) from exc

        if not sheets:
            raise NoSheetsError(NO_SHEETS)

        units: List[TextUnit] = []
        for sheet_name, cells in sheets:
            for row, col, text in cells:
                units.append(
                    TextUnit(
                        content=text,
                        location=f"sheet '{sheet_name}', cell {cell_reference(row, col)}",
                    )
                )

        if not units:
            raise EmptyDocumentError(NO_DATA)
        return units


# Register on import
register_extractor(SpreadsheetExtractor())
