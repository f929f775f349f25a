"""Pytest fixtures: builders for small real documents in tmp_path."""

from __future__ import annotations

import datetime
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

import pytest
import xlwt
from docx import Document
from openpyxl import Workbook
from pypdf import PdfWriter


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_text_pdf(pages: Sequence[str]) -> bytes:
    """
    Assemble a minimal PDF with one Helvetica text line per page.
    An empty string gives a page with an empty content stream.
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    bodies: List[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode("ascii"),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for pid, text in zip(page_ids, pages):
        bodies.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
            ).encode("ascii")
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({_pdf_escape(text)}) Tj ET".encode("latin-1") if text else b""
        bodies.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets: List[int] = []
    for num, body in enumerate(bodies, start=1):
        offsets.append(len(out))
        out += f"{num} 0 obj\n".encode("ascii") + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(bodies) + 1}\n".encode("ascii")
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += f"{off:010d} 00000 n \n".encode("ascii")
    out += (
        f"trailer\n<< /Size {len(bodies) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n"
    ).encode("ascii")
    return bytes(out)


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    d = tmp_path / "uploads"
    d.mkdir()
    return d


@pytest.fixture
def write_text(upload_dir: Path) -> Callable[..., Path]:
    def _write(name: str, content: str) -> Path:
        path = upload_dir / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def write_pdf(upload_dir: Path) -> Callable[..., Path]:
    def _write(name: str, pages: Sequence[str]) -> Path:
        path = upload_dir / name
        path.write_bytes(build_text_pdf(pages))
        return path

    return _write


@pytest.fixture
def write_blank_pdf(upload_dir: Path) -> Callable[..., Path]:
    def _write(name: str, page_count: int = 1) -> Path:
        path = upload_dir / name
        writer = PdfWriter()
        for _ in range(page_count):
            writer.add_blank_page(width=612, height=792)
        with path.open("wb") as fh:
            writer.write(fh)
        return path

    return _write


@pytest.fixture
def write_docx(upload_dir: Path) -> Callable[..., Path]:
    def _write(name: str, paragraphs: Sequence[str], table: Sequence[Sequence[str]] = ()) -> Path:
        path = upload_dir / name
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        if table:
            t = doc.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, value in enumerate(row):
                    t.cell(r, c).text = value
        doc.save(str(path))
        return path

    return _write


@pytest.fixture
def write_xlsx(upload_dir: Path) -> Callable[..., Path]:
    """sheets: {sheet_name: {"B7": value, ...}}; an empty dict gives a blank sheet."""

    def _write(name: str, sheets: Dict[str, Dict[str, object]]) -> Path:
        path = upload_dir / name
        wb = Workbook()
        wb.remove(wb.active)
        for sheet_name, cells in sheets.items():
            ws = wb.create_sheet(title=sheet_name)
            for ref, value in cells.items():
                ws[ref] = value
        wb.save(str(path))
        return path

    return _write


@pytest.fixture
def write_encrypted_pdf(upload_dir: Path) -> Callable[..., Path]:
    """A one-page blank PDF protected by a user password."""

    def _write(name: str, password: str = "pw") -> Path:
        path = upload_dir / name
        writer = PdfWriter()
        writer.add_blank_page(width=612, height=792)
        writer.encrypt(password)
        with path.open("wb") as fh:
            writer.write(fh)
        return path

    return _write


@pytest.fixture
def write_xls(upload_dir: Path) -> Callable[..., Path]:
    """sheets: {sheet_name: {(row, col): value}} with 0-based coordinates (xlwt)."""

    def _write(name: str, sheets: Dict[str, Dict[Tuple[int, int], object]]) -> Path:
        path = upload_dir / name
        wb = xlwt.Workbook()
        date_style = xlwt.easyxf(num_format_str="YYYY-MM-DD")
        for sheet_name, cells in sheets.items():
            ws = wb.add_sheet(sheet_name)
            for (r, c), value in cells.items():
                if isinstance(value, (datetime.date, datetime.datetime)):
                    ws.write(r, c, value, date_style)
                else:
                    ws.write(r, c, value)
        wb.save(str(path))
        return path

    return _write
