"""Shared fixtures for spreadsheet tests."""

from io import BytesIO
from pathlib import Path

import pytest
from openpyxl import Workbook


def build_xlsx(sheets: dict[str, list[list]]) -> bytes:
    """Build XLSX bytes with one sheet per entry, rows appended in order."""
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(name)
        for row in rows:
            ws.append(row)

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def xlsx_bytes():
    """Builder for in-memory XLSX content."""
    return build_xlsx


@pytest.fixture
def write_xlsx(tmp_path: Path):
    """Write a workbook under tmp_path and return its path."""

    def _write(rows: list[list], name: str = "data.xlsx", sheet: str = "Sheet1") -> Path:
        path = tmp_path / name
        path.write_bytes(build_xlsx({sheet: rows}))
        return path

    return _write
