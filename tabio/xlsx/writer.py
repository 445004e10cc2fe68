"""XLSX generation with atomic writes."""

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from tabio.models.config import ExportOptions
from tabio.utils.errors import XLSXLockError
from tabio.xlsx.schemas import LOCK_FILE_PATTERNS

logger = logging.getLogger(__name__)


def check_xlsx_lock(xlsx_path: Path) -> None:
    """
    Check if XLSX file is locked by another process.

    Raises:
        XLSXLockError: If lock file exists
    """
    for pattern in LOCK_FILE_PATTERNS:
        lock_path = xlsx_path.parent / pattern.format(name=xlsx_path.name)
        if lock_path.exists():
            raise XLSXLockError(
                f"XLSX appears to be locked: {lock_path.name}\n"
                "Please close the file in Excel/LibreOffice and try again."
            )


def collect_headers(records: Sequence[Mapping[str, Any]]) -> list[str]:
    """
    Column keys in order of first appearance.

    The first record's keys come first; keys only seen in later records
    are appended after them.
    """
    headers: list[str] = []
    seen: set[str] = set()
    for record in records:
        for key in record:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    return headers


def write_cell(ws: Worksheet, row: int, column: int, value: Any) -> None:
    """Write one cell; strings are always stored as text, never as formulas."""
    cell = ws.cell(row=row, column=column, value=value)
    if isinstance(value, str) and cell.data_type == "f":
        cell.data_type = "s"


def build_workbook(records: Sequence[Mapping[str, Any]], sheet_name: str) -> Workbook:
    """Build a single-sheet workbook with a header row and one row per record."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    headers = collect_headers(records)
    for col_idx, key in enumerate(headers, start=1):
        write_cell(ws, 1, col_idx, str(key))

    for row_idx, record in enumerate(records, start=2):
        for col_idx, key in enumerate(headers, start=1):
            value = record.get(key)
            if value is not None:
                write_cell(ws, row_idx, col_idx, value)

    logger.debug("Built sheet %r: %d columns, %d rows", sheet_name, len(headers), len(records))
    return wb


def export_tabular(
    records: Sequence[Mapping[str, Any]],
    file_name: str,
    options: ExportOptions | None = None,
) -> Path:
    """
    Export records to a spreadsheet file.

    Args:
        records: Rows to write; keys of the first record form the header
        file_name: File name stem, the extension is appended
        options: Sheet name, extension and output directory

    Returns:
        Path to written file

    Raises:
        XLSXLockError: If the target is open in a spreadsheet application
    """
    options = options or ExportOptions()

    output_dir = Path(options.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    xlsx_path = (output_dir / f"{file_name}{options.extension}").resolve()

    if options.check_lock:
        check_xlsx_lock(xlsx_path)

    wb = build_workbook(records, options.sheet_name)

    # Write atomically
    temp_path = xlsx_path.parent / f"{xlsx_path.name}.tmp"
    try:
        wb.save(temp_path)
        os.replace(temp_path, xlsx_path)
    finally:
        if temp_path.exists():
            temp_path.unlink()

    logger.info(
        "Exported %d records to %s",
        len(records),
        xlsx_path,
        extra={"extra": {"file": xlsx_path.name, "sheet": options.sheet_name, "rows": len(records)}},
    )
    return xlsx_path
