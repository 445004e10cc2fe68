"""XLSX reading and row-to-record mapping."""

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from io import BytesIO
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils import get_column_letter
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet
from pydantic import BaseModel

from tabio.models.config import ImportOptions
from tabio.models.record import FileHandle, FileInput, Record
from tabio.utils.errors import (
    EmptyWorkbookError,
    FileProcessingError,
    FileReadError,
    NoFileProvided,
    NoFileSelected,
    SheetNotFoundError,
    TabioError,
)

logger = logging.getLogger(__name__)

FileSource = FileInput | FileHandle | Callable[[], FileHandle | None]


def rows_to_records(
    rows: Iterable[Sequence[Any]],
    options: ImportOptions | None = None,
) -> list[Record]:
    """
    Zip data rows with the header row.

    The first row supplies field names. Each later row becomes a record
    holding only the cells that have a value, so short rows and empty
    cells produce no key. Columns without a header name are keyed by
    their column letter.

    Raises:
        ValueError: If unique_headers is set and a header name repeats
    """
    options = options or ImportOptions()
    rows = iter(rows)

    header_row = next(rows, None)
    if header_row is None:
        return []

    headers = [
        str(name) if name is not None else get_column_letter(index)
        for index, name in enumerate(header_row, start=1)
    ]

    if options.unique_headers:
        duplicates = sorted({name for name in headers if headers.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate header names: {', '.join(duplicates)}")

    records = []
    for row in rows:
        record: Record = {}
        for index, cell in enumerate(row):
            if cell is None:
                continue
            key = headers[index] if index < len(headers) else get_column_letter(index + 1)
            record[key] = cell

        if not record and options.skip_blank_rows:
            continue
        records.append(record)

    return records


def select_sheet(wb: Workbook, sheet_name: str | None = None) -> Worksheet:
    """
    Pick the named sheet, or the first one in workbook order.

    Raises:
        EmptyWorkbookError: If the workbook has no sheets
        SheetNotFoundError: If sheet_name is not in the workbook
    """
    if not wb.sheetnames:
        raise EmptyWorkbookError("Workbook contains no sheets")

    if sheet_name is None:
        sheet_name = wb.sheetnames[0]
    elif sheet_name not in wb.sheetnames:
        raise SheetNotFoundError(
            f"Sheet {sheet_name!r} not found (available: {', '.join(wb.sheetnames)})"
        )

    logger.debug("Reading sheet %r", sheet_name)
    return wb[sheet_name]


def decode_records(
    data: bytes,
    options: ImportOptions | None = None,
    model: type[BaseModel] | None = None,
    file_name: str = "<bytes>",
) -> list:
    """
    Decode spreadsheet bytes into records from one sheet.

    Raises:
        FileProcessingError: If decoding or row mapping fails
    """
    options = options or ImportOptions()

    try:
        wb = load_workbook(BytesIO(data), data_only=True)
        try:
            ws = select_sheet(wb, options.sheet_name)
            sheet_name = ws.title
            records: list = rows_to_records(ws.iter_rows(values_only=True), options)
        finally:
            wb.close()

        if model is not None:
            records = [model.model_validate(record) for record in records]
    except TabioError:
        raise
    except Exception as e:
        raise FileProcessingError(f"Error processing file: {e}") from e

    logger.info(
        "Imported %d records from %s",
        len(records),
        file_name,
        extra={"extra": {"file": file_name, "sheet": sheet_name, "rows": len(records)}},
    )
    return records


def _resolve_handle(source: FileHandle | Path | str | None) -> FileHandle:
    if source is None:
        raise NoFileProvided()
    if isinstance(source, FileHandle):
        return source
    return FileHandle.from_path(source)


def _read_error(handle: FileHandle, error: OSError) -> FileReadError:
    return FileReadError(f"Error reading file {handle.name}: {error}")


def import_tabular(
    source: FileHandle | Path | str | None,
    options: ImportOptions | None = None,
    model: type[BaseModel] | None = None,
) -> list:
    """
    Import records from a spreadsheet file.

    Args:
        source: File handle, or path to wrap in one
        options: Sheet selection and header/blank-row handling
        model: Optional pydantic model to validate each record into

    Returns:
        Records in sheet order, as dicts or model instances

    Raises:
        NoFileProvided: If source is None
        FileReadError: If the file bytes cannot be read
        FileProcessingError: If the bytes cannot be decoded or mapped
    """
    handle = _resolve_handle(source)

    try:
        data = handle.read_bytes()
    except OSError as e:
        raise _read_error(handle, e) from e

    logger.debug("Read %d bytes from %s", len(data), handle.name)
    return decode_records(data, options, model, handle.name)


async def import_tabular_async(
    source: FileHandle | Path | str | None,
    options: ImportOptions | None = None,
    model: type[BaseModel] | None = None,
) -> list:
    """Coroutine form of import_tabular; only the byte read is awaited."""
    handle = _resolve_handle(source)

    try:
        data = await asyncio.to_thread(handle.read_bytes)
    except OSError as e:
        raise _read_error(handle, e) from e

    return decode_records(data, options, model, handle.name)


def import_from_input(
    file_input: FileSource | None,
    options: ImportOptions | None = None,
    model: type[BaseModel] | None = None,
) -> list:
    """
    Import the first file attached to a file-selection input.

    file_input may also be a single FileHandle, or a callable that
    resolves a handle on demand.

    Raises:
        NoFileSelected: If no file is attached
        TypeError: If file_input is not a supported file source
    """
    if file_input is None:
        handle = None
    elif isinstance(file_input, FileInput):
        handle = file_input.first()
    elif isinstance(file_input, FileHandle):
        handle = file_input
    elif callable(file_input):
        handle = file_input()
    else:
        raise TypeError(
            f"Unsupported file source {type(file_input).__name__}: "
            "expected FileInput, FileHandle or a callable returning a FileHandle"
        )

    if handle is None:
        raise NoFileSelected()

    return import_tabular(handle, options, model)
