"""XLSX operations module."""

from tabio.xlsx.reader import (
    decode_records,
    import_from_input,
    import_tabular,
    import_tabular_async,
    rows_to_records,
)
from tabio.xlsx.schemas import DEFAULT_EXTENSION, DEFAULT_SHEET_NAME
from tabio.xlsx.writer import export_tabular

__all__ = [
    "decode_records",
    "export_tabular",
    "import_from_input",
    "import_tabular",
    "import_tabular_async",
    "rows_to_records",
    "DEFAULT_EXTENSION",
    "DEFAULT_SHEET_NAME",
]
