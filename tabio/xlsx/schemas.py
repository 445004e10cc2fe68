"""XLSX format constants."""

from tabio.models.config import DEFAULT_EXTENSION, DEFAULT_SHEET_NAME

# Lock files left beside an open workbook, by application
LOCK_FILE_PATTERNS = [
    ".~lock.{name}#",  # LibreOffice
    "~${name}",  # Excel Windows
]

__all__ = ["DEFAULT_EXTENSION", "DEFAULT_SHEET_NAME", "LOCK_FILE_PATTERNS"]
