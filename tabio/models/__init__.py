"""Data models for tabio."""

from tabio.models.config import Config, ExportOptions, ImportOptions
from tabio.models.record import CellValue, FileHandle, FileInput, Record

__all__ = [
    "CellValue",
    "Config",
    "ExportOptions",
    "FileHandle",
    "FileInput",
    "ImportOptions",
    "Record",
]
