"""Utility modules."""

from tabio.utils.errors import (
    ConfigError,
    EmptyWorkbookError,
    FileProcessingError,
    FileReadError,
    NoFileProvided,
    NoFileSelected,
    SheetNotFoundError,
    TabioError,
    XLSXLockError,
)
from tabio.utils.logging import setup_logging

__all__ = [
    "ConfigError",
    "EmptyWorkbookError",
    "FileProcessingError",
    "FileReadError",
    "NoFileProvided",
    "NoFileSelected",
    "SheetNotFoundError",
    "TabioError",
    "XLSXLockError",
    "setup_logging",
]
