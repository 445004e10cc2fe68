"""Custom exceptions."""


class TabioError(Exception):
    """Base exception for tabio."""

    pass


class ConfigError(TabioError):
    """Configuration or input data error."""

    pass


class NoFileSelected(TabioError):
    """The file-selection input holds no file."""

    def __init__(self, message: str = "No file selected"):
        super().__init__(message)


class NoFileProvided(TabioError):
    """No file handle was passed to the importer."""

    def __init__(self, message: str = "No file provided"):
        super().__init__(message)


class FileReadError(TabioError):
    """Reading the raw bytes of a file failed."""

    pass


class FileProcessingError(TabioError):
    """Decoding a workbook or mapping its rows failed."""

    pass


class EmptyWorkbookError(TabioError):
    """Workbook contains no sheets."""

    pass


class SheetNotFoundError(TabioError):
    """Requested sheet is not in the workbook."""

    pass


class XLSXLockError(TabioError):
    """XLSX file is locked."""

    pass
