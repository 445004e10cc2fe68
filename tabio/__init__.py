"""tabio - export records to spreadsheets and import them back."""

__version__ = "0.1.0"

from tabio.models.config import ExportOptions, ImportOptions
from tabio.models.record import FileHandle, FileInput, Record
from tabio.xlsx import export_tabular, import_from_input, import_tabular, import_tabular_async

__all__ = [
    "ExportOptions",
    "FileHandle",
    "FileInput",
    "ImportOptions",
    "Record",
    "export_tabular",
    "import_from_input",
    "import_tabular",
    "import_tabular_async",
    "__version__",
]
