"""Configuration models."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from tabio.utils.errors import ConfigError

DEFAULT_SHEET_NAME = "Sheet1"

DEFAULT_EXTENSION = ".xlsx"


class ExportOptions(BaseModel):
    """Options for exporting records to a spreadsheet."""

    sheet_name: str = DEFAULT_SHEET_NAME
    extension: str = DEFAULT_EXTENSION
    output_dir: Path = Field(default_factory=lambda: Path("."))
    check_lock: bool = True  # Refuse to overwrite a file open in Excel/LibreOffice

    model_config = {"arbitrary_types_allowed": True}

    @field_validator("extension")
    @classmethod
    def check_extension(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError(f"extension must start with '.': {value!r}")
        return value

    @field_validator("sheet_name")
    @classmethod
    def check_sheet_name(cls, value: str) -> str:
        # Excel caps sheet titles at 31 characters
        if not value or len(value) > 31:
            raise ValueError(f"sheet name must be 1-31 characters: {value!r}")
        return value


class ImportOptions(BaseModel):
    """Options for importing records from a spreadsheet."""

    sheet_name: str | None = None  # None means first sheet
    unique_headers: bool = False
    skip_blank_rows: bool = False


class Config(BaseSettings):
    """Global configuration from environment or defaults."""

    tool_version: str = "0.1.0"

    default_sheet_name: str = DEFAULT_SHEET_NAME
    extension: str = DEFAULT_EXTENSION
    output_dir: Path = Path(".")

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None
    jsonl_log: bool = True

    model_config = {"env_prefix": "TABIO_"}

    def export_options(self, **overrides) -> ExportOptions:
        """Build export options from settings, with per-call overrides."""
        values = {
            "sheet_name": self.default_sheet_name,
            "extension": self.extension,
            "output_dir": self.output_dir,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return ExportOptions(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid export options: {e}") from e
