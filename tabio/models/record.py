"""Record and file source models."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from pathlib import Path

CellValue = str | int | float | bool | datetime | date | time | None

# One data row keyed by header name
Record = dict[str, CellValue]


@dataclass
class FileHandle:
    """A named file whose raw bytes can be read."""

    name: str
    path: Path | None = None
    data: bytes | None = None

    @classmethod
    def from_path(cls, path: Path | str) -> "FileHandle":
        path = Path(path)
        return cls(name=path.name, path=path)

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "FileHandle":
        return cls(name=name, data=data)

    def read_bytes(self) -> bytes:
        """
        Return the file contents.

        Raises:
            OSError: If the backing file cannot be read
        """
        if self.data is not None:
            return self.data
        if self.path is None:
            raise OSError(f"File handle {self.name!r} has neither data nor a path")
        return self.path.read_bytes()


@dataclass
class FileInput:
    """A file-selection control holding zero or more chosen files."""

    files: list[FileHandle] = field(default_factory=list)

    @classmethod
    def from_paths(cls, paths: list[Path | str]) -> "FileInput":
        return cls(files=[FileHandle.from_path(p) for p in paths])

    def first(self) -> FileHandle | None:
        """First attached file, or None if nothing is selected."""
        return self.files[0] if self.files else None
