"""Storage interface for line-oriented text files."""

from pathlib import Path
from typing import Protocol


class LineStorage(Protocol):
    """Persistence interface for whole-file line reads and rewrites.

    Implementations raise ``StorageError`` on I/O failures.
    """

    def read_lines(self, path: Path) -> list[str] | None:
        """Return the file's lines, or None when the file does not exist."""

    def write_lines(self, path: Path, lines: list[str]) -> None:
        """Overwrite the file with the given lines."""

    def delete(self, path: Path) -> bool:
        """Delete the file; return False when it did not exist."""

    def list_files(self, directory: Path, suffix: str) -> list[Path]:
        """Return files in a directory with the suffix, sorted; [] if it is missing."""

    def ensure_directory(self, directory: Path) -> None:
        """Create the directory and its parents if missing."""
