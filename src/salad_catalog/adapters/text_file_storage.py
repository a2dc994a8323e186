"""Filesystem implementation of line storage."""

from dataclasses import dataclass
from pathlib import Path

from salad_catalog.errors import StorageError
from salad_catalog.services.storage import LineStorage


@dataclass
class TextFileStorage(LineStorage):
    """UTF-8 text files, one record per line."""

    encoding: str = "utf-8"

    def read_lines(self, path: Path) -> list[str] | None:
        """Return the file's lines, or None when the file does not exist."""
        try:
            return path.read_text(encoding=self.encoding).splitlines()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError("read", str(path), _as_os_error(exc)) from exc

    def write_lines(self, path: Path, lines: list[str]) -> None:
        """Overwrite the file with the given lines."""
        content = "".join(f"{line}\n" for line in lines)
        try:
            with path.open("w", encoding=self.encoding, newline="\n") as handle:
                handle.write(content)
        except OSError as exc:
            raise StorageError("write", str(path), exc) from exc

    def delete(self, path: Path) -> bool:
        """Delete the file; return False when it did not exist."""
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError("delete", str(path), exc) from exc
        return True

    def list_files(self, directory: Path, suffix: str) -> list[Path]:
        """Return regular files in a directory with the suffix, sorted by name."""
        try:
            return sorted(
                entry
                for entry in directory.iterdir()
                if entry.is_file() and entry.name.endswith(suffix)
            )
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError("list", str(directory), exc) from exc

    def ensure_directory(self, directory: Path) -> None:
        """Create the directory and its parents if missing."""
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError("create", str(directory), exc) from exc


def _as_os_error(exc: Exception) -> OSError:
    if isinstance(exc, OSError):
        return exc
    return OSError(str(exc))
