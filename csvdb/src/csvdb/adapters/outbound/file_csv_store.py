"""File-based CSV store implementation.

This adapter implements the CSVStore protocol with the standard library
csv module over pathlib paths.

File Format:
    - Comma separated, one record per line, "\\n" line terminator
    - Fields containing commas, quotes or newlines are quoted; embedded
      quotes are doubled
    - Blank lines are skipped on read

Every OSError is re-raised as StorageError. Every csv.Error and
UnicodeDecodeError is re-raised as ParseError. The original exception is
chained.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Sequence

from csvdb.domain.exceptions import ParseError, StorageError
from csvdb.infrastructure.config import get_config


class FileCSVStore:
    """pathlib/csv implementation of the CSVStore protocol.

    Attributes:
        encoding: Text encoding used for every file.
    """

    def __init__(self, encoding: str | None = None) -> None:
        """Initialize the store.

        Args:
            encoding: Text encoding (default from config).
        """
        self._encoding = encoding or get_config().storage.encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def read_rows(self, path: Path) -> list[list[str]]:
        """Read every non-blank record of a CSV file."""
        try:
            with open(path, "r", encoding=self._encoding, newline="") as f:
                return [record for record in csv.reader(f) if record]
        except csv.Error as e:
            raise ParseError(f"Malformed CSV in {path}: {e}", path) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"Cannot decode {path}: {e}", path) from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}", path) from e

    def write_rows(self, path: Path, rows: Sequence[Sequence[str]]) -> None:
        """Replace a CSV file with the given records."""
        try:
            with open(path, "w", encoding=self._encoding, newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerows(rows)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}", path) from e

    def read_text(self, path: Path) -> str:
        try:
            return Path(path).read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            raise ParseError(f"Cannot decode {path}: {e}", path) from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}", path) from e

    def write_text(self, path: Path, content: str) -> None:
        try:
            Path(path).write_text(content, encoding=self._encoding)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}", path) from e

    def make_dirs(self, path: Path) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create directory {path}: {e}", path) from e

    def list_dirs(self, path: Path) -> list[str]:
        try:
            return sorted(p.name for p in Path(path).iterdir() if p.is_dir())
        except OSError as e:
            raise StorageError(f"Cannot list {path}: {e}", path) from e

    def exists(self, path: Path) -> bool:
        return Path(path).exists()
