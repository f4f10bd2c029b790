"""CSV store port for file-level I/O.

This outbound port defines the contract between the database lifecycle
and the filesystem: reading and writing whole CSV files, small text
files, and the directory primitives needed to lay out a database.

The store knows nothing about tables, metadata or versions. It moves
rectangular (or ragged) matrices of strings to and from files.

Thread Safety:
    Implementations are not required to be thread-safe. The engine
    assumes a single writer in a single process.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol, Sequence


class CSVStore(Protocol):
    """Protocol for CSV and directory I/O."""

    @abstractmethod
    def read_rows(self, path: Path) -> list[list[str]]:
        """Read every record of a CSV file.

        Args:
            path: The file to read.

        Returns:
            Records in file order, each a list of field strings.

        Raises:
            StorageError: If the file cannot be read.
            ParseError: If the content is not valid CSV.
        """
        ...

    @abstractmethod
    def write_rows(self, path: Path, rows: Sequence[Sequence[str]]) -> None:
        """Replace a CSV file with the given records.

        Raises:
            StorageError: If the file cannot be written.
        """
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a small text file in full.

        Raises:
            StorageError: If the file cannot be read.
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Replace a text file's content.

        Raises:
            StorageError: If the file cannot be written.
        """
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents. Existing is fine.

        Raises:
            StorageError: If the directory cannot be created.
        """
        ...

    @abstractmethod
    def list_dirs(self, path: Path) -> list[str]:
        """Return the names of the subdirectories of `path`, sorted.

        Regular files are skipped.

        Raises:
            StorageError: If `path` cannot be listed.
        """
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check whether a file or directory exists."""
        ...
