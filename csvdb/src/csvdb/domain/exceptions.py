"""Error taxonomy for the record engine.

Every error raised by csvdb derives from CsvDbError. Errors that describe
a lookup miss also derive from LookupError, invalid input from ValueError,
and filesystem failures from OSError, so callers can catch them either way.
"""

from __future__ import annotations

from pathlib import Path


class CsvDbError(Exception):
    """Base class for all csvdb errors."""

    pass


class UnknownTableError(CsvDbError, LookupError):
    """Table name is not registered in the database."""

    def __init__(self, table: str) -> None:
        super().__init__(f"table {table} does not exist")
        self.table = table


class TableExistsError(CsvDbError):
    """A table with this name is already registered."""

    def __init__(self, table: str) -> None:
        super().__init__(f"table {table} already exists")
        self.table = table


class DatabaseExistsError(CsvDbError):
    """A database is already initialized at this path."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"database already exists at {path}")
        self.path = path


class UnknownColumnError(CsvDbError, LookupError):
    """Referenced column is absent from the table schema."""

    def __init__(self, column: str, table: str | None = None) -> None:
        where = f" in table {table}" if table else ""
        super().__init__(f"column {column} not found{where}")
        self.column = column
        self.table = table


class SchemaMismatchError(CsvDbError, ValueError):
    """Row width does not match the table's column count."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"invalid number of columns in row, expected {expected} got {actual}"
        )
        self.expected = expected
        self.actual = actual


class EmptySchemaError(CsvDbError, ValueError):
    """Table was declared without any columns."""

    def __init__(self, table: str) -> None:
        super().__init__(f"table {table} needs at least one column")
        self.table = table


class ArityMismatchError(CsvDbError, ValueError):
    """Update was given a different number of columns and values."""

    def __init__(self, columns: int, values: int) -> None:
        super().__init__(f"update got {columns} column(s) but {values} value(s)")
        self.expected = columns
        self.actual = values


class UnsupportedQueryError(CsvDbError, ValueError):
    """Query type is not handled by the executor."""

    pass


class InvalidVersionError(CsvDbError, ValueError):
    """version.txt does not hold a decimal integer."""

    def __init__(self, path: Path, content: str) -> None:
        shown = content if len(content) <= 32 else f"{content[:32]}..."
        super().__init__(f"invalid version {shown!r} in {path}")
        self.path = path
        self.content = content


class StorageError(CsvDbError, OSError):
    """Underlying filesystem operation failed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ParseError(CsvDbError, ValueError):
    """CSV content is malformed or structurally incomplete."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
