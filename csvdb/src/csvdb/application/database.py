"""Database - lifecycle and on-disk layout of a CSV database.

This module provides the Database class that loads an existing database
into memory, creates new tables on disk, and runs queries against the
loaded tables.

On-disk layout:
    <root>/version.txt              single integer, whitespace allowed
    <root>/metadata.csv             rows of (table, column, type)
    <root>/.csvdb/<table>/data.csv  header row, then data rows

Persistence:
    Only create_table() and flush() write files. Table.insert/update/
    delete/upsert change memory only; call flush() to write rows back.

Failure model:
    Multi-step operations have no rollback. A failure partway through
    create_table() leaves whatever was already written or registered.

Thread Safety:
    None. A Database must not be used from several threads at once.

Usage:
    from csvdb.application import Database
    from csvdb.domain import Query

    db = Database.initialize("/path/to/db")
    users = db.create_table("users", ["id", "name"])
    users.insert(["1", "Alice"])
    rows = db.execute(Query(table="users", columns=["name"], conditions={"id": "1"}))
    db.flush("users")
"""

from __future__ import annotations

import re
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Sequence

from csvdb.adapters.outbound import FileCSVStore
from csvdb.application.query_executor import QueryExecutor
from csvdb.domain.entities import Column, Row, Table
from csvdb.domain.exceptions import (
    DatabaseExistsError,
    EmptySchemaError,
    InvalidVersionError,
    ParseError,
    StorageError,
    TableExistsError,
    UnknownTableError,
)
from csvdb.domain.value_objects import Query
from csvdb.infrastructure.config import Config, get_config
from csvdb.infrastructure.logging import get_logger
from csvdb.infrastructure.metrics import MetricsRegistry, get_metrics
from csvdb.infrastructure.tracing import trace_span
from csvdb.ports.outbound import CSVStore

logger = get_logger(__name__)

VERSION_FILE = "version.txt"
METADATA_FILE = "metadata.csv"
TABLES_DIR = ".csvdb"
DATA_FILE = "data.csv"
INITIAL_VERSION = 1

# Metadata row fields: table name, column name, column type
METADATA_WIDTH = 3

_VERSION_PATTERN = re.compile(r"^[+-]?\d+$")


def table_dir(root: Path, name: str) -> Path:
    """Directory holding a table's files."""
    return Path(root) / TABLES_DIR / name


def table_file(root: Path, name: str) -> Path:
    """Path of a table's data file."""
    return table_dir(root, name) / DATA_FILE


class Database:
    """An in-memory database loaded from (and partly synced to) a directory.

    Attributes:
        path: Root directory.
        version: Counter bumped by every successful create_table().
        tables: Read-only view of table name to Table.
    """

    def __init__(
        self,
        path: str | Path,
        version: int = INITIAL_VERSION,
        tables: dict[str, Table] | None = None,
        store: CSVStore | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Create a database shell over `path`.

        No files are read or written. Use open() to load an existing
        database or initialize() to lay out a new one.
        """
        self.path = Path(path)
        self.version = version
        self._tables: dict[str, Table] = dict(tables) if tables is not None else {}
        self._store: CSVStore = store or FileCSVStore()
        self._metrics = metrics or get_metrics()
        self._executor = QueryExecutor(self._tables, metrics=self._metrics)

    @property
    def version_path(self) -> Path:
        return self.path / VERSION_FILE

    @property
    def metadata_path(self) -> Path:
        return self.path / METADATA_FILE

    @property
    def tables_path(self) -> Path:
        return self.path / TABLES_DIR

    @property
    def tables(self) -> Mapping[str, Table]:
        return MappingProxyType(self._tables)

    @property
    def table_names(self) -> list[str]:
        return list(self._tables)

    @classmethod
    def open(
        cls,
        path: str | Path,
        store: CSVStore | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> Database:
        """Load an existing database into memory.

        Column types default to "string" and are overridden by any
        metadata row naming the same table and column. Data row widths
        are not checked against the header.

        Args:
            path: Database root directory.
            store: CSV store (default FileCSVStore).
            metrics: Metrics registry (default global).

        Returns:
            The loaded database.

        Raises:
            StorageError: If the root, version.txt, metadata.csv, .csvdb/
                or a table data file is missing or unreadable.
            InvalidVersionError: If version.txt is not an integer.
            ParseError: If a file is not valid text in the configured encoding,
                a metadata row is short or a data file has no header.
        """
        root = Path(path)
        store = store or FileCSVStore()
        metrics = metrics or get_metrics()

        with metrics.track("open"), trace_span("csvdb.open", {"path": str(root)}):
            if not store.exists(root):
                raise StorageError(f"Database path not found: {root}", root)

            version = _parse_version(store.read_text(root / VERSION_FILE), root / VERSION_FILE)
            metadata = _read_metadata(store, root / METADATA_FILE)

            tables: dict[str, Table] = {}
            for name in store.list_dirs(root / TABLES_DIR):
                tables[name] = _load_table(store, root, name, metadata)

        db = cls(root, version=version, tables=tables, store=store, metrics=metrics)
        metrics.tables.set(len(tables))
        logger.info(
            "database_opened",
            path=str(root),
            version=version,
            tables=len(tables),
        )
        return db

    @classmethod
    def initialize(
        cls,
        path: str | Path,
        version: int = INITIAL_VERSION,
        store: CSVStore | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> Database:
        """Lay out an empty database at `path` and open it.

        Creates the root and .csvdb/ directories, an empty metadata.csv
        (kept if already present) and version.txt.

        Raises:
            DatabaseExistsError: If version.txt already exists.
            StorageError: If any file or directory cannot be created.
        """
        root = Path(path)
        store = store or FileCSVStore()

        if store.exists(root / VERSION_FILE):
            raise DatabaseExistsError(root)

        store.make_dirs(root / TABLES_DIR)
        if not store.exists(root / METADATA_FILE):
            store.write_rows(root / METADATA_FILE, [])
        store.write_text(root / VERSION_FILE, f"{version}\n")

        logger.info("database_initialized", path=str(root), version=version)
        return cls.open(root, store=store, metrics=metrics)

    @classmethod
    def from_config(
        cls,
        config: Config | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> Database:
        """Open the database configured under `storage.root_dir`.

        When `storage.create_if_missing` is set and no database exists
        there yet, an empty one is initialized first.
        """
        config = config or get_config()
        store = FileCSVStore(encoding=config.storage.encoding)
        root = config.storage.root_dir

        if config.storage.create_if_missing and not store.exists(root / VERSION_FILE):
            return cls.initialize(root, store=store, metrics=metrics)
        return cls.open(root, store=store, metrics=metrics)

    def get_table(self, name: str) -> Table:
        """Look up a table by name.

        Raises:
            UnknownTableError: If the table is not registered.
        """
        table = self._tables.get(name)
        if table is None:
            raise UnknownTableError(name)
        return table

    def create_table(self, name: str, column_names: Sequence[str]) -> Table:
        """Register a new table in memory and on disk.

        Writes the table's data file with only the header row, resets the
        table's metadata row to empty column/type fields, rewrites
        metadata.csv in full and bumps the version.

        Args:
            name: Table name.
            column_names: Column names, in order. All columns are typed "string".

        Returns:
            The new, empty table.

        Raises:
            TableExistsError: If the name is already registered.
            EmptySchemaError: If no columns are given.
            StorageError: If a file or directory cannot be written.
            ParseError: If metadata.csv is malformed.
        """
        if name in self._tables:
            raise TableExistsError(name)
        if not column_names:
            raise EmptySchemaError(name)

        with self._metrics.track("create_table"), trace_span(
            "csvdb.create_table", {"table": name, "columns": len(column_names)}
        ):
            self._store.make_dirs(table_dir(self.path, name))
            self._store.write_rows(table_file(self.path, name), [list(column_names)])

            table = Table.with_columns(name, column_names)
            self._tables[name] = table
            self._metrics.tables.set(len(self._tables))

            metadata = self._store.read_rows(self.metadata_path)
            entry = next((row for row in metadata if row[0] == name), None)
            if entry is None:
                entry = [name]
                metadata.append(entry)
            entry[1:METADATA_WIDTH] = ["", ""]
            self._store.write_rows(self.metadata_path, metadata)

            self.version += 1
            self._store.write_text(self.version_path, f"{self.version}\n")

        logger.info(
            "table_created",
            table=name,
            columns=len(column_names),
            version=self.version,
        )
        return table

    def execute(self, query: Query) -> list[Row]:
        """Run a select query.

        Raises:
            UnknownTableError: If the table is not registered.
            UnknownColumnError: If a condition or output column is missing.
        """
        return self._executor.execute(query)

    def flush(self, name: str | None = None) -> None:
        """Write in-memory rows back to the data files.

        Each flushed data file is rewritten as the header row followed by
        the table's current rows. Metadata and version are untouched.

        Args:
            name: Table to flush; every table when None.

        Raises:
            UnknownTableError: If `name` is not registered.
            StorageError: If a data file cannot be written.
        """
        tables = [self.get_table(name)] if name is not None else list(self._tables.values())

        with self._metrics.track("flush"), trace_span(
            "csvdb.flush", {"tables": len(tables)}
        ):
            for table in tables:
                self._store.make_dirs(table_dir(self.path, table.name))
                records = [table.column_names, *(row.values for row in table.rows)]
                self._store.write_rows(table_file(self.path, table.name), records)
                logger.debug("table_flushed", table=table.name, rows=len(table.rows))

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __repr__(self) -> str:
        return (
            f"Database(path={str(self.path)!r}, version={self.version}, "
            f"tables={self.table_names})"
        )


def _parse_version(content: str, path: Path) -> int:
    text = content.strip()
    if not _VERSION_PATTERN.match(text):
        raise InvalidVersionError(path, text)
    try:
        return int(text)
    except ValueError as e:
        # int() refuses strings past sys.get_int_max_str_digits()
        raise InvalidVersionError(path, text) from e


def _read_metadata(store: CSVStore, path: Path) -> list[list[str]]:
    rows = store.read_rows(path)
    for line, row in enumerate(rows, start=1):
        if len(row) < METADATA_WIDTH:
            raise ParseError(
                f"Metadata row {line} has {len(row)} field(s), expected {METADATA_WIDTH}",
                path,
            )
    return rows


def _load_table(
    store: CSVStore,
    root: Path,
    name: str,
    metadata: list[list[str]],
) -> Table:
    path = table_file(root, name)
    records = store.read_rows(path)
    if not records:
        raise ParseError(f"Table {name} has no header row", path)

    header, *data = records
    columns = [Column(name=column_name) for column_name in header]

    for table_name, column_name, column_type, *_ in metadata:
        if table_name != name or not column_name:
            continue
        for column in columns:
            if column.name == column_name:
                column.type = column_type
                break

    return Table(name=name, columns=columns, rows=[Row(values=values) for values in data])
