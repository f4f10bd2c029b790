"""
csvdb - Embeddable CSV Record Store

Persists each table as a directory holding a CSV data file, with a
metadata.csv sidecar for column types and a version.txt counter.
Tables are loaded into memory, queried and mutated there, and written
back explicitly.
"""

__version__ = "0.1.0"

from csvdb.application import Database, QueryExecutor
from csvdb.domain import (
    ArityMismatchError,
    Column,
    CsvDbError,
    DatabaseExistsError,
    EmptySchemaError,
    InvalidVersionError,
    ParseError,
    Query,
    QueryType,
    Row,
    SchemaMismatchError,
    StorageError,
    Table,
    TableExistsError,
    UnknownColumnError,
    UnknownTableError,
    UnsupportedQueryError,
)

__all__ = [
    "__version__",
    "Database",
    "QueryExecutor",
    "Column",
    "Row",
    "Table",
    "Query",
    "QueryType",
    "CsvDbError",
    "UnknownTableError",
    "TableExistsError",
    "DatabaseExistsError",
    "UnknownColumnError",
    "SchemaMismatchError",
    "EmptySchemaError",
    "ArityMismatchError",
    "UnsupportedQueryError",
    "InvalidVersionError",
    "StorageError",
    "ParseError",
]
