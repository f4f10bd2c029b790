"""Domain layer: table model, query description and error taxonomy."""

from csvdb.domain.entities import DEFAULT_COLUMN_TYPE, Column, Row, Table
from csvdb.domain.exceptions import (
    ArityMismatchError,
    CsvDbError,
    DatabaseExistsError,
    EmptySchemaError,
    InvalidVersionError,
    ParseError,
    SchemaMismatchError,
    StorageError,
    TableExistsError,
    UnknownColumnError,
    UnknownTableError,
    UnsupportedQueryError,
)
from csvdb.domain.value_objects import Query, QueryType

__all__ = [
    "Column",
    "Row",
    "Table",
    "DEFAULT_COLUMN_TYPE",
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
