"""Application layer for csvdb.

The application layer orchestrates domain logic to fulfill use cases.

Exports:
    Database:
        - Database: Loads, lays out and queries a CSV database
    Executor:
        - QueryExecutor: Validates, filters, projects and pages select queries
"""

from csvdb.application.database import Database
from csvdb.application.query_executor import QueryExecutor

__all__ = [
    "Database",
    "QueryExecutor",
]
