"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for external systems that the
record engine depends on, such as CSV file and directory I/O.
"""

from csvdb.ports.outbound.csv_store import CSVStore

__all__ = [
    "CSVStore",
]
