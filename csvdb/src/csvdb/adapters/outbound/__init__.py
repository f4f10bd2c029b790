"""Outbound adapters - implementations of outbound ports.

These adapters implement external dependencies such as CSV file
and directory I/O.
"""

from csvdb.adapters.outbound.file_csv_store import FileCSVStore

__all__ = [
    "FileCSVStore",
]
