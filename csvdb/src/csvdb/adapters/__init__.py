"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations:
- Outbound adapters: Implement external dependencies (files, directories)
"""

from csvdb.adapters.outbound import FileCSVStore

__all__ = [
    # Outbound adapters
    "FileCSVStore",
]
