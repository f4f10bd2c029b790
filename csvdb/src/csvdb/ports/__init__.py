"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Outbound ports: Dependencies on external systems (e.g., CSVStore)

Adapters implement these ports with concrete functionality.
"""

from csvdb.ports.outbound import CSVStore

__all__ = [
    # Outbound ports
    "CSVStore",
]
