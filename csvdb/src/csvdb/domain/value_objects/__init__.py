"""Value objects for the record engine.

Exports:
    Query:
        - Query: Projection, exact-match filters and paging over one table
        - QueryType: Supported query kinds
"""

from csvdb.domain.value_objects.query import Query, QueryType

__all__ = [
    "Query",
    "QueryType",
]
