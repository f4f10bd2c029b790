"""Domain entities for the record engine.

Exports:
    Schema:
        - Column: Named column with a free-form type label
        - Row: Ordered string values with full-row equality
        - DEFAULT_COLUMN_TYPE: Type label given to columns without metadata

    Table:
        - Table: Named table with in-memory insert/select/update/delete/upsert
"""

from csvdb.domain.entities.schema import DEFAULT_COLUMN_TYPE, Column, Row
from csvdb.domain.entities.table import Table

__all__ = [
    "Column",
    "Row",
    "Table",
    "DEFAULT_COLUMN_TYPE",
]
