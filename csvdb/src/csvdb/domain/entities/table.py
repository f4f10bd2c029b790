"""Table entity and its in-memory record operations.

A table owns an ordered list of columns and an ordered list of rows.
Row order is insertion order and is preserved by every operation.

None of the operations here touch disk. Persisting a table's rows is an
explicit, separate step (see Database.flush).

Matching semantics:
    - Conditions map a column name to a required value.
    - A row matches when every condition value equals the row's value at
      that column exactly. Conditions are AND-ed.
    - Empty or missing conditions match every row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from csvdb.domain.entities.schema import DEFAULT_COLUMN_TYPE, Column, Row
from csvdb.domain.exceptions import (
    ArityMismatchError,
    SchemaMismatchError,
    UnknownColumnError,
)


@dataclass
class Table:
    """A named table of string rows.

    Attributes:
        name: Table name, unique within a database.
        columns: Ordered column definitions.
        rows: Rows in insertion order.
    """

    name: str
    columns: list[Column] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)

    @classmethod
    def with_columns(
        cls,
        name: str,
        column_names: Sequence[str],
        column_type: str = DEFAULT_COLUMN_TYPE,
    ) -> Table:
        """Create an empty table whose columns all share one type label."""
        return cls(
            name=name,
            columns=[Column(name=n, type=column_type) for n in column_names],
        )

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def column_index(self, name: str) -> int:
        """Resolve a column name to its position.

        Raises:
            UnknownColumnError: If no column has this name.
        """
        for i, column in enumerate(self.columns):
            if column.name == name:
                return i
        raise UnknownColumnError(name, self.name)

    def has_column(self, name: str) -> bool:
        return any(c.name == name for c in self.columns)

    def insert(self, values: Sequence[str]) -> None:
        """Append a row.

        Raises:
            SchemaMismatchError: If the value count differs from the column count.
        """
        if len(values) != len(self.columns):
            raise SchemaMismatchError(len(self.columns), len(values))
        self.rows.append(Row(values=list(values)))

    def select(
        self,
        columns: Sequence[str],
        conditions: Mapping[str, str] | None = None,
    ) -> list[Row]:
        """Return projected copies of all matching rows.

        Args:
            columns: Output columns, in output order.
            conditions: Exact-match filters, AND-ed together.

        Returns:
            New Row objects holding only the requested columns, in table order.

        Raises:
            UnknownColumnError: If a requested or condition column is missing.
        """
        indices = [self.column_index(c) for c in columns]
        matched = self._matching_indices(conditions)
        return [
            Row(values=[self.rows[i].values[j] for j in indices])
            for i in matched
        ]

    def update(
        self,
        columns: Sequence[str],
        values: Sequence[str],
        conditions: Mapping[str, str] | None = None,
    ) -> int:
        """Overwrite the given columns on every matching row.

        Returns:
            Number of rows updated.

        Raises:
            ArityMismatchError: If columns and values differ in length.
            UnknownColumnError: If a target or condition column is missing.
        """
        if len(columns) != len(values):
            raise ArityMismatchError(len(columns), len(values))

        indices = [self.column_index(c) for c in columns]
        matched = self._matching_indices(conditions)
        for i in matched:
            row = self.rows[i]
            for index, value in zip(indices, values):
                row.values[index] = value
        return len(matched)

    def delete(self, conditions: Mapping[str, str] | None = None) -> int:
        """Remove every matching row, keeping the survivors in order.

        Empty conditions remove every row.

        Returns:
            Number of rows removed.

        Raises:
            UnknownColumnError: If a condition column is missing.
        """
        matched = self._matching_indices(conditions)
        # Descending so earlier indices stay valid.
        for i in reversed(matched):
            del self.rows[i]
        return len(matched)

    def upsert(self, values: Sequence[str]) -> bool:
        """Insert values unless a fully equal row already exists.

        Matching is full-row equality, not key equality, so an existing
        match is overwritten with identical values. No width check is made
        when appending.

        Returns:
            True if a new row was appended.
        """
        for row in self.rows:
            if row.matches(values):
                row.values[:] = values
                return False
        self.rows.append(Row(values=list(values)))
        return True

    def _matching_indices(self, conditions: Mapping[str, str] | None) -> list[int]:
        """Resolve condition columns and return the positions of matching rows."""
        resolved = [
            (self.column_index(column), value)
            for column, value in (conditions or {}).items()
        ]
        return [
            i
            for i, row in enumerate(self.rows)
            if all(row.values[index] == value for index, value in resolved)
        ]
