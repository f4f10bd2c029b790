"""Column and row model.

Values are stored and compared as text. Column types are metadata labels
only and are never used to coerce or validate values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

DEFAULT_COLUMN_TYPE = "string"


@dataclass
class Column:
    """A named column with a free-form type label."""

    name: str
    type: str = DEFAULT_COLUMN_TYPE


@dataclass
class Row:
    """An ordered sequence of string values.

    The value at index i belongs to the column at index i of the owning
    table. Rows keep no reference to their table.
    """

    values: list[str] = field(default_factory=list)

    def matches(self, other: Row | Sequence[str]) -> bool:
        """Full-row equality: same length and identical values at every position."""
        other_values = other.values if isinstance(other, Row) else other
        if len(self.values) != len(other_values):
            return False
        return all(a == b for a, b in zip(self.values, other_values))
