"""Query description and pagination bounds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from csvdb.domain.exceptions import UnsupportedQueryError


class QueryType(str, Enum):
    """Kinds of query the executor understands."""

    SELECT = "select"


@dataclass
class Query:
    """A projection over one table with exact-match filters and paging.

    Attributes:
        table: Target table name.
        columns: Output columns, in output order.
        conditions: Column name to required value, AND-ed together.
        limit: Maximum rows to return; 0 means no limit.
        offset: Rows to skip; applied only when smaller than the limit.
        type: Query kind.
    """

    table: str
    columns: list[str] = field(default_factory=list)
    conditions: dict[str, str] = field(default_factory=dict)
    limit: int = 0
    offset: int = 0
    type: QueryType = QueryType.SELECT

    def __post_init__(self) -> None:
        """Normalize the query type.

        Raises:
            UnsupportedQueryError: If the type is not a known QueryType.
        """
        if not isinstance(self.type, QueryType):
            try:
                self.type = QueryType(str(self.type).lower())
            except ValueError as e:
                raise UnsupportedQueryError(f"unsupported query type: {self.type}") from e

    @property
    def paginated(self) -> bool:
        return self.limit > 0 or self.offset > 0

    def page_bounds(self, total: int) -> tuple[int, int]:
        """Return the (start, end) slice for a result of `total` rows.

        The end is `limit` when 0 < limit < total, else `total`. The offset is
        used only when 0 < offset < end; otherwise paging starts at 0.
        """
        end = total
        if 0 < self.limit < end:
            end = self.limit
        start = self.offset if 0 < self.offset < end else 0
        return start, end
