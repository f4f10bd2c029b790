"""Query executor for select queries over in-memory tables.

Execution pipeline:
    1. Resolve the target table by name
    2. Validate every condition column against the table schema
    3. Delegate filtering and projection to Table.select
    4. Apply limit/offset paging

Condition columns are validated here and again inside Table.select, so an
unknown condition column is reported at the database boundary.
"""

from __future__ import annotations

from typing import Mapping

from csvdb.domain.entities import Row, Table
from csvdb.domain.exceptions import UnknownColumnError, UnknownTableError
from csvdb.domain.value_objects import Query
from csvdb.infrastructure.logging import get_logger
from csvdb.infrastructure.metrics import MetricsRegistry, get_metrics
from csvdb.infrastructure.tracing import trace_span

logger = get_logger(__name__)


class QueryExecutor:
    """Executes queries against a table catalog.

    The executor holds a reference to the catalog mapping, not a copy, so
    tables registered after construction are visible to later queries.
    """

    def __init__(
        self,
        tables: Mapping[str, Table],
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self._tables = tables
        self._metrics = metrics or get_metrics()

    def execute(self, query: Query) -> list[Row]:
        """Execute a query.

        Args:
            query: The query to execute.

        Returns:
            Projected rows in table order, paged. Empty when nothing matches.

        Raises:
            UnknownTableError: If the table is not registered.
            UnknownColumnError: If a condition or output column is missing.
        """
        with self._metrics.track("execute"), trace_span(
            "csvdb.execute", {"table": query.table, "type": query.type.value}
        ):
            rows = self._run(query)

        self._metrics.rows_returned_total.inc(len(rows))
        logger.debug(
            "query_executed",
            table=query.table,
            conditions=len(query.conditions),
            rows=len(rows),
        )
        return rows

    def _run(self, query: Query) -> list[Row]:
        table = self._tables.get(query.table)
        if table is None:
            raise UnknownTableError(query.table)

        for column in query.conditions:
            if not table.has_column(column):
                raise UnknownColumnError(column, table.name)

        rows = table.select(query.columns, query.conditions)

        if query.paginated:
            start, end = query.page_bounds(len(rows))
            rows = rows[start:end]
        return rows
