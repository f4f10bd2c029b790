"""Prometheus metrics for csvdb."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all csvdb metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Lifecycle and query metrics
        self.operations_total = Counter(
            "csvdb_operations_total",
            "Total number of database operations",
            ["operation", "status"],  # operation: open, create_table, execute, flush
            registry=self._registry,
        )

        self.operation_latency_seconds = Histogram(
            "csvdb_operation_latency_seconds",
            "Operation latency in seconds",
            ["operation"],
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
            registry=self._registry,
        )

        self.rows_returned_total = Counter(
            "csvdb_rows_returned_total",
            "Total rows returned by executed queries",
            registry=self._registry,
        )

        # Catalog metrics
        self.tables = Gauge(
            "csvdb_tables",
            "Number of tables registered in the open database",
            registry=self._registry,
        )

        self.info = Info(
            "csvdb",
            "csvdb information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    @contextmanager
    def track(self, operation: str) -> Iterator[None]:
        """Count and time an operation, labelling it success or error.

        Args:
            operation: Operation label (open, create_table, execute, flush)
        """
        start = time.perf_counter()
        status = "error"
        try:
            yield
            status = "success"
        finally:
            self.operations_total.labels(operation=operation, status=status).inc()
            self.operation_latency_seconds.labels(operation=operation).observe(
                time.perf_counter() - start
            )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from csvdb import __version__
    _metrics.info.info({
        "version": __version__,
    })

    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
