"""OpenTelemetry tracing for csvdb operations.

Database.open, create_table, flush and query execution each run inside a
"csvdb.<operation>" span. Until setup_tracing() is called the spans go to
the global no-op provider.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from csvdb.infrastructure.config import get_config

INSTRUMENTATION_NAME = "csvdb"

_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str | None = None,
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Install an SDK tracer provider and make csvdb spans use it.

    Args:
        service_name: Reported service name (default from config)
        otlp_endpoint: OTLP collector endpoint (default from config; no
            OTLP export when neither is set)
        console_export: Also print finished spans to stdout

    Returns:
        The tracer csvdb spans are created from
    """
    global _tracer

    from csvdb import __version__

    settings = get_config().observability
    service_name = service_name or settings.otel_service_name
    otlp_endpoint = otlp_endpoint or settings.otel_endpoint

    provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": service_name,
                "service.version": __version__,
            }
        )
    )

    if otlp_endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
        )

    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    _tracer = provider.get_tracer(INSTRUMENTATION_NAME, __version__)
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the tracer csvdb spans are created from."""
    global _tracer
    if _tracer is None:
        from csvdb import __version__

        _tracer = trace.get_tracer(INSTRUMENTATION_NAME, __version__)
    return _tracer


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Run the body inside a span.

    Attributes whose value is None are left off the span. An exception
    escaping the body marks the span as failed, records the exception
    class under "error.type" and propagates.

    Args:
        name: Span name, e.g. "csvdb.flush"
        attributes: Span attributes

    Yields:
        The active span
    """
    recorded = {k: v for k, v in (attributes or {}).items() if v is not None}
    with get_tracer().start_as_current_span(name, attributes=recorded) as span:
        try:
            yield span
        except Exception as e:
            span.set_attribute("error.type", type(e).__name__)
            raise
