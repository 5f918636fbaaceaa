"""OpenTelemetry tracing helpers.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
codebase can call ``get_tracer()`` without caring whether the SDK is
installed.  When the SDK is *not* configured the API returns no-op
implementations.

Usage::

    from api_keys_server.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("mcp.request") as span:
        span.set_attribute(ATTR_METHOD, "tools/list")

To activate real tracing, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install api-keys-server[otel]``).
Console spans go to stderr, since stdout carries the protocol stream.
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_METHOD = "mcp.method"
ATTR_REQUEST_ID = "mcp.request.id"
ATTR_NOTIFICATION = "mcp.request.notification"
ATTR_TOOL_NAME = "mcp.tool.name"
ATTR_TOOL_IS_ERROR = "mcp.tool.is_error"
ATTR_ERROR_CODE = "jsonrpc.error.code"

_INSTRUMENTATION_NAME = "api_keys_server"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "api-keys-server",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider exporting request spans.

    Console spans are written to stderr; *otlp_endpoint* adds a batched
    OTLP/gRPC exporter.  Raises ``ImportError`` when the ``otel`` extra is
    missing.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import export  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = "opentelemetry-sdk is required for tracing: pip install api-keys-server[otel]"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if export_to_console:
        console = export.ConsoleSpanExporter(out=sys.stderr)
        provider.add_span_processor(export.SimpleSpanProcessor(console))
    if otlp_endpoint:
        provider.add_span_processor(export.BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))

    trace.set_tracer_provider(provider)


def _otlp_exporter(endpoint: str) -> Any:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = "opentelemetry-exporter-otlp is required for OTLP export: pip install api-keys-server[otel]"
        raise ImportError(msg) from exc
    return OTLPSpanExporter(endpoint=endpoint)
