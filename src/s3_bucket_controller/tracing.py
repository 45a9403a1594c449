"""OpenTelemetry spans around bucket lifecycle operations.

Tracing is off unless ``OTEL_TRACES_ENABLED=true``. Spans are exported over
OTLP/gRPC to ``OTEL_EXPORTER_OTLP_ENDPOINT`` (default http://localhost:4317)
under ``OTEL_SERVICE_NAME`` (default s3-bucket-controller).
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Span, Tracer

from . import __version__

logger = logging.getLogger(__name__)

_tracer: Tracer | None = None


def initialize_tracing(service_name: str = "s3-bucket-controller") -> None:
    global _tracer

    if os.getenv("OTEL_TRACES_ENABLED", "false").lower() != "true":
        logger.debug("Tracing disabled")
        return

    service_name = os.getenv("OTEL_SERVICE_NAME", service_name)
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")

    provider = TracerProvider(
        resource=Resource.create({"service.name": service_name, "service.version": __version__})
    )
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
    trace.set_tracer_provider(provider)

    _tracer = trace.get_tracer(service_name)
    logger.info(f"Tracing enabled, exporting to {endpoint}")


def get_tracer() -> Tracer | None:
    return _tracer


@contextmanager
def trace_span(
    name: str,
    kind: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Iterator[Span | None]:
    """Run the block inside a span, or yield None while tracing is off.

    ``kind`` is recorded as the ``resource.kind`` attribute. An exception
    leaving the block is recorded on the span and re-raised.
    """
    tracer = get_tracer()
    if tracer is None:
        yield None
        return

    span_attributes = {**(attributes or {}), **({"resource.kind": kind} if kind else {})}
    with tracer.start_as_current_span(name, attributes=span_attributes) as span:
        yield span
