"""
OpenTelemetry tracing.

Spans are batched and exported over OTLP/gRPC. Incoming HTTP requests are
traced by the FastAPI instrumentation, with the request method recorded on
every server span.
"""

from typing import Any, Optional

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace import Span

from core.config import Settings
from core.logging import get_logger


logger = get_logger(__name__)


def request_hook(span: Optional[Span], scope: dict[str, Any]) -> None:
    """Server request hook: tag the span with the HTTP method."""
    if span is None or not span.is_recording():
        return
    method = scope.get("method")
    if method:
        span.set_attribute("http.method", method)


def setup_tracing(settings: Settings) -> Optional[TracerProvider]:
    """
    Create and register the tracer provider.

    Returns None when tracing is disabled.
    """
    if not settings.tracing_enabled:
        logger.info("Tracing disabled")
        return None

    resource = Resource.create(attributes={
        "service.name": settings.otel_service_name,
        "deployment.environment": settings.environment,
    })
    provider = TracerProvider(resource=resource)

    if settings.otel_exporter_otlp_endpoint:
        exporter = OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint)
    else:
        exporter = OTLPSpanExporter()
    provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)

    logger.info(
        "Tracing enabled",
        service_name=settings.otel_service_name,
        endpoint=settings.otel_exporter_otlp_endpoint,
    )
    return provider


def instrument_app(app: FastAPI, provider: Optional[TracerProvider]) -> None:
    """Auto-instrument the FastAPI application to trace incoming requests."""
    if provider is None:
        return
    FastAPIInstrumentor.instrument_app(
        app,
        tracer_provider=provider,
        server_request_hook=request_hook,
    )


def shutdown_tracing(provider: Optional[TracerProvider]) -> None:
    """Flush pending spans and stop the exporter."""
    if provider is None:
        return
    provider.shutdown()
    logger.info("Tracing shut down")


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer for manual instrumentation.

    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("client.create"):
            ...
    """
    return trace.get_tracer(name)
