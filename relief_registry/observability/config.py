"""
OpenTelemetry Configuration

Sets up tracing and logging for the relief registries. Registry operations
always open spans through the OpenTelemetry API; they are exported only once
a tracer provider has been installed here.
"""

import logging
from typing import Optional
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter
)
from opentelemetry.sdk.resources import Resource

from ..config import Settings, get_settings


def setup_observability(
    settings: Optional[Settings] = None,
    exporter: Optional[SpanExporter] = None
) -> Optional[TracerProvider]:
    """
    Initialize tracing and logging from settings.

    Args:
        settings: Settings to use; read from the environment when omitted
        exporter: Span exporter overriding the environment default

    Returns:
        The configured TracerProvider, or None when tracing is disabled
    """
    settings = settings or get_settings()
    setup_logging(settings)

    if not settings.otel_enabled:
        return None

    # Environment-specific sampling
    if settings.environment == 'production':
        sampler = TraceIdRatioBased(0.1)
    elif settings.environment == 'staging':
        sampler = TraceIdRatioBased(0.5)
    else:
        sampler = TraceIdRatioBased(1.0)

    resource = Resource.create({
        "service.name": settings.service_name,
        "service.version": settings.service_version,
        "deployment.environment": settings.environment
    })

    tracer_provider = TracerProvider(sampler=sampler, resource=resource)

    if exporter is not None:
        tracer_provider.add_span_processor(SimpleSpanProcessor(exporter))
    else:
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(tracer_provider)
    return tracer_provider


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the environment."""
    log_level = settings.effective_log_level

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)
    logging.getLogger('relief_registry').setLevel(log_level)
