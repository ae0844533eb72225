"""
telemetry.py

PURPOSE: OpenTelemetry initialization and shutdown.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk, opentelemetry-exporter-otlp (optional)

ARCHITECTURE NOTES:
Modules take their tracer with opentelemetry.trace.get_tracer(__name__) at
import time. Until init_telemetry() installs an SDK provider those tracers
produce non-recording spans, so tracing costs nothing when disabled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

if TYPE_CHECKING:
    from adventure.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def init_telemetry(settings: OpenTelemetrySettings) -> None:
    """
    Initialize OpenTelemetry tracing.

    Should be called once at application startup.

    Args:
        settings: OpenTelemetry configuration settings.
    """
    global _tracer_provider

    if _tracer_provider is not None:
        logger.debug("Telemetry already initialized")
        return

    if not settings.enabled:
        logger.debug("Telemetry disabled")
        return

    provider = TracerProvider(resource=Resource.create({"service.name": settings.service_name}))
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    if settings.endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError:
            logger.warning(
                "OTLP exporter not installed, using console only. "
                "Install with: pip install adventure[otlp]"
            )
        else:
            otlp_exporter = OTLPSpanExporter(endpoint=settings.endpoint)
            provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
            logger.info(f"OTLP exporter configured: {settings.endpoint}")

    trace.set_tracer_provider(provider)
    _tracer_provider = provider
    logger.info(f"Telemetry initialized: service={settings.service_name}")


def shutdown_telemetry() -> None:
    """
    Shutdown the tracer provider, flushing any pending spans.

    Safe to call even if telemetry was never initialized.
    """
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        logger.debug("Telemetry shutdown complete")
    _tracer_provider = None
