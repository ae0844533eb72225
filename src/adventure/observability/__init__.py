"""
observability/__init__.py

PURPOSE: OpenTelemetry observability module for tracing.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk

ARCHITECTURE NOTES:
Tracing is opt-in (ADVENTURE_OTEL_ENABLED):
- Console output by default when enabled
- OTLP export when an endpoint is configured and the exporter is installed
"""

from adventure.observability.telemetry import init_telemetry, shutdown_telemetry

__all__ = ["init_telemetry", "shutdown_telemetry"]
