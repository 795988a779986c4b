from __future__ import annotations

import os

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    MetricExporter,
    PeriodicExportingMetricReader,
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter

_initialized_services: set[str] = set()

# Values accepted by OTEL_TRACES_EXPORTER / OTEL_METRICS_EXPORTER.
EXPORTER_OTLP = "otlp"
EXPORTER_CONSOLE = "console"
EXPORTER_NONE = "none"


def _build_resource(service_name: str, gateway_environment: str) -> Resource:
    return Resource.create(
        {
            "service.name": service_name,
            "deployment.environment": os.getenv("APP_ENV", "local"),
            "fib.gateway.environment": gateway_environment,
        }
    )


def _exporter_kind(variable: str) -> str:
    return os.getenv(variable, EXPORTER_CONSOLE).strip().lower()


def _span_exporter() -> SpanExporter | None:
    kind = _exporter_kind("OTEL_TRACES_EXPORTER")
    if kind == EXPORTER_NONE:
        return None
    if kind == EXPORTER_OTLP:
        return OTLPSpanExporter()
    return ConsoleSpanExporter()


def _metric_exporter() -> MetricExporter | None:
    kind = _exporter_kind("OTEL_METRICS_EXPORTER")
    if kind == EXPORTER_NONE:
        return None
    if kind == EXPORTER_OTLP:
        return OTLPMetricExporter()
    return ConsoleMetricExporter()


def configure_otel(service_name: str, gateway_environment: str = "stage") -> None:
    """Install tracer and meter providers once per service name.

    Providers are always installed so spans carry valid trace ids for the
    error bodies and logs; exporters set to ``none`` only skip shipping them.
    """
    if service_name in _initialized_services:
        return

    resource = _build_resource(service_name, gateway_environment)

    tracer_provider = TracerProvider(resource=resource)
    span_exporter = _span_exporter()
    if span_exporter is not None:
        tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))
    trace.set_tracer_provider(tracer_provider)

    metric_exporter = _metric_exporter()
    metric_readers = (
        [PeriodicExportingMetricReader(metric_exporter)] if metric_exporter is not None else []
    )
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=metric_readers))

    _initialized_services.add(service_name)
