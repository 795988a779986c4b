from __future__ import annotations

from opentelemetry import metrics

meter = metrics.get_meter("fib-proxy")
request_counter = meter.create_counter("fib_proxy_request_total", description="Total requests")
error_counter = meter.create_counter("fib_proxy_error_total", description="Total error responses")
latency_histogram = meter.create_histogram(
    "fib_proxy_request_latency_ms", description="Request latency in ms"
)

token_request_duration = meter.create_histogram(
    "fib_token_request_duration_ms", description="Token endpoint latency in ms"
)
token_failures_total = meter.create_counter(
    "fib_token_failures_total", description="Failed token acquisitions"
)

upstream_latency = meter.create_histogram(
    "fib_upstream_latency_ms", description="Payment gateway call latency in ms"
)
upstream_failures_total = meter.create_counter(
    "fib_upstream_failures_total", description="Normalized gateway failures by operation"
)
upstream_transport_errors_total = meter.create_counter(
    "fib_upstream_transport_errors_total", description="Gateway calls that never got a response"
)
status_callbacks_total = meter.create_counter(
    "fib_status_callbacks_total", description="Payment status callbacks received"
)
