from shared.observability.attributes import (
    OPERATION,
    OUTCOME,
    PAYMENT_ID,
    UPSTREAM_STATUS,
    UPSTREAM_TRACE_ID,
)
from shared.observability.otel import configure_otel
from shared.observability.propagation import current_trace_id, inject_headers

__all__ = [
    "OPERATION",
    "OUTCOME",
    "PAYMENT_ID",
    "UPSTREAM_STATUS",
    "UPSTREAM_TRACE_ID",
    "configure_otel",
    "current_trace_id",
    "inject_headers",
]
