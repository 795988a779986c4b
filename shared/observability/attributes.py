from __future__ import annotations

OPERATION = "fib.operation"
PAYMENT_ID = "fib.payment_id"
UPSTREAM_STATUS = "fib.upstream.status_code"
UPSTREAM_TRACE_ID = "fib.upstream.trace_id"
OUTCOME = "fib.outcome"
