from __future__ import annotations

TRACE_ID = "trace_id"
REQUEST_ID = "request_id"
OPERATION = "operation"
PAYMENT_ID = "payment_id"
UPSTREAM_URL = "url"
UPSTREAM_STATUS = "upstream_status"
UPSTREAM_TRACE_ID = "upstream_trace_id"
ERROR_CODE = "error_code"
ERRORS = "errors"
ENVIRONMENT = "environment"
