from shared.logging.fields import (
    ENVIRONMENT,
    ERROR_CODE,
    ERRORS,
    OPERATION,
    PAYMENT_ID,
    REQUEST_ID,
    TRACE_ID,
    UPSTREAM_STATUS,
    UPSTREAM_TRACE_ID,
    UPSTREAM_URL,
)
from shared.logging.logger import (
    clear_correlation_context,
    configure_logging,
    get_correlation_context,
    get_logger,
    set_correlation_context,
    update_correlation_context,
)
from shared.logging.middleware import CorrelationMiddleware

__all__ = [
    "CorrelationMiddleware",
    "ENVIRONMENT",
    "ERRORS",
    "ERROR_CODE",
    "OPERATION",
    "PAYMENT_ID",
    "REQUEST_ID",
    "TRACE_ID",
    "UPSTREAM_STATUS",
    "UPSTREAM_TRACE_ID",
    "UPSTREAM_URL",
    "clear_correlation_context",
    "configure_logging",
    "get_correlation_context",
    "get_logger",
    "set_correlation_context",
    "update_correlation_context",
]
