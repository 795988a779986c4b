from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shared.logging.fields import REQUEST_ID, TRACE_ID
from shared.logging.logger import clear_correlation_context, set_correlation_context
from shared.observability.propagation import current_trace_id
from shared.utils.ids import new_request_id

REQUEST_ID_HEADER = "X-Request-Id"


class CorrelationMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = current_trace_id() or ""
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        set_correlation_context({TRACE_ID: trace_id, REQUEST_ID: request_id})
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_correlation_context()
